"""
predsets/sets.py
════════════════

Sets of integers represented as predicates.

A ``Set`` is any function ``int -> bool`` answering "is this integer a
member?".  Sets have no enumerable state; every combinator below returns a
new closure over its inputs and never materialises members.

    ┌──────────────────────────────────────────────────────────────┐
    │  constructors    singleton_set, set_of, closed_range,        │
    │                  empty_set, universe                         │
    │  combinators     union, intersect, diff, complement,         │
    │                  filter_set                                  │
    │  bounded ops     for_all, exists, map_set     (scan [1, B])  │
    └──────────────────────────────────────────────────────────────┘

Laws (checked in tests/test_sets.py):

    union(A, B)(i)      = A(i) or B(i)
    intersect(A, B)(i)  = A(i) and B(i)
    diff(A, B)(i)       = A(i) and not B(i)
    filter_set(A, P)(i) = A(i) and P(i)
    exists(A, P)        = not for_all(A, not P)
    map_set(A, f)(j)    = ∃ i ∈ [1, B]:  A(i) and f(i) == j

Bounded operations read their ``Bound`` once on entry and scan with a
plain loop, so any limit is safe for the call stack.
"""

from __future__ import annotations

import logging
from typing import Callable, Union

from predsets.bounds import Bound, resolve_bound

_log = logging.getLogger(__name__)

Set = Callable[[int], bool]
Predicate = Callable[[int], bool]
Transform = Callable[[int], int]
BoundLike = Union[Bound, int, None]


# ═══════════════════════════════════════════════════════════════════════════
#  CONSTRUCTORS
# ═══════════════════════════════════════════════════════════════════════════

def singleton_set(element: int) -> Set:
    """The set whose only member is *element*."""
    return lambda i: i == element


def set_of(*elements: int) -> Set:
    """The set whose members are exactly *elements*."""
    members = frozenset(elements)
    return lambda i: i in members


def closed_range(low: int, high: int) -> Set:
    """The set ``{i | low <= i <= high}``; empty when low > high."""
    return lambda i: low <= i <= high


def empty_set() -> Set:
    return lambda i: False


def universe() -> Set:
    return lambda i: True


# ═══════════════════════════════════════════════════════════════════════════
#  COMBINATORS
# ═══════════════════════════════════════════════════════════════════════════

def union(set_a: Set, set_b: Set) -> Set:
    """Elements in either *set_a* or *set_b*."""
    return lambda i: set_a(i) or set_b(i)


def intersect(set_a: Set, set_b: Set) -> Set:
    """Elements in both *set_a* and *set_b*."""
    return lambda i: set_a(i) and set_b(i)


def diff(set_a: Set, set_b: Set) -> Set:
    """Elements of *set_a* that are not in *set_b*.

    This is the asymmetric difference A \\ B, not the complement of
    A ∪ B.
    """
    return lambda i: set_a(i) and not set_b(i)


def complement(s: Set) -> Set:
    """Every integer that is not a member of *s*."""
    return lambda i: not s(i)


def filter_set(s: Set, predicate: Predicate) -> Set:
    """The subset of *s* for which *predicate* holds."""
    return lambda i: s(i) and predicate(i)


# ═══════════════════════════════════════════════════════════════════════════
#  BOUNDED OPERATIONS
# ═══════════════════════════════════════════════════════════════════════════

def for_all(s: Set, predicate: Predicate, *, bound: BoundLike = None) -> bool:
    """Does every member of *s* in ``[1, bound]`` satisfy *predicate*?

    Stops at the first counterexample.  Vacuously true when *s* has no
    members in range.
    """
    scan = resolve_bound(bound)
    for i in scan.domain():
        if s(i) and not predicate(i):
            _log.debug("for_all: counterexample %d within %r", i, scan)
            return False
    return True


def exists(s: Set, predicate: Predicate, *, bound: BoundLike = None) -> bool:
    """Is there a member of *s* in ``[1, bound]`` satisfying *predicate*?"""
    scan = resolve_bound(bound)
    return not for_all(s, lambda i: not predicate(i), bound=scan)


def map_set(s: Set, transform: Transform, *, bound: BoundLike = None) -> Set:
    """The image of *s* under *transform*.

    Only members in ``[1, bound]`` are mapped, but the image itself is not
    bounded: ``map_set(set_of(600), lambda x: x * 2)(1200)`` is true.
    The bound is fixed when ``map_set`` is called.
    """
    scan = resolve_bound(bound)

    def image(j: int) -> bool:
        return exists(s, lambda i: transform(i) == j, bound=scan)

    return image


def agree(set_a: Set, set_b: Set, *, bound: BoundLike = None) -> bool:
    """Do *set_a* and *set_b* have the same members within ``[1, bound]``?"""
    scan = resolve_bound(bound)
    return for_all(universe(), lambda i: set_a(i) == set_b(i), bound=scan)
