"""
predsets/predicate_set.py
═════════════════════════

Object wrapper around a predicate set.

``PredicateSet`` is the single-method interface view of a ``Set``: it
holds the membership function and exposes it as ``contains(i)``, ``in``
and ``__call__``, so a ``PredicateSet`` can be passed anywhere a plain
``Set`` is expected.  Python's set operators are mapped onto the
combinators in ``predsets.sets``::

    A | B   →  union          A & B  →  intersect
    A - B   →  diff           ~A     →  complement

There is deliberately no ``__iter__`` or ``__len__``: a predicate set is
a decision procedure, not a container.

    >>> evens = PredicateSet.closed_range(1, 10).filter(lambda x: x % 2 == 0)
    >>> 4 in evens, 5 in evens
    (True, False)
    >>> evens.for_all(lambda x: x <= 10)
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from predsets import sets
from predsets.sets import BoundLike, Predicate, Set, Transform


@dataclass(frozen=True, eq=False)
class PredicateSet:
    """
    Immutable, callable wrapper around a membership predicate.

    Equality is identity: two predicate sets can only be compared
    behaviourally, over a bound (see ``agrees_with``).
    """
    predicate: Set
    label: str = ""

    # ---- Constructors ----------------------------------------------------

    @classmethod
    def wrap(cls, s: Any, label: str = "") -> PredicateSet:
        if isinstance(s, PredicateSet):
            return s
        if not callable(s):
            raise TypeError(
                f"expected a membership function, got {type(s).__name__}"
            )
        return cls(s, label)

    @classmethod
    def singleton(cls, element: int) -> PredicateSet:
        return cls(sets.singleton_set(element), f"{{{element}}}")

    @classmethod
    def of(cls, *elements: int) -> PredicateSet:
        shown = ", ".join(str(e) for e in sorted(set(elements)))
        return cls(sets.set_of(*elements), f"{{{shown}}}")

    @classmethod
    def closed_range(cls, low: int, high: int) -> PredicateSet:
        return cls(sets.closed_range(low, high), f"[{low}..{high}]")

    @classmethod
    def empty(cls) -> PredicateSet:
        return cls(sets.empty_set(), "{}")

    @classmethod
    def universe(cls) -> PredicateSet:
        return cls(sets.universe(), "ℤ")

    # ---- Membership ------------------------------------------------------

    def contains(self, i: int) -> bool:
        return bool(self.predicate(i))

    def __contains__(self, i: object) -> bool:
        if isinstance(i, bool) or not isinstance(i, int):
            return False
        return self.contains(i)

    def __call__(self, i: int) -> bool:
        return self.contains(i)

    # ---- Combinators -----------------------------------------------------

    def __or__(self, other: Set) -> PredicateSet:
        if not callable(other):
            return NotImplemented
        return PredicateSet(sets.union(self, other),
                            _label("union", self, other))

    def __and__(self, other: Set) -> PredicateSet:
        if not callable(other):
            return NotImplemented
        return PredicateSet(sets.intersect(self, other),
                            _label("intersect", self, other))

    def __sub__(self, other: Set) -> PredicateSet:
        if not callable(other):
            return NotImplemented
        return PredicateSet(sets.diff(self, other),
                            _label("diff", self, other))

    # union and intersection commute
    __ror__ = __or__
    __rand__ = __and__

    def __rsub__(self, other: Set) -> PredicateSet:
        if not callable(other):
            return NotImplemented
        return PredicateSet(sets.diff(other, self),
                            _label("diff", other, self))

    def __invert__(self) -> PredicateSet:
        return PredicateSet(sets.complement(self), _label("complement", self))

    def filter(self, predicate: Predicate) -> PredicateSet:
        return PredicateSet(sets.filter_set(self, predicate),
                            _label("filter", self))

    # ---- Bounded operations ----------------------------------------------

    def map(self, transform: Transform, *,
            bound: BoundLike = None) -> PredicateSet:
        return PredicateSet(sets.map_set(self, transform, bound=bound),
                            _label("map", self))

    def for_all(self, predicate: Predicate, *, bound: BoundLike = None) -> bool:
        return sets.for_all(self, predicate, bound=bound)

    def exists(self, predicate: Predicate, *, bound: BoundLike = None) -> bool:
        return sets.exists(self, predicate, bound=bound)

    def agrees_with(self, other: Set, *, bound: BoundLike = None) -> bool:
        return sets.agree(self, other, bound=bound)

    def __repr__(self) -> str:
        return f"PredicateSet({self.label or '<predicate>'})"


def _label(op: str, *operands: Any) -> str:
    parts = [
        o.label if isinstance(o, PredicateSet) and o.label else "…"
        for o in operands
    ]
    return f"{op}({', '.join(parts)})"
