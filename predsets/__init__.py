"""
predsets: Sets of Integers as Predicates
========================================

A set is a function from an integer to a boolean membership verdict.
This package provides the combinators over such sets and the bounded
quantifiers that search them.

Core modules
------------
sets
    ``Set`` type and the combinators: singleton_set, union, intersect,
    diff, filter_set, for_all, exists, map_set.
bounds
    ``Bound``, the immutable scan limit ``[1, N]`` used by bounded
    operations, and its ``PREDSETS_BOUND`` environment loader.
predicate_set
    ``PredicateSet``, an object wrapper with ``in``, ``|``, ``&``, ``-``.
expr
    A set-builder expression language (parsimonious PEG grammar).
errors
    Exception hierarchy.
main
    The ``predsets`` command-line tool.

Quick start
-----------
>>> from predsets import set_of, for_all, exists, map_set
>>> is_even = lambda x: x % 2 == 0
>>> for_all(set_of(2, 4, 6), is_even)
True
>>> exists(set_of(1, 3, 5), is_even)
False
>>> map_set(set_of(1, 2, 3), lambda x: x * 2)(4)
True
"""

from __future__ import annotations

import logging
from typing import List

# ---------------------------------------------------------------------------
# Package metadata
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
__license__ = "MIT"

_log = logging.getLogger(__name__)
_log.addHandler(logging.NullHandler())

from predsets.bounds import DEFAULT_BOUND, Bound, resolve_bound  # noqa: E402
from predsets.errors import (  # noqa: E402
    BoundError,
    ExpressionError,
    ExpressionEvaluationError,
    ExpressionSyntaxError,
    PredsetsError,
)
from predsets.predicate_set import PredicateSet  # noqa: E402
from predsets.sets import (  # noqa: E402
    Predicate,
    Set,
    Transform,
    agree,
    closed_range,
    complement,
    diff,
    empty_set,
    exists,
    filter_set,
    for_all,
    intersect,
    map_set,
    set_of,
    singleton_set,
    union,
    universe,
)
from predsets.expr import build, evaluate, parse_expression  # noqa: E402

__all__: List[str] = [
    # bounds
    "Bound", "DEFAULT_BOUND", "resolve_bound",
    # sets
    "Set", "Predicate", "Transform",
    "singleton_set", "set_of", "closed_range", "empty_set", "universe",
    "union", "intersect", "diff", "complement", "filter_set",
    "for_all", "exists", "map_set", "agree",
    # objects
    "PredicateSet",
    # expressions
    "build", "evaluate", "parse_expression",
    # errors
    "PredsetsError", "BoundError", "ExpressionError",
    "ExpressionSyntaxError", "ExpressionEvaluationError",
]
