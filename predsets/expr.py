"""
expr.py: set-builder expressions
================================

A small textual language for building predicate sets and asking bounded
questions about them.  Parsing uses a parsimonious PEG grammar; the
``SetExpressionBuilder`` visitor turns the parse tree directly into
``PredicateSet`` objects, predicates and transforms.

Usage::

    from predsets.expr import evaluate

    evaluate("forall({2, 4, 6}, even)")               # True
    evaluate("exists(diff([1..10], {2, 4}), x % 4 == 0)")  # True (8)

    doubled = evaluate("map({1, 2, 3}, x * 2)")
    4 in doubled                                       # True

Syntax summary::

    set       {1, 2, 3}   {}   [1..10]
              union(S, S)  intersect(S, S)  diff(S, S)
              filter(S, P)  map(S, A)
    query     forall(S, P)  exists(S, P)
    P         even | odd | positive | negative | zero
              A <op> A       (== != <= >= < >)
              not P | P and P | P or P | (P)
    A         integers, x, + - * // %, parentheses

Depends on:
    - parsimonious (PEG parser)
"""

from __future__ import annotations

import logging
import operator as op
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Union

from parsimonious.exceptions import (
    IncompleteParseError,
    ParseError,
    VisitationError,
)
from parsimonious.grammar import Grammar
from parsimonious.nodes import Node, NodeVisitor

from predsets.bounds import Bound, resolve_bound
from predsets.errors import (
    ExpressionError,
    ExpressionEvaluationError,
    ExpressionSyntaxError,
    SourcePosition,
)
from predsets.predicate_set import PredicateSet
from predsets.sets import BoundLike, Predicate, Transform

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  PART 1: GRAMMAR (Parsimonious PEG)
# ═══════════════════════════════════════════════════════════════════

SET_GRAMMAR = Grammar(r'''
    # ─────────────────────────────────────────────────────────────
    # Top level
    # ─────────────────────────────────────────────────────────────

    query          = _ statement _
    statement      = quantifier / set_expr

    quantifier     = quant_name _ "(" _ set_expr _ "," _ predicate _ ")"
    quant_name     = "forall" / "exists"

    # ─────────────────────────────────────────────────────────────
    # Sets
    # ─────────────────────────────────────────────────────────────

    set_expr       = set_call / filter_call / map_call / range_lit / set_lit
    set_call       = set_op _ "(" _ set_expr _ "," _ set_expr _ ")"
    set_op         = "union" / "intersect" / "diff"
    filter_call    = "filter" _ "(" _ set_expr _ "," _ predicate _ ")"
    map_call       = "map" _ "(" _ set_expr _ "," _ arith _ ")"
    range_lit      = "[" _ integer _ ".." _ integer _ "]"
    set_lit        = "{" _ int_list? _ "}"
    int_list       = integer int_tail*
    int_tail       = _ "," _ integer

    # ─────────────────────────────────────────────────────────────
    # Predicates over x
    # ─────────────────────────────────────────────────────────────

    predicate      = conjunction or_tail*
    or_tail        = _ ~r"or\b" _ conjunction
    conjunction    = negation and_tail*
    and_tail       = _ ~r"and\b" _ negation
    negation       = not_expr / pred_atom
    not_expr       = ~r"not\b" _ negation
    pred_atom      = comparison / named_pred / paren_pred
    paren_pred     = "(" _ predicate _ ")"
    named_pred     = "even" / "odd" / "positive" / "negative" / "zero"
    comparison     = arith _ cmp_op _ arith
    cmp_op         = "==" / "!=" / "<=" / ">=" / "<" / ">"

    # ─────────────────────────────────────────────────────────────
    # Integer arithmetic over x
    # ─────────────────────────────────────────────────────────────

    arith          = term add_tail*
    add_tail       = _ add_op _ term
    add_op         = "+" / "-"
    term           = factor mul_tail*
    mul_tail       = _ mul_op _ factor
    mul_op         = "*" / "//" / "%"
    factor         = integer / variable / paren_arith
    paren_arith    = "(" _ arith _ ")"
    variable       = "x"

    # ─────────────────────────────────────────────────────────────
    # Lexical
    # ─────────────────────────────────────────────────────────────

    integer        = ~r"-?[0-9]+"
    _              = ~r"\s*"
''')


NAMED_PREDICATES: Dict[str, Predicate] = {
    "even": lambda i: i % 2 == 0,
    "odd": lambda i: i % 2 != 0,
    "positive": lambda i: i > 0,
    "negative": lambda i: i < 0,
    "zero": lambda i: i == 0,
}

COMPARATORS: Dict[str, Callable[[int, int], bool]] = {
    "==": op.eq,
    "!=": op.ne,
    "<=": op.le,
    ">=": op.ge,
    "<": op.lt,
    ">": op.gt,
}

ARITHMETIC: Dict[str, Callable[[int, int], int]] = {
    "+": op.add,
    "-": op.sub,
    "*": op.mul,
    "//": op.floordiv,
    "%": op.mod,
}


# ═══════════════════════════════════════════════════════════════════
#  PART 2: RESULT TYPES
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Quantified:
    """A parsed ``forall``/``exists`` query, not yet run."""
    kind: str
    target: PredicateSet
    predicate: Predicate

    def run(self, bound: Bound) -> bool:
        if self.kind == "forall":
            return self.target.for_all(self.predicate, bound=bound)
        return self.target.exists(self.predicate, bound=bound)


Built = Union[PredicateSet, Quantified]


# ═══════════════════════════════════════════════════════════════════
#  PART 3: TREE → SETS
# ═══════════════════════════════════════════════════════════════════

def _tail(children: Any) -> List[Any]:
    # generic_visit hands back the bare Node for an unmatched ``rule*``
    return children if isinstance(children, list) else []


def _binary(symbol: str, left: Transform, right: Transform) -> Transform:
    apply = ARITHMETIC[symbol]
    return lambda i: apply(left(i), right(i))


class SetExpressionBuilder(NodeVisitor):
    """
    Build predicate sets from a ``SET_GRAMMAR`` parse tree.

    Set-valued rules produce ``PredicateSet``; predicate rules produce
    ``int -> bool`` callables; arithmetic rules produce ``int -> int``
    callables.  Nothing is evaluated while visiting, so a ``map`` is
    bound to ``self.bound`` but not scanned until it is queried.
    """

    grammar = SET_GRAMMAR
    unwrapped_exceptions = (ExpressionError,)

    def __init__(self, bound: BoundLike = None) -> None:
        self.bound = resolve_bound(bound)

    def generic_visit(self, node, visited_children):
        """Default: return children, or the node itself for leaves."""
        return visited_children or node

    # ---- Top level -------------------------------------------------------

    def visit_query(self, node, visited_children):
        _, statement, _ = visited_children
        return statement

    def visit_statement(self, node, visited_children):
        return visited_children[0]

    def visit_quantifier(self, node, visited_children):
        kind, _, _, _, target, _, _, _, predicate, _, _ = visited_children
        return Quantified(kind, target, predicate)

    def visit_quant_name(self, node, visited_children):
        return node.text

    # ---- Sets ------------------------------------------------------------

    def visit_set_expr(self, node, visited_children):
        return visited_children[0]

    def visit_set_call(self, node, visited_children):
        name, _, _, _, left, _, _, _, right, _, _ = visited_children
        if name == "union":
            return left | right
        if name == "intersect":
            return left & right
        return left - right

    def visit_set_op(self, node, visited_children):
        return node.text

    def visit_filter_call(self, node, visited_children):
        _, _, _, _, target, _, _, _, predicate, _, _ = visited_children
        return target.filter(predicate)

    def visit_map_call(self, node, visited_children):
        _, _, _, _, target, _, _, _, transform, _, _ = visited_children
        return target.map(transform, bound=self.bound)

    def visit_range_lit(self, node, visited_children):
        _, _, low, _, _, _, high, _, _ = visited_children
        return PredicateSet.closed_range(low, high)

    def visit_set_lit(self, node, visited_children):
        _, _, maybe_items, _, _ = visited_children
        items = maybe_items[0] if isinstance(maybe_items, list) else []
        return PredicateSet.of(*items)

    def visit_int_list(self, node, visited_children):
        first, rest = visited_children
        return [first, *_tail(rest)]

    def visit_int_tail(self, node, visited_children):
        return visited_children[3]

    # ---- Predicates ------------------------------------------------------

    def visit_predicate(self, node, visited_children):
        first, rest = visited_children
        options = [first, *_tail(rest)]
        if len(options) == 1:
            return first
        return lambda i: any(p(i) for p in options)

    def visit_or_tail(self, node, visited_children):
        return visited_children[3]

    def visit_conjunction(self, node, visited_children):
        first, rest = visited_children
        required = [first, *_tail(rest)]
        if len(required) == 1:
            return first
        return lambda i: all(p(i) for p in required)

    def visit_and_tail(self, node, visited_children):
        return visited_children[3]

    def visit_negation(self, node, visited_children):
        return visited_children[0]

    def visit_not_expr(self, node, visited_children):
        _, _, inner = visited_children
        return lambda i: not inner(i)

    def visit_pred_atom(self, node, visited_children):
        return visited_children[0]

    def visit_paren_pred(self, node, visited_children):
        _, _, inner, _, _ = visited_children
        return inner

    def visit_named_pred(self, node, visited_children):
        return NAMED_PREDICATES[node.text]

    def visit_comparison(self, node, visited_children):
        left, _, symbol, _, right = visited_children
        compare = COMPARATORS[symbol]
        return lambda i: compare(left(i), right(i))

    def visit_cmp_op(self, node, visited_children):
        return node.text

    # ---- Arithmetic ------------------------------------------------------

    def visit_arith(self, node, visited_children):
        result, rest = visited_children
        for symbol, operand in _tail(rest):
            result = _binary(symbol, result, operand)
        return result

    def visit_add_tail(self, node, visited_children):
        _, symbol, _, operand = visited_children
        return symbol, operand

    visit_term = visit_arith
    visit_mul_tail = visit_add_tail

    def visit_add_op(self, node, visited_children):
        return node.text

    visit_mul_op = visit_add_op

    def visit_factor(self, node, visited_children):
        value = visited_children[0]
        if isinstance(value, int):
            return lambda i: value
        return value

    def visit_paren_arith(self, node, visited_children):
        _, _, inner, _, _ = visited_children
        return inner

    def visit_variable(self, node, visited_children):
        return lambda i: i

    def visit_integer(self, node, visited_children):
        try:
            return int(node.text)
        except ValueError as exc:
            # int() refuses literals past sys.get_int_max_str_digits()
            raise ExpressionSyntaxError(
                f"integer literal too long ({len(node.text)} characters)",
                source=node.full_text,
                position=SourcePosition.from_offset(node.full_text, node.start),
                rule="integer",
                hint=str(exc),
            ) from None


# ═══════════════════════════════════════════════════════════════════
#  PART 4: PUBLIC API
# ═══════════════════════════════════════════════════════════════════

def parse_expression(text: str) -> Node:
    """Parse *text* with ``SET_GRAMMAR``; raise ``ExpressionSyntaxError``."""
    try:
        return SET_GRAMMAR.parse(text)
    except IncompleteParseError as exc:
        position = SourcePosition.from_offset(text, exc.pos)
        raise ExpressionSyntaxError(
            f"unexpected input {text[exc.pos:exc.pos + 12]!r}",
            source=text,
            position=position,
            hint="the expression is complete before this point",
        ) from None
    except ParseError as exc:
        position = SourcePosition.from_offset(text, exc.pos)
        rule = getattr(exc.expr, "name", "") or ""
        raise ExpressionSyntaxError(
            "invalid set expression"
            + (f" (while matching {rule})" if rule else ""),
            source=text,
            position=position,
            rule=rule,
        ) from None


def build(text: str, bound: BoundLike = None) -> Built:
    """Parse *text* and build its set or unevaluated query."""
    tree = parse_expression(text)
    try:
        built = SetExpressionBuilder(bound).visit(tree)
    except VisitationError as exc:
        raise ExpressionEvaluationError(
            f"cannot build expression: {exc.original_class.__name__}",
            source=text,
        ) from exc
    logger.debug("Built %r from %r", built, text)
    return built


def _guarded(target: PredicateSet, text: str) -> PredicateSet:
    def member(i: int) -> bool:
        try:
            return target.contains(i)
        except ZeroDivisionError:
            raise ExpressionEvaluationError(
                f"division by zero while testing {i}", source=text
            ) from None

    return PredicateSet(member, target.label)


def evaluate(text: str, bound: BoundLike = None) -> Union[PredicateSet, bool]:
    """Evaluate a set expression.

    Returns a ``PredicateSet`` for set expressions and a ``bool`` for
    ``forall``/``exists`` queries.  Arithmetic failures surface as
    ``ExpressionEvaluationError`` (for sets, when membership is tested).
    """
    scan = resolve_bound(bound)
    built = build(text, scan)
    if isinstance(built, PredicateSet):
        return _guarded(built, text)
    try:
        return built.run(scan)
    except ZeroDivisionError:
        raise ExpressionEvaluationError(
            f"division by zero while evaluating {built.kind}", source=text
        ) from None
