# tests/test_predicate_set.py
"""
Tests for the PredicateSet object wrapper and its operators.
"""

import pytest

from predsets.bounds import Bound
from predsets.predicate_set import PredicateSet
from predsets.sets import for_all, set_of
from tests.conftest import is_even


class TestMembership:

    def test_contains_and_in(self):
        s = PredicateSet.of(1, 2, 3)
        assert s.contains(2)
        assert 2 in s
        assert 4 not in s

    def test_non_integers_are_not_members(self):
        assert "2" not in PredicateSet.universe()
        assert None not in PredicateSet.universe()

    def test_booleans_are_not_members(self):
        s = PredicateSet.of(0, 1)
        assert 1 in s
        assert True not in s
        assert False not in s

    def test_is_usable_as_plain_set(self):
        s = PredicateSet.of(2, 4)
        assert s(2) is True
        assert for_all(s, is_even)

    def test_truthy_predicates_are_normalised(self):
        s = PredicateSet(lambda i: i % 3)
        assert s(1) is True
        assert s(3) is False

    def test_constructors(self):
        assert 5 in PredicateSet.singleton(5)
        assert 6 not in PredicateSet.singleton(5)
        assert 4 in PredicateSet.closed_range(1, 4)
        assert 5 not in PredicateSet.closed_range(1, 4)
        assert 0 not in PredicateSet.empty()
        assert -99 in PredicateSet.universe()

    def test_wrap(self):
        s = PredicateSet.of(1)
        assert PredicateSet.wrap(s) is s
        wrapped = PredicateSet.wrap(set_of(9), "nine")
        assert 9 in wrapped
        assert wrapped.label == "nine"

    def test_wrap_rejects_non_callables(self):
        with pytest.raises(TypeError):
            PredicateSet.wrap({1, 2})


class TestOperators:

    def test_union(self):
        u = PredicateSet.of(1) | PredicateSet.of(2)
        assert 1 in u and 2 in u
        assert 3 not in u

    def test_intersection(self):
        n = PredicateSet.closed_range(1, 5) & PredicateSet.closed_range(4, 9)
        assert 4 in n and 5 in n
        assert 3 not in n and 6 not in n

    def test_difference(self):
        d = PredicateSet.of(1, 2) - PredicateSet.of(2, 3)
        assert 1 in d
        assert 2 not in d
        assert 3 not in d
        assert 4 not in d

    def test_complement(self):
        c = ~PredicateSet.of(1)
        assert 1 not in c
        assert 2 in c

    def test_plain_set_on_the_right(self):
        u = PredicateSet.of(1) | set_of(7)
        assert 7 in u

    def test_plain_set_on_the_left(self):
        u = set_of(7) | PredicateSet.of(1)
        assert 7 in u and 1 in u
        n = set_of(1, 2) & PredicateSet.of(2, 3)
        assert 2 in n and 1 not in n

    def test_reflected_difference_keeps_operand_order(self):
        d = set_of(1, 2) - PredicateSet.of(2)
        assert 1 in d
        assert 2 not in d

    def test_non_callable_operand(self):
        with pytest.raises(TypeError):
            PredicateSet.of(1) | 3

    def test_filter(self):
        evens = PredicateSet.closed_range(1, 10).filter(is_even)
        assert 4 in evens
        assert 5 not in evens
        assert 12 not in evens


class TestBoundedMethods:

    def test_for_all_and_exists(self):
        s = PredicateSet.of(2, 4, 6)
        assert s.for_all(is_even)
        assert not s.exists(lambda i: i > 6)

    def test_map(self):
        doubled = PredicateSet.of(1, 2, 3).map(lambda x: x * 2)
        assert {n for n in range(0, 10) if n in doubled} == {2, 4, 6}

    def test_methods_honour_bound(self):
        s = PredicateSet.of(5, 50)
        b = Bound(10)
        assert s.for_all(lambda i: i < 10, bound=b)
        assert not s.exists(lambda i: i == 50, bound=b)
        assert 100 not in s.map(lambda x: x * 2, bound=b)

    def test_agrees_with(self):
        a = PredicateSet.closed_range(1, 10).filter(is_even)
        assert a.agrees_with(set_of(2, 4, 6, 8, 10), bound=Bound(20))
        assert not a.agrees_with(set_of(2, 4), bound=Bound(20))


class TestRepr:

    def test_literal_label(self):
        assert repr(PredicateSet.of(3, 1, 3)) == "PredicateSet({1, 3})"

    def test_combined_label(self):
        u = PredicateSet.of(1) | PredicateSet.closed_range(2, 4)
        assert repr(u) == "PredicateSet(union({1}, [2..4]))"

    def test_unlabelled(self):
        assert repr(PredicateSet(lambda i: True)) == "PredicateSet(<predicate>)"

    def test_not_iterable(self):
        with pytest.raises(TypeError):
            iter(PredicateSet.of(1))
