"""Tests for the element set containers.
"""

import pytest

from finsets import AnySet, ElementSet, FrozenElementSet, is_element_set


class TestConstruction:

    def test_empty(self):
        s = ElementSet()
        assert s.is_empty()
        assert s.cardinality() == 0
        assert list(s) == []

    def test_duplicates_collapse(self):
        s = ElementSet([3, 1, 3, 2, 1])
        assert s.cardinality() == 3
        assert s == ElementSet([1, 2, 3])

    def test_copy_is_independent(self):
        s = ElementSet([1, 2])
        t = ElementSet(s)
        t.add(3)
        assert s == ElementSet([1, 2])
        u = s.copy()
        u.clear()
        assert s.cardinality() == 2
        assert isinstance(u, ElementSet)

    def test_any_set_alias(self):
        s: AnySet = ElementSet([1, 'a', (2, 3)])
        assert s.cardinality() == 3


class TestMutation:

    def test_add_reports_change(self):
        s = ElementSet()
        assert s.add('x') is True
        assert s.add('x') is False
        assert s.cardinality() == 1

    def test_add_all(self):
        s = ElementSet([1])
        assert s.add_all([1, 2, 3]) is True
        assert s.add_all([2, 3]) is False
        assert s == ElementSet([1, 2, 3])

    def test_remove_is_total(self):
        s = ElementSet([1, 2])
        assert s.remove(1) is True
        assert s.remove(1) is False
        assert s == ElementSet([2])

    def test_remove_all_and_retain_all(self):
        s = ElementSet(range(6))
        assert s.remove_all([0, 1, 10]) is True
        assert s.remove_all([10]) is False
        assert s.retain_all([2, 3, 10]) is True
        assert s == ElementSet([2, 3])
        assert s.retain_all([2, 3]) is False

    def test_clear(self):
        s = ElementSet([1, 2, 3])
        s.clear()
        assert s.is_empty()


class TestPredicates:

    def test_contains(self):
        s = ElementSet('abc')
        assert s.contains('a')
        assert 'b' in s
        assert not s.contains('z')
        assert s.contains_all('cab')
        assert not s.contains_all('abz')

    def test_is_unit(self):
        assert ElementSet([42]).is_unit()
        assert not ElementSet().is_unit()
        assert not ElementSet([1, 2]).is_unit()

    def test_is_finite(self):
        assert ElementSet(range(100)).is_finite()

    def test_iteration_is_restartable(self):
        s = ElementSet([1, 2, 3])
        assert sorted(s) == sorted(s) == [1, 2, 3]
        assert len(s) == 3


class TestEqualityAndHashing:

    def test_equality_ignores_order(self):
        assert ElementSet([1, 2, 3]) == ElementSet([3, 2, 1])
        assert ElementSet([1, 2]) != ElementSet([1, 2, 3])

    def test_equality_across_variants(self):
        assert ElementSet([1, 2]) == FrozenElementSet([2, 1])
        assert FrozenElementSet([2, 1]) == ElementSet([1, 2])

    def test_not_equal_to_builtin_set(self):
        assert ElementSet([1, 2]) != {1, 2}

    def test_mutable_variant_is_unhashable(self):
        with pytest.raises(TypeError):
            hash(ElementSet([1]))

    def test_frozen_variant_is_hashable(self):
        s = ElementSet([FrozenElementSet([1, 2]), FrozenElementSet([2, 1])])
        assert s.cardinality() == 1
        assert hash(FrozenElementSet('ab')) == hash(FrozenElementSet('ba'))

    def test_frozen_variant_has_no_mutators(self):
        s = FrozenElementSet([1])
        assert not hasattr(s, 'add')
        assert not hasattr(s, 'clear')


class TestMisc:

    def test_repr(self):
        assert repr(ElementSet()) == '{}'
        assert repr(ElementSet([1, 'a'])) == "{1, 'a'}"
        assert repr(ElementSet([FrozenElementSet([1])])) == '{{1}}'

    def test_is_element_set(self):
        assert is_element_set(ElementSet())
        assert is_element_set(FrozenElementSet())
        assert not is_element_set(frozenset())
        assert not is_element_set([1, 2])

    def test_bell_number_of_set(self):
        assert ElementSet().bell_number() == 1
        assert ElementSet(range(5)).bell_number() == 52
        assert FrozenElementSet(range(10)).bell_number() == 115975
