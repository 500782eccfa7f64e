"""Tests for power sets.
"""

import pytest

from finsets import ElementSet, FrozenElementSet, is_subset_of, power_set


def test_scenario():
    expected = ElementSet([FrozenElementSet(), FrozenElementSet([1]),
                           FrozenElementSet([2]), FrozenElementSet([1, 2])])
    assert power_set(ElementSet([1, 2])) == expected


def test_empty_set():
    assert power_set(ElementSet()) == ElementSet([FrozenElementSet()])


@pytest.mark.parametrize('n', range(16))
def test_cardinality(n):
    assert power_set(ElementSet(range(n))).cardinality() == 2 ** n


def test_members_are_subsets():
    S = ElementSet('abcd')
    P = power_set(S)
    assert all(is_subset_of(subset, S) for subset in P)
    assert FrozenElementSet(S) in P
    assert FrozenElementSet() in P


def test_operand_unchanged():
    S = ElementSet([1, 2, 3])
    power_set(S)
    assert S == ElementSet([1, 2, 3])


def test_power_set_of_frozen_set():
    S = FrozenElementSet([1])
    assert power_set(S) == ElementSet([FrozenElementSet(), S])
