"""Tests for partitioning and partition validation.
"""

import pytest

from finsets import (ElementSet, FrozenElementSet, InvalidPartitionCount,
                     is_partition, partition)


class TestPartition:

    @pytest.mark.parametrize('n, k', [(0, 1), (0, 3), (1, 1), (4, 2), (6, 3), (9, 3), (12, 4),
                                      (10, 10)])
    def test_round_trip_when_k_divides_n(self, n, k):
        S = ElementSet(range(n))
        for policy in ('balanced', 'greedy'):
            parts = partition(S, k, policy=policy)
            assert len(parts) == (k if n else 0)
            assert is_partition(S, parts)

    @pytest.mark.parametrize('n, k', [(3, 2), (7, 3), (10, 4), (5, 1)])
    def test_balanced_gives_exactly_k_parts(self, n, k):
        S = ElementSet(range(n))
        parts = partition(S, k)
        assert len(parts) == k
        sizes = [part.cardinality() for part in parts]
        assert max(sizes) - min(sizes) <= 1
        assert sizes == sorted(sizes, reverse=True)
        assert is_partition(S, parts)

    def test_balanced_chunks_are_contiguous(self):
        parts = partition(ElementSet([1, 2, 3]), 2)
        assert parts == [ElementSet([1, 2]), ElementSet([3])]

    def test_greedy_may_exceed_requested_count(self):
        parts = partition(ElementSet([1, 2, 3]), 2, policy='greedy')
        assert parts == [ElementSet([1]), ElementSet([2]), ElementSet([3])]
        assert is_partition(ElementSet([1, 2, 3]), parts)

    def test_greedy_last_part_takes_remainder(self):
        parts = partition(ElementSet(range(7)), 3, policy='greedy')
        assert [part.cardinality() for part in parts] == [2, 2, 2, 1]

    @pytest.mark.parametrize('k', [0, -1])
    def test_non_positive_count(self, k):
        with pytest.raises(InvalidPartitionCount):
            partition(ElementSet([1, 2]), k)

    def test_more_segments_than_elements(self):
        with pytest.raises(InvalidPartitionCount):
            partition(ElementSet([1, 2]), 3)
        with pytest.raises(ValueError):
            partition(ElementSet([1]), 2, policy='greedy')

    @pytest.mark.parametrize('policy', ['balanced', 'greedy'])
    def test_empty_set_has_empty_partition(self, policy):
        assert partition(ElementSet(), 1, policy=policy) == []
        assert is_partition(ElementSet(), partition(ElementSet(), 4, policy=policy))
        with pytest.raises(InvalidPartitionCount):
            partition(ElementSet(), 0, policy=policy)

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            partition(ElementSet([1, 2]), 1, policy='random')
        with pytest.raises(ValueError):
            partition(ElementSet(), 1, policy='random')

    def test_operand_unchanged(self):
        S = ElementSet(range(5))
        partition(S, 2)
        assert S == ElementSet(range(5))


class TestIsPartition:

    S = ElementSet([1, 2, 3, 4])

    def test_valid(self):
        assert is_partition(self.S, [ElementSet([1, 4]), ElementSet([2]), ElementSet([3])])
        assert is_partition(self.S, [self.S])

    def test_empty_part(self):
        assert not is_partition(self.S, [ElementSet([1, 2, 3, 4]), ElementSet()])

    def test_union_too_small(self):
        assert not is_partition(self.S, [ElementSet([1, 2]), ElementSet([3])])

    def test_union_too_big(self):
        assert not is_partition(self.S, [ElementSet([1, 2]), ElementSet([3, 4, 5])])

    def test_overlapping_parts(self):
        assert not is_partition(self.S, [ElementSet([1, 2, 3]), ElementSet([3, 4])])

    def test_empty_list(self):
        assert not is_partition(self.S, [])
        assert is_partition(ElementSet(), [])

    def test_frozen_parts(self):
        assert is_partition(self.S, [FrozenElementSet([1, 2]), FrozenElementSet([3, 4])])


def _all_partitions(elements):
    # Each partition of the first n - 1 elements extends either by a new
    # singleton part or by adding the last element to one existing part.
    if not elements:
        yield ()
        return
    *rest, last = elements
    for parts in _all_partitions(rest):
        yield parts + ((last,),)
        for i, part in enumerate(parts):
            yield parts[:i] + (part + (last,),) + parts[i + 1:]


@pytest.mark.parametrize('n', range(7))
def test_partitions_are_counted_by_bell_numbers(n):
    S = ElementSet(range(n))
    candidates = [[ElementSet(part) for part in parts]
                  for parts in _all_partitions(list(range(n)))]
    assert all(is_partition(S, parts) for parts in candidates)
    assert len(candidates) == S.bell_number()
