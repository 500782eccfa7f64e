"""Partitions of element sets. A partition of a set `S` is a list of nonempty,
pairwise disjoint subsets of `S` whose union is `S`. The number of all
partitions of `S` is given by the Bell numbers in
:mod:`finsets.combinatorics.bell`.

>>> S = ElementSet(range(1, 8))
>>> parts = partition(S, 3)
>>> parts
[{1, 2, 3}, {4, 5}, {6, 7}]
>>> is_partition(S, parts)
True
"""

from __future__ import annotations

from itertools import combinations, islice
from typing import Literal, Sequence, TypeAlias

from ..errors import InvalidPartitionCount
from ..support.logging import get_logger
from .algebra import is_disjoint_with, union
from .elementset import BaseElementSet, ElementSet, ε


logger = get_logger(__name__)

Policy: TypeAlias = Literal['balanced', 'greedy']
"""The admissible values of the `policy` argument of :func:`partition`.
"""


def partition(S: BaseElementSet[ε], segments: int, policy: Policy = 'balanced') \
        -> list[ElementSet[ε]]:
    """Split `S` into contiguous chunks with respect to the iteration order of
    `S`.

    :param segments:
      The requested number of chunks, which must be positive and, for
      nonempty `S`, at most the cardinality of `S`. The empty set has the
      empty partition for every positive `segments`:

      >>> partition(ElementSet(), 2)
      []

    :param policy:
      Determines the chunk sizes. Let `n` be the cardinality of `S`.

      * With the default ``'balanced'``, there are exactly `segments` chunks.
        The first ``n % segments`` chunks have ``n // segments + 1``
        elements, the remaining ones have ``n // segments`` elements.

      * With ``'greedy'``, all chunks are filled up to ``n // segments``
        elements, and the last chunk takes the rest. If `segments` does not
        divide `n`, this yields more than `segments` chunks:

        >>> partition(ElementSet([1, 2, 3]), 2, policy='greedy')
        [{1}, {2}, {3}]

    :raises InvalidPartitionCount:
      if `segments` is not positive, or if `S` is nonempty and `segments`
      exceeds its cardinality.
    """
    n = len(S)
    if segments < 1:
        raise InvalidPartitionCount(f'number of segments must be positive; got {segments}')
    if segments > n > 0:
        raise InvalidPartitionCount(f'cannot split {n} elements into {segments} '
                                    f'nonempty segments')
    size, remainder = divmod(n, segments)
    match policy:
        case 'balanced':
            sizes = [size + 1] * remainder + [size] * (segments - remainder)
        case 'greedy':
            sizes = [size] * segments
            if remainder:
                sizes.append(remainder)
        case _:
            raise ValueError(f'unknown partition policy {policy!r}')
    elements = iter(S)
    # All sizes are 0 for the empty set.
    parts = [ElementSet(islice(elements, k)) for k in sizes if k > 0]
    logger.info(f'{partition.__qualname__}: {n} elements, sizes {sizes}')
    return parts


def is_partition(S: BaseElementSet[ε], parts: Sequence[BaseElementSet[ε]]) -> bool:
    """Check whether `parts` is a partition of `S`. This is the case if and
    only if no part is empty, the union of all parts equals `S`, and the parts
    are pairwise disjoint.

    >>> S = ElementSet([1, 2, 3])
    >>> is_partition(S, [ElementSet([1, 2]), ElementSet([3])])
    True
    >>> is_partition(S, [ElementSet([1, 2]), ElementSet([2, 3])])
    False
    >>> is_partition(S, [ElementSet([1, 2, 3]), ElementSet()])
    False
    >>> is_partition(ElementSet(), [])
    True
    """
    if any(part.is_empty() for part in parts):
        return False
    if not parts:
        return S.is_empty()
    if union(parts[0], parts) != S:
        return False
    for part1, part2 in combinations(parts, 2):
        if not is_disjoint_with(part1, part2):
            return False
    return True
