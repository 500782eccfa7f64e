"""This module :mod:`finsets.sets.algebra` implements the set algebra on
element sets as pure functions. No function modifies its arguments, and every
set returned is a newly created :class:`.ElementSet`, which shares no storage
with the arguments.

>>> A = ElementSet([1, 2, 3])
>>> B = ElementSet([2, 3, 4])
>>> union(A, B), intersection(A, B), difference(A, B)
({1, 2, 3, 4}, {2, 3}, {1})
>>> symmetric_difference(A, B)
{1, 4}

Union and intersection admit a list of sets as their second argument:

>>> union(A, [B, ElementSet([5])])
{1, 2, 3, 4, 5}
>>> intersection(A, [])
Traceback (most recent call last):
...
finsets.errors.EmptyOperandList: intersection requires at least one further operand
"""

from __future__ import annotations

from typing import Sequence

from ..errors import EmptyOperandList
from ..support.logging import get_logger
from .elementset import BaseElementSet, ElementSet, ε, is_element_set


logger = get_logger(__name__)


def _operands(name: str, others: BaseElementSet[ε] | Sequence[BaseElementSet[ε]]) \
        -> Sequence[BaseElementSet[ε]]:
    match others:
        case _ if is_element_set(others):
            return [others]
        case []:
            raise EmptyOperandList(f'{name} requires at least one further operand')
        case [*sets] if all(is_element_set(s) for s in sets):
            return sets
        case _:
            raise TypeError(f'expecting element set or list of element sets; '
                            f'{others!r} is {type(others)}')


def is_subset_of(A: BaseElementSet[ε], B: BaseElementSet[ε]) -> bool:
    """Whether every element of `A` is an element of `B`.

    >>> is_subset_of(ElementSet([1, 2]), ElementSet([1, 2, 3]))
    True
    >>> is_subset_of(ElementSet(), ElementSet())
    True
    """
    if len(A) > len(B):
        return False
    return all(element in B for element in A)


def is_proper_subset_of(A: BaseElementSet[ε], B: BaseElementSet[ε]) -> bool:
    """Whether `A` is a subset of `B` different from `B`.

    >>> is_proper_subset_of(ElementSet([1, 2]), ElementSet([1, 2]))
    False
    """
    return len(A) < len(B) and is_subset_of(A, B)


def is_equivalent_to(A: BaseElementSet[ε], B: BaseElementSet[ε]) -> bool:
    """Whether `A` and `B` have the same cardinality. Note that this is
    weaker than equality.

    >>> is_equivalent_to(ElementSet([1, 2]), ElementSet('ab'))
    True
    """
    return A.cardinality() == B.cardinality()


def is_overlapping_with(A: BaseElementSet[ε], B: BaseElementSet[ε]) -> bool:
    """Whether `A` and `B` have at least one element in common.
    """
    if len(A) > len(B):
        A, B = B, A
    return any(element in B for element in A)


def is_disjoint_with(A: BaseElementSet[ε], B: BaseElementSet[ε]) -> bool:
    """Whether `A` and `B` have no element in common.
    """
    return not is_overlapping_with(A, B)


def union(A: BaseElementSet[ε], others: BaseElementSet[ε] | Sequence[BaseElementSet[ε]]) \
        -> ElementSet[ε]:
    """The set of all elements that are in `A` or in any of `others`. The
    argument `others` is either a single element set or a nonempty list of
    element sets.
    """
    result = ElementSet(A)
    for B in _operands('union', others):
        result.add_all(B)
    return result


def intersection(A: BaseElementSet[ε],
                 others: BaseElementSet[ε] | Sequence[BaseElementSet[ε]]) -> ElementSet[ε]:
    """The set of all elements that are in `A` and in all of `others`. The
    argument `others` is either a single element set or a nonempty list of
    element sets. In the latter case, the sets are intersected from left to
    right, and the computation stops as soon as an intermediate result is
    empty.

    >>> intersection(ElementSet([1]), [ElementSet([2]), ElementSet([1])])
    {}
    """
    operands = _operands('intersection', others)
    result = _intersection2(A, operands[0])
    for i, B in enumerate(operands[1:], start=1):
        if result.is_empty():
            logger.debug(f'{intersection.__qualname__}: empty after {i} of '
                         f'{len(operands)} operands')
            return result
        result = _intersection2(result, B)
    return result


def _intersection2(A: BaseElementSet[ε], B: BaseElementSet[ε]) -> ElementSet[ε]:
    # Iterate the smaller set and look up elements in the bigger one.
    if len(A) <= len(B):
        smaller, bigger = A, B
    else:
        smaller, bigger = B, A
    return ElementSet(element for element in smaller if element in bigger)


def difference(A: BaseElementSet[ε], B: BaseElementSet[ε]) -> ElementSet[ε]:
    """The set of all elements of `A` that are not in `B`.

    >>> difference(ElementSet([1, 2]), ElementSet([2, 3]))
    {1}
    >>> difference(ElementSet([2, 3]), ElementSet([1, 2]))
    {3}
    """
    return ElementSet(element for element in A if element not in B)


def symmetric_difference(A: BaseElementSet[ε], B: BaseElementSet[ε]) -> ElementSet[ε]:
    """The set of all elements that are in exactly one of `A` and `B`.
    """
    return union(difference(A, B), difference(B, A))


def complement(S: BaseElementSet[ε], universe: BaseElementSet[ε]) -> ElementSet[ε]:
    """The set of all elements of `universe` that are not in `S`.

    >>> complement(ElementSet([1]), ElementSet([1, 2, 3]))
    {2, 3}
    """
    return difference(universe, S)
