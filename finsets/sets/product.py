"""Cartesian products of element sets. The binary product yields
:class:`.OrderedPair` elements, the n-ary product :class:`.OrderedTuple`
elements whose items appear in the order of the operands:

>>> cartesian_product(ElementSet([1, 2]), ElementSet('ab'))
{(1, 'a'), (1, 'b'), (2, 'a'), (2, 'b')}
>>> product([ElementSet('ab'), ElementSet([1]), ElementSet([True])])
{('a', 1, True), ('b', 1, True)}
"""

from __future__ import annotations

from typing import Any, Sequence

from ..errors import EmptyOperandList
from ..support.logging import get_logger
from .elementset import BaseElementSet, ElementSet, is_element_set
from .tuples import OrderedPair, OrderedTuple


logger = get_logger(__name__)


def cartesian_product(A: BaseElementSet[Any],
                      others: BaseElementSet[Any] | Sequence[BaseElementSet[Any]]) \
        -> ElementSet[OrderedTuple]:
    """The cartesian product of `A` with `others`. If `others` is a single
    element set `B`, the result is the set of all pairs ``(a, b)`` with `a` in
    `A` and `b` in `B`. If `others` is a list ``[B1, ..., Bk]``, the result is
    the n-ary :func:`product` of ``[A, B1, ..., Bk]``.

    >>> cartesian_product(ElementSet([1]), [ElementSet([2]), ElementSet([3])])
    {(1, 2, 3)}
    >>> cartesian_product(ElementSet([1]), [])
    Traceback (most recent call last):
    ...
    finsets.errors.EmptyOperandList: cartesian product requires at least one further operand
    """
    if is_element_set(others):
        result: ElementSet[OrderedTuple] = ElementSet(
            OrderedPair(a, b) for a in A for b in others)
        logger.info(f'{cartesian_product.__qualname__}: {len(A)} x {len(others)} '
                    f'= {len(result)} pairs')
        return result
    if not others:
        raise EmptyOperandList('cartesian product requires at least one further operand')
    return product([A, *others])


def product(sets: Sequence[BaseElementSet[Any]]) -> ElementSet[OrderedTuple]:
    """The n-ary cartesian product of the list `sets`. Starting from the set
    containing only the empty tuple, each operand in turn extends every tuple
    obtained so far by every one of its elements. Each extension creates a new
    tuple, so that no tuple is shared between different branches.

    >>> product([ElementSet([1, 2])])
    {(1,), (2,)}
    >>> product([ElementSet([1, 2]), ElementSet()])
    {}
    """
    if not sets:
        raise EmptyOperandList('product requires at least one operand')
    result: ElementSet[OrderedTuple] = ElementSet([OrderedTuple()])
    for S in sets:
        if not is_element_set(S):
            raise TypeError(f'expecting element set; {S!r} is {type(S)}')
        result = ElementSet(t.extended(element) for t in result for element in S)
    logger.info(f'{product.__qualname__}: {len(sets)} operands, {len(result)} tuples')
    return result
