"""Ordered tuples are the elements of cartesian products. They are plain
:class:`tuple` instances with a few additional accessors, so that equality
is element-wise and order-sensitive, and hashing is inherited.

>>> t = OrderedTuple(1, 'a', 2.5)
>>> t
(1, 'a', 2.5)
>>> t.arity(), t.get(1), t.get_type(2)
(3, 'a', <class 'float'>)
>>> t == OrderedTuple(1, 'a', 2.5) and t != OrderedTuple('a', 1, 2.5)
True
"""

from __future__ import annotations

from typing import Any

from ..errors import IndexOutOfRange


class OrderedTuple(tuple[Any, ...]):
    """An immutable sequence of fixed arity. In contrast to :class:`tuple`,
    the items are passed as separate positional arguments.
    """

    def __new__(cls, *items: Any) -> OrderedTuple:
        return super().__new__(cls, items)

    def __getnewargs__(self) -> tuple[Any, ...]:
        return tuple(self)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self):
            raise IndexOutOfRange(f'index {index} out of range [0, {len(self)})')

    def arity(self) -> int:
        return len(self)

    def extended(self, item: Any) -> OrderedTuple:
        """Return a new ordered tuple with `item` appended. This tuple itself
        remains unchanged.

        >>> t = OrderedTuple(1)
        >>> t.extended(2), t
        ((1, 2), (1,))
        """
        return OrderedTuple(*self, item)

    def get(self, index: int) -> Any:
        """The item at position `index`. Contrary to indexing via ``[]``,
        negative indices are not admitted.

        >>> OrderedTuple(1, 2).get(2)
        Traceback (most recent call last):
        ...
        finsets.errors.IndexOutOfRange: index 2 out of range [0, 2)
        """
        self._check_index(index)
        return self[index]

    def get_type(self, index: int) -> type:
        """The type of the item at position `index`.
        """
        self._check_index(index)
        return type(self[index])

    def items(self) -> list[Any]:
        return list(self)

    def types(self) -> tuple[type, ...]:
        return tuple(type(item) for item in self)


class OrderedPair(OrderedTuple):
    """An ordered tuple of arity 2. This is the element type of binary
    cartesian products.

    >>> p = OrderedPair(1, 'a')
    >>> p.first, p.second
    (1, 'a')
    >>> p == OrderedTuple(1, 'a')
    True
    """

    def __new__(cls, first: Any, second: Any) -> OrderedPair:
        return tuple.__new__(cls, (first, second))

    @property
    def first(self) -> Any:
        return self[0]

    @property
    def second(self) -> Any:
        return self[1]
