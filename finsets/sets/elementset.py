"""This module :mod:`finsets.sets.elementset` provides the generic containers
on which all set algebra in :mod:`finsets` operates. There are two variants
sharing the read-only interface :class:`BaseElementSet`:

* :class:`ElementSet` is mutable via :meth:`ElementSet.add`,
  :meth:`ElementSet.remove`, and :meth:`ElementSet.clear`. As a mutable
  container it is not hashable.

* :class:`FrozenElementSet` is immutable and hashable. Its instances can be
  elements of other sets, which is required for power sets.

Both variants compare equal if and only if they contain the same elements:

>>> ElementSet([1, 2, 3]) == FrozenElementSet([3, 2, 1])
True
>>> ElementSet([1, 1, 2])
{1, 2}
"""

from __future__ import annotations

from typing import Any, Collection, Hashable, Iterable, Iterator, Self, TypeAlias, TypeVar

import sympy
from typing_extensions import TypeIs

from ..combinatorics.bell import bell_number


ε = TypeVar('ε', bound=Hashable)
"""A type variable denoting the type of elements of an element set. Elements
must be hashable, since uniqueness is enforced via hashing and equality.
"""


def is_element_set(obj: object) -> TypeIs[BaseElementSet[Any]]:
    """Type narrowing :func:`isinstance` test for :class:`.BaseElementSet`.
    This is the capability check used throughout :mod:`finsets` to tell sets
    from other values.

    >>> is_element_set(FrozenElementSet())
    True
    >>> is_element_set({1, 2})
    False
    """
    return isinstance(obj, BaseElementSet)


class BaseElementSet(Collection[ε]):
    """A finite collection of unique elements. This class implements all
    non-destructive methods of :class:`ElementSet` and
    :class:`FrozenElementSet`.

    Elements are stored in insertion order. Consequently, iteration is
    deterministic for a given construction history, but the set algebra in
    :mod:`finsets` makes no promises about the order of elements in its
    results.
    """

    _elements: dict[ε, None]

    def __init__(self, elements: Iterable[ε] = ()) -> None:
        self._elements = dict.fromkeys(elements)

    def __and__(self, other: object) -> ElementSet[ε]:
        """Override the bitwise and operator ``&`` for
        :func:`.algebra.intersection`.
        """
        if not is_element_set(other):
            return NotImplemented
        return algebra.intersection(self, other)

    def __contains__(self, obj: object) -> bool:
        return obj in self._elements

    def __eq__(self, other: object) -> bool:
        if not is_element_set(other):
            return NotImplemented
        return self._elements.keys() == other._elements.keys()

    def __iter__(self) -> Iterator[ε]:
        yield from self._elements

    def __le__(self, other: object) -> bool:
        """Override ``<=`` for :func:`.algebra.is_subset_of`.
        """
        if not is_element_set(other):
            return NotImplemented
        return algebra.is_subset_of(self, other)

    def __len__(self) -> int:
        return len(self._elements)

    def __lt__(self, other: object) -> bool:
        """Override ``<`` for :func:`.algebra.is_proper_subset_of`.
        """
        if not is_element_set(other):
            return NotImplemented
        return algebra.is_proper_subset_of(self, other)

    def __or__(self, other: object) -> ElementSet[ε]:
        """Override the bitwise or operator ``|`` for :func:`.algebra.union`.

        >>> ElementSet([1, 2, 3]) | ElementSet([3, 4])
        {1, 2, 3, 4}
        """
        if not is_element_set(other):
            return NotImplemented
        return algebra.union(self, other)

    def __repr__(self) -> str:
        return '{' + ', '.join(repr(element) for element in self._elements) + '}'

    def __sub__(self, other: object) -> ElementSet[ε]:
        """Override ``-`` for :func:`.algebra.difference`.
        """
        if not is_element_set(other):
            return NotImplemented
        return algebra.difference(self, other)

    def __xor__(self, other: object) -> ElementSet[ε]:
        """Override ``^`` for :func:`.algebra.symmetric_difference`.
        """
        if not is_element_set(other):
            return NotImplemented
        return algebra.symmetric_difference(self, other)

    def as_latex(self) -> str:
        """LaTeX representation as a string, as produced by :func:`sympy.latex`
        for :meth:`as_sympy`.

        >>> print(ElementSet([1, 2]).as_latex())
        \\left\\{1, 2\\right\\}
        """
        return sympy.latex(self.as_sympy())

    def as_sympy(self) -> sympy.Set:
        """Convert to a :class:`sympy.sets.sets.FiniteSet`. Nested element
        sets are converted recursively, ordered tuples become
        :class:`sympy.core.containers.Tuple`.

        >>> s = ElementSet([1, FrozenElementSet([2])])
        >>> s.as_sympy() == sympy.FiniteSet(1, sympy.FiniteSet(2))
        True
        """
        def convert(element: Any) -> Any:
            if is_element_set(element):
                return element.as_sympy()
            if isinstance(element, tuple):
                return sympy.Tuple(*(convert(item) for item in element))
            return element

        return sympy.FiniteSet(*(convert(element) for element in self._elements))

    def bell_number(self) -> int:
        """The number of partitions of this set, which is the Bell number of
        its cardinality.

        >>> ElementSet('abc').bell_number()
        5
        """
        return bell_number(self.cardinality())

    def cardinality(self) -> int:
        """The number of elements.
        """
        return len(self._elements)

    def contains(self, element: ε) -> bool:
        return element in self._elements

    def contains_all(self, elements: Iterable[ε]) -> bool:
        return all(element in self._elements for element in elements)

    def copy(self) -> Self:
        """An independent copy of the same variant.
        """
        return self.__class__(self._elements)

    @classmethod
    def from_sympy(cls, s: sympy.Set) -> Self:
        """Construct from a finite sympy set. Elements are taken over as
        they are, i.e., as sympy objects.

        >>> ElementSet.from_sympy(sympy.FiniteSet(1, 2)) == ElementSet([1, 2])
        True
        >>> ElementSet.from_sympy(sympy.Interval(0, 1))
        Traceback (most recent call last):
        ...
        ValueError: only finite sets are supported; Interval(0, 1) is Interval
        """
        if isinstance(s, sympy.FiniteSet) or s is sympy.S.EmptySet:
            return cls(s.args)
        raise ValueError(f'only finite sets are supported; {s} is {type(s).__name__}')

    def is_empty(self) -> bool:
        return len(self._elements) == 0

    def is_finite(self) -> bool:
        """Element sets are always finite.
        """
        return True

    def is_unit(self) -> bool:
        """Whether this set has exactly one element.
        """
        return len(self._elements) == 1


class ElementSet(BaseElementSet[ε]):
    """The mutable variant of element sets. Instances are created empty, from
    an iterable, where duplicates are collapsed, or as a copy of another
    element set. They are modified only via :meth:`add`, :meth:`add_all`,
    :meth:`remove`, :meth:`remove_all`, :meth:`retain_all`, and
    :meth:`clear`.

    >>> s = ElementSet()
    >>> s.add(1)
    True
    >>> s.add(1)
    False
    >>> s.add_all([1, 2])
    True
    >>> s.remove(3)
    False
    >>> s, s.cardinality(), s.is_unit()
    ({1, 2}, 2, False)
    """

    __hash__ = None  # type: ignore[assignment]

    def add(self, element: ε) -> bool:
        """Add `element`. Return :obj:`True` if `element` was not present
        before.
        """
        if element in self._elements:
            return False
        self._elements[element] = None
        return True

    def add_all(self, elements: Iterable[ε]) -> bool:
        """Add all `elements`. Return :obj:`True` if any of them was not
        present before.
        """
        any_added = False
        for element in elements:
            if self.add(element):
                any_added = True
        return any_added

    def clear(self) -> None:
        self._elements.clear()

    def remove(self, element: ε) -> bool:
        """Remove `element`. Return :obj:`True` if it was present before.
        Contrary to :meth:`set.remove` this never raises.
        """
        if element not in self._elements:
            return False
        del self._elements[element]
        return True

    def remove_all(self, elements: Iterable[ε]) -> bool:
        any_removed = False
        for element in elements:
            if self.remove(element):
                any_removed = True
        return any_removed

    def retain_all(self, elements: Iterable[ε]) -> bool:
        """Keep only those elements that are also in `elements`. Return
        :obj:`True` if this changed the set.

        >>> s = ElementSet([1, 2, 3])
        >>> s.retain_all([2, 3, 4]), s
        (True, {2, 3})
        """
        keep = set(elements)
        drop = [element for element in self._elements if element not in keep]
        return self.remove_all(drop)


class FrozenElementSet(BaseElementSet[ε]):
    """The immutable and hashable variant of element sets.

    >>> s = FrozenElementSet([1, 2])
    >>> {s: 'found'}[FrozenElementSet([2, 1])]
    'found'
    """

    def __hash__(self) -> int:
        return hash(frozenset(self._elements))


AnySet: TypeAlias = ElementSet[Any]
"""A mutable element set admitting arbitrary hashable elements.
"""


from . import algebra  # noqa: E402
