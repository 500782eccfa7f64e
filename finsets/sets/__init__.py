r"""Finite sets of unique elements and the algebra on them.

The generic container is :class:`ElementSet`, with an immutable and hashable
variant :class:`FrozenElementSet`. Set algebra is provided by plain functions
that never modify their arguments:

+-------------------------+-----------------------------+
| :math:`A \cup B`        | :func:`union`               |
+-------------------------+-----------------------------+
| :math:`A \cap B`        | :func:`intersection`        |
+-------------------------+-----------------------------+
| :math:`A \setminus B`   | :func:`difference`          |
+-------------------------+-----------------------------+
| :math:`A \triangle B`   | :func:`symmetric_difference`|
+-------------------------+-----------------------------+
| :math:`U \setminus A`   | :func:`complement`          |
+-------------------------+-----------------------------+
| :math:`A \times B`      | :func:`cartesian_product`   |
+-------------------------+-----------------------------+
| :math:`\mathcal{P}(A)`  | :func:`power_set`           |
+-------------------------+-----------------------------+

The same operations are available as infix operators on element sets:

>>> A = ElementSet([1, 2, 3])
>>> U = ElementSet(range(6))
>>> (U - A) == complement(A, U)
True
>>> A <= U, A < A
(True, False)

Derived sets can be converted to :mod:`sympy` for further symbolic
processing:

>>> import sympy
>>> P = power_set(ElementSet([1])).as_sympy()
>>> P == sympy.FiniteSet(sympy.S.EmptySet, sympy.FiniteSet(1))
True
"""

from .elementset import (AnySet, BaseElementSet, ElementSet,  # noqa
                         FrozenElementSet, is_element_set)

from .tuples import OrderedPair, OrderedTuple  # noqa

from .algebra import (complement, difference, intersection,  # noqa
                      is_disjoint_with, is_equivalent_to, is_overlapping_with,
                      is_proper_subset_of, is_subset_of, symmetric_difference,
                      union)

from .product import cartesian_product, product  # noqa

from .power import power_set  # noqa

from .partition import is_partition, partition  # noqa


__all__ = [
    'AnySet', 'BaseElementSet', 'ElementSet', 'FrozenElementSet', 'is_element_set',

    'OrderedPair', 'OrderedTuple',

    'complement', 'difference', 'intersection', 'is_disjoint_with',
    'is_equivalent_to', 'is_overlapping_with', 'is_proper_subset_of',
    'is_subset_of', 'symmetric_difference', 'union',

    'cartesian_product', 'product',

    'power_set',

    'is_partition', 'partition'
]
