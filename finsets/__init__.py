__version__ = '0.1.0'

__license__ = 'GPL-2.0-or-later'
__status__ = 'Prototype'

from . import combinatorics

from .combinatorics import (bell_number, bell_recursive, bell_triangle,  # noqa
                           binomial, binomial_row, BellCache, BellNumbers)

from . import sets

from .sets import (AnySet, BaseElementSet, ElementSet, FrozenElementSet,  # noqa
                   is_element_set, OrderedPair, OrderedTuple, cartesian_product,
                   complement, difference, intersection, is_disjoint_with, is_equivalent_to,
                   is_overlapping_with, is_partition, is_proper_subset_of,
                   is_subset_of, partition, power_set, product,
                   symmetric_difference, union)

from .errors import (BellNumberMismatch, EmptyOperandList, IndexOutOfRange,  # noqa
                     InvalidPartitionCount, SetAlgebraError)

__all__ = combinatorics.__all__ + sets.__all__ + [
    'BellNumberMismatch', 'EmptyOperandList', 'IndexOutOfRange',
    'InvalidPartitionCount', 'SetAlgebraError'
]
