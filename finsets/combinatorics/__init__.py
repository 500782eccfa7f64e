"""Exact combinatorial counting related to finite sets.
"""

from .bell import (bell_number, bell_recursive, bell_triangle, binomial,  # noqa
                   binomial_row, BellCache, BellNumbers)

__all__ = [
    'bell_number', 'bell_recursive', 'bell_triangle', 'binomial', 'binomial_row',

    'BellCache', 'BellNumbers'
]
