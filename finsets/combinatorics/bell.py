"""This module :mod:`finsets.combinatorics.bell` computes Bell numbers. The
Bell number :math:`B_n` is the number of partitions of a set with :math:`n`
elements. There are two independent algorithms, which must agree:

1. :func:`bell_triangle` builds the Bell triangle row by row. It is the
   method of choice for moderate :math:`n`.

2. :func:`bell_recursive` uses the recurrence
   :math:`B_n = \\sum_{k=0}^{n-1} \\binom{n-1}{k} B_k` with memoization in
   a :class:`BellCache`.

The callable :data:`bell_number` selects between the two algorithms:

>>> [bell_number(n) for n in range(8)]
[1, 1, 2, 5, 15, 52, 203, 877]
>>> bell_number(26, method='recursive')
49631246523618756274
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
import threading
from typing import Iterator, Literal, Optional, TypeAlias

from ..errors import BellNumberMismatch
from ..support.logging import get_logger, temporary_level, Timer


logger = get_logger(__name__)

Method: TypeAlias = Literal['auto', 'triangle', 'recursive']


def binomial(n: int, k: int) -> int:
    """The binomial coefficient :math:`\\binom{n}{k}`, computed via the
    multiplicative identity
    :math:`\\binom{n}{k} = \\prod_{i=0}^{k-1} \\frac{n-i}{i+1}`.

    Every step first multiplies and then divides. After step `i` the
    intermediate result is :math:`\\binom{n}{i+1}`, so that the integer
    division is always exact.

    >>> binomial(5, 2), binomial(5, 0), binomial(5, 6), binomial(60, 30)
    (10, 1, 0, 118264581564861424)
    """
    if n < 0:
        raise ValueError(f'expecting non-negative n; got {n}')
    if k < 0 or k > n:
        return 0
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def binomial_row(n: int) -> Iterator[int]:
    """Yield the binomial coefficients :math:`\\binom{n}{0}, \\dots,
    \\binom{n}{n}`. These are the intermediate results of the multiplicative
    identity used in :func:`binomial`, so that the whole row costs as much as
    a single :func:`binomial` call.

    >>> list(binomial_row(4))
    [1, 4, 6, 4, 1]
    """
    if n < 0:
        raise ValueError(f'expecting non-negative n; got {n}')
    result = 1
    yield result
    for i in range(n):
        result = result * (n - i) // (i + 1)
        yield result


def _check(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f'expecting int; {n!r} is {type(n)}')
    if n < 0:
        raise ValueError(f'Bell numbers are defined for non-negative n; got {n}')


def bell_triangle(n: int) -> int:
    """The Bell number :math:`B_n` via the Bell triangle. Row 0 is ``[1]``.
    Row `i` starts with the last entry of row `i - 1`, and each further entry
    is the sum of its left neighbor and the entry above that neighbor. Then
    :math:`B_n` is the first entry of row `n`. Time and space are quadratic
    in `n`, but only two rows are kept at a time.

    >>> bell_triangle(10)
    115975
    """
    _check(n)
    row = [1]
    for i in range(1, n + 1):
        next_row = [row[-1]]
        for j in range(1, i + 1):
            next_row.append(row[j - 1] + next_row[j - 1])
        row = next_row
    return row[0]


class BellCache:
    """Memoized Bell numbers for :func:`bell_recursive`. Bell numbers do not
    change, so entries are only ever added. All access goes through a lock,
    so that one cache can be shared between threads.

    >>> cache = BellCache()
    >>> bell_recursive(5, cache)
    52
    >>> len(cache), cache.get(4)
    (6, 15)
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values: dict[int, int] = {0: 1}

    def __contains__(self, n: object) -> bool:
        with self._lock:
            return n in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(size={len(self)})'

    def get(self, n: int) -> Optional[int]:
        with self._lock:
            return self._values.get(n)

    def put(self, n: int, value: int) -> None:
        with self._lock:
            self._values[n] = value

    def largest(self) -> int:
        """The largest `n` such that all :math:`B_0, \\dots, B_n` are
        cached.
        """
        with self._lock:
            n = 0
            while n + 1 in self._values:
                n += 1
            return n

    def prefix(self, n: int) -> list[int]:
        """The list :math:`[B_0, \\dots, B_n]`, which must be cached.
        """
        with self._lock:
            return [self._values[k] for k in range(n + 1)]


def bell_recursive(n: int, cache: Optional[BellCache] = None) -> int:
    """The Bell number :math:`B_n` via the recurrence
    :math:`B_0 = 1` and :math:`B_n = \\sum_{k=0}^{n-1} \\binom{n-1}{k} B_k`.
    Missing values are computed in increasing order of `n` and stored in
    `cache`, so that deep recursion is avoided. Without `cache`, a fresh
    cache is used for this call only.

    >>> bell_recursive(15)
    1382958545
    """
    _check(n)
    if cache is None:
        cache = BellCache()
    value = cache.get(n)
    if value is not None:
        return value
    start = cache.largest()
    logger.debug(f'{bell_recursive.__qualname__}: filling cache from {start + 1} to {n}')
    values = cache.prefix(start)
    for m in range(start + 1, n + 1):
        value = sum(c * b for c, b in zip(binomial_row(m - 1), values))
        values.append(value)
        cache.put(m, value)
    return values[n]


@dataclass
class BellNumbers:
    """A callable class computing Bell numbers. Each instance owns a
    :class:`BellCache` for the recursive algorithm, which lives as long as the
    instance.
    """

    @dataclass(frozen=True)
    class Options:
        """Options for :meth:`.BellNumbers.__call__`. Each of them can be
        passed as a keyword argument.
        """

        method: Method = 'auto'
        """One of ``'triangle'``, ``'recursive'``, or ``'auto'``. The last
        one uses the triangle for `n` up to :attr:`threshold` and the
        recursion beyond.
        """

        threshold: int = 100
        """The largest `n` for which ``'auto'`` uses the triangle.
        """

        log_level: int = logging.NOTSET
        """The level of the logger of this module during the call.
        :data:`logging.NOTSET` leaves the current level unchanged.
        """

    options: Options = field(default_factory=Options)
    """Default options, which are overridden by keyword arguments of
    :meth:`.__call__`.
    """

    cache: BellCache = field(default_factory=BellCache)

    def __call__(self, n: int, **options) -> int:
        """Compute the Bell number :math:`B_n`.

        :param n:
          A non-negative integer.

        :param `**options`:
          Keyword arguments corresponding to the attributes of
          :class:`.BellNumbers.Options`.

        >>> bell = BellNumbers()
        >>> bell(5), bell(5, method='recursive'), bell(5, threshold=3)
        (52, 52, 52)
        """
        call_options = replace(self.options, **options)
        with temporary_level(logger, call_options.log_level):
            method = self.select(n, call_options)
            logger.info(f'{self.__class__.__name__}: B({n}) with {method} method')
            timer = Timer()
            match method:
                case 'triangle':
                    result = bell_triangle(n)
                case 'recursive':
                    result = bell_recursive(n, self.cache)
                case _:
                    raise ValueError(f'unknown method {method!r}')
            logger.info(f'{self.__class__.__name__}: B({n}) has {result.bit_length()} bits, '
                        f'{timer.get():.3f} s')
        return result

    @staticmethod
    def select(n: int, options: Options) -> Method:
        """The algorithm used for `n` with respect to `options`.

        >>> BellNumbers.select(101, BellNumbers.Options())
        'recursive'
        """
        if options.method == 'auto':
            return 'triangle' if n <= options.threshold else 'recursive'
        return options.method

    def verify(self, n: int) -> int:
        """Compute :math:`B_n` with both algorithms and return the common
        value.

        :raises BellNumberMismatch: if the algorithms disagree.

        >>> bell_number.verify(30)
        846749014511809332450147
        """
        by_triangle = bell_triangle(n)
        by_recursion = bell_recursive(n, self.cache)
        if by_triangle != by_recursion:
            raise BellNumberMismatch(f'B({n}): triangle gives {by_triangle}, '
                                     f'recursion gives {by_recursion}')
        logger.debug(f'{self.verify.__qualname__}: B({n}) = {by_triangle}')
        return by_triangle


bell_number = BellNumbers()
"""Compute Bell numbers. Technically, :func:`.bell_number` is an instance of
the callable class :class:`.BellNumbers` owning its own :class:`.BellCache`.
Further engines with separate caches can be created by instantiating
:class:`.BellNumbers`.

:param n:
  A non-negative integer.

:param method:
  ``'triangle'``, ``'recursive'``, or ``'auto'`` (default).

:param threshold:
  The largest `n` for which ``'auto'`` uses the triangle; the default is 100.

:returns:
  The Bell number :math:`B_n` as an exact integer.
"""
