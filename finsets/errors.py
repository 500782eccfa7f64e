"""Exceptions raised by :mod:`finsets`. All of them are raised synchronously
at the point where the invalid call is detected. The library itself never
catches them, and since operands are never mutated in place, a failed call
leaves no partial results behind.
"""


class SetAlgebraError(Exception):
    """Common base class of all exceptions raised by :mod:`finsets`.
    """
    pass


class EmptyOperandList(SetAlgebraError, ValueError):
    """An n-ary union, intersection, or cartesian product has been called with
    an empty list of operand sets.
    """
    pass


class IndexOutOfRange(SetAlgebraError, IndexError):
    """Positional access to an :class:`.OrderedTuple` outside of ``[0,
    arity)``.
    """
    pass


class InvalidPartitionCount(SetAlgebraError, ValueError):
    """The number of segments requested from :func:`.partition` cannot be
    realized.
    """
    pass


class BellNumberMismatch(SetAlgebraError, ArithmeticError):
    """The triangle algorithm and the recursive algorithm for Bell numbers
    produced different values for the same argument.
    """
    pass
