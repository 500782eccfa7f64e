from __future__ import annotations

from ..support.logging import get_logger
from .elementset import BaseElementSet, ElementSet, FrozenElementSet, ε


logger = get_logger(__name__)


def power_set(S: BaseElementSet[ε]) -> ElementSet[FrozenElementSet[ε]]:
    """The set of all subsets of `S`, including the empty set and `S`
    itself. Subsets are :class:`.FrozenElementSet` instances, since elements
    of sets must be hashable. The cost is exponential in the cardinality of
    `S`, and it is up to the caller to keep that small.

    The construction starts with the set containing only the empty set. For
    each element `e` of `S`, all subsets obtained so far are extended by `e`,
    and the extensions are added, which doubles the number of subsets.

    >>> power_set(ElementSet([1, 2]))
    {{}, {1}, {2}, {1, 2}}
    >>> power_set(ElementSet())
    {{}}
    """
    result: ElementSet[FrozenElementSet[ε]] = ElementSet([FrozenElementSet()])
    for element in S:
        extensions = [FrozenElementSet([*subset, element]) for subset in result]
        result.add_all(extensions)
    logger.info(f'{power_set.__qualname__}: {len(S)} elements, {len(result)} subsets')
    return result
