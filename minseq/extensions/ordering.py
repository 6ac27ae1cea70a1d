from __future__ import annotations
import logging
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)


def _sort_by_second(pairs: List[Pair[T, K]]) -> List[Pair[T, K]]:
    """
    stable quicksort on pair.second. the first remaining pair is the pivot; pairs
    with a strictly smaller key go left, everything else (equal keys included)
    goes right, so equal keys keep their input order.
    partitions are worked off an explicit stack, so input length is not bounded
    by the recursion limit.
    """
    result: List[Pair[T, K]] = []
    # entries are (is_pivot, payload); lesser is pushed last so it is emitted first
    pending: List[Tuple[bool, Any]] = [(False, pairs)]
    while pending:
        is_pivot, payload = pending.pop()
        if is_pivot:
            result.append(payload)
            continue
        if not payload:
            continue
        pivot = payload[0]
        lesser, greater = [], []
        for pair in payload[1:]:
            (lesser if pair.second < pivot.second else greater).append(pair)
        pending.append((False, greater))
        pending.append((True, pivot))
        pending.append((False, lesser))
    return result


class _OrderingOperations(Generic[T]):
    def sort_by(self: 'Sequence[T]', key_selector: KeySelector[T, K]) -> 'Sequence[T]':
        """
        sort elements ascending by a key, keeping the input order of equal keys.
        this is an EAGER operation: the source is read and sorted immediately, and
        key_selector runs exactly once per element however many comparisons follow.
        """
        from ..sequence import Sequence
        pairs = self.map(lambda item: Pair(item, key_selector(item))).to.list()
        ordered = _sort_by_second(pairs)
        logger.debug(f"sort_by materialized {len(ordered)} elements")
        return Sequence.of(ordered).map(Pair.first_of)
