from __future__ import annotations
import logging
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)


class _GroupingOperations(Generic[T]):
    def group_by(self: 'Sequence[T]', key_selector: KeySelector[T, K]) -> Dict[K, 'Sequence[T]']:
        """
        group elements by a key. keys appear in the order they were first seen and
        each group keeps its elements in source order. this is an EAGER operation.
        """
        from ..sequence import Sequence
        lists: Dict[K, List[T]] = {}
        for item in self._source:
            lists.setdefault(key_selector(item), []).append(item)
        logger.debug(f"group_by produced {len(lists)} groups")
        return {key: Sequence.of(items) for key, items in lists.items()}
