from __future__ import annotations

import logging
from collections.abc import Sized
from itertools import zip_longest
from .types import *

# --- operation families ---
from .extensions.core import _CoreOperations
from .extensions.query import _QueryOperations
from .extensions.ordering import _OrderingOperations
from .extensions.grouping import _GroupingOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

_MISSING = object()


class _Deferred(Iterable[T]):
    """an iterable that builds a fresh iterator from iterator_func on every __iter__"""

    def __init__(self, iterator_func: Callable[[], Iterator[T]]):
        self._iterator_func = iterator_func

    def __iter__(self) -> Iterator[T]:
        return self._iterator_func()


def sequence_equal(x: Iterable[Any], y: Iterable[Any]) -> bool:
    """element-wise, order-sensitive comparison of two iterables"""
    if x is y:
        return True
    for left, right in zip_longest(x, y, fillvalue=_MISSING):
        if left is _MISSING or right is _MISSING or left != right:
            return False
    return True


# --- base sequence implementation ---

class _BaseSequence(Iterable[T]):
    def __init__(self, source: Iterable[T], size: Optional[int] = None):
        """wrap a source iterable; size is the element count when already known"""
        self._source = source
        self._size = size

    def _derive(self, iterator_func: Callable[[], Iterator[U]], size: Optional[int] = None) -> 'Sequence[U]':
        """new sequence whose iterators are built lazily by iterator_func"""
        return Sequence(_Deferred(iterator_func), size)

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def size(self) -> int:
        """element count, traversing the source once when it is not known yet"""
        if self._size is None:
            count = 0
            for _ in self._source:
                count += 1
            logger.debug(f"computed sequence size by traversal: {count}")
            self._size = count
        return self._size

    def is_empty(self) -> bool:
        if self._size is not None:
            return self._size == 0
        for _ in self._source:
            return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _BaseSequence):
            return NotImplemented
        return sequence_equal(self, other)

    def __hash__(self) -> int:
        return hash(tuple(self._source))

    def __repr__(self) -> str:
        return f"Sequence(size={'?' if self._size is None else self._size})"


# --- main sequence class ---

class Sequence(
    _BaseSequence[T],
    _CoreOperations[T],
    _QueryOperations[T],
    _OrderingOperations[T],
    _GroupingOperations[T]
):
    """a lazy, chainable view over an iterable source."""

    def __init__(self, source: Iterable[T], size: Optional[int] = None):
        super().__init__(source, size)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    @staticmethod
    def of(items: Optional[Iterable[T]]) -> Sequence[T]:
        """
        wrap an iterable. sized containers get their length cached up front,
        anything else has its size counted on demand. None gives the empty sequence.
        """
        if items is None:
            return EMPTY
        if isinstance(items, _BaseSequence):
            return Sequence(items._source, items._size)
        if isinstance(items, Sized):
            return Sequence(items, len(items))
        return Sequence(items)

    @staticmethod
    def of_items(*items: T) -> Sequence[T]:
        return Sequence(items, len(items)) if items else EMPTY

    @staticmethod
    def empty() -> Sequence[Any]:
        return EMPTY


# the shared empty sequence
EMPTY: Sequence[Any] = Sequence((), 0)
