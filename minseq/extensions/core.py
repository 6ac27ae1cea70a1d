from __future__ import annotations
import typing
from collections.abc import Sized
from ..types import *
from ..iterators import (
    MappedIterator, FilteredIterator, TypeFilteredIterator, FlatMappedIterator, ZippedIterator,
    ConcatenatedIterator, TakingWhileIterator, SkippingWhileIterator, TakingIterator, SkippingIterator
)

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


def _size_of(items: Iterable[Any]) -> Optional[int]:
    """known element count of another iterable, or None"""
    from ..sequence import _BaseSequence
    if isinstance(items, _BaseSequence):
        return items._size
    if isinstance(items, Sized):
        return len(items)
    return None


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError("count must be non-negative")


class _CoreOperations(Generic[T]):
    """lazy transformations. none of these touch the source until iterated"""

    def map(self: 'Sequence[T]', mapper: Selector[T, U]) -> 'Sequence[U]':
        """project each element to a new form"""
        return self._derive(lambda: MappedIterator(iter(self._source), mapper), self._size)

    def filter(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """keep elements matching the predicate"""
        return self._derive(lambda: FilteredIterator(iter(self._source), predicate))

    def of_class(self: 'Sequence[T]', cls: Type[U]) -> 'Sequence[U]':
        """keep only instances of cls"""
        return self._derive(lambda: TypeFilteredIterator(iter(self._source), cls))

    def flat_map(self: 'Sequence[T]', mapper: Selector[T, Iterable[U]]) -> 'Sequence[U]':
        """project each element to an iterable and flatten the results in order"""
        return self._derive(lambda: FlatMappedIterator(iter(self._source), mapper))

    def zip(self: 'Sequence[T]', other: Optional[Iterable[U]]) -> 'Sequence[Pair[T, U]]':
        """
        pair elements positionally. the result is as long as the shorter input;
        a missing other gives the empty sequence.
        """
        if other is None:
            from ..sequence import Sequence
            return Sequence.empty()
        other_size = _size_of(other)
        size = min(self._size, other_size) if self._size is not None and other_size is not None else None
        return self._derive(lambda: ZippedIterator(iter(self._source), iter(other)), size)

    def take_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """take elements until the predicate first fails"""
        return self._derive(lambda: TakingWhileIterator(iter(self._source), predicate))

    def skip_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """drop elements until the predicate first fails, then keep everything"""
        return self._derive(lambda: SkippingWhileIterator(iter(self._source), predicate))

    def take(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """take the first 'count' elements"""
        _check_count(count)
        size = min(count, self._size) if self._size is not None else None
        return self._derive(lambda: TakingIterator(iter(self._source), count), size)

    def skip(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """skip the first 'count' elements"""
        _check_count(count)
        size = max(self._size - count, 0) if self._size is not None else None
        return self._derive(lambda: SkippingIterator(iter(self._source), count), size)

    def append(self: 'Sequence[T]', items: Optional[Iterable[T]]) -> 'Sequence[T]':
        """concatenate items after this sequence"""
        if items is None:
            return self
        return self._derive(lambda: ConcatenatedIterator(iter(self._source), iter(items)),
                            self._combined_size(items))

    def prepend(self: 'Sequence[T]', items: Optional[Iterable[T]]) -> 'Sequence[T]':
        """concatenate items before this sequence"""
        if items is None:
            return self
        return self._derive(lambda: ConcatenatedIterator(iter(items), iter(self._source)),
                            self._combined_size(items))

    def rest(self: 'Sequence[T]') -> 'Sequence[T]':
        """everything but the first element"""
        def rest_iterator():
            iterator = iter(self._source)
            next(iterator, None)
            return iterator
        size = max(self._size - 1, 0) if self._size is not None else None
        return self._derive(rest_iterator, size)

    def _combined_size(self: 'Sequence[T]', items: Iterable[T]) -> Optional[int]:
        other_size = _size_of(items)
        return self._size + other_size if self._size is not None and other_size is not None else None
