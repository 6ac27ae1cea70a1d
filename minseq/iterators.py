"""
adapter iterators backing the lazy sequence operations.

each adapter pulls from its upstream iterator(s) on demand and keeps a single
lookahead slot, so has_next() and peek() can be asked any number of times without
skipping or duplicating elements. once an adapter reports exhaustion it never
touches its source again.

upstream pulls go through next(source, _END), so only a drained source can end an
adapter. a StopIteration escaping a caller's callback is re-raised as
RuntimeError, the same conversion generators apply under PEP 479.
"""
from abc import ABC, abstractmethod
from .types import *

# returned by _fetch when there is nothing left
_END = object()


class LookaheadIterator(ABC, Iterator[T]):
    """base state machine: not started -> buffered <-> exhausted"""

    def __init__(self):
        self._buffer: Optional[T] = None
        self._has_buffer = False
        self._exhausted = False

    @abstractmethod
    def _fetch(self) -> Any:
        """produce the next element, or return _END when there is none"""
        pass

    def has_next(self) -> bool:
        if not self._has_buffer and not self._exhausted:
            try:
                item = self._fetch()
            except StopIteration as e:
                raise RuntimeError(f"{type(self).__name__} callback raised StopIteration") from e
            if item is _END:
                self._exhausted = True
            else:
                self._buffer = item
                self._has_buffer = True
        return self._has_buffer

    def peek(self) -> T:
        """return the next element without consuming it"""
        if not self.has_next():
            raise ValueError("iterator is exhausted")
        return self._buffer

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        item = self._buffer
        self._buffer = None
        self._has_buffer = False
        return item

    def __iter__(self) -> Iterator[T]:
        return self

    def remove(self) -> None:
        raise UnsupportedOperationError(f"{type(self).__name__} does not support removal")


class MappedIterator(LookaheadIterator[U]):
    def __init__(self, source: Iterator[T], mapper: Selector[T, U]):
        super().__init__()
        self._source = source
        self._mapper = mapper

    def _fetch(self) -> Any:
        item = next(self._source, _END)
        return _END if item is _END else self._mapper(item)


class FilteredIterator(LookaheadIterator[T]):
    def __init__(self, source: Iterator[T], predicate: Predicate[T]):
        super().__init__()
        self._source = source
        self._predicate = predicate

    def _fetch(self) -> Any:
        for item in self._source:
            if self._predicate(item):
                return item
        return _END


class TypeFilteredIterator(FilteredIterator):
    """passes only instances of the given type through"""

    def __init__(self, source: Iterator[Any], cls: Type[U]):
        super().__init__(source, lambda item: isinstance(item, cls))


class FlatMappedIterator(LookaheadIterator[U]):
    """maps each element to an iterable and walks the results end to end"""

    def __init__(self, source: Iterator[T], mapper: Selector[T, Iterable[U]]):
        super().__init__()
        self._source = source
        self._mapper = mapper
        self._current: Iterator[U] = iter(())

    def _fetch(self) -> Any:
        # empty inner iterables are skipped
        while True:
            for item in self._current:
                return item
            outer = next(self._source, _END)
            if outer is _END:
                return _END
            self._current = iter(self._mapper(outer))


class ZippedIterator(LookaheadIterator[Pair[T, U]]):
    """pairs two iterators positionally, stopping as soon as either runs out"""

    def __init__(self, first: Iterator[T], second: Iterator[U]):
        super().__init__()
        self._first = first
        self._second = second

    def _fetch(self) -> Any:
        left = next(self._first, _END)
        if left is _END:
            return _END
        right = next(self._second, _END)
        if right is _END:
            return _END
        return Pair(left, right)


class ConcatenatedIterator(LookaheadIterator[T]):
    def __init__(self, *sources: Iterator[T]):
        super().__init__()
        self._sources = list(sources)
        self._index = 0

    def _fetch(self) -> Any:
        while self._index < len(self._sources):
            for item in self._sources[self._index]:
                return item
            self._index += 1
        return _END


class TakingWhileIterator(LookaheadIterator[T]):
    def __init__(self, source: Iterator[T], predicate: Predicate[T]):
        super().__init__()
        self._source = source
        self._predicate = predicate

    def _fetch(self) -> Any:
        item = next(self._source, _END)
        if item is _END or not self._predicate(item):
            # the base class never fetches again after this
            return _END
        return item


class SkippingWhileIterator(LookaheadIterator[T]):
    def __init__(self, source: Iterator[T], predicate: Predicate[T]):
        super().__init__()
        self._source = source
        self._predicate = predicate
        self._skipping = True

    def _fetch(self) -> Any:
        if not self._skipping:
            return next(self._source, _END)
        for item in self._source:
            if not self._predicate(item):
                self._skipping = False
                return item
        return _END


class TakingIterator(LookaheadIterator[T]):
    def __init__(self, source: Iterator[T], count: int):
        super().__init__()
        self._source = source
        self._remaining = count

    def _fetch(self) -> Any:
        if self._remaining <= 0:
            return _END
        self._remaining -= 1
        return next(self._source, _END)


class SkippingIterator(LookaheadIterator[T]):
    def __init__(self, source: Iterator[T], count: int):
        super().__init__()
        self._source = source
        self._to_skip = count

    def _fetch(self) -> Any:
        while self._to_skip > 0:
            if next(self._source, _END) is _END:
                return _END
            self._to_skip -= 1
        return next(self._source, _END)
