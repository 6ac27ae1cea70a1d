from __future__ import annotations
import typing
from ..types import *
from ..maybe import Maybe

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

_NO_ELEMENT = object()


class _QueryOperations(Generic[T]):
    """terminal scans. each pulls only as many elements as its answer needs"""

    def first(self: 'Sequence[T]') -> Maybe[T]:
        """first element, or nothing when empty"""
        for item in self._source:
            return Maybe.of(item)
        return Maybe.nothing()

    def single(self: 'Sequence[T]') -> Maybe[T]:
        """
        the only element of a one-element sequence. zero elements and more than
        one element both give nothing; use size() to tell those cases apart.
        """
        if self.size() != 1:
            return Maybe.nothing()
        return self.first()

    def index_of(self: 'Sequence[T]', value: Any) -> int:
        """position of the first element equal to value, or -1"""
        for index, item in enumerate(self._source):
            if item == value:
                return index
        return -1

    def index_where(self: 'Sequence[T]', predicate: Predicate[T]) -> int:
        """position of the first element satisfying predicate, or -1"""
        for index, item in enumerate(self._source):
            if predicate(item):
                return index
        return -1

    def contains(self: 'Sequence[T]', value: Any) -> bool:
        return self.index_of(value) != -1

    def any(self: 'Sequence[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition (or, without one, if there is any element)"""
        if predicate is None:
            return not self.is_empty()
        return self.index_where(predicate) != -1

    def all(self: 'Sequence[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition; true for an empty sequence"""
        for item in self._source:
            if not predicate(item):
                return False
        return True

    def min_by(self: 'Sequence[T]', key_selector: KeySelector[T, K]) -> Maybe[T]:
        """element with the smallest key; the earliest one wins ties"""
        return self._extreme_by(key_selector, lambda candidate, best: candidate < best)

    def max_by(self: 'Sequence[T]', key_selector: KeySelector[T, K]) -> Maybe[T]:
        """element with the largest key; the earliest one wins ties"""
        return self._extreme_by(key_selector, lambda candidate, best: candidate > best)

    def _extreme_by(self: 'Sequence[T]', key_selector: KeySelector[T, K],
                    beats: Callable[[K, K], bool]) -> Maybe[T]:
        iterator = iter(self._source)
        best_item = next(iterator, _NO_ELEMENT)
        if best_item is _NO_ELEMENT:
            return Maybe.nothing()
        # each key is computed exactly once, the running best keeps its key
        best_key = key_selector(best_item)
        for item in iterator:
            key = key_selector(item)
            if beats(key, best_key):
                best_item, best_key = item, key
        return Maybe.of(best_item)

    def each(self: 'Sequence[T]', action: Action[T]) -> 'Sequence[T]':
        """
        performs the action on each element in order for side-effects.
        this is an EAGER operation; returns this sequence to allow chaining.
        """
        for item in self._source:
            action(item)
        return self

    def match(self: 'Sequence[T]', if_empty: Supplier[R], if_any: BiFunction[T, 'Sequence[T]', R]) -> R:
        """
        if_empty() for an empty sequence, otherwise if_any(first, rest).
        rest is a fresh traversal of the source, so over a single-pass source
        (a generator) it starts after the element already taken as first and
        drops one more; wrap such sources in a list first.
        """
        iterator = iter(self._source)
        head = next(iterator, _NO_ELEMENT)
        if head is _NO_ELEMENT:
            return if_empty()
        return if_any(head, self.rest())

    def join_to_string(self: 'Sequence[T]', delimiter: str) -> str:
        return delimiter.join(str(item) for item in self._source)

