from __future__ import annotations
import typing
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Sequence


class Maybe(Generic[T]):
    """
    a container that holds zero or one value.
    None never lives inside a just: Maybe.of(None) is the shared nothing instance,
    and every transformation routes its result back through Maybe.of.
    """
    __slots__ = ('_value',)

    def __init__(self, value: Optional[T]):
        """use Maybe.of / Maybe.nothing rather than calling this directly"""
        self._value = value

    # --- factories ---

    @staticmethod
    def of(value: Optional[T]) -> Maybe[T]:
        return NOTHING if value is None else Maybe(value)

    @staticmethod
    def nothing() -> Maybe[Any]:
        return NOTHING

    @staticmethod
    def any_of(*values: Optional[T]) -> Maybe[T]:
        """first non-None value"""
        for value in values:
            if value is not None:
                return Maybe(value)
        return NOTHING

    @staticmethod
    def any_of_get(*suppliers: Supplier[Optional[T]]) -> Maybe[T]:
        """first non-None supplier result; later suppliers are never called"""
        for supplier in suppliers:
            value = supplier()
            if value is not None:
                return Maybe(value)
        return NOTHING

    # --- inspection ---

    def is_present(self) -> bool:
        return self._value is not None

    def is_nothing(self) -> bool:
        return self._value is None

    def as_nullable(self) -> Optional[T]:
        return self._value

    def contains(self, value: Any) -> bool:
        return self._value is not None and self._value == value

    def any(self, predicate: Predicate[T]) -> bool:
        return self._value is not None and bool(predicate(self._value))

    # --- substitution ---

    def or_else(self, if_nothing: T) -> T:
        return self._value if self._value is not None else if_nothing

    def or_else_get(self, if_nothing: Supplier[T]) -> T:
        return self._value if self._value is not None else if_nothing()

    def or_(self, if_nothing: Maybe[T]) -> Maybe[T]:
        return self if self._value is not None else if_nothing

    def or_get(self, if_nothing: Supplier[Maybe[T]]) -> Maybe[T]:
        return self if self._value is not None else if_nothing()

    def or_maybe(self, if_nothing: Optional[T]) -> Maybe[T]:
        return self if self._value is not None else Maybe.of(if_nothing)

    def or_maybe_get(self, if_nothing: Supplier[Optional[T]]) -> Maybe[T]:
        return self if self._value is not None else Maybe.of(if_nothing())

    # --- transformation ---

    def each(self, action: Action[T], if_nothing: Optional[Callable[[], Any]] = None) -> Maybe[T]:
        """
        runs action with the value when present, otherwise if_nothing (when given).
        returns this instance so calls can keep chaining.
        """
        if self._value is not None:
            action(self._value)
        elif if_nothing is not None:
            if_nothing()
        return self

    def map(self, mapper: Selector[T, Optional[U]]) -> Maybe[U]:
        return NOTHING if self._value is None else Maybe.of(mapper(self._value))

    def match(self, if_nothing: Supplier[R], if_just: Selector[T, R]) -> R:
        return if_nothing() if self._value is None else if_just(self._value)

    def flat_map(self, mapper: Selector[T, Maybe[U]]) -> Maybe[U]:
        return NOTHING if self._value is None else mapper(self._value)

    def sequence_map(self, mapper: Selector[T, Iterable[U]]) -> 'Sequence[U]':
        """applies an iterable-returning mapper and wraps the result as a sequence"""
        from .sequence import Sequence
        return Sequence.empty() if self._value is None else Sequence.of(mapper(self._value))

    def filter(self, predicate: Predicate[T]) -> Maybe[T]:
        return self if self._value is not None and predicate(self._value) else NOTHING

    def of_class(self, cls: Type[U]) -> Maybe[U]:
        return self if isinstance(self._value, cls) else NOTHING

    def zip(self, other: Maybe[U]) -> Maybe[Pair[T, U]]:
        if self._value is None or other._value is None:
            return NOTHING
        return Maybe(Pair(self._value, other._value))

    # --- protocol ---

    def __iter__(self) -> Iterator[T]:
        if self._value is not None:
            yield self._value

    def __bool__(self) -> bool:
        return self._value is not None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return "Maybe{Nothing}" if self._value is None else f"Maybe{{Just {self._value}}}"

    def __repr__(self) -> str:
        return "Maybe.nothing()" if self._value is None else f"Maybe.of({self._value!r})"


# the one shared empty instance
NOTHING: Maybe[Any] = Maybe(None)
