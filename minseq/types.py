from dataclasses import dataclass
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
R = TypeVar('R')
F = TypeVar('F')
S = TypeVar('S')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Supplier = Callable[[], T]
Action = Callable[[T], Any]
BiFunction = Callable[[T, U], R]


class UnsupportedOperationError(TypeError):
    """raised when an iterator is asked to do something it never supports (e.g. removal)"""
    pass


@dataclass(frozen=True)
class Pair(Generic[F, S]):
    """immutable two-slot tuple used for zip results and sort keys"""
    first: F
    second: S

    @staticmethod
    def of(first: F, second: S) -> 'Pair[F, S]':
        return Pair(first, second)

    @staticmethod
    def first_of(pair: 'Pair[F, S]') -> F:
        return pair.first

    @staticmethod
    def second_of(pair: 'Pair[F, S]') -> S:
        return pair.second

    def __repr__(self) -> str:
        return f"Pair({self.first!r}, {self.second!r})"
