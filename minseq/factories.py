import typing
from itertools import repeat as _repeat
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Sequence


def from_iterable(data: Optional[Iterable[T]]) -> 'Sequence[T]':
    """create sequence from iterable"""
    from .sequence import Sequence
    return Sequence.of(data)


def of(*items: T) -> 'Sequence[T]':
    """create sequence from the given elements"""
    from .sequence import Sequence
    return Sequence.of_items(*items)


def from_range(start: int, count: int) -> 'Sequence[int]':
    """create sequence from range"""
    from .sequence import Sequence
    if count < 0:
        raise ValueError("count must be non-negative")
    return Sequence.of(range(start, start + count))


def repeat(item: T, count: int) -> 'Sequence[T]':
    """create sequence with repeated item"""
    from .sequence import Sequence, _Deferred
    if count < 0:
        raise ValueError("count must be non-negative")
    return Sequence(_Deferred(lambda: _repeat(item, count)), count)


def generate(generator_func: Supplier[T], count: int) -> 'Sequence[T]':
    """generate sequence using a function; it is called again on every traversal"""
    from .sequence import Sequence, _Deferred
    if count < 0:
        raise ValueError("count must be non-negative")
    return Sequence(_Deferred(lambda: (generator_func() for _ in range(count))), count)


def empty() -> 'Sequence[Any]':
    """the shared empty sequence"""
    from .sequence import Sequence
    return Sequence.empty()


# --- aliases ---
S = from_iterable
seq = from_iterable
