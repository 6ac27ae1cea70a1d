from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


class TerminalAccessor(Generic[T]):
    """eager conversions, reached as sequence.to"""

    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._sequence)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._sequence)

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._sequence)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self._sequence))

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary; a later element overwrites an earlier one with the same key"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._sequence}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._sequence))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(list(self._sequence))

    def add_to(self, collection: Any) -> Any:
        """add every element to a mutable collection (list-like or set-like) and return it"""
        add = getattr(collection, 'append', None) or getattr(collection, 'add', None)
        if add is None:
            raise TypeError(f"cannot add elements to {type(collection).__name__}")
        for item in self._sequence:
            add(item)
        return collection

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return self._sequence.size()
        return sum(1 for x in self._sequence if predicate(x))
