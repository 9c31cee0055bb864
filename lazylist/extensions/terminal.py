from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..lazy_list import LazyList

class TerminalAccessor(Generic[T]):
    def __init__(self, lazy_list_instance: 'LazyList[T]'):
        self._list = lazy_list_instance

    def _realize(self, limit: Optional[int]) -> List[T]:
        """full walk, or a bounded one so infinite lists can be converted"""
        if limit is None: return self._list.to_list()
        return self._list.take(limit)

    def list(self, limit: Optional[int] = None) -> List[T]:
        """convert to list"""
        return self._realize(limit)

    def array(self, limit: Optional[int] = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._realize(limit))

    def pandas(self, limit: Optional[int] = None) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._realize(limit))

    def df(self, limit: Optional[int] = None) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._realize(limit))

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count realized elements"""
        if predicate is None: return sum(1 for _ in self._list._walk())
        return sum(1 for x in self._list._walk() if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition, stopping at the first hit"""
        if predicate is None:
            for _ in self._list._walk(): return True
            return False
        return any(predicate(x) for x in self._list._walk())

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition, stopping at the first miss"""
        return all(predicate(x) for x in self._list._walk())

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element. probing stops as soon as one is found"""
        for item in self._list._walk():
            if predicate is None or predicate(item): return item
        if predicate is None: raise ValueError("sequence contains no elements")
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        for item in self._list._walk():
            if predicate is None or predicate(item): return item
        return default
