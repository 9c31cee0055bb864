from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..lazy_list import LazyList

class _CoreOperations(Generic[T]):
    def map(self: 'LazyList[T]', transform: Selector[T, U]) -> 'LazyList[U]':
        """lazily apply transform to every element"""
        from ..lazy_list import LazyList
        def map_producer(index: int) -> Outcome[U]:
            outcome = self.get_at(index)
            # stop and skip pass through untouched so map after filter keeps filtering
            if isinstance(outcome, Value):
                return Value(transform(outcome.value))
            return outcome
        return LazyList(map_producer)

    def filter(self: 'LazyList[T]', predicate: Predicate[T]) -> 'LazyList[T]':
        """lazily drop elements that fail the predicate, marking them as skipped"""
        from ..lazy_list import LazyList
        def filter_producer(index: int) -> Outcome[T]:
            outcome = self.get_at(index)
            if isinstance(outcome, Value) and not predicate(outcome.value):
                return SKIP
            return outcome
        return LazyList(filter_producer)

    def select(self: 'LazyList[T]', transform: Selector[T, U]) -> 'LazyList[U]':
        """alias for map"""
        return self.map(transform)

    def where(self: 'LazyList[T]', predicate: Predicate[T]) -> 'LazyList[T]':
        """alias for filter"""
        return self.filter(predicate)
