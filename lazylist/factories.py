import typing
from collections.abc import Sequence as _SequenceABC
from .types import *

if typing.TYPE_CHECKING:
    from .lazy_list import LazyList

def from_producer(producer: Producer[T]) -> 'LazyList[T]':
    """create lazy list from an index -> Value/Skip/Stop function"""
    from .lazy_list import LazyList
    return LazyList(producer)

def from_iterable(data: Iterable[T]) -> 'LazyList[T]':
    """
    create lazy list over a fixed collection. indices past the end are stop.
    sequences are read in place; any other iterable is captured once, here.
    """
    from .lazy_list import LazyList
    items = data if isinstance(data, _SequenceABC) else tuple(data)
    size = len(items)
    def collection_producer(index: int) -> Outcome[T]:
        if index < size: return Value(items[index])
        return STOP
    return LazyList(collection_producer)

def generate(generator_func: Callable[[int], T]) -> 'LazyList[T]':
    """infinite lazy list with generator_func(i) at every index i"""
    from .lazy_list import LazyList
    return LazyList(lambda index: Value(generator_func(index)))

def from_range(start: int, count: Optional[int] = None) -> 'LazyList[int]':
    """create lazy list of consecutive ints, endless when count is None"""
    from .lazy_list import LazyList
    if count is not None and count < 0: raise ValueError("count must be non-negative")
    def range_producer(index: int) -> Outcome[int]:
        if count is not None and index >= count: return STOP
        return Value(start + index)
    return LazyList(range_producer)

def repeat(item: T, count: Optional[int] = None) -> 'LazyList[T]':
    """create lazy list with repeated item, endless when count is None"""
    from .lazy_list import LazyList
    if count is not None and count < 0: raise ValueError("count must be non-negative")
    def repeat_producer(index: int) -> Outcome[T]:
        if count is not None and index >= count: return STOP
        return Value(item)
    return LazyList(repeat_producer)

def empty() -> 'LazyList[Any]':
    """create empty lazy list"""
    from .lazy_list import LazyList
    return LazyList(lambda index: STOP)

# --- aliases ---
from_array = from_iterable
lazy = from_iterable
L = from_iterable
