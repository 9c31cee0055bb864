from dataclasses import dataclass
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
Accumulator = Callable[[U, T], U]


@dataclass(frozen=True)
class Value(Generic[T]):
    """a real element produced at an index"""
    value: T


@dataclass(frozen=True)
class Skip:
    """no element at this index, but the sequence continues past it"""


@dataclass(frozen=True)
class Stop:
    """the sequence ends at this index"""


Outcome = Union[Value[T], Skip, Stop]
Producer = Callable[[int], Outcome[T]]

SKIP = Skip()
STOP = Stop()


def check_outcome(outcome: Any, index: int) -> Outcome:
    """guard for producers that hand back a bare value instead of an outcome"""
    if isinstance(outcome, (Value, Skip, Stop)):
        return outcome
    raise TypeError(
        f"producer must return Value, Skip or Stop, got {type(outcome).__name__} at index {index}"
    )
