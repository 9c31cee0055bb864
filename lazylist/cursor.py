from __future__ import annotations
import typing
from .types import *

if typing.TYPE_CHECKING:
    from .lazy_list import LazyList


class Cursor(Generic[T]):
    """
    explicit, restartable position over a lazy list.

    'key' is the 0-based position reported to the caller and grows by one per
    element. 'skip_offset' counts the underlying indices eaten by skipped
    elements, so the producer is probed at key + skip_offset and keys stay
    contiguous however many elements were filtered out.

    the outcome resolved for the current position is held until the cursor
    moves, so reading a position any number of times runs the chain once.
    """

    def __init__(self, lazy_list: 'LazyList[T]'):
        self._list = lazy_list
        self.key = 0
        self.skip_offset = 0
        self._resolved: Optional[Outcome[T]] = None

    def outcome(self) -> Outcome[T]:
        """scan forward from where the last resolution stopped to a value or stop"""
        if self._resolved is None:
            while True:
                outcome = self._list.get_at(self.key + self.skip_offset)
                if not isinstance(outcome, Skip):
                    break
                self.skip_offset += 1
            self._resolved = outcome
        return self._resolved

    def valid(self) -> bool:
        """true while the current position holds a value"""
        return isinstance(self.outcome(), Value)

    has_next = valid

    def current(self) -> T:
        """value at the current position"""
        outcome = self.outcome()
        if isinstance(outcome, Stop):
            raise IndexError(f"cursor is past the end of the list at key {self.key}")
        return outcome.value

    def advance(self) -> None:
        """
        move one position forward. the current position is resolved first so
        its skips are counted even if it was never read; the skip offset is
        kept. a cursor sitting on stop stays where it is.
        """
        if isinstance(self.outcome(), Stop):
            return
        self.key += 1
        self._resolved = None

    def reset(self) -> None:
        self.key = 0
        self.skip_offset = 0
        self._resolved = None

    def __repr__(self) -> str:
        return f"Cursor(key={self.key}, skip_offset={self.skip_offset})"
