from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .cursor import Cursor

# --- combinators and forcing ---
from .extensions.core import _CoreOperations
from .extensions.forcing import _ForcingOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class ILazyList(ABC, Generic[T]):
    @abstractmethod
    def get_at(self, index: int) -> Outcome[T]:
        """get the producer outcome at a single index"""
        pass

# --- base implementation ---

class _BaseLazyList(ILazyList[T]):
    def __init__(self, producer: Producer[T]):
        """init with a function from index to Value, Skip or Stop"""
        if not callable(producer):
            raise TypeError(f"producer must be callable, got {type(producer).__name__}")
        self._producer = producer

    def get_at(self, index: int) -> Outcome[T]:
        """query the producer. nothing is cached, every call re-runs the chain"""
        return check_outcome(self._producer(index), index)

    def cursor(self) -> Cursor[T]:
        """a fresh cursor positioned at the start"""
        return Cursor(self)

    def indexed(self) -> Iterator[Tuple[int, T]]:
        """iterate as (key, value) pairs with contiguous keys across skipped elements"""
        cursor = self.cursor()
        while True:
            # one resolution per position, so each index is probed once per pass
            outcome = cursor.outcome()
            if isinstance(outcome, Stop):
                return
            yield cursor.key, outcome.value
            cursor.advance()

    def __iter__(self) -> Iterator[T]:
        for _, value in self.indexed():
            yield value

# --- main class ---

class LazyList(
    _BaseLazyList[T],
    _CoreOperations[T],
    _ForcingOperations[T]
):
    """an index-driven lazy list. map and filter compose, nothing runs until forced."""
    def __init__(self, producer: Producer[T]):
        super().__init__(producer)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"LazyList(producer={getattr(self._producer, '__qualname__', self._producer)!r})"
