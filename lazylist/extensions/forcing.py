from __future__ import annotations
import typing
import logging
from ..types import *

if typing.TYPE_CHECKING:
    from ..lazy_list import LazyList

logger = logging.getLogger(__name__)


class _ForcingOperations(Generic[T]):
    def _walk(self: 'LazyList[T]') -> Iterator[T]:
        """
        drive the producer from index 0 upward, yielding each realized value.
        skips are passed over, the walk ends on the first stop. an infinite
        producer makes this walk forever; callers bound it themselves.
        """
        index = 0
        while True:
            outcome = self.get_at(index)
            if isinstance(outcome, Stop):
                return
            if isinstance(outcome, Value):
                yield outcome.value
            index += 1

    def to_list(self: 'LazyList[T]') -> List[T]:
        """realize every element. BEWARE: never returns on an infinite list"""
        result = list(self._walk())
        logger.debug(f"to_list realized {len(result)} values")
        return result

    def take(self: 'LazyList[T]', count: int) -> List[T]:
        """
        realize at most the first 'count' values. skipped indices do not count
        toward the limit, and a shorter list is returned unpadded.
        """
        if count < 0: raise ValueError("count must be non-negative")
        result = []
        if count == 0:
            return result
        for value in self._walk():
            result.append(value)
            if len(result) == count:
                break
        logger.debug(f"take({count}) realized {len(result)} values")
        return result

    def reduce(self: 'LazyList[T]', initial: U, combine: Accumulator[U, T]) -> U:
        """strict left fold over the realized values, starting from initial"""
        accumulator = initial
        folded = 0
        for value in self._walk():
            accumulator = combine(accumulator, value)
            folded += 1
        logger.debug(f"reduce folded {folded} values")
        return accumulator
