"""Range-minimum queries with square-root decomposition."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import math


class SqrtRangeMin:
    """Point updates and inclusive range-minimum queries over a list."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._block = math.isqrt(len(self._values)) + 1
        self._blocks = [
            min(self._values[start : start + self._block])
            for start in range(0, len(self._values), self._block)
        ]

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range")

    def _pieces(self, left: int, right: int) -> Iterator[int]:
        i = left
        while i <= right:
            if i % self._block == 0 and i + self._block - 1 <= right:
                yield self._blocks[i // self._block]
                i += self._block
            else:
                yield self._values[i]
                i += 1

    def query(self, left: int, right: int) -> int:
        """Minimum of the values at positions ``left`` through ``right`` inclusive."""
        self._check(left)
        self._check(right)
        if left > right:
            raise IndexError("left must not exceed right")
        return min(self._pieces(left, right))

    def update(self, index: int, value: int) -> None:
        """Set the value at ``index``."""
        self._check(index)
        self._values[index] = value
        block = index // self._block
        start = block * self._block
        self._blocks[block] = min(self._values[start : start + self._block])