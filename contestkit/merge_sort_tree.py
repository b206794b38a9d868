"""Merge sort tree counting distinct values per covering node."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable
import heapq
from itertools import groupby


class MergeSortTree:
    """Segment tree whose nodes hold the sorted values of their range.

    A query sums, over the nodes that exactly cover the range, the number of
    distinct values each node holds within ``[low, high]``.
    """

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        if not values:
            raise ValueError("values must not be empty")
        self._size = len(values)
        self._nodes: list[list[int]] = [[] for _ in range(4 * self._size)]
        self._build(values, 0, 0, self._size - 1)

    def _build(self, values: list[int], node: int, start: int, end: int) -> None:
        if start == end:
            self._nodes[node] = [values[start]]
            return
        mid = (start + end) // 2
        self._build(values, 2 * node + 1, start, mid)
        self._build(values, 2 * node + 2, mid + 1, end)
        self._nodes[node] = list(
            heapq.merge(self._nodes[2 * node + 1], self._nodes[2 * node + 2])
        )

    @staticmethod
    def _count_distinct(ordered: list[int], low: int | None, high: int | None) -> int:
        first = 0 if low is None else bisect_left(ordered, low)
        last = len(ordered) if high is None else bisect_right(ordered, high)
        return sum(1 for _ in groupby(ordered[first:last]))

    def query(
        self, left: int, right: int, low: int | None = None, high: int | None = None
    ) -> int:
        """Count values in ``[low, high]`` over positions ``left`` to ``right``.

        ``None`` leaves a bound open.
        """

        def walk(node: int, start: int, end: int) -> int:
            if start > right or end < left:
                return 0
            if left <= start and end <= right:
                return self._count_distinct(self._nodes[node], low, high)
            mid = (start + end) // 2
            return walk(2 * node + 1, start, mid) + walk(2 * node + 2, mid + 1, end)

        return walk(0, 0, self._size - 1)