"""Point-update segment tree and binary searches over its prefix aggregates."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

from contestkit.point_query import _Tree

T = TypeVar("T")


class SegmentTree(_Tree, Generic[T]):
    """Point assignment and inclusive range aggregation under ``combine``."""

    def __init__(self, size: int, combine: Callable[[T, T], T], identity: T) -> None:
        super().__init__(size)
        self._combine = combine
        self._identity = identity
        self._nodes: list[T] = [identity] * (4 * size)
        self._pull = self._puller(self._nodes, combine)

    def update(self, index: int, value: T) -> None:
        """Set the value at ``index``."""

        def covered(node: int, _start: int, _end: int) -> None:
            self._nodes[node] = value

        self._visit(index, index, covered, join=self._pull)

    def query(self, left: int, right: int) -> T:
        """Aggregate of positions ``left`` through ``right`` inclusive."""
        return self._fold(
            left, right, self._nodes.__getitem__, self._combine, self._identity
        )


def _filled(values: Sequence[int], combine: Callable[[int, int], int]) -> SegmentTree[int]:
    tree: SegmentTree[int] = SegmentTree(len(values) + 1, combine, 0)
    for index, value in enumerate(values):
        tree.update(index, value)
    return tree


def max_tree(values: Sequence[int]) -> SegmentTree[int]:
    """Maximum tree over ``values`` with identity 0 and one spare trailing slot."""
    return _filled(values, max)


def sum_tree(values: Sequence[int]) -> SegmentTree[int]:
    """Sum tree over ``values`` with one spare trailing slot."""
    return _filled(values, operator.add)


def first_at_least_from(
    tree: SegmentTree[int], length: int, k: int, start: int
) -> int | None:
    """Lowest index from ``start`` whose aggregate over ``[start, index]`` reaches ``k``."""
    found = None
    low, high = start, length - 1
    while low <= high:
        mid = (low + high) // 2
        if tree.query(start, mid) >= k:
            found = mid
            high = mid - 1
        else:
            low = mid + 1
    return found


def first_at_least(tree: SegmentTree[int], length: int, k: int) -> int | None:
    """Lowest index below ``length`` whose prefix maximum reaches ``k``, or ``None``."""
    return first_at_least_from(tree, length, k, 0)


def kth_one(tree: SegmentTree[int], length: int, k: int) -> int | None:
    """Index of the ``k``-th one (counting from 0) in a 0/1 sum tree, or ``None``."""
    return first_at_least(tree, length, k + 1)


def toggle(tree: SegmentTree[int], index: int) -> None:
    """Flip a 0/1 value at ``index``."""
    tree.update(index, 1 - tree.query(index, index))