"""Segment trees with range updates and single-position queries."""

from __future__ import annotations

import functools
import operator
from collections.abc import Callable, Iterator
from typing import Any

Span = tuple[int, int, int]


class _Tree:
    """Shape shared by the segment trees: node ``n`` has children ``2n+1`` and ``2n+2``."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    def _check_range(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._size:
            raise IndexError(f"range [{left}, {right}] out of bounds")

    @staticmethod
    def _children(node: int, start: int, end: int) -> tuple[Span, Span]:
        mid = (start + end) // 2
        return (2 * node + 1, start, mid), (2 * node + 2, mid + 1, end)

    @staticmethod
    def _puller(nodes: list, combine: Callable) -> Callable[[int, Any, Any], None]:
        """Join step that recomputes a node from its two children."""

        def join(node: int, _first: Any, _second: Any) -> None:
            nodes[node] = combine(nodes[2 * node + 1], nodes[2 * node + 2])

        return join

    def _path(self, index: int) -> Iterator[Span]:
        """Nodes from the root down to the leaf that holds ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        span = (0, 0, self._size - 1)
        while True:
            yield span
            node, start, end = span
            if start == end:
                return
            first, second = self._children(node, start, end)
            span = first if index <= first[2] else second

    def _visit(
        self,
        left: int,
        right: int,
        covered: Callable[[int, int, int], Any],
        *,
        enter: Callable[[int, int, int], None] | None = None,
        join: Callable[[int, Any, Any], Any] | None = None,
        empty: Any = None,
    ) -> Any:
        """Walk the nodes touching ``[left, right]``, calling ``covered`` on the fully covered ones."""
        self._check_range(left, right)

        def walk(node: int, start: int, end: int) -> Any:
            if enter is not None:
                enter(node, start, end)
            if start > right or end < left:
                return empty
            if left <= start and end <= right:
                return covered(node, start, end)
            first, second = self._children(node, start, end)
            results = walk(*first), walk(*second)
            return None if join is None else join(node, *results)

        return walk(0, 0, self._size - 1)

    def _fold(
        self,
        left: int,
        right: int,
        read: Callable[[int], Any],
        combine: Callable[[Any, Any], Any],
        identity: Any,
        enter: Callable[[int, int, int], None] | None = None,
    ) -> Any:
        """Combine the values of the nodes covering ``[left, right]``."""
        return self._visit(
            left,
            right,
            lambda node, _start, _end: read(node),
            enter=enter,
            join=lambda _node, first, second: combine(first, second),
            empty=identity,
        )


class _PathTree(_Tree):
    """Tags are stored on the nodes that cover an update range and combined on the way down."""

    def __init__(self, size: int, merge: Callable[[int, int], int]) -> None:
        super().__init__(size)
        self._merge = merge
        self._nodes = [0] * (4 * size)

    def _tag_range(self, left: int, right: int, value: int) -> None:
        def covered(node: int, _start: int, _end: int) -> None:
            self._nodes[node] = self._merge(self._nodes[node], value)

        self._visit(left, right, covered)

    def _read(self, index: int) -> int:
        return functools.reduce(
            self._merge, (self._nodes[node] for node, _, _ in self._path(index))
        )


class RangeAddTree(_PathTree):
    """Add a value to a range; read one position. All positions start at 0."""

    def __init__(self, size: int) -> None:
        super().__init__(size, operator.add)

    def update(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every position from ``left`` to ``right`` inclusive."""
        self._tag_range(left, right, value)

    def query(self, index: int) -> int:
        """Value at ``index`` after all updates."""
        return self._read(index)


class RangeMaxTree(_PathTree):
    """Raise a range to at least a value; read one position. All positions start at 0."""

    def __init__(self, size: int) -> None:
        super().__init__(size, max)

    def update(self, left: int, right: int, value: int) -> None:
        """Raise every position from ``left`` to ``right`` inclusive to at least ``value``."""
        self._tag_range(left, right, value)

    def query(self, index: int) -> int:
        """Value at ``index`` after all updates."""
        return self._read(index)


class RangeAssignTree(_Tree):
    """Assign a value to a range; read one position. All positions start at 0."""

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._nodes = [0] * (4 * size)
        self._assigned = [False] * (4 * size)

    def _push(self, node: int, start: int, end: int) -> None:
        if not self._assigned[node] or start == end:
            return
        for child in (2 * node + 1, 2 * node + 2):
            self._nodes[child] = self._nodes[node]
            self._assigned[child] = True
        self._assigned[node] = False
        self._nodes[node] = 0

    def update(self, left: int, right: int, value: int) -> None:
        """Set every position from ``left`` to ``right`` inclusive to ``value``."""

        def covered(node: int, _start: int, _end: int) -> None:
            self._nodes[node] = value
            self._assigned[node] = True

        self._visit(left, right, covered, enter=self._push)

    def query(self, index: int) -> int:
        """Value at ``index`` after all assignments."""
        for node, start, end in self._path(index):
            self._push(node, start, end)
        return self._nodes[node]