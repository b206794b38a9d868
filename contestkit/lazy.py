"""Segment trees with lazy range updates and range queries."""

from __future__ import annotations

import math
from collections.abc import Callable

from contestkit.dp import MOD
from contestkit.point_query import _Tree


class _LazyTree(_Tree):
    """Range-update, range-query tree built from the operations it is given."""

    def __init__(
        self,
        size: int,
        *,
        neutral: int,
        identity: float,
        apply: Callable[[int, int], int],
        compose: Callable[[int, int], int],
        combine: Callable,
    ) -> None:
        super().__init__(size)
        self._neutral = neutral
        self._identity = identity
        self._apply = apply
        self._compose = compose
        self._combine = combine
        self._values = [0] * (4 * size)
        self._pending = [neutral] * (4 * size)
        self._pull = self._puller(self._values, combine)

    def _push(self, node: int, start: int, end: int) -> None:
        tag = self._pending[node]
        if tag == self._neutral:
            return
        if start < end:
            for child in (2 * node + 1, 2 * node + 2):
                self._pending[child] = self._compose(self._pending[child], tag)
        self._values[node] = self._apply(self._values[node], tag)
        self._pending[node] = self._neutral

    def _range_update(self, left: int, right: int, value: int) -> None:
        def covered(node: int, start: int, end: int) -> None:
            self._pending[node] = self._compose(self._pending[node], value)
            self._push(node, start, end)

        self._visit(left, right, covered, enter=self._push, join=self._pull)

    def _range_query(self, left: int, right: int):
        return self._fold(
            left,
            right,
            self._values.__getitem__,
            self._combine,
            self._identity,
            enter=self._push,
        )


class AddMinTree(_LazyTree):
    """Add to a range; query the minimum of a range. Positions start at 0."""

    def __init__(self, size: int) -> None:
        super().__init__(
            size,
            neutral=0,
            identity=math.inf,
            apply=lambda value, tag: value + tag,
            compose=lambda old, new: old + new,
            combine=min,
        )

    def update(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to positions ``left`` through ``right`` inclusive."""
        self._range_update(left, right, value)

    def query(self, left: int, right: int) -> int:
        """Minimum of positions ``left`` through ``right`` inclusive."""
        return self._range_query(left, right)


class OrAndTree(_LazyTree):
    """OR a value into a range; query the bitwise AND of a range. Positions start at 0."""

    def __init__(self, size: int) -> None:
        super().__init__(
            size,
            neutral=0,
            identity=-1,
            apply=lambda value, tag: value | tag,
            compose=lambda old, new: old | new,
            combine=lambda a, b: a & b,
        )

    def update(self, left: int, right: int, value: int) -> None:
        """OR ``value`` into positions ``left`` through ``right`` inclusive."""
        self._range_update(left, right, value)

    def query(self, left: int, right: int) -> int:
        """Bitwise AND of positions ``left`` through ``right`` inclusive."""
        return self._range_query(left, right)


class MultiplySumTree(_LazyTree):
    """Multiply a range; query the sum of a range, all modulo 1e9+7. Positions start at 0."""

    def __init__(self, size: int) -> None:
        super().__init__(
            size,
            neutral=1,
            identity=0,
            apply=lambda value, tag: value * tag % MOD,
            compose=lambda old, new: old * new % MOD,
            combine=lambda a, b: (a + b) % MOD,
        )

    def update(self, left: int, right: int, value: int) -> None:
        """Multiply positions ``left`` through ``right`` inclusive by ``value``."""
        self._range_update(left, right, value % MOD)

    def query(self, left: int, right: int) -> int:
        """Sum of positions ``left`` through ``right`` inclusive, modulo 1e9+7."""
        return self._range_query(left, right)

    def set(self, index: int, value: int) -> None:
        """Set the value at ``index``."""

        def covered(node: int, _start: int, _end: int) -> None:
            self._values[node] = value % MOD

        self._visit(index, index, covered, enter=self._push, join=self._pull)