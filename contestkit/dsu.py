"""Disjoint-set structures."""

from __future__ import annotations

from collections.abc import Hashable, Iterable


class RollbackDSU:
    """Union-find without path compression whose unions can be undone to a checkpoint."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [1] * n
        self._components = n
        self._history: list[tuple[int, int, int, int]] = []
        self._checkpoints: list[int] = []

    def find(self, a: int) -> int:
        """Return the representative of the set holding ``a``."""
        while self._parent[a] != a:
            a = self._parent[a]
        return a

    def union(self, a: int, b: int) -> None:
        """Merge the sets holding ``a`` and ``b``."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return
        rank_a, rank_b = self._rank[root_a], self._rank[root_b]
        self._history.append((root_a, root_b, rank_a, rank_b))
        if rank_a < rank_b:
            self._parent[root_a] = root_b
        elif rank_a > rank_b:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] += rank_b
        self._components -= 1

    def persist(self) -> None:
        """Record a checkpoint that :meth:`rollback` returns to."""
        self._checkpoints.append(len(self._history))

    def rollback(self) -> None:
        """Undo every union made since the latest checkpoint and drop that checkpoint."""
        if not self._checkpoints:
            raise IndexError("no checkpoint to roll back to")
        mark = self._checkpoints.pop()
        while len(self._history) > mark:
            root_a, root_b, rank_a, rank_b = self._history.pop()
            self._parent[root_a] = root_a
            self._parent[root_b] = root_b
            self._rank[root_a] = rank_a
            self._rank[root_b] = rank_b
            self._components += 1

    def components(self) -> int:
        """Number of disjoint sets."""
        return self._components


class ValueMap:
    """An array in which every occurrence-tracked value can be renamed.

    Each distinct value is tracked through the index of its first occurrence;
    renaming ``x`` to ``y`` rewrites the element at that index. Indices are
    never merged, so every index is its own root.
    """

    def __init__(self, values: Iterable[Hashable]) -> None:
        self._values = list(values)
        self._parent = list(range(len(self._values)))
        self._first: dict[Hashable, int] = {}
        for index, value in enumerate(self._values):
            self._first.setdefault(value, index)

    def find(self, index: int) -> int:
        """Return the root index for ``index``."""
        while self._parent[index] != index:
            index = self._parent[index]
        return index

    def replace(self, x: Hashable, y: Hashable) -> None:
        """Rename value ``x`` to ``y``; does nothing when ``x`` is not tracked."""
        if x not in self._first:
            return
        root = self.find(self._first.pop(x))
        self._first[y] = root
        self._values[root] = y

    def __contains__(self, value: object) -> bool:
        return value in self._first

    def __getitem__(self, index: int) -> Hashable:
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)