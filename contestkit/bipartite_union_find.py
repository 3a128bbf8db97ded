"""Union-find that tracks parity between elements and whether each component is bipartite."""

from __future__ import annotations

import argparse
import sys


class BipartiteUnionFind:
    """Disjoint sets over ``0..n`` with "same side" / "different side" constraints."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self._bipartite = [True] * (n + 1)
        # Parity of each element relative to its parent.
        self._parity = [False] * (n + 1)
        self.components = n

    def find(self, x: int) -> int:
        """Return the representative of ``x``, compressing the path and its parities."""
        path = []
        while self._parent[x] != x:
            path.append(x)
            x = self._parent[x]
        root = x
        for node in reversed(path):
            self._parity[node] ^= self._parity[self._parent[node]]
            self._parent[node] = root
        return root

    def query_component(self, x: int, y: int) -> bool:
        """Return whether ``x`` and ``y`` are in the same component."""
        return self.find(x) == self.find(y)

    def query_parity(self, x: int, y: int) -> bool:
        """Return True if ``x`` and ``y`` are on different sides; they must be connected."""
        if not self.query_component(x, y):
            raise ValueError(f"{x} and {y} are in different components")
        return self._parity[x] ^ self._parity[y]

    def is_bipartite(self, x: int) -> bool:
        """Return whether the component of ``x`` has no conflicting constraint."""
        return self._bipartite[self.find(x)]

    def unite(self, x: int, y: int, different: bool = True) -> tuple[bool, bool]:
        """Add a constraint between ``x`` and ``y``; return (merged, consistent)."""
        x_root, y_root = self.find(x), self.find(y)
        relative = self._parity[x] ^ self._parity[y] ^ different
        if x_root == y_root:
            consistent = not relative
            self._bipartite[x_root] = self._bipartite[x_root] and consistent
            return False, consistent

        if self._size[x_root] < self._size[y_root]:
            x_root, y_root = y_root, x_root
        self._parent[y_root] = x_root
        self._size[x_root] += self._size[y_root]
        self._bipartite[x_root] = self._bipartite[x_root] and self._bipartite[y_root]
        self._parity[y_root] = relative
        self.components -= 1
        return True, True

    def add_different_edge(self, x: int, y: int) -> tuple[bool, bool]:
        """Require ``x`` and ``y`` to be on different sides (an ordinary edge)."""
        return self.unite(x, y, True)

    def add_same_edge(self, x: int, y: int) -> tuple[bool, bool]:
        """Require ``x`` and ``y`` to be on the same side."""
        return self.unite(x, y, False)


def main(argv: list[str] | None = None) -> None:
    """Answer component/parity (type 1) and edge (type 2) queries read from standard input."""
    parser = argparse.ArgumentParser(
        description="Read N, Q and Q queries 'type a b' from standard input."
    )
    parser.parse_args(argv)
    numbers = [int(token) for token in sys.stdin.read().split()]
    if len(numbers) < 2:
        parser.error("expected N and Q on standard input")
    n, count = numbers[0], numbers[1]
    sets = BipartiteUnionFind(n)
    lines = []
    for start in range(2, 2 + 3 * count, 3):
        kind, a, b = numbers[start:start + 3]
        if kind == 1:
            if sets.query_component(a, b):
                lines.append(f"1 {int(sets.query_parity(a, b))}")
            else:
                lines.append("0")
        elif kind == 2:
            merged, consistent = sets.unite(a, b)
            lines.append(f"{int(merged)} {int(consistent)}")
        else:
            parser.error(f"unknown query type: {kind}")
    sys.stdout.write("".join(f"{line}\n" for line in lines))


if __name__ == "__main__":
    main()