"""Disjoint-set union by size with path compression."""

from __future__ import annotations

import argparse
import sys


class UnionFind:
    """Disjoint sets over elements ``0..n``; both 0- and 1-based labels fit."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self.components = n

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if they were already one set."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._size[x] < self._size[y]:
            x, y = y, x
        self._parent[y] = x
        self._size[x] += self._size[y]
        self.components -= 1
        return True

    def size(self, x: int) -> int:
        """Return the number of elements in the set holding ``x``."""
        return self._size[self.find(x)]


def main(argv: list[str] | None = None) -> None:
    """Answer connectivity (type 1) and union (type 2) queries read from standard input."""
    parser = argparse.ArgumentParser(
        description="Read N, Q and Q queries 'type a b' from standard input."
    )
    parser.parse_args(argv)
    numbers = [int(token) for token in sys.stdin.read().split()]
    if len(numbers) < 2:
        parser.error("expected N and Q on standard input")
    n, count = numbers[0], numbers[1]
    sets = UnionFind(n)
    lines = []
    for start in range(2, 2 + 3 * count, 3):
        kind, a, b = numbers[start:start + 3]
        if kind == 1:
            lines.append(str(int(sets.find(a) == sets.find(b))))
        elif kind == 2:
            lines.append(str(int(sets.unite(a, b))))
    sys.stdout.write("".join(f"{line}\n" for line in lines))


if __name__ == "__main__":
    main()