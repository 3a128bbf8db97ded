"""Kruskal's minimum spanning forest on top of union-find."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from contestkit.union_find import UnionFind


@dataclass
class Edge:
    """Weighted undirected edge; ``index`` is its insertion position."""

    a: int
    b: int
    weight: Any
    index: int = -1
    in_tree: bool = False


class Kruskal:
    """Collects edges and picks a minimum spanning forest among them."""

    def __init__(self, n: int) -> None:
        self.n = n
        self.union_find = UnionFind(n)
        self.edges: list[Edge] = []
        self.original_in_tree: list[bool] = []

    def add_edge(self, a: int, b: int, weight) -> None:
        """Add an edge between ``a`` and ``b``."""
        self.edges.append(Edge(a, b, weight, len(self.edges)))
        self.original_in_tree.append(False)

    def solve(self):
        """Return the total weight of a minimum spanning forest, marking its edges.

        Afterwards ``edges`` is sorted by weight, each edge's ``in_tree`` tells whether it
        was chosen and ``original_in_tree`` holds the same flags by insertion order.
        """
        self.union_find = UnionFind(self.n)
        self.original_in_tree = [False] * len(self.edges)
        self.edges.sort(key=lambda edge: edge.weight)
        total = 0
        for edge in self.edges:
            edge.in_tree = self.union_find.unite(edge.a, edge.b)
            if edge.in_tree:
                total += edge.weight
                self.original_in_tree[edge.index] = True
        return total