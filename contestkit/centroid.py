"""Centroid decomposition of trees and counting short weighted paths with it."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left, bisect_right
from collections.abc import Callable, Iterable
from itertools import groupby

from contestkit.fenwick import FenwickTree


class CentroidDecomposition:
    """Weighted tree on nodes ``0..n-1`` that can be split recursively at centroids.

    After exploring from a root, ``nodes`` lists the reached nodes in preorder (so
    nodes of each child subtree are contiguous) and ``depth``, ``subtree_size``,
    ``subroot`` and ``weighted_depth`` describe them relative to that root.
    ``centroid_parent`` holds the centroid tree once ``decompose`` has run.
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self.adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        self.depth = [0] * n
        self.subtree_size = [0] * n
        self.subroot = [0] * n
        self.weighted_depth = [0] * n
        self.centroid_parent = [-1] * n
        self.nodes: list[int] = []

    def add_edge(self, u: int, v: int, weight: int = 0) -> None:
        """Add an undirected edge between ``u`` and ``v``."""
        if u == v:
            raise ValueError(f"self-loop on node {u}")
        self.adj[u].append((v, weight))
        self.adj[v].append((u, weight))

    def erase_edge(self, source: int, target: int) -> None:
        """Remove the edge ``source -> target`` from ``source``'s adjacency only."""
        edges = self.adj[source]
        for position, (node, _) in enumerate(edges):
            if node == target:
                edges[position] = edges[-1]
                edges.pop()
                return
        raise KeyError(f"no edge from {source} to {target}")

    def _explore(self, root: int, blocked: int = -1) -> int:
        """Walk the component of ``root`` (not crossing into ``blocked``); return its size."""
        self.nodes = []
        parents = []
        stack = [(root, blocked, root, 0)]
        while stack:
            node, parent, sub, weight = stack.pop()
            self.depth[node] = 0 if node == root else self.depth[parent] + 1
            self.subtree_size[node] = 1
            self.subroot[node] = sub
            self.weighted_depth[node] = weight
            self.nodes.append(node)
            parents.append(parent)
            children = [
                (neighbor, node, neighbor if node == root else sub, weight + edge_weight)
                for neighbor, edge_weight in self.adj[node]
                if neighbor != parent
            ]
            stack.extend(reversed(children))

        for node, parent in zip(reversed(self.nodes), reversed(parents)):
            if node != root:
                self.subtree_size[parent] += self.subtree_size[node]
        return len(self.nodes)

    def centroid(self, root: int) -> int:
        """Return a centroid of the component containing ``root``."""
        total = self._explore(root)
        size = self.subtree_size
        while True:
            for neighbor, _ in self.adj[root]:
                # Move into a child subtree holding at least half of the component.
                if size[neighbor] < size[root] and 2 * size[neighbor] >= total:
                    root = neighbor
                    break
            else:
                return root

    def _run(self, root: int, visit: Callable[[int], int] | None) -> int:
        total = 0
        self._order: list[int] = []
        stack = [root]
        while stack:
            center = self.centroid(stack.pop())
            for node in self.nodes:
                if node != center:
                    self.centroid_parent[node] = center
            self._order.append(center)
            if visit is not None:
                total += visit(center)
            neighbors = [neighbor for neighbor, _ in self.adj[center]]
            for neighbor in neighbors:
                self.erase_edge(neighbor, center)
            stack.extend(reversed(neighbors))
        return total

    def decompose(self, root: int = 0) -> list[int]:
        """Split the tree at centroids; return the centroids in processing order.

        Edges towards each centroid are removed as it is processed.
        """
        self._run(root, None)
        return self._order


def _count_pairs(weights: list[int], limit: int) -> int:
    """Count pairs ``i < j`` with ``weights[i] + weights[j] <= limit``."""
    weights = sorted(weights)
    return sum(
        max(bisect_right(weights, limit - weight, lo=i + 1) - (i + 1), 0)
        for i, weight in enumerate(weights)
    )


def _build(n: int, edges: Iterable[tuple[int, int, int]]) -> CentroidDecomposition:
    tree = CentroidDecomposition(n)
    for u, v, weight in edges:
        tree.add_edge(u, v, weight)
    return tree


def count_paths_subtract(n: int, edges: Iterable[tuple[int, int, int]], k: int) -> int:
    """Count paths of at least one edge with weight at most ``k``.

    At each centroid all pairs are counted, then pairs inside one child subtree are subtracted.
    """
    if n == 0:
        return 0
    tree = _build(n, edges)

    def visit(center: int) -> int:
        tree._explore(center)
        pairs = _count_pairs([tree.weighted_depth[v] for v in tree.nodes], k)
        for neighbor, weight in tree.adj[center]:
            tree._explore(neighbor, center)
            pairs -= _count_pairs([tree.weighted_depth[v] for v in tree.nodes], k - 2 * weight)
        return pairs

    return tree._run(0, visit)


def count_paths_prefixes(n: int, edges: Iterable[tuple[int, int, int]], k: int) -> int:
    """Count paths of at least one edge with weight at most ``k``.

    At each centroid every child subtree is matched against the subtrees before it.
    """
    if n == 0:
        return 0
    tree = _build(n, edges)

    def visit(center: int) -> int:
        tree._explore(center)
        depths = tree.weighted_depth
        sorted_weights = sorted(depths[v] for v in tree.nodes)
        counts = FenwickTree(len(sorted_weights))
        pairs = 0
        for _, group in groupby(tree.nodes, key=lambda v: tree.subroot[v]):
            members = list(group)
            for node in members:
                pairs += counts.query(bisect_right(sorted_weights, k - depths[node]))
            for node in members:
                counts.update(bisect_left(sorted_weights, depths[node]), 1)
        return pairs

    return tree._run(0, visit)


def main(argv: list[str] | None = None) -> None:
    """Read N, K and N-1 weighted edges; print how many paths weigh at most K."""
    parser = argparse.ArgumentParser(
        description="Read N K and N-1 edges 'u v weight' (1-based) from standard input."
    )
    parser.add_argument(
        "--method", choices=("subtract", "prefixes"), default="subtract",
        help="counting strategy at each centroid",
    )
    args = parser.parse_args(argv)
    numbers = [int(token) for token in sys.stdin.read().split()]
    if len(numbers) < 2:
        parser.error("expected N and K on standard input")
    n, k = numbers[0], numbers[1]
    values = numbers[2:2 + 3 * max(n - 1, 0)]
    if len(values) < 3 * max(n - 1, 0):
        parser.error("fewer edges than expected")
    edges = [(u - 1, v - 1, w) for u, v, w in zip(values[0::3], values[1::3], values[2::3])]
    count = count_paths_subtract if args.method == "subtract" else count_paths_prefixes
    sys.stdout.write(f"{count(n, edges, k)}\n")


if __name__ == "__main__":
    main()