"""Maximum-weight node subsets of a tree whose pairwise distances all exceed ``k``."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Sequence

_NEGATIVE = float("-inf")


def _rooted(weights: Sequence[int], edges: Iterable[tuple[int, int]]) -> tuple[list[int], list[list[int]]]:
    """Root the tree at node 0; return nodes in BFS order and each node's children."""
    n = len(weights)
    if n < 1:
        raise ValueError("a tree needs at least one node")
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError(f"a tree on {n} nodes has {n - 1} edges, got {len(edges)}")
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) is out of range")
        if u == v:
            raise ValueError(f"self-loop on node {u}")
        adj[u].append(v)
        adj[v].append(u)

    children: list[list[int]] = [[] for _ in range(n)]
    seen = [False] * n
    seen[0] = True
    order = [0]
    for node in order:
        for neighbor in adj[node]:
            if not seen[neighbor]:
                seen[neighbor] = True
                children[node].append(neighbor)
                order.append(neighbor)
    if len(order) != n:
        raise ValueError("edges do not connect all nodes")
    return order, children


def _get(dp: deque[int], index: int) -> int:
    return dp[index] if index < len(dp) else 0


def _attach_linear(root: deque[int], child: deque[int], limit: int) -> deque[int]:
    """Merge ``child`` into ``root``; both are non-increasing "closest depth at least d" tables."""
    if len(root) < len(child):
        root, child = child, root
    combined = list(child)
    for d, value in enumerate(child):
        other = max(limit - d, d)
        combined[d] = max(combined[d], root[d] + _get(child, other), _get(root, other) + value)
    best = 0
    for i in reversed(range(len(child))):
        best = max(best, combined[i])
        root[i] = max(root[i], best)
    return root


def max_weight_subset_linear(weights: Sequence[int], edges: Iterable[tuple[int, int]], k: int) -> int:
    """Return the largest total weight of nodes pairwise more than ``k`` edges apart.

    Runs in linear time by merging shorter depth tables into longer ones; weights are
    taken to be non-negative.
    """
    order, children = _rooted(weights, edges)
    limit = k + 1
    results: list[deque[int] | None] = [None] * len(weights)
    for node in reversed(order):
        current: deque[int] = deque([weights[node]])
        for child in children[node]:
            table = results[child]
            results[child] = None
            table.appendleft(table[0])
            current = _attach_linear(current, table, limit)
        results[node] = current
    return results[0][0]


def _attach_quadratic(root: list, child: list, limit: int) -> list:
    """Merge tables where entry d is the best weight whose highest chosen node has depth d."""
    combined = [_NEGATIVE] * max(len(root), len(child))
    for i, value in enumerate(root):
        combined[i] = max(combined[i], value)
    for i, value in enumerate(child):
        combined[i] = max(combined[i], value)
    for x, left in enumerate(root):
        for y in range(max(limit - x, 0), len(child)):
            position = min(x, y)
            combined[position] = max(combined[position], left + child[y])
    return combined


def max_weight_subset_quadratic(weights: Sequence[int], edges: Iterable[tuple[int, int]], k: int) -> int:
    """Return the largest total weight of nodes pairwise more than ``k`` edges apart, in O(n^2)."""
    order, children = _rooted(weights, edges)
    limit = k + 1
    results: list[list | None] = [None] * len(weights)
    for node in reversed(order):
        current: list = [weights[node]]
        for child in children[node]:
            table = results[child]
            results[child] = None
            current = _attach_quadratic(current, [_NEGATIVE, *table], limit)
        results[node] = current
    return max(results[0])


def main(argv: list[str] | None = None) -> None:
    """Read N, K, the weights and N-1 edges; print the best subset weight."""
    parser = argparse.ArgumentParser(
        description="Read N K, N weights and N-1 edges 'u v' (1-based) from standard input."
    )
    parser.add_argument(
        "--method", choices=("linear", "quadratic"), default="linear",
        help="table merging strategy",
    )
    args = parser.parse_args(argv)
    numbers = [int(token) for token in sys.stdin.read().split()]
    if len(numbers) < 2:
        parser.error("expected N and K on standard input")
    n, k = numbers[0], numbers[1]
    weights = numbers[2:2 + n]
    if len(weights) < n:
        parser.error("fewer weights than expected")
    edge_count = max(n - 1, 0)
    values = numbers[2 + n:2 + n + 2 * edge_count]
    if len(values) < 2 * edge_count:
        parser.error("fewer edges than expected")
    edges = [(u - 1, v - 1) for u, v in zip(values[0::2], values[1::2])]
    solve = max_weight_subset_linear if args.method == "linear" else max_weight_subset_quadratic
    sys.stdout.write(f"{solve(weights, edges, k)}\n")


if __name__ == "__main__":
    main()