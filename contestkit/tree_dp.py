"""Dynamic programming on trees: independent-set colourings and connected black sets."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

MOD = 10**9 + 7


def _rooted(n: int, edges: Iterable[tuple[int, int]]) -> tuple[list[int], list[list[int]]]:
    """Root the tree at node 0; return nodes in BFS order and each node's children."""
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


def count_colorings(n: int, edges: Iterable[tuple[int, int]], mod: int = MOD) -> int:
    """Count black/white colourings with no two adjacent black nodes, modulo ``mod``."""
    order, children = _rooted(n, edges)
    black = [1] * n
    white = [1] * n
    for node in reversed(order):
        b, w = 1, 1
        for child in children[node]:
            b = b * white[child] % mod
            w = w * (black[child] + white[child]) % mod
        black[node], white[node] = b, w
    return (black[0] + white[0]) % mod


def count_connected_black(n: int, edges: Iterable[tuple[int, int]], mod: int) -> list[int]:
    """For every node, count colourings whose black nodes form one connected set containing it."""
    order, children = _rooted(n, edges)

    # down[v]: colourings of v's subtree with v black and the black part connected.
    down = [1] * n
    for node in reversed(order):
        product = 1
        for child in children[node]:
            product = product * (down[child] + 1) % mod
        down[node] = product

    # up[v]: colourings of everything outside v's subtree, all-white included.
    up = [1] * n
    for node in order:
        kids = children[node]
        factors = [down[child] + 1 for child in kids]
        prefix = [1]
        for factor in factors:
            prefix.append(prefix[-1] * factor % mod)
        suffix = [1] * (len(factors) + 1)
        for i in reversed(range(len(factors))):
            suffix[i] = suffix[i + 1] * factors[i] % mod
        for i, child in enumerate(kids):
            up[child] = (1 + prefix[i] * suffix[i + 1] % mod * up[node]) % mod

    return [u * d % mod for u, d in zip(up, down)]


def _read_edges(values: list[int], count: int, parser: argparse.ArgumentParser) -> list[tuple[int, int]]:
    if len(values) < 2 * count:
        parser.error("fewer edges than expected")
    values = values[:2 * count]
    return [(u - 1, v - 1) for u, v in zip(values[0::2], values[1::2])]


def main(argv: list[str] | None = None) -> None:
    """Read a tree from standard input and print the requested counts."""
    parser = argparse.ArgumentParser(
        description=(
            "colorings: read N and N-1 edges, print the number of colourings without adjacent "
            "black nodes. connected: read N MOD and N-1 edges, print per node the number of "
            "colourings with a connected black set containing it."
        )
    )
    parser.add_argument("task", choices=("colorings", "connected"))
    args = parser.parse_args(argv)
    numbers = [int(token) for token in sys.stdin.read().split()]

    if args.task == "colorings":
        if not numbers:
            parser.error("expected N on standard input")
        n = numbers[0]
        edges = _read_edges(numbers[1:], max(n - 1, 0), parser)
        sys.stdout.write(f"{count_colorings(n, edges)}\n")
    else:
        if len(numbers) < 2:
            parser.error("expected N and MOD on standard input")
        n, mod = numbers[0], numbers[1]
        edges = _read_edges(numbers[2:], max(n - 1, 0), parser)
        sys.stdout.write("".join(f"{value}\n" for value in count_connected_black(n, edges, mod)))


if __name__ == "__main__":
    main()