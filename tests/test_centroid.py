import io
import random

import pytest

from contestkit.centroid import (
    CentroidDecomposition,
    count_paths_prefixes,
    count_paths_subtract,
    main,
)


def _random_tree(seed, n, max_weight=10):
    rng = random.Random(seed)
    return [(rng.randrange(i), i, rng.randrange(max_weight)) for i in range(1, n)]


def _brute_force(n, edges, k):
    adj = [[] for _ in range(n)]
    for u, v, w in edges:
        adj[u].append((v, w))
        adj[v].append((u, w))
    count = 0
    for start in range(n):
        dist = {start: 0}
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbor, w in adj[node]:
                if neighbor not in dist:
                    dist[neighbor] = dist[node] + w
                    stack.append(neighbor)
        count += sum(1 for end, d in dist.items() if end > start and d <= k)
    return count


@pytest.mark.parametrize("seed", range(8))
@pytest.mark.parametrize("k", [0, 3, 10, 25, 100])
def test_both_counts_match_brute_force(seed, k):
    n = 2 + seed * 5
    edges = _random_tree(seed, n)
    expected = _brute_force(n, edges, k)
    assert count_paths_subtract(n, edges, k) == expected
    assert count_paths_prefixes(n, edges, k) == expected


def test_single_node_and_empty():
    assert count_paths_subtract(1, [], 5) == 0
    assert count_paths_prefixes(1, [], 5) == 0
    assert count_paths_subtract(0, [], 5) == 0


def test_large_k_counts_every_pair():
    n = 30
    edges = _random_tree(42, n)
    assert count_paths_subtract(n, edges, 10**9) == n * (n - 1) // 2
    assert count_paths_prefixes(n, edges, 10**9) == n * (n - 1) // 2


def test_centroid_of_path_is_middle():
    tree = CentroidDecomposition(5)
    for i in range(4):
        tree.add_edge(i, i + 1)
    assert tree.centroid(0) == 2
    assert tree.centroid(4) == 2


def test_centroid_of_star_is_center():
    tree = CentroidDecomposition(6)
    for leaf in range(1, 6):
        tree.add_edge(0, leaf)
    assert tree.centroid(3) == 0


@pytest.mark.parametrize("seed", range(5))
def test_centroid_splits_in_halves(seed):
    n = 40
    tree = CentroidDecomposition(n)
    for u, v, w in _random_tree(seed, n):
        tree.add_edge(u, v, w)
    center = tree.centroid(0)
    tree.centroid(center)  # explores from the centroid itself
    for neighbor, _ in tree.adj[center]:
        assert 2 * tree.subtree_size[neighbor] <= n


@pytest.mark.parametrize("seed", range(5))
def test_decompose_builds_shallow_centroid_tree(seed):
    n = 64
    tree = CentroidDecomposition(n)
    for u, v, w in _random_tree(seed, n):
        tree.add_edge(u, v, w)
    order = tree.decompose(0)
    assert sorted(order) == list(range(n))
    position = {node: index for index, node in enumerate(order)}
    roots = [node for node in range(n) if tree.centroid_parent[node] == -1]
    assert roots == [order[0]]
    for node in range(n):
        parent = tree.centroid_parent[node]
        if parent >= 0:
            assert position[parent] < position[node]
    for node in range(n):
        levels = 1
        while tree.centroid_parent[node] >= 0:
            node = tree.centroid_parent[node]
            levels += 1
        assert levels <= n.bit_length()


def test_edge_errors():
    tree = CentroidDecomposition(3)
    with pytest.raises(ValueError):
        tree.add_edge(1, 1)
    tree.add_edge(0, 1)
    with pytest.raises(KeyError):
        tree.erase_edge(0, 2)
    tree.erase_edge(0, 1)
    assert tree.adj[0] == []
    assert tree.adj[1] == [(0, 0)]


@pytest.mark.parametrize("method", ["subtract", "prefixes"])
def test_main(monkeypatch, capsys, method):
    n, k = 12, 8
    edges = _random_tree(7, n)
    lines = [f"{n} {k}"] + [f"{u + 1} {v + 1} {w}" for u, v, w in edges]
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(lines) + "\n"))
    main(["--method", method])
    assert capsys.readouterr().out == f"{_brute_force(n, edges, k)}\n"