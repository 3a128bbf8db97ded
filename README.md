# contestkit

A small library of well-known algorithms and data structures of the kind used
in programming contests, written in plain Python with no dependencies.

## What is inside

Strings

- `contestkit.kmp`: `compute_failure_function`, `find_matches` (works on any
  indexable sequence; overlapping matches are reported; an empty pattern raises
  `ValueError`)
- `contestkit.z_algorithm`: `z_function`, `z_matches`
- `contestkit.edit_distance`: `edit_distance` (linear memory),
  `edit_distance_quadratic` (full table) and `construct_edit_path`, which
  returns a shortest chain of strings from `s` to `t`, each one edit away from
  the previous
- `contestkit.aho_corasick`: `AhoCorasick`, built from a list of words, with
  `count_matches`, `find_first_occurrence` (end index of the first occurrence,
  or `None`), `count_matches_by_position`, `count_total_matches` and
  `build_suffix_adj`
- `contestkit.suffix_array`: `SuffixArray` (`suffix`, `rank`, `lcp`,
  `get_lcp`, `get_lcp_from_ranks`, `compare`, `distinct_substrings`) and
  `SparseTable` for static range minimum or maximum queries
- `contestkit.trie`: `Trie`, a multiset of words with `add`, `erase` (raises
  `KeyError` for a word that is not stored), `contains_prefix`,
  `count_prefixes` and `count_starting_with`

Union-find

- `contestkit.union_find`: `UnionFind` over elements `0..n`, union by size
  with path compression (`find`, `unite`, `size`, `components`)
- `contestkit.bipartite_union_find`: `BipartiteUnionFind`, which records
  "same side" and "different side" constraints (`unite`,
  `add_different_edge`, `add_same_edge`, `query_component`, `query_parity`,
  `is_bipartite`)
- `contestkit.kruskal`: `Kruskal` minimum spanning forest; `solve` returns the
  total weight and marks the chosen `Edge` objects

Trees

- `contestkit.fenwick`: `FenwickTree` with point updates, prefix, range and
  suffix sums, `get`, `set`, `build` and `find_last_prefix`
- `contestkit.centroid`: `CentroidDecomposition` (`add_edge`, `erase_edge`,
  `centroid`, `decompose`), plus `count_paths_subtract` and
  `count_paths_prefixes`, which count the paths of at least one edge with
  weight at most `k` in a weighted tree
- `contestkit.tree_dp`: `count_colorings` (colourings with no two adjacent
  black nodes, modulo 10^9+7 by default) and `count_connected_black` (for every
  node, colourings whose black nodes form one connected set containing it)
- `contestkit.distance_subset`: `max_weight_subset_linear` and
  `max_weight_subset_quadratic`, the heaviest set of vertices that are
  pairwise more than `k` edges apart

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Using the library

    from contestkit.kmp import compute_failure_function, find_matches
    from contestkit.edit_distance import edit_distance
    from contestkit.union_find import UnionFind

    pattern = "aba"
    print(find_matches(pattern, "ababa", compute_failure_function(pattern)))  # [0, 2]

    print(edit_distance("kitten", "sitting"))  # 3

    uf = UnionFind(5)
    uf.unite(1, 2)
    print(uf.find(1) == uf.find(2))  # True

## Command-line programs

Each program reads whitespace-separated input from standard input and writes
its answer to standard output.

- `contestkit-kmp`, `contestkit-z`: a pattern and a text; prints each start
  index of the pattern in the text, one per line.
- `contestkit-edit-distance`: two strings; prints their distance, then the
  chain of strings from the first to the second.
- `contestkit-aho-corasick`: a text, a count `Q` and `Q` words; prints, per
  word, its match count and the end index of its first occurrence (`-1` if
  absent), then the number of matches ending at each position, then the total.
- `contestkit-suffix-array`: a task (`suffix_array` or `distinct_substrings`)
  and a string; prints the suffix and LCP arrays, or the number of distinct
  substrings.
- `contestkit-trie`: `N` and `N` words; for each word prints how many stored
  words are its prefixes and how many start with it, then stores it, keeping
  only the last `N/2` words.
- `contestkit-union-find`: `N`, `Q` and `Q` queries `type a b`; type 1 prints
  whether `a` and `b` are connected (1/0), type 2 unites them and prints whether
  they were merged.
- `contestkit-bipartite`: the same input; type 1 prints `0`, or `1` and the
  parity of `a` and `b`; type 2 adds a "different side" edge and prints whether
  it merged and whether it was consistent.
- `contestkit-centroid [--method subtract|prefixes]`: `N K` and `N-1` edges
  `u v weight` (1-based); prints the number of paths of weight at most `K`.
- `contestkit-tree-dp colorings`: `N` and `N-1` edges; prints the colouring
  count. `contestkit-tree-dp connected`: `N MOD` and `N-1` edges; prints one
  count per node.
- `contestkit-distance-subset [--method linear|quadratic]`: `N K`, `N` weights
  and `N-1` edges (1-based); prints the best subset weight.

For example:

    echo "aba ababa" | contestkit-kmp

## What it does not do

The minimum spanning forest in `contestkit.kruskal` is a library class only;
there is no command for it.