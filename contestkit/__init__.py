"""Classic contest algorithms: string matching, suffix arrays, tries, union-find, Fenwick trees, centroid decomposition and tree DP."""

__version__ = "0.1.0"