"""Fenwick (binary indexed) tree over a fixed number of positions."""

from __future__ import annotations

from collections.abc import Iterable


class FenwickTree:
    """Point updates and prefix sums over positions ``0..n-1`` in O(log n).

    With 0/1 or count values it also serves as an ordered (multi)set of indices:
    ``query(i)`` counts elements below ``i`` and ``find_last_prefix(k)`` finds the
    k-th smallest element.
    """

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self.n = n
        self._total = 0
        self._tree = [0] * (n + 1)

    def __len__(self) -> int:
        return self.n

    def _check(self, index: int) -> None:
        if not 0 <= index < self.n:
            raise IndexError(f"index {index} out of range for {self.n} positions")

    def build(self, initial: Iterable) -> None:
        """Replace every value with ``initial`` in O(n)."""
        values = list(initial)
        if len(values) != self.n:
            raise ValueError(f"expected {self.n} values, got {len(values)}")
        tree = [0, *values]
        for i in range(1, self.n + 1):
            parent = i + (i & -i)
            if parent <= self.n:
                tree[parent] += tree[i]
        self._tree = tree
        self._total = sum(values, 0)

    def update(self, index: int, change) -> None:
        """Add ``change`` to the value at ``index``."""
        self._check(index)
        self._total += change
        i = index + 1
        while i <= self.n:
            self._tree[i] += change
            i += i & -i

    def query(self, count: int):
        """Return the sum of the first ``count`` values."""
        i = min(count, self.n)
        total = 0
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total

    def query_range(self, a: int, b: int):
        """Return the sum of the values at positions ``a..b-1``."""
        return self.query(b) - self.query(a)

    def query_suffix(self, start: int):
        """Return the sum of the values from ``start`` to the end."""
        return self._total - self.query(start)

    def get(self, index: int):
        """Return the value at ``index``."""
        self._check(index)
        above = index + 1
        value = self._tree[above]
        above -= above & -above
        while index != above:
            value -= self._tree[index]
            index -= index & -index
        return value

    def set(self, index: int, value) -> bool:
        """Set the value at ``index``; return whether it changed."""
        current = self.get(index)
        if current == value:
            return False
        self.update(index, value - current)
        return True

    def find_last_prefix(self, total) -> int:
        """Return the largest ``p`` with ``query(p) <= total``, or -1 if ``total`` is negative.

        Values must be non-negative for the answer to be meaningful.
        """
        if total < 0:
            return -1
        prefix = 0
        for k in range(self.n.bit_length() - 1, -1, -1):
            step = prefix + (1 << k)
            if step <= self.n and self._tree[step] <= total:
                prefix = step
                total -= self._tree[prefix]
        return prefix