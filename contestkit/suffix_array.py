"""Suffix array with LCP array and constant-time LCP queries through a sparse table."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from itertools import chain


class SparseTable:
    """Static range minimum (or maximum) queries over half-open ranges in O(1)."""

    def __init__(self, values: Iterable = (), maximum: bool = False) -> None:
        self._better = max if maximum else min
        values = list(values)
        self._size = len(values)
        self._levels: list[list] = []
        if values:
            self._levels.append(values)
            width = 1
            while 2 * width <= self._size:
                previous = self._levels[-1]
                self._levels.append(
                    [
                        self._better(previous[i], previous[i + width])
                        for i in range(self._size - 2 * width + 1)
                    ]
                )
                width *= 2

    def __len__(self) -> int:
        return self._size

    def query(self, a: int, b: int):
        """Return the best value in ``values[a:b]``; the range must be non-empty."""
        if not 0 <= a < b <= self._size:
            raise ValueError(f"invalid range [{a}, {b}) for {self._size} values")
        level = (b - a).bit_length() - 1
        row = self._levels[level]
        return self._better(row[a], row[b - (1 << level)])


class SuffixArray:
    """Sorted suffixes of a sequence with ranks and adjacent longest common prefixes.

    ``suffix[r]`` is the start of the suffix of rank ``r``, ``rank`` is its inverse and
    ``lcp[r]`` is the common prefix length of the suffixes of ranks ``r`` and ``r - 1``
    (``lcp[0]`` is 0).
    """

    def __init__(self, text: Sequence, build_rmq: bool = True) -> None:
        self.text = text
        n = self.n = len(text)
        suffix = sorted(range(n), key=lambda index: text[index])
        rank = [0] * n

        # Suffixes that tie on what has been compared so far share the rank of the first of them.
        for position in range(1, n):
            current, previous = suffix[position], suffix[position - 1]
            rank[current] = rank[previous] if text[current] == text[previous] else position

        length = 1
        done = False
        while length < n and not done:
            next_index = list(range(n))
            new_suffix = [0] * n
            # Suffixes no longer than ``length`` come first, then the rest ordered by their tail.
            for start in chain(
                range(n - length, n), (s - length for s in suffix if s >= length)
            ):
                bucket = rank[start]
                new_suffix[next_index[bucket]] = start
                next_index[bucket] += 1
            suffix = new_suffix

            new_rank = [0] * n
            done = True
            for position in range(1, n):
                current, before = suffix[position], suffix[position - 1]
                if (
                    max(current, before) + length < n
                    and rank[current] == rank[before]
                    and rank[current + length] == rank[before + length]
                ):
                    new_rank[current] = new_rank[before]
                    done = False
                else:
                    new_rank[current] = position
            rank = new_rank
            length *= 2

        self.suffix = suffix
        self.rank = rank
        self.lcp = self._compute_lcp()
        self.rmq = SparseTable(self.lcp) if build_rmq else None

    def _compute_lcp(self) -> list[int]:
        text, n = self.text, self.n
        lcp = [0] * n
        match = 0
        for start in range(n):
            r = self.rank[start]
            if r == 0:
                continue
            a = self.suffix[r] + match
            b = self.suffix[r - 1] + match
            while a < n and b < n and text[a] == text[b]:
                match += 1
                a += 1
                b += 1
            lcp[r] = match
            match = max(match - 1, 0)
        return lcp

    def get_lcp_from_ranks(self, a: int, b: int) -> int:
        """Return the common prefix length of the suffixes with ranks ``a`` and ``b``."""
        if a == b:
            return self.n - self.suffix[a]
        if self.rmq is None:
            raise RuntimeError("suffix array was built without range queries")
        a, b = sorted((a, b))
        return self.rmq.query(a + 1, b + 1)

    def get_lcp(self, a: int, b: int) -> int:
        """Return the common prefix length of the suffixes starting at ``a`` and ``b``."""
        if a >= self.n or b >= self.n:
            return 0
        if a == b:
            return self.n - a
        return self.get_lcp_from_ranks(self.rank[a], self.rank[b])

    def compare(self, a: int, b: int, length: int | None = None) -> int:
        """Compare the substrings of ``length`` items at ``a`` and ``b``; return -1, 0 or 1."""
        if length is None or length < 0:
            length = self.n
        if a == b:
            return 0
        common = self.get_lcp(a, b)
        if common >= length:
            return 0
        if a + common >= self.n or b + common >= self.n:
            return -1 if a + common >= self.n else 1
        x, y = self.text[a + common], self.text[b + common]
        return (x > y) - (x < y)

    def distinct_substrings(self) -> int:
        """Return the number of distinct non-empty substrings."""
        return self.n * (self.n + 1) // 2 - sum(self.lcp)


def main(argv: list[str] | None = None) -> None:
    """Read a task and a string; print the suffix and LCP arrays or the distinct substring count."""
    parser = argparse.ArgumentParser(
        description="Read TASK (suffix_array or distinct_substrings) and a string from standard input."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        parser.error("expected a task and a string on standard input")
    task, text = tokens[0], tokens[1]
    array = SuffixArray(text)
    if task == "suffix_array":
        lines = [" ".join(map(str, array.suffix)), " ".join(map(str, array.lcp))]
    elif task == "distinct_substrings":
        lines = [str(array.distinct_substrings())]
    else:
        parser.error(f"unknown task: {task}")
    sys.stdout.write("".join(f"{line}\n" for line in lines))


if __name__ == "__main__":
    main()