"""Levenshtein edit distance and a shortest chain of single edits between two strings."""

from __future__ import annotations

import argparse
import sys


def _distance_table(s: str, t: str) -> list[list[int]]:
    """Return the full table where entry ``[i][j]`` is the distance of ``s[:i]`` and ``t[:j]``."""
    table = [list(range(len(t) + 1))]
    for i, a in enumerate(s, start=1):
        previous = table[-1]
        row = [i]
        for j, b in enumerate(t):
            row.append(min(row[j] + 1, previous[j + 1] + 1, previous[j] + (a != b)))
        table.append(row)
    return table


def edit_distance(s: str, t: str) -> int:
    """Return the edit distance of ``s`` and ``t`` using linear memory."""
    previous = list(range(len(t) + 1))
    for i, a in enumerate(s, start=1):
        row = [i]
        for j, b in enumerate(t):
            row.append(min(row[j] + 1, previous[j + 1] + 1, previous[j] + (a != b)))
        previous = row
    return previous[-1]


def edit_distance_quadratic(s: str, t: str) -> int:
    """Return the edit distance of ``s`` and ``t`` from the full table."""
    return _distance_table(s, t)[-1][-1]


def construct_edit_path(s: str, t: str) -> list[str]:
    """Return strings from ``s`` to ``t``, each one edit away from the previous, of minimum length."""
    table = _distance_table(s, t)
    n, m = len(s), len(t)
    forward = [s]
    backward = [t]

    while n > 0 or m > 0:
        cost = table[n][m]
        if n > 0 and cost == table[n - 1][m] + 1:
            n -= 1
            last = forward[-1]
            forward.append(last[:n] + last[n + 1:])
        elif m > 0 and cost == table[n][m - 1] + 1:
            m -= 1
            last = backward[-1]
            backward.append(last[:m] + last[m + 1:])
        else:
            n -= 1
            m -= 1
            if s[n] != t[m]:
                last = forward[-1]
                forward.append(last[:n] + t[m] + last[n + 1:])

    # Both chains meet at the same string; keep it once.
    backward.pop()
    forward.extend(reversed(backward))
    return forward


def main(argv: list[str] | None = None) -> None:
    """Read two strings from standard input; print their distance and an edit chain."""
    parser = argparse.ArgumentParser(
        description="Read S and T from standard input, print their edit distance and an edit chain."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        parser.error("expected two strings on standard input")
    s, t = tokens[0], tokens[1]
    lines = [str(edit_distance(s, t)), *construct_edit_path(s, t)]
    sys.stdout.write("".join(f"{line}\n" for line in lines))


if __name__ == "__main__":
    main()