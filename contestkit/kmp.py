"""Knuth-Morris-Pratt search for a pattern inside any indexable sequence."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def _advance(pattern: Sequence, fail: list[int], length: int, item) -> int:
    """Return the matched prefix length after extending a match of ``length`` by ``item``."""
    while length > 0 and pattern[length] != item:
        length = fail[length]
    if pattern[length] == item:
        length += 1
    return length


def compute_failure_function(pattern: Sequence) -> list[int]:
    """Return ``fail`` where ``fail[i]`` is the longest proper border of ``pattern[:i]``."""
    fail = [0] * (len(pattern) + 1)
    length = 0
    for end, item in enumerate(pattern[1:], start=2):
        length = _advance(pattern, fail, length, item)
        fail[end] = length
    return fail


def find_matches(pattern: Sequence, text: Sequence, fail: list[int] | None = None) -> list[int]:
    """Return every start index where ``pattern`` occurs in ``text``, overlaps included."""
    if len(pattern) == 0:
        raise ValueError("pattern must not be empty")
    if len(pattern) > len(text):
        return []
    if fail is None:
        fail = compute_failure_function(pattern)
    if len(fail) != len(pattern) + 1:
        raise ValueError("failure function does not belong to this pattern")

    size = len(pattern)
    matches = []
    length = 0
    for index, item in enumerate(text):
        length = _advance(pattern, fail, length, item)
        if length == size:
            matches.append(index - size + 1)
            length = fail[length]
    return matches


def main(argv: list[str] | None = None) -> None:
    """Read a pattern and a text from standard input and print each match position."""
    parser = argparse.ArgumentParser(
        description="Read PATTERN and TEXT from standard input and print every match position."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        parser.error("expected a pattern and a text on standard input")
    pattern, text = tokens[0], tokens[1]
    sys.stdout.write("".join(f"{match}\n" for match in find_matches(pattern, text)))


if __name__ == "__main__":
    main()