"""Z-function (extended KMP) and substring search built on it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def z_function(sequence: Sequence) -> list[int]:
    """Return ``z`` where ``z[i]`` is the longest common prefix of ``sequence`` and ``sequence[i:]``."""
    size = len(sequence)
    if size == 0:
        return []

    z = [0] * size
    z[0] = size
    loc = 1
    for i in range(1, size):
        reach = loc + z[loc]
        length = min(z[i - loc], reach - i) if i < reach else 0
        while i + length < size and sequence[length] == sequence[i + length]:
            length += 1
        z[i] = length
        # Keep the position whose match reaches furthest right.
        if i + length > reach:
            loc = i
    return z


def z_matches(pattern: Sequence, text: Sequence) -> list[int]:
    """Return every start index where ``pattern`` occurs in ``text``."""
    size = len(pattern)
    z = z_function([*pattern, *text])
    return [index for index, length in enumerate(z[size:]) if length >= size]


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
    sys.stdout.write("".join(f"{match}\n" for match in z_matches(pattern, text)))


if __name__ == "__main__":
    main()