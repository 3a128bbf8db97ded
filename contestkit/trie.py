"""Counting trie answering prefix questions about a multiset of words."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field


@dataclass(slots=True)
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    words_here: int = 0
    starting_with: int = 0


class Trie:
    """Multiset of words supporting prefix counts."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def __len__(self) -> int:
        return self._root.starting_with

    def __contains__(self, word: str) -> bool:
        node = self._find(word)
        return node is not None and node.words_here > 0

    def _find(self, text: str) -> _TrieNode | None:
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def add(self, word: str) -> None:
        """Add one copy of ``word``."""
        node = self._root
        node.starting_with += 1
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = _TrieNode()
            node = child
            node.starting_with += 1
        node.words_here += 1

    def erase(self, word: str) -> None:
        """Remove one copy of ``word``; raise KeyError if it is not stored."""
        if word not in self:
            raise KeyError(word)
        node = self._root
        node.starting_with -= 1
        for char in word:
            node = node.children[char]
            node.starting_with -= 1
        node.words_here -= 1

    def contains_prefix(self, text: str) -> bool:
        """Return whether some stored word starts with ``text``."""
        node = self._find(text)
        return node is not None and node.starting_with > 0

    def count_prefixes(self, text: str, include_full: bool = True) -> int:
        """Return how many stored words are prefixes of ``text``."""
        node = self._root
        count = 0
        for char in text:
            count += node.words_here
            node = node.children.get(char)
            if node is None:
                return count
        return count + node.words_here if include_full else count

    def count_starting_with(self, text: str, include_full: bool = True) -> int:
        """Return how many stored words start with ``text``."""
        node = self._find(text)
        if node is None:
            return 0
        return node.starting_with - (0 if include_full else node.words_here)


def main(argv: list[str] | None = None) -> None:
    """Read N words; for each print prefix counts, then keep a sliding window of N/2 words."""
    parser = argparse.ArgumentParser(
        description="Read N and N words from standard input and print prefix counts for each."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if not tokens:
        parser.error("expected a word count on standard input")
    count = int(tokens[0])
    words = tokens[1:1 + count]
    if len(words) < count:
        parser.error("fewer words than announced")

    trie = Trie()
    half = count // 2
    lines = []
    for index, word in enumerate(words):
        lines.append(f"{trie.count_prefixes(word, True)} {trie.count_starting_with(word, True)}")
        trie.add(word)
        if index >= half:
            trie.erase(words[index - half])
    sys.stdout.write("".join(f"{line}\n" for line in lines))


if __name__ == "__main__":
    main()