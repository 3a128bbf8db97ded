"""Aho-Corasick automaton for matching many words against a text at once."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(slots=True)
class _Node:
    # suffix: longest strict suffix of this node that is also in the trie.
    # dictionary: longest strict suffix of this node that is a whole word.
    # word_index: first word (in sorted order) that ends here, -1 if none.
    # word_count: words ending here or at any suffix of this node.
    suffix: int = -1
    dictionary: int = -1
    depth: int = 0
    word_index: int = -1
    word_count: int = 0
    children: dict[str, int] = field(default_factory=dict)


class AhoCorasick:
    """Automaton over a fixed list of words; queries report per-word and per-position results."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        words = list(words)
        self._word_total = len(words)
        self._nodes = [_Node()]

        # Insert words breadth first, in sorted order, so nodes are numbered in BFS order
        # and every node's children appear in increasing character order.
        order = sorted(range(len(words)), key=lambda index: words[index])
        self._word_location = [0] * len(words)
        remaining = order
        depth = 0
        while remaining:
            still_growing = []
            for word in remaining:
                location = self._word_location[word]
                if depth >= len(words[word]):
                    node = self._nodes[location]
                    if node.word_index < 0:
                        node.word_index = word
                    node.word_count += 1
                else:
                    self._word_location[word] = self._get_or_add_child(location, words[word][depth])
                    still_growing.append(word)
            remaining = still_growing
            depth += 1

        self._defer = [self._nodes[location].word_index for location in self._word_location]
        self._by_depth = sorted(range(len(words)), key=lambda index: -len(words[index]))

        # Nodes are already in BFS order, so suffix parents are resolved before they are needed.
        for node in self._nodes:
            for char, index in node.children.items():
                parent = self._follow(node.suffix, char)
                child = self._nodes[index]
                target = self._nodes[parent]
                child.suffix = parent
                child.word_count += target.word_count
                child.dictionary = parent if target.word_index >= 0 else target.dictionary

    def _get_or_add_child(self, current: int, char: str) -> int:
        node = self._nodes[current]
        index = node.children.get(char)
        if index is None:
            index = len(self._nodes)
            node.children[char] = index
            self._nodes.append(_Node(depth=node.depth + 1))
        return index

    def _follow(self, location: int, char: str) -> int:
        """Return the state reached from ``location`` after reading ``char``."""
        while location >= 0:
            child = self._nodes[location].children.get(char)
            if child is not None:
                return child
            location = self._nodes[location].suffix
        return 0

    def _states(self, text: str):
        current = 0
        for char in text:
            current = self._follow(current, char)
            yield current

    def _word_at(self, state: int) -> int:
        """Return the longest word ending at ``state``, or -1."""
        node = self._nodes[state]
        dict_node = state if node.word_index >= 0 else node.dictionary
        return self._nodes[dict_node].word_index if dict_node >= 0 else -1

    def build_suffix_adj(self) -> list[list[int]]:
        """Return, for every node, the nodes whose suffix link points to it."""
        adj: list[list[int]] = [[] for _ in self._nodes]
        for index, node in enumerate(self._nodes[1:], start=1):
            adj[node.suffix].append(index)
        return adj

    def count_matches(self, text: str) -> list[int]:
        """Return how many times each word occurs in ``text``."""
        matches = [0] * self._word_total
        for state in self._states(text):
            word = self._word_at(state)
            if word >= 0:
                matches[word] += 1

        # Push counts from longer words to the words that are their suffixes.
        for word in self._by_depth:
            dict_node = self._nodes[self._word_location[word]].dictionary
            if dict_node >= 0:
                matches[self._nodes[dict_node].word_index] += matches[word]

        return [matches[representative] for representative in self._defer]

    def find_first_occurrence(self, text: str) -> list[int | None]:
        """Return, per word, the index of the last character of its first occurrence, or None."""
        absent = len(text)
        first = [absent] * self._word_total
        for position, state in enumerate(self._states(text)):
            word = self._word_at(state)
            if word >= 0:
                first[word] = min(first[word], position)

        for word in self._by_depth:
            dict_node = self._nodes[self._word_location[word]].dictionary
            if dict_node >= 0:
                parent = self._nodes[dict_node].word_index
                first[parent] = min(first[parent], first[word])

        return [
            first[representative] if first[representative] < absent else None
            for representative in self._defer
        ]

    def count_matches_by_position(self, text: str) -> list[int]:
        """Return, for each position of ``text``, how many word occurrences end there."""
        return [self._nodes[state].word_count for state in self._states(text)]

    def count_total_matches(self, text: str) -> int:
        """Return the total number of word occurrences in ``text``."""
        return sum(self._nodes[state].word_count for state in self._states(text))


def main(argv: list[str] | None = None) -> None:
    """Read a text, a word count and the words; print per-word and per-position results."""
    parser = argparse.ArgumentParser(
        description="Read TEXT, Q and Q words from standard input and report their matches."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        parser.error("expected a text and a word count on standard input")
    text = tokens[0]
    count = int(tokens[1])
    words = tokens[2:2 + count]
    if len(words) < count:
        parser.error("fewer words than announced")

    automaton = AhoCorasick(words)
    counts = automaton.count_matches(text)
    first = automaton.find_first_occurrence(text)
    lines = [f"{matches} {-1 if end is None else end}" for matches, end in zip(counts, first)]
    lines.append(" ".join(map(str, automaton.count_matches_by_position(text))))
    lines.append(str(automaton.count_total_matches(text)))
    sys.stdout.write("".join(f"{line}\n" for line in lines))


if __name__ == "__main__":
    main()