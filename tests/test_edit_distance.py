import io
import random

import pytest

from contestkit.edit_distance import (
    construct_edit_path,
    edit_distance,
    edit_distance_quadratic,
    main,
)

PAIRS = [
    ("kitten", "sitting"),
    ("", "abc"),
    ("abc", ""),
    ("flaw", "lawn"),
    ("intention", "execution"),
    ("same", "same"),
    ("a", "b"),
]


def _random_pairs(seed, count=150):
    rng = random.Random(seed)
    for _ in range(count):
        s = "".join(rng.choice("abc") for _ in range(rng.randint(0, 7)))
        t = "".join(rng.choice("abc") for _ in range(rng.randint(0, 7)))
        yield s, t


def test_kitten_sitting():
    assert edit_distance("kitten", "sitting") == 3


def test_distance_from_empty_is_length():
    assert edit_distance("", "abc") == len("abc")
    assert edit_distance("abcd", "") == len("abcd")


@pytest.mark.parametrize("s, t", PAIRS)
def test_linear_and_quadratic_agree(s, t):
    assert edit_distance(s, t) == edit_distance_quadratic(s, t)


def test_random_linear_and_quadratic_agree():
    for s, t in _random_pairs(1):
        assert edit_distance(s, t) == edit_distance_quadratic(s, t)


def test_symmetry_and_triangle_inequality():
    rng = random.Random(2)
    words = ["".join(rng.choice("ab") for _ in range(rng.randint(0, 6))) for _ in range(15)]
    for a in words:
        assert edit_distance(a, a) == 0
        for b in words:
            assert edit_distance(a, b) == edit_distance(b, a)
            for c in words[:5]:
                assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


def _check_path(s, t):
    path = construct_edit_path(s, t)
    distance = edit_distance(s, t)
    assert len(path) == distance + 1
    assert path[0] == s
    assert path[-1] == t
    for before, after in zip(path, path[1:]):
        assert edit_distance(before, after) == 1


@pytest.mark.parametrize("s, t", PAIRS)
def test_path_is_a_shortest_edit_chain(s, t):
    _check_path(s, t)


def test_random_paths_are_shortest_edit_chains():
    for s, t in _random_pairs(4):
        _check_path(s, t)


def test_path_between_equal_strings_is_single():
    assert construct_edit_path("word", "word") == ["word"]


def test_main_prints_distance_and_path(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("flaw lawn\n"))
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert int(lines[0]) == edit_distance("flaw", "lawn")
    assert lines[1:] == construct_edit_path("flaw", "lawn")