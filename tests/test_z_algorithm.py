import io
import random

import pytest

from contestkit.z_algorithm import main, z_function, z_matches


def _occurrences(pattern, text):
    size = len(pattern)
    return [i for i in range(len(text) - size + 1) if text[i:i + size] == pattern]


def _check_z(sequence, z):
    size = len(sequence)
    assert len(z) == size
    assert z[0] == size
    for i in range(1, size):
        length = z[i]
        assert sequence[:length] == sequence[i:i + length]
        assert i + length == size or sequence[length] != sequence[i + length]


def test_repeated_character():
    assert z_function("aaaa") == [4, 3, 2, 1]


def test_empty_sequence():
    assert z_function("") == []


@pytest.mark.parametrize("text", ["a", "ab", "abacaba", "aabxaab", "zzzzyzzz"])
def test_z_values_are_maximal_common_prefixes(text):
    _check_z(text, z_function(text))


def test_random_strings_satisfy_definition():
    rng = random.Random(3)
    for _ in range(200):
        text = "".join(rng.choice("ab") for _ in range(rng.randint(1, 25)))
        _check_z(text, z_function(text))


def test_works_on_lists():
    values = [5, 5, 1, 5, 5, 1, 5]
    _check_z(values, z_function(values))


@pytest.mark.parametrize(
    "pattern, text",
    [("ana", "banana"), ("aa", "aaaaa"), ("x", "banana"), ("banana", "banana"), ("long", "lo")],
)
def test_matches_agree_with_slicing(pattern, text):
    assert z_matches(pattern, text) == _occurrences(pattern, text)


def test_random_matches_agree_with_slicing():
    rng = random.Random(5)
    for _ in range(200):
        pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 4)))
        text = "".join(rng.choice("ab") for _ in range(rng.randint(0, 20)))
        assert z_matches(pattern, text) == _occurrences(pattern, text)


def test_matches_in_lists():
    assert z_matches([1, 2], [1, 2, 1, 2, 2]) == _occurrences([1, 2], [1, 2, 1, 2, 2])


def test_main_prints_match_positions(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("aa aaaab"))
    main([])
    expected = "".join(f"{i}\n" for i in _occurrences("aa", "aaaab"))
    assert capsys.readouterr().out == expected