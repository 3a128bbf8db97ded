import io
import random

import pytest

from contestkit.kmp import compute_failure_function, find_matches, main


def _occurrences(pattern, text):
    size = len(pattern)
    return [i for i in range(len(text) - size + 1) if text[i:i + size] == pattern]


def test_overlapping_matches():
    assert find_matches("aba", "ababa") == [0, 2]


def test_failure_function_of_abab():
    assert compute_failure_function("abab") == [0, 0, 0, 1, 2]


@pytest.mark.parametrize(
    "pattern, text",
    [
        ("a", "banana"),
        ("ana", "banana"),
        ("aa", "aaaaaa"),
        ("abc", "ababcabcab"),
        ("xyz", "banana"),
        ("banana", "banana"),
    ],
)
def test_matches_agree_with_slicing(pattern, text):
    assert find_matches(pattern, text) == _occurrences(pattern, text)


def test_random_strings_agree_with_slicing():
    rng = random.Random(7)
    for _ in range(200):
        pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 4)))
        text = "".join(rng.choice("ab") for _ in range(rng.randint(0, 20)))
        assert find_matches(pattern, text) == _occurrences(pattern, text)


def test_failure_function_entries_are_borders():
    rng = random.Random(11)
    for _ in range(100):
        pattern = "".join(rng.choice("abc") for _ in range(rng.randint(1, 12)))
        fail = compute_failure_function(pattern)
        assert len(fail) == len(pattern) + 1
        assert fail[0] == 0 and fail[1] == 0
        for end in range(1, len(pattern) + 1):
            border = fail[end]
            assert border < end
            assert pattern[:border] == pattern[end - border:end]
            if end < len(pattern):
                assert fail[end + 1] <= border + 1


def test_works_on_lists():
    pattern = [1, 2, 1]
    text = [1, 2, 1, 2, 1, 3, 1, 2, 1]
    assert find_matches(pattern, text) == _occurrences(pattern, text)


def test_precomputed_failure_function_gives_same_result():
    pattern = "abab"
    fail = compute_failure_function(pattern)
    for text in ("abababab", "babab", "aabbabab"):
        assert find_matches(pattern, text, fail) == find_matches(pattern, text)


def test_pattern_longer_than_text_has_no_matches():
    assert find_matches("abcd", "abc") == []


def test_empty_pattern_is_rejected():
    with pytest.raises(ValueError):
        find_matches("", "abc")


def test_mismatched_failure_function_is_rejected():
    with pytest.raises(ValueError):
        find_matches("abc", "abcabc", [0, 0])


def test_main_prints_match_positions(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ana\nbanana\n"))
    main([])
    expected = "".join(f"{i}\n" for i in _occurrences("ana", "banana"))
    assert capsys.readouterr().out == expected