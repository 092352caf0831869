import pytest
from hypothesis import given
from hypothesis import strategies as st

from twopointers.strings import longest_unique_substring, merge_alternately

words = st.text(alphabet="abcdefxyz ", max_size=30)


@pytest.mark.parametrize(
    ("word1", "word2", "expected"),
    [
        ("abc", "pqr", "apbqcr"),
        ("ab", "pqrs", "apbqrs"),
        ("", "", ""),
        ("", "pqrstu", "pqrstu"),
        ("abcdef", "", "abcdef"),
        ("a b", "1 2", "a1  b2"),
    ],
)
def test_merge_alternately_cases(word1, word2, expected):
    assert merge_alternately(word1, word2) == expected


@given(words, words)
def test_merge_keeps_every_letter(word1, word2):
    merged = merge_alternately(word1, word2)
    assert len(merged) == len(word1) + len(word2)
    assert sorted(merged) == sorted(word1 + word2)


@given(words, words)
def test_merge_interleaves_common_prefix(word1, word2):
    merged = merge_alternately(word1, word2)
    shared = min(len(word1), len(word2))
    assert merged[: 2 * shared : 2] == word1[:shared]
    assert merged[1 : 2 * shared : 2] == word2[:shared]
    assert merged[2 * shared :] == word1[shared:] + word2[shared:]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("abcabcbb", 3),
        ("bbbbb", 1),
        ("pwwkew", 3),
        ("abcdbef", 5),
        ("aab", 2),
    ],
)
def test_longest_unique_substring_cases(text, expected):
    assert longest_unique_substring(text) == expected


def test_longest_unique_substring_of_empty_text():
    assert longest_unique_substring("") == 0


@given(st.text(alphabet="abcd", max_size=40))
def test_longest_unique_window_is_tight(text):
    best = len(text) and longest_unique_substring(text)
    windows = [text[i : i + best] for i in range(len(text) - best + 1)]
    assert any(len(set(w)) == len(w) for w in windows)
    longer = [text[i : i + best + 1] for i in range(len(text) - best)]
    assert all(len(set(w)) < len(w) for w in longer)


@given(st.text(max_size=40))
def test_longest_unique_bounded_by_distinct_characters(text):
    result = longest_unique_substring(text)
    assert result <= len(set(text))
    assert (result == 0) == (text == "")