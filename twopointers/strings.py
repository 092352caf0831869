"""String problems solved by walking two positions through the text."""

from __future__ import annotations


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the letters of two words, then append the rest of the longer one."""
    shared = min(len(word1), len(word2))
    interleaved = "".join(a + b for a, b in zip(word1, word2))
    longer = word1 if len(word1) > len(word2) else word2
    return interleaved + longer[shared:]


def longest_unique_substring(s: str) -> int:
    """Return the length of the longest run of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for pos, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = pos
        best = max(best, pos - start + 1)
    return best