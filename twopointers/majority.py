"""Finding the value that fills more than half of a sequence."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def _require_values(nums: Sequence[int]) -> None:
    if not nums:
        raise ValueError("an empty sequence has no majority element")


def majority_by_sorting(nums: Sequence[int]) -> int:
    """Return the majority element as the middle value of the sorted sequence."""
    _require_values(nums)
    ordered = sorted(nums)
    return ordered[len(ordered) // 2]


def majority_by_counting(nums: Sequence[int]) -> int:
    """Return the most frequent value of the sequence."""
    _require_values(nums)
    return Counter(nums).most_common(1)[0][0]


def majority_by_voting(nums: Sequence[int]) -> int:
    """Return the majority element with the Boyer-Moore voting scheme."""
    _require_values(nums)
    leader = nums[0]
    lead = 0
    for value in nums:
        if lead == 0:
            leader = value
        lead += 1 if value == leader else -1
    return leader