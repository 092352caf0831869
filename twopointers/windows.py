"""Two-pointer and sliding-window searches over lists of numbers."""

from __future__ import annotations

from collections.abc import Sequence


def max_area(height: Sequence[int]) -> int:
    """Return the most water held between two of the vertical lines in ``height``.

    The pointers move inwards from both ends; an area is only evaluated when
    the line just reached is taller than the shorter of the last lines that
    were accepted on either side.
    """
    if not height:
        raise ValueError("at least one line is required")
    beg, end = 0, len(height) - 1
    water = (end - beg) * min(height[beg], height[end])
    best_beg, best_end = beg, end
    while beg < end:
        threshold = min(height[best_beg], height[best_end])
        if height[beg] < height[end]:
            if height[beg] > threshold:
                water = max(water, (end - beg) * height[beg])
                best_beg = beg
            beg += 1
        else:
            if height[end] > threshold:
                water = max(water, (end - beg) * min(height[beg], height[end]))
                best_end = end
            end -= 1
    return water


def _require_positive(target: int) -> None:
    if target < 1:
        raise ValueError("target must be positive")


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run of ``nums`` summing to at least ``target``.

    Returns 0 when no run reaches the target.
    """
    _require_positive(target)
    best = 0
    total = 0
    tail = 0
    for head, value in enumerate(nums, start=1):
        total += value
        while total >= target:
            length = head - tail
            best = min(best, length) if best else length
            total -= nums[tail]
            tail += 1
    return best


def min_exact_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run found whose sum equals ``target``.

    Once a window matches it slides forward by one place at its full length.
    Returns 0 when no window matches.
    """
    _require_positive(target)
    n = len(nums)
    best = 0
    total = 0
    tail = head = 0
    while head < n or (tail < n and total >= target):
        if total < target:
            total += nums[head]
            head += 1
        elif total > target:
            total -= nums[tail]
            tail += 1
        else:
            length = head - tail
            best = min(best, length) if best else length
            if head == n:
                break
            total += nums[head] - nums[tail]
            head += 1
            tail += 1
    return best