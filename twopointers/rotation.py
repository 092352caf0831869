"""Rotating a list to the right by k places, in place."""

from __future__ import annotations

from math import gcd


def _steps(nums: list[int], k: int) -> int:
    if not nums:
        raise ValueError("cannot rotate an empty list")
    return k % len(nums)


def _reverse(nums: list[int], start: int, stop: int) -> None:
    nums[start:stop] = nums[start:stop][::-1]


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places by joining its two slices."""
    k = _steps(nums, k)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def rotate_by_reversal(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places with three reversals."""
    k = _steps(nums, k)
    split = len(nums) - k
    _reverse(nums, 0, split)
    _reverse(nums, split, len(nums))
    _reverse(nums, 0, len(nums))


def rotate_by_cycles(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places by following permutation cycles."""
    k = _steps(nums, k)
    n = len(nums)
    for start in range(gcd(n, k)):
        held = nums[start]
        idx = start
        source = (idx - k) % n
        while source != start:
            nums[idx] = nums[source]
            idx = source
            source = (idx - k) % n
        nums[idx] = held


def rotate_by_copy(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places, saving the tail and shifting the rest."""
    k = _steps(nums, k)
    split = len(nums) - k
    tail = nums[split:]
    nums[k:] = nums[:split]
    nums[:k] = tail