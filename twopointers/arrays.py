"""In-place compaction, filtering and merging of lists with two pointers."""

from __future__ import annotations

from itertools import groupby


def remove_duplicates(nums: list[int]) -> int:
    """Collapse runs of equal values in place and return how many values remain.

    The distinct values are moved to the front of ``nums`` in their original
    order; whatever lies past the returned length is left as it was.
    """
    if not nums:
        return 0
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def remove_duplicates_keep_two(nums: list[int]) -> int:
    """Keep at most two copies of every value of a sorted list, in place.

    Returns the length of the kept prefix; the rest of ``nums`` is left as is.
    """
    if len(nums) <= 2:
        return len(nums)
    kept = 2
    for value in nums[2:]:
        if value != nums[kept - 2]:
            nums[kept] = value
            kept += 1
    return kept


def remove_element(nums: list[int], val: int) -> int:
    """Move every value other than ``val`` to the front of ``nums``.

    Scanning from the end, each occurrence of ``val`` is overwritten with a
    value taken from the back. The order of the kept values is not preserved.
    Returns how many values differ from ``val``.
    """
    fill = len(nums) - 1
    for pos in reversed(range(len(nums))):
        if nums[pos] == val:
            nums[pos] = nums[fill]
            fill -= 1
    return fill + 1


def merge_sorted(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Merge the first ``n`` values of ``nums2`` into ``nums1`` in place.

    ``nums1`` holds ``m`` sorted values followed by room for ``n`` more; the
    merge fills it from the back so no extra storage is needed.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n values")

    left, right = m - 1, n - 1
    for out in reversed(range(m + n)):
        if right < 0:
            break
        if left >= 0 and nums1[left] >= nums2[right]:
            nums1[out] = nums1[left]
            left -= 1
        else:
            nums1[out] = nums2[right]
            right -= 1


def move_zeroes(nums: list[int]) -> None:
    """Move all zeroes to the end in place, keeping the other values in order."""
    non_zero = [value for value in nums if value]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def move_zeroes_by_swapping(nums: list[int]) -> None:
    """Move all zeroes to the end in place by swapping non-zero values forward."""
    head = 0
    for pos, value in enumerate(nums):
        if value:
            nums[head], nums[pos] = nums[pos], nums[head]
            head += 1