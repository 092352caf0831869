# twopointers

Small implementations of classic two-pointer and sliding-window algorithms
over Python lists and strings. The package uses only the standard library.

## Installation

```
pip install .
```

## Modules

### `twopointers.arrays`: in-place list edits

- `remove_duplicates(nums)` collapses runs of equal values. In a sorted list
  this leaves one copy of each value. The distinct values are moved to the
  front in order, and the function returns how many there are. Anything past
  that length is left as it was.
- `remove_duplicates_keep_two(nums)` keeps at most two copies of each value of
  a sorted list at the front and returns the length of that prefix.
- `remove_element(nums, val)` moves every value other than `val` to the front
  and returns how many there are. The order of the kept values is not
  preserved.
- `merge_sorted(nums1, m, nums2, n)` merges the first `n` values of `nums2`
  into `nums1`. `nums1` holds `m` sorted values followed by room for `n` more.
  It raises `ValueError` in three cases:
  - `m` or `n` is negative;
  - `nums1` is too short to hold `m + n` values;
  - `nums2` holds fewer than `n` values.
- `move_zeroes(nums)` and `move_zeroes_by_swapping(nums)` move every zero to
  the end and keep the other values in their order.

### `twopointers.rotation`: rotating a list right by `k` places, in place

The module has four variants:

- `rotate(nums, k)` joins the two slices.
- `rotate_by_reversal(nums, k)` uses three reversals.
- `rotate_by_cycles(nums, k)` follows permutation cycles.
- `rotate_by_copy(nums, k)` saves the tail and shifts the rest.

`k` is taken modulo the list's length. Rotating an empty list raises
`ValueError`.

### `twopointers.majority`: the value that fills more than half of a sequence

- `majority_by_sorting(nums)` returns the middle value of the sorted sequence.
- `majority_by_counting(nums)` returns the most frequent value.
- `majority_by_voting(nums)` uses Boyer-Moore voting.

An empty sequence raises `ValueError`.

### `twopointers.stocks`: profit from a series of prices

- `max_profit_single_trade(prices)` returns the best profit from one purchase
  followed by one later sale, or 0 when no sale beats its purchase.
- `max_profit_many_trades(prices)` returns the sum of every rise from one price
  to the next.

An empty series raises `ValueError`.

### `twopointers.strings`: string problems

- `merge_alternately(word1, word2)` interleaves the letters of both words and
  appends the rest of the longer one.
- `longest_unique_substring(s)` returns the length of the longest run of `s`
  with no repeated character.

### `twopointers.windows`: searches over lists of numbers

- `max_area(height)` returns the most water held between two vertical lines.
  - Two pointers move inwards from both ends.
  - An area is only evaluated when the line just reached is taller than the
    shorter of the last lines accepted on either side.
  - An empty list raises `ValueError`.
- `min_subarray_len(target, nums)` returns the length of the shortest run of
  `nums` whose sum is at least `target`, or 0 when there is none.
- `min_exact_subarray_len(target, nums)` returns the length of the shortest
  window found whose sum equals `target`, or 0 when none matches. After a
  match the window slides forward one place at its full length.

Both subarray functions raise `ValueError` when `target` is less than 1.

## Example

```python
from twopointers.arrays import remove_duplicates
from twopointers.rotation import rotate
from twopointers.strings import merge_alternately

nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
n = remove_duplicates(nums)
print(nums[:n])                       # [0, 1, 2, 3, 4]

values = [1, 2, 3, 4, 5, 6, 7]
rotate(values, 3)
print(values)                         # [5, 6, 7, 1, 2, 3, 4]

print(merge_alternately("ab", "pqrs"))  # apbqrs
```

## What it does not do

The package is a library of functions only. It has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```