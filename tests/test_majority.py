import pytest
from hypothesis import given
from hypothesis import strategies as st

from twopointers.majority import (
    majority_by_counting,
    majority_by_sorting,
    majority_by_voting,
)


@st.composite
def with_majority(draw):
    winner = draw(st.integers(min_value=-(10**9), max_value=10**9))
    others = draw(
        st.lists(
            st.integers(min_value=-(10**9), max_value=10**9).filter(lambda x: x != winner),
            max_size=20,
        )
    )
    extra = draw(st.integers(min_value=0, max_value=5))
    values = [winner] * (len(others) + 1 + extra) + others
    return winner, list(draw(st.permutations(values)))


@pytest.mark.parametrize(
    ("nums", "expected"),
    [
        ([3, 2, 3], 3),
        ([2, 2, 1, 1, 1, 2, 2], 2),
    ],
)
def test_majority_cases(nums, expected):
    assert majority_by_sorting(list(nums)) == expected
    assert majority_by_counting(list(nums)) == expected
    assert majority_by_voting(list(nums)) == expected


def test_majority_of_empty_sequence_is_rejected():
    with pytest.raises(ValueError):
        majority_by_sorting([])
    with pytest.raises(ValueError):
        majority_by_counting([])
    with pytest.raises(ValueError):
        majority_by_voting([])


@given(case=with_majority())
def test_majority_is_found(case):
    winner, nums = case
    assert majority_by_sorting(list(nums)) == winner
    assert majority_by_counting(list(nums)) == winner
    assert majority_by_voting(list(nums)) == winner


def test_majority_leaves_input_unchanged():
    nums = [2, 2, 1, 1, 1, 2, 2]
    snapshot = list(nums)
    assert majority_by_sorting(nums) == 2
    assert nums == snapshot
    assert majority_by_counting(nums) == 2
    assert nums == snapshot
    assert majority_by_voting(nums) == 2
    assert nums == snapshot


@given(case=with_majority())
def test_majority_finders_agree(case):
    _, nums = case
    assert majority_by_sorting(nums) == majority_by_counting(nums) == majority_by_voting(nums)