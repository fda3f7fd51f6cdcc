import pytest

from algokit.two_sum import two_sum, two_sum_brute, two_sum_reversed


def test_documented_example():
    assert two_sum([2, 7, 11, 15], 9) == [0, 1]
    assert two_sum_brute([2, 7, 11, 15], 9) == [0, 1]


def test_reversed_returns_later_index_first():
    assert two_sum_reversed([2, 7, 11, 15], 9) == [1, 0]


def test_duplicate_values():
    assert two_sum([3, 3], 6) == [0, 1]
    assert two_sum_reversed([3, 3], 6) == [1, 0]
    assert two_sum_brute([3, 3], 6) == [0, 1]


@pytest.mark.parametrize("solve", [two_sum, two_sum_reversed, two_sum_brute])
def test_no_pair_gives_empty(solve):
    assert solve([1, 2, 4], 100) == []


@pytest.mark.parametrize("solve", [two_sum, two_sum_reversed, two_sum_brute])
def test_empty_input(solve):
    assert solve([], 5) == []


@pytest.mark.parametrize("solve", [two_sum, two_sum_reversed, two_sum_brute])
@pytest.mark.parametrize(
    "nums, target",
    [([3, 2, 4], 6), ([-1, -2, -3, -4, -5], -8), ([0, 4, 3, 0], 0), ([5, 1, 9, 2], 11)],
)
def test_result_indices_sum_to_target(solve, nums, target):
    result = solve(nums, target)
    assert len(result) == 2
    i, j = result
    assert i != j
    assert nums[i] + nums[j] == target


def test_brute_does_not_modify_input():
    nums = [3, 2, 4]
    two_sum_brute(nums, 6)
    assert nums == [3, 2, 4]


def test_same_element_not_reused():
    assert two_sum([3, 2, 4], 6) == [1, 2]
    assert two_sum_brute([3, 2, 4], 6) == [1, 2]