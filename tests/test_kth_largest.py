import pytest

from algokit.kth_largest import find_kth_largest


def test_documented_examples():
    assert find_kth_largest([3, 2, 1, 5, 6, 4], 2) == 5
    assert find_kth_largest([3, 2, 3, 1, 2, 4, 5, 5, 6], 4) == 4


def test_extremes():
    nums = [7, -3, 12, 0, 5]
    assert find_kth_largest(nums, 1) == max(nums)
    assert find_kth_largest(nums, len(nums)) == min(nums)


def test_matches_sorted_order():
    nums = [9, 1, 8, 2, 7, 3, 7, 4]
    ordered = sorted(nums, reverse=True)
    for k, expected in enumerate(ordered, start=1):
        assert find_kth_largest(nums, k) == expected


def test_input_not_modified():
    nums = [3, 1, 2]
    find_kth_largest(nums, 2)
    assert nums == [3, 1, 2]


@pytest.mark.parametrize("k", [0, -1, 4])
def test_invalid_k(k):
    with pytest.raises(ValueError):
        find_kth_largest([1, 2, 3], k)


def test_empty_input():
    with pytest.raises(ValueError):
        find_kth_largest([], 1)