import pytest

from algokit.sums import (
    can_pair_at_least,
    four_sum,
    has_pair_with_difference,
    subarray_sum,
    subarrays_divisible_by,
    three_sum,
    two_sum,
)


def test_two_sum_returns_later_index_first():
    nums = [2, 7, 11, 15]
    i, j = two_sum(nums, 9)
    assert nums[i] + nums[j] == 9
    assert i > j
    assert (i, j) == (1, 0)


def test_two_sum_not_found():
    assert two_sum([1, 2, 3], 100) is None


def test_two_sum_same_value_twice():
    nums = [3, 3]
    i, j = two_sum(nums, 6)
    assert {i, j} == {0, 1}


def test_three_sum_example():
    nums = [-1, 0, 1, 2, -1, -4]
    assert three_sum(nums) == [(-1, -1, 2), (-1, 0, 1)]
    assert nums == [-1, 0, 1, 2, -1, -4]


def test_three_sum_invariants():
    nums = [-4, -2, -2, -2, 0, 1, 2, 2, 2, 3, 3, 4, 4, 6, 6]
    triples = three_sum(nums)
    assert triples
    assert all(sum(t) == 0 for t in triples)
    assert all(list(t) == sorted(t) for t in triples)
    assert len(set(triples)) == len(triples)


def test_three_sum_all_zero():
    assert three_sum([0, 0, 0, 0]) == [(0, 0, 0)]


def test_four_sum_example():
    assert four_sum([1, 0, -1, 0, -2, 2], 0) == [(-2, -1, 1, 2), (-2, 0, 0, 2), (-1, 0, 0, 1)]


def test_four_sum_repeated_values():
    assert four_sum([2, 2, 2, 2, 2], 8) == [(2, 2, 2, 2)]


def test_four_sum_invariants():
    nums = [-3, -1, 0, 2, 4, 5, -2, 1, 1, 3]
    target = 2
    quads = four_sum(nums, target)
    assert quads
    assert all(sum(q) == target for q in quads)
    assert len(set(quads)) == len(quads)


def test_four_sum_too_short():
    assert four_sum([1, 2, 3], 6) == []


def test_subarrays_divisible_example():
    assert subarrays_divisible_by([4, 5, 0, -2, -3, 1], 5) == 7


def test_subarrays_divisible_by_one_counts_all():
    nums = [3, -1, 4]
    assert subarrays_divisible_by(nums, 1) == subarray_sum([0] * len(nums), 0)


def test_subarrays_divisible_zero_k():
    with pytest.raises(ValueError):
        subarrays_divisible_by([1, 2], 0)


def test_subarray_sum_example():
    assert subarray_sum([1, 1, 1], 2) == 2


def test_subarray_sum_single_element_match():
    assert subarray_sum([5], 5) == len([5])
    assert subarray_sum([5], 4) == subarray_sum([], 4)


@pytest.mark.parametrize(
    "arr, x, expected",
    [([5, 20, 3, 2, 5, 80], 78, True), ([90, 70, 20, 80, 50], 45, False), ([1, 1], 0, True)],
)
def test_has_pair_with_difference(arr, x, expected):
    assert has_pair_with_difference(arr, x) is expected


def test_can_pair_at_least():
    assert can_pair_at_least(10, [2, 1, 3], [7, 8, 9]) is True
    assert can_pair_at_least(5, [1, 2, 2, 1], [3, 3, 3, 4]) is False


def test_can_pair_at_least_does_not_mutate():
    arr1, arr2 = [3, 1], [1, 3]
    can_pair_at_least(4, arr1, arr2)
    assert (arr1, arr2) == ([3, 1], [1, 3])


def test_can_pair_at_least_short_second():
    with pytest.raises(ValueError):
        can_pair_at_least(1, [1, 2], [1])