import pytest

from algonotes.stacks import (
    asteroid_collision,
    is_valid_parentheses,
    largest_rectangle_area,
    maximal_rectangle,
    next_greater_element,
    next_greater_elements,
    remove_k_digits,
    sub_array_ranges,
    sum_subarray_mins,
)


@pytest.mark.parametrize("s", ["", "()", "()[]{}", "{[()]}", "(([]){})"])
def test_valid_parentheses_accepts_balanced(s):
    assert is_valid_parentheses(s) is True


@pytest.mark.parametrize("s", ["(]", "(", ")", "([)]", "(x)", "{{}"])
def test_valid_parentheses_rejects_unbalanced(s):
    assert is_valid_parentheses(s) is False


def test_largest_rectangle_worked_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


def test_largest_rectangle_empty_and_flat():
    assert largest_rectangle_area([]) == 0
    assert largest_rectangle_area([4] * 7) == 4 * 7


@pytest.mark.parametrize("heights", [[3, 1, 4, 1, 5, 9, 2, 6], [1, 2, 3, 4], [5, 4, 3]])
def test_largest_rectangle_bounds(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)
    assert largest_rectangle_area(list(reversed(heights))) == area


def test_maximal_rectangle_all_ones_and_zeros():
    ones = [["1"] * 4 for _ in range(3)]
    zeros = [["0"] * 4 for _ in range(3)]
    assert maximal_rectangle(ones) == 3 * 4
    assert maximal_rectangle(zeros) == 0
    assert maximal_rectangle([]) == 0


def test_maximal_rectangle_single_row_matches_histogram():
    row = list("1101111011")
    assert maximal_rectangle([row]) == largest_rectangle_area([int(c) for c in row])


def test_maximal_rectangle_transpose_invariant():
    grid = ["10100", "10111", "11111", "10010"]
    matrix = [list(r) for r in grid]
    transposed = [list(col) for col in zip(*matrix)]
    assert maximal_rectangle(matrix) == maximal_rectangle(transposed)


def test_maximal_rectangle_rejects_other_cells():
    with pytest.raises(ValueError):
        maximal_rectangle([["1", "2"]])


def test_remove_k_digits_worked_example():
    assert remove_k_digits("1432219", 3) == "1219"


def test_remove_k_digits_strips_leading_zeros():
    result = remove_k_digits("10200", 1)
    assert not result.startswith("0")
    assert int(result) == 200


def test_remove_k_digits_everything_removed():
    assert remove_k_digits("10", 2) == "0"
    assert remove_k_digits("987", 3) == "0"


def test_remove_k_digits_keeps_number_when_k_zero():
    assert remove_k_digits("12345", 0) == "12345"


def test_remove_k_digits_result_not_larger_than_any_single_removal():
    num = "5337142"
    best = remove_k_digits(num, 1)
    for i in range(len(num)):
        assert int(best) <= int(num[:i] + num[i + 1:])


def test_next_greater_element_invariants():
    nums2 = [1, 3, 4, 2, 7, 5]
    nums1 = [4, 1, 2, 5]
    result = next_greater_element(nums1, nums2)
    assert len(result) == len(nums1)
    for value, greater in zip(nums1, result):
        if greater != -1:
            assert greater > value
            assert nums2.index(greater) > nums2.index(value)


def test_next_greater_element_ascending_and_descending():
    assert next_greater_element([1, 2, 3], [1, 2, 3, 4]) == [2, 3, 4]
    assert next_greater_element([3, 2, 1], [3, 2, 1]) == [-1, -1, -1]


def test_next_greater_element_missing_value():
    with pytest.raises(ValueError):
        next_greater_element([9], [1, 2])


def test_next_greater_elements_wraps_around():
    nums = [3, 1, 2]
    assert next_greater_elements(nums) == [-1, 2, 3]


def test_next_greater_elements_invariants():
    nums = [5, 4, 3, 2, 1, 6, 6]
    result = next_greater_elements(nums)
    assert all(r == -1 or r > v for v, r in zip(nums, result))
    assert all(r == -1 for v, r in zip(nums, result) if v == max(nums))
    assert next_greater_elements([7, 7, 7]) == [-1, -1, -1]
    assert next_greater_elements([]) == []


def test_asteroid_collision_same_direction_untouched():
    assert asteroid_collision([1, 2, 3]) == [1, 2, 3]
    assert asteroid_collision([-3, -2, -1]) == [-3, -2, -1]
    assert asteroid_collision([-2, -1, 1, 2]) == [-2, -1, 1, 2]


def test_asteroid_collision_equal_sizes_destroy_each_other():
    assert asteroid_collision([5, -5]) == []


def test_asteroid_collision_larger_survives():
    assert asteroid_collision([10, 2, -5]) == [10]
    assert asteroid_collision([2, 3, -10]) == [-10]


def test_sum_subarray_mins_worked_example():
    assert sum_subarray_mins([3, 1, 2, 4]) == 17


def test_sum_subarray_mins_constant_and_single():
    n, v = 6, 4
    assert sum_subarray_mins([v] * n) == v * n * (n + 1) // 2
    assert sum_subarray_mins([42]) == 42
    assert sum_subarray_mins([]) == 0


def test_sum_subarray_mins_is_reduced_modulo():
    assert sum_subarray_mins([10**9 + 7]) == 0
    assert sum_subarray_mins([10**9 + 8]) == 1


def test_sub_array_ranges_invariants():
    nums = [4, -2, -3, 4, 1]
    assert sub_array_ranges(nums) >= 0
    assert sub_array_ranges(list(reversed(nums))) == sub_array_ranges(nums)
    assert sub_array_ranges([5] * 5) == 0
    assert sub_array_ranges([9]) == 0


def test_sub_array_ranges_pair():
    assert sub_array_ranges([1, 8]) == 8 - 1