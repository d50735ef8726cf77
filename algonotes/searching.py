"""Binary-search routines over sorted, rotated and monotone-answer problems."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from typing import Sequence

_NEG_INF = float("-inf")


def median_of_sorted(a: Sequence[int], b: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences."""
    merged = list(heapq.merge(a, b))
    total = len(merged)
    if total == 0:
        raise ValueError("median of two empty sequences")
    middle = total // 2
    if total % 2 == 1:
        return float(merged[middle])
    return (merged[middle - 1] + merged[middle]) / 2


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Find ``target`` in a rotated sorted sequence of distinct values; -1 if absent."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target <= nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] <= target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in a sorted sequence, or (-1, -1)."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return (-1, -1)
    return (first, bisect_right(nums, target) - 1)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target``, or where it would be inserted to keep order."""
    return bisect_left(nums, target)


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows, read one after another, form a sorted sequence."""
    if not matrix or not matrix[0]:
        return False
    first_column = [row[0] for row in matrix]
    row_index = bisect_right(first_column, target) - 1
    if row_index < 0:
        return False
    row = matrix[row_index]
    position = bisect_left(row, target)
    return position < len(row) and row[position] == target


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted sequence that may repeat values."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return True
        if nums[left] == nums[mid] == nums[right]:
            left += 1
            right -= 1
            continue
        if nums[left] <= nums[mid]:
            if nums[left] <= target <= nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] <= target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return False


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated sorted sequence of distinct values."""
    if not nums:
        raise ValueError("minimum of an empty sequence")
    left, right = 0, len(nums) - 1
    best = nums[0]
    while left <= right:
        mid = (left + right) // 2
        if nums[left] <= nums[mid]:
            best = min(best, nums[left])
            left = mid + 1
        else:
            best = min(best, nums[mid])
            right = mid - 1
    return best


def find_peak_element(nums: Sequence[int]) -> int:
    """Return an index whose value exceeds both neighbours; -1 for an empty sequence."""
    n = len(nums)
    left, right = 0, n - 1
    while left <= right:
        mid = (left + right) // 2
        rises = mid == 0 or nums[mid] > nums[mid - 1]
        if rises and (mid == n - 1 or nums[mid] > nums[mid + 1]):
            return mid
        if rises:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows and columns are each sorted ascending."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            row += 1
        else:
            col -= 1
    return False


def _pieces_needed(values: Sequence[int], limit: int) -> int:
    pieces, load = 1, 0
    for value in values:
        if load + value <= limit:
            load += value
        else:
            pieces += 1
            load = value
    return pieces


def split_array(nums: Sequence[int], k: int) -> int:
    """Return the smallest possible largest sum when ``nums`` is split into ``k`` runs."""
    if k > len(nums):
        raise ValueError("cannot split into more parts than there are elements")
    if not nums:
        raise ValueError("cannot split an empty sequence")
    low, high = max(nums), sum(nums)
    while low <= high:
        mid = (low + high) // 2
        if _pieces_needed(nums, mid) > k:
            low = mid + 1
        else:
            high = mid - 1
    return low


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one value that appears once in a sorted sequence of pairs."""
    n = len(nums)
    if n == 0:
        raise ValueError("empty sequence")
    if n == 1 or nums[0] != nums[1]:
        return nums[0]
    if nums[-1] != nums[-2]:
        return nums[-1]
    left, right = 1, n - 2
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] != nums[mid - 1] and nums[mid] != nums[mid + 1]:
            return nums[mid]
        if (mid % 2 == 0 and nums[mid] == nums[mid + 1]) or (
            mid % 2 == 1 and nums[mid] == nums[mid - 1]
        ):
            left = mid + 1
        else:
            right = mid - 1
    raise ValueError("no single element found")


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a sorted sequence, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            right = mid - 1
        else:
            left = mid + 1
    return -1


def peak_index_in_mountain(arr: Sequence[int]) -> int:
    """Return the index of the summit of a mountain-shaped sequence; -1 if empty."""
    n = len(arr)
    left, right = 0, n - 1
    answer = -1
    while left <= right:
        mid = (left + right) // 2
        before = arr[mid - 1] if mid > 0 else _NEG_INF
        after = arr[mid + 1] if mid < n - 1 else _NEG_INF
        if arr[mid] >= before and arr[mid] >= after:
            answer = mid
        if arr[mid] >= before:
            left = mid + 1
        else:
            right = mid - 1
    return answer


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest eating speed that finishes all piles within ``h`` hours."""
    if not piles:
        raise ValueError("no piles given")
    low, high = 1, max(piles)
    while low <= high:
        mid = (low + high) // 2
        if sum(_ceil_div(pile, mid) for pile in piles) <= h:
            high = mid - 1
        else:
            low = mid + 1
    return low


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Return the least ship capacity that carries all weights, in order, within ``days``."""
    if not weights:
        raise ValueError("no weights given")
    low, high = max(weights), sum(weights)
    while low <= high:
        mid = (low + high) // 2
        if _pieces_needed(weights, mid) <= days:
            high = mid - 1
        else:
            low = mid + 1
    return low


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Return the least divisor whose rounded-up quotients sum to at most ``threshold``."""
    if not nums:
        raise ValueError("no numbers given")
    answer = None
    low, high = 1, max(nums)
    while low <= high:
        mid = (low + high) // 2
        if sum(_ceil_div(num, mid) for num in nums) <= threshold:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    if answer is None:
        raise ValueError("no divisor meets the threshold")
    return answer


def _bouquets(bloom_day: Sequence[int], day: int, k: int) -> int:
    made = run = 0
    for bloom in bloom_day:
        if bloom <= day:
            run += 1
        else:
            made += run // k
            run = 0
    return made + run // k


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """Return the first day on which ``m`` bouquets of ``k`` adjacent flowers exist, or -1."""
    if not bloom_day:
        return -1
    best = -1
    left, right = 1, max(bloom_day)
    while left <= right:
        mid = (left + right) // 2
        if _bouquets(bloom_day, mid, k) < m:
            left = mid + 1
        else:
            best = mid
            right = mid - 1
    return best


def find_kth_positive(arr: Sequence[int], k: int) -> int:
    """Return the k-th positive integer missing from a sorted sequence of positives."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] - (mid + 1) < k:
            low = mid + 1
        else:
            high = mid - 1
    return high + 1 + k


def find_peak_grid(mat: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return (row, column) of a cell larger than its neighbours, or (-1, -1)."""
    if not mat or not mat[0]:
        return (-1, -1)
    rows, cols = len(mat), len(mat[0])
    low, high = 0, cols - 1
    while low <= high:
        mid = (low + high) // 2
        row = max(range(rows), key=lambda r: mat[r][mid])
        value = mat[row][mid]
        left = mat[row][mid - 1] if mid > 0 else _NEG_INF
        right = mat[row][mid + 1] if mid < cols - 1 else _NEG_INF
        if value > left and value > right:
            return (row, mid)
        if value < left:
            high = mid - 1
        else:
            low = mid + 1
    return (-1, -1)