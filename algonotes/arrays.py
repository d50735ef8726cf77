"""Array problems: sums, scans, in-place rearrangements and interval schedules."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from collections import Counter
from functools import reduce
from itertools import accumulate
from operator import xor
from typing import MutableSequence, Optional, Sequence


def two_sum(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return (later index, earlier index) of two values summing to ``target``.

    When several pairs match, the one found last in a left-to-right scan wins.
    Returns None when no pair exists.
    """
    seen: dict[int, int] = {}
    answer: Optional[tuple[int, int]] = None
    for index, value in enumerate(nums):
        partner = target - value
        if partner in seen:
            answer = (index, seen[partner])
        seen[value] = index
    return answer


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return the distinct ascending triplets that sum to zero."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + values[j] + values[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append([first, values[j], values[k]])
                j += 1
                k -= 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
                while j < k and values[k] == values[k + 1]:
                    k -= 1
    return result


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return the distinct ascending quadruplets that sum to ``target``."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n):
            if j != i + 1 and values[j] == values[j - 1]:
                continue
            k, l = j + 1, n - 1
            while k < l:
                total = values[i] + values[j] + values[k] + values[l]
                if total > target:
                    l -= 1
                elif total < target:
                    k += 1
                else:
                    result.append([values[i], values[j], values[k], values[l]])
                    k += 1
                    l -= 1
                    while k < l and values[k] == values[k - 1]:
                        k += 1
                    while k < l and values[l] == values[l + 1]:
                        l -= 1
    return result


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list in place so its unique values lead; return their count."""
    count = 0
    previous = None
    for value in list(nums):
        if count == 0 or value != previous:
            nums[count] = value
            previous = value
            count += 1
    return count


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation.

    The last permutation wraps around to the first (ascending) one.
    """
    n = len(nums)
    dip = next((i for i in range(n - 2, -1, -1) if nums[i] < nums[i + 1]), -1)
    if dip != -1:
        swap = n - 1
        while nums[dip] >= nums[swap]:
            swap -= 1
        nums[dip], nums[swap] = nums[swap], nums[dip]
    nums[dip + 1:] = reversed(nums[dip + 1:])


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation profile holds."""
    if not height:
        return 0
    left_max = list(accumulate(height, max))
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(
        min(left, right) - h
        for h, left, right in zip(height, left_max, right_max)
        if h < left and h < right
    )


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_subarray of an empty sequence")
    current = best = nums[0]
    for value in nums[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping [start, end] intervals; return them sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if not merged or merged[-1][1] < start:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def plus_one(digits: Sequence[int]) -> list[int]:
    """Return the digits of the number one greater than ``digits``."""
    result = list(digits)
    for i in reversed(range(len(result))):
        if result[i] < 9:
            result[i] += 1
            return result
        result[i] = 0
    return [1, *result]


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    i, j, k = m - 1, n - 1, m + n - 1
    while j >= 0:
        if i >= 0 and nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
        k -= 1


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sale."""
    if not prices:
        raise ValueError("no prices given")
    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(xor, nums, 0)


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_product of an empty sequence")
    best = None
    prefix = suffix = 1
    for front, back in zip(nums, reversed(nums)):
        prefix = (prefix or 1) * front
        suffix = (suffix or 1) * back
        candidate = max(prefix, suffix)
        best = candidate if best is None else max(best, candidate)
    return best


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than half the time (Boyer-Moore vote)."""
    candidate = 0
    count = 0
    for value in nums:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def rotate_array(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = [*nums[-k:], *nums[:-k]]


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return the values occurring more than len(nums) // 3 times."""
    first = second = None
    first_count = second_count = 0
    for value in nums:
        if first_count == 0 and value != second:
            first, first_count = value, 1
        elif second_count == 0 and value != first:
            second, second_count = value, 1
        elif value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        else:
            first_count -= 1
            second_count -= 1
    threshold = len(nums) // 3
    counts = Counter(nums)
    return [
        candidate
        for candidate in (first, second)
        if candidate is not None and counts[candidate] > threshold
    ]


def missing_number(nums: Sequence[int]) -> int:
    """Return the one value of 0..len(nums) that is absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the others in order."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of 1s."""
    best = run = 0
    for value in nums:
        if value == 1:
            run += 1
            best = max(best, run)
        else:
            run = 0
    return best


def _sort_counting(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    middle = (len(values) + 1) // 2
    left, left_count = _sort_counting(values[:middle])
    right, right_count = _sort_counting(values[middle:])
    count = left_count + right_count
    pointer = 0
    for value in left:
        while pointer < len(right) and value > 2 * right[pointer]:
            pointer += 1
        count += pointer
    return list(heapq.merge(left, right)), count


def reverse_pairs(nums: Sequence[int]) -> int:
    """Count pairs i < j with nums[i] > 2 * nums[j]."""
    return _sort_counting(list(nums))[1]


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count contiguous subarrays whose sum equals ``k``."""
    seen = Counter({0: 1})
    total = 0
    count = 0
    for value in nums:
        total += value
        count += seen[total - k]
        seen[total] += 1
    return count


def max_events(events: Sequence[Sequence[int]]) -> int:
    """Return how many [start, end] events can be attended, one per day."""
    ordered = sorted((start, end) for start, end in events)
    if not ordered:
        return 0
    ends: list[int] = []
    attended = 0
    index = 0
    day = ordered[0][0]
    while ends or index < len(ordered):
        if not ends:
            day = max(day, ordered[index][0])
        while index < len(ordered) and ordered[index][0] <= day:
            heapq.heappush(ends, ordered[index][1])
            index += 1
        if ends:
            heapq.heappop(ends)
            attended += 1
        day += 1
        while ends and ends[0] < day:
            heapq.heappop(ends)
    return attended


def find_lucky(arr: Sequence[int]) -> int:
    """Return the largest value whose count equals itself, or -1."""
    return max(
        (value for value, count in Counter(arr).items() if value == count), default=-1
    )


def max_event_value(events: Sequence[Sequence[int]], k: int) -> int:
    """Return the best total value of at most ``k`` non-overlapping events.

    Each event is [start, end, value]; an event ending on a day blocks that day.
    """
    ordered = sorted(tuple(event) for event in events)
    n = len(ordered)
    starts = [event[0] for event in ordered]
    following = [
        bisect_right(starts, end, lo=index + 1)
        for index, (_, end, _) in enumerate(ordered)
    ]
    best = [[0] * (k + 1) for _ in range(n + 1)]
    for index in reversed(range(n)):
        value = ordered[index][2]
        nxt = best[following[index]]
        row = best[index]
        skip = best[index + 1]
        for used in range(1, k + 1):
            row[used] = max(skip[used], value + nxt[used - 1])
    return best[0][k]


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` is a rotation of a non-decreasing sequence."""
    n = len(nums)
    if n == 1:
        return True
    drops = sum(1 for i in range(n) if nums[i] > nums[(i + 1) % n])
    return drops <= 1


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Interleave positives (even indices) and non-positives (odd), keeping order."""
    positives = [value for value in nums if value > 0]
    others = [value for value in nums if value <= 0]
    if len(positives) != len(others):
        raise ValueError("needs as many positive as non-positive values")
    return [value for pair in zip(positives, others) for value in pair]


def max_free_time(
    event_time: int, k: int, start_time: Sequence[int], end_time: Sequence[int]
) -> int:
    """Return the longest free stretch after moving at most ``k`` meetings."""
    if not start_time:
        raise ValueError("no meetings given")
    if len(start_time) != len(end_time):
        raise ValueError("start_time and end_time differ in length")
    gaps = [start_time[0]]
    gaps.extend(start - end for start, end in zip(start_time[1:], end_time))
    gaps.append(event_time - end_time[-1])
    window = k + 1
    best = current = 0
    for index, gap in enumerate(gaps):
        current += gap
        if index >= window:
            current -= gaps[index - window]
        best = max(best, current)
    return best