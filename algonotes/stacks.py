"""Problems solved with a stack: brackets, histograms, monotone scans."""

from __future__ import annotations

from typing import Sequence

_MOD = 10**9 + 7
_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed by its partner in order."""
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif stack and _PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under the histogram."""
    best = 0
    stack: list[int] = []
    for index, height in enumerate([*heights, None]):
        while stack and (height is None or heights[stack[-1]] > height):
            top = stack.pop()
            previous = stack[-1] if stack else -1
            best = max(best, heights[top] * (index - previous - 1))
        stack.append(index)
    return best


def maximal_rectangle(matrix: Sequence[Sequence[str]]) -> int:
    """Return the area of the largest all-'1' rectangle in a grid of '0' and '1'."""
    if not matrix or not matrix[0]:
        return 0
    columns = len(matrix[0])
    heights = [0] * columns
    best = 0
    for row in matrix:
        if len(row) != columns:
            raise ValueError("all rows must have the same length")
        for col, cell in enumerate(row):
            if cell == "1":
                heights[col] += 1
            elif cell == "0":
                heights[col] = 0
            else:
                raise ValueError(f"unexpected cell {cell!r}; expected '0' or '1'")
        best = max(best, largest_rectangle_area(heights))
    return best


def remove_k_digits(num: str, k: int) -> str:
    """Return the smallest number left after removing ``k`` digits from ``num``."""
    stack: list[str] = []
    for digit in num:
        while stack and k > 0 and stack[-1] > digit:
            stack.pop()
            k -= 1
        stack.append(digit)
    if k > 0:
        del stack[-k:]
    return "".join(stack).lstrip("0") or "0"


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the next greater value after it in ``nums2``."""
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and value > stack[-1]:
            stack.pop()
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    try:
        return [greater[value] for value in nums1]
    except KeyError as exc:
        raise ValueError(f"{exc.args[0]!r} does not occur in nums2") from None


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """Return the next greater value for each element, wrapping around; -1 if none."""
    n = len(nums)
    result = [-1] * n
    stack: list[int] = []
    for i in reversed(range(2 * n)):
        value = nums[i % n]
        while stack and stack[-1] <= value:
            stack.pop()
        if i < n:
            result[i] = stack[-1] if stack else -1
        stack.append(value)
    return result


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """Return the asteroids left after all collisions; sign gives the direction."""
    survivors: list[int] = []
    for asteroid in asteroids:
        if asteroid > 0:
            survivors.append(asteroid)
            continue
        size = abs(asteroid)
        while survivors and 0 < survivors[-1] < size:
            survivors.pop()
        if survivors and survivors[-1] == size:
            survivors.pop()
        elif not survivors or survivors[-1] < 0:
            survivors.append(asteroid)
    return survivors


def _sum_of_minimums(arr: Sequence[int]) -> int:
    n = len(arr)
    left = [0] * n
    right = [0] * n

    stack: list[tuple[int, int]] = []
    for i, value in enumerate(arr):
        span = 1
        while stack and stack[-1][0] > value:
            span += stack.pop()[1]
        stack.append((value, span))
        left[i] = span

    stack = []
    for i in reversed(range(n)):
        value = arr[i]
        span = 1
        while stack and stack[-1][0] >= value:
            span += stack.pop()[1]
        stack.append((value, span))
        right[i] = span

    return sum(value * l * r for value, l, r in zip(arr, left, right))


def sum_subarray_mins(arr: Sequence[int]) -> int:
    """Return the sum of the minimum of every contiguous subarray, modulo 1e9+7."""
    return _sum_of_minimums(arr) % _MOD


def sub_array_ranges(nums: Sequence[int]) -> int:
    """Return the sum over all subarrays of their largest minus smallest element."""
    sum_of_maximums = -_sum_of_minimums([-value for value in nums])
    return sum_of_maximums - _sum_of_minimums(nums)