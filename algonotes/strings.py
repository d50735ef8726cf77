"""String problems: palindromes, parsing, character counts and string games."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_DECIMAL_DIGITS = frozenset("0123456789")
_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_ALPHABET_SIZE = 26


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; the first one found wins ties."""
    n = len(s)
    if n <= 1:
        return s
    start, length = 0, 1

    def expand(left: int, right: int) -> None:
        nonlocal start, length
        while left >= 0 and right < n and s[left] == s[right]:
            if right - left + 1 > length:
                start, length = left, right - left + 1
            left -= 1
            right += 1

    for centre in range(n):
        expand(centre, centre)
        expand(centre, centre + 1)
    return s[start:start + length]


def my_atoi(s: str) -> int:
    """Parse a leading signed integer, clamped to the 32-bit signed range."""
    rest = s.lstrip(" ")
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DECIMAL_DIGITS:
            break
        value = value * 10 + int(ch)
        if sign * value >= INT_MAX:
            return INT_MAX
        if sign * value <= INT_MIN:
            return INT_MIN
    return sign * value


def roman_to_int(s: str) -> int:
    """Return the value of a Roman numeral."""
    try:
        values = [_ROMAN[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"{exc.args[0]!r} is not a Roman numeral") from None
    return sum(
        -value if value < following else value
        for value, following in zip(values, [*values[1:], 0])
    )


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    if not strs:
        return ""
    first = strs[0]
    for index, ch in enumerate(first):
        if any(index >= len(other) or other[index] != ch for other in strs[1:]):
            return first[:index]
    return first


def reverse_words(s: str) -> str:
    """Return the space-separated words in reverse order, single-spaced."""
    words = [word for word in s.split(" ") if word]
    return " ".join(reversed(words))


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether a one-to-one character mapping turns ``s`` into ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` uses exactly the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def frequency_sort(s: str) -> str:
    """Group characters by descending frequency; equal counts go larger character first."""
    ordered = sorted(Counter(s).items(), key=lambda item: (item[1], item[0]), reverse=True)
    return "".join(ch * count for ch, count in ordered)


def rotate_string(s: str, goal: str) -> bool:
    """Tell whether some rotation of ``s`` equals ``goal``."""
    if len(s) != len(goal):
        return False
    if len(s) < 2:
        return s == goal
    return goal in s + s


def remove_outer_parentheses(s: str) -> str:
    """Strip the outermost pair from each primitive balanced group."""
    pieces: list[str] = []
    depth = 0
    for ch in s:
        if ch == "(":
            if depth > 0:
                pieces.append(ch)
            depth += 1
        else:
            depth -= 1
            if depth > 0:
                pieces.append(ch)
    return "".join(pieces)


def max_depth(s: str) -> int:
    """Return the deepest nesting of parentheses in ``s``."""
    deepest = depth = 0
    for ch in s:
        if ch == "(":
            depth += 1
            deepest = max(deepest, depth)
        elif ch == ")":
            depth -= 1
    return deepest


def beauty_sum(s: str) -> int:
    """Sum, over all substrings, the most minus the least frequent character count."""
    total = 0
    for start in range(len(s)):
        counts: Counter[str] = Counter()
        for ch in s[start:]:
            counts[ch] += 1
            frequencies = counts.values()
            total += max(frequencies) - min(frequencies)
    return total


def largest_odd_number(num: str) -> str:
    """Return the longest prefix of the digit string that ends in an odd digit."""
    return num.rstrip("02468")


def _shifted(shifts: int) -> str:
    return chr(ord("a") + shifts % _ALPHABET_SIZE)


def kth_character(k: int) -> str:
    """Return the k-th letter of the word grown from 'a' by appending its shifted copy."""
    if k < 1:
        raise ValueError("k must be at least 1")
    return _shifted(bin(k - 1).count("1"))


def kth_character_with_operations(k: int, operations: Sequence[int]) -> str:
    """Return the k-th letter when each doubling either copies (0) or shifts (non-zero)."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if k > 2 ** len(operations):
        raise ValueError("k lies beyond the word the operations produce")
    offset = k - 1
    shifts = sum(1 for bit, op in enumerate(operations) if op and offset >> bit & 1)
    return _shifted(shifts)


def possible_string_count(word: str) -> int:
    """Count the strings that might have been meant, at most one key held too long."""
    return 1 + sum(1 for a, b in zip(word, word[1:]) if a == b)