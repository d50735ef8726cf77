"""Search by backtracking: combinations, partitions, boards and expressions."""

from __future__ import annotations

from functools import cache
from itertools import product
from typing import Iterable, MutableSequence, Sequence

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

_DIGITS = "123456789"
_EMPTY = "."
_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string a phone keypad can spell for ``digits``."""
    if not digits:
        return []
    pools = [_KEYPAD.get(digit, "") for digit in digits]
    return ["".join(letters) for letters in product(*pools)]


def generate_parentheses(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses."""
    results: list[str] = []

    def build(prefix: str, opened: int, closed: int) -> None:
        if len(prefix) == 2 * n:
            results.append(prefix)
            return
        if opened < n:
            build(prefix + "(", opened + 1, closed)
        if closed < opened:
            build(prefix + ")", opened, closed + 1)

    build("", 0, 0)
    return results


def _fits(board: Sequence[Sequence[str]], row: int, col: int, digit: str) -> bool:
    if any(board[i][col] == digit or board[row][i] == digit for i in range(9)):
        return False
    top, left = row // 3 * 3, col // 3 * 3
    return all(
        board[top + dr][left + dc] != digit for dr in range(3) for dc in range(3)
    )


def _fill(board: list[MutableSequence[str]]) -> bool:
    cell = next(
        ((r, c) for r in range(9) for c in range(9) if board[r][c] == _EMPTY), None
    )
    if cell is None:
        return True
    row, col = cell
    for digit in _DIGITS:
        if _fits(board, row, col, digit):
            board[row][col] = digit
            if _fill(board):
                return True
            board[row][col] = _EMPTY
    return False


def solve_sudoku(board: list[MutableSequence[str]]) -> bool:
    """Fill the empty ('.') cells of a 9x9 board in place; tell whether it worked."""
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("a sudoku board must be 9 rows of 9 cells")
    return _fill(board)


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return the combinations of candidates, each usable repeatedly, summing to target."""
    pool = list(candidates)
    if any(value <= 0 for value in pool):
        raise ValueError("candidates must be positive")
    results: list[list[int]] = []
    chosen: list[int] = []

    def explore(index: int, remaining: int) -> None:
        if remaining == 0:
            results.append(chosen.copy())
            return
        if index >= len(pool):
            return
        value = pool[index]
        if value <= remaining:
            chosen.append(value)
            explore(index, remaining - value)
            chosen.pop()
        explore(index + 1, remaining)

    explore(0, target)
    return results


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct combinations, each candidate used once, summing to target."""
    pool = sorted(candidates)
    results: list[list[int]] = []
    chosen: list[int] = []

    def explore(start: int, remaining: int) -> None:
        if remaining == 0:
            results.append(chosen.copy())
            return
        for index in range(start, len(pool)):
            value = pool[index]
            if index > start and value == pool[index - 1]:
                continue
            if value > remaining:
                break
            chosen.append(value)
            explore(index + 1, remaining - value)
            chosen.pop()

    explore(0, target)
    return results


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an n-by-n board."""
    results: list[list[str]] = []
    placement: list[int] = []
    columns: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            results.append(
                ["." * col + "Q" + "." * (n - col - 1) for col in placement]
            )
            return
        for col in range(n):
            if col in columns or row - col in falling or row + col in rising:
                continue
            placement.append(col)
            columns.add(col)
            falling.add(row - col)
            rising.add(row + col)
            place(row + 1)
            placement.pop()
            columns.discard(col)
            falling.discard(row - col)
            rising.discard(row + col)

    place(0)
    return results


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return all subsets, ordered by the bit mask that selects them."""
    return [
        [value for bit, value in enumerate(nums) if mask >> bit & 1]
        for mask in range(1 << len(nums))
    ]


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent cells, each used once."""
    if not word or not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    used: set[tuple[int, int]] = set()

    def trace(row: int, col: int, index: int) -> bool:
        if index >= len(word):
            return True
        if not (0 <= row < rows and 0 <= col < cols) or (row, col) in used:
            return False
        if board[row][col] != word[index]:
            return False
        used.add((row, col))
        found = any(trace(row + dr, col + dc, index + 1) for dr, dc in _DIRECTIONS)
        used.discard((row, col))
        return found

    return any(
        board[r][c] == word[0] and trace(r, c, 0)
        for r in range(rows)
        for c in range(cols)
    )


def subsets_with_dup(nums: Iterable[int]) -> list[list[int]]:
    """Return the distinct subsets of a collection that may repeat values."""
    pool = sorted(nums)
    results: list[list[int]] = []
    chosen: list[int] = []

    def explore(start: int) -> None:
        results.append(chosen.copy())
        for index in range(start, len(pool)):
            if index > start and pool[index] == pool[index - 1]:
                continue
            chosen.append(pool[index])
            explore(index + 1)
            chosen.pop()

    explore(0)
    return results


def partition_palindromes(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into pieces that are all palindromes."""
    results: list[list[str]] = []
    pieces: list[str] = []

    def explore(start: int) -> None:
        if start >= len(s):
            results.append(pieces.copy())
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                pieces.append(piece)
                explore(end)
                pieces.pop()

    explore(0)
    return results


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether ``s`` splits into words that all appear in ``word_dict``."""
    words = frozenset(word_dict)
    if s in words:
        return True

    @cache
    def breakable(start: int) -> bool:
        if start == len(s):
            return True
        return any(
            s[start:end] in words and breakable(end)
            for end in range(start + 1, len(s) + 1)
        )

    return breakable(0)


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """Return the sets of ``k`` distinct digits 1-9 that sum to ``n``."""
    results: list[list[int]] = []
    chosen: list[int] = []

    def explore(start: int, remaining: int) -> None:
        if remaining == 0 and len(chosen) == k:
            results.append(chosen.copy())
            return
        if remaining < 0 or len(chosen) > k:
            return
        for digit in range(start, 10):
            chosen.append(digit)
            explore(digit + 1, remaining - digit)
            chosen.pop()

    explore(1, n)
    return results


def add_operators(num: str, target: int) -> list[str]:
    """Return every way to put '+', '-' or '*' between the digits to reach ``target``."""
    if num and not (num.isascii() and num.isdigit()):
        raise ValueError("num must consist of decimal digits")
    results: list[str] = []

    def explore(start: int, path: str, value: int, last: int) -> None:
        if start == len(num):
            if value == target:
                results.append(path)
            return
        for end in range(start + 1, len(num) + 1):
            if end > start + 1 and num[start] == "0":
                return
            piece = num[start:end]
            operand = int(piece)
            if start == 0:
                explore(end, piece, operand, operand)
            else:
                explore(end, f"{path}+{piece}", value + operand, operand)
                explore(end, f"{path}-{piece}", value - operand, -operand)
                explore(
                    end,
                    f"{path}*{piece}",
                    value - last + last * operand,
                    last * operand,
                )

    explore(0, "", 0, 0)
    return results