"""In-place and generated matrix routines."""

from __future__ import annotations

from typing import MutableSequence, Sequence


def rotate_image(matrix: list[MutableSequence[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    for i in range(n):
        for j in range(i):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements read clockwise in a spiral from the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    result: list[int] = []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][col] for col in range(left, right + 1))
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def set_zeroes(matrix: list[MutableSequence[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for i in range(num_rows):
        if i == 0:
            rows.append([1])
        else:
            above = rows[-1]
            rows.append([1, *(a + b for a, b in zip(above, above[1:])), 1])
    return rows