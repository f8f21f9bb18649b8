"""Searching, walking and reshaping two-dimensional integer grids."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "search_rows",
    "search_columns",
    "staircase_search_top_right",
    "staircase_search_bottom_left",
    "diagonal_sum",
    "spiral_order",
    "transpose",
    "format_rows",
]

Matrix = Sequence[Sequence[int]]
Position = tuple[int, int]


def _shape(matrix: Matrix) -> tuple[int, int]:
    """Return (rows, columns), raising ValueError if rows differ in length."""
    if not matrix:
        return 0, 0
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return len(matrix), width


def _binary_search(seq: Sequence[int], key: int) -> int | None:
    start, end = 0, len(seq) - 1
    while start <= end:
        mid = (start + end) // 2
        if seq[mid] == key:
            return mid
        if seq[mid] < key:
            start = mid + 1
        else:
            end = mid - 1
    return None


def search_rows(matrix: Matrix, key: int) -> Position | None:
    """Binary-search each ascending row in turn; return (row, col) or None."""
    for i, row in enumerate(matrix):
        j = _binary_search(row, key)
        if j is not None:
            return i, j
    return None


def search_columns(matrix: Matrix, key: int) -> Position | None:
    """Binary-search each ascending column in turn; return (row, col) or None."""
    _shape(matrix)
    for j, column in enumerate(zip(*matrix)):
        i = _binary_search(column, key)
        if i is not None:
            return i, j
    return None


def staircase_search_top_right(matrix: Matrix, key: int) -> Position | None:
    """Search a row- and column-sorted matrix starting at the top-right corner."""
    n, m = _shape(matrix)
    i, j = 0, m - 1
    while i < n and j >= 0:
        value = matrix[i][j]
        if value == key:
            return i, j
        if value < key:
            i += 1
        else:
            j -= 1
    return None


def staircase_search_bottom_left(matrix: Matrix, key: int) -> Position | None:
    """Search a row- and column-sorted matrix starting at the bottom-left corner."""
    n, m = _shape(matrix)
    i, j = n - 1, 0
    while i >= 0 and j < m:
        value = matrix[i][j]
        if value == key:
            return i, j
        if value > key:
            i -= 1
        else:
            j += 1
    return None


def diagonal_sum(matrix: Matrix) -> int:
    """Return the sum of both diagonals of a square matrix.

    A centre cell shared by the two diagonals is counted once.
    """
    n, m = _shape(matrix)
    if n != m:
        raise ValueError(f"diagonal sum needs a square matrix, got {n}x{m}")
    total = 0
    for i, row in enumerate(matrix):
        total += row[i]
        if i != n - i - 1:
            total += row[n - i - 1]
    return total


def spiral_order(matrix: Matrix) -> list[int]:
    """Return the elements read clockwise: top, right, bottom, left, inward."""
    n, m = _shape(matrix)
    srow, scol, erow, ecol = 0, 0, n - 1, m - 1
    order: list[int] = []
    while srow <= erow and scol <= ecol:
        order.extend(matrix[srow][j] for j in range(scol, ecol + 1))
        order.extend(matrix[i][ecol] for i in range(srow + 1, erow + 1))
        if srow != erow:
            order.extend(matrix[erow][j] for j in range(ecol - 1, scol - 1, -1))
        if scol != ecol:
            order.extend(matrix[i][scol] for i in range(erow - 1, srow, -1))
        srow += 1
        scol += 1
        erow -= 1
        ecol -= 1
    return order


def transpose(matrix: Matrix) -> list[list[int]]:
    """Return a new matrix whose rows are the columns of the given one."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def format_rows(matrix: Matrix) -> str:
    """Render each row on its own line, values separated by single spaces.

    Rows may differ in length.
    """
    return "".join(" ".join(map(str, row)) + "\n" for row in matrix)