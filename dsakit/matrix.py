"""Matrix routines: diagonal sums, spiral traversal and searches for a value."""

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def diagonal_sum(matrix: Matrix) -> int:
    """Return the sum of both diagonals, counting a shared centre cell once."""
    n = len(matrix)
    total = 0
    for i, row in enumerate(matrix):
        if i < len(row):
            total += row[i]
        anti = n - 1 - i
        if anti != i and 0 <= anti < len(row):
            total += row[anti]
    return total


def spiral_order(matrix: Matrix) -> list[int]:
    """Return the elements of a rectangular matrix in clockwise spiral order."""
    rows, cols = _shape(matrix)
    result: list[int] = []
    top, left, bottom, right = 0, 0, rows - 1, cols - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        result.extend(matrix[r][right] for r in range(top + 1, bottom + 1))
        if top != bottom:
            result.extend(matrix[bottom][c] for c in range(right - 1, left - 1, -1))
        if left != right:
            result.extend(matrix[r][left] for r in range(bottom - 1, top, -1))
        top += 1
        left += 1
        bottom -= 1
        right -= 1
    return result


def find_linear(matrix: Matrix, target: int) -> tuple[int, int] | None:
    """Return the first (row, column) holding ``target`` in row-major order, or None."""
    return next(
        (
            (r, c)
            for r, row in enumerate(matrix)
            for c, value in enumerate(row)
            if value == target
        ),
        None,
    )


def find_staircase(matrix: Matrix, target: int) -> tuple[int, int] | None:
    """Find ``target`` in a matrix whose rows and columns ascend.

    The search starts at the bottom-left corner, moving up when the target is
    smaller and right when it is larger. Returns (row, column) or None.
    """
    rows, cols = _shape(matrix)
    row, col = rows - 1, 0
    while row >= 0 and col < cols:
        value = matrix[row][col]
        if value == target:
            return row, col
        if target < value:
            row -= 1
        else:
            col += 1
    return None