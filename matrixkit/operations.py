"""Operations on integer matrices stored as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

Matrix = list[list[int]]


class MatrixType(Enum):
    """Triangular shape of a square matrix."""

    UPPER_TRIANGULAR = "upper triangular"
    LOWER_TRIANGULAR = "lower triangular"
    NEITHER = "neither"


class DimensionError(ValueError):
    """Raised when a matrix has the wrong shape for an operation."""


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise DimensionError("rows of the matrix differ in length")
    return rows, cols


def _require_square(matrix: Sequence[Sequence[int]]) -> int:
    rows, cols = _shape(matrix)
    if rows != cols:
        raise DimensionError(f"matrix is {rows}x{cols}, not square")
    return rows


def check_matrix_type(matrix: Sequence[Sequence[int]]) -> MatrixType:
    """Classify a square matrix; upper triangular wins when both apply."""
    _require_square(matrix)
    nonzero = [
        (i, j)
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if value != 0
    ]
    if all(i <= j for i, j in nonzero):
        return MatrixType.UPPER_TRIANGULAR
    if all(i >= j for i, j in nonzero):
        return MatrixType.LOWER_TRIANGULAR
    return MatrixType.NEITHER


def count_zeroes(matrix: Sequence[Sequence[int]]) -> int:
    """Number of elements equal to zero."""
    _shape(matrix)
    return sum(value == 0 for row in matrix for value in row)


def edit_element(matrix: Matrix, row: int, col: int, value: int) -> None:
    """Set one element in place; negative or out-of-range indices raise IndexError."""
    rows, cols = _shape(matrix)
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexError(f"index [{row}][{col}] is outside a {rows}x{cols} matrix")
    matrix[row][col] = value


def multiply(first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]) -> Matrix:
    """Matrix product of ``first`` and ``second``."""
    _, c1 = _shape(first)
    r2, _ = _shape(second)
    if c1 != r2:
        raise DimensionError(
            "the number of columns of the first matrix must equal "
            "the number of rows of the second matrix"
        )
    columns = list(zip(*second))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in first
    ]


def scalar_multiply(matrix: Sequence[Sequence[int]], scalar: int) -> Matrix:
    """Every element multiplied by ``scalar``."""
    _shape(matrix)
    return [[value * scalar for value in row] for row in matrix]


def find_element(matrix: Sequence[Sequence[int]], element: int) -> list[tuple[int, int]]:
    """All (row, column) positions holding ``element``, in row-major order."""
    _shape(matrix)
    return [
        (i, j)
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if value == element
    ]


def sort_rows(matrix: Sequence[Sequence[int]]) -> Matrix:
    """A copy with each row sorted in ascending order."""
    _shape(matrix)
    return [sorted(row) for row in matrix]


def sort_columns(matrix: Sequence[Sequence[int]]) -> Matrix:
    """A copy with each column sorted in ascending order."""
    _, cols = _shape(matrix)
    if cols == 0:
        return [list(row) for row in matrix]
    columns = [sorted(column) for column in zip(*matrix)]
    return [list(row) for row in zip(*columns)]


def sum_rows(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Sum of each row."""
    _shape(matrix)
    return [sum(row) for row in matrix]


def sum_columns(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Sum of each column."""
    _shape(matrix)
    return [sum(column) for column in zip(*matrix)]


def sum_diagonal(matrix: Sequence[Sequence[int]]) -> int:
    """Sum of the main diagonal of a square matrix."""
    size = _require_square(matrix)
    return sum(matrix[i][i] for i in range(size))


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """One line per row, each element followed by a space."""
    return "".join(
        "".join(f"{value} " for value in row) + "\n" for row in matrix
    )