"""Command-line tools that read matrices as whitespace-separated integers on stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator

from matrixkit.operations import (
    Matrix,
    edit_element,
    find_element,
    format_matrix,
    multiply,
    scalar_multiply,
    sort_columns,
    sort_rows,
)


def _next_int(tokens: Iterator[str], what: str) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError(f"input ended before {what}") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer for {what}, got {token!r}") from None


def read_matrix(tokens: Iterable[str], rows: int, cols: int) -> Matrix:
    """Take ``rows * cols`` integers from ``tokens`` in row-major order."""
    if rows < 0 or cols < 0:
        raise ValueError(f"invalid dimensions {rows}x{cols}")
    stream = iter(tokens)
    return [
        [_next_int(stream, f"element [{i}][{j}]") for j in range(cols)]
        for i in range(rows)
    ]


def _read_dimensions(tokens: Iterator[str]) -> tuple[int, int]:
    rows = _next_int(tokens, "the number of rows")
    cols = _next_int(tokens, "the number of columns")
    if rows < 0 or cols < 0:
        raise ValueError(f"invalid dimensions {rows}x{cols}")
    return rows, cols


def _read_one(tokens: Iterator[str]) -> Matrix:
    rows, cols = _read_dimensions(tokens)
    return read_matrix(tokens, rows, cols)


def _show(title: str, matrix: Matrix) -> None:
    print(title)
    print(format_matrix(matrix), end="")


def _cmd_print(tokens: Iterator[str]) -> int:
    _show("matrix:", _read_one(tokens))
    return 0


def _cmd_edit(tokens: Iterator[str]) -> int:
    matrix = _read_one(tokens)
    row = _next_int(tokens, "the row index")
    col = _next_int(tokens, "the column index")
    value = _next_int(tokens, "the new value")
    try:
        edit_element(matrix, row, col, value)
    except IndexError:
        print("invalid row or column index.")
    else:
        print(f"element [{row}][{col}] set to {value}.")
    _show("matrix after edit:", matrix)
    return 0


def _cmd_multiply(tokens: Iterator[str]) -> int:
    r1, c1 = _read_dimensions(tokens)
    r2, c2 = _read_dimensions(tokens)
    if c1 != r2:
        print(
            "Multiplication is not possible. The number of columns of the first "
            "matrix must be equal to the number of rows of the second matrix."
        )
        return 1
    first = read_matrix(tokens, r1, c1)
    second = read_matrix(tokens, r2, c2)
    _show("product of the matrices:", multiply(first, second))
    return 0


def _cmd_scalar(tokens: Iterator[str]) -> int:
    matrix = _read_one(tokens)
    scalar = _next_int(tokens, "the scalar")
    _show(
        "Result of multiplying a matrix by a scalar number:",
        scalar_multiply(matrix, scalar),
    )
    return 0


def _cmd_search(tokens: Iterator[str]) -> int:
    matrix = _read_one(tokens)
    element = _next_int(tokens, "the element to search for")
    positions = find_element(matrix, element)
    for i, j in positions:
        print(f"element {element} found at [{i}][{j}].")
    if not positions:
        print(f"element {element} not found in the matrix.")
    return 0


def _cmd_sort_rows(tokens: Iterator[str]) -> int:
    _show("matrix after sorting rows:", sort_rows(_read_one(tokens)))
    return 0


def _cmd_sort_columns(tokens: Iterator[str]) -> int:
    _show("matrix after sorting columns:", sort_columns(_read_one(tokens)))
    return 0


_COMMANDS: dict[str, tuple[Callable[[Iterator[str]], int], str]] = {
    "print": (_cmd_print, "read a matrix and print it"),
    "edit": (_cmd_edit, "change one element: matrix, then row, column and value"),
    "multiply": (_cmd_multiply, "multiply two matrices: both shapes, then both matrices"),
    "scalar": (_cmd_scalar, "multiply a matrix by a scalar given after it"),
    "search": (_cmd_search, "find an element given after the matrix"),
    "sort-rows": (_cmd_sort_rows, "sort each row in ascending order"),
    "sort-columns": (_cmd_sort_columns, "sort each column in ascending order"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matrixkit",
        description="Matrix tools. A matrix on stdin is its row count, column count "
        "and then its elements in row-major order.",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        sub.add_parser(name, help=help_text)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one command on integers read from stdin; returns the exit status."""
    args = _build_parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    tokens = iter(sys.stdin.read().split())
    try:
        return handler(tokens)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())