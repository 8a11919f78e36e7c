# matrixkit

A small toolkit for integer matrices held as plain Python lists of rows,
with a `matrixkit` command that reads matrices as whitespace-separated
integers on standard input.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Library

Everything lives in `matrixkit.operations`. A matrix is a list of lists
of integers. Any function given rows of differing lengths raises
`DimensionError` (a subclass of `ValueError`).

| Function | Result |
| --- | --- |
| `multiply(first, second)` | matrix product; `DimensionError` if the columns of `first` do not match the rows of `second` |
| `scalar_multiply(matrix, scalar)` | new matrix with every element times `scalar` |
| `sort_rows(matrix)` | copy with each row sorted ascending |
| `sort_columns(matrix)` | copy with each column sorted ascending |
| `sum_rows(matrix)` | list of row sums |
| `sum_columns(matrix)` | list of column sums |
| `sum_diagonal(matrix)` | sum of the main diagonal; square matrices only |
| `count_zeroes(matrix)` | number of zero elements |
| `find_element(matrix, element)` | list of `(row, column)` positions holding `element`, in row-major order |
| `edit_element(matrix, row, col, value)` | sets one element in place; `IndexError` for an index outside the matrix |
| `check_matrix_type(matrix)` | a `MatrixType` for a square matrix |
| `format_matrix(matrix)` | text with one line per row, each element followed by a space |

`MatrixType` has the members `UPPER_TRIANGULAR`, `LOWER_TRIANGULAR` and
`NEITHER`. A matrix that is both (such as a diagonal matrix) is reported
as `UPPER_TRIANGULAR`. `check_matrix_type` and `sum_diagonal` raise
`DimensionError` for a matrix that is not square.

```python
from matrixkit.operations import (
    MatrixType,
    DimensionError,
    check_matrix_type,
    count_zeroes,
    multiply,
    scalar_multiply,
    sum_rows,
    format_matrix,
)

a = [[1, 2], [3, 4]]
b = [[5, 6], [7, 8]]

print(format_matrix(multiply(a, b)), end="")
# 19 22
# 43 50

print(count_zeroes([[1, 0, 3], [4, 5, 0], [0, 8, 9]]))   # 3
print(sum_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]]))       # [6, 15, 24]

kind = check_matrix_type([[1, 2, 3], [0, 4, 5], [0, 0, 6]])
print(kind is MatrixType.UPPER_TRIANGULAR)                # True

try:
    multiply([[1, 2, 3]], [[1, 2, 3]])
except DimensionError as exc:
    print(exc)
```

## Command line

```
matrixkit COMMAND < input
```

The command reads all of standard input and splits it on whitespace. A
matrix is given as its row count, its column count and then its elements
in row-major order. The commands are:

- `print` – read a matrix and print it under `matrix:`
- `edit` – a matrix, then a row index, a column index and a new value;
  prints whether the edit was made, then the matrix
- `multiply` – the shape of the first matrix, the shape of the second,
  then the elements of the first and then of the second; prints the
  product
- `scalar` – a matrix, then a scalar; prints the scaled matrix
- `search` – a matrix, then a value; prints every position where it
  occurs, or that it was not found
- `sort-rows` – prints the matrix with each row sorted
- `sort-columns` – prints the matrix with each column sorted

For example:

```
$ echo "2 2  1 2  3 4  0 1 9" | matrixkit edit
element [0][1] set to 9.
matrix after edit:
1 9 
3 4 
```

The exit status is 0 on success and 1 when the input runs out, holds
something that is not an integer, or gives shapes that cannot be
multiplied. `matrixkit --help` lists the commands.

## What it does not do

The command does not prompt for input; it only reads standard input.
Row, column and diagonal sums, zero counting and triangular
classification are available from the library only, not as commands.