import pytest

from matrixkit.operations import (
    DimensionError,
    MatrixType,
    check_matrix_type,
    count_zeroes,
    edit_element,
    find_element,
    format_matrix,
    multiply,
    scalar_multiply,
    sort_columns,
    sort_rows,
    sum_columns,
    sum_diagonal,
    sum_rows,
)

SAMPLE = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
MIXED = [[3, -1, 7], [0, 9, 2], [5, 4, 1], [8, 6, -3]]


def _transpose(matrix):
    return [list(column) for column in zip(*matrix)]


def _identity(n):
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def test_upper_triangular_example():
    matrix = [[1, 2, 3], [0, 4, 5], [0, 0, 6]]
    assert check_matrix_type(matrix) is MatrixType.UPPER_TRIANGULAR


def test_lower_triangular():
    matrix = [[1, 0, 0], [2, 4, 0], [3, 5, 6]]
    assert check_matrix_type(matrix) is MatrixType.LOWER_TRIANGULAR


def test_neither_triangular():
    assert check_matrix_type(SAMPLE) is MatrixType.NEITHER


def test_diagonal_counts_as_upper():
    assert check_matrix_type(_identity(4)) is MatrixType.UPPER_TRIANGULAR


def test_check_type_requires_square():
    with pytest.raises(DimensionError):
        check_matrix_type([[1, 2, 3], [0, 4, 5]])


def test_count_zeroes_example():
    assert count_zeroes([[1, 0, 3], [4, 5, 0], [0, 8, 9]]) == 3


def test_count_zeroes_of_scaled_by_zero_is_size():
    zeroed = scalar_multiply(MIXED, 0)
    assert count_zeroes(zeroed) == len(MIXED) * len(MIXED[0])


def test_edit_element_in_place():
    matrix = [row[:] for row in SAMPLE]
    edit_element(matrix, 1, 2, 42)
    assert matrix[1][2] == 42
    assert find_element(matrix, 42) == [(1, 2)]


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_edit_element_invalid_index(row, col):
    matrix = [row_[:] for row_ in SAMPLE]
    with pytest.raises(IndexError):
        edit_element(matrix, row, col, 0)
    assert matrix == SAMPLE


def test_multiply_known_product():
    assert multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_multiply_by_identity():
    assert multiply(MIXED, _identity(3)) == MIXED
    assert multiply(_identity(4), MIXED) == MIXED


def test_multiply_shape():
    product = multiply(MIXED, _transpose(MIXED))
    assert len(product) == 4
    assert all(len(row) == 4 for row in product)
    assert product == _transpose(product)


def test_multiply_dimension_mismatch():
    with pytest.raises(DimensionError):
        multiply(MIXED, MIXED)


def test_scalar_multiply_composes():
    assert scalar_multiply(scalar_multiply(MIXED, 2), 3) == scalar_multiply(MIXED, 6)
    assert scalar_multiply(MIXED, 1) == MIXED


def test_find_element_positions_hold_element():
    matrix = [[1, 2], [2, 1], [2, 2]]
    positions = find_element(matrix, 2)
    assert all(matrix[i][j] == 2 for i, j in positions)
    assert len(positions) == 4
    assert positions == sorted(positions)


def test_find_element_missing():
    assert find_element(SAMPLE, 100) == []


def test_sort_rows_orders_each_row():
    result = sort_rows(MIXED)
    for original, row in zip(MIXED, result):
        assert all(a <= b for a, b in zip(row, row[1:]))
        assert sorted(original) == row
    assert MIXED[0] == [3, -1, 7]


def test_sort_columns_matches_transposed_row_sort():
    result = sort_columns(MIXED)
    assert result == _transpose(sort_rows(_transpose(MIXED)))
    for column in zip(*result):
        assert all(a <= b for a, b in zip(column, column[1:]))


def test_sums_agree_with_total():
    total = sum(sum_rows(MIXED))
    assert total == sum(sum_columns(MIXED))
    assert sum_columns(MIXED) == sum_rows(_transpose(MIXED))


def test_sum_diagonal_example():
    assert sum_diagonal(SAMPLE) == 15


def test_sum_diagonal_identity():
    assert sum_diagonal(_identity(5)) == 5


def test_sum_diagonal_requires_square():
    with pytest.raises(DimensionError):
        sum_diagonal(MIXED)


def test_ragged_matrix_rejected():
    with pytest.raises(DimensionError):
        sum_rows([[1, 2], [3]])


def test_format_matrix():
    assert format_matrix([[1, 2], [3, 4]]) == "1 2 \n3 4 \n"
    assert format_matrix([]) == ""