import pytest
from hypothesis import given, strategies as st

from dsakit.matrix import (
    diagonal_sum,
    format_rows,
    search_columns,
    search_rows,
    spiral_order,
    staircase_search_bottom_left,
    staircase_search_top_right,
    transpose,
)

GRID = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
SMALL = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def _matrices(max_side=6):
    return st.integers(min_value=1, max_value=max_side).flatmap(
        lambda width: st.lists(
            st.lists(st.integers(-100, 100), min_size=width, max_size=width),
            min_size=1,
            max_size=max_side,
        )
    )


@pytest.mark.parametrize("key", range(1, 17))
def test_search_finds_every_key(key):
    results = [
        search_rows(GRID, key),
        search_columns(GRID, key),
        staircase_search_top_right(GRID, key),
        staircase_search_bottom_left(GRID, key),
    ]
    for i, j in results:
        assert GRID[i][j] == key


@pytest.mark.parametrize("key", [0, 17, -5, 100])
def test_search_missing_key(key):
    assert search_rows(GRID, key) is None
    assert search_columns(GRID, key) is None
    assert staircase_search_top_right(GRID, key) is None
    assert staircase_search_bottom_left(GRID, key) is None


def test_search_empty_matrix():
    assert search_rows([], 1) is None
    assert search_columns([], 1) is None
    assert staircase_search_top_right([], 1) is None
    assert staircase_search_bottom_left([], 1) is None


@pytest.mark.parametrize(
    "search", [search_columns, staircase_search_top_right, staircase_search_bottom_left]
)
def test_search_rejects_ragged(search):
    with pytest.raises(ValueError):
        search([[1, 2], [3]], 1)


def test_diagonal_sum_source_example():
    assert diagonal_sum(SMALL) == 25


def test_diagonal_sum_even_side():
    assert diagonal_sum(GRID) == 68


def test_diagonal_sum_single_cell():
    assert diagonal_sum([[9]]) == 9


def test_diagonal_sum_rejects_non_square():
    with pytest.raises(ValueError):
        diagonal_sum([[1, 2, 3], [4, 5, 6]])


@given(
    st.integers(min_value=1, max_value=6).flatmap(
        lambda n: st.lists(
            st.lists(st.integers(-100, 100), min_size=n, max_size=n),
            min_size=n,
            max_size=n,
        )
    )
)
def test_diagonal_sum_invariant_under_transpose(square):
    assert diagonal_sum(transpose(square)) == diagonal_sum(square)


def test_spiral_source_example():
    assert spiral_order(GRID) == [1, 2, 3, 4, 8, 12, 16, 15, 14, 13, 9, 5, 6, 7, 11, 10]


def test_spiral_single_row():
    assert spiral_order([[4, 5, 6]]) == [4, 5, 6]


def test_spiral_single_column():
    assert spiral_order([[4], [5], [6]]) == [4, 5, 6]


def test_spiral_empty():
    assert spiral_order([]) == []


@given(_matrices())
def test_spiral_visits_every_cell_once(matrix):
    order = spiral_order(matrix)
    flat = [value for row in matrix for value in row]
    assert sorted(order) == sorted(flat)


@given(_matrices())
def test_spiral_starts_with_top_row(matrix):
    assert spiral_order(matrix)[: len(matrix[0])] == matrix[0]


def test_transpose_source_example_positions():
    matrix = [[2, 3, 7], [5, 6, 7]]
    result = transpose(matrix)
    assert len(result) == 3
    assert all(result[j][i] == matrix[i][j] for i in range(2) for j in range(3))


@given(_matrices())
def test_transpose_round_trip(matrix):
    assert transpose(transpose(matrix)) == matrix


def test_transpose_rejects_ragged():
    with pytest.raises(ValueError):
        transpose([[1, 2, 3], [4, 6]])


def test_format_rows_ragged_round_trip():
    matrix = [[1, 2, 3], [4, 6], [7, 8, 9, 10]]
    text = format_rows(matrix)
    assert [list(map(int, line.split())) for line in text.splitlines()] == matrix
    assert text.endswith("\n")


@given(_matrices())
def test_format_rows_one_line_per_row(matrix):
    text = format_rows(matrix)
    assert text.count("\n") == len(matrix)
    assert [list(map(int, line.split())) for line in text.splitlines()] == matrix


def test_format_rows_empty():
    assert format_rows([]) == ""