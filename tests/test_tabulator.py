from __future__ import annotations

import pytest

from data_tabulate import Tabulator


def test_tabulate_ten_elements_pads_last_row():
    t = Tabulator()

    table = t.tabulate(range(1, 11))

    assert table == [[1, 2, 3], [4, 5, 6], [7, 8, 9], [10, None, None]]
    assert t.column_count == 3
    assert t.row_count == 4
    assert t.fill_count == 2


def test_tabulate_twelve_elements_needs_no_filler():
    t = Tabulator()

    table = t.tabulate(list(range(1, 13)))

    assert table == [[1, 2, 3], [4, 5, 6], [7, 8, 9], [10, 11, 12]]
    assert t.get_column_count() == 3
    assert t.get_row_count() == 4
    assert t.fill_count == 0


def test_max_columns_one_gives_column_vector():
    t = Tabulator()
    t.set_max_columns(1)

    assert t.tabulate([1, 2, 3]) == [[1], [2], [3]]
    assert t.column_count == 1


def test_min_columns_widens_small_sqrt():
    t = Tabulator()
    t.set_min_columns(4)

    assert t.tabulate(range(1, 11)) == [
        [1, 2, 3, 4],
        [5, 6, 7, 8],
        [9, 10, None, None],
    ]


def test_min_columns_larger_than_input_gives_single_padded_row():
    t = Tabulator(min_columns=5)

    assert t.tabulate(["a", "b"]) == [["a", "b", None, None, None]]
    assert t.row_count == 1
    assert t.fill_count == 3


def test_max_columns_caps_sqrt():
    t = Tabulator(max_columns=2)

    assert t.tabulate(range(1, 11)) == [[1, 2], [3, 4], [5, 6], [7, 8], [9, 10]]


def test_sqrt_heuristic_is_not_an_optimal_packing():
    # floor(sqrt(8)) = 2 -> 4x2, although 3 columns would also fit.
    t = Tabulator()
    assert t.tabulate(range(8)) == [[0, 1], [2, 3], [4, 5], [6, 7]]

    # floor(sqrt(3)) = 1 -> a column vector.
    assert t.tabulate("abc") == [["a"], ["b"], ["c"]]


def test_empty_input_clears_cache_and_counts():
    t = Tabulator()
    t.tabulate(range(10))

    assert t.tabulate([]) == []
    assert t.grid == []
    assert t.row_count == 0
    assert t.column_count == 0
    assert t.fill_count == 0


def test_counts_are_absent_before_first_tabulate():
    t = Tabulator()

    assert t.grid is None
    assert t.get_row_count() is None
    assert t.get_column_count() is None
    assert t.fill_count is None


def test_returned_grid_is_independent_of_cache():
    t = Tabulator()
    table = t.tabulate(range(1, 5))

    table[0][0] = "changed"
    table.append(["extra"])

    assert t.grid == [[1, 2], [3, 4]]

    cached = t.grid
    cached[1][1] = "changed"
    assert t.grid == [[1, 2], [3, 4]]


def test_input_sequence_is_not_mutated():
    data = [5, 4, 3, 2, 1]
    Tabulator().tabulate(data)

    assert data == [5, 4, 3, 2, 1]


def test_generator_input_is_materialized():
    t = Tabulator()

    assert t.tabulate(x * x for x in range(4)) == [[0, 1], [4, 9]]


def test_new_call_overwrites_cache():
    t = Tabulator()
    t.tabulate(range(1, 13))
    t.tabulate(range(13, 17))

    assert t.grid == [[13, 14], [15, 16]]
    assert t.column_count == 2
    assert t.row_count == 2


@pytest.mark.parametrize("n", list(range(0, 60)) + [99, 100, 101, 1000])
@pytest.mark.parametrize("bounds", [(1, 100_000), (1, 3), (4, 6), (7, 7), (2, 50)])
def test_grid_is_rectangular_and_keeps_all_elements(n, bounds):
    lo, hi = bounds
    fill = object()
    t = Tabulator(min_columns=lo, max_columns=hi, fill_value=fill)

    data = list(range(n))
    table = t.tabulate(data)

    if n == 0:
        assert table == []
        return

    cols = t.column_count
    rows = t.row_count
    assert lo <= cols <= hi
    assert rows == len(table)
    assert all(len(r) == cols for r in table)
    assert sum(len(r) for r in table) == rows * cols

    flat = [c for r in table for c in r]
    assert [c for c in flat if c is not fill] == data
    # Fillers are confined to the trailing slots of the last row.
    assert flat[:n] == data
    assert all(c is fill for c in flat[n:])
    assert t.fill_count == rows * cols - n
    assert t.fill_count < cols
