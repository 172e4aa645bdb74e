from __future__ import annotations

import pytest

from data_tabulate import ColumnBounds, Tabulator


def test_default_bounds():
    t = Tabulator()

    assert t.min_columns == 1
    assert t.max_columns == 100_000


def test_setting_max_below_min_lowers_min():
    t = Tabulator()
    t.set_min_columns(5)

    assert t.set_max_columns(3) == 3
    assert t.min_columns == 3
    assert t.max_columns == 3


def test_setting_min_above_max_raises_max():
    t = Tabulator()
    t.set_max_columns(3)

    assert t.set_min_columns(8) == 8
    assert t.min_columns == 8
    assert t.max_columns == 8


def test_setters_keep_other_bound_when_consistent():
    t = Tabulator()
    t.set_max_columns(10)
    t.set_min_columns(4)

    assert (t.min_columns, t.max_columns) == (4, 10)

    t.set_max_columns(6)
    assert (t.min_columns, t.max_columns) == (4, 6)


@pytest.mark.parametrize("bad", [0, -3, 2.5, "abc", "0", "07", "", True, None, [3]])
def test_invalid_values_are_ignored(bad):
    t = Tabulator()
    t.set_min_columns(2)
    t.set_max_columns(9)

    assert t.set_min_columns(bad) == 2
    assert t.set_max_columns(bad) == 9
    assert (t.min_columns, t.max_columns) == (2, 9)


def test_digit_strings_are_accepted():
    t = Tabulator()

    assert t.set_max_columns("12") == 12
    assert t.set_min_columns("3") == 3


def test_constructor_applies_max_before_min():
    t = Tabulator(min_columns=10, max_columns=5)

    assert (t.min_columns, t.max_columns) == (10, 10)


def test_column_bounds_clamp_order():
    b = ColumnBounds(minimum=2, maximum=4)

    assert b.clamp(1) == 2
    assert b.clamp(3) == 3
    assert b.clamp(9) == 4


@pytest.mark.parametrize("start_min,start_max", [(1, 1), (2, 8), (5, 100)])
@pytest.mark.parametrize("value", [1, 3, 6, 50, 1000])
def test_bound_pair_never_inverts(start_min, start_max, value):
    b = ColumnBounds(minimum=start_min, maximum=start_max)
    b.set_max(value)
    assert b.minimum <= b.maximum == value

    b = ColumnBounds(minimum=start_min, maximum=start_max)
    b.set_min(value)
    assert value == b.minimum <= b.maximum


@pytest.mark.parametrize("bad", [None, 0, -1, "x", 2.5])
def test_invalid_constructor_bounds_keep_defaults(bad):
    t = Tabulator(min_columns=bad, max_columns=bad)

    assert (t.min_columns, t.max_columns) == (1, 100_000)
    assert t.tabulate(range(1, 11)) == [[1, 2, 3], [4, 5, 6], [7, 8, 9], [10, None, None]]


def test_invalid_max_with_valid_min_keeps_default_max():
    b = ColumnBounds(minimum=3, maximum=0)

    assert (b.minimum, b.maximum) == (3, 100_000)
