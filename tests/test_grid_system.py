# File: tests/test_grid_system.py
"""
Test nice-number axis spacing, tick generation and pixel grid lines.

TEST PHILOSOPHY:
---------------
- Tick values are compared with ==, not approx: labels are built from them,
  and 0.30000000000000004 on an axis is the bug we are guarding against.
"""

import pytest

from jam_seismic.geometry import (
    calculate_grid_spacing,
    format_tick_label,
    generate_ticks,
    grid_line_positions,
    nice_number,
)


def test_grid_spacing_reference_case():
    """
    WHAT IS THIS TEST?
    ==================
    Data from 0 to 97 with about 10 divisions:

        raw  = 97 / 10 = 9.7
        nice = 10
        axis = [0, 100] in 10 steps
    """
    grid = calculate_grid_spacing(0.0, 97.0, 10)
    assert grid.spacing == 10.0
    assert grid.min == 0.0
    assert grid.max == 100.0
    assert grid.divisions == 10


@pytest.mark.parametrize("raw, expected", [
    (9.7, 10.0),
    (1.0, 1.0),
    (1.5, 2.0),
    (3.0, 5.0),
    (0.23, 0.5),
    (250.0, 500.0),
    (0.0012, 0.002),
])
def test_nice_number(raw, expected):
    assert nice_number(raw) == expected


def test_nice_number_rejects_non_positive():
    with pytest.raises(ValueError):
        nice_number(0.0)
    with pytest.raises(ValueError):
        nice_number(-3.0)


def test_grid_spacing_fractional():
    grid = calculate_grid_spacing(0.0, 3.0, 6)
    assert grid.spacing == 0.5
    assert (grid.min, grid.max, grid.divisions) == (0.0, 3.0, 6)


def test_grid_spacing_negative_range():
    grid = calculate_grid_spacing(-7.0, 13.0, 4)
    assert grid.spacing == 5.0
    assert grid.min == -10.0
    assert grid.max == 15.0
    assert grid.divisions == 5


def test_grid_spacing_covers_data_and_divides_evenly():
    for lo, hi, n in [(0.0, 97.0, 10), (-7.0, 13.0, 4), (0.0, 5.0, 5), (12.0, 13.7, 8)]:
        grid = calculate_grid_spacing(lo, hi, n)
        assert grid.min <= lo and grid.max >= hi
        assert grid.divisions * grid.spacing == pytest.approx(grid.max - grid.min)


def test_grid_spacing_tiny_range():
    """
    WHAT IS THIS TEST?
    ==================
    Snapping must scale with the spacing. A range of about 1e-13 has a
    spacing of 1e-14, far below any fixed number of decimal places, and
    the grid must still cover the data instead of collapsing to zero.
    """
    grid = calculate_grid_spacing(0.0, 9.7e-14, 10)
    assert grid.spacing == pytest.approx(1e-14)
    assert grid.min == 0.0
    assert grid.max >= 9.7e-14
    assert grid.divisions == 10
    assert grid.divisions * grid.spacing == pytest.approx(grid.max - grid.min)


def test_generate_ticks_tiny_spacing():
    ticks = generate_ticks(0.0, 1e-13, 1e-14)
    assert len(ticks) == 11
    assert len(set(ticks)) == 11
    assert all(b > a for a, b in zip(ticks, ticks[1:]))
    assert ticks[3] == pytest.approx(3e-14)
    assert ticks[-1] == pytest.approx(1e-13)


def test_grid_spacing_huge_range():
    grid = calculate_grid_spacing(0.0, 9.7e15, 10)
    assert grid.spacing == 1e15
    assert (grid.min, grid.max, grid.divisions) == (0.0, 1e16, 10)


def test_grid_spacing_invalid_range():
    with pytest.raises(ValueError):
        calculate_grid_spacing(5.0, 5.0)
    with pytest.raises(ValueError):
        calculate_grid_spacing(10.0, 0.0)
    with pytest.raises(ValueError):
        calculate_grid_spacing(0.0, 10.0, 0)


def test_generate_ticks_reference_case():
    ticks = generate_ticks(0.0, 100.0, 10.0)
    assert ticks == [0.0, 10.0, 20.0, 30.0, 40.0, 50.0, 60.0, 70.0, 80.0, 90.0, 100.0]


def test_generate_ticks_no_float_drift():
    ticks = generate_ticks(0.0, 1.0, 0.1)
    assert len(ticks) == 11
    assert ticks[3] == 0.3
    assert ticks[7] == 0.7
    assert ticks[-1] == 1.0


def test_generate_ticks_start_on_multiple():
    assert generate_ticks(3.0, 21.0, 5.0) == [5.0, 10.0, 15.0, 20.0]
    assert generate_ticks(10.0, 0.0, 5.0) == []


def test_grid_line_positions():
    assert grid_line_positions(100.0, 20.0) == [0.0, 20.0, 40.0, 60.0, 80.0]


def test_grid_line_positions_stop_before_far_edge():
    # 99.99 still gets its line at 80, 100.01 gains one at 100
    assert grid_line_positions(99.99, 20.0)[-1] == 80.0
    assert grid_line_positions(100.01, 20.0)[-1] == 100.0
    assert grid_line_positions(0.0, 20.0) == []


def test_grid_line_positions_with_offset():
    assert grid_line_positions(100.0, 20.0, offset=25.0) == [5.0, 25.0, 45.0, 65.0, 85.0]
    assert grid_line_positions(100.0, 20.0, offset=-5.0) == [15.0, 35.0, 55.0, 75.0, 95.0]
    # Shifting by a whole spacing changes nothing
    assert grid_line_positions(100.0, 20.0, offset=45.0) == grid_line_positions(100.0, 20.0, offset=5.0)


def test_format_tick_label():
    assert format_tick_label(12.345, precision=1) == '12.3'
    assert format_tick_label(5.0, precision=0, units=' Hz') == '5 Hz'
    assert format_tick_label(2.5, prefix='r=', suffix='x') == 'r=2.50x'
    assert format_tick_label(1234.5, scientific=True) == '1.23e+03'
    assert format_tick_label(12.5, scientific=True) == '12.50'
