# jam_seismic/geometry/grid.py
"""
GRID SYSTEM: NICE-NUMBER AXES AND PIXEL GRIDS
=============================================

Two related jobs:

1. Axis layout for charts. calculate_grid_spacing() picks a readable tick
   spacing from {1, 2, 5, 10} × 10ⁿ and widens the data range to whole
   multiples of it; generate_ticks() lists the tick values.

2. Background grids for drawings. A GridSpec holds the minor/major spacing of
   a "graph paper" grid in pixels, grid_line_positions() lists where its lines
   fall on a surface of a given size.

Floating point: 0.1 * 3 is 0.30000000000000004, so every value handed out is
re-snapped to the spacing grid and rounded before it leaves this module.
"""

import math
from dataclasses import dataclass
from typing import List

NICE_MANTISSAS = (1.0, 2.0, 5.0, 10.0)

# Significant decimal places kept below the spacing's own magnitude when
# re-snapping a value onto its grid
_SNAP_DIGITS = 12

# Relative tolerance used when deciding whether an end value lies on the grid
_GRID_EPS = 1e-9


@dataclass(frozen=True)
class AxisGrid:
    """Result of calculate_grid_spacing()."""
    spacing: float
    min: float
    max: float
    divisions: int


@dataclass(frozen=True)
class GridSpec:
    """Pixel grid drawn behind a figure."""
    major_spacing: float = 40.0
    minor_spacing: float = 8.0
    offset_x: float = 0.0
    offset_y: float = 0.0


def _snap_digits(spacing: float) -> int:
    return _SNAP_DIGITS - math.floor(math.log10(spacing))


def _snap(value: float, spacing: float) -> float:
    snapped = round(round(value / spacing) * spacing, _snap_digits(spacing))
    return snapped + 0.0  # -0.0 -> 0.0


def nice_number(raw: float) -> float:
    """
    Smallest value of {1, 2, 5, 10} × 10ⁿ that is >= raw.

    Args:
        raw: Positive finite number

    Returns:
        The snapped "nice" value
    """
    if not math.isfinite(raw) or raw <= 0:
        raise ValueError(f"raw spacing must be positive and finite, got {raw!r}")

    exponent = math.floor(math.log10(raw))
    magnitude = 10.0 ** exponent
    normalized = raw / magnitude

    digits = max(_SNAP_DIGITS, 3 - exponent)
    for mantissa in NICE_MANTISSAS[:-1]:
        # 0.2 / 0.1 is 2.0000000000000004
        if normalized <= mantissa * (1.0 + _GRID_EPS):
            return round(mantissa * magnitude, digits)
    return round(NICE_MANTISSAS[-1] * magnitude, digits)


def calculate_grid_spacing(min_value: float, max_value: float, target_divisions: int = 10) -> AxisGrid:
    """
    Pick a readable tick spacing for the range [min_value, max_value].

    ALGORITHM:
    ----------
    raw  = (max − min) / target_divisions
    nice = nice_number(raw)                        e.g. 9.7 -> 10
    grid_min = floor(min / nice) · nice
    grid_max = ceil(max / nice) · nice

    Example: (0, 97, 10) -> spacing 10, range [0, 100], 10 divisions.

    Args:
        min_value: Lower end of the data range
        max_value: Upper end of the data range
        target_divisions: Roughly how many intervals the axis should show

    Returns:
        AxisGrid with spacing evenly dividing (max − min) and an integer
        division count.

    Raises:
        ValueError: If the range is empty/inverted or target_divisions < 1
    """
    if target_divisions < 1:
        raise ValueError(f"target_divisions must be >= 1, got {target_divisions}")
    if not (math.isfinite(min_value) and math.isfinite(max_value)) or max_value <= min_value:
        raise ValueError(f"Invalid axis range [{min_value}, {max_value}]")

    spacing = nice_number((max_value - min_value) / target_divisions)

    lower = math.floor(min_value / spacing + _GRID_EPS)
    upper = math.ceil(max_value / spacing - _GRID_EPS)

    grid_min = _snap(lower * spacing, spacing)
    grid_max = _snap(upper * spacing, spacing)

    return AxisGrid(
        spacing=spacing,
        min=grid_min,
        max=grid_max,
        divisions=int(upper - lower),
    )


def generate_ticks(min_value: float, max_value: float, spacing: float) -> List[float]:
    """
    Tick values from the first multiple of spacing >= min_value up to
    max_value inclusive.

    Ticks are generated from integer multiples rather than by repeated
    addition, then re-snapped, so generate_ticks(0, 100, 10) is exactly
    [0, 10, ..., 100] and generate_ticks(0, 1, 0.1) contains 0.3, not
    0.30000000000000004.
    """
    if not math.isfinite(spacing) or spacing <= 0:
        raise ValueError(f"spacing must be positive and finite, got {spacing!r}")
    if max_value < min_value:
        return []

    first = math.ceil(min_value / spacing - _GRID_EPS)
    last = math.floor(max_value / spacing + _GRID_EPS)

    return [_snap(k * spacing, spacing) for k in range(first, last + 1)]


def format_tick_label(
    value: float,
    precision: int = 2,
    scientific: bool = False,
    units: str = '',
    prefix: str = '',
    suffix: str = '',
) -> str:
    """
    Format a tick value for display.

    With scientific=True, values >= 1000 or < 0.01 in magnitude switch to
    exponent notation (1.23e+03).
    """
    magnitude = abs(value)
    if scientific and (magnitude >= 1000 or magnitude < 0.01):
        formatted = f"{value:.{precision}e}"
    else:
        formatted = f"{value:.{precision}f}"
    return f"{prefix}{formatted}{suffix}{units}"


def grid_line_positions(extent: float, spacing: float, offset: float = 0.0) -> List[float]:
    """
    Positions of parallel grid lines across a surface of the given extent.

    The first line sits at offset mod spacing, so shifting the offset by a
    whole spacing leaves the grid unchanged. Positions run over the half-open
    range [0, extent): a line that would land exactly on the far edge is left
    out, so grid_line_positions(100, 20) is [0, 20, 40, 60, 80].
    """
    if spacing <= 0:
        raise ValueError(f"spacing must be positive, got {spacing!r}")

    start = math.fmod(offset, spacing)
    if start < 0:
        start += spacing

    count = math.ceil((extent - start) / spacing - _GRID_EPS)
    digits = _snap_digits(spacing)
    return [round(start + i * spacing, digits) for i in range(max(count, 0))]
