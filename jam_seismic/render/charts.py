# jam_seismic/render/charts.py
"""
Dynamic amplification chart: D(r) for the current damping ratio, with the
operating point of the simulation marked.
"""

import math
from typing import List, Optional

import numpy as np

from ..config import SimulationConfig
from ..formulas import amplification_curve, dynamic_amplification
from ..geometry import calculate_grid_spacing, format_tick_label, generate_ticks
from .primitives import (
    COLORS,
    Circle,
    Clear,
    Line,
    Polyline,
    Primitive,
    Style,
    Text,
)

MARGIN = 50.0

AXIS = Style(stroke=COLORS['ink'], line_width=2.0)
GRID = Style(stroke=COLORS['grid_minor'], line_width=1.0)
CURVE = Style(stroke=COLORS['curve'], line_width=3.0)
RESONANCE_LINE = Style(stroke=COLORS['marker'], line_width=1.0, dash=(5.0, 5.0))
MARKER = Style(stroke=None, fill=COLORS['marker'])
LABEL = Style(stroke=None, fill=COLORS['ink'])
TICK_LABEL = Style(stroke=None, fill=COLORS['ink'], text_align='center')


def _amplification_label(value: float) -> str:
    if math.isinf(value):
        return 'DAF = ∞'
    return f'DAF = {value:.2f}'


def render_amplification_chart(
    frequency_ratio: float,
    damping_ratio: float,
    config: Optional[SimulationConfig] = None,
) -> List[Primitive]:
    """
    Primitive list for the D(r) chart.

    The r-axis spans [0, chart_max_ratio] and the D-axis [0,
    chart_max_amplification], both widened to nice-number grids. Curve values
    above the top of the chart (including inf at undamped resonance) are
    drawn at the top edge. A nan value is drawn at the bottom edge.

    Args:
        frequency_ratio: Current r; nan when undefined (no marker drawn)
        damping_ratio: ζ used for the curve; when it is not a finite value
            >= 0 neither the curve nor the marker is drawn
        config: Chart range/sampling and canvas preset ('medium')
    """
    config = config if config is not None else SimulationConfig()
    size = config.canvas('medium')
    width, height = float(size.width), float(size.height)
    plot_w = width - 2 * MARGIN
    plot_h = height - 2 * MARGIN

    x_axis = calculate_grid_spacing(0.0, config.chart_max_ratio, 6)
    y_axis = calculate_grid_spacing(0.0, config.chart_max_amplification, 5)
    x_span = x_axis.max - x_axis.min
    y_span = y_axis.max - y_axis.min

    def to_px(r: float, d: float):
        if math.isnan(d):
            d = y_axis.min
        d = min(max(d, y_axis.min), y_axis.max)
        px = MARGIN + (r - x_axis.min) / x_span * plot_w
        py = height - MARGIN - (d - y_axis.min) / y_span * plot_h
        return (px, py)

    primitives: List[Primitive] = [Clear(width, height, config.background_color)]

    # Grid and tick labels
    for r in generate_ticks(x_axis.min, x_axis.max, x_axis.spacing):
        x, _ = to_px(r, 0.0)
        primitives.append(Line((x, MARGIN), (x, height - MARGIN), GRID))
        primitives.append(Text((x, height - MARGIN + 15.0), format_tick_label(r, precision=1), TICK_LABEL))
    for d in generate_ticks(y_axis.min, y_axis.max, y_axis.spacing):
        _, y = to_px(x_axis.min, d)
        primitives.append(Line((MARGIN, y), (width - MARGIN, y), GRID))
        primitives.append(Text((MARGIN - 25.0, y + 4.0), format_tick_label(d, precision=0), LABEL))

    # Axes
    primitives.append(Line((MARGIN, height - MARGIN), (width - MARGIN, height - MARGIN), AXIS))
    primitives.append(Line((MARGIN, height - MARGIN), (MARGIN, MARGIN), AXIS))

    # Resonance reference at r = 1
    x_res, _ = to_px(1.0, 0.0)
    primitives.append(Line((x_res, MARGIN), (x_res, height - MARGIN), RESONANCE_LINE))

    # Curve and operating point; neither exists without a usable ζ
    if not (math.isfinite(damping_ratio) and damping_ratio >= 0):
        primitives.append(Text((MARGIN + 10.0, MARGIN - 10.0), 'D undefined for current parameters', LABEL))
        zeta_label = 'ζ undefined'
    else:
        ratios = np.linspace(x_axis.min, x_axis.max, config.chart_samples + 1)
        values = amplification_curve(ratios, damping_ratio)
        primitives.append(Polyline(tuple(to_px(float(r), float(d)) for r, d in zip(ratios, values)), CURVE))
        zeta_label = f'ζ = {damping_ratio:.3f}'

        if math.isfinite(frequency_ratio):
            current = dynamic_amplification(frequency_ratio, damping_ratio)
            r_shown = min(max(frequency_ratio, x_axis.min), x_axis.max)
            cx, cy = to_px(r_shown, current)
            primitives.append(Circle((cx, cy), 5.0, MARKER))
            primitives.append(Text((cx - 30.0, cy - 15.0), _amplification_label(current), LABEL))
        else:
            primitives.append(Text((MARGIN + 10.0, MARGIN - 10.0), 'r undefined for current parameters', LABEL))

    primitives.append(Text((width / 2.0 - 40.0, height - 10.0), 'Frequency Ratio (r)', LABEL))
    primitives.append(Text((15.0, height / 2.0), 'Amplification (D)', LABEL, rotation=90.0))
    primitives.append(Text((MARGIN, MARGIN - 25.0), zeta_label, LABEL))

    return primitives
