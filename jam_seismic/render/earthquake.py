# jam_seismic/render/earthquake.py
"""
EARTHQUAKE RESPONSE FIGURE
==========================

Side view of the oscillator drawn like a textbook figure:

    - hatched ground strip that slides with the ground motion
    - footing riding on the ground
    - building block offset by the relative displacement, mass on top
    - spring between footing and building
    - dimension line with δ once the response is visible
    - time / frequency read-outs and axis captions

Layer order: clear, grid, ground and footing, then everything that moves with
the response, then text.
"""

import math
from typing import List, Optional

from ..config import SimulationConfig
from ..geometry import GridSpec
from ..simulation import (
    DerivedProperties,
    ResponseCondition,
    SimulationParameters,
    SimulationState,
    derive_properties,
)
from .layers import grid_primitives
from .primitives import (
    COLORS,
    DASHED,
    Circle,
    Clear,
    Line,
    Polygon,
    Polyline,
    Primitive,
    Rect,
    Style,
    Text,
    clamp_magnitude,
)

INK = Style(stroke=COLORS['ink'], line_width=1.0)
INK_FILL = Style(stroke=None, fill=COLORS['ink'])
LABEL = Style(stroke=None, fill=COLORS['ink'])
WARNING_LABEL = Style(stroke=None, fill=COLORS['warning'], font='12px monospace')

SPRING_COILS = 6
ARROW_SIZE = 4.0


def ground_offset(params: SimulationParameters, time: float, config: SimulationConfig) -> float:
    """Horizontal ground position (px) used for the picture, clamped like the response."""
    raw = params.ground_acceleration * math.sin(2.0 * math.pi * params.excitation_frequency * time)
    return clamp_magnitude(raw * config.display_scale, config.max_display_displacement)


def _frequency_label(derived: DerivedProperties) -> str:
    if not derived.is_valid:
        return 'f₀ = n/a'
    return f'f₀ = {derived.natural_frequency:.2f} Hz'


def _displacement_label(displacement: float) -> str:
    if math.isinf(displacement):
        return 'δ → ∞ (resonance)'
    return f'δ = {displacement:.1f} mm'


def render_earthquake_frame(
    state: SimulationState,
    params: SimulationParameters,
    config: Optional[SimulationConfig] = None,
    derived: Optional[DerivedProperties] = None,
) -> List[Primitive]:
    """
    Complete primitive list for one frame of the earthquake figure.

    Args:
        state: Current simulation snapshot
        params: Parameters the snapshot was computed with
        config: Display settings (canvas 'small', grid, clamping)
        derived: Pre-computed derived properties, recomputed when omitted

    Returns:
        Ordered primitives, starting with Clear. Infinite or held
        displacements are clamped to config.max_display_displacement before
        they become coordinates.
    """
    config = config if config is not None else SimulationConfig()
    derived = derived if derived is not None else derive_properties(params)

    size = config.canvas('small')
    width, height = float(size.width), float(size.height)
    center_x, center_y = width / 2.0, height / 2.0

    ground = ground_offset(params, state.elapsed_time, config)
    response = clamp_magnitude(state.displacement * config.display_scale, config.max_display_displacement)

    primitives: List[Primitive] = [Clear(width, height, config.background_color)]
    primitives += grid_primitives(width, height, GridSpec(config.major_grid, config.minor_grid))

    # Ground strip with sliding hatch
    ground_y = center_y + 120.0
    primitives.append(Rect(0.0, ground_y, width, 20.0, INK_FILL))
    hatch = Style(stroke=COLORS['paper'], line_width=1.0)
    shift = ground * 0.1
    for i in range(0, int(width), 4):
        primitives.append(Line((i + shift, ground_y), (i + 2 + shift, ground_y + 20.0), hatch))

    # Footing moves with the ground
    base_x = center_x + ground
    primitives.append(Rect(base_x - 40.0, center_y + 100.0, 80.0, 20.0, INK_FILL))

    # Building, offset by the relative displacement
    structure_x = base_x + response
    primitives.append(Rect(
        structure_x - 30.0, center_y - 30.0, 60.0, 130.0,
        Style(stroke=COLORS['ink'], fill=COLORS['paper'], line_width=2.0),
    ))
    for i in range(-30, 30, 8):
        primitives.append(Line((structure_x + i, center_y - 30.0), (structure_x + i + 30.0, center_y), INK))
    primitives.append(Circle((structure_x, center_y - 40.0), 8.0, INK_FILL))

    # Spring between footing and building
    spring_y = center_y + 100.0
    primitives.append(Line((base_x, spring_y), (structure_x, spring_y), Style(line_width=2.0)))
    coil_width = (structure_x - base_x) / SPRING_COILS
    for i in range(SPRING_COILS):
        x1 = base_x + i * coil_width
        x2 = base_x + (i + 0.5) * coil_width
        x3 = base_x + (i + 1) * coil_width
        primitives.append(Polyline(
            ((x1, spring_y), (x2, spring_y - 8.0), (x2, spring_y + 8.0), (x3, spring_y)), INK,
        ))

    # Dimension line for δ
    if abs(state.displacement) > config.min_indicator_displacement:
        dim_y = center_y - 70.0
        primitives.append(Line((base_x, dim_y), (structure_x, dim_y), Style(dash=DASHED)))
        direction = 1.0 if structure_x >= base_x else -1.0
        a = ARROW_SIZE * direction
        primitives.append(Polygon(
            ((base_x, dim_y), (base_x + a, dim_y - ARROW_SIZE), (base_x + a, dim_y + ARROW_SIZE)), INK_FILL,
        ))
        primitives.append(Polygon(
            ((structure_x, dim_y), (structure_x - a, dim_y - ARROW_SIZE), (structure_x - a, dim_y + ARROW_SIZE)),
            INK_FILL,
        ))
        primitives.append(Text(
            ((base_x + structure_x) / 2.0, dim_y - 5.0),
            _displacement_label(state.displacement),
            Style(stroke=None, fill=COLORS['ink'], text_align='center'),
        ))

    # Read-outs
    primitives.append(Text((10.0, 20.0), f't = {state.elapsed_time:.2f} s', LABEL))
    primitives.append(Text((10.0, 35.0), f'f = {params.excitation_frequency:.1f} Hz', LABEL))
    primitives.append(Text((10.0, 50.0), _frequency_label(derived), LABEL))

    if state.condition is ResponseCondition.RESONANCE:
        primitives.append(Text((10.0, 70.0), 'RESONANCE - RESPONSE SATURATED', WARNING_LABEL))
    elif state.condition is ResponseCondition.INVALID_PARAMETERS:
        primitives.append(Text((10.0, 70.0), 'INVALID PARAMETERS - DISPLAY FROZEN', WARNING_LABEL))

    primitives.append(Text((10.0, height - 10.0), 'Ground Motion →', LABEL))
    primitives.append(Text((15.0, height / 2.0), '↑ Structure Response', LABEL, rotation=90.0))

    return primitives
