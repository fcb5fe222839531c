# jam_seismic/render/isometric_scene.py
"""
Isometric view of a small building swaying with the simulated response.

Storeys are boxes stacked on a ground slab; each storey is shifted along x in
proportion to its height (linear first-mode shape). The recent displacement
history runs behind the building as a ribbon along the depth axis.
"""

import math
from typing import List, Optional, Sequence

from ..config import SimulationConfig
from ..geometry import (
    ISOMETRIC_CONFIG,
    IsometricConfig,
    Point3D,
    create_3d_box,
    create_3d_ribbon,
    project_points,
    rotate_3d_point,
)
from ..simulation import HistoryRecord, ResponseCondition, SimulationState
from .layers import draw_3d_box
from .primitives import COLORS, Clear, Polygon, Primitive, Style, Text, clamp_magnitude

STOREY_HEIGHT = 60.0
STOREY_PLAN = 80.0
SLAB_THICKNESS = 10.0

RIBBON_SAMPLES = 60
RIBBON_LENGTH = 240.0      # model units along the depth axis
RIBBON_OFFSET_X = -170.0   # to the left of the building
RIBBON_HEIGHT_SCALE = 0.4

RIBBON_STYLE = Style(stroke=COLORS['curve'], fill='#cfe0f5', line_width=1.0)
LABEL = Style(stroke=None, fill=COLORS['ink'])


def _ribbon_primitives(
    history: Sequence[HistoryRecord],
    config: SimulationConfig,
    projection: IsometricConfig,
    origin_x: float,
    origin_y: float,
) -> List[Primitive]:
    records = list(history)[-RIBBON_SAMPLES:]
    if len(records) < 2:
        return []

    step = RIBBON_LENGTH / (RIBBON_SAMPLES - 1)
    samples = [
        (i * step, 0.0, clamp_magnitude(r.displacement * config.display_scale, config.max_display_displacement))
        for i, r in enumerate(records)
    ]
    # Built along x, then turned a quarter turn so it runs along the depth axis
    vertices = [
        rotate_3d_point(v, rz=math.pi / 2)
        for v in create_3d_ribbon(samples, ribbon_width=4.0, height_scale=RIBBON_HEIGHT_SCALE)
    ]
    vertices = [Point3D(v.x + RIBBON_OFFSET_X, v.y, v.z + STOREY_HEIGHT) for v in vertices]
    projected = project_points(vertices, projection)

    primitives: List[Primitive] = []
    # Vertices come in groups of 4 per sample: bottom-left, bottom-right, top-left, top-right
    for k in range(len(samples) - 1):
        a = 4 * k
        b = 4 * (k + 1)
        quad = (projected[a + 1], projected[b + 1], projected[b + 3], projected[a + 3])
        primitives.append(Polygon(
            tuple((p.x + origin_x, p.y + origin_y) for p in quad), RIBBON_STYLE,
        ))
    return primitives


def render_isometric_structure(
    state: SimulationState,
    history: Sequence[HistoryRecord] = (),
    config: Optional[SimulationConfig] = None,
    stories: int = 3,
    projection: IsometricConfig = ISOMETRIC_CONFIG,
    show_hidden_edges: bool = False,
) -> List[Primitive]:
    """
    Primitive list for the isometric building view.

    Args:
        state: Current simulation snapshot (roof displacement)
        history: Recent history records for the ribbon, oldest first
        config: Display settings (canvas 'medium', clamping)
        stories: Number of storeys (>= 1)
        projection: Isometric projection configuration
        show_hidden_edges: Draw the hidden box edges dashed
    """
    if stories < 1:
        raise ValueError(f"stories must be >= 1, got {stories}")
    config = config if config is not None else SimulationConfig()

    size = config.canvas('medium')
    width, height = float(size.width), float(size.height)
    origin_x, origin_y = width / 2.0, height * 0.7

    roof_sway = clamp_magnitude(state.displacement * config.display_scale, config.max_display_displacement)

    primitives: List[Primitive] = [Clear(width, height, config.background_color)]

    primitives += _ribbon_primitives(history, config, projection, origin_x, origin_y)

    slab = create_3d_box(Point3D(0.0, 0.0, -SLAB_THICKNESS / 2.0), 3.5 * STOREY_PLAN, 2.5 * STOREY_PLAN,
                         SLAB_THICKNESS, projection)
    primitives += draw_3d_box(slab, origin_x, origin_y, stroke_width=1.0, show_hidden_edges=show_hidden_edges)

    # Bottom storey first so upper storeys cover the tops beneath them
    for level in range(stories):
        sway = roof_sway * (level + 1) / stories
        center = Point3D(sway, 0.0, STOREY_HEIGHT * (level + 0.5))
        box = create_3d_box(center, STOREY_PLAN, STOREY_PLAN, STOREY_HEIGHT, projection)
        primitives += draw_3d_box(box, origin_x, origin_y, show_hidden_edges=show_hidden_edges)

    if math.isinf(state.displacement):
        roof_label = 'roof δ → ∞'
    else:
        roof_label = f'roof δ = {state.displacement:.1f} mm'
    primitives.append(Text((20.0, 30.0), roof_label, LABEL))
    primitives.append(Text((20.0, 45.0), f't = {state.elapsed_time:.2f} s', LABEL))
    if state.condition is not ResponseCondition.OK:
        primitives.append(Text((20.0, 65.0), state.condition.value.replace('_', ' ').upper(),
                               Style(stroke=None, fill=COLORS['warning'])))

    return primitives
