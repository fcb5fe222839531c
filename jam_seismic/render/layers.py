# jam_seismic/render/layers.py
"""Reusable primitive layers: background grid and isometric boxes."""

from typing import Dict, List, Optional

from ..geometry import (
    Box3D,
    GridSpec,
    HIDDEN_FACE_ORDER,
    VISIBLE_FACE_ORDER,
    grid_line_positions,
)
from .primitives import COLORS, DASHED, Line, Polygon, Primitive, Style


def grid_primitives(
    width: float,
    height: float,
    spec: GridSpec,
    minor_color: str = COLORS['grid_minor'],
    major_color: str = COLORS['grid_major'],
    show_minor: bool = True,
    show_major: bool = True,
) -> List[Primitive]:
    """
    Graph-paper grid covering a width x height surface.

    Minor lines come first so the major lines are drawn over them.
    """
    layers = []
    if show_minor:
        layers.append((spec.minor_spacing, Style(stroke=minor_color, line_width=0.5)))
    if show_major:
        layers.append((spec.major_spacing, Style(stroke=major_color, line_width=1.0)))

    primitives: List[Primitive] = []
    for spacing, style in layers:
        for x in grid_line_positions(width, spacing, spec.offset_x):
            primitives.append(Line((x, 0.0), (x, height), style))
        for y in grid_line_positions(height, spacing, spec.offset_y):
            primitives.append(Line((0.0, y), (width, y), style))
    return primitives


DEFAULT_FACE_COLORS = {
    'top': COLORS['face_top'],
    'front': COLORS['face_front'],
    'right': COLORS['face_right'],
}


def draw_3d_box(
    box: Box3D,
    origin_x: float = 0.0,
    origin_y: float = 0.0,
    scale: float = 1.0,
    fill_colors: Optional[Dict[str, str]] = None,
    stroke_color: str = COLORS['ink'],
    stroke_width: float = 2.0,
    show_hidden_edges: bool = False,
    hidden_edge_color: str = COLORS['hidden_edge'],
) -> List[Primitive]:
    """
    Primitives for a projected box.

    Visible faces are always emitted right, front, top. There is no depth
    buffer: this fixed painter's order is what makes nearer faces cover
    farther ones, whatever the box dimensions.

    Args:
        box: Box from geometry.create_3d_box()
        origin_x, origin_y: Surface position of the projection origin
        scale: Pixels per model unit
        fill_colors: Face name -> fill colour; a face without a colour is
            outlined only
        stroke_color, stroke_width: Outline style
        show_hidden_edges: Also outline back/left/bottom, dashed
        hidden_edge_color: Colour of the hidden outlines
    """
    colors = DEFAULT_FACE_COLORS if fill_colors is None else fill_colors

    def outline(name: str, style: Style) -> Polygon:
        points = tuple(
            (p.x * scale + origin_x, p.y * scale + origin_y) for p in box.face_points(name)
        )
        return Polygon(points, style)

    primitives: List[Primitive] = []
    for name in VISIBLE_FACE_ORDER:
        style = Style(stroke=stroke_color, fill=colors.get(name), line_width=stroke_width)
        primitives.append(outline(name, style))

    if show_hidden_edges:
        hidden = Style(stroke=hidden_edge_color, fill=None, line_width=stroke_width, dash=DASHED)
        for name in HIDDEN_FACE_ORDER:
            primitives.append(outline(name, hidden))

    return primitives
