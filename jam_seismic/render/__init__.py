# jam_seismic/render - Rendering pipeline
"""
RENDER: SIMULATION STATE -> DRAW PRIMITIVES
===========================================

Renderers are pure functions returning ordered primitive lists. Surface
adapters (matplotlib, plotly) turn those lists into pictures; the renderers
never touch a drawing API.

    primitives.py       Value objects: Clear, Line, Polygon, Text, ...
    layers.py           Background grid, isometric boxes
    earthquake.py       Side-view earthquake response figure
    charts.py           Dynamic amplification chart
    isometric_scene.py  Isometric swaying building with history ribbon
    mpl_surface.py      Matplotlib adapter (PNG export)
    plotly_surface.py   Plotly adapter (interactive app)
"""

from .primitives import (
    COLORS,
    Style,
    Clear,
    Line,
    Polyline,
    Polygon,
    Rect,
    Circle,
    Text,
    Primitive,
    clamp_magnitude,
    all_coordinates_finite,
)
from .layers import grid_primitives, draw_3d_box
from .earthquake import render_earthquake_frame
from .charts import render_amplification_chart
from .isometric_scene import render_isometric_structure

__all__ = [
    'COLORS',
    'Style',
    'Clear',
    'Line',
    'Polyline',
    'Polygon',
    'Rect',
    'Circle',
    'Text',
    'Primitive',
    'clamp_magnitude',
    'all_coordinates_finite',
    'grid_primitives',
    'draw_3d_box',
    'render_earthquake_frame',
    'render_amplification_chart',
    'render_isometric_structure',
]
