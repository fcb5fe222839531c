# jam_seismic/geometry - Coordinate and projection system
"""
GEOMETRY: GRIDS AND ISOMETRIC PROJECTION
========================================

Surface-independent geometry shared by every renderer:

    grid.py        Nice-number axis spacing, ticks, pixel grid lines
    isometric.py   3D -> 2D isometric projection, boxes, ribbons
"""

from .grid import (
    AxisGrid,
    GridSpec,
    nice_number,
    calculate_grid_spacing,
    generate_ticks,
    format_tick_label,
    grid_line_positions,
)
from .isometric import (
    IsometricConfig,
    ISOMETRIC_CONFIG,
    Point3D,
    ProjectedPoint2D,
    Box3D,
    BOX_FACES,
    VISIBLE_FACE_ORDER,
    HIDDEN_FACE_ORDER,
    project_3d_to_isometric,
    project_points,
    create_3d_box,
    create_3d_ribbon,
    rotate_3d_point,
)

__all__ = [
    # Grid
    'AxisGrid',
    'GridSpec',
    'nice_number',
    'calculate_grid_spacing',
    'generate_ticks',
    'format_tick_label',
    'grid_line_positions',
    # Isometric
    'IsometricConfig',
    'ISOMETRIC_CONFIG',
    'Point3D',
    'ProjectedPoint2D',
    'Box3D',
    'BOX_FACES',
    'VISIBLE_FACE_ORDER',
    'HIDDEN_FACE_ORDER',
    'project_3d_to_isometric',
    'project_points',
    'create_3d_box',
    'create_3d_ribbon',
    'rotate_3d_point',
]
