# jam_seismic/geometry/isometric.py
"""
ISOMETRIC PROJECTION: PSEUDO-3D TECHNICAL ILLUSTRATION
======================================================

PURPOSE:
--------
Map 3D model coordinates onto a 2D drawing plane with the classic 30°
isometric convention, and build projected boxes that the renderers use for
buildings, slabs and footings.

COORDINATES:
------------
    x : left-right
    y : forward-backward (depth)
    z : up-down, positive up

The 2D result follows screen conventions (y grows downwards), which is why z
enters with a minus sign:

    X = (x·cos αx − y·cos αy) · sx
    Y = (x·sin αx + y·sin αy − z·sz) · sy

PROJECTION IS LOSSY:
--------------------
This is a linear map from 3D to 2D, so it cannot be inverted. With the default
angles (αx = 30°, αy = −30°) moving one unit along x AND one unit along y
cancels out exactly: (0, 0, 0) and (1, 1, 0) land on the same 2D point. That is
expected for a "shadow" of 3D space, not a bug.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class IsometricConfig:
    """Axis angles (rad) and per-axis scale factors of the projection."""
    angle_x: float = math.pi / 6      # 30°
    angle_y: float = -math.pi / 6     # -30°
    angle_z: float = math.pi / 2      # vertical
    scale_x: float = 0.866            # cos(30°)
    scale_y: float = 0.866
    scale_z: float = 1.0
    depth_scale: float = 0.5


ISOMETRIC_CONFIG = IsometricConfig()


@dataclass(frozen=True)
class Point3D:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class ProjectedPoint2D:
    x: float
    y: float

    def offset(self, dx: float, dy: float, scale: float = 1.0) -> 'ProjectedPoint2D':
        """Scale about the origin then translate, i.e. place on a drawing surface."""
        return ProjectedPoint2D(self.x * scale + dx, self.y * scale + dy)


# Vertex indices of each face. Vertices 0-3 are the bottom ring, 4-7 the top
# ring, both ordered back-left, back-right, front-right, front-left.
BOX_FACES: Dict[str, Tuple[int, ...]] = {
    'top': (4, 5, 6, 7),
    'front': (3, 2, 6, 7),
    'right': (1, 2, 6, 5),
    'bottom': (0, 1, 2, 3),
    'back': (0, 4, 5, 1),
    'left': (0, 3, 7, 4),
}

# Painter's order for the faces visible from the default viewpoint
VISIBLE_FACE_ORDER = ('right', 'front', 'top')
HIDDEN_FACE_ORDER = ('back', 'left', 'bottom')


@dataclass(frozen=True)
class Box3D:
    """
    A cuboid and its projection.

    Attributes:
        vertices_3d: 8 corners in model space
        vertices_2d: The same corners projected, index-aligned with vertices_3d
        faces: Face name -> vertex indices (see BOX_FACES)
        center: Projected centre point
    """
    vertices_3d: Tuple[Point3D, ...]
    vertices_2d: Tuple[ProjectedPoint2D, ...]
    faces: Dict[str, Tuple[int, ...]]
    center: ProjectedPoint2D

    def face_points(self, name: str) -> List[ProjectedPoint2D]:
        """Projected outline of one face, in winding order."""
        return [self.vertices_2d[i] for i in self.faces[name]]


def project_3d_to_isometric(
    x: float, y: float, z: float, config: IsometricConfig = ISOMETRIC_CONFIG
) -> ProjectedPoint2D:
    """
    Project one 3D point onto the isometric drawing plane.

    Args:
        x, y, z: Model coordinates
        config: Projection angles and scales

    Returns:
        ProjectedPoint2D in drawing units (y down)
    """
    iso_x = (x * math.cos(config.angle_x) - y * math.cos(config.angle_y)) * config.scale_x
    iso_y = (x * math.sin(config.angle_x) + y * math.sin(config.angle_y) - z * config.scale_z) * config.scale_y
    return ProjectedPoint2D(iso_x, iso_y)


def projection_matrix(config: IsometricConfig = ISOMETRIC_CONFIG) -> np.ndarray:
    """2x3 matrix P such that P @ [x, y, z] is the projected point."""
    return np.array([
        [math.cos(config.angle_x) * config.scale_x, -math.cos(config.angle_y) * config.scale_x, 0.0],
        [math.sin(config.angle_x) * config.scale_y, math.sin(config.angle_y) * config.scale_y,
         -config.scale_z * config.scale_y],
    ])


def project_points(points: Sequence[Point3D], config: IsometricConfig = ISOMETRIC_CONFIG) -> List[ProjectedPoint2D]:
    """Project many points at once (same result as project_3d_to_isometric per point)."""
    if len(points) == 0:
        return []
    xyz = np.array([[p.x, p.y, p.z] for p in points], dtype=float)
    projected = xyz @ projection_matrix(config).T
    return [ProjectedPoint2D(float(px), float(py)) for px, py in projected]


def create_3d_box(
    center: Point3D,
    width: float,
    depth: float,
    height: float,
    config: IsometricConfig = ISOMETRIC_CONFIG,
) -> Box3D:
    """
    Build a box from its centre and extents and project its corners.

    Args:
        center: Centre of the box in model space
        width: Extent along x
        depth: Extent along y
        height: Extent along z
        config: Projection configuration

    Returns:
        Box3D with 8 vertices (bottom ring 0-3, top ring 4-7) and 6 faces
    """
    hw, hd, hh = width / 2.0, depth / 2.0, height / 2.0
    cx, cy, cz = center.x, center.y, center.z

    vertices_3d = (
        Point3D(cx - hw, cy - hd, cz - hh),  # 0: bottom-left-back
        Point3D(cx + hw, cy - hd, cz - hh),  # 1: bottom-right-back
        Point3D(cx + hw, cy + hd, cz - hh),  # 2: bottom-right-front
        Point3D(cx - hw, cy + hd, cz - hh),  # 3: bottom-left-front
        Point3D(cx - hw, cy - hd, cz + hh),  # 4: top-left-back
        Point3D(cx + hw, cy - hd, cz + hh),  # 5: top-right-back
        Point3D(cx + hw, cy + hd, cz + hh),  # 6: top-right-front
        Point3D(cx - hw, cy + hd, cz + hh),  # 7: top-left-front
    )

    return Box3D(
        vertices_3d=vertices_3d,
        vertices_2d=tuple(project_points(vertices_3d, config)),
        faces=dict(BOX_FACES),
        center=project_3d_to_isometric(cx, cy, cz, config),
    )


def create_3d_ribbon(
    data_points: Sequence[Tuple[float, float, float]],
    ribbon_width: float = 10.0,
    base_z: float = 0.0,
    height_scale: float = 1.0,
) -> List[Point3D]:
    """
    Turn (x, y, value) samples into a vertical ribbon.

    Each sample contributes four vertices, in order: bottom-left,
    bottom-right, top-left, top-right, where left/right are y ∓ width/2 and
    the top sits at base_z + value·height_scale.
    """
    vertices: List[Point3D] = []
    half = ribbon_width / 2.0
    for x, y, value in data_points:
        top = base_z + value * height_scale
        vertices.append(Point3D(x, y - half, base_z))
        vertices.append(Point3D(x, y + half, base_z))
        vertices.append(Point3D(x, y - half, top))
        vertices.append(Point3D(x, y + half, top))
    return vertices


def rotate_3d_point(point: Point3D, rx: float = 0.0, ry: float = 0.0, rz: float = 0.0) -> Point3D:
    """
    Rotate a point about the origin, about x first, then y, then z (rad).
    """
    x, y, z = point.x, point.y, point.z

    # About x
    y1 = y * math.cos(rx) - z * math.sin(rx)
    z1 = y * math.sin(rx) + z * math.cos(rx)
    x1 = x

    # About y
    x2 = x1 * math.cos(ry) + z1 * math.sin(ry)
    z2 = -x1 * math.sin(ry) + z1 * math.cos(ry)
    y2 = y1

    # About z
    x3 = x2 * math.cos(rz) - y2 * math.sin(rz)
    y3 = x2 * math.sin(rz) + y2 * math.cos(rz)

    return Point3D(x3, y3, z2)
