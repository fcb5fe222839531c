# jam_seismic/render/primitives.py
"""
DRAW PRIMITIVES: WHAT TO DRAW, NOT HOW
======================================

Renderers return an ordered list of these value objects. A drawing surface
adapter walks the list front to back; later primitives sit on top of earlier
ones. Every frame starts with a Clear, so a list is always a complete picture
and never a diff against the previous frame.

Coordinates are surface pixels with the origin top-left and y pointing down.
"""

import math
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Sequence, Tuple, Union

Point = Tuple[float, float]

# Monochrome "academic figure" palette
COLORS = {
    'ink': '#000000',
    'paper': '#ffffff',
    'grid_minor': '#e5e5e5',
    'grid_major': '#d4d4d4',
    'face_top': '#ffffff',
    'face_front': '#e5e5e5',
    'face_right': '#d4d4d4',
    'hidden_edge': '#a3a3a3',
    'curve': '#0066cc',
    'marker': '#ff0000',
    'warning': '#cc0000',
}

SOLID: Tuple[float, ...] = ()
DASHED: Tuple[float, ...] = (3.0, 3.0)


@dataclass(frozen=True)
class Style:
    """Stroke/fill/text style. A None colour means "don't stroke/fill"."""
    stroke: Optional[str] = COLORS['ink']
    fill: Optional[str] = None
    line_width: float = 1.0
    dash: Tuple[float, ...] = SOLID
    font: str = '10px monospace'
    text_align: str = 'left'


@dataclass(frozen=True)
class Clear:
    kind: ClassVar[str] = 'clear'
    width: float
    height: float
    background: str = COLORS['paper']


@dataclass(frozen=True)
class Line:
    kind: ClassVar[str] = 'line'
    start: Point
    end: Point
    style: Style = field(default_factory=Style)


@dataclass(frozen=True)
class Polyline:
    kind: ClassVar[str] = 'polyline'
    points: Tuple[Point, ...]
    style: Style = field(default_factory=Style)


@dataclass(frozen=True)
class Polygon:
    """Closed outline, filled when style.fill is set."""
    kind: ClassVar[str] = 'polygon'
    points: Tuple[Point, ...]
    style: Style = field(default_factory=Style)


@dataclass(frozen=True)
class Rect:
    kind: ClassVar[str] = 'rect'
    x: float
    y: float
    width: float
    height: float
    style: Style = field(default_factory=Style)


@dataclass(frozen=True)
class Circle:
    kind: ClassVar[str] = 'circle'
    center: Point
    radius: float
    style: Style = field(default_factory=Style)


@dataclass(frozen=True)
class Text:
    """Text anchored at position; rotation in degrees, counter-clockwise."""
    kind: ClassVar[str] = 'text'
    position: Point
    text: str
    style: Style = field(default_factory=lambda: Style(stroke=None, fill=COLORS['ink']))
    rotation: float = 0.0


Primitive = Union[Clear, Line, Polyline, Polygon, Rect, Circle, Text]


def clamp_magnitude(value: float, limit: float) -> float:
    """
    Clamp a possibly infinite value to [-limit, limit].

    nan maps to 0 so it can never turn into geometry.
    """
    if math.isnan(value):
        return 0.0
    return max(-limit, min(limit, value))


def all_coordinates_finite(primitives: Sequence) -> bool:
    """True when no primitive carries a nan or infinite coordinate."""
    for prim in primitives:
        if isinstance(prim, Line):
            coords = prim.start + prim.end
        elif isinstance(prim, (Polyline, Polygon)):
            coords = tuple(c for p in prim.points for c in p)
        elif isinstance(prim, Rect):
            coords = (prim.x, prim.y, prim.width, prim.height)
        elif isinstance(prim, Circle):
            coords = prim.center + (prim.radius,)
        elif isinstance(prim, Text):
            coords = prim.position
        else:
            coords = (prim.width, prim.height)
        if not all(math.isfinite(c) for c in coords):
            return False
    return True
