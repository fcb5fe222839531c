# jam_seismic/render/mpl_surface.py
"""
Matplotlib drawing surface: draws a primitive list onto an Axes, or into a
new Figure for PNG export.

The axes are set up in pixel units with y pointing down, so primitives are
placed exactly as a canvas would place them. Each primitive gets a zorder
equal to its list position; matplotlib's own default zorders (patches below
lines below text) would otherwise reorder the picture.
"""

import re
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle as CirclePatch
from matplotlib.patches import Polygon as PolygonPatch
from matplotlib.patches import Rectangle

from .primitives import Circle, Clear, Line, Polygon, Polyline, Rect, Style, Text

_ALIGN = {'left': 'left', 'start': 'left', 'center': 'center', 'right': 'right', 'end': 'right'}
_FONT_PX = re.compile(r'(\d+(?:\.\d+)?)px')


def _font_size_pt(font: str, dpi: float) -> float:
    match = _FONT_PX.search(font)
    px = float(match.group(1)) if match else 10.0
    return px * 72.0 / dpi


def _linestyle(style: Style):
    if style.dash:
        return (0, tuple(style.dash))
    return 'solid'


def _edge(style: Style) -> str:
    return style.stroke if style.stroke is not None else 'none'


def _face(style: Style) -> str:
    return style.fill if style.fill is not None else 'none'


def draw_primitives(ax: Axes, primitives: Sequence, dpi: float = 100.0) -> Axes:
    """
    Draw primitives onto an existing Axes, in list order.

    A Clear primitive resets the axes: removes previous artists, sets the
    pixel coordinate system and paints the background.
    """
    for z, prim in enumerate(primitives):
        if isinstance(prim, Clear):
            ax.clear()
            ax.set_xlim(0, prim.width)
            ax.set_ylim(prim.height, 0)
            ax.set_aspect('equal')
            ax.axis('off')
            ax.add_patch(Rectangle((0, 0), prim.width, prim.height, facecolor=prim.background,
                                   edgecolor='none', zorder=z))
        elif isinstance(prim, Line):
            if prim.style.stroke is None:
                continue
            ax.plot([prim.start[0], prim.end[0]], [prim.start[1], prim.end[1]],
                    color=prim.style.stroke, linewidth=prim.style.line_width,
                    linestyle=_linestyle(prim.style), zorder=z)
        elif isinstance(prim, Polyline):
            if prim.style.stroke is None or not prim.points:
                continue
            xs, ys = zip(*prim.points)
            ax.plot(xs, ys, color=prim.style.stroke, linewidth=prim.style.line_width,
                    linestyle=_linestyle(prim.style), zorder=z)
        elif isinstance(prim, Polygon):
            ax.add_patch(PolygonPatch(list(prim.points), closed=True, facecolor=_face(prim.style),
                                      edgecolor=_edge(prim.style), linewidth=prim.style.line_width,
                                      linestyle=_linestyle(prim.style), zorder=z))
        elif isinstance(prim, Rect):
            ax.add_patch(Rectangle((prim.x, prim.y), prim.width, prim.height,
                                   facecolor=_face(prim.style), edgecolor=_edge(prim.style),
                                   linewidth=prim.style.line_width, linestyle=_linestyle(prim.style),
                                   zorder=z))
        elif isinstance(prim, Circle):
            ax.add_patch(CirclePatch(prim.center, prim.radius, facecolor=_face(prim.style),
                                     edgecolor=_edge(prim.style), linewidth=prim.style.line_width,
                                     zorder=z))
        elif isinstance(prim, Text):
            ax.text(prim.position[0], prim.position[1], prim.text,
                    color=prim.style.fill or prim.style.stroke or 'black',
                    fontsize=_font_size_pt(prim.style.font, dpi), family='monospace',
                    ha=_ALIGN.get(prim.style.text_align, 'left'), va='baseline',
                    rotation=prim.rotation, rotation_mode='anchor', zorder=z)
        else:
            raise TypeError(f"Unsupported primitive: {type(prim).__name__}")
    return ax


def render_figure(primitives: Sequence, dpi: float = 100.0) -> Figure:
    """New Figure sized to the frame's Clear primitive, with the frame drawn on it."""
    if not primitives or not isinstance(primitives[0], Clear):
        raise ValueError("A frame must start with a Clear primitive")
    clear = primitives[0]
    fig = plt.figure(figsize=(clear.width / dpi, clear.height / dpi), dpi=dpi)
    ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
    draw_primitives(ax, primitives, dpi=dpi)
    return fig


def save_frame(primitives: Sequence, path: str, dpi: float = 100.0) -> None:
    """Render a frame to an image file (format from the extension)."""
    fig = render_figure(primitives, dpi=dpi)
    try:
        fig.savefig(path, dpi=dpi)
    finally:
        plt.close(fig)
