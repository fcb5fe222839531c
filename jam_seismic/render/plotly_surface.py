# jam_seismic/render/plotly_surface.py
"""
Plotly drawing surface for the interactive app: primitives become layout
shapes and annotations on a figure whose axes are in canvas pixels.
"""

from typing import Dict, List, Sequence

import plotly.graph_objects as go

from .primitives import Circle, Clear, Line, Polygon, Polyline, Rect, Style, Text

_XANCHOR = {'left': 'left', 'start': 'left', 'center': 'center', 'right': 'right', 'end': 'right'}


def _line(style: Style) -> Dict:
    return dict(
        color=style.stroke if style.stroke is not None else 'rgba(0,0,0,0)',
        width=style.line_width if style.stroke is not None else 0,
        dash='dash' if style.dash else 'solid',
    )


def _fill(style: Style) -> str:
    return style.fill if style.fill is not None else 'rgba(0,0,0,0)'


def _path(points, closed: bool) -> str:
    head, *rest = points
    path = f"M {head[0]},{head[1]}" + ''.join(f" L {x},{y}" for x, y in rest)
    return path + " Z" if closed else path


def _font_px(font: str) -> int:
    size = font.split('px')[0].strip()
    return int(float(size)) if size.replace('.', '', 1).isdigit() else 10


def to_plotly_figure(primitives: Sequence, height: int = None) -> go.Figure:
    """
    Build a Plotly figure from a primitive list.

    Args:
        primitives: Frame starting with Clear
        height: Optional display height in pixels (defaults to the frame's)

    Returns:
        go.Figure with one shape/annotation per primitive, in list order
    """
    if not primitives or not isinstance(primitives[0], Clear):
        raise ValueError("A frame must start with a Clear primitive")

    clear = primitives[0]
    shapes: List[Dict] = []
    annotations: List[Dict] = []

    for prim in primitives:
        if isinstance(prim, Clear):
            shapes.append(dict(type='rect', x0=0, y0=0, x1=prim.width, y1=prim.height,
                               fillcolor=prim.background, line=dict(width=0), layer='below'))
        elif isinstance(prim, Line):
            shapes.append(dict(type='line', x0=prim.start[0], y0=prim.start[1],
                               x1=prim.end[0], y1=prim.end[1], line=_line(prim.style)))
        elif isinstance(prim, Polyline):
            if len(prim.points) < 2:
                continue
            shapes.append(dict(type='path', path=_path(prim.points, closed=False), line=_line(prim.style)))
        elif isinstance(prim, Polygon):
            if len(prim.points) < 3:
                continue
            shapes.append(dict(type='path', path=_path(prim.points, closed=True),
                               fillcolor=_fill(prim.style), line=_line(prim.style)))
        elif isinstance(prim, Rect):
            shapes.append(dict(type='rect', x0=prim.x, y0=prim.y, x1=prim.x + prim.width,
                               y1=prim.y + prim.height, fillcolor=_fill(prim.style), line=_line(prim.style)))
        elif isinstance(prim, Circle):
            cx, cy = prim.center
            shapes.append(dict(type='circle', x0=cx - prim.radius, y0=cy - prim.radius,
                               x1=cx + prim.radius, y1=cy + prim.radius,
                               fillcolor=_fill(prim.style), line=_line(prim.style)))
        elif isinstance(prim, Text):
            annotations.append(dict(
                x=prim.position[0], y=prim.position[1], text=prim.text, showarrow=False,
                xanchor=_XANCHOR.get(prim.style.text_align, 'left'), yanchor='bottom',
                textangle=-prim.rotation,
                font=dict(family='Courier New, monospace', size=_font_px(prim.style.font),
                          color=prim.style.fill or prim.style.stroke or 'black'),
            ))
        else:
            raise TypeError(f"Unsupported primitive: {type(prim).__name__}")

    fig = go.Figure()
    fig.update_layout(
        shapes=shapes,
        annotations=annotations,
        width=clear.width,
        height=height or clear.height,
        margin=dict(l=0, r=0, t=0, b=0),
        plot_bgcolor=clear.background,
        paper_bgcolor=clear.background,
        showlegend=False,
    )
    fig.update_xaxes(range=[0, clear.width], visible=False)
    fig.update_yaxes(range=[clear.height, 0], visible=False, scaleanchor='x')
    return fig
