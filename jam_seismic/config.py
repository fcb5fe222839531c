# jam_seismic/config.py
"""
Simulation and rendering configuration.

A SimulationConfig is created by whatever assembles the application and passed
to the loop and renderers explicitly; nothing in the package reads a global
instance.
"""

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class CanvasSize:
    """Drawing surface preset (pixels)."""
    width: int
    height: int


def _default_canvas_sizes() -> Dict[str, CanvasSize]:
    return {
        'large': CanvasSize(1200, 800),   # load paths, soil-structure
        'medium': CanvasSize(900, 600),   # formula charts
        'small': CanvasSize(600, 400),    # earthquake response
    }


@dataclass
class SimulationConfig:
    """Timing, history and display settings."""

    # Scheduling
    time_step: float = 0.02          # s of simulated time per tick
    frame_interval: float = 0.02     # s of wall time between frames (~50 Hz)

    # In-memory history log (records kept)
    history_size: int = 500

    # Display
    display_scale: float = 1.0             # px per mm of displacement
    max_display_displacement: float = 250.0  # px, clamp for saturated/resonant response
    min_indicator_displacement: float = 0.1  # mm, below this no dimension line is drawn
    background_color: str = '#ffffff'
    minor_grid: float = 20.0         # px
    major_grid: float = 100.0        # px
    font: str = '10px monospace'

    # Amplification chart
    chart_max_ratio: float = 3.0
    chart_max_amplification: float = 5.0
    chart_samples: int = 200

    canvas_sizes: Dict[str, CanvasSize] = field(default_factory=_default_canvas_sizes)

    def canvas(self, kind: str = 'medium') -> CanvasSize:
        """Canvas preset by name, falling back to 'medium'."""
        return self.canvas_sizes.get(kind, self.canvas_sizes['medium'])
