# jam_seismic/registry.py
"""
Registry of simulation views.

The application shell builds a registry at startup and looks views up by id;
there is no import-time self-registration.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from .config import SimulationConfig
from .render import (
    Primitive,
    render_amplification_chart,
    render_earthquake_frame,
    render_isometric_structure,
)
from .simulation import SimulationLoop

RenderFn = Callable[[SimulationLoop], List[Primitive]]


@dataclass(frozen=True)
class SimulationView:
    """A named way of drawing a running simulation."""
    id: str
    title: str
    description: str
    render: RenderFn


class SimulationRegistry:
    """Ordered collection of SimulationView entries keyed by id."""

    def __init__(self, views: Iterable[SimulationView] = ()):
        self._views: Dict[str, SimulationView] = {}
        for view in views:
            self.register(view)

    def register(self, view: SimulationView) -> SimulationView:
        if view.id in self._views:
            raise ValueError(f"Duplicate simulation view id: {view.id!r}")
        self._views[view.id] = view
        return view

    def get(self, view_id: str) -> SimulationView:
        try:
            return self._views[view_id]
        except KeyError:
            raise KeyError(f"Unknown simulation view {view_id!r}. Available: {self.ids()}") from None

    def ids(self) -> List[str]:
        return list(self._views)

    def __iter__(self) -> Iterator[SimulationView]:
        return iter(self._views.values())

    def __len__(self) -> int:
        return len(self._views)


def standard_views(config: Optional[SimulationConfig] = None) -> List[SimulationView]:
    """The built-in views, rendering with the given display config."""
    config = config if config is not None else SimulationConfig()

    def earthquake(loop: SimulationLoop) -> List[Primitive]:
        return render_earthquake_frame(loop.state, loop.parameters, config, loop.derived)

    def amplification(loop: SimulationLoop) -> List[Primitive]:
        return render_amplification_chart(loop.derived.frequency_ratio, loop.parameters.damping_ratio, config)

    def isometric(loop: SimulationLoop) -> List[Primitive]:
        return render_isometric_structure(loop.state, loop.history, config)

    return [
        SimulationView('earthquake', 'Earthquake Response',
                       'Side view of the oscillator under harmonic ground motion.', earthquake),
        SimulationView('amplification', 'Dynamic Amplification',
                       'Amplification factor vs frequency ratio with the operating point.', amplification),
        SimulationView('isometric', 'Isometric Structure',
                       'Swaying multi-storey building with recent response history.', isometric),
    ]
