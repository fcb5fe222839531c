# jam_seismic - Structural dynamics teaching simulations
"""
JAM SEISMIC: EARTHQUAKE RESPONSE OF A SINGLE-DEGREE-OF-FREEDOM STRUCTURE
=======================================================================

A building idealised as one lumped mass on a lateral spring, shaken by
harmonic ground motion. The package computes the steady-state response each
tick and turns it into drawing primitives.

PACKAGES:
---------
    formulas/     Closed-form structural engineering formulas
    geometry/     Nice-number grids and isometric projection
    simulation/   Parameters, derived properties, the time-stepped loop
    render/       Primitive lists and drawing-surface adapters

QUICK START:
------------
    from jam_seismic import SimulationLoop, ManualFrameScheduler

    scheduler = ManualFrameScheduler()
    loop = SimulationLoop(scheduler=scheduler)
    loop.start()
    scheduler.advance(50)          # one simulated second
    print(loop.state.displacement)
"""

__version__ = "0.1.0"

from .config import SimulationConfig, CanvasSize
from .logging_config import setup_logging
from .simulation import (
    InvalidParameterError,
    SimulationParameters,
    DerivedProperties,
    derive_properties,
    validate_parameters,
    ResponseCondition,
    SimulationState,
    SimulationLoop,
    AsyncioFrameScheduler,
    ManualFrameScheduler,
)
from .registry import SimulationView, SimulationRegistry, standard_views

__all__ = [
    'SimulationConfig',
    'CanvasSize',
    'setup_logging',
    'InvalidParameterError',
    'SimulationParameters',
    'DerivedProperties',
    'derive_properties',
    'validate_parameters',
    'ResponseCondition',
    'SimulationState',
    'SimulationLoop',
    'AsyncioFrameScheduler',
    'ManualFrameScheduler',
    'SimulationView',
    'SimulationRegistry',
    'standard_views',
]
