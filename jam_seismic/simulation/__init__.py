# jam_seismic/simulation - Simulation loop
"""
SIMULATION: STATE, PARAMETERS AND SCHEDULING
============================================

    parameters.py    SimulationParameters, DerivedProperties, input boundary
    loop.py          SimulationLoop state machine (start/stop/reset/tick)
    scheduler.py     Frame schedulers (asyncio and manual)
    verification.py  Literal values/queries for external checking
"""

from .parameters import (
    InvalidParameterError,
    SimulationParameters,
    ParameterInput,
    DerivedProperties,
    validate_parameters,
    derive_properties,
)
from .loop import (
    ResponseCondition,
    SimulationState,
    HistoryRecord,
    SimulationLoop,
)
from .scheduler import FrameScheduler, AsyncioFrameScheduler, ManualFrameScheduler
from .verification import verification_values, verification_queries

__all__ = [
    'InvalidParameterError',
    'SimulationParameters',
    'ParameterInput',
    'DerivedProperties',
    'validate_parameters',
    'derive_properties',
    'ResponseCondition',
    'SimulationState',
    'HistoryRecord',
    'SimulationLoop',
    'FrameScheduler',
    'AsyncioFrameScheduler',
    'ManualFrameScheduler',
    'verification_values',
    'verification_queries',
]
