# jam_seismic/formulas - Formula Engine
"""
FORMULAS: PURE CLOSED-FORM MECHANICS
====================================

Stateless functions only. The simulation loop, the renderers and the tests can
call them with arbitrary parameter grids without any shared state.

    dynamics.py   SDOF oscillator (natural frequency, amplification, response)
    beams.py      Beam / column / stress expressions
    seismic.py    Bearing capacity, base shear, storey drift
"""

from .errors import InvalidInputError, require_positive
from .dynamics import (
    RESONANCE,
    natural_frequency,
    angular_frequency,
    period,
    damping_ratio,
    frequency_ratio,
    dynamic_amplification,
    phase_lag,
    steady_state_displacement,
    amplification_curve,
)
from .beams import (
    cantilever_deflection,
    simply_supported_center_deflection,
    max_bending_moment_udl,
    euler_buckling_load,
    slenderness_ratio,
    axial_stress,
    bending_stress,
    shear_stress,
)
from .seismic import bearing_capacity, base_shear, story_drift

__all__ = [
    'InvalidInputError',
    'require_positive',
    # Dynamics
    'RESONANCE',
    'natural_frequency',
    'angular_frequency',
    'period',
    'damping_ratio',
    'frequency_ratio',
    'dynamic_amplification',
    'phase_lag',
    'steady_state_displacement',
    'amplification_curve',
    # Beams and columns
    'cantilever_deflection',
    'simply_supported_center_deflection',
    'max_bending_moment_udl',
    'euler_buckling_load',
    'slenderness_ratio',
    'axial_stress',
    'bending_stress',
    'shear_stress',
    # Foundation and seismic
    'bearing_capacity',
    'base_shear',
    'story_drift',
]
