# jam_seismic/simulation/verification.py
"""
Literal values for checking the simulation against an external calculator.

Nothing here talks to a network: the functions return numbers and plain-text
queries, and whoever builds links (the app shell) decides where they go.
"""

import math
from typing import Dict

from .loop import SimulationState
from .parameters import DerivedProperties, SimulationParameters


def verification_values(
    params: SimulationParameters,
    derived: DerivedProperties,
    state: SimulationState,
) -> Dict[str, float]:
    """Every input and derived number of the current frame, keyed by name."""
    return {
        'mass': params.mass,
        'stiffness': params.stiffness,
        'damping_ratio': params.damping_ratio,
        'ground_acceleration': params.ground_acceleration,
        'excitation_frequency': params.excitation_frequency,
        'natural_frequency': derived.natural_frequency,
        'period': derived.period,
        'frequency_ratio': derived.frequency_ratio,
        'amplification_factor': derived.amplification_factor,
        'phase_lag': derived.phase_lag,
        'elapsed_time': state.elapsed_time,
        'displacement_mm': state.displacement,
    }


def _literal(value: float) -> str:
    if math.isinf(value):
        return 'infinity' if value > 0 else '-infinity'
    return f"{value:.6g}"


def verification_queries(params: SimulationParameters, derived: DerivedProperties) -> Dict[str, str]:
    """
    Plain-text calculator queries reproducing the derived properties.

    Each query embeds the literal input numbers, so the expected answer is the
    corresponding DerivedProperties field.
    """
    fn = _literal(derived.natural_frequency)
    r = _literal(derived.frequency_ratio)
    zeta = _literal(params.damping_ratio)
    return {
        'natural_frequency': f"natural frequency sqrt({_literal(params.stiffness)}/{_literal(params.mass)})/(2*pi) Hz",
        'period': f"period 1/{fn} seconds",
        'frequency_ratio': f"{_literal(params.excitation_frequency)}/{fn}",
        'amplification_factor': f"1/sqrt((1-{r}^2)^2+(2*{zeta}*{r})^2)",
        'phase_lag': f"atan2(2*{zeta}*{r}, 1-{r}^2)",
    }
