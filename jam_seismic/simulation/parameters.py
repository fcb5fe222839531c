# jam_seismic/simulation/parameters.py
"""
Simulation parameters, the quantities derived from them, and the validating
input boundary that user edits pass through.
"""

import math
from dataclasses import dataclass, asdict, replace
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..formulas import dynamics


class InvalidParameterError(ValueError):
    """Raised when a parameter edit is rejected at the input boundary."""
    pass


@dataclass(frozen=True)
class SimulationParameters:
    """
    Inputs of one oscillator simulation.

    The dataclass itself does not validate: values that come from users go
    through validate_parameters() first.
    """
    mass: float = 1000.0                 # kg
    stiffness: float = 50000.0           # N/m
    damping_ratio: float = 0.05          # ζ
    ground_acceleration: float = 5.0     # m/s², amplitude
    excitation_frequency: float = 1.5    # Hz

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def with_updates(self, **edits: float) -> 'SimulationParameters':
        return replace(self, **edits)


class ParameterInput(BaseModel):
    """Validated parameter set as accepted from a form or request."""
    model_config = ConfigDict(extra='forbid', strict=True)

    mass: float = Field(1000.0, gt=0, allow_inf_nan=False, description="Lumped mass (kg)")
    stiffness: float = Field(50000.0, gt=0, allow_inf_nan=False, description="Lateral stiffness (N/m)")
    damping_ratio: float = Field(0.05, ge=0, allow_inf_nan=False, description="Damping ratio ζ")
    ground_acceleration: float = Field(5.0, gt=0, allow_inf_nan=False, description="Ground acceleration amplitude (m/s²)")
    excitation_frequency: float = Field(1.5, gt=0, allow_inf_nan=False, description="Excitation frequency (Hz)")

    def to_parameters(self) -> SimulationParameters:
        return SimulationParameters(**self.model_dump())


def validate_parameters(data: Dict[str, Any]) -> SimulationParameters:
    """
    Check a flat mapping of named numeric fields and build SimulationParameters.

    Raises:
        InvalidParameterError: If a field is missing a positive/finite value
            or an unknown field name is given. Values must already be numbers:
            bools and numeric strings are rejected, ints are accepted.
    """
    try:
        return ParameterInput.model_validate(data).to_parameters()
    except ValidationError as exc:
        raise InvalidParameterError(str(exc)) from exc


@dataclass(frozen=True)
class DerivedProperties:
    """
    Quantities computed from SimulationParameters.

    Never stored on their own: derive_properties() rebuilds them whenever
    they are needed.
    """
    natural_frequency: float     # Hz
    period: float                # s
    frequency_ratio: float       # r
    amplification_factor: float  # D, inf at undamped resonance
    angular_frequency: float     # ω₀, rad/s
    phase_lag: float             # φ, rad

    @property
    def is_valid(self) -> bool:
        """False when the parameters produced a non-finite natural frequency."""
        return math.isfinite(self.natural_frequency) and self.natural_frequency > 0

    @property
    def is_resonant(self) -> bool:
        return self.is_valid and math.isinf(self.amplification_factor)


def derive_properties(params: SimulationParameters) -> DerivedProperties:
    """Evaluate the oscillator's derived properties with the Formula Engine."""
    fn = dynamics.natural_frequency(params.stiffness, params.mass)
    r = dynamics.frequency_ratio(params.excitation_frequency, fn)

    if math.isnan(r):
        amplification = math.nan
        lag = math.nan
    else:
        amplification = dynamics.dynamic_amplification(r, params.damping_ratio)
        lag = dynamics.phase_lag(r, params.damping_ratio)

    return DerivedProperties(
        natural_frequency=fn,
        period=dynamics.period(fn),
        frequency_ratio=r,
        amplification_factor=amplification,
        angular_frequency=dynamics.angular_frequency(fn),
        phase_lag=lag,
    )
