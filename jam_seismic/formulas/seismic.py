# jam_seismic/formulas/seismic.py
"""Foundation bearing and equivalent-static seismic formulas."""

from .errors import require_positive


def bearing_capacity(
    cohesion: float,
    surcharge: float,
    gamma: float,
    width: float,
    Nc: float = 5.7,
    Nq: float = 1.0,
    Ngamma: float = 0.0,
) -> float:
    """
    Terzaghi-style ultimate bearing capacity.

    q_ult = c·Nc + q·Nq + 0.5·γ·B·Nγ

    The default factors (Nc=5.7, Nq=1, Nγ=0) are the undrained φ=0 case.

    Args:
        cohesion: Soil cohesion c (kPa)
        surcharge: Overburden pressure q at founding level (kPa)
        gamma: Soil unit weight γ (kN/m³)
        width: Footing width B (m)
        Nc, Nq, Ngamma: Bearing capacity factors

    Returns:
        q_ult (kPa)
    """
    require_positive(width=width)
    return cohesion * Nc + surcharge * Nq + 0.5 * gamma * width * Ngamma


def base_shear(seismic_weight: float, design_acceleration: float, R: float = 1.0) -> float:
    """
    Equivalent lateral force at the base.

    V = W·a / R

    Args:
        seismic_weight: W (kN)
        design_acceleration: Design spectral acceleration a (g)
        R: Response modification factor

    Returns:
        V (kN)
    """
    require_positive(R=R)
    return seismic_weight * design_acceleration / R


def story_drift(displacement_upper: float, displacement_lower: float, story_height: float) -> float:
    """Inter-storey drift ratio (Δ_upper − Δ_lower) / h, displacements in the same unit as h."""
    require_positive(story_height=story_height)
    return (displacement_upper - displacement_lower) / story_height
