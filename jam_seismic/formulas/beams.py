# jam_seismic/formulas/beams.py
"""Closed-form beam, column and stress formulas (consistent SI units)."""

import math

from .errors import require_positive


def cantilever_deflection(force: float, length: float, E: float, I: float) -> float:
    """
    Tip deflection of a cantilever with a point load at the free end.

    δ = P·L³ / (3·E·I)

    Args:
        force: Tip load P (N), sign gives direction
        length: Span L (m)
        E: Elastic modulus (Pa)
        I: Second moment of area (m⁴)

    Returns:
        δ (m)

    Raises:
        InvalidInputError: If L, E or I is not positive
    """
    require_positive(length=length, E=E, I=I)
    return force * length ** 3 / (3.0 * E * I)


def simply_supported_center_deflection(w: float, length: float, E: float, I: float) -> float:
    """
    Midspan deflection of a simply supported beam under a uniform load.

    δ = 5·w·L⁴ / (384·E·I)

    Args:
        w: Distributed load (N/m)
        length: Span L (m)
        E: Elastic modulus (Pa)
        I: Second moment of area (m⁴)

    Returns:
        δ (m)
    """
    require_positive(length=length, E=E, I=I)
    return 5.0 * w * length ** 4 / (384.0 * E * I)


def max_bending_moment_udl(w: float, length: float) -> float:
    """M_max = w·L² / 8 (N·m) for a simply supported span under UDL w (N/m)."""
    require_positive(length=length)
    return w * length ** 2 / 8.0


def euler_buckling_load(E: float, I: float, length: float, K: float = 1.0) -> float:
    """
    Euler critical load of an ideal column.

    P_cr = π²·E·I / (K·L)²

    Args:
        E: Elastic modulus (Pa)
        I: Second moment of area (m⁴)
        length: Column length L (m)
        K: Effective length factor (1.0 = pinned-pinned, 2.0 = cantilever)

    Returns:
        P_cr (N)
    """
    require_positive(E=E, I=I, length=length, K=K)
    return math.pi ** 2 * E * I / (K * length) ** 2


def slenderness_ratio(effective_length: float, radius_of_gyration: float) -> float:
    """KL/r (unitless). Both lengths in m."""
    require_positive(effective_length=effective_length, radius_of_gyration=radius_of_gyration)
    return effective_length / radius_of_gyration


def axial_stress(force: float, area: float) -> float:
    """σ = N / A (Pa)."""
    require_positive(area=area)
    return force / area


def bending_stress(moment: float, distance_from_neutral: float, I: float) -> float:
    """σ = M·y / I (Pa). y may be negative (compression side)."""
    require_positive(I=I)
    return moment * distance_from_neutral / I


def shear_stress(shear_force: float, area: float) -> float:
    """Average shear stress τ = V / A (Pa)."""
    require_positive(area=area)
    return shear_force / area
