# jam_seismic/formulas/dynamics.py
"""
STRUCTURAL DYNAMICS: SINGLE-DEGREE-OF-FREEDOM OSCILLATOR
========================================================

PURPOSE:
--------
Closed-form expressions for a lumped mass m on a spring k with viscous damping
ratio ζ, shaken at its base by a harmonic ground acceleration

    a_g(t) = A · sin(2π·f·t)

ENGINEERING CONTEXT:
--------------------
- Natural frequency  f₀ = (1/2π)·√(k/m)
- Frequency ratio    r  = f / f₀
- Amplification      D  = 1 / √((1 − r²)² + (2ζr)²)
- Phase lag          φ  = atan2(2ζr, 1 − r²)

The steady-state (particular) relative displacement is

    u(t) = D · (A / ω₀²) · sin(2π·f·t − φ)

where A/ω₀² is the static displacement the same acceleration would cause.

EDGE CASES:
-----------
These functions never raise for mathematically well-defined inputs:
- r = 1, ζ = 0 is true resonance; the amplification is RESONANCE (= inf).
- mass <= 0 produces a non-finite natural frequency (nan or inf); the caller
  is expected to reject such parameters before relying on the result.
"""

import math

import numpy as np


# Sentinel returned by dynamic_amplification() for undamped resonance
RESONANCE = math.inf

# Response is reported in millimetres
M_TO_MM = 1000.0


def natural_frequency(stiffness: float, mass: float) -> float:
    """
    Natural frequency of the oscillator.

    f₀ = √(k/m) / (2π)

    Args:
        stiffness: Lateral stiffness k (N/m)
        mass: Lumped mass m (kg)

    Returns:
        f₀ in Hz. inf when mass == 0, nan when k/m is negative.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        ratio = np.divide(np.float64(stiffness), np.float64(mass))
        return float(np.sqrt(ratio) / (2.0 * np.pi))


def angular_frequency(frequency_hz: float) -> float:
    """ω = 2π·f (rad/s)."""
    return 2.0 * math.pi * frequency_hz


def period(natural_freq: float) -> float:
    """
    Natural period T = 1/f₀ (s).

    Division by zero propagates as inf (nan stays nan), it is never clamped.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.divide(1.0, np.float64(natural_freq)))


def damping_ratio(actual_damping: float, critical_damping: float) -> float:
    """ζ = c / c_cr (unitless)."""
    return actual_damping / critical_damping


def frequency_ratio(excitation_frequency: float, natural_freq: float) -> float:
    """
    r = f / f₀.

    Returns 0 exactly when the excitation frequency is 0, nan when f₀ is not
    a positive finite number.
    """
    if not math.isfinite(natural_freq) or natural_freq <= 0:
        return math.nan
    return excitation_frequency / natural_freq


def dynamic_amplification(frequency_ratio: float, damping_ratio: float) -> float:
    """
    Dynamic amplification factor of the steady-state response.

    D = 1 / √((1 − r²)² + (2ζr)²)

    Depends only on r² and (ζr)², so D(r, ζ) == D(−r, ζ).

    Args:
        frequency_ratio: r = f / f₀
        damping_ratio: ζ

    Returns:
        D (unitless). RESONANCE (inf) when r == 1 and ζ == 0.
    """
    r = frequency_ratio
    denominator = math.sqrt((1.0 - r * r) ** 2 + (2.0 * damping_ratio * r) ** 2)
    if denominator == 0.0:
        return RESONANCE
    return 1.0 / denominator


def phase_lag(frequency_ratio: float, damping_ratio: float) -> float:
    """
    Phase angle between excitation and response (rad).

    φ = atan2(2ζr, 1 − r²)

    The two-argument form keeps φ in the correct quadrant when r crosses 1
    (φ < π/2 below resonance, > π/2 above it).
    """
    r = frequency_ratio
    return math.atan2(2.0 * damping_ratio * r, 1.0 - r * r)


def steady_state_displacement(
    amplification: float,
    ground_acceleration: float,
    omega: float,
    time: float,
    frequency_hz: float,
    phase_lag: float,
) -> float:
    """
    Steady-state relative displacement of the mass at a given time.

    u(t) = D · (a_g / ω₀²) · sin(2π·f·t − φ)

    Args:
        amplification: Dynamic amplification factor D
        ground_acceleration: Ground acceleration amplitude a_g (m/s²)
        omega: Natural circular frequency ω₀ (rad/s)
        time: Time t (s)
        frequency_hz: Excitation frequency f (Hz)
        phase_lag: φ (rad), see phase_lag()

    Returns:
        Displacement in mm. With an infinite amplification the result is
        ±inf, or 0.0 at an exact zero crossing of the sine (never nan).
    """
    oscillation = math.sin(2.0 * math.pi * frequency_hz * time - phase_lag)
    static_displacement = ground_acceleration / (omega * omega)

    if math.isinf(amplification):
        if oscillation == 0.0:
            return 0.0
        return math.copysign(math.inf, oscillation * static_displacement)

    return amplification * static_displacement * oscillation * M_TO_MM


def amplification_curve(frequency_ratios, damping_ratio: float) -> np.ndarray:
    """
    Vectorised dynamic_amplification() over an array of frequency ratios.

    Points at exact undamped resonance come back as inf.
    """
    r = np.asarray(frequency_ratios, dtype=float)
    denominator = np.sqrt((1.0 - r ** 2) ** 2 + (2.0 * damping_ratio * r) ** 2)
    with np.errstate(divide='ignore'):
        return np.where(denominator == 0.0, np.inf, 1.0 / denominator)
