# File: tests/test_dynamics_formulas.py
"""
Test the single-degree-of-freedom dynamics formulas.

WHY THESE TESTS?
---------------
Every frame of the simulation is built from these few expressions. If the
natural frequency or the amplification factor is off, the whole picture is
wrong but still looks plausible, so the numbers are pinned against hand
calculations here.
"""

import math

import numpy as np
import pytest

from jam_seismic.formulas import (
    RESONANCE,
    amplification_curve,
    angular_frequency,
    damping_ratio,
    dynamic_amplification,
    frequency_ratio,
    natural_frequency,
    period,
    phase_lag,
    steady_state_displacement,
)


def test_natural_frequency_reference_structure():
    """
    WHAT IS THIS TEST?
    ==================
    m = 1000 kg, k = 50000 N/m:

        ω₀ = √(k/m) = √50 = 7.0711 rad/s
        f₀ = ω₀ / 2π = 1.1254 Hz
        T  = 1 / f₀ = 0.8886 s
    """
    fn = natural_frequency(50000.0, 1000.0)
    assert np.isclose(fn, 1.1254, atol=1e-4)
    assert np.isclose(period(fn), 0.8886, atol=1e-4)
    assert np.isclose(angular_frequency(fn) ** 2, 50.0, rtol=1e-12)


@pytest.mark.parametrize("k, m", [(50000.0, 1000.0), (1.0, 1.0), (3.2e6, 12000.0)])
def test_frequency_times_period_is_one(k, m):
    fn = natural_frequency(k, m)
    assert fn * period(fn) == pytest.approx(1.0, rel=1e-12)


def test_natural_frequency_invalid_mass_is_not_finite():
    # No exception: the simulation loop decides what to do with it
    assert math.isinf(natural_frequency(50000.0, 0.0))
    assert math.isnan(natural_frequency(-50000.0, 1000.0))
    assert math.isinf(period(0.0))


def test_frequency_ratio():
    assert frequency_ratio(1.5, 1.5) == 1.0
    assert frequency_ratio(0.0, 2.0) == 0.0
    assert math.isnan(frequency_ratio(1.5, math.inf))
    assert math.isnan(frequency_ratio(1.5, 0.0))


def test_frequency_ratio_reference_structure():
    fn = natural_frequency(50000.0, 1000.0)
    r = frequency_ratio(1.5, fn)
    assert np.isclose(r, 1.3329, atol=1e-4)

    expected_D = 1.0 / math.sqrt((1 - r ** 2) ** 2 + (2 * 0.05 * r) ** 2)
    assert dynamic_amplification(r, 0.05) == pytest.approx(expected_D, rel=1e-12)


def test_damping_ratio():
    assert damping_ratio(200.0, 1000.0) == pytest.approx(0.2)


def test_amplification_at_resonance_with_damping():
    """
    At r = 1 the stiffness and inertia terms cancel and only damping limits
    the response: D = 1 / (2ζ).
    """
    assert dynamic_amplification(1.0, 0.05) == pytest.approx(10.0)
    assert dynamic_amplification(1.0, 0.2) == pytest.approx(2.5)


def test_amplification_static_limit():
    # Very slow shaking: the structure just follows the ground
    assert dynamic_amplification(0.0, 0.05) == 1.0
    assert dynamic_amplification(1e-6, 0.3) == pytest.approx(1.0, abs=1e-9)


def test_undamped_resonance_is_infinite_not_an_error():
    D = dynamic_amplification(1.0, 0.0)
    assert D == RESONANCE
    assert math.isinf(D)


@pytest.mark.parametrize("r", [0.3, 0.99, 1.0, 2.5])
@pytest.mark.parametrize("zeta", [0.0, 0.05, 0.5])
def test_amplification_symmetric_in_r(r, zeta):
    assert dynamic_amplification(r, zeta) == dynamic_amplification(-r, zeta)


def test_phase_lag_quadrants():
    """
    Below resonance the response lags by less than 90°, at resonance by
    exactly 90°, above resonance by more than 90°.
    """
    assert 0.0 < phase_lag(0.5, 0.05) < math.pi / 2
    assert phase_lag(1.0, 0.05) == pytest.approx(math.pi / 2)
    assert math.pi / 2 < phase_lag(2.0, 0.05) < math.pi
    assert phase_lag(0.5, 0.0) == 0.0


def test_steady_state_displacement_amplitude():
    """
    ω₀² = 50 and a_g = 5 m/s² give a static displacement of 0.1 m. With D = 1
    and the sine at its peak, the response is 100 mm.
    """
    omega = math.sqrt(50.0)
    f = 1.0
    t = 0.25  # sin(2π·1·0.25) = 1
    u = steady_state_displacement(1.0, 5.0, omega, t, f, 0.0)
    assert u == pytest.approx(100.0)


def test_steady_state_displacement_phase():
    omega = math.sqrt(50.0)
    u = steady_state_displacement(2.0, 5.0, omega, 0.0, 1.0, math.pi / 2)
    # sin(-π/2) = -1
    assert u == pytest.approx(-200.0)


def test_steady_state_displacement_resonance():
    omega = math.sqrt(50.0)
    assert steady_state_displacement(RESONANCE, 5.0, omega, 0.25, 1.0, 0.0) == math.inf
    assert steady_state_displacement(RESONANCE, 5.0, omega, 0.75, 1.0, 0.0) == -math.inf
    # Exact zero crossing: 0, never nan
    assert steady_state_displacement(RESONANCE, 5.0, omega, 0.0, 1.0, 0.0) == 0.0


def test_amplification_curve_matches_scalar():
    ratios = np.linspace(0.0, 3.0, 31)
    curve = amplification_curve(ratios, 0.1)
    expected = [dynamic_amplification(r, 0.1) for r in ratios]
    assert np.allclose(curve, expected)


def test_amplification_curve_undamped():
    curve = amplification_curve([0.0, 1.0, 2.0], 0.0)
    assert curve[0] == 1.0
    assert np.isinf(curve[1])
    assert curve[2] == pytest.approx(1.0 / 3.0)
