# File: tests/test_simulation_loop.py
"""
Test the SimulationLoop state machine.

WHY THESE TESTS?
---------------
1. start / stop / reset must behave the same however often they are pressed
2. A frame that was already queued when stop() ran must not move anything
3. Resonance and broken parameters must keep the loop alive, never crash it
4. The history log must stay bounded

All tests use the ManualFrameScheduler, so "one frame" is one advance() call
and nothing depends on wall-clock timing.
"""

import logging
import math
import threading

import pytest

from jam_seismic import (
    InvalidParameterError,
    ManualFrameScheduler,
    ResponseCondition,
    SimulationConfig,
    SimulationLoop,
    SimulationParameters,
    SimulationState,
)


@pytest.fixture
def scheduler():
    return ManualFrameScheduler()


@pytest.fixture
def loop(scheduler):
    return SimulationLoop(scheduler=scheduler)


def test_initial_state(loop):
    assert loop.state == SimulationState()
    assert not loop.is_running
    assert loop.history == []
    assert loop.parameters == SimulationParameters()


def test_start_requests_one_frame(loop, scheduler):
    loop.start()
    assert loop.is_running
    assert len(scheduler.pending) == 1

    scheduler.advance()
    assert loop.state.tick_count == 1
    assert loop.state.elapsed_time == pytest.approx(0.02)
    # The tick queued the next frame
    assert len(scheduler.pending) == 1


def test_time_is_monotonic(loop, scheduler):
    loop.start()
    times = []
    for _ in range(20):
        scheduler.advance()
        times.append(loop.state.elapsed_time)

    assert all(b > a for a, b in zip(times, times[1:]))
    assert times[-1] == pytest.approx(20 * 0.02)


def test_stop_freezes_state(loop, scheduler):
    loop.start()
    scheduler.advance(5)
    loop.stop()
    frozen = loop.state

    assert not frozen.running
    assert scheduler.advance(5) == 0
    assert loop.tick() is False
    assert loop.state.elapsed_time == frozen.elapsed_time
    assert loop.state.displacement == frozen.displacement


def test_queued_frame_after_stop_is_ignored(loop, scheduler):
    """
    WHAT IS THIS TEST?
    ==================
    A browser can deliver an animation frame that was scheduled just before
    the stop button was pressed. That late callback must not advance time.
    """
    loop.start()
    scheduler.advance(3)
    late_frame = scheduler.pending[0]
    loop.stop()
    before = loop.state

    late_frame()

    assert loop.state == before
    assert scheduler.pending == []


def test_frame_from_previous_run_is_ignored(loop, scheduler):
    loop.start()
    scheduler.advance(3)
    old_frame = scheduler.pending[0]

    loop.start()  # restart
    old_frame()

    assert loop.state.tick_count == 0
    assert loop.state.elapsed_time == 0.0
    assert len(scheduler.pending) == 1


def test_start_restarts_from_zero(loop, scheduler):
    loop.start()
    scheduler.advance(10)
    loop.start()

    assert loop.state.elapsed_time == 0.0
    assert loop.state.displacement == 0.0
    assert loop.history == []
    assert loop.is_running


def test_reset_is_idempotent(loop, scheduler):
    loop.start()
    scheduler.advance(7)

    loop.reset()
    first = loop.state
    loop.reset()

    assert loop.state == first == SimulationState()
    assert loop.history == []
    assert scheduler.pending == []


def test_displacement_follows_formula(loop, scheduler):
    loop.start()
    scheduler.advance(10)

    d = loop.derived
    p = loop.parameters
    t = loop.state.elapsed_time
    expected = (d.amplification_factor * p.ground_acceleration / d.angular_frequency ** 2
                * math.sin(2 * math.pi * p.excitation_frequency * t - d.phase_lag) * 1000.0)
    assert loop.state.displacement == pytest.approx(expected)
    assert loop.state.condition is ResponseCondition.OK


def test_parameter_edit_applies_on_next_tick(loop, scheduler):
    loop.start()
    scheduler.advance(5)
    loop.update_parameters(excitation_frequency=3.0)

    # Not re-evaluated until the next tick
    assert loop.state.tick_count == 5
    scheduler.advance()
    assert loop.state.tick_count == 6
    assert loop.state.elapsed_time == pytest.approx(6 * 0.02)
    assert loop.parameters.excitation_frequency == 3.0


def test_undamped_resonance_does_not_crash(loop, scheduler, caplog):
    """
    WHAT IS THIS TEST?
    ==================
    Excite the structure exactly at its natural frequency with zero damping.
    The amplification is infinite; the loop must keep running, flag the
    condition and log a warning once.
    """
    loop.update_parameters(damping_ratio=0.0)
    loop.update_parameters(excitation_frequency=loop.derived.natural_frequency)
    assert math.isinf(loop.derived.amplification_factor)

    with caplog.at_level(logging.WARNING, logger="jam_seismic"):
        loop.start()
        scheduler.advance(10)

    assert loop.is_running
    assert loop.state.tick_count == 10
    assert loop.state.condition is ResponseCondition.RESONANCE
    assert not math.isnan(loop.state.displacement)
    assert any(math.isinf(r.displacement) for r in loop.history)
    assert sum("resonance" in r.getMessage().lower() for r in caplog.records) == 1


def test_invalid_parameters_hold_last_displacement(loop, scheduler):
    loop.start()
    scheduler.advance(5)
    held = loop.state.displacement

    # Trusted path: the value is stored even though it is meaningless
    loop.update_parameters(validate=False, mass=0.0)
    scheduler.advance(5)

    assert loop.is_running
    assert loop.state.condition is ResponseCondition.INVALID_PARAMETERS
    assert loop.state.displacement == held
    assert loop.state.elapsed_time == pytest.approx(10 * 0.02)

    # Correcting the parameters resumes the normal response
    loop.update_parameters(mass=1000.0)
    scheduler.advance()
    assert loop.state.condition is ResponseCondition.OK


def test_invalid_parameters_log_warning(loop, scheduler, caplog):
    loop.start()
    scheduler.advance()
    loop.update_parameters(validate=False, stiffness=-50000.0)

    with caplog.at_level(logging.WARNING, logger="jam_seismic"):
        scheduler.advance(3)

    assert "not finite" in caplog.text


@pytest.mark.parametrize("field", ["damping_ratio", "ground_acceleration", "excitation_frequency"])
def test_nan_response_warning_names_the_excitation_inputs(loop, scheduler, caplog, field):
    """
    WHAT IS THIS TEST?
    ==================
    With mass and stiffness intact the natural frequency is fine; a nan in
    one of the other inputs makes the response nan. The warning must point
    at those inputs, not at the natural frequency.
    """
    loop.start()
    scheduler.advance()
    loop.update_parameters(validate=False, **{field: float('nan')})

    with caplog.at_level(logging.WARNING, logger="jam_seismic"):
        scheduler.advance(3)

    assert loop.state.condition is ResponseCondition.INVALID_PARAMETERS
    assert f"{field}=nan" in caplog.text
    assert "Natural frequency" not in caplog.text


@pytest.mark.parametrize("edit", [
    dict(mass=0.0),
    dict(mass=-5.0),
    dict(stiffness=float('nan')),
    dict(excitation_frequency=float('inf')),
    dict(damping_ratio=-0.1),
    dict(colour=3.0),
    dict(mass=True),
    dict(stiffness="50000"),
    dict(damping_ratio=None),
])
def test_validated_edit_rejected(loop, edit):
    before = loop.parameters
    with pytest.raises(InvalidParameterError):
        loop.update_parameters(**edit)
    assert loop.parameters == before


def test_zero_damping_is_valid(loop):
    loop.update_parameters(damping_ratio=0.0)
    assert loop.parameters.damping_ratio == 0.0


def test_integer_edit_accepted(loop):
    loop.update_parameters(mass=2000)
    assert loop.parameters.mass == 2000.0


def test_history_is_bounded(scheduler):
    loop = SimulationLoop(config=SimulationConfig(history_size=10), scheduler=scheduler)
    loop.start()
    scheduler.advance(25)

    history = loop.history
    assert len(history) == 10
    assert history[0].time == pytest.approx(16 * 0.02)
    assert history[-1].time == pytest.approx(25 * 0.02)


def test_history_frame(loop, scheduler):
    loop.start()
    scheduler.advance(4)
    df = loop.history_frame()

    assert list(df.columns) == ['time', 'displacement_mm', 'condition']
    assert len(df) == 4
    assert (df['condition'] == 'ok').all()
    assert df['time'].is_monotonic_increasing


def test_tick_without_scheduler():
    loop = SimulationLoop()
    assert loop.tick() is False
    loop.start()
    assert loop.tick() is True
    assert loop.tick(dt=0.5) is True
    assert loop.state.elapsed_time == pytest.approx(0.52)


def test_tick_rejects_non_positive_step(loop):
    loop.start()
    with pytest.raises(ValueError):
        loop.tick(dt=0.0)
    with pytest.raises(ValueError):
        loop.tick(dt=-0.02)


def test_concurrent_edits_last_writer_wins(loop):
    loop.start()
    frequencies = [0.5 + 0.1 * i for i in range(20)]

    def edit(f):
        loop.update_parameters(excitation_frequency=f)
        loop.tick()

    threads = [threading.Thread(target=edit, args=(f,)) for f in frequencies]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert loop.parameters.excitation_frequency in frequencies
    assert loop.state.tick_count == len(frequencies)
    assert len(loop.history) == len(frequencies)
