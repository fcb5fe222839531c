# jam_seismic/simulation/loop.py
"""
SIMULATION LOOP: TIME-STEPPED EARTHQUAKE RESPONSE
=================================================

PURPOSE:
--------
Own the parameters and the state of one oscillator and advance the state one
tick at a time.

STATES:
-------
    Stopped --start()--> Running --stop()--> Stopped
       ^                                        |
       +---------------- reset() <--------------+   (from any state)

- start() always restarts time at 0; there is no pause/resume.
- stop() freezes time and displacement where they are.
- reset() stops and zeroes time and displacement.
- Parameter edits while running apply on the next tick, time continues.

EACH TICK:
----------
1. Guard: if not running, do nothing (a frame queued before stop() may still
   fire afterwards).
2. t += dt
3. Re-derive natural frequency, ratio, amplification, phase from the current
   parameters (they may have changed since the last tick).
4. u(t) from the steady-state formula.
5. Replace the state snapshot and append to the bounded history.

FAILURE HANDLING:
-----------------
- Undamped resonance: amplification is inf, displacement ±inf, condition
  RESONANCE. The loop keeps running; renderers saturate the display.
- Non-finite natural frequency (mass/stiffness invalid): displacement is held
  at the last finite value, condition INVALID_PARAMETERS, until parameters are
  corrected.

THREADS:
--------
All mutation happens under one lock; the last parameter edit wins.
"""

import logging
import math
import threading
from collections import deque
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, List, Optional

import pandas as pd

from ..config import SimulationConfig
from ..formulas import dynamics
from .parameters import (
    DerivedProperties,
    SimulationParameters,
    derive_properties,
    validate_parameters,
)
from .scheduler import FrameScheduler

logger = logging.getLogger(__name__)


class ResponseCondition(str, Enum):
    OK = 'ok'
    RESONANCE = 'resonance'
    INVALID_PARAMETERS = 'invalid_parameters'


@dataclass(frozen=True)
class SimulationState:
    """Immutable snapshot of the simulation, replaced on every tick."""
    elapsed_time: float = 0.0   # s
    displacement: float = 0.0   # mm, relative to the ground
    running: bool = False
    tick_count: int = 0
    condition: ResponseCondition = ResponseCondition.OK


@dataclass(frozen=True)
class HistoryRecord:
    time: float
    displacement: float
    condition: ResponseCondition


class SimulationLoop:
    """
    Time-stepped steady-state response of a base-excited SDOF oscillator.

    Args:
        parameters: Initial parameters (trusted, not validated)
        config: Timing/history settings; a fresh SimulationConfig by default
        scheduler: Frame scheduler; without one, call tick() yourself
    """

    def __init__(
        self,
        parameters: Optional[SimulationParameters] = None,
        config: Optional[SimulationConfig] = None,
        scheduler: Optional[FrameScheduler] = None,
    ):
        self.config = config if config is not None else SimulationConfig()
        self._params = parameters if parameters is not None else SimulationParameters()
        self._scheduler = scheduler
        self._state = SimulationState()
        self._history = deque(maxlen=self.config.history_size)
        self._last_finite_displacement = 0.0
        self._lock = threading.RLock()
        self._frame_handle: Any = None
        self._run_id = 0

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def parameters(self) -> SimulationParameters:
        return self._params

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def derived(self) -> DerivedProperties:
        """Derived properties of the current parameters (recomputed on access)."""
        return derive_properties(self._params)

    @property
    def is_running(self) -> bool:
        return self._state.running

    @property
    def history(self) -> List[HistoryRecord]:
        with self._lock:
            return list(self._history)

    def history_frame(self) -> pd.DataFrame:
        """History log as a DataFrame with columns time, displacement_mm, condition."""
        records = self.history
        return pd.DataFrame({
            'time': [r.time for r in records],
            'displacement_mm': [r.displacement for r in records],
            'condition': [r.condition.value for r in records],
        })

    # ------------------------------------------------------------------
    # Parameter edits
    # ------------------------------------------------------------------

    def update_parameters(self, validate: bool = True, **edits: float) -> SimulationParameters:
        """
        Apply parameter edits; they take effect on the next tick.

        Args:
            validate: Pass the merged parameter set through the input
                boundary (positivity/finiteness). validate=False stores the
                values as given.
            **edits: Field name -> new value

        Raises:
            InvalidParameterError: validate=True and the result is invalid;
                the current parameters are left unchanged
        """
        with self._lock:
            if validate:
                updated = validate_parameters({**self._params.to_dict(), **edits})
            else:
                updated = self._params.with_updates(**edits)
            self._params = updated
        logger.debug("Parameters updated: %s", edits)
        return updated

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start (or restart) the simulation from t = 0."""
        with self._lock:
            self._cancel_pending_frame()
            self._run_id += 1
            self._state = SimulationState(running=True)
            self._history.clear()
            self._last_finite_displacement = 0.0
            self._request_next_frame()
        derived = self.derived
        logger.info(
            "Simulation started: f0=%.3f Hz, r=%.3f, D=%.3f",
            derived.natural_frequency, derived.frequency_ratio, derived.amplification_factor,
        )

    def stop(self) -> None:
        """Stop advancing; time and displacement stay where they are."""
        with self._lock:
            self._cancel_pending_frame()
            was_running = self._state.running
            if was_running:
                self._state = replace(self._state, running=False)
        if was_running:
            logger.info("Simulation stopped at t=%.2f s", self._state.elapsed_time)

    def reset(self) -> None:
        """Stop and return to t = 0, displacement = 0 with an empty history."""
        with self._lock:
            self._cancel_pending_frame()
            self._state = SimulationState()
            self._history.clear()
            self._last_finite_displacement = 0.0
        logger.info("Simulation reset")

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def tick(self, dt: Optional[float] = None) -> bool:
        """
        Advance the simulation by one step.

        Args:
            dt: Time step (s); config.time_step when omitted

        Returns:
            True if the state advanced, False if the loop is stopped
        """
        step = self.config.time_step if dt is None else dt
        if not step > 0:
            raise ValueError(f"time step must be positive, got {step}")

        with self._lock:
            previous = self._state
            if not previous.running:
                return False

            time = previous.elapsed_time + step
            derived = derive_properties(self._params)
            displacement, condition = self._response_at(time, derived)

            self._state = SimulationState(
                elapsed_time=time,
                displacement=displacement,
                running=True,
                tick_count=previous.tick_count + 1,
                condition=condition,
            )
            self._history.append(HistoryRecord(time, displacement, condition))

        if condition != previous.condition:
            self._log_condition_change(condition, derived)
        logger.debug("t=%.3f s u=%.3f mm", time, displacement)
        return True

    def _response_at(self, time: float, derived: DerivedProperties):
        if not derived.is_valid:
            return self._last_finite_displacement, ResponseCondition.INVALID_PARAMETERS

        displacement = dynamics.steady_state_displacement(
            derived.amplification_factor,
            self._params.ground_acceleration,
            derived.angular_frequency,
            time,
            self._params.excitation_frequency,
            derived.phase_lag,
        )
        if math.isnan(displacement):
            return self._last_finite_displacement, ResponseCondition.INVALID_PARAMETERS

        if math.isfinite(displacement):
            self._last_finite_displacement = displacement
        condition = ResponseCondition.RESONANCE if derived.is_resonant else ResponseCondition.OK
        return displacement, condition

    def _log_condition_change(self, condition: ResponseCondition, derived: DerivedProperties) -> None:
        if condition is ResponseCondition.RESONANCE:
            logger.warning(
                "Undamped resonance (r=%.3f, zeta=0): amplification is unbounded",
                derived.frequency_ratio,
            )
        elif condition is ResponseCondition.INVALID_PARAMETERS and not derived.is_valid:
            logger.warning(
                "Natural frequency is not finite (mass=%s, stiffness=%s); holding displacement",
                self._params.mass, self._params.stiffness,
            )
        elif condition is ResponseCondition.INVALID_PARAMETERS:
            logger.warning(
                "Response is not a number (damping_ratio=%s, ground_acceleration=%s, "
                "excitation_frequency=%s); holding displacement",
                self._params.damping_ratio, self._params.ground_acceleration,
                self._params.excitation_frequency,
            )
        else:
            logger.info("Response back to normal (D=%.3f)", derived.amplification_factor)

    # ------------------------------------------------------------------
    # Frame scheduling
    # ------------------------------------------------------------------

    def _request_next_frame(self) -> None:
        if self._scheduler is None:
            return
        run_id = self._run_id
        self._frame_handle = self._scheduler.request_frame(lambda: self._on_frame(run_id))

    def _cancel_pending_frame(self) -> None:
        if self._scheduler is not None and self._frame_handle is not None:
            self._scheduler.cancel_frame(self._frame_handle)
        self._frame_handle = None

    def _on_frame(self, run_id: int) -> None:
        with self._lock:
            # Stale frame from an earlier run, or fired after stop()
            if run_id != self._run_id or not self._state.running:
                return
            self._frame_handle = None
            self.tick()
            self._request_next_frame()
