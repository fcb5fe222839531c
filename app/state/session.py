# app/state/session.py
"""
Session state management for Streamlit.

Keeps one SimulationLoop (with its manual scheduler) and the view registry per
browser session, behind typed accessors.
"""

import time

import streamlit as st

from jam_seismic import (
    ManualFrameScheduler,
    SimulationConfig,
    SimulationLoop,
    SimulationRegistry,
    standard_views,
)


def get_config() -> SimulationConfig:
    if 'sim_config' not in st.session_state:
        st.session_state.sim_config = SimulationConfig()
    return st.session_state.sim_config


def get_scheduler() -> ManualFrameScheduler:
    if 'scheduler' not in st.session_state:
        st.session_state.scheduler = ManualFrameScheduler()
    return st.session_state.scheduler


def get_loop() -> SimulationLoop:
    """The session's simulation loop, created on first access."""
    if 'loop' not in st.session_state:
        st.session_state.loop = SimulationLoop(config=get_config(), scheduler=get_scheduler())
    return st.session_state.loop


def get_registry() -> SimulationRegistry:
    if 'registry' not in st.session_state:
        st.session_state.registry = SimulationRegistry(standard_views(get_config()))
    return st.session_state.registry


def frames_due(max_frames: int) -> int:
    """
    Frames owed since the previous rerun, from wall-clock time.

    Resets the reference time; returns at most max_frames.
    """
    now = time.monotonic()
    last = st.session_state.get('last_frame_time', now)
    st.session_state.last_frame_time = now
    interval = get_config().frame_interval
    return min(max_frames, int((now - last) / interval))


def clear_frame_clock() -> None:
    st.session_state.pop('last_frame_time', None)
