# app/main.py
"""
JAM Seismic - Live Earthquake Response Interface

Sidebar edits go through the simulation's validating input boundary; while
the simulation runs, every rerun advances it by the frames owed since the
previous rerun and redraws the selected view.

Run with:
    streamlit run app/main.py
"""

import pandas as pd
import streamlit as st
import sys
import time
from pathlib import Path
from urllib.parse import quote_plus

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import CONFIG
from state import get_loop, get_registry, get_scheduler, frames_due, clear_frame_clock
from components import clamp_to_range, render_column_helper, render_parameter_inputs
from jam_seismic import InvalidParameterError, ResponseCondition, setup_logging
from jam_seismic.render.plotly_surface import to_plotly_figure
from jam_seismic.simulation import verification_queries, verification_values

# Page configuration - must be first Streamlit command
st.set_page_config(
    page_title=CONFIG.app_name,
    page_icon="🌍",
    layout="wide",
    initial_sidebar_state="expanded",
)

if 'logging_ready' not in st.session_state:
    setup_logging()
    st.session_state.logging_ready = True

loop = get_loop()
registry = get_registry()
scheduler = get_scheduler()


# =============================================================================
# SIDEBAR - Parameters and controls
# =============================================================================

with st.sidebar:
    st.title(f"🌍 {CONFIG.app_name}")
    st.caption(CONFIG.app_subtitle)

    st.divider()

    helper_k = render_column_helper()
    if helper_k is not None:
        st.session_state['stiffness'] = clamp_to_range(helper_k, CONFIG.stiffness_range)
        st.rerun()

    edits = render_parameter_inputs(loop.parameters)
    if edits:
        try:
            loop.update_parameters(**edits)
        except InvalidParameterError as e:
            st.error(f"**Invalid parameters:** {e}")

    st.divider()

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("▶ Start", type="primary", use_container_width=True):
            loop.start()
            clear_frame_clock()
    with col2:
        if st.button("⏸ Stop", use_container_width=True):
            loop.stop()
    with col3:
        if st.button("↺ Reset", use_container_width=True):
            loop.reset()
            clear_frame_clock()

    view_ids = registry.ids()
    view_id = st.radio(
        "View",
        options=view_ids,
        index=view_ids.index(CONFIG.default_view),
        format_func=lambda vid: registry.get(vid).title,
        key="view_id",
    )


# =============================================================================
# ADVANCE
# =============================================================================

if loop.is_running:
    scheduler.advance(frames_due(CONFIG.max_ticks_per_rerun))


# =============================================================================
# MAIN AREA - View + read-outs
# =============================================================================

view = registry.get(view_id)
state = loop.state
derived = loop.derived

col_title, col_status = st.columns([3, 1])
with col_title:
    st.title(view.title)
    st.caption(view.description)
with col_status:
    if state.condition is ResponseCondition.RESONANCE:
        st.error("Resonance", icon="⚠️")
    elif state.condition is ResponseCondition.INVALID_PARAMETERS:
        st.warning("Invalid parameters", icon="⚠️")
    elif loop.is_running:
        st.success("Running", icon="▶️")
    else:
        st.info("Stopped", icon="⏸️")

col_view, col_metrics = st.columns([2, 1])

with col_view:
    fig = to_plotly_figure(view.render(loop))
    st.plotly_chart(fig, use_container_width=True, key="main_view")

with col_metrics:
    st.subheader("📊 Response")
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Time", f"{state.elapsed_time:.2f} s")
        st.metric("f₀", f"{derived.natural_frequency:.3f} Hz")
        st.metric("r", f"{derived.frequency_ratio:.3f}")
    with col2:
        st.metric("δ", f"{state.displacement:.2f} mm")
        st.metric("T", f"{derived.period:.3f} s")
        st.metric("D", f"{derived.amplification_factor:.3f}")

    st.divider()

    with st.expander("🔎 Verify", expanded=False):
        for name, query in verification_queries(loop.parameters, derived).items():
            url = f"https://www.wolframalpha.com/input?i={quote_plus(query)}"
            st.markdown(f"- [{name.replace('_', ' ')}]({url}) `{query}`")
        values = verification_values(loop.parameters, derived, state)
        st.dataframe(pd.Series(values, name="value").map(lambda v: f"{v:.6g}"), use_container_width=True)

st.subheader("🕒 Recent history")
history = loop.history_frame()
st.dataframe(history.tail(CONFIG.history_rows_shown), use_container_width=True)
st.download_button(
    label="📄 History (CSV)",
    data=history.to_csv(index=False),
    file_name="earthquake_response.csv",
    mime="text/csv",
)

if loop.is_running:
    time.sleep(CONFIG.refresh_seconds)
    st.rerun()
