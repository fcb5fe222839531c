# app/components/parameter_inputs.py
"""
Parameter input components for the simulation sidebar.
"""

import streamlit as st
from typing import Dict, Optional, Tuple
import sys
from pathlib import Path

# Add app directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import CONFIG
from jam_seismic import SimulationParameters
from jam_seismic.catalog import MATERIALS, damping_range, get_material
from jam_seismic.formulas import cantilever_deflection
from jam_seismic.units import mm_to_m

PARAMETER_RANGES = {
    'mass': CONFIG.mass_range,
    'stiffness': CONFIG.stiffness_range,
    'damping_ratio': CONFIG.damping_range,
    'ground_acceleration': CONFIG.acceleration_range,
    'excitation_frequency': CONFIG.frequency_range,
}


def clamp_to_range(value: float, bounds: Tuple[float, float]) -> float:
    low, high = bounds
    return min(max(value, low), high)


def column_stiffness(material_key: str, length_m: float, inertia_cm4: float, columns: int = 1) -> float:
    """
    Lateral stiffness (N/m) of fixed-base cantilever columns: k = P / δ.

    Uses the tip deflection under a unit load, so the result is 3EI/L³ per
    column.
    """
    material = get_material(material_key)
    inertia_m4 = inertia_cm4 * 1e-8
    unit_deflection = cantilever_deflection(1.0, length_m, material.E_pa, inertia_m4)
    return columns / unit_deflection


def seed_widget_state(current: SimulationParameters) -> None:
    """Give each parameter widget its starting value once per session."""
    for name, value in current.to_dict().items():
        if name not in st.session_state:
            st.session_state[name] = float(clamp_to_range(value, PARAMETER_RANGES[name]))


def render_column_helper() -> Optional[float]:
    """
    Expander that computes a stiffness from column properties.

    Returns the stiffness (N/m) when the user applies it, otherwise None.
    """
    with st.expander("🧮 Stiffness from columns", expanded=False):
        material_key = st.selectbox(
            "Material",
            options=list(MATERIALS),
            format_func=lambda key: MATERIALS[key].name,
            key="column_material",
        )
        length_mm = st.number_input("Storey height (mm)", 500.0, 10000.0, 3000.0, 100.0, key="column_length")
        inertia_cm4 = st.number_input("I per column (cm⁴)", 10.0, 100000.0, 1000.0, 10.0, key="column_inertia")
        columns = st.slider("Columns", 1, 8, 4, key="column_count")

        k = column_stiffness(material_key, mm_to_m(length_mm), inertia_cm4, columns)
        st.caption(f"k = {k:,.0f} N/m")

        typical = damping_range(material_key)
        if typical:
            st.caption(f"Typical ζ for {MATERIALS[material_key].name.lower()}: {typical[0]:.2f} to {typical[1]:.2f}")

        if st.button("Use this stiffness", use_container_width=True):
            return k
    return None


def render_parameter_inputs(current: SimulationParameters) -> Dict[str, float]:
    """
    Sidebar inputs for the five simulation parameters.

    Returns:
        Field name -> value for every field the user changed
    """
    seed_widget_state(current)

    col1, col2 = st.columns(2)
    with col1:
        st.number_input("Mass (kg)", *CONFIG.mass_range, step=100.0, key="mass")
    with col2:
        st.number_input("Stiffness (N/m)", *CONFIG.stiffness_range, step=1000.0, key="stiffness")

    st.slider("Damping ratio ζ", *CONFIG.damping_range, step=0.005, key="damping_ratio")

    col1, col2 = st.columns(2)
    with col1:
        st.number_input("Ground accel. (m/s²)", *CONFIG.acceleration_range, step=0.5, key="ground_acceleration")
    with col2:
        st.number_input("Excitation (Hz)", *CONFIG.frequency_range, step=0.05, key="excitation_frequency")

    previous = current.to_dict()
    return {
        name: float(st.session_state[name])
        for name in PARAMETER_RANGES
        if float(st.session_state[name]) != previous[name]
    }
