# app/config.py
"""
Application configuration and defaults.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class AppConfig:
    """Streamlit shell configuration."""

    # App metadata
    app_name: str = "JAM Seismic"
    app_subtitle: str = "Earthquake Response Explorer"
    version: str = "0.1.0"

    # Input ranges for the sidebar
    mass_range: Tuple[float, float] = (100.0, 10000.0)              # kg
    stiffness_range: Tuple[float, float] = (1000.0, 500000.0)       # N/m
    damping_range: Tuple[float, float] = (0.0, 0.30)                # ζ
    acceleration_range: Tuple[float, float] = (0.5, 20.0)           # m/s²
    frequency_range: Tuple[float, float] = (0.1, 10.0)              # Hz

    # Live refresh
    refresh_seconds: float = 0.1     # wall time between reruns while running
    max_ticks_per_rerun: int = 25    # catch-up limit after a slow rerun

    default_view: str = 'earthquake'
    history_rows_shown: int = 20


# Global config instance
CONFIG = AppConfig()
