# jam_seismic/catalog.py
"""
CATALOG: MATERIALS, SOILS AND SEISMIC ZONES
===========================================

Reference values used to pre-fill the simulations. Everything is a frozen
dataclass so the tables cannot be modified after import.

Units follow the way the values are usually quoted:
- Elastic modulus and strengths in MPa (convert with units.mpa_to_pa())
- Density in kg/m³
- Shear wave velocity in m/s, bearing capacity in kPa
- Design acceleration in g
"""

from dataclasses import dataclass
from typing import Optional

from .units import mpa_to_pa


@dataclass(frozen=True)
class Material:
    """
    Structural material.

    Parameters:
    -----------
    name : str
        Display name
    elastic_modulus : float
        E (MPa)
    density : float
        ρ (kg/m³)
    strength : float
        Characteristic strength (MPa): yield for steel, compressive for
        concrete, bending for timber
    strength_kind : str
        Which strength `strength` refers to
    """
    name: str
    elastic_modulus: float
    density: float
    strength: float
    strength_kind: str

    @property
    def E_pa(self) -> float:
        """Elastic modulus in Pa, ready for the beam formulas."""
        return mpa_to_pa(self.elastic_modulus)


@dataclass(frozen=True)
class Soil:
    """Foundation soil class."""
    name: str
    shear_wave_velocity: float  # m/s
    bearing_capacity: float     # kPa
    description: str


@dataclass(frozen=True)
class SeismicZone:
    """Seismic hazard level."""
    name: str
    design_acceleration: float  # g
    description: str


MATERIALS = {
    'steel': Material(
        name='Steel', elastic_modulus=200000.0, density=7850.0,
        strength=250.0, strength_kind='yield',
    ),
    'concrete': Material(
        name='Concrete', elastic_modulus=25000.0, density=2400.0,
        strength=25.0, strength_kind='compressive',
    ),
    'timber': Material(
        name='Timber', elastic_modulus=12000.0, density=600.0,
        strength=40.0, strength_kind='bending',
    ),
}

SOILS = {
    'rock': Soil(
        name='Rock', shear_wave_velocity=800.0, bearing_capacity=5000.0,
        description='Hard rock, excellent foundation',
    ),
    'dense_sand': Soil(
        name='Dense Sand', shear_wave_velocity=400.0, bearing_capacity=600.0,
        description='Dense sand and gravel',
    ),
    'soft_clay': Soil(
        name='Soft Clay', shear_wave_velocity=150.0, bearing_capacity=100.0,
        description='Soft clay, poor foundation',
    ),
}

SEISMIC_ZONES = {
    'low': SeismicZone(
        name='Low Seismic', design_acceleration=0.1,
        description='Minimal earthquake risk',
    ),
    'moderate': SeismicZone(
        name='Moderate Seismic', design_acceleration=0.25,
        description='Moderate earthquake risk',
    ),
    'high': SeismicZone(
        name='High Seismic', design_acceleration=0.4,
        description='High earthquake risk (California, Japan)',
    ),
}

# Typical viscous damping ratios by construction type
TYPICAL_DAMPING = {
    'steel': (0.02, 0.05),
    'concrete': (0.03, 0.08),
}

STANDARDS = {
    'steel': {
        'AISC': 'AISC 360 - Steel Construction Manual',
        'ASCE7': 'ASCE 7 - Minimum Design Loads',
        'AWS': 'AWS D1.1 - Structural Welding Code',
    },
    'concrete': {
        'ACI318': 'ACI 318 - Building Code Requirements',
        'ACI301': 'ACI 301 - Concrete Construction',
        'ASTM': 'ASTM C39 - Concrete Strength Testing',
    },
    'seismic': {
        'ASCE7': 'ASCE 7 - Seismic Design Requirements',
        'IBC': 'International Building Code',
        'FEMA': 'FEMA P-695 - Seismic Performance Assessment',
    },
}


def get_material(key: str) -> Material:
    """Look up a material by key, raising KeyError with the valid keys listed."""
    try:
        return MATERIALS[key]
    except KeyError:
        raise KeyError(f"Unknown material '{key}'. Available: {sorted(MATERIALS)}") from None


def get_soil(key: str) -> Soil:
    try:
        return SOILS[key]
    except KeyError:
        raise KeyError(f"Unknown soil '{key}'. Available: {sorted(SOILS)}") from None


def get_seismic_zone(key: str) -> SeismicZone:
    try:
        return SEISMIC_ZONES[key]
    except KeyError:
        raise KeyError(f"Unknown seismic zone '{key}'. Available: {sorted(SEISMIC_ZONES)}") from None


def damping_range(key: str) -> Optional[tuple]:
    """Typical (min, max) damping ratio for a construction type, or None."""
    return TYPICAL_DAMPING.get(key)
