# jam_seismic/units.py
"""
Unit conversions between the SI units used by the formulas and the units
engineers type into forms (mm, kN, MPa, US customary).
"""

# Exact or conventional factors
FT_TO_M = 0.3048
IN_TO_MM = 25.4
LBF_TO_N = 4.448
PSI_TO_MPA = 0.00689
KSI_TO_MPA = 6.895
KG_TO_LB = 2.205
STANDARD_GRAVITY = 9.81   # m/s² per g


# Length

def mm_to_m(mm: float) -> float:
    return mm / 1000.0


def m_to_mm(m: float) -> float:
    return m * 1000.0


def ft_to_m(ft: float) -> float:
    return ft * FT_TO_M


def m_to_ft(m: float) -> float:
    return m / FT_TO_M


def in_to_mm(inches: float) -> float:
    return inches * IN_TO_MM


def mm_to_in(mm: float) -> float:
    return mm / IN_TO_MM


# Force

def kn_to_n(kn: float) -> float:
    return kn * 1000.0


def n_to_kn(n: float) -> float:
    return n / 1000.0


def lbf_to_n(lbf: float) -> float:
    return lbf * LBF_TO_N


def n_to_lbf(n: float) -> float:
    return n / LBF_TO_N


def kips_to_kn(kips: float) -> float:
    return kips * LBF_TO_N


def kn_to_kips(kn: float) -> float:
    return kn / LBF_TO_N


# Stress / pressure

def mpa_to_pa(mpa: float) -> float:
    return mpa * 1e6


def pa_to_mpa(pa: float) -> float:
    return pa / 1e6


def psi_to_mpa(psi: float) -> float:
    return psi * PSI_TO_MPA


def mpa_to_psi(mpa: float) -> float:
    return mpa / PSI_TO_MPA


def ksi_to_mpa(ksi: float) -> float:
    return ksi * KSI_TO_MPA


def mpa_to_ksi(mpa: float) -> float:
    return mpa / KSI_TO_MPA


# Mass

def kg_to_lb(kg: float) -> float:
    return kg * KG_TO_LB


def lb_to_kg(lb: float) -> float:
    return lb / KG_TO_LB


def tonne_to_kg(tonne: float) -> float:
    return tonne * 1000.0


def kg_to_tonne(kg: float) -> float:
    return kg / 1000.0


# Acceleration

def g_to_ms2(g: float) -> float:
    return g * STANDARD_GRAVITY


def ms2_to_g(a: float) -> float:
    return a / STANDARD_GRAVITY
