"""Physical constants for cosmic.

Constants are in cgs units unless a field says otherwise.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class PhysicalConstants:
    """Physical constants in specified units."""

    # Fundamental constants
    c: float  # Speed of light [km/s]
    G: float  # Newton's constant [cm³/(g·s²)]

    # Unit conversions
    km_per_Mpc: float  # Megaparsec in kilometres
    tropical_year: float  # Tropical year in seconds


# cgs units, with c in km/s so that c/H0 comes out in Mpc
CGS_UNITS: Final[PhysicalConstants] = PhysicalConstants(
    c=2.99792458e5,  # km/s
    G=6.67259e-8,  # cm³/(g·s²)
    km_per_Mpc=3.08567758e19,  # km
    tropical_year=3.1556926e7,  # s
)


# Default cosmology from the first-year WMAP results
@dataclass(frozen=True)
class WMAP2003Values:
    """WMAP first-year concordance parameters."""

    H0: float = 71.0  # km/s/Mpc
    Omega_m: float = 0.27
    Omega_Lambda: float = 0.73


WMAP_2003: Final[WMAP2003Values] = WMAP2003Values()


def seconds_to_gyr(t: float) -> float:
    """Convert a time in seconds to Gyr (tropical years)."""
    return t / (CGS_UNITS.tropical_year * 1e9)


def hubble_time(H0_km_s_Mpc: float) -> float:
    """Return Hubble time 1/H0 in seconds."""
    return CGS_UNITS.km_per_Mpc / H0_km_s_Mpc
