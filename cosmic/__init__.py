"""cosmic - Cosmological distance calculator for FLRW universes.

This package computes the standard distance and time measures for a
cosmology with matter, curvature and a cosmological constant:
- Angular diameter, luminosity and comoving (radial and transverse) distances
- Comoving volume and lookback time
- Age of the universe, critical density and angular scale

Key modules:
    utils.numerics: Romberg integration and error types
    expansion: Dimensionless expansion rate E(z)
    parameters: Validated H0, Omega_m, Omega_Lambda with derived quantities
    distances: Redshift-dependent quantities for a parameter set
    formatting: Plain-text parameter lines, tables and reports
    cosmology: Stateful calculator tying parameters to a redshift
    batch: Tables for many redshifts

Example usage:
    >>> from cosmic import Cosmology
    >>> cosmo = Cosmology(H0=71.0, Omega_m=0.27, Omega_Lambda=0.73)
    >>> cosmo.redshift = 0.1
    >>> print(f"d_L = {cosmo.luminosity_distance:.1f} Mpc")
"""

__version__ = "1.0.0"

# Core configuration
from .utils.config import NumericalConfig, DEFAULT_CONFIG
from .utils.constants import (
    PhysicalConstants,
    CGS_UNITS,
    WMAP_2003,
    seconds_to_gyr,
)
from .utils.numerics import (
    RangeError,
    NumericDomainError,
    FormatError,
    romberg,
)

# Cosmology engine
from .expansion import ExpansionModel
from .parameters import ParameterSet, DerivedParameters, validate_parameters
from .distances import DistanceCalculator, RedshiftRecord, distances_at
from .formatting import (
    format_parameters,
    format_header,
    format_row,
    format_report,
)
from .cosmology import Cosmology
from .batch import BatchFormat, parse_redshifts, format_batch


def quick_summary(
    H0: float = WMAP_2003.H0,
    Omega_m: float = WMAP_2003.Omega_m,
    Omega_Lambda: float = WMAP_2003.Omega_Lambda,
    z: float = 0.1,
) -> dict:
    """Print a report for one cosmology and redshift.

    Args:
        H0: Hubble constant [km/s/Mpc]
        Omega_m: Matter density
        Omega_Lambda: Vacuum energy density
        z: Source redshift

    Returns:
        Dictionary with the parameters, derived parameters and the
        redshift record fields
    """
    cosmo = Cosmology(H0, Omega_m, Omega_Lambda, redshift=z)

    print("=" * 60)
    print("COSMOLOGY CALCULATOR - QUICK SUMMARY")
    print("=" * 60)
    print(cosmo)
    print("=" * 60)

    return {
        "H0": cosmo.H0,
        "Omega_m": cosmo.Omega_m,
        "Omega_Lambda": cosmo.Omega_Lambda,
        "Omega_k": cosmo.Omega_k,
        "q0": cosmo.q0,
        "age_gyr": seconds_to_gyr(cosmo.age),
        **cosmo.record.as_dict(),
    }


__all__ = [
    # Version
    "__version__",
    # Config
    "NumericalConfig",
    "DEFAULT_CONFIG",
    # Constants
    "PhysicalConstants",
    "CGS_UNITS",
    "WMAP_2003",
    "seconds_to_gyr",
    # Errors and numerics
    "RangeError",
    "NumericDomainError",
    "FormatError",
    "romberg",
    # Engine
    "ExpansionModel",
    "ParameterSet",
    "DerivedParameters",
    "validate_parameters",
    "DistanceCalculator",
    "RedshiftRecord",
    "distances_at",
    # Text
    "format_parameters",
    "format_header",
    "format_row",
    "format_report",
    # Calculator
    "Cosmology",
    "BatchFormat",
    "parse_redshifts",
    "format_batch",
    # Convenience
    "quick_summary",
]
