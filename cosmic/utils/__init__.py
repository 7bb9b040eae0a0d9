"""cosmic utility modules."""

from .constants import PhysicalConstants, CGS_UNITS, WMAP_2003
from .config import NumericalConfig, DEFAULT_CONFIG
from .numerics import (
    RangeError,
    NumericDomainError,
    FormatError,
    romberg,
    asinh,
)

__all__ = [
    "PhysicalConstants",
    "CGS_UNITS",
    "WMAP_2003",
    "NumericalConfig",
    "DEFAULT_CONFIG",
    "RangeError",
    "NumericDomainError",
    "FormatError",
    "romberg",
    "asinh",
]
