"""Cosmological parameter set and the quantities derived from it.

A ParameterSet holds the three base parameters (H0, Omega_m, Omega_Lambda).
Every successful change recomputes the curvature density, deceleration
parameter, Hubble distance and present age of the universe. Values are
checked before anything is stored, so a rejected change leaves the set
exactly as it was.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .expansion import ExpansionModel
from .utils.config import NumericalConfig, DEFAULT_CONFIG
from .utils.constants import CGS_UNITS, WMAP_2003, hubble_time
from .utils.numerics import RangeError, romberg


logger = logging.getLogger(__name__)

# Curvature below this is snapped to exactly zero
OMEGA_K_EPSILON = float(np.finfo(float).eps)

# name -> (predicate for a valid value, message when it fails)
_RANGE_CHECKS = {
    "H0": (lambda v: v > 0, "Hubble constant must be positive"),
    "Omega_m": (lambda v: v >= 0, "matter density must be non-negative"),
    "redshift": (lambda v: v >= 0, "redshift must be non-negative"),
}


def check_range(name: str, value: float) -> float:
    """Return value as a float, or raise RangeError if it is out of range.

    Every value must be finite. Names without a range constraint
    (e.g. Omega_Lambda) pass any finite value.
    """
    value = float(value)
    if not np.isfinite(value):
        raise RangeError(name, value, f"{name} must be finite")
    if name in _RANGE_CHECKS:
        is_valid, requirement = _RANGE_CHECKS[name]
        if not is_valid(value):
            raise RangeError(name, value, requirement)
    return value


def validate_parameters(**values: float) -> tuple[bool, list[str]]:
    """Validate parameter values without raising.

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors = []
    for name, value in values.items():
        try:
            check_range(name, value)
        except RangeError as e:
            errors.append(str(e))
    return len(errors) == 0, errors


@dataclass(frozen=True)
class DerivedParameters:
    """Quantities that follow from (H0, Omega_m, Omega_Lambda)."""

    Omega_k: float  # Curvature density
    q0: float  # Deceleration parameter
    hubble_distance: float  # c/H0 [Mpc]
    age: float  # Age of the universe at z=0 [s]
    expansion: ExpansionModel


def derive_parameters(
    H0: float,
    Omega_m: float,
    Omega_Lambda: float,
    config: NumericalConfig = DEFAULT_CONFIG,
) -> DerivedParameters:
    """Compute curvature, q0, Hubble distance and age.

    Args:
        H0: Hubble constant [km/s/Mpc]
        Omega_m: Matter density
        Omega_Lambda: Vacuum energy density
        config: Integration settings

    Returns:
        DerivedParameters

    Raises:
        NumericDomainError: If E(z) is undefined somewhere below
            ``config.age_upper_limit``
    """
    Omega_k = 1.0 - Omega_m - Omega_Lambda
    if abs(Omega_k) <= OMEGA_K_EPSILON:
        Omega_k = 0.0

    expansion = ExpansionModel(
        Omega_m=Omega_m, Omega_k=Omega_k, Omega_Lambda=Omega_Lambda
    )

    age = romberg(
        expansion.age_integrand,
        0.0,
        config.age_upper_limit,
        max_rows=config.max_rows,
        tol=config.tol,
        vectorized=True,
    ) * hubble_time(H0)

    return DerivedParameters(
        Omega_k=Omega_k,
        q0=0.5 * Omega_m - Omega_Lambda,
        hubble_distance=CGS_UNITS.c / H0,
        age=age,
        expansion=expansion,
    )


class ParameterSet:
    """H0, Omega_m and Omega_Lambda with their derived quantities.

    Attributes:
        H0: Hubble constant [km/s/Mpc], must be > 0
        Omega_m: Matter density, must be >= 0
        Omega_Lambda: Vacuum energy density, unconstrained
        Omega_k: Curvature density 1 - Omega_m - Omega_Lambda (read-only)
        q0: Deceleration parameter Omega_m/2 - Omega_Lambda (read-only)
        hubble_distance: c/H0 in Mpc (read-only)
        age: Age of the universe at z=0 in seconds (read-only)

    Not thread-safe: each instance should have a single writer.
    """

    def __init__(
        self,
        H0: float = WMAP_2003.H0,
        Omega_m: float = WMAP_2003.Omega_m,
        Omega_Lambda: float = WMAP_2003.Omega_Lambda,
        config: Optional[NumericalConfig] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self._H0 = 0.0
        self._Omega_m = 0.0
        self._Omega_Lambda = 0.0
        self._derived: Optional[DerivedParameters] = None
        self.set_cosmology(H0, Omega_m, Omega_Lambda)

    def set_cosmology(
        self,
        H0: float,
        Omega_m: float,
        Omega_Lambda: float,
    ) -> None:
        """Set all three base parameters at once.

        Either all three values are accepted or none is.

        Raises:
            RangeError: If H0 <= 0 or Omega_m < 0
            NumericDomainError: If the cosmology has no real E(z)
        """
        H0 = check_range("H0", H0)
        Omega_m = check_range("Omega_m", Omega_m)
        Omega_Lambda = check_range("Omega_Lambda", Omega_Lambda)

        derived = derive_parameters(H0, Omega_m, Omega_Lambda, self.config)

        self._H0 = H0
        self._Omega_m = Omega_m
        self._Omega_Lambda = Omega_Lambda
        self._derived = derived
        logger.debug(
            "Parameters set: H0=%g, Omega_m=%g, Omega_Lambda=%g, Omega_k=%g",
            H0, Omega_m, Omega_Lambda, derived.Omega_k,
        )

    @property
    def H0(self) -> float:
        """Hubble constant [km/s/Mpc]."""
        return self._H0

    @H0.setter
    def H0(self, value: float) -> None:
        self.set_cosmology(value, self._Omega_m, self._Omega_Lambda)

    @property
    def Omega_m(self) -> float:
        """Matter density."""
        return self._Omega_m

    @Omega_m.setter
    def Omega_m(self, value: float) -> None:
        self.set_cosmology(self._H0, value, self._Omega_Lambda)

    @property
    def Omega_Lambda(self) -> float:
        """Vacuum energy (cosmological constant) density."""
        return self._Omega_Lambda

    @Omega_Lambda.setter
    def Omega_Lambda(self, value: float) -> None:
        self.set_cosmology(self._H0, self._Omega_m, value)

    @property
    def derived(self) -> DerivedParameters:
        return self._derived

    @property
    def Omega_k(self) -> float:
        """Curvature density (exactly 0 for a flat universe)."""
        return self._derived.Omega_k

    @property
    def q0(self) -> float:
        """Deceleration parameter."""
        return self._derived.q0

    @property
    def hubble_distance(self) -> float:
        """Hubble distance c/H0 [Mpc]."""
        return self._derived.hubble_distance

    @property
    def age(self) -> float:
        """Age of the universe at z=0 [s]."""
        return self._derived.age

    @property
    def expansion(self) -> ExpansionModel:
        return self._derived.expansion

    def validate(self) -> tuple[bool, list[str]]:
        """Validate the current parameter values.

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        return validate_parameters(
            H0=self._H0, Omega_m=self._Omega_m, Omega_Lambda=self._Omega_Lambda
        )

    def copy(self) -> "ParameterSet":
        """Return an independent ParameterSet with the same values."""
        other = ParameterSet.__new__(ParameterSet)
        other.config = self.config
        other._H0 = self._H0
        other._Omega_m = self._Omega_m
        other._Omega_Lambda = self._Omega_Lambda
        other._derived = self._derived
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterSet):
            return NotImplemented
        return (
            self._H0 == other._H0
            and self._Omega_m == other._Omega_m
            and self._Omega_Lambda == other._Omega_Lambda
        )

    def __repr__(self) -> str:
        return (
            f"ParameterSet(H0={self._H0!r}, Omega_m={self._Omega_m!r}, "
            f"Omega_Lambda={self._Omega_Lambda!r})"
        )
