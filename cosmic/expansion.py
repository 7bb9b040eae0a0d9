"""Expansion rate of an FLRW cosmology with matter, curvature and Λ.

The dimensionless Hubble parameter is

    E(z) = H(z)/H₀ = sqrt(Ωm(1+z)³ + Ωk(1+z)² + ΩΛ)

Its reciprocal is the comoving-distance integrand, and 1/((1+z)E(z)) is
the integrand for lookback time and age.
"""

from dataclasses import dataclass
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from .utils.numerics import NumericDomainError


T = TypeVar("T", float, NDArray[np.floating])


@dataclass(frozen=True)
class ExpansionModel:
    """E(z) and the integrands derived from it.

    All methods accept a scalar redshift or a numpy array of redshifts.
    """

    Omega_m: float  # Matter density
    Omega_k: float  # Curvature density
    Omega_Lambda: float  # Vacuum energy density

    def E_squared(self, z: T) -> T:
        """Radicand Ωm(1+z)³ + Ωk(1+z)² + ΩΛ."""
        zp1 = 1.0 + np.asarray(z, dtype=float)
        return self.Omega_m * zp1**3 + self.Omega_k * zp1**2 + self.Omega_Lambda

    def E(self, z: T) -> T:
        """Dimensionless Hubble parameter E(z) = H(z)/H₀.

        Raises:
            NumericDomainError: If E(z)² < 0 at any requested redshift
        """
        radicand = self.E_squared(z)
        negative = np.atleast_1d(radicand) < 0
        if np.any(negative):
            idx = int(np.flatnonzero(negative)[0])
            raise NumericDomainError(
                z=float(np.atleast_1d(z)[idx]),
                radicand=float(np.atleast_1d(radicand)[idx]),
            )
        return np.sqrt(radicand)

    def inverse_E(self, z: T) -> T:
        """1/E(z), the integrand for comoving distance."""
        return 1.0 / self.E(z)

    def age_integrand(self, z: T) -> T:
        """1/((1+z)E(z)), the integrand for lookback time and age."""
        return 1.0 / ((1.0 + np.asarray(z, dtype=float)) * self.E(z))
