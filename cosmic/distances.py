"""Cosmological distance calculations.

Implements the standard distance measures for an FLRW cosmology:
- Comoving (line-of-sight) distance
- Transverse comoving distance, branching on the sign of curvature
- Angular diameter and luminosity distance
- Comoving volume
- Lookback time, angular scale and critical density

The comoving distance is obtained by integrating 1/E(z) with Romberg's method:
    d_C(z) = (c/H₀) ∫₀ᶻ dz' / E(z')
"""

import logging
import warnings
from dataclasses import dataclass, asdict, fields

import numpy as np
from numpy.typing import NDArray

from .parameters import ParameterSet, check_range
from .utils.constants import CGS_UNITS, WMAP_2003, hubble_time
from .utils.numerics import RangeError, romberg, asinh


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RedshiftRecord:
    """Redshift-dependent quantities for one cosmology."""

    z: float  # Redshift
    d_C: float  # Comoving line-of-sight distance [Mpc]
    d_M: float  # Transverse comoving distance [Mpc]
    d_A: float  # Angular diameter distance [Mpc]
    d_L: float  # Luminosity distance [Mpc]
    V_C: float  # Comoving volume out to z [Gpc³]
    t_L: float  # Lookback time [s]
    kpc_per_arcsec: float  # Angular scale [kpc/arcsec]
    rho_crit: float  # Critical density at z [g/cm³]

    @property
    def arcsec_per_kpc(self) -> float:
        """Reciprocal angular scale; infinite at z = 0."""
        if self.kpc_per_arcsec == 0:
            return float("inf")
        return 1.0 / self.kpc_per_arcsec

    def as_dict(self) -> dict:
        return asdict(self)


class DistanceCalculator:
    """Calculate cosmological distances for a ParameterSet.

    The transverse comoving distance depends on the curvature Ωk:
        - flat   (Ωk = 0): d_M = d_C
        - open   (Ωk > 0): d_M = d_H/√Ωk sinh(√Ωk d_C/d_H)
        - closed (Ωk < 0): d_M = d_H/√|Ωk| sin(√|Ωk| d_C/d_H)
    """

    def __init__(self, params: ParameterSet):
        """Initialize distance calculator.

        Args:
            params: Cosmological parameters
        """
        self.params = params
        self.config = params.config

    def is_zero_redshift(self, z: float) -> bool:
        """Whether z is close enough to zero to skip the integrals."""
        return abs(z) < self.config.zero_redshift_tol

    def _integrate(self, integrand, z: float) -> float:
        return romberg(
            integrand,
            0.0,
            z,
            max_rows=self.config.max_rows,
            tol=self.config.tol,
            vectorized=True,
        )

    def critical_density(self, z: float) -> float:
        """Critical density ρ_crit(z) [g/cm³].

        ρ_crit = 3H₀²/(8πG) (ΩΛ + Ωm(1+z)³)
        """
        p = self.params
        H0_per_s = p.H0 / CGS_UNITS.km_per_Mpc
        return (
            3.0 / (8.0 * np.pi) * H0_per_s**2 / CGS_UNITS.G
            * (p.Omega_Lambda + (1.0 + z) ** 3 * p.Omega_m)
        )

    def comoving_distance(self, z: float) -> float:
        """Comoving line-of-sight distance d_C(z) [Mpc]."""
        if self.is_zero_redshift(z):
            return 0.0
        p = self.params
        return p.hubble_distance * self._integrate(p.expansion.inverse_E, z)

    def transverse_from_comoving(self, d_C: float) -> float:
        """Transverse comoving distance d_M from d_C [Mpc]."""
        Ok = self.params.Omega_k
        d_H = self.params.hubble_distance

        if Ok > 0:  # Open
            sqrt_Ok = np.sqrt(Ok)
            return float(d_H / sqrt_Ok * np.sinh(sqrt_Ok * d_C / d_H))
        elif Ok < 0:  # Closed
            sqrt_Ok = np.sqrt(-Ok)
            return float(d_H / sqrt_Ok * np.sin(sqrt_Ok * d_C / d_H))
        return d_C

    def transverse_comoving_distance(self, z: float) -> float:
        """Transverse comoving distance d_M(z) [Mpc]."""
        return self.transverse_from_comoving(self.comoving_distance(z))

    def comoving_volume_from_transverse(self, d_M: float) -> float:
        """Comoving volume inside d_M [Gpc³].

        Closed forms of the shell integral (x = d_M/d_H):
            open:   2π d_H³/Ωk  [x sqrt(1 + Ωk x²) - asinh(√Ωk x)/√Ωk]
            closed: 2π d_H³/|Ωk| [asin(√|Ωk| x)/√|Ωk| - x sqrt(1 - |Ωk| x²)]
            flat:   4π/3 d_M³
        """
        Ok = self.params.Omega_k
        d_H = self.params.hubble_distance

        if Ok > 0:
            sqrt_Ok = np.sqrt(Ok)
            x = d_M / d_H
            V = 2.0 * np.pi * d_H**3 / Ok * (
                x * np.sqrt(1.0 + Ok * x**2) - asinh(sqrt_Ok * x) / sqrt_Ok
            )
        elif Ok < 0:
            abs_Ok = -Ok
            sqrt_Ok = np.sqrt(abs_Ok)
            # sin of the comoving angle; clipped against rounding past 1
            y = np.clip(sqrt_Ok * d_M / d_H, -1.0, 1.0)
            V = 2.0 * np.pi * d_H**3 / abs_Ok * (
                np.arcsin(y) - y * np.sqrt(1.0 - y**2)
            ) / sqrt_Ok
        else:
            V = 4.0 * np.pi * d_M**3 / 3.0

        return float(V / 1e9)

    def lookback_time(self, z: float) -> float:
        """Lookback time t_L(z) [s]."""
        if self.is_zero_redshift(z):
            return 0.0
        p = self.params
        return self._integrate(p.expansion.age_integrand, z) * hubble_time(p.H0)

    def angular_diameter_distance(self, z: float) -> float:
        """Angular diameter distance d_A = d_M / (1+z) [Mpc]."""
        return self.transverse_comoving_distance(z) / (1 + z)

    def luminosity_distance(self, z: float) -> float:
        """Luminosity distance d_L = d_M × (1+z) [Mpc]."""
        return self.transverse_comoving_distance(z) * (1 + z)

    def distance_modulus(self, z: float) -> float:
        """Distance modulus μ(z) [mag].

        μ = 5 log₁₀(d_L/10pc) = 5 log₁₀(d_L[Mpc]) + 25

        Raises:
            RangeError: If z is zero, where d_L = 0 has no finite modulus
        """
        if self.is_zero_redshift(check_range("redshift", z)):
            raise RangeError("redshift", z, "distance modulus needs a positive redshift")
        d_L = self.luminosity_distance(z)
        return 5 * np.log10(d_L) + 25

    def compute(self, z: float) -> RedshiftRecord:
        """Compute every redshift-dependent quantity at z.

        Args:
            z: Redshift, must be >= 0

        Returns:
            RedshiftRecord

        Raises:
            RangeError: If z < 0
        """
        z = check_range("redshift", z)

        if self.is_zero_redshift(z):
            return RedshiftRecord(
                z=z,
                d_C=0.0,
                d_M=0.0,
                d_A=0.0,
                d_L=0.0,
                V_C=0.0,
                t_L=0.0,
                kpc_per_arcsec=0.0,
                rho_crit=self.critical_density(0.0),
            )

        d_C = self.comoving_distance(z)
        d_M = self.transverse_from_comoving(d_C)

        Ok = self.params.Omega_k
        if Ok < 0 and np.sqrt(-Ok) * d_C / self.params.hubble_distance > np.pi / 2:
            warnings.warn(
                f"Comoving angle at z={z:g} exceeds pi/2 in a closed universe; "
                "transverse distance and comoving volume no longer grow with z"
            )

        d_A = d_M / (1 + z)

        record = RedshiftRecord(
            z=z,
            d_C=d_C,
            d_M=d_M,
            d_A=d_A,
            d_L=d_M * (1 + z),
            V_C=self.comoving_volume_from_transverse(d_M),
            t_L=self.lookback_time(z),
            kpc_per_arcsec=d_A / 648 * np.pi,
            rho_crit=self.critical_density(z),
        )
        logger.debug("Computed distances at z=%g: d_C=%.6f Mpc", z, d_C)
        return record

    def compute_distance_table(
        self,
        z_array: NDArray[np.floating],
    ) -> dict:
        """Compute every quantity at an array of redshifts.

        Args:
            z_array: Array of redshifts

        Returns:
            Dictionary mapping RedshiftRecord field names to arrays
        """
        names = [f.name for f in fields(RedshiftRecord)]
        table = {name: np.zeros(len(z_array)) for name in names}

        for i, z in enumerate(z_array):
            record = self.compute(z)
            for name in names:
                table[name][i] = getattr(record, name)

        return table


def distances_at(
    z: float,
    H0: float = WMAP_2003.H0,
    Omega_m: float = WMAP_2003.Omega_m,
    Omega_Lambda: float = WMAP_2003.Omega_Lambda,
) -> RedshiftRecord:
    """Quick RedshiftRecord for one redshift and cosmology."""
    params = ParameterSet(H0, Omega_m, Omega_Lambda)
    return DistanceCalculator(params).compute(z)
