"""Stateful cosmology calculator.

Cosmology ties a ParameterSet to a redshift and keeps the RedshiftRecord
for that pair up to date. Every setter validates its value, builds the new
parameters and record, and only then replaces the old ones, so a failed
change leaves all properties untouched.

Example:
    >>> cosmo = Cosmology(71.0, 0.27, 0.73)
    >>> cosmo.redshift = 0.1
    >>> print(cosmo.format_row(","))
"""

import logging
from typing import Optional

from .distances import DistanceCalculator, RedshiftRecord
from .formatting import (
    format_parameters,
    format_header,
    format_row,
    format_report,
)
from .parameters import ParameterSet
from .utils.config import NumericalConfig
from .utils.constants import WMAP_2003


logger = logging.getLogger(__name__)


class Cosmology:
    """Cosmological parameters, a source redshift and its distance measures.

    Instances are not thread-safe; recomputation runs synchronously inside
    each setter and must not be interleaved with reads from another thread.
    """

    def __init__(
        self,
        H0: float = WMAP_2003.H0,
        Omega_m: float = WMAP_2003.Omega_m,
        Omega_Lambda: float = WMAP_2003.Omega_Lambda,
        redshift: float = 0.0,
        config: Optional[NumericalConfig] = None,
    ):
        """Initialize the cosmology.

        Args:
            H0: Hubble constant [km/s/Mpc]
            Omega_m: Matter density
            Omega_Lambda: Vacuum energy density
            redshift: Source redshift
            config: Integration settings

        Raises:
            RangeError: If any value is out of range
            NumericDomainError: If E(z) is undefined for these densities
        """
        self._params: ParameterSet
        self._record: RedshiftRecord
        self._commit(ParameterSet(H0, Omega_m, Omega_Lambda, config), redshift)

    def _commit(self, params: ParameterSet, redshift: float) -> None:
        record = DistanceCalculator(params).compute(redshift)
        self._params = params
        self._record = record
        logger.debug("Recomputed %r at z=%g", params, record.z)

    def set_cosmology(
        self,
        H0: float,
        Omega_m: float,
        Omega_Lambda: float,
    ) -> None:
        """Change all three base parameters and recompute every quantity."""
        candidate = self._params.copy()
        candidate.set_cosmology(H0, Omega_m, Omega_Lambda)
        self._commit(candidate, self._record.z)

    # Base parameters

    @property
    def H0(self) -> float:
        """Hubble constant [km/s/Mpc]."""
        return self._params.H0

    @H0.setter
    def H0(self, value: float) -> None:
        self.set_cosmology(value, self.Omega_m, self.Omega_Lambda)

    @property
    def Omega_m(self) -> float:
        """Matter density."""
        return self._params.Omega_m

    @Omega_m.setter
    def Omega_m(self, value: float) -> None:
        self.set_cosmology(self.H0, value, self.Omega_Lambda)

    @property
    def Omega_Lambda(self) -> float:
        """Vacuum energy density."""
        return self._params.Omega_Lambda

    @Omega_Lambda.setter
    def Omega_Lambda(self, value: float) -> None:
        self.set_cosmology(self.H0, self.Omega_m, value)

    @property
    def redshift(self) -> float:
        """Redshift of the source."""
        return self._record.z

    @redshift.setter
    def redshift(self, value: float) -> None:
        self._commit(self._params, value)

    # Derived parameters

    @property
    def parameters(self) -> ParameterSet:
        """Copy of the current parameter set."""
        return self._params.copy()

    @property
    def record(self) -> RedshiftRecord:
        return self._record

    @property
    def Omega_k(self) -> float:
        return self._params.Omega_k

    @property
    def q0(self) -> float:
        return self._params.q0

    @property
    def hubble_distance(self) -> float:
        return self._params.hubble_distance

    @property
    def age(self) -> float:
        """Age of the universe at z=0 [s]."""
        return self._params.age

    # Redshift-dependent quantities

    @property
    def angular_diameter_distance(self) -> float:
        """Angular diameter distance [Mpc]."""
        return self._record.d_A

    @property
    def luminosity_distance(self) -> float:
        """Luminosity distance [Mpc]."""
        return self._record.d_L

    @property
    def comoving_distance(self) -> float:
        """Comoving line-of-sight distance [Mpc]."""
        return self._record.d_C

    @property
    def transverse_distance(self) -> float:
        """Transverse comoving distance [Mpc]."""
        return self._record.d_M

    @property
    def comoving_volume(self) -> float:
        """Comoving volume out to the redshift [Gpc³]."""
        return self._record.V_C

    @property
    def lookback_time(self) -> float:
        """Light travel time from the redshift to z=0 [s]."""
        return self._record.t_L

    @property
    def kpc_per_arcsec(self) -> float:
        """Angular scale at the redshift [kpc/arcsec]."""
        return self._record.kpc_per_arcsec

    @property
    def critical_density(self) -> float:
        """Critical density at the redshift [g/cm³]."""
        return self._record.rho_crit

    # Text

    def format_parameters(self, leader: str = "") -> str:
        return format_parameters(self._params, leader)

    def format_header(self, leader: str, separator: str) -> str:
        return format_header(
            self._params, self._record, leader, separator, self._params.config.flat_tol
        )

    def format_row(self, separator: str) -> str:
        return format_row(
            self._params, self._record, separator, self._params.config.flat_tol
        )

    def copy(self) -> "Cosmology":
        """Return an independent Cosmology with the same parameters and redshift."""
        other = Cosmology.__new__(Cosmology)
        other._params = self._params.copy()
        other._record = self._record
        return other

    def __str__(self) -> str:
        return format_report(self._params, self._record, self._params.config.flat_tol)

    def __repr__(self) -> str:
        return (
            f"Cosmology(H0={self.H0!r}, Omega_m={self.Omega_m!r}, "
            f"Omega_Lambda={self.Omega_Lambda!r}, redshift={self.redshift!r})"
        )
