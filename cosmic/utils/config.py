"""Configuration classes for cosmic."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NumericalConfig:
    """Configuration for numerical integration and tolerance decisions.

    Attributes:
        max_rows: Maximum number of Romberg rows (refinements)
        tol: Absolute convergence tolerance between successive
            diagonal Romberg estimates
        age_upper_limit: Redshift used as the upper bound of the age
            integral
        zero_redshift_tol: Redshifts below this are treated as z = 0
        flat_tol: Distance difference below which comoving and
            transverse distances are reported as one column
    """

    max_rows: int = 25
    tol: float = 1e-8
    age_upper_limit: float = 1000.0
    zero_redshift_tol: float = 1e-5
    flat_tol: float = 1e-5

    def validate(self) -> tuple[bool, list[str]]:
        """Validate configuration values.

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        errors = []

        if self.max_rows < 2:
            errors.append(f"max_rows = {self.max_rows} too small; need at least 2")

        if self.tol <= 0:
            errors.append(f"tol = {self.tol} must be > 0")

        if self.age_upper_limit <= 0:
            errors.append(f"age_upper_limit = {self.age_upper_limit} must be > 0")

        if self.zero_redshift_tol < 0:
            errors.append(f"zero_redshift_tol = {self.zero_redshift_tol} must be >= 0")

        if self.flat_tol < 0:
            errors.append(f"flat_tol = {self.flat_tol} must be >= 0")

        return len(errors) == 0, errors


DEFAULT_CONFIG = NumericalConfig()
