"""Numerical utilities for cosmic computations."""

import logging
from typing import Callable, Optional, TypeVar

import numpy as np
from numpy.typing import NDArray

from .config import DEFAULT_CONFIG


logger = logging.getLogger(__name__)

T = TypeVar("T", float, NDArray[np.floating])


class RangeError(ValueError):
    """Raised when a parameter is set outside its allowed range.

    The object being mutated is left in its previous valid state.
    """

    def __init__(
        self,
        name: str,
        value: float,
        requirement: str,
    ):
        self.name = name
        self.value = value
        self.requirement = requirement
        super().__init__(f"{requirement}: {name} = {value}")


class NumericDomainError(ArithmeticError):
    """Raised when E(z)² becomes negative.

    Happens for cosmologies without a big bang (e.g. large Omega_Lambda with
    little matter), where the expansion rate has no real value at high
    redshift.
    """

    def __init__(
        self,
        z: float,
        radicand: float,
        message: Optional[str] = None,
    ):
        self.z = z
        self.radicand = radicand

        if message is None:
            message = (
                f"Expansion rate undefined: E(z)^2 = {radicand:.6e} < 0 "
                f"at z = {z:.6g}"
            )

        super().__init__(message)


class FormatError(ValueError):
    """Raised when redshift text cannot be parsed as a number."""

    def __init__(self, line_number: int, text: str):
        self.line_number = line_number
        self.text = text
        super().__init__(
            f"Line {line_number}: could not read a redshift from {text!r}. "
            "Input must contain one redshift per line and nothing else."
        )


def _sum_at(
    f: Callable,
    points: NDArray[np.floating],
    vectorized: bool,
) -> float:
    """Sum f over points, either in one call or point by point."""
    if vectorized:
        values = np.broadcast_to(np.asarray(f(points), dtype=float), points.shape)
        return float(np.sum(values))
    return float(sum(f(x) for x in points))


def romberg(
    f: Callable,
    a: float,
    b: float,
    *,
    max_rows: int = DEFAULT_CONFIG.max_rows,
    tol: float = DEFAULT_CONFIG.tol,
    vectorized: bool = False,
) -> float:
    """Integrate f from a to b by Romberg's method.

    Builds the triangular table R[i][j]: column 0 holds trapezoidal
    estimates with 2^i panels, each refined from the previous row by adding
    the new midpoints only; column j applies the j-th Richardson
    extrapolation

        R[i][j] = R[i][j-1] + (R[i][j-1] - R[i-1][j-1]) / (4^j - 1)

    Iteration stops once successive diagonal entries differ by less than
    ``tol`` (absolute). If no row converges the deepest estimate is returned.

    Args:
        f: Integrand. Called with a float, or with a 1-D array of points
           when ``vectorized`` is True.
        a: Lower limit
        b: Upper limit
        max_rows: Maximum number of table rows
        tol: Absolute convergence tolerance
        vectorized: Whether f accepts numpy arrays

    Returns:
        Estimate of the integral
    """
    h = b - a
    R = np.zeros((max_rows, max_rows))
    R[0, 0] = 0.5 * h * (float(f(a)) + float(f(b)))

    n_panels = 1
    for i in range(1, max_rows):
        h /= 2.0
        n_panels *= 2

        # only the odd points are new; the even ones are already in R[i-1][0]
        points = a + h * np.arange(1, n_panels, 2)
        R[i, 0] = 0.5 * R[i - 1, 0] + h * _sum_at(f, points, vectorized)

        factor = 1.0
        for j in range(1, i + 1):
            factor *= 4.0
            R[i, j] = R[i, j - 1] + (R[i, j - 1] - R[i - 1, j - 1]) / (factor - 1.0)

        dR = R[i, i] - R[i - 1, i - 1]
        if abs(dR) < tol:
            logger.debug(
                "Romberg converged on [%g, %g] after %d rows (dR = %.3e)",
                a, b, i + 1, dR,
            )
            return float(R[i, i])

    logger.warning(
        "Romberg did not converge on [%g, %g] within %d rows; "
        "returning deepest estimate",
        a, b, max_rows,
    )
    return float(R[max_rows - 1, max_rows - 1])


def asinh(p: T) -> T:
    """Inverse hyperbolic sine, ln(p + sqrt(1 + p²))."""
    return np.log(p + np.sqrt(1.0 + p * p))
