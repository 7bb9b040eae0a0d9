"""Tests for numerical utilities."""

import logging

import pytest
import numpy as np
from numpy.testing import assert_allclose

from cosmic.utils.config import NumericalConfig
from cosmic.utils.numerics import (
    RangeError,
    NumericDomainError,
    FormatError,
    romberg,
    asinh,
)


class TestRomberg:
    """Tests for Romberg integration."""

    def test_linear(self):
        """∫₀¹ x dx = 1/2."""
        assert_allclose(romberg(lambda x: x, 0.0, 1.0), 0.5, atol=1e-6)

    def test_constant(self):
        """∫₀⁵ 1 dx = 5."""
        result = romberg(lambda x: 1.0, 0.0, 5.0)
        assert abs(result - 5.0) < 1e-6

    def test_constant_vectorized(self):
        """Scalar-returning integrand is broadcast over the midpoints."""
        result = romberg(lambda x: 1.0, 0.0, 5.0, vectorized=True)
        assert abs(result - 5.0) < 1e-6

    def test_sine(self):
        """∫₀^π sin x dx = 2."""
        assert_allclose(romberg(np.sin, 0.0, np.pi), 2.0, atol=1e-8)

    def test_exponential_vectorized(self):
        """Vectorized and scalar evaluation agree for exp."""
        scalar = romberg(np.exp, 0.0, 1.0)
        vector = romberg(np.exp, 0.0, 1.0, vectorized=True)
        assert_allclose(scalar, np.e - 1.0, atol=1e-8)
        assert_allclose(vector, scalar, atol=1e-10)

    def test_reversed_limits(self):
        """Swapping limits flips the sign."""
        forward = romberg(lambda x: x**2, 0.0, 3.0)
        backward = romberg(lambda x: x**2, 3.0, 0.0)
        assert_allclose(forward, 9.0, atol=1e-8)
        assert_allclose(backward, -forward, atol=1e-8)

    def test_deterministic(self):
        """Repeated calls give identical results."""
        f = lambda x: 1.0 / (1.0 + x**2)
        assert romberg(f, 0.0, 10.0) == romberg(f, 0.0, 10.0)

    def test_no_convergence_returns_estimate(self, caplog):
        """Exhausting the rows returns the deepest estimate and warns."""
        with caplog.at_level(logging.WARNING, logger="cosmic.utils.numerics"):
            result = romberg(np.sqrt, 0.0, 1.0, max_rows=4, tol=0.0)
        assert np.isfinite(result)
        assert_allclose(result, 2.0 / 3.0, atol=1e-2)
        assert "did not converge" in caplog.text


class TestAsinh:
    """Tests for the inverse hyperbolic sine helper."""

    def test_matches_numpy(self):
        """asinh should agree with numpy.arcsinh."""
        p = np.array([0.0, 0.1, 1.0, 5.0, 100.0])
        assert_allclose(asinh(p), np.arcsinh(p), rtol=1e-12)

    def test_zero(self):
        assert asinh(0.0) == 0.0


class TestExceptions:
    """Tests for error types."""

    def test_range_error_is_value_error(self):
        """RangeError should be catchable as ValueError."""
        err = RangeError("H0", -5.0, "Hubble constant must be positive")
        assert isinstance(err, ValueError)
        assert err.name == "H0"
        assert err.value == -5.0
        assert "Hubble constant must be positive" in str(err)

    def test_numeric_domain_error(self):
        """NumericDomainError carries z and the radicand."""
        err = NumericDomainError(z=3.0, radicand=-0.5)
        assert isinstance(err, ArithmeticError)
        assert err.z == 3.0
        assert err.radicand == -0.5
        assert "undefined" in str(err)

    def test_format_error(self):
        """FormatError reports the line number and text."""
        err = FormatError(4, "abc")
        assert isinstance(err, ValueError)
        assert err.line_number == 4
        assert "Line 4" in str(err)
        assert "'abc'" in str(err)


class TestNumericalConfig:
    """Tests for NumericalConfig validation."""

    def test_default_valid(self):
        valid, errors = NumericalConfig().validate()
        assert valid, f"Default config invalid: {errors}"

    def test_defaults(self):
        """Defaults match the documented integration settings."""
        config = NumericalConfig()
        assert config.max_rows == 25
        assert config.tol == 1e-8
        assert config.age_upper_limit == 1000.0
        assert config.zero_redshift_tol == 1e-5

    def test_invalid_values(self):
        config = NumericalConfig(max_rows=1, tol=0.0, age_upper_limit=-1.0)
        valid, errors = config.validate()
        assert not valid
        assert len(errors) == 3
