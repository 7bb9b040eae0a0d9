"""Tests for the parameter set."""

import pytest
import numpy as np
from numpy.testing import assert_allclose
from scipy.integrate import quad

from cosmic.parameters import (
    ParameterSet,
    check_range,
    validate_parameters,
    derive_parameters,
)
from cosmic.utils.constants import CGS_UNITS, seconds_to_gyr
from cosmic.utils.numerics import RangeError, NumericDomainError


class TestParameterSet:
    """Tests for ParameterSet construction and derived values."""

    @pytest.fixture
    def wmap(self):
        return ParameterSet(71.0, 0.27, 0.73)

    def test_defaults(self):
        """Defaults are the WMAP first-year values."""
        params = ParameterSet()
        assert params.H0 == 71.0
        assert params.Omega_m == 0.27
        assert params.Omega_Lambda == 0.73

    def test_flat_curvature_snapped(self, wmap):
        """Omega_k is exactly zero when the densities sum to one."""
        assert wmap.Omega_k == 0.0

    @pytest.mark.parametrize(
        "Omega_m, Omega_Lambda",
        [(0.3, 0.7), (0.27, 0.73), (0.25, 0.75), (1.0, 0.0), (0.5, 0.5)],
    )
    def test_flat_pairs(self, Omega_m, Omega_Lambda):
        params = ParameterSet(70.0, Omega_m, Omega_Lambda)
        assert params.Omega_k == 0.0

    def test_open_curvature(self):
        params = ParameterSet(70.0, 0.3, 0.0)
        assert_allclose(params.Omega_k, 0.7, rtol=1e-14)

    def test_closed_curvature(self):
        """Negative curvature is kept, not snapped."""
        params = ParameterSet(70.0, 0.5, 0.8)
        assert_allclose(params.Omega_k, -0.3, rtol=1e-12)

    def test_q0(self, wmap):
        assert wmap.q0 == 0.5 * 0.27 - 0.73

    def test_hubble_distance(self, wmap):
        assert_allclose(wmap.hubble_distance, 2.99792458e5 / 71.0)

    def test_age_wmap(self, wmap):
        """Age for WMAP parameters is about 13.7 Gyr."""
        age_gyr = seconds_to_gyr(wmap.age)
        assert 13.5 < age_gyr < 13.9

    def test_age_against_quad(self):
        """Romberg age agrees with scipy quadrature."""
        params = ParameterSet(70.0, 0.3, 0.7)
        integral, _ = quad(params.expansion.age_integrand, 0, 1000, limit=500)
        expected = integral / 70.0 * CGS_UNITS.km_per_Mpc
        assert_allclose(params.age, expected, rtol=1e-6)

    def test_age_einstein_de_sitter(self):
        """Matter-only age is (2/3)/H0, less the z > 1000 tail."""
        params = ParameterSet(70.0, 1.0, 0.0)
        hubble_time = CGS_UNITS.km_per_Mpc / 70.0
        expected = 2.0 / 3.0 * hubble_time * (1 - 1001.0**-1.5)
        assert_allclose(params.age, expected, rtol=1e-6)

    def test_set_cosmology(self, wmap):
        wmap.set_cosmology(70.0, 0.3, 0.0)
        assert wmap.H0 == 70.0
        assert wmap.Omega_Lambda == 0.0
        assert wmap.Omega_k > 0

    def test_setter_recomputes(self, wmap):
        """Changing H0 rescales age and Hubble distance."""
        age = wmap.age
        d_H = wmap.hubble_distance
        wmap.H0 = 142.0
        assert_allclose(wmap.age, age / 2, rtol=1e-12)
        assert_allclose(wmap.hubble_distance, d_H / 2, rtol=1e-12)

    def test_omega_lambda_unconstrained(self, wmap):
        """Negative Omega_Lambda is accepted."""
        wmap.Omega_Lambda = -0.1
        assert wmap.Omega_Lambda == -0.1

    def test_copy_independent(self, wmap):
        other = wmap.copy()
        assert other == wmap
        other.H0 = 50.0
        assert wmap.H0 == 71.0
        assert other != wmap

    def test_validate(self, wmap):
        valid, errors = wmap.validate()
        assert valid, f"WMAP params invalid: {errors}"


class TestParameterValidation:
    """Tests for range checks."""

    @pytest.fixture
    def wmap(self):
        return ParameterSet(71.0, 0.27, 0.73)

    @pytest.mark.parametrize("H0", [0.0, -5.0])
    def test_bad_h0(self, wmap, H0):
        """H0 <= 0 is rejected and leaves the set unchanged."""
        age = wmap.age
        with pytest.raises(RangeError, match="Hubble constant must be positive"):
            wmap.H0 = H0
        assert wmap.H0 == 71.0
        assert wmap.age == age

    def test_bad_omega_m(self, wmap):
        with pytest.raises(RangeError, match="matter density must be non-negative"):
            wmap.Omega_m = -0.1
        assert wmap.Omega_m == 0.27
        assert wmap.Omega_k == 0.0

    def test_bad_constructor(self):
        with pytest.raises(RangeError):
            ParameterSet(-1.0, 0.3, 0.7)

    @pytest.mark.parametrize("name", ["H0", "Omega_m", "Omega_Lambda", "redshift"])
    @pytest.mark.parametrize("value", [np.inf, -np.inf, np.nan])
    def test_non_finite_rejected(self, name, value):
        with pytest.raises(RangeError, match="must be finite"):
            check_range(name, value)

    def test_infinite_h0_leaves_state(self, wmap):
        age = wmap.age
        with pytest.raises(RangeError):
            wmap.H0 = np.inf
        assert wmap.H0 == 71.0
        assert wmap.age == age

    def test_infinite_omega_lambda(self, wmap):
        with pytest.raises(RangeError, match="Omega_Lambda must be finite"):
            wmap.Omega_Lambda = np.inf
        assert wmap.Omega_Lambda == 0.73

    def test_check_range_redshift(self):
        with pytest.raises(RangeError, match="redshift must be non-negative"):
            check_range("redshift", -1.0)
        assert check_range("redshift", 0) == 0.0

    def test_validate_parameters(self):
        valid, errors = validate_parameters(H0=-1.0, Omega_m=-0.5, Omega_Lambda=3.0)
        assert not valid
        assert len(errors) == 2

    def test_no_big_bang_rejected(self):
        """A cosmology with undefined E(z) cannot be constructed."""
        with pytest.raises(NumericDomainError):
            ParameterSet(71.0, 0.0, 2.0)

    def test_no_big_bang_mutation_atomic(self):
        """A failed derivation leaves previous values intact."""
        params = ParameterSet(71.0, 0.0, 0.73)
        age = params.age
        with pytest.raises(NumericDomainError):
            params.Omega_Lambda = 2.0
        assert params.Omega_Lambda == 0.73
        assert params.age == age

    def test_derive_parameters(self):
        derived = derive_parameters(70.0, 0.3, 0.7)
        assert derived.Omega_k == 0.0
        assert_allclose(derived.q0, -0.55)
