"""Tests for the expansion rate model."""

import pytest
import numpy as np
from numpy.testing import assert_allclose

from cosmic.expansion import ExpansionModel
from cosmic.utils.numerics import NumericDomainError


class TestExpansionModel:
    """Tests for ExpansionModel."""

    @pytest.fixture
    def flat(self):
        """Flat ΛCDM."""
        return ExpansionModel(Omega_m=0.3, Omega_k=0.0, Omega_Lambda=0.7)

    def test_unity_today(self, flat):
        """E(0) = 1 when the densities sum to one."""
        assert_allclose(flat.E(0.0), 1.0, rtol=1e-14)

    def test_matter_only(self):
        """Einstein-de Sitter: E(z) = (1+z)^{3/2}."""
        eds = ExpansionModel(Omega_m=1.0, Omega_k=0.0, Omega_Lambda=0.0)
        z = np.array([0.5, 1.0, 3.0])
        assert_allclose(eds.E(z), (1 + z) ** 1.5, rtol=1e-14)

    def test_curvature_term(self):
        """Curvature enters as Ωk(1+z)²."""
        model = ExpansionModel(Omega_m=0.3, Omega_k=0.7, Omega_Lambda=0.0)
        assert_allclose(model.E(1.0), np.sqrt(0.3 * 8 + 0.7 * 4), rtol=1e-14)

    def test_inverse(self, flat):
        z = np.linspace(0, 5, 11)
        assert_allclose(flat.inverse_E(z) * flat.E(z), 1.0, rtol=1e-14)

    def test_age_integrand(self, flat):
        """Age integrand is 1/((1+z)E)."""
        z = 2.0
        assert_allclose(flat.age_integrand(z), 1.0 / (3.0 * flat.E(z)), rtol=1e-14)

    def test_array_shape(self, flat):
        z = np.linspace(0, 10, 7)
        assert flat.E(z).shape == z.shape

    def test_negative_radicand_raises(self):
        """No-big-bang cosmology has no real E(z) at high z."""
        model = ExpansionModel(Omega_m=0.0, Omega_k=-1.0, Omega_Lambda=2.0)
        with pytest.raises(NumericDomainError) as info:
            model.E(5.0)
        assert info.value.z == 5.0
        assert_allclose(info.value.radicand, -34.0)

    def test_negative_radicand_in_array(self):
        """The first offending redshift in an array is reported."""
        model = ExpansionModel(Omega_m=0.0, Omega_k=-1.0, Omega_Lambda=2.0)
        with pytest.raises(NumericDomainError) as info:
            model.inverse_E(np.array([0.0, 0.1, 4.0, 9.0]))
        assert info.value.z == 4.0
