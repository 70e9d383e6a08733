"""Tests for special functions."""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import special

from vbaux.exceptions import DomainError
from vbaux.special import beta_func, digamma_func, gamma_func


class TestGammaFunc:
    @pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 2.5, 10.0, 171.0])
    def test_recurrence_log_scale(self, x):
        assert_allclose(gamma_func(x + 1), np.log(x) + gamma_func(x), rtol=1e-12)

    @pytest.mark.parametrize("x", [0.3, 1.0, 4.5, 20.0])
    def test_recurrence_linear_scale(self, x):
        assert_allclose(
            gamma_func(x + 1, log_scale=False),
            x * gamma_func(x, log_scale=False),
            rtol=1e-12,
        )

    def test_known_values(self):
        assert_allclose(gamma_func(5.0, log_scale=False), 24.0, rtol=1e-14)
        assert_allclose(gamma_func(0.5, log_scale=False), np.sqrt(np.pi), rtol=1e-14)
        assert_allclose(gamma_func(1.0), 0.0, atol=1e-15)

    def test_default_is_log_scale(self):
        assert_allclose(gamma_func(3.0), np.log(2.0), rtol=1e-14)

    def test_returns_float_for_scalar(self):
        assert isinstance(gamma_func(2.0), float)

    def test_array_input(self):
        x = np.array([0.5, 1.5, 3.0])
        assert_allclose(gamma_func(x), special.gammaln(x), rtol=1e-14)

    @pytest.mark.parametrize("x", [0.0, -1.0, -0.5, np.nan, np.inf])
    def test_domain_error(self, x):
        with pytest.raises(DomainError):
            gamma_func(x)

    def test_domain_error_in_array(self):
        with pytest.raises(DomainError):
            gamma_func(np.array([1.0, 2.0, 0.0]))

    def test_domain_error_is_value_error(self):
        with pytest.raises(ValueError, match="x must be positive"):
            gamma_func(-2.0)


class TestDigammaFunc:
    def test_digamma_one(self):
        assert_allclose(digamma_func(1.0), -np.euler_gamma, rtol=1e-14)

    @pytest.mark.parametrize("x", [0.2, 1.0, 3.7, 50.0])
    def test_recurrence(self, x):
        assert_allclose(digamma_func(x + 1), digamma_func(x) + 1.0 / x, rtol=1e-12)

    def test_derivative_of_log_gamma(self):
        x, h = 2.3, 1e-5
        numeric = (gamma_func(x + h) - gamma_func(x - h)) / (2 * h)
        assert_allclose(digamma_func(x), numeric, rtol=1e-8)

    def test_domain_error(self):
        with pytest.raises(DomainError):
            digamma_func(0.0)


class TestBetaFunc:
    @pytest.mark.parametrize("a,b", [(0.5, 0.5), (1.0, 1.0), (2.0, 3.5), (30.0, 0.7)])
    def test_log_identity(self, a, b):
        expected = gamma_func(a) + gamma_func(b) - gamma_func(a + b)
        assert_allclose(beta_func(a, b), expected, rtol=1e-12, atol=1e-14)

    def test_linear_scale(self):
        assert_allclose(beta_func(2.0, 3.0, log_scale=False), 1.0 / 12.0, rtol=1e-14)

    def test_symmetric(self):
        assert_allclose(beta_func(1.3, 4.2), beta_func(4.2, 1.3), rtol=1e-14)

    def test_array_input(self):
        a = np.array([0.5, 2.0])
        b = np.array([1.5, 3.0])
        assert_allclose(beta_func(a, b), special.betaln(a, b), rtol=1e-14)

    @pytest.mark.parametrize("a,b", [(0.0, 1.0), (1.0, -1.0), (-1.0, -1.0)])
    def test_domain_error(self, a, b):
        with pytest.raises(DomainError):
            beta_func(a, b)
