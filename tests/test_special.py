# tests/test_special.py
"""
Tests for the special functions.

Covers the complex log-gamma function (Lanczos branch, reflection branch,
poles, exact values at 1 and 2) and the logarithmic Bessel K function,
checked against scipy.special.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal
from hypothesis import given, settings, strategies as st
from scipy import special

from charfun.special import complex_loggamma, gamma, kv, log_kv
from charfun.special.bessel import DEBYE_MIN_ORDER, log_kv_uniform
from charfun.special._numba_core import (
    CLASS_GENERIC, CLASS_POLE, CLASS_REFLECTION, classify_points
)


class TestComplexLogGamma:
    """Tests for complex_loggamma."""

    def test_exact_values(self):
        """log G(1) and log G(2) are exactly zero."""
        result = complex_loggamma(np.array([1.0, 2.0]))
        assert_array_equal(result, np.zeros(2, dtype=complex))

    def test_factorials(self):
        """exp(log G(n + 1)) reproduces n!."""
        n = np.arange(0, 16)
        result = np.exp(complex_loggamma(n + 1.0))
        expected = np.array([math.factorial(int(k)) for k in n], dtype=float)
        assert_allclose(result.real, expected, rtol=1e-12)
        assert_array_equal(result.imag, 0.0)

    @pytest.mark.parametrize("z", [0.0, -1.0, -2.0, -10.0])
    def test_poles(self, z):
        """Non-positive integers map to +inf instead of NaN."""
        result = complex_loggamma(z)
        assert np.isposinf(result.real)
        assert not np.isnan(result)

    def test_against_scipy_right_half_plane(self):
        """Real part and phase agree with scipy.special.loggamma."""
        x, y = np.meshgrid(np.linspace(0.5, 30, 40), np.linspace(-30, 30, 41))
        z = x + 1j * y
        result = complex_loggamma(z)
        expected = special.loggamma(z)

        assert_allclose(result.real, expected.real, rtol=1e-12, atol=1e-12)
        # Imaginary parts may sit on different branches
        assert_allclose(np.exp(1j * (result.imag - expected.imag)), 1.0, atol=1e-10)

    def test_reflection_branch(self):
        """Points with a negative real part go through the reflection formula."""
        z = np.array([-0.5, -2.5 + 0.3j, -7.25 - 1.5j, -3.1 + 4.0j])
        result = complex_loggamma(z)
        assert_allclose(np.exp(result), special.gamma(z), rtol=1e-11)

    def test_shape_preserved(self):
        """The output has the shape of the input."""
        z = np.arange(1, 25, dtype=float).reshape(2, 3, 4) + 0.5j
        assert complex_loggamma(z).shape == (2, 3, 4)
        assert complex_loggamma(np.array([])).shape == (0,)

    def test_large_arguments(self):
        """Relative accuracy holds for large moduli."""
        z = np.array([1e3 + 1e3j, 1e5, 1e6 + 10j])
        result = complex_loggamma(z)
        assert_allclose(result.real, special.loggamma(z).real, rtol=1e-13)

    def test_gamma(self):
        """gamma is the exponential of the log-gamma function."""
        assert_allclose(gamma(np.array([0.5, 3.0])).real, [np.sqrt(np.pi), 2.0], rtol=1e-13)

    @given(st.floats(min_value=0.5, max_value=100.0),
           st.floats(min_value=-100.0, max_value=100.0))
    @settings(deadline=None)
    def test_conjugate_symmetry(self, x, y):
        """log G(conj(z)) = conj(log G(z)) for z off the real axis."""
        z = np.array([complex(x, y)])
        assert_allclose(complex_loggamma(np.conj(z)), np.conj(complex_loggamma(z)),
                        rtol=1e-13, atol=1e-13)


class TestClassifyPoints:
    """Tests for the per-element branch tagging."""

    def test_tags(self):
        z = np.array([1.5 + 0j, -0.5 + 0j, -3.0 + 0j, 0.0 + 0j, -3.0 + 1j, 2.0 - 4j])
        tags = classify_points(z)
        assert_array_equal(tags, [CLASS_GENERIC, CLASS_REFLECTION, CLASS_POLE,
                                  CLASS_POLE, CLASS_REFLECTION, CLASS_GENERIC])


class TestLogBesselK:
    """Tests for log_kv and kv."""

    def test_against_scipy_real(self):
        v = np.array([0.5, 1.0, 2.5, 10.0])[:, None]
        z = np.array([0.1, 1.0, 5.0, 50.0])[None, :]
        assert_allclose(log_kv(v, z), np.log(special.kv(v, z)), rtol=1e-12)

    def test_large_argument_no_underflow(self):
        """log K_v(z) stays finite where K_v(z) underflows."""
        result = log_kv(2.0, 1000.0)
        assert np.isfinite(result)
        assert_allclose(result, np.log(special.kve(2.0, 1000.0)) - 1000.0, rtol=1e-14)

    def test_small_argument_expansion(self):
        """Where kve overflows at low order the leading small-argument term is used."""
        v, z = 40.0, 1e-10
        assert v < DEBYE_MIN_ORDER
        assert np.isinf(special.kve(v, z))
        expected = special.gammaln(v) + (v - 1.0) * np.log(2.0) - v * np.log(z)
        assert_allclose(log_kv(v, z), expected, rtol=1e-12)

    def test_uniform_expansion(self):
        """The large-order expansion agrees with scipy where kve is finite."""
        z = np.array([0.5, 30.0, 100.0])
        expected = np.log(special.kve(100.0, z)) - z
        assert np.all(np.isfinite(expected))
        assert_allclose(log_kv_uniform(100.0, z), expected, rtol=1e-9)

    def test_large_order_recurrence(self):
        """K_{v+1}(z) = K_{v-1}(z) + (2v/z) K_v(z) holds where kve overflows."""
        z = 10.0
        assert np.isinf(special.kve(300.0, z))
        lower, middle, upper = log_kv(np.array([299.0, 300.0, 301.0]), z)
        assert np.all(np.isfinite([lower, middle, upper]))
        expected = np.logaddexp(lower, np.log(2.0 * 300.0 / z) + middle)
        assert_allclose(upper, expected, rtol=1e-10)

    def test_large_order_not_small_argument_term(self):
        """At large order and moderate argument the small-argument term is far off."""
        v, z = 300.0, 10.0
        small_arg = special.gammaln(v) + (v - 1.0) * np.log(2.0) - v * np.log(z)
        assert_allclose(log_kv(v, z), log_kv_uniform(v, z), rtol=1e-14)
        assert abs(log_kv(v, z) - small_arg) > 1e-3

    def test_complex_argument(self):
        z = np.array([0.5 - 0.5j, 2.0 - 2.0j, 10.0 + 3.0j])
        assert_allclose(np.exp(log_kv(1.5, z)), special.kv(1.5, z), rtol=1e-12)

    def test_kv(self):
        assert_allclose(kv(0.5, 2.0), np.sqrt(np.pi / 4.0) * np.exp(-2.0), rtol=1e-13)

    def test_zero_argument(self):
        """K_v(0) is infinite and stays that way."""
        assert np.isposinf(log_kv(1.0, 0.0))
