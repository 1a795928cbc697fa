# tests/test_combinator.py
"""
Tests for the chunked linear combinator.

The chunk size is a memory knob only: results must not depend on it beyond
floating point rounding.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from hypothesis import given, settings, strategies as st

from charfun.core.config import set_config
from charfun.core.exceptions import ParameterError
from charfun.core.parameters import broadcast_parameters
from charfun.models.characteristic import (
    cf_inverse_gamma, cf_log_chi_square, cf_student_t, chunk_size_for, combine_components,
    iter_chunks, linear_combination_cf
)


def normal_log_kernel(t, params):
    """log-CF of coef_k * N(0, 1)."""
    u = np.outer(t, params["coef"])
    return -0.5 * u ** 2


def normal_kernel(t, params):
    return np.exp(normal_log_kernel(t, params))


class TestChunkSize:
    """Tests for the chunk-size policy."""

    def test_reference_grid(self):
        assert chunk_size_for(2 ** 16) == 1000

    def test_large_grid(self):
        assert chunk_size_for(2 ** 20) == 63

    def test_small_grid(self):
        assert chunk_size_for(1000) == 65536

    def test_empty_grid(self):
        assert chunk_size_for(0) == 1000

    def test_explicit_budget(self):
        assert chunk_size_for(2 ** 17, budget=10) == 5
        assert chunk_size_for(2 ** 30, budget=10) == 1

    def test_configured_budget(self):
        set_config("numerical", "chunk_budget", 100)
        assert chunk_size_for(2 ** 16) == 100


class TestIterChunks:
    """Tests for iter_chunks."""

    def test_slices(self):
        chunks = list(iter_chunks(10, 3))
        assert chunks == [slice(0, 3), slice(3, 6), slice(6, 9), slice(9, 10)]

    def test_single_chunk(self):
        assert list(iter_chunks(5, 100)) == [slice(0, 5)]

    def test_invalid_chunk_size(self):
        with pytest.raises(ParameterError):
            list(iter_chunks(5, 0))


class TestCombineComponents:
    """Tests for combine_components and linear_combination_cf."""

    def test_normal_sum_log_mode(self):
        """A weighted sum of standard normals is normal with variance sum coef^2."""
        t = np.linspace(-3, 3, 61)
        coef = np.array([0.5, -1.0, 2.0, 0.25])
        params = broadcast_parameters({"coef": coef})
        cf = combine_components(t, params, normal_log_kernel, mode="log", chunk_size=3)
        assert_allclose(cf, np.exp(-0.5 * t ** 2 * np.sum(coef ** 2)), rtol=1e-13)

    def test_normal_sum_product_mode(self):
        t = np.linspace(-3, 3, 61)
        coef = np.array([0.5, -1.0, 2.0, 0.25])
        params = broadcast_parameters({"coef": coef})
        cf = combine_components(t, params, normal_kernel, mode="product", chunk_size=3)
        assert_allclose(cf, np.exp(-0.5 * t ** 2 * np.sum(coef ** 2)), rtol=1e-13)

    def test_invalid_mode(self):
        params = broadcast_parameters({"coef": 1.0})
        with pytest.raises(ParameterError):
            combine_components(np.zeros(3), params, normal_kernel, mode="sum")

    def test_shape_and_order(self):
        t = np.linspace(-1, 1, 24).reshape(2, 3, 4)
        params = broadcast_parameters({"coef": [1.0, 2.0]})
        cf1 = linear_combination_cf(t, params, normal_log_kernel)
        cf2 = linear_combination_cf(t, params, normal_log_kernel, n=2)
        assert cf1.shape == (2, 3, 4)
        assert_allclose(cf2, cf1 ** 2, rtol=1e-14)

    def test_complex_grid_rejected(self):
        params = broadcast_parameters({"coef": 1.0})
        with pytest.raises(ParameterError):
            linear_combination_cf(np.array([1.0 + 1j]), params, normal_log_kernel)


class TestChunkInvariance:
    """One chunk and many small chunks give the same CF."""

    @pytest.fixture
    def many_components(self, rng):
        return {
            "df": rng.uniform(0.5, 10.0, 500),
            "coef": rng.uniform(-0.1, 0.1, 500),
            "alpha": rng.uniform(1.0, 5.0, 500),
            "beta": rng.uniform(0.5, 3.0, 500),
        }

    def test_log_chi_square(self, many_components):
        t = np.linspace(-5, 5, 101)
        p = {k: many_components[k] for k in ("df", "coef")}
        whole = cf_log_chi_square(t, chunk_size=500, **p)
        split = cf_log_chi_square(t, chunk_size=7, **p)
        assert_allclose(split, whole, rtol=1e-12)

    def test_student_t(self, many_components):
        t = np.linspace(-5, 5, 101)
        p = {k: many_components[k] for k in ("df", "coef")}
        whole = cf_student_t(t, chunk_size=500, **p)
        split = cf_student_t(t, chunk_size=7, **p)
        assert_allclose(split, whole, rtol=1e-12)

    def test_inverse_gamma(self, many_components):
        t = np.linspace(-5, 5, 101)
        p = {k: many_components[k] for k in ("alpha", "beta", "coef")}
        whole = cf_inverse_gamma(t, chunk_size=500, **p)
        split = cf_inverse_gamma(t, chunk_size=7, **p)
        assert_allclose(split, whole, rtol=1e-12)

    def test_default_policy(self, many_components):
        """The configured policy agrees with an explicit chunk size."""
        t = np.linspace(-5, 5, 101)
        p = {k: many_components[k] for k in ("df", "coef")}
        set_config("numerical", "grid_unit", 101)
        set_config("numerical", "chunk_budget", 11)
        assert_allclose(cf_log_chi_square(t, **p), cf_log_chi_square(t, chunk_size=500, **p),
                        rtol=1e-12)


@given(chunk_size=st.integers(min_value=1, max_value=40),
       n_components=st.integers(min_value=1, max_value=40))
@settings(deadline=None, max_examples=30)
def test_chunk_invariance_property(chunk_size, n_components):
    """Any chunk size reproduces the single-chunk result."""
    k = np.arange(1, n_components + 1)
    t = np.linspace(-3, 3, 31)
    whole = cf_student_t(t, df=k, coef=1.0 / k, chunk_size=n_components)
    split = cf_student_t(t, df=k, coef=1.0 / k, chunk_size=chunk_size)
    assert_allclose(split, whole, rtol=1e-12)
