# tests/test_api.py
"""
Tests for the package-level API: the CF registry, the log-scale
back-transform and the top-level helpers.
"""

import logging
from types import SimpleNamespace

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

import charfun
from charfun.core.exceptions import DistributionError, ParameterError
from charfun.models.characteristic import cf_from_name, cf_student_t, get_available_cfs
from charfun.utils import log_cdf_to_cdf


class TestRegistry:
    """Tests for cf_from_name and get_available_cfs."""

    def test_available(self):
        assert get_available_cfs() == ["inverse_gamma", "log_beta", "log_beta_nc",
                                       "log_chi_square", "student_t"]

    def test_bound_callable(self):
        t = np.linspace(-2, 2, 21)
        cf = cf_from_name("student_t", df=[3, 5], coef=[0.5, 0.5])
        assert_array_equal(cf(t), cf_student_t(t, df=[3, 5], coef=[0.5, 0.5]))

    @pytest.mark.parametrize("name", ["Student-T", "t", "LogChiSquare", "invgamma", "log_beta_nc"])
    def test_aliases(self, name):
        cf = cf_from_name(name)
        assert cf(np.array([0.0]))[0] == 1 + 0j

    def test_unknown(self):
        with pytest.raises(DistributionError) as exc_info:
            cf_from_name("normal")
        assert exc_info.value.distribution_type == "normal"

    def test_full_output_rejected(self):
        with pytest.raises(DistributionError):
            cf_from_name("log_beta_nc", full_output=True)


class TestLogCdfToCdf:
    """Tests for the log-scale back-transform."""

    def test_arrays(self):
        x, cdf = log_cdf_to_cdf([0.0, np.log(2.0)], [0.25, 0.75])
        assert_allclose(x, [1.0, 2.0])
        assert_array_equal(cdf, [0.25, 0.75])

    def test_mapping(self):
        x, cdf = log_cdf_to_cdf({"x": np.array([-1.0, 1.0]), "cdf": np.array([0.1, 0.9])})
        assert_allclose(x, np.exp([-1.0, 1.0]))
        assert_array_equal(cdf, [0.1, 0.9])

    def test_object(self):
        result = SimpleNamespace(x=np.array([0.0]), cdf=np.array([0.5]))
        x, cdf = log_cdf_to_cdf(result)
        assert_array_equal(x, [1.0])

    def test_missing(self):
        with pytest.raises(ParameterError):
            log_cdf_to_cdf({"x": [0.0]})


class TestPackage:
    """Tests for the top-level charfun namespace."""

    def test_version(self):
        assert charfun.get_version() == charfun.__version__ == "1.0.0"

    def test_exports(self):
        for name in charfun.__all__:
            assert hasattr(charfun, name)

    def test_set_log_level(self):
        charfun.set_log_level("info")
        assert logging.getLogger("charfun").level == logging.INFO
        charfun.set_log_level(logging.WARNING)
        assert logging.getLogger("charfun").level == logging.WARNING

    def test_list_available_cfs(self):
        assert "student_t" in charfun.list_available_cfs()

    def test_version_info(self):
        info = charfun.get_version_info()
        assert info["version"] == charfun.__version__
        assert (info["major"], info["minor"], info["patch"]) == charfun.get_version_components()
        assert "numpy" in info["dependencies"]
        assert len(info["changes"]) > 0
