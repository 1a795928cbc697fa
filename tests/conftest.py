'''
Pytest configuration and fixtures for the charfun test suite.

This module provides the evaluation grids, parameter sets and configuration
handling shared by the test modules.
'''

from typing import Dict

import numpy as np
import pytest
from hypothesis import HealthCheck, settings, strategies as st

from charfun.core.config import reset_config

# The autouse configuration reset is function scoped and safe to share across examples
settings.register_profile("charfun", deadline=None,
                          suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("charfun")


# ---- Configuration ----

@pytest.fixture(autouse=True)
def default_config():
    """Run every test against the default configuration."""
    reset_config()
    yield
    reset_config()


# ---- Evaluation grids ----

@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


def symmetric_points(stop: float, num: int) -> np.ndarray:
    """Odd-sized grid on [-stop, stop] with t[i] == -t[-1 - i] exactly and t[num // 2] == 0."""
    half = np.linspace(0.0, stop, num // 2 + 1)
    return np.concatenate([-half[:0:-1], half])


@pytest.fixture
def symmetric_grid() -> np.ndarray:
    """Grid symmetric around zero that contains t = 0."""
    return symmetric_points(20.0, 1001)


@pytest.fixture
def unit_grid() -> np.ndarray:
    """Grid on [-1, 1] with 201 points, including t = 0."""
    return symmetric_points(1.0, 201)


@pytest.fixture
def positive_grid() -> np.ndarray:
    """Grid on [0, 10]."""
    return np.linspace(0, 10, 201)


# ---- Parameter sets ----

@pytest.fixture
def log_chi_square_params() -> Dict[str, np.ndarray]:
    """Five log-chi-square components with equal weights."""
    return {"df": np.array([1.0, 2.0, 3.0, 4.0, 5.0]), "coef": np.full(5, 0.2)}


@pytest.fixture
def student_t_params() -> Dict[str, np.ndarray]:
    """Fifty Student t components with decreasing df and weights 1/k."""
    k = np.arange(1, 51)
    return {"df": k[::-1].astype(float), "coef": 1.0 / k}


@pytest.fixture
def inverse_gamma_params() -> Dict[str, np.ndarray]:
    """Fifty inverse-gamma components with weights 1/((k - 1/2) pi)^2."""
    k = np.arange(1, 51)
    return {"alpha": 2.5, "beta": 2.0, "coef": 1.0 / ((k - 0.5) * np.pi) ** 2}


@pytest.fixture
def log_beta_nc_params() -> Dict[str, np.ndarray]:
    """Three noncentral log-beta components."""
    return {
        "alpha": np.array([1.0, 2.0, 3.0]),
        "beta": np.array([3.0, 4.0, 5.0]),
        "delta": np.array([0.0, 1.0, 2.0]),
        "coef": np.full(3, -1.0 / 3.0),
    }


# ---- Hypothesis strategies ----

positive_shapes = st.floats(min_value=0.1, max_value=50.0, allow_nan=False, allow_infinity=False)
coefficients = st.floats(min_value=-5.0, max_value=5.0, allow_nan=False, allow_infinity=False)
grid_points = st.floats(min_value=-50.0, max_value=50.0, allow_nan=False, allow_infinity=False)
