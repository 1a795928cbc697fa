# charfun/core/validation.py

"""
Validation utilities for characteristic function evaluation.

This module provides the checks shared by every CF routine: flattening the
evaluation grid while remembering its shape, validating the convolution order
and the series tolerance, and the common post-processing that forces
CF(0) = 1 exactly, restores the grid shape and applies n-fold convolution.
"""

import logging
import numbers
from typing import Optional, Tuple

import numpy as np

from charfun.core.config import get_config
from charfun.core.exceptions import raise_parameter_error, warn_numeric
from charfun.core.types import CFArray, GridColumn, GridLike
from charfun.utils.misc import ensure_array, is_scalar_like

logger = logging.getLogger("charfun.core.validation")


def validate_grid(t: GridLike) -> Tuple[GridColumn, Tuple[int, ...]]:
    """Flatten an evaluation grid to a real column.

    Args:
        t: Real values at which the CF is evaluated, any shape

    Returns:
        Tuple of (1-D float array, original shape)

    Raises:
        ParameterError: If the grid is complex or contains NaN values
    """
    grid = ensure_array(t)
    if np.iscomplexobj(grid):
        raise_parameter_error(
            "Evaluation grid must be real",
            param_name="t",
            param_value=grid,
            constraint="real values"
        )

    grid = grid.astype(np.float64, copy=False)
    if np.isnan(grid).any():
        raise_parameter_error(
            "Evaluation grid contains NaN values",
            param_name="t",
            param_value=grid,
            constraint="no NaN"
        )

    return grid.ravel(), grid.shape


def validate_parameter_bounds(
    value: float,
    param_name: str,
    lower_bound: Optional[float] = None,
    upper_bound: Optional[float] = None,
    lower_inclusive: bool = True,
    upper_inclusive: bool = True
) -> float:
    """Validate that a scalar parameter value is within specified bounds.

    Args:
        value: Parameter value to validate
        param_name: Name of the parameter for error messages
        lower_bound: Lower bound, or None for no lower bound
        upper_bound: Upper bound, or None for no upper bound
        lower_inclusive: Whether the lower bound is inclusive
        upper_inclusive: Whether the upper bound is inclusive

    Returns:
        float: The validated parameter value

    Raises:
        ParameterError: If the parameter value is outside the specified bounds
    """
    if lower_bound is not None:
        if lower_inclusive and value < lower_bound:
            raise_parameter_error(
                f"Parameter {param_name} must be >= {lower_bound}, got {value}",
                param_name=param_name,
                param_value=value,
                constraint=f">= {lower_bound}"
            )
        if not lower_inclusive and value <= lower_bound:
            raise_parameter_error(
                f"Parameter {param_name} must be > {lower_bound}, got {value}",
                param_name=param_name,
                param_value=value,
                constraint=f"> {lower_bound}"
            )

    if upper_bound is not None:
        if upper_inclusive and value > upper_bound:
            raise_parameter_error(
                f"Parameter {param_name} must be <= {upper_bound}, got {value}",
                param_name=param_name,
                param_value=value,
                constraint=f"<= {upper_bound}"
            )
        if not upper_inclusive and value >= upper_bound:
            raise_parameter_error(
                f"Parameter {param_name} must be < {upper_bound}, got {value}",
                param_name=param_name,
                param_value=value,
                constraint=f"< {upper_bound}"
            )

    return value


def validate_convolution_order(n: Optional[object]) -> int:
    """Validate the n-fold convolution order.

    Args:
        n: Positive integer scalar, or None for 1

    Returns:
        int: The convolution order

    Raises:
        ParameterError: If n is not a scalar, not integral, or smaller than 1
    """
    if n is None:
        return 1

    if not is_scalar_like(n):
        raise_parameter_error(
            "n should be a scalar (positive integer) value",
            param_name="n",
            param_value=n,
            constraint="positive integer scalar"
        )

    value = np.asarray(n).item()
    if (isinstance(value, bool) or not isinstance(value, numbers.Real)
            or not np.isfinite(value) or value != int(value)):
        raise_parameter_error(
            f"n should be a positive integer, got {value!r}",
            param_name="n",
            param_value=value,
            constraint="positive integer scalar"
        )

    return int(validate_parameter_bounds(int(value), "n", lower_bound=1))


def validate_tolerance(tol: Optional[float]) -> float:
    """Validate the Poisson series tolerance.

    Args:
        tol: Positive tolerance, or None for the configured default

    Returns:
        float: The tolerance

    Raises:
        ParameterError: If tol is not a positive scalar
    """
    if tol is None:
        return float(get_config("numerical", "series_tolerance"))

    if not is_scalar_like(tol):
        raise_parameter_error(
            "tol should be a positive scalar",
            param_name="tol",
            param_value=tol,
            constraint="> 0"
        )

    return float(validate_parameter_bounds(float(tol), "tol", lower_bound=0.0,
                                           lower_inclusive=False))


def finalize_cf(cf: np.ndarray,
                t: GridColumn,
                shape: Tuple[int, ...],
                n: int = 1) -> CFArray:
    """Apply the post-processing shared by every CF family.

    The entries at t == 0 are set to exactly 1 + 0i, the column is reshaped
    to the caller's grid shape and raised to the n-th power.

    Args:
        cf: Complex CF column of the combined variable
        t: Flattened evaluation grid
        shape: Shape of the caller's grid
        n: Convolution order

    Returns:
        CFArray: Complex array with the caller's grid shape
    """
    cf = np.asarray(cf, dtype=np.complex128)
    cf = np.where(t == 0, 1.0 + 0.0j, cf)

    bad = ~np.isfinite(cf)
    if bad.any():
        logger.debug(f"{int(bad.sum())} non-finite CF values on a grid of {t.size}")
        warn_numeric(
            "Characteristic function has non-finite values",
            operation="characteristic function evaluation",
            issue=f"{int(bad.sum())} non-finite values",
            value=t[bad]
        )

    cf = cf.reshape(shape)
    if n != 1:
        cf = cf ** n
    return cf
