# charfun/utils/transforms.py
"""
Back-transforms between log-scale and original-scale distributions.

A CF of a log-transformed variable inverts to the distribution of log(X).
The CDF of X itself is the same function read on an exponentiated support,
so the back-transform is a relabeling of the grid with the CDF unchanged.
"""

from typing import Any, Mapping, Optional, Tuple

import numpy as np

from charfun.core.exceptions import raise_parameter_error
from charfun.utils.misc import ensure_array


def _field(result: Any, name: str) -> Any:
    if isinstance(result, Mapping):
        return result.get(name)
    return getattr(result, name, None)


def log_cdf_to_cdf(log_x: Any, log_cdf: Optional[Any] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Map the CDF of log(X) to the CDF of X.

    Args:
        log_x: Support grid of log(X), or an inversion result (mapping or
            object) holding the grid under ``x`` and the CDF under ``cdf``
        log_cdf: CDF values of log(X) at log_x

    Returns:
        Tuple of (x, cdf) with x = exp(log_x) and cdf unchanged

    Raises:
        ParameterError: If the CDF values are missing

    Examples:
        >>> x, cdf = log_cdf_to_cdf([0.0, 1.0], [0.5, 0.9])
        >>> x.round(4).tolist(), cdf.tolist()
        ([1.0, 2.7183], [0.5, 0.9])
    """
    if log_cdf is None:
        result = log_x
        log_x = _field(result, "x")
        log_cdf = _field(result, "cdf")
        if log_x is None or log_cdf is None:
            raise_parameter_error(
                "Missing inputs: provide log_x and log_cdf, or a result with 'x' and 'cdf'",
                param_name="log_cdf",
                constraint="required"
            )

    x = np.exp(ensure_array(log_x, dtype=np.float64))
    cdf = ensure_array(log_cdf, dtype=np.float64)
    return x, cdf
