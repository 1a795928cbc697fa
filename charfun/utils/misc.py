# charfun/utils/misc.py
"""
Miscellaneous helper functions.

Functions:
    ensure_array: Ensure input is a NumPy array
    is_scalar_like: Check whether a value holds exactly one element
"""

from typing import Any, Optional

import numpy as np
import pandas as pd


def ensure_array(data: Any, dtype: Optional[np.dtype] = None) -> np.ndarray:
    """
    Ensure input is a NumPy array.

    This function converts the input to a NumPy array if it isn't already,
    optionally with a specified data type.

    Args:
        data: Input data to convert to a NumPy array
        dtype: NumPy data type to use for the array (optional)

    Returns:
        Input data as a NumPy array

    Examples:
        >>> from charfun.utils.misc import ensure_array
        >>> ensure_array([1, 2, 3])
        array([1, 2, 3])
        >>> import pandas as pd
        >>> ensure_array(pd.Series([1, 2, 3]))
        array([1, 2, 3])
    """
    if isinstance(data, np.ndarray) and (dtype is None or data.dtype == dtype):
        return data

    if isinstance(data, (pd.Series, pd.DataFrame)):
        return data.to_numpy() if dtype is None else data.to_numpy(dtype=dtype)

    return np.array(data) if dtype is None else np.array(data, dtype=dtype)


def is_scalar_like(value: Any) -> bool:
    """Return True for Python/NumPy scalars and single-element 0-d arrays."""
    if isinstance(value, (pd.Series, pd.DataFrame, list, tuple)):
        return False
    return np.ndim(value) == 0
