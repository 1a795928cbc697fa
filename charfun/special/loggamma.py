"""
Natural logarithm of the gamma function over the complex plane.

complex_loggamma evaluates log G(z) element-wise for complex (or real) arrays
of any shape using the Lanczos approximation with g = 607/128 and a fixed
15-term coefficient table. Points with a negative real part go through the
reflection formula, z = 1 and z = 2 return exactly 0, and the poles at the
non-positive integers return +inf instead of NaN.

The imaginary part is a branch of the logarithm, not necessarily the
principal one; exp(complex_loggamma(z)) is G(z) on every branch, and sums of
log-gamma values are meant to be exponentiated.

References:
    C. Lanczos, SIAM JNA 1, 1964, pp. 86-96
    Y. Luke, "The Special Functions and their Approximations", 1969, pp. 29-31
    J. Spouge, SIAM JNA 31, 1994, pp. 931
"""

import logging

import numpy as np

from charfun.core.types import GridLike
from charfun.special._numba_core import LANCZOS_COEFFICIENTS, loggamma_kernel
from charfun.utils.misc import ensure_array

logger = logging.getLogger("charfun.special.loggamma")


def complex_loggamma(z: GridLike) -> np.ndarray:
    """
    Complex log-gamma function.

    Args:
        z: Complex or real values of any shape

    Returns:
        np.ndarray: Complex array of log G(z) with the shape of z; +inf at
        the non-positive integers

    Examples:
        >>> complex_loggamma([1.0, 2.0]).real.tolist()
        [0.0, 0.0]
        >>> float(np.exp(complex_loggamma(5.0)).real.round(10))
        24.0
    """
    values = ensure_array(z).astype(np.complex128)
    shape = values.shape
    if values.size == 0:
        return values

    out = loggamma_kernel(np.ascontiguousarray(values.ravel()), LANCZOS_COEFFICIENTS)
    return out.reshape(shape)


def gamma(z: GridLike) -> np.ndarray:
    """Complex gamma function, exp(complex_loggamma(z))."""
    with np.errstate(over='ignore'):
        return np.exp(complex_loggamma(z))
