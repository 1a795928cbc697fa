'''
CF of linear combinations of log-transformed chi-square random variables.

For X ~ ChiSquare(df) the CF of log(X) follows from the moments of X,
E(X^r) = 2^r G(df/2 + r) / G(df/2), evaluated at r = i t:

    cf(t) = 2^(i t) G(df/2 + i t) / G(df/2).

The CF of Y = coef_1 log(X_1) + ... + coef_N log(X_N) is the product of
cf_k(coef_k t). Everything is evaluated in log space with the complex
log-gamma function and exponentiated once per grid point.
'''

import logging
from typing import Dict, Optional

import numpy as np

from charfun.core.parameters import broadcast_parameters, validate_positive_parameters
from charfun.core.types import CFArray, GridColumn, GridLike, ParameterLike
from charfun.models.characteristic.combinator import linear_combination_cf
from charfun.special.loggamma import complex_loggamma

logger = logging.getLogger("charfun.models.characteristic.log_chi_square")

DEFAULTS = {"df": 1.0, "coef": 1.0}


def log_chi_square_components(t: GridColumn, params: Dict[str, np.ndarray]) -> np.ndarray:
    """Per-component log-CF matrix of coef_k * log(ChiSquare(df_k)).

    Args:
        t: Flattened real evaluation grid
        params: Parameter slice with 'df' and 'coef' vectors of length k

    Returns:
        np.ndarray: Complex |t| x k matrix of log-CF values
    """
    half_df = params["df"] / 2.0
    u = np.outer(t, params["coef"])
    iu = 1j * u
    aux = complex_loggamma(half_df + iu) - complex_loggamma(half_df) + iu * np.log(2.0)
    return np.where(u == 0, 0.0, aux)


def cf_log_chi_square(t: GridLike,
                      df: Optional[ParameterLike] = None,
                      coef: Optional[ParameterLike] = None,
                      n: Optional[int] = None,
                      chunk_size: Optional[int] = None) -> CFArray:
    """
    CF of a linear combination of independent log-chi-square variables.

    Evaluates the characteristic function of
    Y = coef_1 log(X_1) + ... + coef_N log(X_N), X_k ~ ChiSquare(df_k), and of
    the sum of n independent copies of Y.

    Args:
        t: Real values where the CF is evaluated, any shape
        df: Degrees of freedom df_k > 0, scalar or vector (default 1)
        coef: Coefficients of the linear combination, scalar or vector (default 1)
        n: Convolution order, a positive integer (default 1)
        chunk_size: Components per evaluation chunk (default from configuration)

    Returns:
        CFArray: Complex CF values with the shape of t

    Raises:
        DimensionError: If df and coef cannot be broadcast to a common length
        ParameterError: If df is not positive or n is not a positive integer

    Examples:
        >>> import numpy as np
        >>> t = np.linspace(-20, 20, 1001)
        >>> cf = cf_log_chi_square(t, df=[1, 2, 3, 4, 5], coef=0.2)
        >>> complex(cf[500])
        (1+0j)
    """
    params = broadcast_parameters({"df": df, "coef": coef}, DEFAULTS)
    validate_positive_parameters(params, "df")
    return linear_combination_cf(t, params, log_chi_square_components, mode="log",
                                 n=n, chunk_size=chunk_size)
