'''
CF of linear combinations of Student's t random variables.

The CF of X ~ t(df) is

    cf(t) = K_{df/2}(sqrt(df) |t|) (sqrt(df) |t|)^(df/2) / (2^(df/2 - 1) G(df/2)),

where K is the modified Bessel function of the second kind. For large df or
|t| the Bessel factor and the power overflow in opposite directions, so each
component is evaluated as a logarithm,

    log cf(t) = (df/2) log(a) + log K_{df/2}(a) - (df/2 - 1) log 2 - log G(df/2),

with a = sqrt(df) |coef t|, and the components are summed in log space.

References:
    Witkovsky, V. (2001). On the exact computation of the density and of the
    quantiles of linear combinations of t and F random variables. Journal of
    Statistical Planning and Inference 94, 1-13.
'''

import logging
from typing import Dict, Optional

import numpy as np
from scipy import special

from charfun.core.parameters import broadcast_parameters, validate_positive_parameters
from charfun.core.types import CFArray, GridColumn, GridLike, ParameterLike
from charfun.models.characteristic.combinator import linear_combination_cf
from charfun.special.bessel import log_kv

logger = logging.getLogger("charfun.models.characteristic.student_t")

DEFAULTS = {"df": 1.0, "coef": 1.0}


def student_t_components(t: GridColumn, params: Dict[str, np.ndarray]) -> np.ndarray:
    """Per-component log-CF matrix of coef_k * t(df_k).

    Args:
        t: Flattened real evaluation grid
        params: Parameter slice with 'df' and 'coef' vectors of length k

    Returns:
        np.ndarray: Real |t| x k matrix of log-CF values
    """
    df = params["df"]
    half_df = df / 2.0
    a = np.outer(np.abs(t), np.sqrt(df) * np.abs(params["coef"]))
    with np.errstate(divide='ignore', invalid='ignore'):
        aux = half_df * np.log(a) + log_kv(half_df, a)
    aux = aux - (half_df - 1.0) * np.log(2.0) - special.gammaln(half_df)
    return np.where(a == 0, 0.0, aux)


def cf_student_t(t: GridLike,
                 df: Optional[ParameterLike] = None,
                 coef: Optional[ParameterLike] = None,
                 n: Optional[int] = None,
                 chunk_size: Optional[int] = None) -> CFArray:
    """
    CF of a linear combination of independent Student's t variables.

    Evaluates the characteristic function of Y = coef_1 X_1 + ... + coef_N X_N,
    X_k ~ t(df_k), and of the sum of n independent copies of Y.

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
        >>> k = np.arange(1, 51)
        >>> cf = cf_student_t(np.linspace(-1, 1, 201), df=k[::-1], coef=1 / k)
        >>> bool(np.all(np.isfinite(cf)))
        True
    """
    params = broadcast_parameters({"df": df, "coef": coef}, DEFAULTS)
    validate_positive_parameters(params, "df")
    return linear_combination_cf(t, params, student_t_components, mode="log",
                                 n=n, chunk_size=chunk_size)
