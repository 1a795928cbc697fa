'''
CFs of linear combinations of log-transformed beta random variables.

For X ~ Beta(alpha, beta) the CF of log(X) is the ratio of gamma functions

    cf(t) = G(alpha + i t) G(alpha + beta) / (G(alpha) G(alpha + beta + i t)),

evaluated in log space with the complex log-gamma function. The noncentral
beta distribution with noncentrality delta is a Poisson(delta/2) mixture of
Beta(alpha + j, beta) densities, so the CF of its logarithm is the
corresponding mixture of central CFs (see poisson_mixture).

Linear combinations of log-beta variables arise as the null distributions of
likelihood ratio test statistics in multivariate analysis, e.g. Bartlett's
test for the equality of covariance matrices.
'''

import logging
from typing import Dict, List, Optional, Union

import numpy as np

from charfun.core.exceptions import warn_convergence
from charfun.core.parameters import (
    broadcast_parameters, validate_nonnegative_parameters, validate_positive_parameters
)
from charfun.core.results import CharacteristicFunctionResult, MixtureSeriesResult
from charfun.core.types import CFArray, GridColumn, GridLike, ParameterLike
from charfun.core.validation import validate_tolerance
from charfun.models.characteristic.combinator import linear_combination_cf
from charfun.models.characteristic.poisson_mixture import poisson_mixture_cf
from charfun.special.loggamma import complex_loggamma

logger = logging.getLogger("charfun.models.characteristic.log_beta")

DEFAULTS = {"alpha": 1.0, "beta": 1.0, "coef": 1.0}
NC_DEFAULTS = {"alpha": 1.0, "beta": 1.0, "delta": 0.0, "coef": 1.0}


def _log_beta_log_cf(u: np.ndarray, alpha, beta) -> np.ndarray:
    iu = 1j * u
    aux = (complex_loggamma(alpha + iu) - complex_loggamma(alpha)
           + complex_loggamma(alpha + beta) - complex_loggamma(alpha + beta + iu))
    return np.where(u == 0, 0.0, aux)


def log_beta_central(t: GridColumn, alpha: float, beta: float) -> np.ndarray:
    """CF column of log(Beta(alpha, beta)) at the points t."""
    with np.errstate(over='ignore', under='ignore'):
        return np.exp(_log_beta_log_cf(np.asarray(t, dtype=np.float64), alpha, beta))


def log_beta_components(t: GridColumn, params: Dict[str, np.ndarray]) -> np.ndarray:
    """Per-component log-CF matrix of coef_k * log(Beta(alpha_k, beta_k))."""
    u = np.outer(t, params["coef"])
    return _log_beta_log_cf(u, params["alpha"], params["beta"])


def cf_log_beta(t: GridLike,
                alpha: Optional[ParameterLike] = None,
                beta: Optional[ParameterLike] = None,
                coef: Optional[ParameterLike] = None,
                n: Optional[int] = None,
                chunk_size: Optional[int] = None) -> CFArray:
    """
    CF of a linear combination of independent log-beta variables.

    Args:
        t: Real values where the CF is evaluated, any shape
        alpha: First shape parameters alpha_k > 0 (default 1)
        beta: Second shape parameters beta_k > 0 (default 1)
        coef: Coefficients of the linear combination (default 1)
        n: Convolution order, a positive integer (default 1)
        chunk_size: Components per evaluation chunk (default from configuration)

    Returns:
        CFArray: Complex CF values with the shape of t
    """
    params = broadcast_parameters({"alpha": alpha, "beta": beta, "coef": coef}, DEFAULTS)
    validate_positive_parameters(params, "alpha", "beta")
    return linear_combination_cf(t, params, log_beta_components, mode="log",
                                 n=n, chunk_size=chunk_size)


def cf_log_beta_nc(t: GridLike,
                   alpha: Optional[ParameterLike] = None,
                   beta: Optional[ParameterLike] = None,
                   delta: Optional[ParameterLike] = None,
                   coef: Optional[ParameterLike] = None,
                   n: Optional[int] = None,
                   tol: Optional[float] = None,
                   chunk_size: Optional[int] = None,
                   full_output: bool = False
                   ) -> Union[CFArray, CharacteristicFunctionResult]:
    """
    CF of a linear combination of independent noncentral log-beta variables.

    Evaluates the characteristic function of
    Y = coef_1 log(X_1) + ... + coef_N log(X_N) with
    X_k ~ NoncentralBeta(alpha_k, beta_k, delta_k), and of the sum of n
    independent copies of Y. Each component is a Poisson mixture series;
    components with delta_k = 0 are evaluated as central log-beta variables.

    Args:
        t: Real values where the CF is evaluated, any shape
        alpha: First shape parameters alpha_k > 0 (default 1)
        beta: Second shape parameters beta_k > 0 (default 1)
        delta: Noncentrality parameters delta_k >= 0 (default 0)
        coef: Coefficients of the linear combination (default 1)
        n: Convolution order, a positive integer (default 1)
        tol: Truncation tolerance of the Poisson series (configured default 1e-12)
        chunk_size: Components per evaluation chunk (default from configuration)
        full_output: Return a CharacteristicFunctionResult with the convergence
            status and per-component diagnostics instead of the bare array

    Returns:
        The complex CF values with the shape of t, or a
        CharacteristicFunctionResult when full_output is True

    Raises:
        DimensionError: If the parameters cannot be broadcast to a common length
        ParameterError: If alpha or beta is not positive, delta is negative,
            or n or tol is invalid

    Warns:
        ConvergenceWarning: If a series hit its iteration cap before reaching
            tol; the returned values are then partial sums

    Examples:
        >>> import numpy as np
        >>> cf = cf_log_beta_nc(np.linspace(-5, 5, 101), alpha=[1, 2, 3],
        ...                     beta=[3, 4, 5], delta=[0, 1, 2], coef=-1 / 3)
        >>> complex(cf[50])
        (1+0j)
    """
    params = broadcast_parameters(
        {"alpha": alpha, "beta": beta, "delta": delta, "coef": coef}, NC_DEFAULTS)
    validate_positive_parameters(params, "alpha", "beta")
    validate_nonnegative_parameters(params, "delta")
    tol = validate_tolerance(tol)

    series: List[MixtureSeriesResult] = []

    def kernel(grid: GridColumn, block: Dict[str, np.ndarray]) -> np.ndarray:
        columns = []
        for a, b, d, c in zip(block["alpha"], block["beta"], block["delta"], block["coef"]):
            result = poisson_mixture_cf(c * grid, log_beta_central, a, b, d, tol=tol)
            series.append(result)
            columns.append(result.cf)
        return np.column_stack(columns)

    cf = linear_combination_cf(t, params, kernel, mode="product", n=n,
                               chunk_size=chunk_size)

    failed = [s for s in series if not s.converged]
    if failed:
        logger.warning(f"{len(failed)} of {len(series)} Poisson series did not "
                       f"reach tol={tol:.1e}; returning partial sums")
        worst = max(failed, key=lambda s: s.last_weight)
        warn_convergence(
            "Poisson mixture series did not converge within the iteration cap",
            iterations=worst.n_terms,
            tolerance=tol,
            last_weight=worst.last_weight,
            context={"Components": len(failed), "Delta": worst.delta}
        )

    if not full_output:
        return cf

    return CharacteristicFunctionResult(
        family="log_beta_nc",
        cf=cf,
        converged=not failed,
        components=series,
        metadata={"n_components": params.size, "tolerance": tol}
    )
