'''
Noncentral CFs as Poisson-weighted mixtures of central CFs.

A noncentral variable with noncentrality delta has the density of a
Poisson(delta/2) mixture over j = 0, 1, 2, ... of a central density whose
first shape parameter is shifted by j. Its CF is therefore

    cf(t) = sum_j P(J = j) cf_central(t; alpha + j, beta),   J ~ Poisson(delta/2).

The Poisson weights are unimodal, so the series is started at the mode
j0 = floor(delta/2) and walked outward in both directions until the weights
fall below the tolerance. This needs the fewest central evaluations for any
delta. The ascending branch is capped; a capped series is returned as a
partial sum flagged as not converged.
'''

import logging
from typing import Optional

import numpy as np
from scipy import special

from charfun.core.config import get_numerical_config
from charfun.core.exceptions import raise_parameter_error
from charfun.core.results import MixtureSeriesResult
from charfun.core.types import CentralCF, GridColumn
from charfun.core.validation import validate_tolerance

logger = logging.getLogger("charfun.models.characteristic.poisson_mixture")


def poisson_log_weight(j: int, rate: float) -> float:
    """Log of the Poisson(rate) probability of j."""
    return -rate + j * np.log(rate) - special.gammaln(j + 1.0)


def poisson_mixture_cf(t: GridColumn,
                       central_cf: CentralCF,
                       alpha: float,
                       beta: float,
                       delta: float,
                       tol: Optional[float] = None,
                       max_terms: Optional[int] = None) -> MixtureSeriesResult:
    """
    Sum the Poisson-weighted series of shifted central CFs.

    Args:
        t: Real grid column (already scaled by the component coefficient)
        central_cf: Central evaluator (t, alpha, beta) -> complex column
        alpha: First shape parameter of the central family, shifted by j
        beta: Second shape parameter of the central family
        delta: Noncentrality parameter, delta >= 0
        tol: Weight below which a branch stops (configured default 1e-12)
        max_terms: Iteration cap of the ascending branch (configured default 5000)

    Returns:
        MixtureSeriesResult: The (possibly partial) CF column and diagnostics

    Raises:
        ParameterError: If delta is negative or not finite
    """
    tol = validate_tolerance(tol)
    if max_terms is None:
        max_terms = get_numerical_config().max_series_terms

    if not np.isfinite(delta) or delta < 0:
        raise_parameter_error(
            f"delta should be nonnegative, got {delta}",
            param_name="delta",
            param_value=delta,
            constraint=">= 0"
        )

    if delta == 0:
        return MixtureSeriesResult(cf=central_cf(t, alpha, beta), converged=True,
                                   n_terms=1, last_weight=0.0, delta=delta,
                                   tolerance=tol)

    rate = delta / 2.0
    j0 = int(np.floor(rate))
    p0 = float(np.exp(poisson_log_weight(j0, rate)))
    cf = p0 * central_cf(t, alpha + j0, beta)
    n_terms = 1

    # Descending branch, towards j = 0
    p = p0
    j = j0 - 1
    while j >= 0 and p > tol:
        p = p * (j + 1) / rate
        cf = cf + p * central_cf(t, alpha + j, beta)
        n_terms += 1
        j -= 1

    # Ascending branch, capped at max_terms
    p = p0
    j = j0 + 1
    i = 0
    while p > tol and i < max_terms:
        p = p * rate / j
        cf = cf + p * central_cf(t, alpha + j, beta)
        n_terms += 1
        j += 1
        i += 1

    converged = p <= tol
    if not converged:
        logger.debug(f"Poisson series for delta={delta} stopped after {i} ascending "
                     f"terms with weight {p:.3e} > {tol:.1e}")

    return MixtureSeriesResult(cf=cf, converged=converged, n_terms=n_terms,
                               last_weight=float(p), delta=float(delta), tolerance=tol)
