'''
Name-based access to the characteristic function families.

Inversion routines consume a CF as a single-argument callable. cf_from_name
binds the family parameters of a registered CF so that the result maps a real
grid to complex values and nothing else.
'''

import logging
from functools import partial
from typing import Any, Callable, Dict, List

from charfun.core.exceptions import DistributionError
from charfun.core.types import CFCallable
from charfun.models.characteristic.inverse_gamma import cf_inverse_gamma
from charfun.models.characteristic.log_beta import cf_log_beta, cf_log_beta_nc
from charfun.models.characteristic.log_chi_square import cf_log_chi_square
from charfun.models.characteristic.student_t import cf_student_t

logger = logging.getLogger("charfun.models.characteristic.utils")

_REGISTRY: Dict[str, Callable[..., Any]] = {
    "log_chi_square": cf_log_chi_square,
    "student_t": cf_student_t,
    "inverse_gamma": cf_inverse_gamma,
    "log_beta": cf_log_beta,
    "log_beta_nc": cf_log_beta_nc,
}

_ALIASES = {
    "logchisquare": "log_chi_square",
    "t": "student_t",
    "student": "student_t",
    "invgamma": "inverse_gamma",
    "logbeta": "log_beta",
    "logbetanc": "log_beta_nc",
}


def _canonical_name(name: str) -> str:
    key = name.strip().lower().replace("-", "_")
    return _ALIASES.get(key.replace("_", ""), key)


def get_available_cfs() -> List[str]:
    """Return the names of the registered CF families."""
    return sorted(_REGISTRY)


def cf_from_name(name: str, **params: Any) -> CFCallable:
    """
    Bind the parameters of a named CF family.

    Args:
        name: Family name, e.g. 'student_t' or 'log_beta_nc' (case-insensitive)
        **params: Keyword parameters of the family function, e.g. df, coef, n

    Returns:
        CFCallable: Function of the evaluation grid only

    Raises:
        DistributionError: If the family is unknown, or full_output is requested

    Examples:
        >>> cf = cf_from_name('student_t', df=[3, 5], coef=[0.5, 0.5])
        >>> complex(cf([0.0])[0])
        (1+0j)
    """
    key = _canonical_name(name)
    if key not in _REGISTRY:
        raise DistributionError(
            f"Unknown characteristic function family: {name!r}",
            distribution_type=name,
            issue=f"available families are {', '.join(get_available_cfs())}"
        )
    if params.get("full_output"):
        raise DistributionError(
            "A bound CF must return the bare complex array; full_output is not allowed",
            distribution_type=key,
            issue="full_output=True"
        )

    logger.debug(f"Binding CF family {key} with parameters {sorted(params)}")
    return partial(_REGISTRY[key], **params)
