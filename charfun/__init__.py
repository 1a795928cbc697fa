# charfun/__init__.py
"""
charfun - characteristic functions of linear combinations of random variables

The package evaluates characteristic functions (CFs) of weighted sums and
n-fold convolutions of independent random variables from several parametric
families. The CFs are meant to be handed to a numerical inversion routine
(Gil-Pelaez) to recover densities, distribution functions and quantiles.

Provided are:
- A complex log-gamma function valid over the whole complex plane
- CFs of linear combinations of log-chi-square, Student t, inverse-gamma and
  central or noncentral log-beta variables
- A chunked linear combinator that bounds memory for long parameter vectors
- The back-transform from the CDF of log(X) to the CDF of X
"""

import logging
from typing import List, Union

from .version import __version__, get_version_info, get_version_components

# Set up package-wide logger; handlers are attached by the configuration manager
logger = logging.getLogger("charfun")

from . import core
from . import special
from . import models
from . import utils
from .core.config import initialize_config, get_config, set_config, reset_config
from .core.exceptions import (
    CharFunError,
    ParameterError,
    DimensionError,
    DistributionError,
    ConfigurationError,
    CharFunWarning,
    ConvergenceWarning,
    NumericWarning,
)
from .core.results import CharacteristicFunctionResult, MixtureSeriesResult
from .special import complex_loggamma, log_kv
from .models.characteristic import (
    cf_log_chi_square,
    cf_student_t,
    cf_inverse_gamma,
    cf_log_beta,
    cf_log_beta_nc,
    cf_from_name,
    get_available_cfs,
    linear_combination_cf,
    poisson_mixture_cf,
)
from .utils import log_cdf_to_cdf


def get_version() -> str:
    """Return the version of charfun as MAJOR.MINOR.PATCH."""
    return __version__


def set_log_level(level: Union[str, int]) -> None:
    """
    Set the logging level of the charfun logger.

    Args:
        level: Logging level, either as string ('DEBUG', 'INFO', 'WARNING',
            'ERROR', 'CRITICAL') or as an integer constant from the logging module
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logger.setLevel(level)
    logger.info(f"Log level set to {logging.getLevelName(level)}")


def list_available_cfs() -> List[str]:
    """List the registered characteristic function families."""
    return get_available_cfs()


initialize_config()

__all__ = [
    # Subpackages
    'core',
    'special',
    'models',
    'utils',

    # Configuration and logging
    'initialize_config',
    'get_config',
    'set_config',
    'reset_config',
    'get_version',
    'get_version_info',
    'get_version_components',
    'set_log_level',
    'list_available_cfs',

    # Errors and warnings
    'CharFunError',
    'ParameterError',
    'DimensionError',
    'DistributionError',
    'ConfigurationError',
    'CharFunWarning',
    'ConvergenceWarning',
    'NumericWarning',

    # Results
    'CharacteristicFunctionResult',
    'MixtureSeriesResult',

    # Special functions
    'complex_loggamma',
    'log_kv',

    # Characteristic functions
    'cf_log_chi_square',
    'cf_student_t',
    'cf_inverse_gamma',
    'cf_log_beta',
    'cf_log_beta_nc',
    'cf_from_name',
    'get_available_cfs',
    'linear_combination_cf',
    'poisson_mixture_cf',
    'log_cdf_to_cdf',
]
