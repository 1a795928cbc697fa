"""
charfun core module

Shared infrastructure for the characteristic function routines: the
exception hierarchy, configuration, type aliases, parameter broadcasting,
validation and result containers.
"""

import logging

# Set up module-level logger
logger = logging.getLogger("charfun.core")

from .exceptions import (
    CharFunError,
    ParameterError,
    DimensionError,
    DistributionError,
    ConfigurationError,
    CharFunWarning,
    ConvergenceWarning,
    NumericWarning,
)
from .config import (
    get_config,
    set_config,
    reset_config,
    get_numerical_config,
    get_logging_config,
)
from .results import MixtureSeriesResult, CharacteristicFunctionResult
from .parameters import ComponentParameters, broadcast_parameters
from .validation import (
    validate_grid,
    validate_convolution_order,
    validate_tolerance,
    finalize_cf,
)

__all__ = [
    'CharFunError',
    'ParameterError',
    'DimensionError',
    'DistributionError',
    'ConfigurationError',
    'CharFunWarning',
    'ConvergenceWarning',
    'NumericWarning',
    'get_config',
    'set_config',
    'reset_config',
    'get_numerical_config',
    'get_logging_config',
    'MixtureSeriesResult',
    'CharacteristicFunctionResult',
    'ComponentParameters',
    'broadcast_parameters',
    'validate_grid',
    'validate_convolution_order',
    'validate_tolerance',
    'finalize_cf',
]
