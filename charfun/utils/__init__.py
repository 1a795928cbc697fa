"""
charfun utilities

Helper functions used across the package and the log-scale back-transform
applied to distributions recovered from CFs of log-transformed variables.
"""

import logging

# Set up module-level logger
logger = logging.getLogger("charfun.utils")

from .misc import ensure_array, is_scalar_like
from .transforms import log_cdf_to_cdf

__all__ = [
    'ensure_array',
    'is_scalar_like',
    'log_cdf_to_cdf',
]
