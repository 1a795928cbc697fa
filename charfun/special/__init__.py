"""
charfun special functions

Primitives the characteristic functions are built on: the complex log-gamma
function (Lanczos approximation with reflection and pole handling) and the
logarithm of the modified Bessel function of the second kind.
"""

import logging

# Set up module-level logger
logger = logging.getLogger("charfun.special")

from .loggamma import complex_loggamma, gamma
from .bessel import log_kv, kv

__all__ = [
    'complex_loggamma',
    'gamma',
    'log_kv',
    'kv',
]
