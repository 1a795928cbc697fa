"""
charfun models

Model families of the package. Currently holds the characteristic function
families in charfun.models.characteristic.
"""

import logging

# Set up module-level logger
logger = logging.getLogger("charfun.models")

from . import characteristic

__all__ = ['characteristic']
