"""
charfun characteristic function families

Characteristic functions of linear combinations and convolutions of
independent random variables:

- cf_log_chi_square: log-transformed chi-square variables
- cf_student_t: Student's t variables
- cf_inverse_gamma: inverse-gamma variables
- cf_log_beta / cf_log_beta_nc: central and noncentral log-beta variables

All families share the chunked linear combinator, so arbitrarily long
parameter vectors are evaluated under a bounded memory footprint.
"""

import logging

# Set up module-level logger
logger = logging.getLogger("charfun.models.characteristic")

from .combinator import chunk_size_for, combine_components, iter_chunks, linear_combination_cf
from .log_chi_square import cf_log_chi_square
from .student_t import cf_student_t
from .inverse_gamma import cf_inverse_gamma
from .log_beta import cf_log_beta, cf_log_beta_nc, log_beta_central
from .poisson_mixture import poisson_mixture_cf
from .utils import cf_from_name, get_available_cfs

__all__ = [
    'chunk_size_for',
    'combine_components',
    'iter_chunks',
    'linear_combination_cf',
    'cf_log_chi_square',
    'cf_student_t',
    'cf_inverse_gamma',
    'cf_log_beta',
    'cf_log_beta_nc',
    'log_beta_central',
    'poisson_mixture_cf',
    'cf_from_name',
    'get_available_cfs',
]
