"""
Modified Bessel function of the second kind in logarithmic form.

The Student t and inverse-gamma CFs multiply K_v by powers of its argument.
Both factors overflow or underflow long before their product does, so the
CF routines work with log K_v(z). It is computed from the exponentially
scaled scipy.special.kve as log(kve(v, z)) - z. Where kve overflows, large
orders use the uniform (Debye) asymptotic expansion of K_v(v x), and small
orders, which only overflow at tiny arguments, use the leading term of the
small-argument expansion, log G(v) + (v - 1) log 2 - v log z.

References:
    NIST Digital Library of Mathematical Functions, 10.41(ii)
"""

import logging

import numpy as np
from scipy import special

logger = logging.getLogger("charfun.special.bessel")

# Orders from which the uniform expansion replaces the small-argument term
DEBYE_MIN_ORDER = 50.0


def _debye_polynomials(p: np.ndarray):
    """Debye polynomials u_1(p) .. u_4(p)."""
    p2 = p * p
    u1 = p * (3.0 - 5.0 * p2) / 24.0
    u2 = p2 * (81.0 - 462.0 * p2 + 385.0 * p2 ** 2) / 1152.0
    u3 = p * p2 * (30375.0 - 369603.0 * p2 + 765765.0 * p2 ** 2
                   - 425425.0 * p2 ** 3) / 414720.0
    u4 = p2 ** 2 * (4465125.0 - 94121676.0 * p2 + 349922430.0 * p2 ** 2
                    - 446185740.0 * p2 ** 3 + 185910725.0 * p2 ** 4) / 39813120.0
    return u1, u2, u3, u4


def log_kv_uniform(v, z) -> np.ndarray:
    """
    log K_v(z) from the uniform asymptotic expansion for large order.

    With x = z / v, r = sqrt(1 + x^2), p = 1 / r and
    eta = r + log(x / (1 + r)),

        K_v(v x) ~ sqrt(pi / (2 v)) exp(-v eta) / sqrt(r) * sum_k (-1)^k u_k(p) / v^k.

    The expansion holds uniformly in x for Re(x) > 0; five terms give close
    to double precision for v >= 50.

    Args:
        v: Positive order(s)
        z: Real or complex argument(s) with positive real part

    Returns:
        np.ndarray: log K_v(z) with the broadcast shape of v and z
    """
    v, z = np.broadcast_arrays(np.asarray(v, dtype=np.float64), np.asarray(z))
    x = z / v
    r = np.sqrt(1.0 + x * x)
    eta = r + np.log(x / (1.0 + r))
    u1, u2, u3, u4 = _debye_polynomials(1.0 / r)
    series = 1.0 - u1 / v + u2 / v ** 2 - u3 / v ** 3 + u4 / v ** 4
    return (0.5 * np.log(np.pi / (2.0 * v)) - v * eta - 0.5 * np.log(r)
            + np.log(series))


def log_kv(v, z) -> np.ndarray:
    """
    Logarithm of the modified Bessel function of the second kind.

    Args:
        v: Real order(s)
        z: Real or complex argument(s), broadcast against v

    Returns:
        np.ndarray: log K_v(z) with the broadcast shape of v and z; complex
        when z is complex
    """
    v, z = np.broadcast_arrays(np.asarray(v, dtype=np.float64), np.asarray(z))
    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        out = np.log(special.kve(v, z)) - z

    # K_v(0) is infinite; only finite non-zero arguments get an expansion
    overflow = ~np.isfinite(out) & (z != 0) & np.isfinite(z)
    if np.any(overflow):
        order = np.abs(v[overflow])
        arg = z[overflow]
        large = order >= DEBYE_MIN_ORDER
        logger.debug(f"log_kv: asymptotic expansion for {int(overflow.sum())} values "
                     f"({int(large.sum())} of large order)")
        with np.errstate(divide='ignore', invalid='ignore'):
            small_arg = (special.gammaln(order) + (order - 1.0) * np.log(2.0)
                         - order * np.log(arg))
            uniform = log_kv_uniform(np.where(large, order, DEBYE_MIN_ORDER), arg)
        out = np.array(out, copy=True)
        out[overflow] = np.where(large, uniform, small_arg)
    return out


def kv(v, z) -> np.ndarray:
    """Modified Bessel function of the second kind, exp(log_kv(v, z))."""
    with np.errstate(over='ignore', under='ignore'):
        return np.exp(log_kv(v, z))
