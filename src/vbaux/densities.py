"""Gamma and inverse-gamma log densities and entropies.

Conventions
-----------
The gamma distribution uses shape ``a`` and rate ``b``; the inverse-gamma
distribution uses shape ``a`` and scale ``b``, so that ``1/X ~ Gamma(a, b)``
when ``X ~ InvGamma(a, b)``. The density functions take the value together
with its precomputed logarithm because variational updates already carry
both expectations.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from vbaux._core import broadcast_pair, require_positive, scalar_or_array
from vbaux.special import digamma_func, gamma_func
from vbaux.typing import FloatLike


def gamd(
    x: FloatLike,
    logx: FloatLike,
    a: float,
    b: float,
) -> float | NDArray[np.float64]:
    """Log density of Gamma(shape=a, rate=b).

    ``a log b - log Gamma(a) + (a - 1) logx - b x``

    Parameters
    ----------
    x : float or array_like
        Value (or expectation ``E[x]``).
    logx : float or array_like
        ``log x`` (or ``E[log x]``).
    a, b : float
        Shape and rate, both positive.

    Returns
    -------
    float or ndarray
        Log density, broadcast over ``x`` and ``logx``.
    """
    require_positive(a, "a")
    require_positive(b, "b")
    x, logx = broadcast_pair(x, logx, ("x", "logx"))
    result = a * np.log(b) - gamma_func(a) + (a - 1.0) * logx - b * x
    return scalar_or_array(np.asarray(result))


def invgamd(
    invx: FloatLike,
    logx: FloatLike,
    a: float,
    b: float,
) -> float | NDArray[np.float64]:
    """Log density of InvGamma(shape=a, scale=b) at ``x``.

    ``a log b - log Gamma(a) - (a + 1) logx - b invx``

    Parameters
    ----------
    invx : float or array_like
        ``1/x`` (or ``E[1/x]``).
    logx : float or array_like
        ``log x`` (or ``E[log x]``).
    a, b : float
        Shape and scale, both positive.
    """
    require_positive(a, "a")
    require_positive(b, "b")
    invx, logx = broadcast_pair(invx, logx, ("invx", "logx"))
    result = a * np.log(b) - gamma_func(a) - (a + 1.0) * logx - b * invx
    return scalar_or_array(np.asarray(result))


def gamh(a: float, b: float) -> float:
    """Differential entropy of Gamma(shape=a, rate=b).

    ``a - log b + log Gamma(a) + (1 - a) psi(a)``
    """
    require_positive(a, "a")
    require_positive(b, "b")
    return float(a - np.log(b) + gamma_func(a) + (1.0 - a) * digamma_func(a))


def invgamh(a: float, b: float) -> float:
    """Differential entropy of InvGamma(shape=a, scale=b).

    ``a + log b + log Gamma(a) - (1 + a) psi(a)``
    """
    require_positive(a, "a")
    require_positive(b, "b")
    return float(a + np.log(b) + gamma_func(a) - (1.0 + a) * digamma_func(a))
