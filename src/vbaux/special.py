"""Special functions: gamma, digamma and beta.

Thin wrappers around :mod:`scipy.special` that reject arguments outside the
positive real axis instead of returning ``inf`` or ``nan``.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import special

from vbaux._core import require_positive, scalar_or_array
from vbaux.typing import FloatLike


def gamma_func(
    x: FloatLike, log_scale: bool = True
) -> float | NDArray[np.float64]:
    """Evaluate the gamma function or its logarithm.

    Parameters
    ----------
    x : float or array_like
        Positive argument(s).
    log_scale : bool
        If True, return ``log Gamma(x)``; otherwise ``Gamma(x)``.

    Returns
    -------
    float or ndarray
        Same shape as ``x``.

    Raises
    ------
    DomainError
        If any entry of ``x`` is not positive and finite.
    """
    require_positive(x, "x")
    x = np.asarray(x, dtype=np.float64)
    result = special.gammaln(x) if log_scale else special.gamma(x)
    return scalar_or_array(result)


def digamma_func(x: FloatLike) -> float | NDArray[np.float64]:
    """Evaluate the digamma function ``d/dx log Gamma(x)`` for ``x > 0``."""
    require_positive(x, "x")
    return scalar_or_array(special.digamma(np.asarray(x, dtype=np.float64)))


def beta_func(
    a: FloatLike,
    b: FloatLike,
    log_scale: bool = True,
) -> float | NDArray[np.float64]:
    """Evaluate the beta function ``B(a, b)`` or its logarithm.

    On the log scale this is
    ``log Gamma(a) + log Gamma(b) - log Gamma(a + b)``, computed by
    :func:`scipy.special.betaln` to avoid cancellation.

    Raises
    ------
    DomainError
        If any entry of ``a`` or ``b`` is not positive and finite.
    """
    require_positive(a, "a")
    require_positive(b, "b")
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    result = special.betaln(a, b) if log_scale else special.beta(a, b)
    return scalar_or_array(result)
