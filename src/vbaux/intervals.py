"""Highest posterior density intervals under a Gaussian approximation."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import stats

from vbaux._core import as_vector, require_dimension, require_positive
from vbaux.constants import DEFAULT_CREDIBLE_LEVEL
from vbaux.exceptions import DomainError


def hpd_interval(
    mu: NDArray[np.float64],
    sigma: NDArray[np.float64],
    qz: float,
    J: int | None = None,
) -> NDArray[np.float64]:
    """Build symmetric HPD intervals ``mu +/- qz * sigma``.

    For a Gaussian posterior the HPD interval is the equal-tailed one, so
    each row is ``[mu[j] - qz * sigma[j], mu[j] + qz * sigma[j]]``.

    Parameters
    ----------
    mu : ndarray of shape (J,)
        Posterior means.
    sigma : ndarray of shape (J,)
        Posterior standard deviations, non-negative.
    qz : float
        Quantile multiplier, e.g. 1.96 for 95% mass.
    J : int, optional
        Number of parameters. Inferred from ``mu`` when omitted.

    Returns
    -------
    ndarray of shape (J, 2)
        Lower bounds in column 0, upper bounds in column 1.

    Raises
    ------
    DimensionError
        If ``mu`` or ``sigma`` do not have length ``J``.
    DomainError
        If ``qz <= 0`` or any ``sigma[j] < 0``.
    """
    if J is None:
        mu = as_vector(mu, "mu")
        J = mu.shape[0]
    else:
        J = require_dimension(J, "J")
        mu = as_vector(mu, "mu", J)
    sigma = as_vector(sigma, "sigma", J)

    require_positive(qz, "qz")
    if np.any(~np.isfinite(sigma)) or np.any(sigma < 0):
        raise DomainError("sigma must be finite and non-negative")

    half_width = qz * sigma
    return np.column_stack([mu - half_width, mu + half_width])


def hpd_interval_from_level(
    mu: NDArray[np.float64],
    sigma: NDArray[np.float64],
    level: float = DEFAULT_CREDIBLE_LEVEL,
) -> NDArray[np.float64]:
    """Build HPD intervals covering ``level`` posterior mass.

    The multiplier is the standard normal quantile ``Phi^-1((1 + level) / 2)``.
    """
    if not 0 < level < 1:
        raise DomainError(f"level must be between 0 and 1, got {level}")
    qz = float(stats.norm.ppf(0.5 * (1.0 + level)))
    return hpd_interval(mu, sigma, qz)
