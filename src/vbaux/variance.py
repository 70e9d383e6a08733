"""Variance-component matrices for hierarchical loading priors.

Each loading ``W[j, d]`` of a ``J x D`` loading matrix has prior
``N(0, tau)``. The variance ``tau`` is either shared by all loadings
(``globalvar=True``) or shared within each column ``d`` (``globalvar=False``),
and follows one of the families in :class:`VariancePrior`. Under a mean-field
variational posterior the loading updates need the expected precisions
``E[1/tau]`` (:func:`f_matrix`) and the evidence lower bound needs
``E[log tau]`` (:func:`log_variance_matrix`). Both functions select their
branch the same way, so the output of the first can be fed to the second.
"""

from __future__ import annotations

import logging
from enum import StrEnum, auto

import numpy as np
from numpy.typing import NDArray

from vbaux._core import as_matrix, as_vector, require_dimension, require_positive
from vbaux.exceptions import DimensionError, DomainError, UnsupportedPriorError
from vbaux.special import digamma_func

logger = logging.getLogger(__name__)


class VariancePrior(StrEnum):
    """Prior families supported for the loading variance ``tau``.

    FIXED
        ``tau`` is known; the hyperparameter vector carries its value.
    JEFFREYS
        Improper ``p(tau) ~ 1/tau``; the posterior is inverse gamma with
        shape ``n/2`` and scale ``S/2``.
    INVGAMMA
        ``tau ~ InvGamma(alphatau, betatau)``; the posterior has shape
        ``alphatau + n/2`` and scale ``betatau + S/2``.

    Here ``n`` is the number of loadings sharing ``tau`` and ``S`` the sum of
    their second moments.
    """

    FIXED = auto()
    JEFFREYS = auto()
    INVGAMMA = auto()

    @classmethod
    def parse(cls, value: VariancePrior | str) -> VariancePrior:
        """Return the member named by ``value``.

        Raises
        ------
        UnsupportedPriorError
            If ``value`` does not name a supported family.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedPriorError(value, tuple(member.value for member in cls))


def _check_dims(J: int, D: int, JD: int | None = None) -> tuple[int, int]:
    J = require_dimension(J, "J")
    D = require_dimension(D, "D")
    if JD is not None and require_dimension(JD, "JD") != J * D:
        raise DimensionError(f"JD must equal J * D = {J * D}, got {JD}")
    return J, D


def _check_loading_matrix(x: object, name: str, J: int, D: int) -> NDArray[np.float64]:
    arr = as_matrix(x, name)
    if arr.shape != (J, D):
        raise DimensionError(f"{name} must have shape ({J}, {D}), got {arr.shape}")
    return arr


def _n_shared(globalvar: bool, J: int, D: int) -> int:
    """Number of loadings that share one variance."""
    return J * D if globalvar else J


def _posterior_shape(
    prior: VariancePrior,
    globalvar: bool,
    J: int,
    D: int,
    alphatau: object,
) -> NDArray[np.float64]:
    """Shape of the inverse-gamma variational posterior of each variance."""
    n_hyper = 1 if globalvar else D
    half_n = 0.5 * _n_shared(globalvar, J, D)

    if prior is VariancePrior.INVGAMMA:
        if alphatau is None:
            raise DimensionError("alphatau is required for the invgamma prior")
        alphatau = as_vector(alphatau, "alphatau", n_hyper)
        require_positive(alphatau, "alphatau")
        return alphatau + half_n

    return np.full(n_hyper, half_n)


def _expand(values: NDArray[np.float64], J: int, D: int) -> NDArray[np.float64]:
    """Broadcast per-variance values (length 1 or D) to a J x D matrix."""
    return np.array(np.broadcast_to(values, (J, D)), dtype=np.float64)


def f_matrix(
    globalvar: bool,
    priorvar: VariancePrior | str,
    W2: NDArray[np.float64],
    betatau: NDArray[np.float64],
    J: int,
    D: int,
    alphatau: NDArray[np.float64] | None = None,
    JD: int | None = None,
) -> NDArray[np.float64]:
    """Compute the expected precision ``E[1/tau]`` weighting each loading.

    Parameters
    ----------
    globalvar : bool
        If True one variance is shared by all loadings, otherwise each
        column has its own.
    priorvar : VariancePrior or str
        Prior family of the variance.
    W2 : ndarray of shape (J, D)
        Second moments ``E[W_jd^2]`` of the loadings.
    betatau : ndarray of shape (1,) or (D,)
        Prior scale for ``invgamma``; the fixed variances for ``fixed``;
        ignored for ``jeffreys``.
    J, D : int
        Number of rows and columns of the loading matrix.
    alphatau : ndarray of shape (1,) or (D,), optional
        Prior shape, required for ``invgamma``.
    JD : int, optional
        Total number of loadings; checked against ``J * D`` when given.

    Returns
    -------
    ndarray of shape (J, D)
        Entry ``(j, d)`` is the expected precision of the variance governing
        ``W[j, d]``.

    Raises
    ------
    UnsupportedPriorError
        If ``priorvar`` is not a supported family.
    DimensionError
        If shapes disagree with ``J``, ``D``, ``JD`` or ``globalvar``.
    DomainError
        If hyperparameters are not positive, ``W2`` has negative entries, or
        the ``jeffreys`` posterior is improper (all second moments zero).
    """
    prior = VariancePrior.parse(priorvar)
    J, D = _check_dims(J, D, JD)
    W2 = _check_loading_matrix(W2, "W2", J, D)
    n_hyper = 1 if globalvar else D

    logger.debug(
        "f_matrix: prior=%s globalvar=%s J=%d D=%d", prior, globalvar, J, D
    )

    if np.any(~np.isfinite(W2)) or np.any(W2 < 0):
        raise DomainError("W2 must be finite and non-negative")

    if prior is VariancePrior.FIXED:
        betatau = as_vector(betatau, "betatau", n_hyper)
        require_positive(betatau, "betatau")
        return _expand(1.0 / betatau, J, D)

    shape = _posterior_shape(prior, globalvar, J, D, alphatau)
    if prior is VariancePrior.INVGAMMA:
        betatau = as_vector(betatau, "betatau", n_hyper)
        require_positive(betatau, "betatau")

    if J * D == 0:
        return np.empty((J, D))

    second_moment = np.atleast_1d(W2.sum()) if globalvar else W2.sum(axis=0)

    if prior is VariancePrior.INVGAMMA:
        rate = betatau + 0.5 * second_moment
    else:
        rate = 0.5 * second_moment
        if np.any(rate <= 0):
            raise DomainError(
                "jeffreys posterior is improper: loadings have zero second moment"
            )

    return _expand(shape / rate, J, D)


def log_variance_matrix(
    globalvar: bool,
    J: int,
    D: int,
    f: NDArray[np.float64],
    priorvar: VariancePrior | str,
    Tau: NDArray[np.float64] | None = None,
    alphatau: NDArray[np.float64] | None = None,
) -> NDArray[np.float64]:
    """Compute ``E[log tau]`` for each loading.

    For the ``jeffreys`` and ``invgamma`` families the variational posterior
    of ``tau`` is inverse gamma with shape ``a`` and scale ``a / f``, giving
    ``E[log tau] = log a - log f - psi(a)``. The shape ``a`` is rebuilt from
    ``alphatau``, ``J`` and ``D`` exactly as :func:`f_matrix` builds it.

    Parameters
    ----------
    globalvar : bool
        Variance sharing, as passed to :func:`f_matrix`.
    J, D : int
        Number of rows and columns of the loading matrix.
    f : ndarray of shape (J, D)
        Expected precisions from :func:`f_matrix`.
    priorvar : VariancePrior or str
        Prior family, as passed to :func:`f_matrix`.
    Tau : ndarray of shape (J, D), optional
        Fixed variances for the ``fixed`` family. When given it takes
        precedence over ``f``, whose values are then only validated;
        defaults to ``1 / f``. Ignored for the other families.
    alphatau : ndarray of shape (1,) or (D,), optional
        Prior shape, required for ``invgamma``.

    Returns
    -------
    ndarray of shape (J, D)
    """
    prior = VariancePrior.parse(priorvar)
    J, D = _check_dims(J, D)
    f = _check_loading_matrix(f, "f", J, D)
    require_positive(f, "f")

    logger.debug(
        "log_variance_matrix: prior=%s globalvar=%s J=%d D=%d",
        prior,
        globalvar,
        J,
        D,
    )

    if prior is VariancePrior.FIXED:
        if Tau is None:
            return -np.log(f)
        Tau = _check_loading_matrix(Tau, "Tau", J, D)
        require_positive(Tau, "Tau")
        return np.log(Tau)

    shape = _posterior_shape(prior, globalvar, J, D, alphatau)
    if J * D == 0:
        return np.empty((J, D))

    shape = _expand(shape, J, D)
    return np.log(shape) - np.log(f) - digamma_func(shape)
