"""Dense linear-algebra primitives.

Both routines return fresh arrays bundled in a small result dataclass, so
the caller owns the outputs and nothing is written into pre-allocated
arguments.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from scipy import linalg

from vbaux._config import get_svd_driver
from vbaux._core import as_matrix
from vbaux.exceptions import DecompositionError

logger = logging.getLogger(__name__)


@dataclass
class SVDResult:
    """Truncated singular value decomposition ``M = U @ diag(d) @ V.T``.

    Attributes
    ----------
    U : NDArray[np.float64]
        First ``nu`` left singular vectors, shape (n_rows, nu).
    d : NDArray[np.float64]
        All ``min(n_rows, n_cols)`` singular values, descending.
    V : NDArray[np.float64]
        First ``nv`` right singular vectors, shape (n_cols, nv).
    """

    U: NDArray[np.float64]
    d: NDArray[np.float64]
    V: NDArray[np.float64]

    def reconstruct(self) -> NDArray[np.float64]:
        """Rebuild the matrix from the leading ``min(nu, nv, len(d))`` triplets."""
        k = min(self.U.shape[1], self.V.shape[1], self.d.shape[0])
        return (self.U[:, :k] * self.d[:k]) @ self.V[:, :k].T


@dataclass
class CrossProduct:
    """Cross-product sufficient statistic of a matrix ``X``.

    Attributes
    ----------
    XTX : NDArray[np.float64]
        ``X.T @ X``, shape (n_cols, n_cols), exactly symmetric.
    trace : float
        ``trace(X.T @ X)``, equal to the sum of squared entries of ``X``.
    """

    XTX: NDArray[np.float64]
    trace: float


def _lapack_svd(
    M: NDArray[np.float64], full: bool, driver: str
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    return linalg.svd(
        M,
        full_matrices=full,
        compute_uv=True,
        check_finite=False,
        lapack_driver=driver,
    )


def _vector_count(value: int | None, name: str, default: int) -> int:
    """Validate a requested number of singular vectors."""
    if value is None:
        return default
    if isinstance(value, bool) or int(value) != value:
        raise DecompositionError(
            f"SVD failed: {name} must be an integer, got {value!r}"
        )
    return int(value)


def svd(
    M: NDArray[np.float64],
    nu: int | None = None,
    nv: int | None = None,
) -> SVDResult:
    """Compute a singular value decomposition keeping ``nu``/``nv`` vectors.

    Parameters
    ----------
    M : ndarray of shape (n_rows, n_cols)
        Input matrix. Must be finite.
    nu : int, optional
        Number of left singular vectors to return, at most ``n_rows``.
        Defaults to ``min(n_rows, n_cols)``.
    nv : int, optional
        Number of right singular vectors to return, at most ``n_cols``.
        Defaults to ``min(n_rows, n_cols)``.

    Returns
    -------
    SVDResult
        ``U`` of shape (n_rows, nu), singular values ``d`` and ``V`` of
        shape (n_cols, nv).

    Raises
    ------
    DimensionError
        If ``M`` is not 2D.
    DecompositionError
        If ``M`` contains non-finite values, ``nu``/``nv`` are not integers
        in range, or LAPACK fails to converge with every available driver.

    Notes
    -----
    The full left and right bases are only formed when more vectors are
    requested than the thin decomposition provides. If the divide-and-conquer
    driver fails to converge the decomposition is retried once with
    ``gesvd``.
    """
    M = as_matrix(M, "M")
    n_rows, n_cols = M.shape
    k = min(n_rows, n_cols)

    nu = _vector_count(nu, "nu", k)
    nv = _vector_count(nv, "nv", k)

    if not np.all(np.isfinite(M)):
        raise DecompositionError("SVD failed: M contains non-finite values")
    if not 0 <= nu <= n_rows:
        raise DecompositionError(
            f"SVD failed: nu={nu} must be in [0, {n_rows}] for M of shape {M.shape}"
        )
    if not 0 <= nv <= n_cols:
        raise DecompositionError(
            f"SVD failed: nv={nv} must be in [0, {n_cols}] for M of shape {M.shape}"
        )

    if M.size == 0:
        return SVDResult(
            U=np.eye(n_rows)[:, :nu],
            d=np.zeros(0),
            V=np.eye(n_cols)[:, :nv],
        )

    full = nu > k or nv > k
    driver = get_svd_driver()
    logger.debug(
        "SVD of %dx%d matrix (nu=%d, nv=%d, driver=%s, full=%s)",
        n_rows,
        n_cols,
        nu,
        nv,
        driver,
        full,
    )

    try:
        U, d, Vt = _lapack_svd(M, full, driver)
    except linalg.LinAlgError as exc:
        if driver != "gesdd":
            raise DecompositionError(f"SVD failed to converge: {exc}") from exc
        logger.warning("gesdd failed to converge (%s); retrying with gesvd", exc)
        try:
            U, d, Vt = _lapack_svd(M, full, "gesvd")
        except linalg.LinAlgError as retry_exc:
            raise DecompositionError(
                f"SVD failed to converge: {retry_exc}"
            ) from retry_exc

    return SVDResult(U=U[:, :nu].copy(), d=d, V=Vt[:nv, :].T.copy())


def cross_product(X: NDArray[np.float64]) -> CrossProduct:
    """Compute ``X.T @ X`` together with its trace.

    The trace is taken as the sum of squared entries of ``X``, which equals
    ``trace(X.T @ X)`` without reading the diagonal back.

    Parameters
    ----------
    X : ndarray of shape (n_rows, n_cols)
        Input matrix.

    Returns
    -------
    CrossProduct
        The cross-product matrix and its trace.
    """
    X = as_matrix(X, "X")
    XTX = X.T @ X
    XTX = 0.5 * (XTX + XTX.T)
    return CrossProduct(XTX=XTX, trace=float(np.einsum("ij,ij->", X, X)))
