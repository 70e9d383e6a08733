"""Argument validation helpers shared by the numerical modules.

This module depends only on :mod:`vbaux.exceptions`, so every other module
can import it without circular import issues.
"""

import numpy as np
from numpy.typing import NDArray

from vbaux.exceptions import DimensionError, DomainError


def as_matrix(x: object, name: str) -> NDArray[np.float64]:
    """Convert ``x`` to a 2D float array, raising DimensionError otherwise."""
    arr = np.asarray(x, dtype=np.float64)
    if arr.ndim != 2:
        raise DimensionError(f"{name} must be 2D, got {arr.ndim}D")
    return arr


def as_vector(x: object, name: str, length: int | None = None) -> NDArray[np.float64]:
    """Convert ``x`` to a 1D float array, optionally checking its length.

    Scalars are promoted to length-1 vectors.
    """
    arr = np.atleast_1d(np.asarray(x, dtype=np.float64))
    if arr.ndim != 1:
        raise DimensionError(f"{name} must be 1D, got {arr.ndim}D")
    if length is not None and arr.shape[0] != length:
        raise DimensionError(
            f"{name} must have length {length}, got {arr.shape[0]}"
        )
    return arr


def require_positive(x: object, name: str) -> None:
    """Raise DomainError unless every entry of ``x`` is finite and > 0."""
    arr = np.asarray(x, dtype=np.float64)
    if not np.all(np.isfinite(arr)) or np.any(arr <= 0):
        raise DomainError(f"{name} must be positive and finite, got {x!r}")


def require_dimension(value: int, name: str) -> int:
    """Check that a dimension count is a non-negative integer."""
    if isinstance(value, bool) or int(value) != value or value < 0:
        raise DimensionError(f"{name} must be a non-negative integer, got {value!r}")
    return int(value)


def scalar_or_array(result: NDArray[np.float64]) -> NDArray[np.float64] | float:
    """Return a Python float for 0-d results, otherwise the array."""
    return float(result) if result.ndim == 0 else result


def broadcast_pair(
    x: object, y: object, names: tuple[str, str]
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Convert two arguments to float arrays that broadcast together."""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    try:
        np.broadcast_shapes(x.shape, y.shape)
    except ValueError as exc:
        raise DimensionError(
            f"{names[0]} with shape {x.shape} and {names[1]} with shape "
            f"{y.shape} cannot be broadcast together"
        ) from exc
    return x, y
