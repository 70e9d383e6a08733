"""Runtime configuration utilities for :mod:`vbaux`."""

from __future__ import annotations

from typing import Any

import numpy as np
import scipy

from vbaux.constants import DEFAULT_SVD_DRIVER, SVD_DRIVERS
from vbaux.typing import SVDDriver

_CURRENT_SVD_DRIVER: SVDDriver = DEFAULT_SVD_DRIVER


def set_svd_driver(driver: SVDDriver) -> None:
    """Set the LAPACK driver used by :func:`vbaux.linalg.svd`.

    ``"gesdd"`` (divide and conquer) is faster on large matrices;
    ``"gesvd"`` is slower but converges in cases where ``gesdd`` does not.
    """
    global _CURRENT_SVD_DRIVER

    if driver not in SVD_DRIVERS:
        raise ValueError(
            f"Invalid SVD driver '{driver}'. Must be one of: "
            + ", ".join(f"'{d}'" for d in SVD_DRIVERS)
        )

    _CURRENT_SVD_DRIVER = driver


def get_svd_driver() -> SVDDriver:
    """Get the currently configured SVD driver."""
    return _CURRENT_SVD_DRIVER


def get_config_info() -> dict[str, Any]:
    """Get information about the numerical configuration."""
    return {
        "svd_driver": _CURRENT_SVD_DRIVER,
        "svd_fallback_driver": "gesvd" if _CURRENT_SVD_DRIVER == "gesdd" else None,
        "numpy_version": np.__version__,
        "scipy_version": scipy.__version__,
    }
