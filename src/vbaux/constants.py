"""Constants shared by the numerical primitives.

These are true constants that should not be user-configurable.
For configurable values, see :mod:`vbaux._config`.
"""

from vbaux.typing import SVDDriver

SVD_DRIVERS: tuple[str, ...] = ("gesdd", "gesvd")
"""LAPACK drivers accepted by :func:`vbaux.linalg.svd`."""

DEFAULT_SVD_DRIVER: SVDDriver = "gesdd"
"""Divide-and-conquer driver, used unless another one is configured."""

DEFAULT_CREDIBLE_LEVEL: float = 0.95
"""Probability mass covered by HPD intervals built from a level."""
