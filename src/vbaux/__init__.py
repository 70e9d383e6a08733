"""Numerical primitives for variational Bayes hierarchical variance models.

The package provides:

- Truncated singular value decomposition and cross-product statistics
- Gamma, digamma and beta special functions with domain checking
- Gamma / inverse-gamma log densities and entropies
- Gaussian HPD intervals
- Expected precision and log-variance matrices for loading priors
"""

from vbaux._config import get_config_info, get_svd_driver, set_svd_driver
from vbaux._version import __version__
from vbaux.densities import gamd, gamh, invgamd, invgamh
from vbaux.exceptions import (
    DecompositionError,
    DimensionError,
    DomainError,
    UnsupportedPriorError,
    VbauxError,
)
from vbaux.intervals import hpd_interval, hpd_interval_from_level
from vbaux.linalg import CrossProduct, SVDResult, cross_product, svd
from vbaux.special import beta_func, digamma_func, gamma_func
from vbaux.variance import VariancePrior, f_matrix, log_variance_matrix

__all__ = [
    "__version__",
    # Linear algebra
    "svd",
    "SVDResult",
    "cross_product",
    "CrossProduct",
    # Special functions
    "gamma_func",
    "digamma_func",
    "beta_func",
    # Densities
    "gamd",
    "invgamd",
    "gamh",
    "invgamh",
    # Intervals
    "hpd_interval",
    "hpd_interval_from_level",
    # Variance components
    "VariancePrior",
    "f_matrix",
    "log_variance_matrix",
    # Configuration
    "set_svd_driver",
    "get_svd_driver",
    "get_config_info",
    # Exceptions
    "VbauxError",
    "DomainError",
    "DimensionError",
    "UnsupportedPriorError",
    "DecompositionError",
]
