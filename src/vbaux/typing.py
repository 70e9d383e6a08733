"""Type definitions for the vbaux package."""

from typing import Literal

import numpy as np
from numpy.typing import NDArray

# Scalar-or-array argument accepted by the elementwise special functions
FloatLike = float | NDArray[np.floating]

# LAPACK driver literals
SVDDriver = Literal["gesdd", "gesvd"]
