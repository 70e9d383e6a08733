"""Exception hierarchy for vbaux.

Every error a primitive can report derives from :class:`VbauxError`, so a
caller can catch the whole family at once. The concrete classes also derive
from the built-in (or numpy) exception they specialise.
"""

import numpy as np


class VbauxError(Exception):
    """Base class for all vbaux errors."""


class DomainError(VbauxError, ValueError):
    """Raised when an argument lies outside the domain of a function.

    Examples are a non-positive shape or scale parameter, a negative
    standard deviation or a non-finite value where a finite one is needed.
    """


class DimensionError(VbauxError, ValueError):
    """Raised when array shapes disagree with the declared dimensions."""


class UnsupportedPriorError(VbauxError, ValueError):
    """Raised when a variance prior family is not recognised."""

    def __init__(self, family: object, supported: tuple[str, ...] = ()) -> None:
        msg = f"unsupported prior family: {family!r}"
        if supported:
            msg += f" (expected one of: {', '.join(supported)})"
        super().__init__(msg)
        self.family = family


class DecompositionError(VbauxError, np.linalg.LinAlgError):
    """Raised when a matrix decomposition cannot be computed."""
