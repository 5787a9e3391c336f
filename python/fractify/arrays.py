# Fractify - Array Helpers
# Copyright (c) 2024 Fractify Contributors. All rights reserved.

"""
Batch approximation over numpy arrays.

Example:
    >>> import numpy as np
    >>> from fractify.arrays import approximate_array
    >>> nums, dens = approximate_array(np.array([0.5, 1.5, 3.0]))
    >>> nums.tolist(), dens.tolist()
    ([1, 3, 3], [2, 2, 1])
"""

from typing import Optional, Tuple
import numpy as np

from .approximator import FractionApproximator
from .config import Config
from .exceptions import DomainError, InvalidInput

__all__ = [
    "approximate_array",
    "float_to_rational",
]

_INT64_LIMIT = float(2**63)


def float_to_rational(x: float, config: Optional[Config] = None) -> Tuple[int, int]:
    """Approximate a float and return a plain (numerator, denominator) tuple.

    Args:
        x: Float value to convert
        config: Error threshold and value ceiling

    Returns:
        Tuple of (numerator, denominator)
    """
    frac = FractionApproximator(config).approximate(x)
    return frac.numerator, frac.denominator


def approximate_array(
    values,
    config: Optional[Config] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Approximate every element of an array.

    The whole array is validated before any element is approximated.

    Args:
        values: Array-like of non-negative finite numbers
        config: Error threshold and value ceiling

    Returns:
        (numerators, denominators) as int64 arrays with the input's shape

    Raises:
        InvalidInput: If any element is negative
        DomainError: If any element is NaN, infinite or too large for
            int64, or the input is not numeric
    """
    try:
        arr = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise DomainError(f"Cannot approximate {values!r}: not numeric", value=None) from e

    bad = ~np.isfinite(arr)
    if bad.any():
        first = arr[bad].flat[0]
        raise DomainError(f"Cannot approximate non-finite value {first!r}", value=float(first))
    negative = arr < 0
    if negative.any():
        raise InvalidInput(float(arr[negative].flat[0]))
    # Whole values pass straight through as numerators
    too_large = arr >= _INT64_LIMIT
    if too_large.any():
        first = float(arr[too_large].flat[0])
        raise DomainError(f"Value {first!r} does not fit an int64 numerator", value=first)

    approximator = FractionApproximator(config)
    numerators = np.empty(arr.shape, dtype=np.int64)
    denominators = np.empty(arr.shape, dtype=np.int64)
    for idx, x in np.ndenumerate(arr):
        frac = approximator.approximate(float(x))
        numerators[idx] = frac.numerator
        denominators[idx] = frac.denominator
    return numerators, denominators
