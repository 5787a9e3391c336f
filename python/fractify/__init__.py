# Fractify
# Copyright (c) 2024 Fractify Contributors. All rights reserved.

"""
Fractify - Best-fit fractions for decimals.

Converts non-negative decimals into bounded numerator/denominator pairs
using the Farey chain (continued fraction) method.

Example:
    >>> import fractify as fy
    >>> fy.fractify(0.333333)
    Fractional(1, 3)
    >>> fy.fractify(3.141592653589793, fy.Config(value_ceiling=100))
    Fractional(22, 7)

Key Features:
    - Tunable error threshold and numerator/denominator ceiling
    - Typed, catchable errors for unsupported input
    - Optional per-step instrumentation hook
    - numpy batch helpers
"""

import logging

__version__ = "0.1.0"

# Value type
from .fraction import Fractional

# Configuration
from .config import Config

# Approximation
from .approximator import (
    FractionApproximator,
    Step,
    fractify,
)

# Batch helpers
from .arrays import approximate_array, float_to_rational

# Exceptions
from .exceptions import (
    FractifyError,
    DomainError,
    InvalidInput,
    ConfigError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Value type
    "Fractional",
    # Configuration
    "Config",
    # Approximation
    "FractionApproximator",
    "Step",
    "fractify",
    # Batch helpers
    "approximate_array",
    "float_to_rational",
    # Exceptions
    "FractifyError",
    "DomainError",
    "InvalidInput",
    "ConfigError",
]
