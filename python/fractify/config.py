# Fractify - Configuration
# Copyright (c) 2024 Fractify Contributors. All rights reserved.

"""Configuration settings for Fractify."""

from __future__ import annotations
from dataclasses import dataclass
import math
import numbers

from .exceptions import ConfigError


@dataclass(frozen=True)
class Config:
    """
    Tunables for the continued-fraction approximation.

    The two limits trade precision against fraction complexity. Whichever
    one is hit first ends the refinement.

    Attributes:
        acceptable_error: Fractional-part threshold below which the current
                          convergent is accepted as close enough.
        value_ceiling: Numerator or denominator at which refinement stops
                       and the previous convergent is returned.
    """
    acceptable_error: float = 1e-7
    value_ceiling: int = 10000

    def __post_init__(self):
        err = self.acceptable_error
        if isinstance(err, bool) or not isinstance(err, numbers.Real):
            raise ConfigError('acceptable_error', err, "must be a real number")
        if not math.isfinite(err) or err < 0:
            raise ConfigError('acceptable_error', err, "must be finite and >= 0")
        # Normalize ints (e.g. 0) and numpy scalars to float
        object.__setattr__(self, 'acceptable_error', float(err))

        ceiling = self.value_ceiling
        if isinstance(ceiling, bool) or not isinstance(ceiling, numbers.Integral):
            raise ConfigError('value_ceiling', ceiling, "must be an integer")
        if ceiling < 2:
            raise ConfigError('value_ceiling', ceiling, "must be >= 2")
        object.__setattr__(self, 'value_ceiling', int(ceiling))

    @classmethod
    def default(cls) -> Config:
        """Default configuration (1e-7 error, ceiling 10000)."""
        return cls()

    @classmethod
    def coarse(cls) -> Config:
        """Small, readable fractions at the cost of precision."""
        return cls(acceptable_error=1e-4, value_ceiling=100)

    @classmethod
    def fine(cls) -> Config:
        """Tighter error and a much larger ceiling."""
        return cls(acceptable_error=1e-10, value_ceiling=1_000_000)

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary."""
        return {
            'acceptableError': self.acceptable_error,
            'valueCeiling': self.value_ceiling,
        }

    def __repr__(self) -> str:
        return (
            f"Config(acceptable_error={self.acceptable_error}, "
            f"value_ceiling={self.value_ceiling})"
        )
