# Fractify - Fraction Value Type
# Copyright (c) 2024 Fractify Contributors. All rights reserved.

"""
The value returned by the approximator.

A Fractional is a plain numerator/denominator pair. It is deliberately not
reduced: whatever convergent the approximator stopped on is returned as-is.
Use to_fraction() for a reduced fractions.Fraction.

Example:
    >>> from fractify.fraction import Fractional
    >>> f = Fractional(3, 2)
    >>> float(f)
    1.5
    >>> f.to_dict()
    {'n': 3, 'd': 2}
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterator


@dataclass(frozen=True)
class Fractional:
    """
    An immutable numerator/denominator pair.

    Fractionals are hashable and can be used as dictionary keys.
    """
    numerator: int
    denominator: int

    def __post_init__(self):
        if self.denominator < 1:
            raise ValueError(f"Invalid denominator: {self.denominator} (must be >= 1)")

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __iter__(self) -> Iterator[int]:
        """Unpack as (numerator, denominator)."""
        yield self.numerator
        yield self.denominator

    def error(self, value: float) -> float:
        """Absolute distance between this fraction and value."""
        return abs(value - float(self))

    def to_fraction(self) -> Fraction:
        """Convert to fractions.Fraction (reduced to lowest terms)."""
        return Fraction(self.numerator, self.denominator)

    def to_dict(self) -> dict[str, int]:
        """Convert to {'n': ..., 'd': ...} JSON format."""
        return {'n': self.numerator, 'd': self.denominator}

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Fractional({self.numerator}, {self.denominator})"
