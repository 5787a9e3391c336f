# Fractify - Continued Fraction Approximator
# Copyright (c) 2024 Fractify Contributors. All rights reserved.

"""
Rational approximation of decimals by Farey chain.

Given a decimal X > 0 that is not an integer, three sequences are built:

    Z(1) = X                           D(0) = 0, D(1) = 1
    Z(i+1) = 1 / (Z(i) - floor(Z(i)))
    D(i+1) = D(i) * floor(Z(i+1)) + D(i-1)
    N(i+1) = round(X * D(i+1))

N(i) / D(i) are the convergents of the continued fraction of X. Refinement
stops when the fractional part of Z(i) drops to the acceptable error, or
when the next numerator or denominator would reach the value ceiling. In
the latter case the last convergent below the ceiling is returned.

All state is kept as floats, so the loop may occasionally run one step more
or less than the exact expansion would. Inputs should carry at least six
significant decimals: 0.333 is 333/1000, not 1/3.

Reference: "A Fast Continued Fraction Algorithm", Mathematics Magazine 1982
(Farey chain method).

Example:
    >>> from fractify import fractify
    >>> fractify(0.5)
    Fractional(1, 2)
    >>> fractify(3.141592653589793)
    Fractional(355, 113)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generator, Optional
import logging
import math

from .config import Config
from .exceptions import DomainError, InvalidInput
from .fraction import Fractional

logger = logging.getLogger(__name__)

StepHook = Callable[['Step'], None]


@dataclass(frozen=True)
class Step:
    """
    State of the refinement loop after one accepted iteration.

    Attributes:
        index: 1-based iteration number.
        z: Continued-fraction residual Z(i).
        numerator: Convergent numerator N(i).
        denominator: Convergent denominator D(i).
        previous_denominator: D(i-1).
    """
    index: int
    z: float
    numerator: float
    denominator: float
    previous_denominator: float

    def as_fractional(self) -> Fractional:
        return Fractional(_round(self.numerator), _round(self.denominator))


def _round(x: float) -> int:
    """Round half away from zero (for non-negative x)."""
    whole = math.floor(x)
    return int(whole) + 1 if x - whole >= 0.5 else int(whole)


class FractionApproximator:
    """
    Approximates non-negative decimals with bounded fractions.

    The approximator holds no per-call state, so one instance can be shared
    across threads.

    Example:
        >>> approx = FractionApproximator(Config(value_ceiling=100))
        >>> approx.approximate(3.141592653589793)
        Fractional(22, 7)
    """

    def __init__(self, config: Optional[Config] = None, on_step: Optional[StepHook] = None):
        """
        Args:
            config: Error threshold and value ceiling (defaults to Config()).
            on_step: Optional callable invoked with every accepted Step.
        """
        self.config = config or Config()
        self.on_step = on_step

    def approximate(self, value: float) -> Fractional:
        """
        Approximate value with a fraction.

        Args:
            value: A finite, non-negative number.

        Returns:
            The convergent that satisfied the acceptable error, or the last
            convergent below the value ceiling. Not reduced to lowest terms.

        Raises:
            InvalidInput: If value is negative.
            DomainError: If value is NaN or infinite.
        """
        steps = self.iterate(value)
        while True:
            try:
                next(steps)
            except StopIteration as done:
                return done.value

    def iterate(self, value: float) -> Generator[Step, None, Fractional]:
        """
        Validate value and return a generator over the refinement steps.

        The generator yields one Step per accepted convergent and returns
        the final Fractional (available as StopIteration.value). Integers
        produce no steps.

        Raises:
            InvalidInput: If value is negative.
            DomainError: If value is NaN or infinite.
        """
        value = _check_value(value)
        return self._refine(value)

    def _refine(self, value: float) -> Generator[Step, None, Fractional]:
        if value == math.floor(value):
            return Fractional(_round(value), 1)

        acceptable_error = self.config.acceptable_error
        ceiling = self.config.value_ceiling

        z = value
        n = float(_round(value))
        d = 1.0
        old_d = 0.0
        index = 0

        while True:
            frac = z - math.floor(z)
            if frac <= acceptable_error:
                logger.debug("value=%r: fractional part %g within acceptable error", value, frac)
                return Fractional(_round(n), _round(d))

            new_z = 1 / frac
            # d >= 1, so a term at or above the ceiling (or inf) puts newD past it
            if new_z >= ceiling:
                logger.debug(
                    "value=%r: next term %g reaches ceiling %d", value, new_z, ceiling,
                )
                return Fractional(_round(n), _round(d))
            new_d = d * math.floor(new_z) + old_d
            new_n = float(_round(value * new_d))
            if new_d >= ceiling or new_n >= ceiling:
                logger.debug(
                    "value=%r: next convergent %g/%g reaches ceiling %d",
                    value, new_n, new_d, ceiling,
                )
                return Fractional(_round(n), _round(d))

            old_d, d, n, z = d, new_d, new_n, new_z
            index += 1
            step = Step(index, z, n, d, old_d)
            logger.debug("step %d: z=%r n=%r d=%r", index, z, n, d)
            if self.on_step is not None:
                self.on_step(step)
            yield step

    def __repr__(self) -> str:
        return f"FractionApproximator({self.config!r})"


def _check_value(value: float) -> float:
    """Coerce value to float and enforce the supported domain."""
    if isinstance(value, (str, bytes)):
        raise DomainError(f"Cannot approximate {value!r}: strings are not accepted", value=None)
    try:
        x = float(value)
    except (TypeError, ValueError) as e:
        raise DomainError(f"Cannot approximate {value!r}: not a real number", value=value) from e
    if math.isnan(x) or math.isinf(x):
        raise DomainError(f"Cannot approximate non-finite value {x!r}", value=x)
    if x < 0:
        raise InvalidInput(x)
    return x


def fractify(value: float, config: Optional[Config] = None) -> Fractional:
    """
    Approximate value with a fraction using the given (or default) config.

    Examples:
        >>> fractify(1.5)
        Fractional(3, 2)
        >>> fractify(0.333333)
        Fractional(1, 3)
        >>> fractify(3.0)
        Fractional(3, 1)
    """
    return FractionApproximator(config).approximate(value)
