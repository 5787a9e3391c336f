# Fractify - Exceptions
# Copyright (c) 2024 Fractify Contributors. All rights reserved.

"""Exception hierarchy for Fractify."""

from __future__ import annotations
from typing import Any, Optional


class FractifyError(Exception):
    """Base class for all Fractify exceptions."""
    pass


class DomainError(FractifyError, ValueError):
    """Raised when a value lies outside the domain the approximator supports."""

    def __init__(self, message: str, value: Optional[float] = None):
        super().__init__(message)
        self.value = value


class InvalidInput(DomainError):
    """Raised when a negative value is passed to the approximator."""

    def __init__(self, value: float):
        super().__init__(
            f"only non-negative values supported, got {value!r}",
            value=value,
        )


class ConfigError(FractifyError, ValueError):
    """Raised when a configuration field holds an unusable value."""

    def __init__(self, field: str, value: Any, reason: str):
        super().__init__(f"Invalid {field}={value!r}: {reason}")
        self.field = field
        self.value = value
