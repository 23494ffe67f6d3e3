"""Exceptions raised by the normalizer under the strict coercion policy."""

from typing import Any, Optional


class NormalizationError(ValueError):
    """Base class for values the normalizer refuses to coerce.

    Attributes:
        value: The rejected raw value
        policy: Coercion policy in effect when the value was rejected
    """

    def __init__(self, message: str, value: Any = None, policy: Optional[str] = None):
        self.message = message
        self.value = value
        self.policy = policy
        super().__init__(message)


class InvalidInputError(NormalizationError):
    """Raised when a value is null or absent under the strict policy."""


class InvalidTypeError(NormalizationError, TypeError):
    """Raised when a structured value is supplied under the strict policy."""

    def __init__(self, message: str, value: Any = None, policy: Optional[str] = None):
        super().__init__(message, value=value, policy=policy)
        self.value_type = type(value).__name__
