"""
Exception classes for the argument validation library.

Every guard failure is an ``ArgumentError`` (and therefore a ``ValueError``),
so callers may catch the specific kind or the whole family.
"""

from typing import Any, Dict, Optional


class ArgumentError(ValueError):
    """Base exception for all argument validation failures."""

    def __init__(
        self,
        message: str,
        param_name: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.param_name = param_name
        self.details = details or {}

    def __str__(self) -> str:
        if self.param_name:
            return f"{self.message} (Parameter '{self.param_name}')"
        return self.message


class NullArgumentError(ArgumentError):
    """Raised when a value is absent where presence is required."""

    default_message = "Value cannot be null."

    def __init__(
        self,
        param_name: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message or self.default_message, param_name, details)


class NullOrDefaultArgumentError(NullArgumentError):
    """Raised when a value equals the default (zero) value of its type."""

    default_message = "Value cannot be null or the default value."


class EmptyArgumentError(ArgumentError):
    """Raised when a string is present but has no content."""
    pass


class InvalidArgumentError(ArgumentError):
    """Raised when a value violates a constraint not covered by a more specific kind."""
    pass


class OutOfRangeArgumentError(ArgumentError):
    """Raised when a value or a length falls outside a closed interval."""

    def __init__(
        self,
        message: str,
        param_name: Optional[str],
        actual_value: Any,
        min_value: Any,
        max_value: Any,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, param_name, details)
        self.actual_value = actual_value
        self.min_value = min_value
        self.max_value = max_value

    def __str__(self) -> str:
        return f"{super().__str__()} Actual value was {self.actual_value!r}."


class FormatArgumentError(ArgumentError):
    """Raised when a string does not match a required pattern."""

    def __init__(
        self,
        message: str,
        param_name: Optional[str],
        pattern: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, param_name, details)
        self.pattern = pattern
