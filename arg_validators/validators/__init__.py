"""
Guard functions for validating arguments at API entry points.
"""

from .basic_validators import (
    validate_not_default,
    validate_not_null,
    validate_not_null_handle,
    validate_range,
    validate_defined,
)
from .string_validators import (
    validate_not_null_or_whitespace,
    validate_length,
    validate_pattern,
    validate_compiled_pattern,
)

__all__ = [
    "validate_not_default",
    "validate_not_null",
    "validate_not_null_handle",
    "validate_range",
    "validate_defined",
    "validate_not_null_or_whitespace",
    "validate_length",
    "validate_pattern",
    "validate_compiled_pattern",
]
