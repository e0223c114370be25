"""
Argument Validators

Precondition guards for public API entry points. Each guard checks one
property of one argument and either passes the value through or raises a
typed ``ArgumentError`` naming the offending parameter.
"""

import logging

__version__ = "0.1.0"

from .core.interfaces import ValidatedNotNull, SupportsComparison
from .core.exceptions import (
    ArgumentError,
    NullArgumentError,
    NullOrDefaultArgumentError,
    EmptyArgumentError,
    InvalidArgumentError,
    OutOfRangeArgumentError,
    FormatArgumentError,
)
from .validators import (
    validate_not_default,
    validate_not_null,
    validate_not_null_handle,
    validate_not_null_or_whitespace,
    validate_range,
    validate_pattern,
    validate_compiled_pattern,
    validate_length,
    validate_defined,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ValidatedNotNull",
    "SupportsComparison",
    "ArgumentError",
    "NullArgumentError",
    "NullOrDefaultArgumentError",
    "EmptyArgumentError",
    "InvalidArgumentError",
    "OutOfRangeArgumentError",
    "FormatArgumentError",
    "validate_not_default",
    "validate_not_null",
    "validate_not_null_handle",
    "validate_not_null_or_whitespace",
    "validate_range",
    "validate_pattern",
    "validate_compiled_pattern",
    "validate_length",
    "validate_defined",
]
