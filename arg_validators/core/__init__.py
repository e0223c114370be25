"""
Core components for the argument validation library.
"""

from .interfaces import (
    SupportsComparison,
    ValidatedNotNull,
    NativeHandle,
    SIGNED_NULL_HANDLE,
    UNSIGNED_NULL_HANDLE,
)
from .exceptions import (
    ArgumentError,
    NullArgumentError,
    NullOrDefaultArgumentError,
    EmptyArgumentError,
    InvalidArgumentError,
    OutOfRangeArgumentError,
    FormatArgumentError,
)

__all__ = [
    "SupportsComparison",
    "ValidatedNotNull",
    "NativeHandle",
    "SIGNED_NULL_HANDLE",
    "UNSIGNED_NULL_HANDLE",
    "ArgumentError",
    "NullArgumentError",
    "NullOrDefaultArgumentError",
    "EmptyArgumentError",
    "InvalidArgumentError",
    "OutOfRangeArgumentError",
    "FormatArgumentError",
]
