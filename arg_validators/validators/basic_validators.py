"""
Guards for presence, default values, native handles, ranges and enumerations.
"""

import ctypes
import uuid
from datetime import timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, Optional, Tuple, Type, TypeVar

from ..core.exceptions import (
    InvalidArgumentError,
    NullArgumentError,
    NullOrDefaultArgumentError,
    OutOfRangeArgumentError,
)
from ..core.interfaces import (
    SIGNED_NULL_HANDLE,
    UNSIGNED_NULL_HANDLE,
    NativeHandle,
    SupportsComparison,
)
from ..utils.telemetry import report_violation

T = TypeVar("T")
H = TypeVar("H", bound=NativeHandle)
E = TypeVar("E")

_MISSING: Any = object()

# Zero values of the value-like types; checked in order, so bool/IntEnum fall under int.
_ZERO_VALUES: Tuple[Tuple[type, Any], ...] = (
    (int, 0),
    (float, 0.0),
    (complex, 0j),
    (Decimal, Decimal(0)),
    (Fraction, Fraction(0)),
    (timedelta, timedelta(0)),
    (uuid.UUID, uuid.UUID(int=0)),
)

_UNSIGNED_HANDLE_TYPES = (
    ctypes.c_size_t,
    ctypes.c_ulong,
    ctypes.c_ulonglong,
    ctypes.c_uint,
)


def _default_for(value: Any) -> Any:
    if isinstance(value, Enum):
        # An enumeration defaults to its zero member; flags without one fall through to int.
        for member in type(value).__members__.values():
            if member.value == 0:
                return member
    for zero_type, zero_value in _ZERO_VALUES:
        if isinstance(value, zero_type):
            return zero_value
    return _MISSING


def validate_not_default(value: T, param_name: str, default: Any = _MISSING) -> T:
    """
    Verify that a value is not the default for its type.

    ``None`` is always treated as the default. Otherwise the explicit
    ``default`` is used, falling back to the zero value of numeric, duration
    and UUID types. An enumeration member fails when its value is zero.
    Values of other types only fail when ``None``.

    Returns:
        ``value`` for fluent usage.

    Raises:
        NullOrDefaultArgumentError: ``value`` is ``None`` or the default.
    """
    if value is None:
        raise report_violation(NullOrDefaultArgumentError(param_name), "validate_not_default")

    if default is _MISSING:
        default = _default_for(value)

    if default is not _MISSING and value == default:
        raise report_violation(
            NullOrDefaultArgumentError(param_name, details={"default": default}),
            "validate_not_default"
        )

    return value


def validate_not_null(value: Optional[T], param_name: str) -> T:
    """Verify an object isn't ``None``. Returns ``value`` for fluent usage."""
    if value is None:
        raise report_violation(NullArgumentError(param_name), "validate_not_null")

    return value


def _is_null_handle(handle: Any) -> bool:
    if isinstance(handle, ctypes._Pointer):
        return not handle
    if isinstance(handle, _UNSIGNED_HANDLE_TYPES):
        return handle.value == UNSIGNED_NULL_HANDLE
    if isinstance(handle, ctypes._SimpleCData):
        # c_void_p reports a null address as None
        return handle.value is None or handle.value == SIGNED_NULL_HANDLE
    return handle == SIGNED_NULL_HANDLE


def validate_not_null_handle(handle: H, param_name: str) -> H:
    """
    Verify a native handle isn't the null handle of its representation.

    Accepts raw integer addresses, ``ctypes`` integer handles (signed or
    unsigned), ``c_void_p`` and ``ctypes`` pointer instances.
    """
    if handle is None or _is_null_handle(handle):
        raise report_violation(NullArgumentError(param_name), "validate_not_null_handle")

    return handle


def validate_range(
    value: SupportsComparison,
    min_value: SupportsComparison,
    max_value: SupportsComparison,
    param_name: str
) -> None:
    """
    Verify a value lies within the closed interval ``[min_value, max_value]``.

    An inverted interval (``min_value > max_value``) rejects every value.
    """
    if min_value > value or value > max_value:
        raise report_violation(
            OutOfRangeArgumentError(
                f"Accepted range: [{min_value}, {max_value}]",
                param_name,
                actual_value=value,
                min_value=min_value,
                max_value=max_value
            ),
            "validate_range"
        )


def validate_defined(value: E, param_name: str, enum_type: Optional[Type[Enum]] = None) -> E:
    """
    Verify a value is one of the declared members of an enumeration.

    ``value`` may be a member or a raw value. Composite flag values that are
    not declared as members are rejected. Raw values must match a member's
    value in type as well as equality, so ``True`` is not ``1``.
    ``enum_type`` defaults to the type of ``value`` and is required for raw
    values.
    """
    if enum_type is None:
        if not isinstance(value, Enum):
            raise TypeError("enum_type is required when value is not an Enum member")
        enum_type = type(value)

    members = enum_type.__members__.values()
    if isinstance(value, enum_type):
        is_defined = any(value is member for member in members)
    else:
        is_defined = any(
            type(member.value) is type(value) and member.value == value
            for member in members
        )

    if not is_defined:
        type_name = f"{enum_type.__module__}.{enum_type.__qualname__}"
        raise report_violation(
            InvalidArgumentError(
                f"Type {type_name} does not define an enumerated value for '{value}'",
                param_name,
                details={"enum_type": type_name, "value": value}
            ),
            "validate_defined"
        )

    return value
