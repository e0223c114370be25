"""
Core protocols and markers shared by the validators.
"""

import ctypes
from typing import Any, Protocol, Union


# Null sentinels for native handle representations.
SIGNED_NULL_HANDLE = ctypes.c_ssize_t(0).value
UNSIGNED_NULL_HANDLE = ctypes.c_size_t(0).value

NativeHandle = Union[int, ctypes.c_void_p, ctypes.c_ssize_t, ctypes.c_size_t, "ctypes._Pointer"]


class SupportsComparison(Protocol):
    """Values that can be ordered against their bounds."""

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


class ValidatedNotNull:
    """
    Marker for static tooling: the annotated parameter is validated as
    non-null by a guard called inside the function.

    Usage:
        def open_file(path: Annotated[str, ValidatedNotNull]) -> None:
            validate_not_null(path, "path")

    The marker is never inspected at runtime.
    """
