"""
Guards for string content, string length and regular expression formats.
"""

import re
from typing import Optional

from ..core.exceptions import (
    EmptyArgumentError,
    FormatArgumentError,
    InvalidArgumentError,
    NullArgumentError,
    OutOfRangeArgumentError,
)
from ..utils.telemetry import report_violation

NUL = "\0"

# File, group, record and unit separators pass str.isspace but are content here.
INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def _is_whitespace(value: str) -> bool:
    return value.isspace() and INFORMATION_SEPARATORS.isdisjoint(value)


def _is_null_or_whitespace(value: Optional[str]) -> bool:
    return value is None or not value or _is_whitespace(value)


def validate_not_null_or_whitespace(value: Optional[str], param_name: str) -> None:
    """
    Validate a string is not ``None``, empty or whitespace only.

    Checks run in order: ``None``, then empty (a zero length string or a
    single NUL character), then whitespace. The ASCII information separators
    (``\\x1c``-``\\x1f``) count as content, not whitespace.
    """
    if value is None:
        raise report_violation(NullArgumentError(param_name), "validate_not_null_or_whitespace")

    if len(value) == 0 or value == NUL:
        raise report_violation(
            EmptyArgumentError("Must not be empty", param_name),
            "validate_not_null_or_whitespace"
        )

    if _is_whitespace(value):
        raise report_violation(
            InvalidArgumentError("Must not be whitespace", param_name),
            "validate_not_null_or_whitespace"
        )


def validate_length(value: Optional[str], min_value: int, max_value: int, param_name: str) -> str:
    """
    Validate a string length falls within ``[min_value, max_value]`` characters.

    Returns:
        ``value`` for fluent usage.
    """
    if value is None:
        raise report_violation(NullArgumentError(param_name), "validate_length")

    length = len(value)
    if length < min_value or length > max_value:
        raise report_violation(
            OutOfRangeArgumentError(
                f"Expected string with length in the range [{min_value}, {max_value}]",
                param_name,
                actual_value=length,
                min_value=min_value,
                max_value=max_value
            ),
            "validate_length"
        )

    return value


def _match_or_raise(value: str, regex: re.Pattern[str], param_name: str, validator: str) -> re.Match[str]:
    match = regex.search(value)
    if match is None:
        raise report_violation(
            FormatArgumentError(
                f"Value does not conform to required format: {regex.pattern}",
                param_name,
                pattern=regex.pattern
            ),
            validator
        )
    return match


def validate_pattern(value: Optional[str], pattern: Optional[str], param_name: str) -> re.Match[str]:
    """
    Verify that a string matches a regular expression given as text.

    The pattern is compiled on every call; use ``validate_compiled_pattern``
    when the same pattern guards a hot path. Matching searches the whole
    string, so anchor the pattern to require a full match.

    Returns:
        The ``re.Match`` so callers can reuse captured groups.
    """
    if _is_null_or_whitespace(value):
        raise report_violation(
            InvalidArgumentError("Must not be null or whitespace", param_name),
            "validate_pattern"
        )

    if _is_null_or_whitespace(pattern):
        raise report_violation(
            InvalidArgumentError("Must not be null or whitespace", "pattern"),
            "validate_pattern"
        )

    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise report_violation(
            InvalidArgumentError(
                f"Invalid regular expression: {e}",
                "pattern",
                details={"pattern": pattern}
            ),
            "validate_pattern"
        ) from e

    return _match_or_raise(value, regex, param_name, "validate_pattern")


def validate_compiled_pattern(
    value: Optional[str],
    regex: Optional[re.Pattern[str]],
    param_name: str
) -> re.Match[str]:
    """Verify that a string matches a precompiled regular expression."""
    if _is_null_or_whitespace(value):
        raise report_violation(
            InvalidArgumentError("Must not be null or whitespace", param_name),
            "validate_compiled_pattern"
        )

    if regex is None:
        raise report_violation(NullArgumentError("regex"), "validate_compiled_pattern")

    return _match_or_raise(value, regex, param_name, "validate_compiled_pattern")
