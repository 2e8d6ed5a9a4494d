"""Integer conversions and small integer math helpers."""

from __future__ import annotations

import re

from aockit.domain.errors import ConversionError

# Optional sign followed by ASCII digits; no underscores, no radix prefixes.
_INT_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def str_to_int(text: str) -> int:
    """Convert *text* to an int, ignoring surrounding whitespace.

    Examples:
        >>> str_to_int(" -42 ")
        -42

    Raises:
        ConversionError: *text* is not a plain base-10 integer.
    """
    stripped = text.strip()
    if not _INT_PATTERN.match(stripped):
        msg = f"Not an integer: {text!r}"
        raise ConversionError(msg)
    return int(stripped)


def int_to_str(number: int) -> str:
    """Base-10 string form of *number*."""
    return str(number)


def abs_int(x: int) -> int:
    """Absolute value of *x*."""
    return -x if x < 0 else x


def power(n: int, m: int) -> int:
    """Return *n* raised to the *m*-th power by repeated multiplication.

    Raises:
        ValueError: *m* is negative, which has no integer result.
    """
    if m < 0:
        msg = f"Exponent must be non-negative, got {m}"
        raise ValueError(msg)
    result = 1
    for _ in range(m):
        result *= n
    return result
