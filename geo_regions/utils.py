"""Shared utility functions"""

import math
import re

# Longest numeric prefix accepted by C's atof (decimal forms only)
_FLOAT_PREFIX = re.compile(
    r"""
    [+-]?
    (?:
        (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | inf(?:inity)?
      | nan
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


def float_or_zero(value) -> float:
    """Convert a value to float the way atof does.

    Leading whitespace is skipped and the longest valid numeric prefix is
    converted; anything unparseable yields 0.0. Never raises.

    Args:
        value: String (or number) to convert

    Returns:
        Parsed float, or 0.0
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)

    match = _FLOAT_PREFIX.match(str(value).lstrip())
    if match is None:
        return 0.0
    return float(match.group(0))


def trunc_int(value: float) -> int:
    """Truncate toward zero, clamping non-finite values to 0"""
    if not math.isfinite(value):
        return 0
    return int(value)


def hundredths(value: float) -> int:
    """Absolute two-digit fractional part of a value (|trunc(v*100)| mod 100)"""
    return abs(trunc_int(value * 100)) % 100
