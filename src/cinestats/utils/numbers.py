"""Lenient number parsing for path parameters."""

import math
import re

# Leading decimal number, optionally signed, with optional exponent
_LEADING_NUMBER = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def parse_rating(value: str) -> float:
    """
    Parse a rating threshold from a URL segment.

    Takes the longest numeric prefix and ignores whatever follows it:
    - "7.5" → 7.5
    - "8abc" → 8.0
    - "-Infinity" → -inf

    Args:
        value: Raw path segment

    Returns:
        Parsed number, or NaN when the segment does not start with one
    """
    match = _LEADING_NUMBER.match(value)
    if not match:
        return math.nan

    number = match.group(1)
    if number.lstrip("+-") == "Infinity":
        return -math.inf if number.startswith("-") else math.inf
    return float(number)
