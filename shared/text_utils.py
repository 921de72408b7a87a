"""
Text processing utilities for catalog data.

Provides whitespace normalization and lenient number/boolean coercion
for product rows coming from exports or the API.
"""

import re
from typing import Any, Optional, Union


def normalize_whitespace(s: Optional[str]) -> str:
    """
    Collapse multiple whitespace characters into single spaces.

    Args:
        s: String to normalize

    Returns:
        String with collapsed whitespace
    """
    return re.sub(r"\s+", " ", (s or "").strip())


def parse_number(value: Any, default: Union[int, float] = 0) -> Union[int, float]:
    """
    Coerce a loosely typed value into a number.

    Accepts ints, floats and numeric strings (a decimal comma is accepted,
    e.g. "1299,90"). Booleans, blanks and anything unparseable give the default.

    Args:
        value: Value to coerce
        default: Value returned when coercion is not possible

    Returns:
        Parsed number or default

    Examples:
        >>> parse_number("150")
        150
        >>> parse_number("1299,90")
        1299.9
        >>> parse_number(None)
        0
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return default

    s = value.strip()
    if not s:
        return default
    if "," in s and "." not in s:
        s = s.replace(",", ".")
    try:
        number = float(s)
    except ValueError:
        return default
    return int(number) if number.is_integer() and "." not in s else number


def parse_bool(value: Any) -> bool:
    """
    Interpret spreadsheet-style truthy values ("true", "yes", "sim", "1", "x").

    Args:
        value: Value to interpret

    Returns:
        True for recognized truthy values, False otherwise
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"true", "yes", "y", "sim", "s", "1", "x"}
    return False
