"""Utility functions."""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

# Plain decimal numbers only: no padding, digit separators, nan or inf
FLOAT_PATTERN = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)
INT_PATTERN = re.compile(r'[+-]?\d+', re.ASCII)


def parse_float(value: Optional[str], field: str = "value") -> float:
    """
    Parse a string-encoded number, falling back to 0.0.

    Args:
        value: Raw string from the report (may be empty or None)
        field: Field name, used only for logging

    Returns:
        Parsed value, or 0.0 if the string is not a number
    """
    if not isinstance(value, str) or not FLOAT_PATTERN.fullmatch(value):
        logger.debug(f"Unparseable {field} {value!r}, using 0")
        return 0.0
    return float(value)


def parse_int(value: Optional[str], field: str = "value") -> int:
    """Parse a base-10 integer string, falling back to 0."""
    if not isinstance(value, str) or not INT_PATTERN.fullmatch(value):
        logger.debug(f"Unparseable {field} {value!r}, using 0")
        return 0
    return int(value, 10)


def c_to_f(c: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return c * 9 / 5 + 32


def hundreds_ft_to_ft(hundreds: int) -> int:
    """Convert a METAR height code (hundreds of feet) to feet."""
    return hundreds * 100
