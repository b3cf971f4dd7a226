"""Strict numeric text parsing.

Python's ``int`` and ``float`` trim whitespace and accept digit-group
underscores and non-ASCII digits. BED fields are checked against plain
ASCII patterns before conversion so those forms are rejected.
"""

from __future__ import annotations

import re

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def parse_unsigned(text: str) -> int:
    """Parse ASCII digits with an optional leading ``+``.

    Raises:
        ValueError: If text is not a plain unsigned integer.
    """
    if _UNSIGNED_PATTERN.fullmatch(text) is None:
        raise ValueError(f"invalid unsigned integer: '{text}'")
    return int(text)


def parse_integer(text: str) -> int:
    """Parse ASCII digits with an optional sign.

    Raises:
        ValueError: If text is not a plain integer.
    """
    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise ValueError(f"invalid integer: '{text}'")
    return int(text)


def parse_decimal(text: str) -> float:
    """Parse a decimal or exponent float, ``inf`` or ``nan``.

    Raises:
        ValueError: If text contains whitespace, underscores or other
            characters outside the plain float syntax.
    """
    if _DECIMAL_PATTERN.fullmatch(text) is None:
        raise ValueError(f"invalid number: '{text}'")
    return float(text)
