"""Unit tests for strict numeric text parsing."""

from __future__ import annotations

import math

import pytest

from core.number_parsing import parse_decimal, parse_integer, parse_unsigned


@pytest.mark.parametrize(
    ("text", "expected"),
    [("5", 5.0), ("-2.5", -2.5), ("+.5", 0.5), ("1.", 1.0), ("1e-07", 1e-07), ("3E2", 300.0)],
)
def test_parse_decimal_accepts_plain_float_syntax(text: str, expected: float) -> None:
    """Plain decimal and exponent forms should parse."""
    assert parse_decimal(text) == expected


def test_parse_decimal_accepts_non_finite_keywords() -> None:
    """inf and nan keywords should parse case-insensitively."""
    assert parse_decimal("-Infinity") == float("-inf")
    assert math.isnan(parse_decimal("NaN"))


@pytest.mark.parametrize("text", ["1_000", " 5", "5 ", ".", "", "1e", "0x10", "١"])
def test_parse_decimal_rejects_lenient_forms(text: str) -> None:
    """Whitespace, underscores and non-ASCII digits should be rejected."""
    with pytest.raises(ValueError):
        parse_decimal(text)


@pytest.mark.parametrize("text", ["-3", " 3", "3_0", "١"])
def test_parse_unsigned_rejects_signs_and_lenient_forms(text: str) -> None:
    """Only ASCII digits with an optional plus sign should parse."""
    with pytest.raises(ValueError):
        parse_unsigned(text)


def test_parse_integer_accepts_sign() -> None:
    """Signed ASCII integers should parse."""
    assert (parse_integer("-1"), parse_integer("+7")) == (-1, 7)
