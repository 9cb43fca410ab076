# tests/test_formatting.py

import pytest

from core.formatting import (
    format_conversion,
    format_factor,
    format_result,
    parse_value,
    strip_trailing_zeros,
)
from core.units import LENGTH

MIL = LENGTH.find_by_symbol("mil")
MM = LENGTH.find_by_symbol("mm")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1", 1.0),
        ("  2.5 ", 2.5),
        ("-3", -3.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("12abc", 12.0),
        ("1.", 1.0),
    ],
)
def test_parse_value_accepts_numeric_prefix(text, expected):
    assert parse_value(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "abc", "-", ".", "nan", "inf", "1e999", None])
def test_parse_value_rejects(text):
    assert parse_value(text) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.50000000", "1.5"),
        ("2.00000000", "2"),
        ("100.00000000", "100"),
        ("0.00000000", "0"),
        ("-0.00000000", "0"),
        ("100", "100"),
    ],
)
def test_strip_trailing_zeros(text, expected):
    assert strip_trailing_zeros(text) == expected


def test_format_result_rounds_to_eight_places():
    assert format_result(1 / 3) == "0.33333333"
    assert format_result(0.000000001) == "0"
    assert format_result(25.400000000000002) == "25.4"


def test_format_factor_keeps_six_places():
    assert format_factor(0.0254) == "0.025400"
    assert format_factor(1000) == "1000.000000"


def test_format_conversion():
    assert format_conversion(1.0, MIL, MM) == "0.0254"
    assert format_conversion(1000.0, LENGTH.find_by_symbol("m"), LENGTH.find_by_symbol("km")) == "1"


def test_format_conversion_of_failed_parse_is_zero():
    assert format_conversion(parse_value("hello"), MIL, MM) == "0"
    assert format_conversion(None, MIL, MM) == "0"


def test_tiny_negative_result_shows_unsigned_zero():
    assert format_conversion(parse_value("-0.000000001"), MIL, MM) == "0"
