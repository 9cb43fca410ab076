# core/formatting.py
from __future__ import annotations

import math
import re
from typing import Optional

from core.units import Unit, convert

RESULT_PLACES = 8
FACTOR_PLACES = 6

# Longest numeric prefix, e.g. "12abc" -> "12", " -.5e3 mm" -> "-.5e3"
_NUMBER_PREFIX_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_value(text: Optional[str]) -> Optional[float]:
    """
    Lenient number parse of free-form input.

    Accepts a leading numeric prefix and ignores whatever follows it.
    Returns None when there is no number or it is not finite.
    """
    m = _NUMBER_PREFIX_RE.match(text or "")
    if not m:
        return None
    value = float(m.group(1))
    if not math.isfinite(value):
        return None
    return value


def format_fixed(value: float, places: int) -> str:
    return f"{value:.{places}f}"


def strip_trailing_zeros(text: str) -> str:
    if "." not in text:
        return text
    s = text.rstrip("0").rstrip(".")
    if s in ("-0", ""):
        return "0"
    return s


def format_result(value: float, places: int = RESULT_PLACES) -> str:
    return strip_trailing_zeros(format_fixed(value, places))


def format_factor(value: float, places: int = FACTOR_PLACES) -> str:
    return format_fixed(value, places)


def format_conversion(value: Optional[float], source: Unit, target: Unit, places: int = RESULT_PLACES) -> str:
    """Display text for a parsed input; a failed parse (None) shows as "0"."""
    if value is None:
        return "0"
    return format_result(convert(value, source, target), places)
