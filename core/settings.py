# core/settings.py

from __future__ import annotations
from dataclasses import dataclass

from core.formatting import FACTOR_PLACES, RESULT_PLACES
from core.units import SHORTCUT_LIMIT


@dataclass
class ConverterSettings:
    """Start-up defaults and display precision. In-memory only."""
    window_title: str = "Length Unit Converter"
    default_input: str = "1"
    default_source: str = "mil"
    default_target: str = "mm"
    result_places: int = RESULT_PLACES
    factor_places: int = FACTOR_PLACES
    shortcut_count: int = SHORTCUT_LIMIT

    def __post_init__(self):
        for name in ("result_places", "factor_places", "shortcut_count"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

