# core/units.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

log = logging.getLogger(__name__)

SHORTCUT_LIMIT = 8


@dataclass(frozen=True)
class Unit:
    name: str
    symbol: str
    to_base: float


class UnitRegistry:
    """
    Ordered, read-only catalog of units sharing one base unit.

    Order matters: the first entry is the fallback for failed lookups and the
    leading entries are the ones offered as shortcuts.
    """

    def __init__(self, units: Iterable[Unit], *, base_symbol: str):
        self._units: Tuple[Unit, ...] = tuple(units)
        self._by_symbol: Dict[str, Unit] = {}
        if not self._units:
            raise ValueError("A unit registry needs at least one unit.")
        for u in self._units:
            if u.symbol in self._by_symbol:
                raise ValueError(f"Duplicate unit symbol: {u.symbol}")
            if not u.to_base > 0:
                raise ValueError(f"Unit '{u.symbol}' must have a positive factor, got {u.to_base!r}")
            self._by_symbol[u.symbol] = u
        if base_symbol not in self._by_symbol:
            raise ValueError(f"Base unit '{base_symbol}' not present.")

    # ---- catalog ----
    @property
    def units(self) -> Tuple[Unit, ...]:
        return self._units

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def symbols(self) -> List[str]:
        return [u.symbol for u in self._units]

    def shortcut_units(self, limit: int = SHORTCUT_LIMIT) -> Tuple[Unit, ...]:
        return self._units[:max(0, limit)]

    # ---- lookup ----
    def find_by_symbol(self, symbol: str) -> Optional[Unit]:
        return self._by_symbol.get(symbol)

    def get(self, symbol: str, default: Optional[Unit] = None) -> Unit:
        """Lenient lookup: unknown symbols resolve to `default` (or the first unit)."""
        unit = self._by_symbol.get(symbol)
        if unit is not None:
            return unit
        fallback = default if default is not None else self._units[0]
        log.warning("Unknown unit %r, falling back to %r", symbol, fallback.symbol)
        return fallback


def convert(value: float, source: Unit, target: Unit) -> float:
    meters = value * source.to_base
    return meters / target.to_base


def conversion_factor(source: Unit, target: Unit) -> float:
    """How many `target` units make one `source` unit."""
    return source.to_base / target.to_base


# Length (base: m), in display order
LENGTH = UnitRegistry(
    units=(
        Unit("Mil",        "mil", 0.0000254),
        Unit("Millimeter", "mm",  0.001),
        Unit("Meter",      "m",   1.0),
        Unit("Centimeter", "cm",  0.01),
        Unit("Inch",       "in",  0.0254),
        Unit("Foot",       "ft",  0.3048),
        Unit("Yard",       "yd",  0.9144),
        Unit("Kilometer",  "km",  1000.0),
        Unit("Micrometer", "μm",  0.000001),
    ),
    base_symbol="m",
)

