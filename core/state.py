# core/state.py
"""
Converter state and its pure update functions.

Every update returns a new ConverterState; nothing is mutated in place.
The displayed outputs are recomputed explicitly with derive_view().
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from core.formatting import (
    FACTOR_PLACES,
    RESULT_PLACES,
    format_conversion,
    format_factor,
    parse_value,
)
from core.settings import ConverterSettings
from core.units import LENGTH, Unit, UnitRegistry, conversion_factor


@dataclass(frozen=True)
class ConverterState:
    input_text: str
    source: Unit
    target: Unit


@dataclass(frozen=True)
class ConversionView:
    input_text: str
    result_text: str
    factor_text: str
    source_symbol: str
    target_symbol: str
    valid: bool

    @property
    def formula_text(self) -> str:
        return f"{self.input_text} {self.source_symbol} = {self.result_text} {self.target_symbol}"

    @property
    def factor_line(self) -> str:
        return f"1 {self.source_symbol} = {self.factor_text} {self.target_symbol}"


def initial_state(
    settings: Optional[ConverterSettings] = None,
    registry: UnitRegistry = LENGTH,
) -> ConverterState:
    settings = settings or ConverterSettings()
    state = ConverterState(
        input_text=settings.default_input,
        source=registry.units[0],
        target=registry.units[min(1, len(registry) - 1)],
    )
    state = select_source_symbol(state, settings.default_source, registry)
    return select_target_symbol(state, settings.default_target, registry)


# ---------------- updates ----------------

def set_input(state: ConverterState, text: str) -> ConverterState:
    return replace(state, input_text=text)


def set_source(state: ConverterState, unit: Unit) -> ConverterState:
    return replace(state, source=unit)


def set_target(state: ConverterState, unit: Unit) -> ConverterState:
    return replace(state, target=unit)


def select_source_symbol(state: ConverterState, symbol: str, registry: UnitRegistry = LENGTH) -> ConverterState:
    return set_source(state, registry.get(symbol))


def select_target_symbol(state: ConverterState, symbol: str, registry: UnitRegistry = LENGTH) -> ConverterState:
    # target selector falls back to the second entry, source to the first
    default = registry.units[min(1, len(registry) - 1)]
    return set_target(state, registry.get(symbol, default))


def select_shortcut(state: ConverterState, unit: Unit) -> ConverterState:
    """Shortcut buttons only move the source unit."""
    return set_source(state, unit)


def swap(state: ConverterState, result_places: int = RESULT_PLACES) -> ConverterState:
    """Exchange source and target, seeding the input with the shown result."""
    shown = derive_view(state, result_places=result_places).result_text
    return ConverterState(input_text=shown, source=state.target, target=state.source)


# ---------------- recomputation ----------------

def derive_view(
    state: ConverterState,
    *,
    result_places: int = RESULT_PLACES,
    factor_places: int = FACTOR_PLACES,
) -> ConversionView:
    value = parse_value(state.input_text)
    return ConversionView(
        input_text=state.input_text,
        result_text=format_conversion(value, state.source, state.target, result_places),
        factor_text=format_factor(conversion_factor(state.source, state.target), factor_places),
        source_symbol=state.source.symbol,
        target_symbol=state.target.symbol,
        valid=value is not None,
    )
