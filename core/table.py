# core/table.py

import pandas as pd

from core.formatting import FACTOR_PLACES, RESULT_PLACES, format_conversion, format_factor, parse_value
from core.state import ConverterState
from core.units import LENGTH, UnitRegistry, conversion_factor

TABLE_COLUMNS = ["Unit", "Symbol", "Value", "Factor"]


def conversion_table(
    state: ConverterState,
    registry: UnitRegistry = LENGTH,
    *,
    result_places: int = RESULT_PLACES,
    factor_places: int = FACTOR_PLACES,
) -> pd.DataFrame:
    """The current input expressed in every unit of the registry, in table order."""
    value = parse_value(state.input_text)
    rows = []
    for unit in registry:
        rows.append({
            "Unit": unit.name,
            "Symbol": unit.symbol,
            "Value": format_conversion(value, state.source, unit, result_places),
            "Factor": format_factor(conversion_factor(state.source, unit), factor_places),
        })
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
