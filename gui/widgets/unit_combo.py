# gui/widgets/unit_combo.py
from PySide6.QtWidgets import QComboBox

from core.units import UnitRegistry


class UnitCombo(QComboBox):
    """Combo listing every unit as 'Name (symbol)'; item data is the symbol."""

    def __init__(self, registry: UnitRegistry, parent=None):
        super().__init__(parent)
        for unit in registry:
            self.addItem(f"{unit.name} ({unit.symbol})", unit.symbol)

    def current_symbol(self) -> str:
        return self.currentData() or ""

    def set_symbol(self, symbol: str) -> None:
        """Programmatic selection; does not emit change signals."""
        idx = self.findData(symbol)
        if idx < 0 or idx == self.currentIndex():
            return
        self.blockSignals(True)
        self.setCurrentIndex(idx)
        self.blockSignals(False)
