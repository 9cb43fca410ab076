# gui/widgets/shortcut_bar.py
from PySide6.QtWidgets import QWidget, QGroupBox, QGridLayout, QPushButton, QVBoxLayout

from core.state import ConversionView
from core.units import Unit
from gui.converter_session import ConverterSession, ViewAwareMixin

COLUMNS = 4


class ShortcutBar(QWidget, ViewAwareMixin):
    """One-click source unit selection for the leading units of the table."""
    def __init__(self, session: ConverterSession, parent=None):
        super().__init__(parent)
        self.session = session

        self.group = QGroupBox("Common Units")
        grid = QGridLayout(self.group)

        self.buttons: dict[str, QPushButton] = {}
        for i, unit in enumerate(session.shortcut_units()):
            btn = QPushButton(unit.name)
            btn.setCheckable(True)
            btn.setToolTip(unit.symbol)
            btn.clicked.connect(lambda _checked=False, u=unit: self._on_clicked(u))
            grid.addWidget(btn, i // COLUMNS, i % COLUMNS)
            self.buttons[unit.symbol] = btn

        lay = QVBoxLayout(self)
        lay.addWidget(self.group)

        self.bind_session(session)

    def _on_clicked(self, unit: Unit) -> None:
        self.session.select_shortcut(unit)
        # re-sync: clicking the active button would otherwise uncheck it
        self.update_view(self.session.view)

    def update_view(self, view: ConversionView) -> None:
        # a source outside the shortcut set leaves every button unchecked
        for symbol, btn in self.buttons.items():
            btn.setChecked(symbol == view.source_symbol)
