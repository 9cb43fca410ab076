# gui/widgets/result_panel.py
from PySide6.QtWidgets import QWidget, QGroupBox, QHBoxLayout, QLineEdit, QVBoxLayout

from core.state import ConversionView
from gui.converter_session import ConverterSession, ViewAwareMixin
from gui.widgets.unit_combo import UnitCombo


class ResultPanel(QWidget, ViewAwareMixin):
    """Read-only converted value and target unit."""
    def __init__(self, session: ConverterSession, parent=None):
        super().__init__(parent)
        self.session = session

        self.group = QGroupBox("Result")
        row = QHBoxLayout(self.group)

        self.result_edit = QLineEdit()
        self.result_edit.setReadOnly(True)
        font = self.result_edit.font()
        font.setBold(True)
        self.result_edit.setFont(font)
        self.target_combo = UnitCombo(session.registry)

        row.addWidget(self.result_edit, 2)
        row.addWidget(self.target_combo, 1)

        lay = QVBoxLayout(self)
        lay.addWidget(self.group)

        self.target_combo.currentIndexChanged.connect(
            lambda _i: session.select_target(self.target_combo.current_symbol())
        )

        self.bind_session(session)

    def update_view(self, view: ConversionView) -> None:
        self.result_edit.setText(view.result_text)
        self.target_combo.set_symbol(view.target_symbol)
