# gui/widgets/input_panel.py
from PySide6.QtWidgets import QWidget, QGroupBox, QHBoxLayout, QLineEdit, QVBoxLayout

from core.state import ConversionView
from gui.converter_session import ConverterSession, ViewAwareMixin
from gui.widgets.unit_combo import UnitCombo


class InputPanel(QWidget, ViewAwareMixin):
    """Value entry and source unit."""
    def __init__(self, session: ConverterSession, parent=None):
        super().__init__(parent)
        self.session = session

        self.group = QGroupBox("Input Value")
        row = QHBoxLayout(self.group)

        # free-form on purpose: bad input renders as 0 instead of being blocked
        self.value_edit = QLineEdit()
        self.value_edit.setPlaceholderText("Enter a value")
        self.source_combo = UnitCombo(session.registry)

        row.addWidget(self.value_edit, 2)
        row.addWidget(self.source_combo, 1)

        lay = QVBoxLayout(self)
        lay.addWidget(self.group)

        # textEdited fires for user edits only, not for setText() during a swap
        self.value_edit.textEdited.connect(session.set_input)
        self.source_combo.currentIndexChanged.connect(
            lambda _i: session.select_source(self.source_combo.current_symbol())
        )

        self.bind_session(session)

    def update_view(self, view: ConversionView) -> None:
        if self.value_edit.text() != view.input_text:
            self.value_edit.setText(view.input_text)
        self.source_combo.set_symbol(view.source_symbol)
