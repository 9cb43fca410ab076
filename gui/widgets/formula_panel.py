# gui/widgets/formula_panel.py
from PySide6.QtCore import Qt
from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import QWidget, QGroupBox, QLabel, QVBoxLayout

from core.state import ConversionView
from gui.converter_session import ConverterSession, ViewAwareMixin


class FormulaPanel(QWidget, ViewAwareMixin):
    def __init__(self, session: ConverterSession, parent=None):
        super().__init__(parent)

        self.group = QGroupBox("Conversion")
        vbox = QVBoxLayout(self.group)

        self.formula_label = QLabel()
        self.formula_label.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.formula_label.setAlignment(Qt.AlignCenter)
        self.formula_label.setTextInteractionFlags(Qt.TextSelectableByMouse)

        self.factor_label = QLabel()
        self.factor_label.setAlignment(Qt.AlignCenter)

        vbox.addWidget(self.formula_label)
        vbox.addWidget(self.factor_label)

        lay = QVBoxLayout(self)
        lay.addWidget(self.group)

        self.bind_session(session)

    def update_view(self, view: ConversionView) -> None:
        self.formula_label.setText(view.formula_text)
        self.factor_label.setText(f"Conversion factor: {view.factor_line}")
