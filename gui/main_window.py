# gui/main_window.py

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from core.settings import ConverterSettings
from core.state import ConversionView
from gui.converter_session import ConverterSession
from gui.widgets.conversion_table import ConversionTable
from gui.widgets.formula_panel import FormulaPanel
from gui.widgets.input_panel import InputPanel
from gui.widgets.result_panel import ResultPanel
from gui.widgets.shortcut_bar import ShortcutBar

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):

    def __init__(self, settings: Optional[ConverterSettings] = None) -> None:

        super().__init__()

        # ---- Core ----
        self.settings = settings or ConverterSettings()
        self.session = ConverterSession(self.settings, parent=self)

        self.setWindowTitle(self.settings.window_title)

        # ---- Central UI ----
        central_widget = QWidget()
        main_layout = QVBoxLayout(central_widget)
        self.setCentralWidget(central_widget)

        self.input_panel = InputPanel(self.session, self)
        main_layout.addWidget(self.input_panel)

        swap_row = QHBoxLayout()
        self.btn_swap = QPushButton("⇅  Swap Units")
        self.btn_swap.setToolTip("Swap source and target units")
        swap_row.addStretch()
        swap_row.addWidget(self.btn_swap)
        swap_row.addStretch()
        main_layout.addLayout(swap_row)

        self.result_panel = ResultPanel(self.session, self)
        main_layout.addWidget(self.result_panel)

        self.shortcuts = ShortcutBar(self.session, self)
        main_layout.addWidget(self.shortcuts)

        self.formula = FormulaPanel(self.session, self)
        main_layout.addWidget(self.formula)

        self.table = ConversionTable(self.session, self)
        main_layout.addWidget(self.table)

        footer = QLabel(f"Results are rounded to {self.settings.result_places} decimal places.")
        footer.setEnabled(False)
        main_layout.addWidget(footer)

        # Toolbar
        tb = QToolBar(movable=False)
        self.addToolBar(tb)
        self.act_swap = QAction("Swap", self)
        tb.addAction(self.act_swap)

        sb = QStatusBar()
        self.setStatusBar(sb)

        # ---- Connections ----
        self.btn_swap.clicked.connect(self._on_swap_clicked)
        self.act_swap.triggered.connect(self._on_swap_clicked)
        self.session.viewChanged.connect(self._on_view_changed)

        self._on_view_changed(self.session.view)

    # ---------------- Event handlers ----------------

    def _on_swap_clicked(self) -> None:
        self.session.swap()
        view = self.session.view
        self.statusBar().showMessage(f"Swapped: {view.source_symbol} → {view.target_symbol}", 3000)

    def _on_view_changed(self, view: ConversionView) -> None:
        if not view.valid:
            self.statusBar().showMessage("Input is not a number; showing 0.", 3000)
