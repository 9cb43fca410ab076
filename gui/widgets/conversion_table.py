# gui/widgets/conversion_table.py
from PySide6.QtWidgets import QWidget, QGroupBox, QVBoxLayout, QTableWidget, \
    QTableWidgetItem, QSizePolicy, QHeaderView, QAbstractItemView
from PySide6.QtCore import Qt

from core.state import ConversionView
from core.table import TABLE_COLUMNS, conversion_table
from gui.converter_session import ConverterSession, ViewAwareMixin


class ConversionTable(QWidget, ViewAwareMixin):
    """The current input in every unit; the active target row is selected."""
    def __init__(self, session: ConverterSession, parent=None):
        super().__init__(parent)
        self.session = session

        self.group = QGroupBox("All Units")
        vbox = QVBoxLayout(self.group)

        self.table = QTableWidget(0, len(TABLE_COLUMNS))
        self.table.setHorizontalHeaderLabels(TABLE_COLUMNS)
        self.table.verticalHeader().setVisible(False)
        self.table.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.verticalHeader().setSectionResizeMode(QHeaderView.Fixed)
        self.table.verticalHeader().setDefaultSectionSize(28)
        self.table.setAlternatingRowColors(True)
        self.table.setWordWrap(False)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        vbox.addWidget(self.table)

        lay = QVBoxLayout(self)
        lay.addWidget(self.group)

        self.bind_session(session)

    # ---- public API ----
    def refresh(self) -> None:
        settings = self.session.settings
        df = conversion_table(
            self.session.state,
            self.session.registry,
            result_places=settings.result_places,
            factor_places=settings.factor_places,
        )
        self.table.setRowCount(len(df))
        for r, row in enumerate(df.itertuples(index=False)):
            self.table.setItem(r, 0, QTableWidgetItem(row.Unit))
            self.table.setItem(r, 1, QTableWidgetItem(row.Symbol))
            self.table.setItem(r, 2, self._num(row.Value))
            self.table.setItem(r, 3, self._num(row.Factor))

    def row_values(self) -> list[str]:
        return [self.table.item(r, 2).text() for r in range(self.table.rowCount())]

    # ---- view-aware ----
    def update_view(self, view: ConversionView) -> None:
        self.refresh()
        matches = self.table.findItems(view.target_symbol, Qt.MatchExactly)
        for item in matches:
            if item.column() == 1:
                self.table.selectRow(item.row())
                break

    # ---- helpers ----
    @staticmethod
    def _num(text: str) -> QTableWidgetItem:
        it = QTableWidgetItem(text)
        it.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
        return it
