from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QDialog,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QSizePolicy,
    QTableWidgetItem,
    QVBoxLayout,
)
from ui_widgets import TableWidget

from morsetranslator.core.context import write_clipboard
from morsetranslator.translation.code_table import CODE_TABLE


class ReferenceTableDialog(QDialog):
    """Searchable character / Morse symbol table."""

    def __init__(self, parent=None, clipboard_writer=None):
        super().__init__(parent)
        self.clipboard_writer = clipboard_writer or write_clipboard
        self.setWindowFlags(Qt.WindowCloseButtonHint)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.resize(420, 560)
        self.center()

        self._init_ui()
        self._load_table()

    def _init_ui(self):
        self.setWindowTitle(self.tr("Morse Code Reference Table"))

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 10, 12, 10)
        root.setSpacing(8)

        top = QHBoxLayout()
        top.setSpacing(8)

        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText(self.tr("Filter by keyword..."))
        self.search_edit.textChanged.connect(self._apply_filter)

        self.count_label = QLabel("")
        self.count_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)

        top.addWidget(self.search_edit, 1)
        top.addWidget(self.count_label)

        self.table = TableWidget()
        self.table.setAlternatingRowColors(True)
        self.table.setEditTriggers(TableWidget.NoEditTriggers)
        self.table.itemDoubleClicked.connect(self._copy_cell)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)

        root.addLayout(top)
        root.addWidget(self.table, 1)

    def _load_table(self):
        # The word gap entry maps space to space and has nothing to show.
        data = [[char, symbol] for char, symbol in CODE_TABLE.items() if char != " "]
        headers = [self.tr("Character"), self.tr("Morse code")]

        self.table.setColumnCount(len(headers))
        self.table.setHorizontalHeaderLabels(headers)
        self.table.setRowCount(len(data))

        for row, values in enumerate(data):
            for col, value in enumerate(values):
                self.table.setItem(row, col, QTableWidgetItem(value))

        self._update_count_label()

    def _apply_filter(self):
        keyword = self.search_edit.text().strip().lower()
        for row in range(self.table.rowCount()):
            cells = []
            for col in range(self.table.columnCount()):
                item = self.table.item(row, col)
                cells.append(item.text().lower() if item else "")
            matched = any(keyword == cell or (len(keyword) > 1 and keyword in cell) for cell in cells)
            self.table.setRowHidden(row, bool(keyword) and not matched)
        self._update_count_label()

    def visible_row_count(self):
        return sum(1 for row in range(self.table.rowCount()) if not self.table.isRowHidden(row))

    def _update_count_label(self):
        self.count_label.setText(
            self.tr("Showing {0}/{1}").format(self.visible_row_count(), self.table.rowCount())
        )

    def _copy_cell(self, item):
        if not item:
            return
        self.clipboard_writer(item.text())

    def center(self):
        screen = QApplication.primaryScreen().availableGeometry()
        size = self.geometry()
        center_point_x = int((screen.width() - size.width()) / 2)
        center_point_y = int((screen.height() - size.height()) / 2)
        self.move(center_point_x, center_point_y)
