"""
Table model for RecordVault UI
Shows the current page of a RecordTable in a QTableView; column 0 is the
selection checkbox and is wired to the table's SelectionTracker.
"""

import html

from PySide6.QtCore import Qt, QAbstractTableModel, QModelIndex
from PySide6.QtGui import QColor

from record_vault.config import EMPLOYEE_HEADERS, PAYROLL_HEADERS
from record_vault.records import PaymentStatus, RecordKind, field_text
from record_vault.selection import PAGE_ALL, PAGE_SOME
from record_vault.utils.helpers import format_hours

# column -> record field (column 0 is the checkbox)
COLUMNS = {
    RecordKind.EMPLOYEE: [None, "emp_no", "display_name", "department", "position",
                          "email_address", "mobile_number"],
    RecordKind.PAYROLL: [None, "emp_id", "name", "department", "salary", "hours", "status"],
}

HEADERS = {
    RecordKind.EMPLOYEE: EMPLOYEE_HEADERS,
    RecordKind.PAYROLL: PAYROLL_HEADERS,
}

# Columns that take part in search, so they get highlighted
HIGHLIGHT_FIELDS = {"emp_no", "emp_id", "display_name", "name", "department"}

STATUS_COLORS = {
    PaymentStatus.PAID.value: QColor("#16A34A"),
    PaymentStatus.NOT_PAID.value: QColor("#DC2626"),
}


class RecordTableModel(QAbstractTableModel):
    def __init__(self, table, parent=None):
        super().__init__(parent)
        self.table = table
        self.kind = table.store.schema.kind
        self.columns = COLUMNS[self.kind]
        self.headers = HEADERS[self.kind]
        self.rows = []
        self.refresh()

    def refresh(self):
        """Re-read the current page (call after any RecordTable change)"""
        self.beginResetModel()
        self.rows = list(self.table.current_page().items)
        self.endResetModel()

    def _highlight_text(self, text: str) -> str:
        """Add HTML highlighting to search matches"""
        term = (self.table.search_text or "").lower()
        if not term or not text:
            return html.escape(text or "")

        text_lower = text.lower()
        if term not in text_lower:
            return html.escape(text)

        result = []
        last_pos = 0
        while True:
            pos = text_lower.find(term, last_pos)
            if pos == -1:
                result.append(html.escape(text[last_pos:]))
                break
            result.append(html.escape(text[last_pos:pos]))
            match = html.escape(text[pos:pos + len(term)])
            result.append(f'<span style="background-color: #ffff00; color: #000000; font-weight: bold;">{match}</span>')
            last_pos = pos + len(term)

        return ''.join(result)

    def rowCount(self, parent=QModelIndex()):
        return 0 if parent.isValid() else len(self.rows)

    def columnCount(self, parent=QModelIndex()):
        return 0 if parent.isValid() else len(self.columns)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        record = self.rows[index.row()]
        col = index.column()
        name = self.columns[col]

        if col == 0:
            if role == Qt.CheckStateRole:
                return Qt.Checked if self.table.selection.is_selected(record.id) else Qt.Unchecked
            return None

        if role == Qt.DisplayRole:
            if name == "hours":
                return format_hours(record.hours)
            return field_text(record, name)

        # Raw text with search matches wrapped in <span> (rendered by an HTML delegate)
        if role == Qt.UserRole:
            value = field_text(record, name)
            if name in HIGHLIGHT_FIELDS:
                return self._highlight_text(value)
            return html.escape(value)

        if role == Qt.ForegroundRole and name == "status":
            return STATUS_COLORS.get(field_text(record, name))

        if role == Qt.TextAlignmentRole and name in ("salary", "hours"):
            return Qt.AlignRight | Qt.AlignVCenter

        return None

    def setData(self, index, value, role=Qt.EditRole):
        if not index.isValid() or index.column() != 0 or role != Qt.CheckStateRole:
            return False
        record = self.rows[index.row()]
        checked = Qt.CheckState(value) == Qt.Checked
        if checked != self.table.selection.is_selected(record.id):
            self.table.selection.toggle(record.id)
        self.dataChanged.emit(index, index, [Qt.CheckStateRole])
        self.headerDataChanged.emit(Qt.Horizontal, 0, 0)
        return True

    def flags(self, index):
        if not index.isValid():
            return Qt.NoItemFlags
        base = Qt.ItemIsEnabled | Qt.ItemIsSelectable
        if index.column() == 0:
            return base | Qt.ItemIsUserCheckable
        return base

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal and role == Qt.DisplayRole:
            return self.headers[section]
        if orientation == Qt.Horizontal and role == Qt.CheckStateRole and section == 0:
            state = self.table.page_selection_state()
            return {PAGE_ALL: Qt.Checked, PAGE_SOME: Qt.PartiallyChecked}.get(state, Qt.Unchecked)
        return None

    def toggle_page(self):
        """Header checkbox click: select the page unless it is already fully selected"""
        self.table.select_all_on_page(self.table.page_selection_state() != PAGE_ALL)
        self.headerDataChanged.emit(Qt.Horizontal, 0, 0)
        if self.rows:
            self.dataChanged.emit(self.index(0, 0), self.index(len(self.rows) - 1, 0),
                                  [Qt.CheckStateRole])
