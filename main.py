#!/usr/bin/env python3
"""
RecordVault - Main Entry Point
Loads the Employee and Payroll seed files and shows them in two tabs
"""

import sys
import logging

from PySide6.QtWidgets import (
    QApplication, QComboBox, QHBoxLayout, QLabel, QLineEdit, QMainWindow, QMessageBox,
    QPushButton, QTableView, QTabWidget, QVBoxLayout, QWidget,
)

from record_vault.config import (
    APP_TITLE, VERSION, PAGE_SIZE_OPTIONS, SORT_LABELS, SORT_STATUS, SORT_SALARY_ASC, SORT_SALARY_DESC,
)
from record_vault.database import load_seed
from record_vault.errors import MalformedSeedData, NotFound
from record_vault.records import RecordKind
from record_vault.settings_manager import bootstrap_settings
from record_vault.summary import employee_summary, payroll_summary
from record_vault.table import RecordTable
from record_vault.ui import RecordTableModel
from record_vault.utils import setup_logging


class RecordPage(QWidget):
    """Search box, table and pager for one RecordTable"""

    def __init__(self, table: RecordTable, summarize, parent=None):
        super().__init__(parent)
        self.table = table
        self.summarize = summarize
        self.model = RecordTableModel(table, self)

        self.caption = QLabel()
        self.search = QLineEdit()
        self.search.setPlaceholderText("Search by name, ID or department...")
        self.search.textChanged.connect(self._on_search)

        self.sort_combo = QComboBox()
        for key, label in SORT_LABELS.items():
            if key in (SORT_STATUS, SORT_SALARY_ASC, SORT_SALARY_DESC) and not table.store.schema.salary_field:
                continue
            self.sort_combo.addItem(label, key)
        self.sort_combo.setCurrentIndex(max(self.sort_combo.findData(table.sort_key), 0))
        self.sort_combo.currentIndexChanged.connect(self._on_sort)

        self.delete_btn = QPushButton("Delete Selected")
        self.delete_btn.clicked.connect(self._on_delete)

        toolbar = QHBoxLayout()
        toolbar.addWidget(self.search, 1)
        toolbar.addWidget(QLabel("Sort:"))
        toolbar.addWidget(self.sort_combo)
        toolbar.addWidget(self.delete_btn)

        self.view = QTableView()
        self.view.setModel(self.model)
        self.view.horizontalHeader().sectionClicked.connect(self._on_header_clicked)

        self.size_combo = QComboBox()
        for size in PAGE_SIZE_OPTIONS:
            self.size_combo.addItem(str(size), size)
        if self.size_combo.findData(table.pager.page_size) < 0:
            self.size_combo.addItem(str(table.pager.page_size), table.pager.page_size)
        self.size_combo.setCurrentIndex(self.size_combo.findData(table.pager.page_size))
        self.size_combo.currentIndexChanged.connect(self._on_page_size)

        self.prev_btn = QPushButton("< Prev")
        self.next_btn = QPushButton("Next >")
        self.range_label = QLabel()
        self.prev_btn.clicked.connect(lambda: self._go(-1))
        self.next_btn.clicked.connect(lambda: self._go(1))

        pager = QHBoxLayout()
        pager.addWidget(self.range_label)
        pager.addStretch()
        pager.addWidget(QLabel("Rows per page:"))
        pager.addWidget(self.size_combo)
        pager.addWidget(self.prev_btn)
        pager.addWidget(self.next_btn)

        layout = QVBoxLayout(self)
        layout.addWidget(self.caption)
        layout.addLayout(toolbar)
        layout.addWidget(self.view)
        layout.addLayout(pager)
        self._refresh()

    def _refresh(self):
        self.model.refresh()
        self.caption.setText(self.summarize(self.table.store))
        current = self.table.current_page()
        self.range_label.setText(current.range_label())
        self.prev_btn.setEnabled(current.has_previous)
        self.next_btn.setEnabled(current.has_next)

    def _on_search(self, text):
        self.table.set_search(text)
        self._refresh()

    def _on_sort(self, _index):
        self.table.set_sort(self.sort_combo.currentData())
        self._refresh()

    def _on_page_size(self, _index):
        self.table.set_page_size(self.size_combo.currentData())
        self._refresh()

    def _on_delete(self):
        count = self.table.selection.count()
        if not count:
            QMessageBox.information(self, "Delete", "No records selected.")
            return
        reply = QMessageBox.question(self, "Confirm Delete", f"Delete {count} selected record(s)?")
        if reply != QMessageBox.Yes:
            return
        try:
            self.table.delete_selected()
        except NotFound as e:
            logging.error(f"Delete failed: {e}")
            QMessageBox.warning(self, "Delete", str(e))
        if not self.table.current_page().items and self.table.pager.page_number > 1:
            self.table.go_to(self.table.pager.page_number - 1)
        self._refresh()

    def _on_header_clicked(self, section):
        if section == 0:
            self.model.toggle_page()

    def _go(self, step):
        self.table.go_to(self.table.pager.page_number + step)
        self._refresh()


def employee_caption(store):
    s = employee_summary(store)
    return f"{s.total} employees | {s.positions} positions | {s.departments} departments"


def payroll_caption(store):
    s = payroll_summary(store)
    return f"Total payroll {s.total_amount_text} | {s.pending} pending | {s.paid} paid"


def main():
    """Main application entry point"""
    settings, table_cfg, data_cfg, log_cfg = bootstrap_settings()
    log_file = setup_logging(log_cfg.log_dir, log_cfg.level_number())

    logging.info("="*80)
    logging.info(f"{APP_TITLE} {VERSION} starting")
    logging.info(f"Settings file: {settings.ini_path}")
    logging.info(f"Log file: {log_file}")
    logging.info("="*80)

    app = QApplication(sys.argv)

    try:
        employees = load_seed(data_cfg.employees_file, RecordKind.EMPLOYEE)
        payroll = load_seed(data_cfg.payroll_file, RecordKind.PAYROLL)
    except (OSError, MalformedSeedData) as e:
        logging.critical(f"Failed to load seed data: {e}")
        QMessageBox.critical(None, "Seed Data Error", f"Could not load records:\n{e}")
        return 1

    emp_table = RecordTable(employees, table_cfg.page_size, table_cfg.default_sort)
    pay_table = RecordTable(payroll, table_cfg.page_size, table_cfg.default_sort)

    tabs = QTabWidget()
    tabs.addTab(RecordPage(emp_table, employee_caption), "Employees")
    tabs.addTab(RecordPage(pay_table, payroll_caption), "Payroll")

    window = QMainWindow()
    window.setWindowTitle(APP_TITLE)
    window.setCentralWidget(tabs)
    window.resize(1000, 600)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
