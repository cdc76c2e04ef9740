"""
RecordTable
The engine behind one admin screen: a store plus the screen's search text,
filters, sort key, pager and selection.
"""

import logging
from dataclasses import replace
from typing import Iterable, Optional, Tuple

from record_vault.config import DEFAULT_PAGE_SIZE, SORT_DEFAULT, SORT_KEYS
from record_vault.database.store import RecordStore
from record_vault.errors import NotFound
from record_vault.form_session import FormMode, FormSession
from record_vault.pagination import Page, Pager
from record_vault.query import FilterCriteria, NO_FILTERS, query
from record_vault.records import PaymentStatus, Record
from record_vault.selection import SelectionTracker


def _toggled(values, value):
    values = set(values)
    if value in values:
        values.discard(value)
    else:
        values.add(value)
    return values


class RecordTable:
    def __init__(self, store: RecordStore, page_size: int = DEFAULT_PAGE_SIZE,
                 sort_key: str = SORT_DEFAULT):
        if sort_key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {sort_key!r}")
        self.store = store
        self.search_text = ""
        self.filters = NO_FILTERS
        self.sort_key = sort_key
        self.pager = Pager(page_size)
        self.selection = SelectionTracker()
        self.selection.watch(store)
        self.form = FormSession(store.schema)

    # ------------------------------------------------------------------
    # View state (every change goes back to page 1)
    # ------------------------------------------------------------------

    def set_search(self, text: str) -> None:
        self.search_text = text or ""
        self.pager.reset()

    def set_filters(self, filters: Optional[FilterCriteria]) -> None:
        self.filters = filters or NO_FILTERS
        self.pager.reset()

    def toggle_department(self, department: str) -> None:
        self.set_filters(replace(self.filters, departments=_toggled(self.filters.departments, department)))

    def toggle_status(self, status) -> None:
        status = PaymentStatus.parse(status).value
        self.set_filters(replace(self.filters, statuses=_toggled(self.filters.statuses, status)))

    def set_salary_range(self, minimum=None, maximum=None) -> None:
        self.set_filters(replace(self.filters, salary_min=minimum, salary_max=maximum))

    def clear_filters(self) -> None:
        self.set_filters(NO_FILTERS)

    def set_sort(self, sort_key: str) -> None:
        if sort_key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {sort_key!r}")
        self.sort_key = sort_key
        self.pager.reset()

    def set_page_size(self, page_size: int) -> None:
        self.pager.set_page_size(page_size, len(self.view()))

    def go_to(self, page_number: int) -> None:
        self.pager.go_to(page_number)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def view(self) -> Tuple[Record, ...]:
        return query(self.store, self.search_text, self.filters, self.sort_key)

    def current_page(self) -> Page:
        return self.pager.window(self.view())

    def page_ids(self) -> Tuple:
        return tuple(r.id for r in self.current_page().items)

    def departments(self):
        return sorted(self.store.distinct_values("department"))

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_all_on_page(self, checked: bool = True) -> None:
        """Header checkbox: only the rows on the current page change"""
        if checked:
            self.selection.select_all(self.page_ids())
        else:
            self.selection.deselect_all(self.page_ids())

    def page_selection_state(self) -> str:
        return self.selection.page_state(self.page_ids())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def delete(self, record_ids: Iterable) -> frozenset:
        ids = frozenset(record_ids)
        logging.info(f"Deleting {self.store.schema.kind.value} records: {sorted(map(str, ids))}")
        return self.store.remove(ids)

    def delete_selected(self) -> frozenset:
        return self.delete(self.selection.selected())

    def start_add(self):
        return self.form.start(FormMode.ADD)

    def start_edit(self, record_id):
        return self.form.start(FormMode.EDIT, self.store.get(record_id))

    def save_form(self) -> Record:
        """Submit the open form, store the result and close the form"""
        draft = self.form.draft
        mode = draft.mode if draft is not None else FormMode.ADD
        new_id = self.store.next_id() if mode is FormMode.ADD else None
        record = self.form.submit(new_id)
        try:
            self.persist(record, mode)
        except NotFound:
            logging.error(f"Cannot save {self.store.schema.kind.value} {record.id!r}: it was deleted while the form was open")
            raise
        self.form.close()
        return record

    def persist(self, record: Record, mode=FormMode.ADD) -> Record:
        """
        Store a submitted record: Add inserts it, Edit patches the existing row.

        Raises:
            DuplicateIdentifier: adding an id that is already stored
            NotFound: editing a record that was deleted while the form was open
        """
        if FormMode(mode) is FormMode.EDIT:
            patch = {k: v for k, v in record.to_dict().items() if k != "id"}
            return self.store.update(record.id, patch)
        return self.store.add(record)
