"""
Selection Tracker
Which record ids are checked, independent of the page being shown
"""

from typing import Any, FrozenSet, Iterable

# Header checkbox states for the current page
PAGE_NONE = "none"
PAGE_SOME = "some"
PAGE_ALL = "all"


class SelectionTracker:
    def __init__(self):
        self._selected = set()

    def watch(self, store) -> None:
        """Drop ids from the selection whenever the store removes them"""
        store.add_remove_listener(self.forget)

    def unwatch(self, store) -> None:
        store.remove_remove_listener(self.forget)

    def toggle(self, record_id) -> bool:
        """Flip one id; returns the new state"""
        if record_id in self._selected:
            self._selected.discard(record_id)
            return False
        self._selected.add(record_id)
        return True

    def select(self, record_id) -> None:
        self._selected.add(record_id)

    def deselect(self, record_id) -> None:
        self._selected.discard(record_id)

    def select_all(self, record_ids: Iterable) -> None:
        """Add the given ids (usually the current page); other selections stay"""
        self._selected.update(record_ids)

    def deselect_all(self, record_ids: Iterable) -> None:
        self._selected.difference_update(record_ids)

    def forget(self, record_ids: Iterable) -> None:
        self._selected.difference_update(record_ids)

    def clear(self) -> None:
        self._selected.clear()

    def is_selected(self, record_id) -> bool:
        return record_id in self._selected

    def count(self) -> int:
        return len(self._selected)

    def selected(self) -> FrozenSet[Any]:
        return frozenset(self._selected)

    def page_state(self, record_ids: Iterable) -> str:
        """'all', 'some' or 'none' of the given ids are selected"""
        ids = list(record_ids)
        hits = sum(1 for i in ids if i in self._selected)
        if ids and hits == len(ids):
            return PAGE_ALL
        if hits:
            return PAGE_SOME
        return PAGE_NONE
