"""
Record Store
Holds one in-memory collection (Employee or Payroll rows) in insertion order
"""

import logging
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Tuple

from record_vault.errors import DuplicateIdentifier, NotFound, MalformedSeedData
from record_vault.records import Record, RecordSchema, field_text, schema_for


class RecordStore:
    def __init__(self, schema: RecordSchema, records: Iterable[Record] = ()):
        self.schema = schema
        # dicts keep insertion order; updates keep a record's position
        self._records: Dict[Any, Record] = {}
        self._distinct_cache: Dict[str, FrozenSet[str]] = {}
        self._remove_listeners: List[Callable[[FrozenSet[Any]], None]] = []
        for record in records:
            self.add(record)

    @classmethod
    def load(cls, raw_collection, kind) -> "RecordStore":
        """
        Build a store from a seed collection.

        Args:
            raw_collection: {"<collectionName>": [raw_record, ...]} or the bare list
            kind: RecordKind (or its value) of the collection

        Raises:
            MalformedSeedData: wrong shape, a record without an id, or duplicate ids
        """
        schema = schema_for(kind)
        rows = raw_collection
        if isinstance(raw_collection, dict):
            if schema.collection not in raw_collection:
                raise MalformedSeedData(
                    f"Seed data has no '{schema.collection}' collection "
                    f"(found: {', '.join(raw_collection) or 'nothing'})")
            rows = raw_collection[schema.collection]
        if not isinstance(rows, list):
            raise MalformedSeedData(f"'{schema.collection}' must be a list of records")

        store = cls(schema)
        for index, raw in enumerate(rows):
            if not isinstance(raw, dict):
                raise MalformedSeedData(f"Record #{index + 1} is not an object")
            if raw.get("id") in (None, ""):
                raise MalformedSeedData(f"Record #{index + 1} has no id")
            try:
                record = schema.from_raw(raw)
            except (TypeError, ValueError) as e:
                raise MalformedSeedData(f"Record #{index + 1} is invalid: {e}") from e
            try:
                store.add(record)
            except DuplicateIdentifier as e:
                raise MalformedSeedData(f"Duplicate id {raw['id']!r} in seed data") from e

        logging.info(f"Loaded {len(store)} {schema.kind.value} records")
        return store

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id) -> bool:
        return record_id in self._records

    def all(self) -> Tuple[Record, ...]:
        return tuple(self._records.values())

    def ids(self) -> Tuple[Any, ...]:
        return tuple(self._records)

    def get(self, record_id) -> Record:
        try:
            return self._records[record_id]
        except KeyError:
            raise NotFound([record_id]) from None

    def add(self, record: Record) -> Record:
        if not isinstance(record, self.schema.record_type):
            raise TypeError(
                f"Expected {self.schema.record_type.__name__}, got {type(record).__name__}")
        if record.id in self._records:
            raise DuplicateIdentifier(record.id)
        self._records[record.id] = record
        self._distinct_cache.clear()
        return record

    def update(self, record_id, patch: Dict[str, Any]) -> Record:
        """Apply a field patch; derived fields (display name) are recomputed"""
        current = self.get(record_id)
        if "id" in patch and patch["id"] != record_id:
            raise ValueError(f"Record id is immutable ({record_id!r} -> {patch['id']!r})")
        changes = {k: v for k, v in patch.items() if k != "id"}
        try:
            updated = current.with_changes(changes)
        except TypeError as e:
            raise ValueError(f"Invalid field in patch for {record_id!r}: {e}") from e
        self._records[record_id] = updated
        self._distinct_cache.clear()
        return updated

    def remove(self, record_ids: Iterable) -> FrozenSet[Any]:
        """Remove all given ids, or none of them if any is missing"""
        ids = frozenset(record_ids)
        missing = [i for i in ids if i not in self._records]
        if missing:
            raise NotFound(missing)
        for record_id in ids:
            del self._records[record_id]
        self._distinct_cache.clear()
        if ids:
            logging.info(f"Removed {len(ids)} {self.schema.kind.value} record(s): {sorted(map(str, ids))}")
            for listener in list(self._remove_listeners):
                listener(ids)
        return ids

    def distinct_values(self, field_name: str) -> FrozenSet[str]:
        """Non-blank values of a field (filter dialog options)"""
        cached = self._distinct_cache.get(field_name)
        if cached is None:
            cached = frozenset(
                value for value in (field_text(r, field_name) for r in self._records.values())
                if value.strip()
            )
            self._distinct_cache[field_name] = cached
        return cached

    def add_remove_listener(self, callback: Callable[[FrozenSet[Any]], None]) -> None:
        self._remove_listeners.append(callback)

    def remove_remove_listener(self, callback: Callable[[FrozenSet[Any]], None]) -> None:
        if callback in self._remove_listeners:
            self._remove_listeners.remove(callback)

    def next_id(self) -> Any:
        """Next free identifier: max + 1 for numeric ids, otherwise a counter string"""
        ids = list(self._records)
        if not ids or all(isinstance(i, int) and not isinstance(i, bool) for i in ids):
            return max(ids, default=0) + 1
        counter = len(ids) + 1
        while str(counter) in self._records:
            counter += 1
        return str(counter)
