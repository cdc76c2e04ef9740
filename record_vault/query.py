"""
Query Pipeline
Search text + filter criteria + sort key -> ordered read-only view of a store
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Tuple

from record_vault.config import (
    SORT_KEYS, SORT_DEFAULT, SORT_NAME_ASC, SORT_NAME_DESC, SORT_DEPARTMENT,
    SORT_STATUS, SORT_EMP_ID, SORT_SALARY_ASC, SORT_SALARY_DESC,
)
from record_vault.records import PaymentStatus, Record, RecordSchema, field_text, schema_for_record
from record_vault.utils.helpers import parse_currency


def _bound(value) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    amount = parse_currency(value)
    if amount is None:
        raise ValueError(f"Salary bound is not a number: {value!r}")
    return amount


def _status_text(value) -> str:
    try:
        return PaymentStatus.parse(value).value
    except ValueError:
        return str(value)


@dataclass(frozen=True)
class FilterCriteria:
    """
    Department set (OR), payment status set (OR) and an optional salary range.
    Empty sets and missing bounds are inactive and match everything.
    """
    departments: FrozenSet[str] = frozenset()
    statuses: FrozenSet[str] = frozenset()
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "departments", frozenset(self.departments))
        object.__setattr__(self, "statuses", frozenset(_status_text(s) for s in self.statuses))
        object.__setattr__(self, "salary_min", _bound(self.salary_min))
        object.__setattr__(self, "salary_max", _bound(self.salary_max))

    def is_active(self) -> bool:
        return bool(self.departments or self.statuses
                    or self.salary_min is not None or self.salary_max is not None)

    def active_count(self) -> int:
        """Active criteria groups (department, status, salary range) for the Filter badge"""
        salary = self.salary_min is not None or self.salary_max is not None
        return sum(map(bool, (self.departments, self.statuses, salary)))


NO_FILTERS = FilterCriteria()


def search_match(record: Record, search_text: str, schema: RecordSchema = None) -> bool:
    """Case-insensitive substring match on name, identifying number and department"""
    needle = (search_text or "").lower()
    if not needle:
        return True
    schema = schema or schema_for_record(record)
    return any(needle in field_text(record, name).lower() for name in schema.search_fields)


def filter_match(record: Record, filters: FilterCriteria, schema: RecordSchema = None) -> bool:
    """Every active criterion must match; criteria a record kind lacks are ignored"""
    if filters is None or not filters.is_active():
        return True
    schema = schema or schema_for_record(record)

    if filters.departments and record.department not in filters.departments:
        return False

    if filters.statuses and schema.status_field:
        if field_text(record, schema.status_field) not in filters.statuses:
            return False

    if schema.salary_field and (filters.salary_min is not None or filters.salary_max is not None):
        salary = parse_currency(getattr(record, schema.salary_field))
        if salary is None:
            return False
        if filters.salary_min is not None and salary < filters.salary_min:
            return False
        if filters.salary_max is not None and salary > filters.salary_max:
            return False

    return True


def _salary_key(schema: RecordSchema, descending: bool):
    def key(record):
        amount = parse_currency(getattr(record, schema.salary_field, None)) if schema.salary_field else None
        # rows without an amount go last in both directions
        if amount is None:
            return (1, 0.0)
        return (0, -amount if descending else amount)
    return key


def sort_records(records: Iterable[Record], sort_key: str, schema: RecordSchema) -> Tuple[Record, ...]:
    """Stable sort; ties keep the order the records came in"""
    if sort_key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {sort_key!r}")

    records = list(records)
    if sort_key == SORT_DEFAULT:
        return tuple(records)
    if sort_key == SORT_NAME_ASC:
        return tuple(sorted(records, key=lambda r: field_text(r, schema.name_field)))
    if sort_key == SORT_NAME_DESC:
        # reverse=True keeps equal names in insertion order
        return tuple(sorted(records, key=lambda r: field_text(r, schema.name_field), reverse=True))
    if sort_key == SORT_DEPARTMENT:
        return tuple(sorted(records, key=lambda r: r.department))
    if sort_key == SORT_STATUS:
        if not schema.status_field:
            return tuple(records)
        return tuple(sorted(records, key=lambda r: field_text(r, schema.status_field)))
    if sort_key == SORT_EMP_ID:
        return tuple(sorted(records, key=lambda r: field_text(r, schema.emp_id_field)))
    return tuple(sorted(records, key=_salary_key(schema, sort_key == SORT_SALARY_DESC)))


def query(store, search_text: str = "", filters: FilterCriteria = None,
          sort_key: str = SORT_DEFAULT) -> Tuple[Record, ...]:
    """
    Build the QueryView of a store.

    Args:
        store: RecordStore to read from
        search_text: free text matched against the searchable fields
        filters: FilterCriteria (None means no filtering)
        sort_key: one of config.SORT_KEYS

    Returns:
        Tuple of matching records in sort order
    """
    schema = store.schema
    filters = filters or NO_FILTERS
    candidates = [
        r for r in store.all()
        if search_match(r, search_text, schema) and filter_match(r, filters, schema)
    ]
    return sort_records(candidates, sort_key, schema)
