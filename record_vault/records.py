"""
Record types for the two admin screens (Employee directory, Payroll ledger)
and the per-kind schema that tells the engine how to search, sort and
validate them.
"""

import logging
from dataclasses import dataclass, field, fields, asdict, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from record_vault.config import (
    EMPLOYEES_COLLECTION, PAYROLL_COLLECTION,
    EMPLOYEE_VALIDATED_FIELDS, EMPLOYEE_FORM_FIELDS, EMPLOYEE_FORM_DEFAULTS,
    PAYROLL_VALIDATED_FIELDS, PAYROLL_FORM_FIELDS, PAYROLL_FORM_DEFAULTS,
)
from record_vault.utils.helpers import make_display_name

# Alternate keys used by seed files -> attribute names
RAW_KEY_ALIASES = {
    "empNo": "emp_no",
    "employee_no": "emp_no",
    "empId": "emp_id",
}


class PaymentStatus(str, Enum):
    PAID = "Paid"
    NOT_PAID = "Not Paid"

    @classmethod
    def parse(cls, value) -> "PaymentStatus":
        """Accepts the enum, its value ("Not Paid") or its name ("NotPaid", "NOT_PAID")"""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip()
        for status in cls:
            if text == status.value:
                return status
        squashed = text.replace(" ", "").replace("_", "").lower()
        for status in cls:
            if squashed == status.name.replace("_", "").lower():
                return status
        raise ValueError(f"Unknown payment status: {value!r}")


class RecordKind(str, Enum):
    EMPLOYEE = "employee"
    PAYROLL = "payroll"


def _normalize_raw(raw: Dict[str, Any], known: set) -> Dict[str, Any]:
    values = {}
    for key, value in raw.items():
        name = RAW_KEY_ALIASES.get(key, key)
        if name not in known:
            logging.debug(f"Ignoring unknown field in seed record: {key}")
            continue
        # a blank alias never clobbers a filled field
        if name in values and values[name] and not value:
            continue
        values[name] = value
    return values


def _text(value) -> str:
    return "" if value is None else str(value)


def field_text(record, name: str) -> str:
    """String form of a record field as shown in the table ('' when missing)"""
    value = getattr(record, name, "")
    if isinstance(value, Enum):
        return value.value
    return _text(value)


@dataclass(frozen=True)
class EmployeeRecord:
    id: Any
    emp_no: str = ""
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    display_name: str = ""
    department: str = ""
    position: str = ""
    email_address: str = ""
    mobile_number: str = ""
    home_address: str = ""
    current_address: str = ""
    sss_number: str = ""
    philhealth_number: str = ""
    pagibig_number: str = ""
    tin_number: str = ""
    gender: str = ""
    date_of_birth: str = ""
    civil_status: str = ""
    user_id: Optional[int] = None

    def __post_init__(self):
        # display_name always follows the name parts when there are any
        if self.first_name or self.last_name:
            derived = make_display_name(self.first_name, self.middle_name, self.last_name)
            object.__setattr__(self, "display_name", derived)

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "EmployeeRecord":
        """Build a record from a seed dict; missing text fields become ''"""
        known = {f.name for f in fields(cls)}
        values = _normalize_raw(raw, known)
        for f in fields(cls):
            if f.name in ("id", "user_id"):
                continue
            values[f.name] = _text(values.get(f.name))
        return cls(**values)

    def with_changes(self, patch: Dict[str, Any]) -> "EmployeeRecord":
        """Copy with patched fields; display_name is re-derived in __post_init__"""
        return replace(self, **patch)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PayrollRecord:
    id: Any
    name: str = ""
    emp_id: str = ""
    department: str = ""
    salary: str = ""
    hours: float = 0.0
    status: PaymentStatus = PaymentStatus.NOT_PAID
    avatar: str = ""

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "PayrollRecord":
        known = {f.name for f in fields(cls)}
        values = _normalize_raw(raw, known)
        for name in ("name", "emp_id", "department", "salary", "avatar"):
            values[name] = _text(values.get(name))
        hours = values.get("hours")
        values["hours"] = float(hours) if hours not in (None, "") else 0.0
        values["status"] = PaymentStatus.parse(values.get("status") or PaymentStatus.NOT_PAID)
        return cls(**values)

    def with_changes(self, patch: Dict[str, Any]) -> "PayrollRecord":
        patch = dict(patch)
        if "status" in patch:
            patch["status"] = PaymentStatus.parse(patch["status"])
        if "hours" in patch:
            patch["hours"] = float(patch["hours"] or 0)
        return replace(self, **patch)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data


Record = Union[EmployeeRecord, PayrollRecord]


@dataclass(frozen=True)
class RecordSchema:
    """What the engine needs to know about one record kind"""
    kind: RecordKind
    record_type: type
    collection: str
    name_field: str
    emp_id_field: str
    search_fields: Tuple[str, ...]
    validated_fields: Dict[str, str]
    form_fields: List[str]
    form_defaults: Dict[str, str] = field(default_factory=dict)
    status_field: Optional[str] = None
    salary_field: Optional[str] = None

    def from_raw(self, raw: Dict[str, Any]) -> Record:
        return self.record_type.from_raw(raw)


EMPLOYEE_SCHEMA = RecordSchema(
    kind=RecordKind.EMPLOYEE,
    record_type=EmployeeRecord,
    collection=EMPLOYEES_COLLECTION,
    name_field="display_name",
    emp_id_field="emp_no",
    search_fields=("display_name", "emp_no", "department"),
    validated_fields=EMPLOYEE_VALIDATED_FIELDS,
    form_fields=EMPLOYEE_FORM_FIELDS,
    form_defaults=EMPLOYEE_FORM_DEFAULTS,
)

PAYROLL_SCHEMA = RecordSchema(
    kind=RecordKind.PAYROLL,
    record_type=PayrollRecord,
    collection=PAYROLL_COLLECTION,
    name_field="name",
    emp_id_field="emp_id",
    search_fields=("name", "emp_id", "department"),
    validated_fields=PAYROLL_VALIDATED_FIELDS,
    form_fields=PAYROLL_FORM_FIELDS,
    form_defaults=PAYROLL_FORM_DEFAULTS,
    status_field="status",
    salary_field="salary",
)

SCHEMAS = {
    RecordKind.EMPLOYEE: EMPLOYEE_SCHEMA,
    RecordKind.PAYROLL: PAYROLL_SCHEMA,
}


def schema_for(kind) -> RecordSchema:
    return SCHEMAS[RecordKind(kind)]


def schema_for_record(record) -> RecordSchema:
    for schema in SCHEMAS.values():
        if isinstance(record, schema.record_type):
            return schema
    raise TypeError(f"Not a record: {type(record).__name__}")
