"""
Form Session
Draft values, per-field validation and completion progress behind the
add/edit dialogs. The session never writes to a store: submit() hands the
finished record back and the caller persists it.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional

from record_vault.errors import ValidationErrors
from record_vault.records import PayrollRecord, Record, RecordSchema, field_text
from record_vault.utils.helpers import format_currency, format_hours, parse_currency
from record_vault.validators import auto_format, validate


class FormMode(str, Enum):
    ADD = "add"
    EDIT = "edit"


class CloseRequest(NamedTuple):
    needs_confirmation: bool


@dataclass
class FormDraft:
    mode: FormMode
    schema: RecordSchema
    values: Dict[str, str]
    validity: Dict[str, bool]
    messages: Dict[str, str]
    progress: float = 0.0
    dirty: bool = False
    submitted: bool = False
    seed: Optional[Record] = None

    @property
    def seed_id(self) -> Any:
        return self.seed.id if self.seed is not None else None

    def error_for(self, field_name: str) -> str:
        return self.messages.get(field_name, "")


def _check(schema: RecordSchema, field_name: str, value):
    return validate(schema.validated_fields[field_name], value)


def compute_progress(schema: RecordSchema, values: Dict[str, str]) -> float:
    """Percentage of validated fields that are filled in and valid"""
    total = len(schema.validated_fields)
    if not total:
        return 100.0
    done = sum(
        1 for name in schema.validated_fields
        if str(values.get(name, "")).strip() and _check(schema, name, values.get(name)).valid
    )
    return done / total * 100


class FormSession:
    """One add/edit dialog: Closed -> Open -> Submitted/Discarded -> Closed"""

    def __init__(self, schema: RecordSchema):
        self.schema = schema
        self.draft: Optional[FormDraft] = None

    @property
    def is_open(self) -> bool:
        return self.draft is not None

    def _require_open(self) -> FormDraft:
        if self.draft is None:
            raise RuntimeError("No form is open")
        if self.draft.submitted:
            raise RuntimeError("Form was already submitted")
        return self.draft

    def start(self, mode, seed_record: Record = None) -> FormDraft:
        """Open an empty draft (Add) or a copy of seed_record (Edit)"""
        mode = FormMode(mode)
        schema = self.schema

        if mode is FormMode.EDIT:
            if seed_record is None:
                raise ValueError("Editing needs the record to edit")
            values = {name: field_text(seed_record, name) for name in schema.form_fields}
            if isinstance(seed_record, PayrollRecord):
                values["hours"] = format_hours(seed_record.hours)
        else:
            seed_record = None
            values = {name: schema.form_defaults.get(name, "") for name in schema.form_fields}

        self.draft = FormDraft(
            mode=mode,
            schema=schema,
            values=values,
            validity={name: True for name in schema.validated_fields},
            messages={},
            progress=compute_progress(schema, values),
            seed=seed_record,
        )
        logging.debug(f"Opened {schema.kind.value} form ({mode.value})")
        return self.draft

    def set_field(self, field_name: str, value) -> FormDraft:
        draft = self._require_open()
        if field_name not in draft.values:
            raise ValueError(f"Unknown form field: {field_name}")

        draft.values[field_name] = "" if value is None else str(value)
        draft.dirty = True

        if field_name in self.schema.validated_fields:
            valid, message = _check(self.schema, field_name, draft.values[field_name])
            draft.validity[field_name] = valid
            if valid:
                draft.messages.pop(field_name, None)
            else:
                draft.messages[field_name] = message

        draft.progress = compute_progress(self.schema, draft.values)
        return draft

    def type_field(self, field_name: str, text) -> FormDraft:
        """
        Keystroke entry: ID and mobile fields are re-grouped as they are typed
        ("3412" -> "34-12") before the value is set and validated.
        """
        kind = self.schema.validated_fields.get(field_name)
        return self.set_field(field_name, auto_format(kind, text))

    def validate_all(self) -> Dict[str, str]:
        """Re-check every validated field, touched or not; returns field -> message"""
        draft = self._require_open()
        errors = {}
        for name in self.schema.validated_fields:
            valid, message = _check(self.schema, name, draft.values.get(name, ""))
            draft.validity[name] = valid
            if not valid:
                errors[name] = message
        draft.messages = dict(errors)
        return errors

    def submit(self, new_id=None) -> Record:
        """
        Validate everything and build the record.

        Args:
            new_id: identifier for a record being added (ignored when editing)

        Returns:
            The finished record; the caller stores it and then calls close()

        Raises:
            ValidationErrors: one or more fields failed; the draft stays open
        """
        draft = self._require_open()
        errors = self.validate_all()
        if errors:
            logging.warning(f"Form validation failed: {', '.join(errors)}")
            raise ValidationErrors(errors)

        values = self._derived_values(draft.values)
        if draft.mode is FormMode.EDIT:
            record = draft.seed.with_changes(values)
        else:
            if new_id is None:
                raise ValueError("Adding a record needs a new id")
            record = self.schema.from_raw({**values, "id": new_id})

        draft.submitted = True
        logging.info(f"Saving {self.schema.kind.value} data: id={record.id}")
        return record

    def _derived_values(self, values: Dict[str, str]) -> Dict[str, Any]:
        derived = {name: value.strip() for name, value in values.items()}
        salary_field = self.schema.salary_field
        if salary_field and derived.get(salary_field):
            derived[salary_field] = format_currency(parse_currency(derived[salary_field]))
        return derived

    def request_close(self) -> CloseRequest:
        """Ask before closing when there are unsaved edits"""
        draft = self.draft
        if draft is None:
            return CloseRequest(False)
        return CloseRequest(draft.dirty and not draft.submitted)

    def discard(self) -> None:
        """Throw the draft away after the user confirmed"""
        if self.draft is not None and self.draft.dirty and not self.draft.submitted:
            logging.info(f"Discarded unsaved {self.schema.kind.value} changes")
        self.draft = None

    def close(self) -> None:
        """Close a submitted or unchanged draft"""
        if self.request_close().needs_confirmation:
            raise RuntimeError("Form has unsaved changes; discard() them first")
        self.draft = None
