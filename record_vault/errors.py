"""
Errors raised by the record engine.

DuplicateIdentifier and NotFound mean the caller and the store disagree
about which records exist. ValidationErrors carries per-field messages for
the form to show inline. MalformedSeedData is raised while loading seed files.
"""

from typing import Dict, Iterable


class RecordVaultError(Exception):
    """Base class for all record engine errors"""


class DuplicateIdentifier(RecordVaultError):
    def __init__(self, record_id):
        self.record_id = record_id
        super().__init__(f"Record with id {record_id!r} already exists")


class NotFound(RecordVaultError):
    def __init__(self, record_ids: Iterable):
        self.record_ids = frozenset(record_ids)
        missing = ", ".join(sorted(repr(i) for i in self.record_ids))
        super().__init__(f"No record with id {missing}")


class ValidationErrors(RecordVaultError):
    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(self.errors)
        super().__init__(f"Validation failed for: {fields}")


class MalformedSeedData(RecordVaultError):
    """Seed collection could not be turned into a record store"""
