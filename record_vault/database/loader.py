"""
Seed loader
Reads the static collections the admin screens start from: JSON files shaped
{"<collectionName>": [...]} or Excel workbooks with a header row.
"""

import json
import logging
import os
from typing import Any, Dict, List

from openpyxl import load_workbook

from record_vault.database.store import RecordStore
from record_vault.errors import MalformedSeedData
from record_vault.records import schema_for

EXCEL_EXTENSIONS = ('.xlsx', '.xlsm')


def load_json(path: str, kind) -> RecordStore:
    """Load a JSON seed file into a RecordStore"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logging.error(f"Seed file {path} is not valid JSON: {e}")
        raise MalformedSeedData(f"{os.path.basename(path)} is not valid JSON: {e}") from e

    try:
        return RecordStore.load(data, kind)
    except MalformedSeedData as e:
        logging.error(f"Seed file {path} rejected: {e}")
        raise


def read_workbook_rows(path: str) -> List[Dict[str, Any]]:
    """
    Read the active sheet of a workbook into dicts.

    The first row holds field names; blank rows are skipped and empty
    cells are left out so record defaults apply.
    """
    wb = load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.active
        rows = ws.iter_rows(values_only=True)
        header = next(rows, None)
        if not header or not any(header):
            raise MalformedSeedData(f"{os.path.basename(path)} has no header row")
        names = [str(h).strip() if h is not None else "" for h in header]

        records = []
        for row in rows:
            if not row or all(cell in (None, "") for cell in row):
                continue
            raw = {}
            for name, cell in zip(names, row):
                if name and cell not in (None, ""):
                    raw[name] = cell
            records.append(raw)
        return records
    finally:
        wb.close()


def load_workbook_seed(path: str, kind) -> RecordStore:
    """Load an Excel seed workbook into a RecordStore"""
    rows = read_workbook_rows(path)
    logging.info(f"Loaded import file: {path} ({len(rows)} rows)")
    try:
        return RecordStore.load(rows, kind)
    except MalformedSeedData as e:
        logging.error(f"Seed workbook {path} rejected: {e}")
        raise


def load_seed(path: str, kind) -> RecordStore:
    """Load a seed file, picking the reader from the file extension"""
    schema_for(kind)  # reject unknown kinds before touching the file
    if path.lower().endswith(EXCEL_EXTENSIONS):
        return load_workbook_seed(path, kind)
    return load_json(path, kind)
