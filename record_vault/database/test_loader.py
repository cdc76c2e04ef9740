import json

import pytest
from openpyxl import Workbook

from record_vault.database import load_json, load_seed, load_workbook_seed
from record_vault.database.loader import read_workbook_rows
from record_vault.config import EMPLOYEES_FILE, PAYROLL_FILE
from record_vault.errors import MalformedSeedData
from record_vault.records import PaymentStatus, RecordKind


@pytest.fixture
def payroll_json(tmp_path, payroll_rows):
    path = tmp_path / "payroll.json"
    path.write_text(json.dumps({"payrollData": payroll_rows}, ensure_ascii=False), encoding="utf-8")
    return str(path)


@pytest.fixture
def employee_xlsx(tmp_path):
    wb = Workbook()
    ws = wb.active
    ws.append(["id", "first_name", "middle_name", "last_name", "empNo", "department"])
    ws.append([1, "Maria", "Santos", "Reyes", "EMP-0001", "Engineering"])
    ws.append([None, None, None, None, None, None])
    ws.append([2, "Jose", None, "Garcia", "EMP-0002", "Finance"])
    path = tmp_path / "employees.xlsx"
    wb.save(path)
    return str(path)


def test_load_json(payroll_json):
    store = load_json(payroll_json, RecordKind.PAYROLL)
    assert len(store) == 6
    assert store.get("p1").salary == "₱85,000.00"
    assert store.get("p1").emp_id == "EMP-0001"


def test_load_seed_dispatches_on_extension(payroll_json, employee_xlsx):
    assert len(load_seed(payroll_json, "payroll")) == 6
    assert load_seed(employee_xlsx, "employee").ids() == (1, 2)


def test_load_json_rejects_broken_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{\"employeesData\": [", encoding="utf-8")
    with pytest.raises(MalformedSeedData):
        load_json(str(path), RecordKind.EMPLOYEE)


def test_load_json_rejects_duplicate_ids(tmp_path):
    path = tmp_path / "dupes.json"
    path.write_text(json.dumps({"payrollData": [{"id": "1"}, {"id": "1"}]}), encoding="utf-8")
    with pytest.raises(MalformedSeedData):
        load_json(str(path), RecordKind.PAYROLL)


def test_load_json_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_json(str(tmp_path / "nope.json"), RecordKind.PAYROLL)


def test_load_seed_rejects_unknown_kind(payroll_json):
    with pytest.raises(ValueError):
        load_seed(payroll_json, "timesheet")


def test_read_workbook_rows_skips_blanks(employee_xlsx):
    rows = read_workbook_rows(employee_xlsx)
    assert len(rows) == 2
    assert "middle_name" not in rows[1]


def test_workbook_defaults_missing_cells(employee_xlsx):
    store = load_workbook_seed(employee_xlsx, RecordKind.EMPLOYEE)
    jose = store.get(2)
    assert jose.middle_name == ""
    assert jose.display_name == "Jose Garcia"
    assert jose.emp_no == "EMP-0002"


def test_workbook_payroll_statuses(tmp_path):
    wb = Workbook()
    ws = wb.active
    ws.append(["id", "name", "salary", "hours", "status"])
    ws.append(["a", "Ana", "₱30,000.00", 80, "NotPaid"])
    ws.append(["b", "Ben", "₱31,000.00", None, "Paid"])
    path = tmp_path / "payroll.xlsx"
    wb.save(path)

    store = load_seed(str(path), RecordKind.PAYROLL)
    assert store.get("a").status is PaymentStatus.NOT_PAID
    assert store.get("b").hours == 0.0


def test_workbook_without_header(tmp_path):
    path = tmp_path / "empty.xlsx"
    Workbook().save(path)
    with pytest.raises(MalformedSeedData):
        read_workbook_rows(str(path))


def test_shipped_seed_files():
    employees = load_seed(EMPLOYEES_FILE, RecordKind.EMPLOYEE)
    payroll = load_seed(PAYROLL_FILE, RecordKind.PAYROLL)
    assert len(employees) == 6 and len(payroll) == 6
    assert employees.distinct_values("department") == payroll.distinct_values("department")
