import pytest

from record_vault.database import RecordStore
from record_vault.errors import DuplicateIdentifier, NotFound, MalformedSeedData
from record_vault.records import (
    EmployeeRecord, PayrollRecord, PaymentStatus, RecordKind, EMPLOYEE_SCHEMA, PAYROLL_SCHEMA,
)


def test_load_keeps_seed_order(employee_store):
    assert len(employee_store) == 6
    assert employee_store.ids() == (1, 2, 3, 4, 5, 6)
    maria = employee_store.get(1)
    assert maria.emp_no == "EMP-0001"
    assert maria.display_name == "Maria S. Reyes"
    assert employee_store.get(2).display_name == "Jose Garcia"


def test_load_accepts_bare_list(payroll_rows):
    store = RecordStore.load(payroll_rows, RecordKind.PAYROLL)
    assert store.get("p2").status is PaymentStatus.NOT_PAID
    assert store.get("p1").hours == 160.0


@pytest.mark.parametrize("raw", [
    {"payroll": []},
    {"employeesData": "not a list"},
    {"employeesData": ["row"]},
    {"employeesData": [{"first_name": "No", "last_name": "Id"}]},
    {"employeesData": [{"id": 1}, {"id": 1}]},
])
def test_load_rejects_malformed_collections(raw):
    with pytest.raises(MalformedSeedData):
        RecordStore.load(raw, RecordKind.EMPLOYEE)


def test_load_rejects_unknown_payment_status():
    with pytest.raises(MalformedSeedData):
        RecordStore.load({"payrollData": [{"id": "x", "status": "Pending"}]}, "payroll")


def test_missing_fields_default_to_blank():
    store = RecordStore.load([{"id": 9, "first_name": "Ana"}], RecordKind.EMPLOYEE)
    ana = store.get(9)
    assert ana.last_name == ""
    assert ana.department == ""
    assert ana.user_id is None


def test_add_rejects_duplicate_id(employee_store):
    with pytest.raises(DuplicateIdentifier) as excinfo:
        employee_store.add(EmployeeRecord(id=3, first_name="Dup"))
    assert excinfo.value.record_id == 3
    assert len(employee_store) == 6


def test_add_rejects_other_record_type(employee_store):
    with pytest.raises(TypeError):
        employee_store.add(PayrollRecord(id=99))


def test_get_missing(employee_store):
    with pytest.raises(NotFound) as excinfo:
        employee_store.get(42)
    assert excinfo.value.record_ids == frozenset({42})


def test_update_recomputes_display_name(employee_store):
    updated = employee_store.update(2, {"middle_name": "Paolo"})
    assert updated.display_name == "Jose P. Garcia"
    assert employee_store.get(2) is updated
    # position in the collection is unchanged
    assert employee_store.ids() == (1, 2, 3, 4, 5, 6)


def test_update_id_is_immutable(employee_store):
    with pytest.raises(ValueError):
        employee_store.update(1, {"id": 7})
    # same id in the patch is harmless
    assert employee_store.update(1, {"id": 1, "position": "Lead"}).position == "Lead"


def test_update_unknown_field(employee_store):
    with pytest.raises(ValueError):
        employee_store.update(1, {"nickname": "Mia"})


def test_update_missing_id(payroll_store):
    with pytest.raises(NotFound):
        payroll_store.update("p42", {"hours": 1})


def test_update_payroll_parses_status(payroll_store):
    updated = payroll_store.update("p2", {"status": "NotPaid", "hours": "150"})
    assert updated.status is PaymentStatus.NOT_PAID
    assert updated.hours == 150.0


def test_remove_is_all_or_nothing(employee_store):
    with pytest.raises(NotFound) as excinfo:
        employee_store.remove([1, 2, 99])
    assert excinfo.value.record_ids == frozenset({99})
    assert len(employee_store) == 6

    assert employee_store.remove([1, 2]) == frozenset({1, 2})
    assert employee_store.ids() == (3, 4, 5, 6)


def test_remove_notifies_listeners(employee_store):
    seen = []
    employee_store.add_remove_listener(seen.append)
    employee_store.remove([4])
    employee_store.remove([])
    assert seen == [frozenset({4})]


def test_removed_listener_is_not_called(employee_store):
    seen = []
    employee_store.add_remove_listener(seen.append)
    employee_store.remove([4])
    employee_store.remove_remove_listener(seen.append)
    employee_store.remove([5])
    employee_store.remove_remove_listener(seen.append)
    assert seen == [frozenset({4})]


def test_distinct_values_follow_mutations(payroll_store):
    assert payroll_store.distinct_values("department") == {
        "Engineering", "Finance", "Human Resources", "Sales"}
    payroll_store.remove(["p6"])
    assert "Sales" not in payroll_store.distinct_values("department")
    payroll_store.add(PayrollRecord(id="p7", department="Legal"))
    assert "Legal" in payroll_store.distinct_values("department")
    payroll_store.update("p7", {"department": "Audit"})
    assert "Legal" not in payroll_store.distinct_values("department")


def test_distinct_values_skip_blanks(employee_store):
    employee_store.add(EmployeeRecord(id=7, first_name="New"))
    assert "" not in employee_store.distinct_values("department")


def test_next_id():
    assert RecordStore(EMPLOYEE_SCHEMA).next_id() == 1
    assert RecordStore(EMPLOYEE_SCHEMA, [EmployeeRecord(id=4), EmployeeRecord(id=2)]).next_id() == 5
    store = RecordStore(PAYROLL_SCHEMA, [PayrollRecord(id="1"), PayrollRecord(id="3")])
    assert store.next_id() == "4"
    store.add(PayrollRecord(id="4"))
    assert store.next_id() == "5"


def test_seed_employee_no_fills_emp_no():
    store = RecordStore.load([{"id": 9, "employee_no": "EMP-0009"}], RecordKind.EMPLOYEE)
    record = store.get(9)
    assert record.emp_no == "EMP-0009"
    assert not hasattr(record, "employee_no")
    assert "employee_no" not in record.to_dict()
