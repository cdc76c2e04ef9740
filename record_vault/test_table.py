import pytest

from record_vault.errors import NotFound, ValidationErrors
from record_vault.query import FilterCriteria
from record_vault.table import RecordTable


def test_engineering_by_name_second_page(employee_store):
    table = RecordTable(employee_store, page_size=2)
    table.set_filters(FilterCriteria(departments={"Engineering"}))
    table.set_sort("name-asc")

    current = table.current_page()
    assert [r.display_name for r in current.items] == ["Andrea L. Cruz", "Bea T. Navarro"]
    assert current.total_pages == 2
    assert current.range_label() == "1-2 of 3"

    table.go_to(2)
    assert [r.display_name for r in table.current_page().items] == ["Maria S. Reyes"]


@pytest.mark.parametrize("change", [
    lambda t: t.set_search("a"),
    lambda t: t.set_sort("department"),
    lambda t: t.toggle_department("Finance"),
    lambda t: t.clear_filters(),
])
def test_view_changes_go_back_to_first_page(employee_store, change):
    table = RecordTable(employee_store, page_size=2)
    table.go_to(3)
    change(table)
    assert table.pager.page_number == 1


def test_toggle_filters(payroll_store):
    table = RecordTable(payroll_store)
    table.toggle_department("Engineering")
    table.toggle_status("Paid")
    assert table.filters.active_count() == 2
    assert table.page_ids() == ("p1", "p3", "p5")
    table.toggle_department("Engineering")
    assert table.filters.departments == frozenset()
    table.set_salary_range("₱50,000", None)
    assert table.page_ids() == ("p1", "p5")


@pytest.mark.parametrize("second", ["NotPaid", "Not Paid"])
def test_toggle_status_accepts_either_spelling(payroll_store, second):
    table = RecordTable(payroll_store)
    table.toggle_status("NotPaid")
    assert table.filters.statuses == frozenset({"Not Paid"})
    assert table.page_ids() == ("p2", "p4", "p6")
    table.toggle_status(second)
    assert table.filters.statuses == frozenset()
    assert table.filters.active_count() == 0


def test_set_page_size_clamps(employee_store):
    table = RecordTable(employee_store, page_size=2)
    table.go_to(3)
    table.set_page_size(5)
    assert table.pager.page_number == 2
    assert table.page_ids() == (6,)


def test_departments_are_sorted(employee_store):
    table = RecordTable(employee_store)
    assert table.departments() == ["Engineering", "Finance", "Human Resources", "Sales"]


def test_unknown_sort_key(employee_store):
    with pytest.raises(ValueError):
        RecordTable(employee_store, sort_key="age")
    with pytest.raises(ValueError):
        RecordTable(employee_store).set_sort("age")


def test_save_new_employee(employee_store):
    table = RecordTable(employee_store)
    table.start_add()
    table.form.set_field("emp_no", "EMP-0007")
    table.form.set_field("first_name", "Lea")
    table.form.set_field("middle_name", "Ramos")
    table.form.set_field("last_name", "Aquino")
    table.form.set_field("department", "Legal")

    record = table.save_form()
    assert record.id == 7
    assert employee_store.get(7).display_name == "Lea R. Aquino"
    assert "Legal" in table.departments()
    assert not table.form.is_open


def test_save_edited_payroll(payroll_store):
    table = RecordTable(payroll_store)
    table.start_edit("p6")
    table.form.set_field("hours", "128")
    table.form.set_field("salary", "₱39,500")
    table.save_form()

    saved = payroll_store.get("p6")
    assert saved.hours == 128.0
    assert saved.salary == "₱39,500.00"
    assert payroll_store.ids()[-1] == "p6"


def test_save_invalid_form_keeps_it_open(payroll_store):
    table = RecordTable(payroll_store)
    table.start_edit("p1")
    table.form.set_field("name", "")
    with pytest.raises(ValidationErrors):
        table.save_form()
    assert table.form.is_open
    assert payroll_store.get("p1").name == "Maria S. Reyes"


def test_edit_of_deleted_record_is_not_re_added(payroll_store):
    table = RecordTable(payroll_store)
    table.start_edit("p6")
    table.form.set_field("hours", "128")
    table.delete(["p6"])

    with pytest.raises(NotFound):
        table.save_form()
    assert "p6" not in payroll_store
    assert len(payroll_store) == 5


def test_persist_dispatches_on_mode(payroll_store):
    table = RecordTable(payroll_store)
    edited = payroll_store.get("p2").with_changes({"hours": 90})
    table.persist(edited, "edit")
    assert payroll_store.get("p2").hours == 90.0
    assert payroll_store.ids() == ("p1", "p2", "p3", "p4", "p5", "p6")

    payroll_store.remove(["p2"])
    with pytest.raises(NotFound):
        table.persist(edited, "edit")
    assert "p2" not in payroll_store
