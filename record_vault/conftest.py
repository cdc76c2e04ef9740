"""Shared pytest fixtures: six employees and six payroll rows, three of each in Engineering"""

import pytest

from record_vault.database import RecordStore
from record_vault.records import RecordKind


def _employee(id, first, middle, last, emp_no, department, position, **extra):
    raw = {
        "id": id,
        "first_name": first,
        "middle_name": middle,
        "last_name": last,
        "empNo": emp_no,
        "employee_no": emp_no,
        "department": department,
        "position": position,
    }
    raw.update(extra)
    return raw


@pytest.fixture
def employee_rows():
    return [
        _employee(1, "Maria", "Santos", "Reyes", "EMP-0001", "Engineering", "Software Engineer",
                  email_address="maria.reyes@example.com", sss_number="34-1234567-8"),
        _employee(2, "Jose", "", "Garcia", "EMP-0002", "Finance", "Accountant"),
        _employee(3, "Andrea", "Lim", "Cruz", "EMP-0003", "Engineering", "QA Engineer"),
        _employee(4, "Ramon", "Dizon", "Villanueva", "EMP-0004", "Human Resources", "HR Manager"),
        _employee(5, "Bea", "Torres", "Navarro", "EMP-0005", "Engineering", "DevOps Engineer"),
        _employee(6, "Carlo", "", "Mendoza", "EMP-0006", "Sales", "Account Executive"),
    ]


@pytest.fixture
def payroll_rows():
    return [
        {"id": "p1", "name": "Maria S. Reyes", "empId": "EMP-0001", "department": "Engineering",
         "salary": "₱85,000.00", "hours": 160, "status": "Paid"},
        {"id": "p2", "name": "Jose Garcia", "empId": "EMP-0002", "department": "Finance",
         "salary": "₱52,500.00", "hours": 152, "status": "Not Paid"},
        {"id": "p3", "name": "Andrea L. Cruz", "empId": "EMP-0003", "department": "Engineering",
         "salary": "₱48,000.00", "hours": 160, "status": "Paid"},
        {"id": "p4", "name": "Ramon D. Villanueva", "empId": "EMP-0004", "department": "Human Resources",
         "salary": "₱95,000.00", "hours": 168, "status": "Not Paid"},
        {"id": "p5", "name": "Bea T. Navarro", "empId": "EMP-0005", "department": "Engineering",
         "salary": "₱61,250.50", "hours": 144, "status": "Paid"},
        {"id": "p6", "name": "Carlo Mendoza", "empId": "EMP-0006", "department": "Sales",
         "salary": "₱38,000.00", "hours": 120, "status": "Not Paid"},
    ]


@pytest.fixture
def employee_store(employee_rows):
    return RecordStore.load({"employeesData": employee_rows}, RecordKind.EMPLOYEE)


@pytest.fixture
def payroll_store(payroll_rows):
    return RecordStore.load({"payrollData": payroll_rows}, RecordKind.PAYROLL)
