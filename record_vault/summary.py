"""Summary cards shown above the Employee and Payroll tables"""

from typing import NamedTuple

from record_vault.records import PaymentStatus
from record_vault.utils.helpers import format_currency, parse_currency


class EmployeeSummary(NamedTuple):
    total: int
    positions: int
    departments: int


class PayrollSummary(NamedTuple):
    total_amount: float
    pending: int
    paid: int

    @property
    def total_amount_text(self) -> str:
        return format_currency(self.total_amount)


def employee_summary(store) -> EmployeeSummary:
    return EmployeeSummary(
        total=len(store),
        positions=len(store.distinct_values("position")),
        departments=len(store.distinct_values("department")),
    )


def payroll_summary(store) -> PayrollSummary:
    """Salary total plus pending/paid counts; unparseable salaries count as 0"""
    total = 0.0
    pending = paid = 0
    for row in store.all():
        total += parse_currency(row.salary) or 0.0
        if row.status is PaymentStatus.PAID:
            paid += 1
        else:
            pending += 1
    return PayrollSummary(total_amount=total, pending=pending, paid=paid)
