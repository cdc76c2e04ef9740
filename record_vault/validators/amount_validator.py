"""Payroll Amount Validator"""

from typing import Tuple

from record_vault.config import PAYMENT_STATUSES
from record_vault.utils.helpers import parse_currency


class AmountValidator:
    """Validates payroll salary, hours and payment status fields"""

    @staticmethod
    def validate_currency(salary: str) -> Tuple[bool, str]:
        """Validate a salary amount such as ₱45,000.00 or 45000"""
        if salary is None or str(salary).strip() == "":
            return True, ""  # Empty is okay

        amount = parse_currency(salary)
        if amount is None:
            return False, "Salary should be an amount (e.g., ₱45,000.00)"
        if amount < 0:
            return False, "Salary cannot be negative"
        return True, ""

    @staticmethod
    def validate_hours(hours) -> Tuple[bool, str]:
        """Validate worked hours (non-negative number)"""
        if hours is None or str(hours).strip() == "":
            return True, ""

        try:
            value = float(str(hours).strip())
        except ValueError:
            return False, "Hours should be a number"
        if value < 0:
            return False, "Hours cannot be negative"
        return True, ""

    @staticmethod
    def validate_payment_status(status: str) -> Tuple[bool, str]:
        """Validate payment status (Paid / Not Paid)"""
        if not status:
            return True, ""
        if status not in PAYMENT_STATUSES:
            return False, f"Status should be one of: {', '.join(PAYMENT_STATUSES)}"
        return True, ""
