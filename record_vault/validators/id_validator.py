"""Philippine Government ID Validator"""

import re
from typing import Tuple

from record_vault.utils.helpers import group_digits

SSS_RE = re.compile(r'^\d{2}-\d{7}-\d$')
PHILHEALTH_RE = re.compile(r'^\d{2}-\d{9}-\d$')
PAGIBIG_RE = re.compile(r'^\d{4}-\d{4}-\d{4}$')
TIN_RE = re.compile(r'^\d{3}-\d{3}-\d{3}-\d{3}$')

SSS_GROUPS = (2, 7, 1)
PHILHEALTH_GROUPS = (2, 9, 1)
PAGIBIG_GROUPS = (4, 4, 4)
TIN_GROUPS = (3, 3, 3, 3)


class PhilippineIDValidator:
    """Validates Philippine government ID formats"""

    @staticmethod
    def _check(value: str, label: str, digits: int, pattern, example: str) -> Tuple[bool, str]:
        if not value:
            return True, ""  # Empty is okay

        # Remove spaces and dashes for checking
        clean = re.sub(r'[\s-]', '', value)

        if not clean.isdigit():
            return False, f"{label} should contain only digits"

        if len(clean) != digits:
            return False, f"{label} should be {digits} digits ({example})"

        # Dashes must sit where the printed card puts them
        if not pattern.match(value):
            return False, f"Format should be {example}"

        return True, ""

    @staticmethod
    def validate_sss(sss_number: str) -> Tuple[bool, str]:
        """Validate SSS number format: XX-XXXXXXX-X"""
        return PhilippineIDValidator._check(
            sss_number, "SSS number", 10, SSS_RE, "XX-XXXXXXX-X, e.g. 34-1234567-8")

    @staticmethod
    def validate_philhealth(philhealth_number: str) -> Tuple[bool, str]:
        """Validate PhilHealth number format: XX-XXXXXXXXX-X"""
        return PhilippineIDValidator._check(
            philhealth_number, "PhilHealth number", 12, PHILHEALTH_RE,
            "XX-XXXXXXXXX-X, e.g. 12-345678901-2")

    @staticmethod
    def validate_pagibig(pagibig_number: str) -> Tuple[bool, str]:
        """Validate Pag-IBIG number format: XXXX-XXXX-XXXX"""
        return PhilippineIDValidator._check(
            pagibig_number, "Pag-IBIG number", 12, PAGIBIG_RE,
            "XXXX-XXXX-XXXX, e.g. 1234-5678-9012")

    @staticmethod
    def validate_tin(tin_number: str) -> Tuple[bool, str]:
        """Validate TIN format: XXX-XXX-XXX-XXX (branch code included)"""
        return PhilippineIDValidator._check(
            tin_number, "TIN", 12, TIN_RE, "XXX-XXX-XXX-XXX, e.g. 123-456-789-000")

    # As-you-type formatting: digit groups of each printed card
    @staticmethod
    def auto_format_sss(text: str) -> str:
        return group_digits(text, SSS_GROUPS)

    @staticmethod
    def auto_format_philhealth(text: str) -> str:
        return group_digits(text, PHILHEALTH_GROUPS)

    @staticmethod
    def auto_format_pagibig(text: str) -> str:
        return group_digits(text, PAGIBIG_GROUPS)

    @staticmethod
    def auto_format_tin(text: str) -> str:
        return group_digits(text, TIN_GROUPS)
