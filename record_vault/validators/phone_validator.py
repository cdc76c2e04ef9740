"""Phone Number Validator"""

import re
from typing import Tuple

from record_vault.utils.helpers import group_digits

# +63 or a trunk 0, then the 10-digit subscriber number
PH_MOBILE_RE = re.compile(r'^(\+63|0)\d{10}$')


class PhoneValidator:
    """Validates Philippine mobile numbers"""

    @staticmethod
    def validate_phone(phone: str) -> Tuple[bool, str]:
        """Validate a mobile number: +63XXXXXXXXXX or 0XXXXXXXXXX"""
        if not phone:
            return True, ""  # Empty is okay

        # Input masks insert spaces/dashes ("+63 917 123 4567"); drop them first
        clean = re.sub(r'[\s\-\(\)\.]+', '', phone)

        if not re.match(r'^\+?\d+$', clean):
            return False, "Mobile number should contain only digits, spaces, or dashes"

        if not PH_MOBILE_RE.match(clean):
            return False, "Please enter a valid mobile number (+63 or 0 followed by 10 digits)"

        return True, ""

    @staticmethod
    def auto_format_phone(text: str) -> str:
        """Space the number as it is written: +63 917 123 4567 or 0917 123 4567"""
        clean = re.sub(r'[^\d+]', '', text)
        if clean.startswith('+63'):
            rest = group_digits(clean[3:], (3, 3, 4), sep=" ")
            return f"+63 {rest}" if rest else "+63"
        if clean.startswith('0'):
            return group_digits(clean, (4, 3, 4), sep=" ")
        return text
