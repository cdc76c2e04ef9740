"""Email Validator"""

import re
from typing import Tuple

# Email regex pattern
EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


class EmailValidator:
    """Email address validation"""

    @staticmethod
    def validate_email(email: str) -> Tuple[bool, str]:
        """Validate email format"""
        if not email:
            return True, ""  # Empty is okay

        if not EMAIL_RE.match(email.strip()):
            return False, "Please enter a valid email address (e.g., name@example.com)"

        return True, ""
