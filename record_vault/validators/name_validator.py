"""Required Text Validator"""

from typing import Tuple

from record_vault.config import REQUIRED_MESSAGE


class NameValidator:
    """Required text validation (names, employee numbers)"""

    @staticmethod
    def validate_required(value: str) -> Tuple[bool, str]:
        """Valid when something other than whitespace was entered"""
        if not value or not str(value).strip():
            return False, REQUIRED_MESSAGE
        return True, ""
