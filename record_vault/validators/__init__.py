"""
Validators package for RecordVault.
Contains validators for IDs, phone numbers, emails, required text and
payroll amounts, plus the validate() dispatcher used by form sessions.
"""

from typing import NamedTuple

from record_vault.config import REQUIRED_MESSAGE

from .id_validator import PhilippineIDValidator
from .phone_validator import PhoneValidator
from .email_validator import EmailValidator
from .name_validator import NameValidator
from .amount_validator import AmountValidator


class ValidationResult(NamedTuple):
    valid: bool
    message: str


# kind -> (value) -> (bool, message)
VALIDATORS = {
    'required': NameValidator.validate_required,
    'email': EmailValidator.validate_email,
    'mobile_number': PhoneValidator.validate_phone,
    'sss_number': PhilippineIDValidator.validate_sss,
    'philhealth_number': PhilippineIDValidator.validate_philhealth,
    'pagibig_number': PhilippineIDValidator.validate_pagibig,
    'tin_number': PhilippineIDValidator.validate_tin,
    'currency': AmountValidator.validate_currency,
    'hours': AmountValidator.validate_hours,
    'payment_status': AmountValidator.validate_payment_status,
}

# kind -> (partial text) -> formatted text, for fields typed digit by digit
FORMATTERS = {
    'mobile_number': PhoneValidator.auto_format_phone,
    'sss_number': PhilippineIDValidator.auto_format_sss,
    'philhealth_number': PhilippineIDValidator.auto_format_philhealth,
    'pagibig_number': PhilippineIDValidator.auto_format_pagibig,
    'tin_number': PhilippineIDValidator.auto_format_tin,
}


def auto_format(kind: str, text) -> str:
    """Format partially typed input for a kind; kinds without a formatter pass through"""
    text = "" if text is None else str(text)
    formatter = FORMATTERS.get(kind)
    return formatter(text) if formatter else text


def validate(kind: str, raw_value, required: bool = False) -> ValidationResult:
    """
    Validate one field value.

    Format checks only apply when a value is present; an empty value is
    valid unless the field is required (or the kind itself is 'required').

    Raises:
        ValueError: kind is not a known validator
    """
    try:
        check = VALIDATORS[kind]
    except KeyError:
        raise ValueError(f"Unknown validator kind: {kind!r}") from None

    value = "" if raw_value is None else raw_value
    if required and not str(value).strip():
        return ValidationResult(False, REQUIRED_MESSAGE)

    valid, message = check(value)
    return ValidationResult(valid, message)


__all__ = [
    'PhilippineIDValidator',
    'PhoneValidator',
    'EmailValidator',
    'NameValidator',
    'AmountValidator',
    'ValidationResult',
    'VALIDATORS',
    'FORMATTERS',
    'validate',
    'auto_format',
]
