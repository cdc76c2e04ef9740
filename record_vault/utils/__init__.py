"""
Utilities package for RecordVault
"""

from .helpers import parse_currency, format_currency, format_hours, group_digits, make_display_name, setup_logging

__all__ = ['parse_currency', 'format_currency', 'format_hours', 'group_digits', 'make_display_name', 'setup_logging']
