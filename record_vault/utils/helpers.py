"""
Helper utility functions
"""

import os
import re
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from record_vault.config import CURRENCY_SYMBOL, CURRENCY_STRIP_RE


def parse_currency(raw) -> Optional[float]:
    """
    Parse a formatted amount such as "₱45,000.00" into a float.

    Every screen goes through this one routine so the peso sign, stray
    mis-encoded symbol bytes and thousands separators are handled the same way.

    Args:
        raw: Formatted amount (str) or a number

    Returns:
        The numeric amount, or None if nothing numeric is left after stripping
    """
    if raw is None:
        return None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw)

    clean = CURRENCY_STRIP_RE.sub('', str(raw))
    if not clean or clean in {'-', '.', '-.'}:
        return None
    try:
        return float(clean)
    except ValueError:
        return None


def format_currency(amount: float) -> str:
    """Format an amount with the peso sign and two decimals (₱1,234.50)"""
    if amount < 0:
        return f"-{CURRENCY_SYMBOL}{-amount:,.2f}"
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


def format_hours(hours) -> str:
    """Hours without a trailing .0 and without rounding (160, 37.5, 1234567.25)"""
    hours = float(hours)
    if hours.is_integer():
        return str(int(hours))
    return repr(hours)


def group_digits(text: str, sizes, sep: str = "-") -> str:
    """
    Keep the digits of a partially typed number and split them into groups.

    Example: ("3412345678", (2, 7, 1)) -> "34-1234567-8"; ("3412", (2, 7, 1)) -> "34-12"
    Digits past the last group are dropped.
    """
    digits = re.sub(r'\D', '', text or '')
    groups = []
    start = 0
    for size in sizes:
        chunk = digits[start:start + size]
        if not chunk:
            break
        groups.append(chunk)
        start += size
    return sep.join(groups)


def make_display_name(first_name: str, middle_name: str, last_name: str) -> str:
    """
    Build the display name with a middle initial.

    Example: ("Juan", "Santos", "Dela Cruz") -> "Juan S. Dela Cruz"
    """
    middle = (middle_name or '').strip()
    middle_initial = f" {middle[0]}. " if middle else " "
    return f"{(first_name or '').strip()}{middle_initial}{(last_name or '').strip()}".strip()


def setup_logging(log_dir: str, level: int = logging.INFO,
                  log_name: str = "record_vault.log") -> str:
    """
    Configure root logging with a rotating file handler and a console handler.

    Args:
        log_dir: Directory for the log file (created if missing)
        level: Logging level for both handlers
        log_name: Log file name

    Returns:
        Full path of the log file
    """
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, log_name)

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
    )
    console_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s'
    )

    # 10MB per file, keep 5 backups
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10*1024*1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(file_formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(console_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    return log_file
