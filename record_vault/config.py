"""
RecordVault Configuration Module
Contains constants shared by the record engine: sort keys, page sizes,
currency handling and the per-kind field schemas used by forms.
"""

import re
import sys
from pathlib import Path

# ============================================================================
# PATH RESOLUTION
# ============================================================================

def get_app_root() -> Path:
    """
    Returns the folder where the frozen executable lives,
    or the project root when running from source.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    # config.py is at record_vault/config.py
    return Path(__file__).resolve().parent.parent


APP_ROOT = get_app_root()

# ============================================================================
# APPLICATION CONSTANTS
# ============================================================================

APP_NAME = "RecordVault"
APP_TITLE = "Records Management"
VERSION = "1.0.0"

LOGS_DIR = str(APP_ROOT / "logs")
EMPLOYEES_FILE = str(APP_ROOT / "data" / "employees.json")
PAYROLL_FILE = str(APP_ROOT / "data" / "payroll.json")

# Seed collection names (top-level key of each JSON seed file)
EMPLOYEES_COLLECTION = "employeesData"
PAYROLL_COLLECTION = "payrollData"

# ============================================================================
# TABLE SETTINGS
# ============================================================================

DEFAULT_PAGE_SIZE = 5
PAGE_SIZE_OPTIONS = [5, 10, 25, 50]

# Sort keys offered by the admin screens. "" keeps insertion order.
SORT_DEFAULT = ""
SORT_NAME_ASC = "name-asc"
SORT_NAME_DESC = "name-desc"
SORT_DEPARTMENT = "department"
SORT_STATUS = "status"
SORT_EMP_ID = "empId"
SORT_SALARY_ASC = "salary-asc"
SORT_SALARY_DESC = "salary-desc"

SORT_KEYS = (
    SORT_DEFAULT, SORT_NAME_ASC, SORT_NAME_DESC, SORT_DEPARTMENT,
    SORT_STATUS, SORT_EMP_ID, SORT_SALARY_ASC, SORT_SALARY_DESC,
)

SORT_LABELS = {
    SORT_DEFAULT: "None",
    SORT_NAME_ASC: "Name (A-Z)",
    SORT_NAME_DESC: "Name (Z-A)",
    SORT_DEPARTMENT: "Department",
    SORT_STATUS: "Status",
    SORT_EMP_ID: "Employee ID",
    SORT_SALARY_ASC: "Salary (Low-High)",
    SORT_SALARY_DESC: "Salary (High-Low)",
}

# ============================================================================
# CURRENCY
# ============================================================================

CURRENCY_SYMBOL = "₱"  # Philippine Peso
# Anything that is not a digit, sign or decimal point is dropped before parsing
CURRENCY_STRIP_RE = re.compile(r"[^0-9.\-]+")

# ============================================================================
# FORM SCHEMAS
# ============================================================================

REQUIRED_MESSAGE = "This field is required"

PAYMENT_STATUSES = ["Paid", "Not Paid"]

# field -> validator kind; every key here counts towards form progress
EMPLOYEE_VALIDATED_FIELDS = {
    "emp_no": "required",
    "first_name": "required",
    "last_name": "required",
    "email_address": "email",
    "mobile_number": "mobile_number",
    "sss_number": "sss_number",
    "philhealth_number": "philhealth_number",
    "pagibig_number": "pagibig_number",
    "tin_number": "tin_number",
}

EMPLOYEE_FORM_FIELDS = [
    "emp_no", "department", "position", "email_address", "mobile_number",
    "first_name", "middle_name", "last_name", "gender", "date_of_birth",
    "civil_status", "home_address", "current_address", "sss_number",
    "philhealth_number", "pagibig_number", "tin_number",
]

EMPLOYEE_FORM_DEFAULTS = {
    "gender": "Male",
    "civil_status": "Single",
}

PAYROLL_VALIDATED_FIELDS = {
    "name": "required",
    "emp_id": "required",
    "salary": "currency",
    "hours": "hours",
    "status": "payment_status",
}

PAYROLL_FORM_FIELDS = ["name", "emp_id", "department", "salary", "hours", "status"]

PAYROLL_FORM_DEFAULTS = {
    "hours": "0",
    "status": "Not Paid",
}

# Table headers for the Qt bridge (first column is the selection checkbox)
EMPLOYEE_HEADERS = ["", "Emp No", "Name", "Department", "Position", "Email", "Mobile"]
PAYROLL_HEADERS = ["", "Emp ID", "Name", "Department", "Salary", "Hours", "Status"]
