"""
RecordVault - in-memory record engine
Search, filter, sort, paginate, select and edit Employee / Payroll records
"""

__version__ = "1.0.0"

# Main modules can be imported from here
from . import config
from . import validators
from . import utils
from . import database
from . import records

from .errors import DuplicateIdentifier, NotFound, ValidationErrors, MalformedSeedData
from .records import EmployeeRecord, PayrollRecord, PaymentStatus, RecordKind
from .database import RecordStore, load_seed
from .query import FilterCriteria, query
from .pagination import Page, Pager, page
from .selection import SelectionTracker
from .form_session import FormSession, FormDraft, FormMode
from .table import RecordTable

__all__ = [
    'config', 'validators', 'utils', 'database', 'records',
    'DuplicateIdentifier', 'NotFound', 'ValidationErrors', 'MalformedSeedData',
    'EmployeeRecord', 'PayrollRecord', 'PaymentStatus', 'RecordKind',
    'RecordStore', 'load_seed', 'FilterCriteria', 'query',
    'Page', 'Pager', 'page', 'SelectionTracker',
    'FormSession', 'FormDraft', 'FormMode', 'RecordTable',
]
