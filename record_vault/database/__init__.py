"""
Database package for RecordVault: the in-memory record store and its seed loader
"""

from .store import RecordStore
from .loader import load_seed, load_json, load_workbook_seed

__all__ = ['RecordStore', 'load_seed', 'load_json', 'load_workbook_seed']
