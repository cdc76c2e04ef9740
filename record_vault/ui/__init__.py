"""
UI package for RecordVault: Qt bridge over the record engine
"""

from .table_model import RecordTableModel

__all__ = ['RecordTableModel']
