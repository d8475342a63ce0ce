"""
Table Snapshot Module
"""
from .tables import FOREIGN_KEYS, ForeignKey, TableName, foreign_keys_for
from .models import TABLE_MODELS, Record
from .store import Snapshot

__all__ = [
    "FOREIGN_KEYS",
    "ForeignKey",
    "TableName",
    "foreign_keys_for",
    "TABLE_MODELS",
    "Record",
    "Snapshot",
]
