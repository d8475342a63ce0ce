"""
Marketplace Relational Navigator

Read-only, in-memory navigation over a marketplace table snapshot.
"""
from .navigation import RelationalNavigator
from .snapshot import Snapshot, TableName

__version__ = "1.0.0"

__all__ = ["RelationalNavigator", "Snapshot", "TableName", "__version__"]
