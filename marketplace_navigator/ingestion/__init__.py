"""
Data Acquisition Module
"""
from .loader import (
    LoadResult,
    NavigationSession,
    SnapshotLoader,
    SnapshotLoadError,
    load_diagram_file,
    load_snapshot_file,
)

__all__ = [
    "LoadResult",
    "NavigationSession",
    "SnapshotLoader",
    "SnapshotLoadError",
    "load_diagram_file",
    "load_snapshot_file",
]
