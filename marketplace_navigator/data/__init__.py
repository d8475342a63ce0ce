"""
Synthetic Data Module
"""
from .generators import SnapshotGenerator

__all__ = ["SnapshotGenerator"]
