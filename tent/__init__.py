"""Tent - a minimal content-addressed version control system."""

__version__ = '0.1.0'

from tent.core.repository import Repository
from tent.core.objects import Commit
from tent.core.index import Index, IndexEntry

__all__ = [
    'Repository',
    'Commit',
    'Index',
    'IndexEntry',
]
