"""Core functionality for Tent.

This module contains the core data structures:
- Object store and hashing
- Commit records
- Index/staging area
- HEAD reference
- Configuration management
- Repository handle

For commit history and diffs, see tent.operations
"""

from tent.core.errors import TentError, ObjectNotFoundError, TentIOError, MalformedStateError
from tent.core.hash import hash_object, hash_file
from tent.core.store import ObjectStore
from tent.core.index import Index, IndexEntry
from tent.core.objects import Commit
from tent.core.refs import RefManager
from tent.core.config import Config
from tent.core.repository import Repository

__all__ = [
    'TentError',
    'ObjectNotFoundError',
    'TentIOError',
    'MalformedStateError',
    'ObjectStore',
    'Commit',
    'Repository',
    'Index',
    'IndexEntry',
    'RefManager',
    'Config',
    'hash_object',
    'hash_file',
]
