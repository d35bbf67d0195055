"""Utilities module for common helper functions.

This module contains:
- Filesystem utilities (atomic writes)
- Logging setup
"""

from tent.utils.fs import atomic_write, read_bytes
from tent.utils.log import configure_logging

__all__ = [
    'atomic_write', 'read_bytes', 'configure_logging',
]
