"""Operations module for high-level Tent operations.

This module contains the business logic for Tent operations:
- Commit creation and history traversal
- Diff computation
"""

from tent.operations.history import CommitGraph
from tent.operations.diff import DiffEngine, DiffRun, FileChange, diff_lines

__all__ = [
    'CommitGraph',
    'DiffEngine', 'DiffRun', 'FileChange', 'diff_lines',
]
