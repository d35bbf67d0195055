"""Diff engine for comparing file contents and commits."""

import re
from dataclasses import dataclass, field
from difflib import SequenceMatcher
from typing import List, Optional, Union

from colorama import Fore, Style

UNCHANGED = 'unchanged'
ADDED = 'added'
REMOVED = 'removed'

# Status of a file in a commit relative to the commit's parent
MODIFIED = 'modified'
NEW = 'new'
ROOT = 'root'

# Lines end at "\n" only; a lone "\r" stays part of its line
_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")
_LINE_END_RE = re.compile(r"\r?\n\Z")


def split_lines(text: str) -> List[str]:
    """Split text into lines, keeping each line's ending."""
    return _LINE_RE.findall(text)


def strip_line_end(line: str) -> str:
    return _LINE_END_RE.sub('', line)


@dataclass
class DiffRun:
    """A run of consecutive lines sharing one kind."""
    kind: str
    text: str

    @property
    def lines(self) -> List[str]:
        """Lines of the run without their line endings."""
        return [strip_line_end(line) for line in split_lines(self.text)]


@dataclass
class FileChange:
    """One file of a commit compared against the commit's parent."""
    path: str
    hash: str
    status: str
    content: bytes = b''
    runs: List[DiffRun] = field(default_factory=list)

    @property
    def is_new(self) -> bool:
        return self.status == NEW

    @property
    def is_root(self) -> bool:
        return self.status == ROOT


def _as_text(data: Union[bytes, str, None]) -> str:
    if data is None:
        return ''
    if isinstance(data, bytes):
        return data.decode('utf-8', errors='replace')
    return data


def diff_lines(old_text: Union[bytes, str], new_text: Union[bytes, str]) -> List[DiffRun]:
    """
    Compare two texts line by line.

    Lines keep their endings, so a missing final newline counts as a change.
    A replaced block comes out as its removed run followed by its added run.

    Args:
        old_text: Previous content
        new_text: Current content

    Returns:
        Runs tagged unchanged/added/removed, in document order
    """
    old_lines = split_lines(_as_text(old_text))
    new_lines = split_lines(_as_text(new_text))

    runs: List[DiffRun] = []

    def emit(kind, lines):
        if not lines:
            return
        text = ''.join(lines)
        if runs and runs[-1].kind == kind:
            runs[-1].text += text
        else:
            runs.append(DiffRun(kind, text))

    matcher = SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == 'equal':
            emit(UNCHANGED, new_lines[j1:j2])
        else:
            # 'replace' yields both, 'delete' and 'insert' yield one side
            emit(REMOVED, old_lines[i1:i2])
            emit(ADDED, new_lines[j1:j2])

    return runs


class DiffEngine:
    """
    Engine for computing the changes a commit introduced.

    Each file in the commit is compared with the file of the same path in
    the parent commit.
    """

    def __init__(self, repo):
        """
        Initialize diff engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def diff_blobs(self, old_content: Optional[bytes], new_content: Optional[bytes]) -> List[DiffRun]:
        """Compute diff runs between two blob contents."""
        return diff_lines(old_content, new_content)

    def diff_commit(self, ref: str) -> List[FileChange]:
        """
        Compare every file of a commit with its parent's version.

        All objects are loaded before anything is returned, so a missing
        commit or blob raises without yielding partial results.

        Args:
            ref: Commit hash, abbreviated hash, or 'HEAD'

        Returns:
            One FileChange per file entry, in stored order

        Raises:
            ObjectNotFoundError: If the commit or one of its blobs is missing
        """
        graph = self.repo.graph
        store = self.repo.store

        commit = graph.read_commit(graph.resolve(ref))
        parent = None

        changes = []
        for entry in commit.files:
            content = store.get(entry.hash)

            if commit.parent is None:
                changes.append(FileChange(entry.path, entry.hash, ROOT, content))
                continue

            if parent is None:
                parent = graph.read_commit(commit.parent)

            parent_entry = parent.find_file(entry.path)
            if parent_entry is None:
                changes.append(FileChange(entry.path, entry.hash, NEW, content))
                continue

            parent_content = store.get(parent_entry.hash)
            runs = self.diff_blobs(parent_content, content)
            changes.append(FileChange(entry.path, entry.hash, MODIFIED, content, runs))

        return changes

    def format_changes(self, changes: List[FileChange], color: bool = True,
                       show_content: bool = False) -> str:
        """
        Format file changes for the console.

        Args:
            changes: Result of diff_commit
            color: Whether to use color output
            show_content: Print each file's full content under its header

        Returns:
            Formatted diff string
        """
        output = []

        def paint(text, fore):
            return f"{fore}{text}{Style.RESET_ALL}" if color else text

        for change in changes:
            output.append(paint(f"File: {change.path} ({change.hash[:7]})", Fore.CYAN))

            if show_content:
                output.append("Content:")
                for line in split_lines(_as_text(change.content)):
                    output.append(strip_line_end(line))

            if change.is_root:
                output.append("This is the first commit, no previous version to compare.")
            elif change.is_new:
                output.append(f"File {change.path} is new in this commit.")
            else:
                for run in change.runs:
                    for line in run.lines:
                        if run.kind == ADDED:
                            output.append(paint(f"+{line}", Fore.GREEN))
                        elif run.kind == REMOVED:
                            output.append(paint(f"-{line}", Fore.RED))
                        else:
                            output.append(f" {line}")

            output.append('')

        return '\n'.join(output).rstrip('\n')
