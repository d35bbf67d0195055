"""Repository management for Tent VCS."""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from tent.core.errors import TentIOError
from tent.core.index import Index, IndexEntry
from tent.core.objects import Commit
from tent.core.store import ObjectStore
from tent.utils.fs import read_bytes

logger = logging.getLogger(__name__)


class Repository:
    """
    Represents a Tent repository.

    A repository is a handle on one work tree and its .tent directory. All
    state (objects, HEAD, index) is reached through it; nothing is global.
    """

    def __init__(self, path: Union[str, Path] = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.tent_dir = self.work_tree / '.tent'
        self.objects_dir = self.tent_dir / 'objects'
        self.head_file = self.tent_dir / 'HEAD'
        self.index_file = self.tent_dir / 'index'
        self.config_file = self.tent_dir / 'config'
        self.journal_file = self.tent_dir / 'COMMIT_PENDING'

        # Initialize managers (lazy loading to avoid circular import)
        self._store = None
        self._ref_manager = None
        self._commit_graph = None
        self._diff_engine = None
        self._config = None

    @property
    def store(self) -> ObjectStore:
        """Get ObjectStore instance."""
        if self._store is None:
            self._store = ObjectStore(self.objects_dir)
        return self._store

    @property
    def refs(self):
        """Get RefManager instance."""
        if self._ref_manager is None:
            from .refs import RefManager
            self._ref_manager = RefManager(self)
        return self._ref_manager

    @property
    def graph(self):
        """Get CommitGraph instance."""
        if self._commit_graph is None:
            from tent.operations.history import CommitGraph
            self._commit_graph = CommitGraph(self)
        return self._commit_graph

    @property
    def diff(self):
        """Get DiffEngine instance."""
        if self._diff_engine is None:
            from tent.operations.diff import DiffEngine
            self._diff_engine = DiffEngine(self)
        return self._diff_engine

    @property
    def config(self):
        """Get Config instance."""
        if self._config is None:
            from .config import Config
            self._config = Config(self.config_file)
        return self._config

    def init(self) -> 'Repository':
        """
        Initialize the repository, or leave an existing one untouched.

        Creates the .tent directory structure:
        .tent/
        ├── objects/       # Object database
        ├── HEAD           # Latest commit (empty until the first commit)
        ├── index          # Staging area
        └── config         # Repository configuration

        Files that already exist are never overwritten, so calling this on
        an initialized repository is safe.

        Returns:
            Repository: self for method chaining
        """
        try:
            self.objects_dir.mkdir(parents=True, exist_ok=True)
            self._create_if_missing(self.head_file, '')
            self._create_if_missing(self.index_file, '[]')
            self._create_if_missing(self.config_file, '[core]\n\trepositoryformatversion = 0\n')
        except OSError as e:
            raise TentIOError(str(self.tent_dir), e.strerror or str(e)) from e

        self.graph.recover()
        logger.debug("initialized repository at %s", self.tent_dir)
        return self

    @staticmethod
    def _create_if_missing(path: Path, content: str) -> None:
        try:
            with open(path, 'x', encoding='utf-8') as f:
                f.write(content)
        except FileExistsError:
            pass

    def is_initialized(self) -> bool:
        """Check whether the .tent directory exists."""
        return self.objects_dir.is_dir()

    @classmethod
    def find_repository(cls, path: Union[str, Path] = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Searches from the given path upwards until it finds a .tent directory
        or reaches the filesystem root.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            tent_dir = current / '.tent'
            if tent_dir.is_dir():
                return cls(current)

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    def read_index(self) -> Index:
        """Load the staging area from disk."""
        index = Index()
        index.read(str(self.index_file))
        return index

    def relative_path(self, file_path: Union[str, Path]) -> str:
        """
        Express file_path relative to the work tree, with '/' separators.

        Relative paths are taken to be relative to the work tree.

        Raises:
            TentIOError: If the path lies outside the work tree
        """
        path = Path(file_path)
        if not path.is_absolute():
            path = self.work_tree / path

        try:
            return path.resolve().relative_to(self.work_tree).as_posix()
        except ValueError:
            raise TentIOError(str(file_path), "outside repository") from None

    def add(self, file_path: Union[str, Path]) -> IndexEntry:
        """
        Stage a file for commit.

        The file content is written to the object store before the entry
        that references it reaches the index.

        Args:
            file_path: Path to file (absolute, or relative to the work tree)

        Returns:
            IndexEntry: The staged entry

        Raises:
            TentIOError: If the file cannot be read
        """
        self.graph.recover()

        rel_path = self.relative_path(file_path)
        content = read_bytes(self.work_tree / rel_path)
        digest = self.store.put(content)

        index = self.read_index()
        entry = index.stage(rel_path, digest)
        index.write(str(self.index_file))

        return entry

    def commit(self, message: str) -> str:
        """
        Commit the staged files.

        Args:
            message: Commit message

        Returns:
            str: Hash of the new commit
        """
        self.graph.recover()
        index = self.read_index()
        return self.graph.commit(message, index.snapshot())

    def log(self, start: Optional[str] = None) -> Iterator[Tuple[str, Commit]]:
        """
        Walk history from start (HEAD by default) back to the root commit.

        Yields nothing when there are no commits.
        """
        self.graph.recover()
        if start is not None:
            start = self.graph.resolve(start)
        return self.graph.history(start)

    def show_commit_diff(self, ref: str) -> List:
        """
        Compare each file of a commit with the parent's version.

        Args:
            ref: Commit hash, abbreviated hash, or 'HEAD'

        Returns:
            list of FileChange, in the commit's stored order
        """
        self.graph.recover()
        return self.diff.diff_commit(ref)

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
