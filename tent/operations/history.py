"""Commit creation and history traversal."""

import logging
from typing import Iterator, List, Optional, Tuple

from tent.core.errors import ObjectNotFoundError, MalformedStateError, TentIOError
from tent.core.hash import is_digest
from tent.core.index import Index, IndexEntry
from tent.core.objects import Commit
from tent.utils.fs import atomic_write

logger = logging.getLogger(__name__)

# Shortest abbreviated hash accepted by resolve()
MIN_PREFIX_LENGTH = 4


class CommitGraph:
    """
    Linear commit history rooted at HEAD.

    Creating a commit is a two-phase operation. The commit object is written
    first and its hash recorded in a journal file; HEAD is then moved and the
    index cleared, and the journal removed. If the process dies between the
    two phases, recover() finishes the job from the journal.
    """

    def __init__(self, repo):
        """
        Initialize commit graph.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.store = repo.store
        self.refs = repo.refs
        self.journal_file = repo.journal_file

    def current_head(self) -> Optional[str]:
        """Hash of the latest commit, or None if there are no commits."""
        return self.refs.read_head()

    def read_commit(self, commit_hash: str) -> Commit:
        """
        Load a commit from the store.

        Raises:
            ObjectNotFoundError: If the hash is not in the store
            MalformedStateError: If the object is not a commit record
        """
        try:
            data = self.store.get(commit_hash)
        except ObjectNotFoundError:
            raise ObjectNotFoundError(commit_hash, kind='commit') from None
        return Commit.deserialize(data)

    def commit(self, message: str, staged_files: List[IndexEntry]) -> str:
        """
        Record staged_files as a new commit on top of HEAD.

        An empty file list is allowed and produces an empty commit.

        Args:
            message: Commit message
            staged_files: Entries from the staging area

        Returns:
            str: Hash of the new commit
        """
        parent = self.current_head()
        commit = Commit.create(message=message, parent=parent, files=staged_files)

        commit_hash = self.store.put(commit.serialize())
        logger.debug("wrote commit %s (parent %s, %d files)", commit_hash, parent, len(staged_files))

        atomic_write(self.journal_file, commit_hash)
        self._apply(commit_hash)

        return commit_hash

    def _apply(self, commit_hash: str) -> None:
        """Move HEAD to commit_hash, clear the index, drop the journal."""
        self.refs.write_head(commit_hash)
        Index().write(str(self.repo.index_file))
        try:
            self.journal_file.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise TentIOError(str(self.journal_file), e.strerror or str(e)) from e

    def recover(self) -> Optional[str]:
        """
        Finish a commit that was interrupted after its object was written.

        Returns:
            str: Hash of the recovered commit, or None if nothing was pending
        """
        try:
            pending = self.journal_file.read_text(encoding='utf-8').strip()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise TentIOError(str(self.journal_file), e.strerror or str(e)) from e

        if not self.store.exists(pending):
            logger.warning("discarding commit journal naming unknown object %r", pending)
            self.journal_file.unlink()
            return None

        logger.info("completing interrupted commit %s", pending)
        self._apply(pending)
        return pending

    def history(self, start_hash: Optional[str] = None) -> Iterator[Tuple[str, Commit]]:
        """
        Walk parent links from start_hash (HEAD by default) to the root.

        Yields:
            (commit_hash, commit) pairs, newest first

        Raises:
            ObjectNotFoundError: If a commit in the chain is missing
        """
        commit_hash = start_hash if start_hash is not None else self.current_head()
        seen = set()

        while commit_hash:
            if commit_hash in seen:
                raise MalformedStateError('history', f'cycle at commit {commit_hash}')
            seen.add(commit_hash)

            commit = self.read_commit(commit_hash)
            yield commit_hash, commit
            commit_hash = commit.parent

    def resolve(self, ref: str) -> str:
        """
        Resolve 'HEAD', a full hash, or a unique abbreviated hash.

        Raises:
            ObjectNotFoundError: If ref matches no commit or is ambiguous
        """
        ref = ref.strip()

        if ref == 'HEAD':
            head = self.current_head()
            if not head:
                raise ObjectNotFoundError('HEAD', kind='commit', reason="No commits yet")
            return head

        if is_digest(ref):
            if not self.store.exists(ref):
                raise ObjectNotFoundError(ref, kind='commit')
            return ref

        prefix = ref.lower()
        if len(prefix) < MIN_PREFIX_LENGTH or not all(c in '0123456789abcdef' for c in prefix):
            raise ObjectNotFoundError(ref, kind='commit')

        matches = self.store.find_by_prefix(prefix)
        if not matches:
            raise ObjectNotFoundError(ref, kind='commit')
        if len(matches) > 1:
            raise ObjectNotFoundError(
                ref, kind='commit',
                reason=f"Ambiguous commit hash {ref} ({len(matches)} matches)"
            )
        return matches[0]
