"""HEAD reference management for Tent."""

import logging
from typing import Optional

from tent.core.errors import TentIOError
from tent.utils.fs import atomic_write

logger = logging.getLogger(__name__)


class RefManager:
    """
    Manages the HEAD reference.
    
    History is linear, so HEAD is the only reference: a file holding the
    hash of the latest commit, or nothing before the first commit.
    """
    
    def __init__(self, repo):
        """
        Initialize reference manager.
        
        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.head_file = repo.head_file
    
    def read_head(self) -> Optional[str]:
        """
        Read HEAD.
        
        Returns:
            Commit hash, or None if there are no commits yet
        """
        try:
            content = self.head_file.read_text(encoding='utf-8').strip()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise TentIOError(str(self.head_file), e.strerror or str(e)) from e
        
        return content or None
    
    def write_head(self, commit_hash: str) -> None:
        """Point HEAD at commit_hash."""
        atomic_write(self.head_file, commit_hash)
        logger.debug("HEAD -> %s", commit_hash)
