"""Index (staging area) implementation."""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Iterator, List

from tent.core.errors import MalformedStateError, TentIOError
from tent.utils.fs import atomic_write

logger = logging.getLogger(__name__)


@dataclass
class IndexEntry:
    """A staged file: its path and the digest of its content."""
    path: str
    hash: str
    
    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
    
    def __repr__(self) -> str:
        """String representation."""
        return f"IndexEntry({self.hash[:7]} {self.path})"


class Index:
    """
    Tent index (staging area) implementation.
    
    The index is an ordered list of (path, hash) pairs queued for the next
    commit. Staging the same path twice keeps both entries.
    
    On disk it is a JSON array that is always rewritten as a whole.
    """
    
    def __init__(self):
        """Initialize empty index."""
        self.entries: List[IndexEntry] = []
    
    def stage(self, path: str, digest: str) -> IndexEntry:
        """
        Append an entry.
        
        Args:
            path: File path relative to the work tree
            digest: Hash of the staged content
            
        Returns:
            IndexEntry: The new entry
        """
        entry = IndexEntry(path=path, hash=digest)
        self.entries.append(entry)
        logger.debug("staged %s as %s", path, digest)
        return entry
    
    def snapshot(self) -> List[IndexEntry]:
        """Return a copy of the staged entries in order."""
        return list(self.entries)
    
    def clear(self) -> None:
        """Clear all entries from index."""
        self.entries.clear()
    
    def write(self, index_path: str) -> None:
        """
        Write index to disk.
        
        Args:
            index_path: Path to index file
        """
        payload = json.dumps([entry.to_dict() for entry in self.entries], indent=2)
        atomic_write(Path(index_path), payload)
    
    def read(self, index_path: str) -> None:
        """
        Read index from disk.
        
        A missing file reads as an empty index.
        
        Args:
            index_path: Path to index file
            
        Raises:
            MalformedStateError: If the file is not a JSON array of entries
        """
        path = Path(index_path)
        if not path.exists():
            self.entries.clear()
            return
        
        try:
            raw = path.read_text(encoding='utf-8')
        except OSError as e:
            raise TentIOError(str(path), e.strerror or str(e)) from e
        
        self.entries = self.parse(raw)
    
    @staticmethod
    def parse(raw: str) -> List[IndexEntry]:
        """Parse serialized index content into entries."""
        if not raw.strip():
            return []
        
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise MalformedStateError('index', str(e)) from e
        
        if not isinstance(data, list):
            raise MalformedStateError('index', 'expected a JSON array')
        
        return [entry_from_dict(item, 'index') for item in data]
    
    def __iter__(self) -> Iterator[IndexEntry]:
        return iter(self.entries)
    
    def __len__(self) -> int:
        """Number of entries in index."""
        return len(self.entries)
    
    def __repr__(self) -> str:
        """String representation."""
        return f"Index(entries={len(self.entries)})"


def entry_from_dict(item, source: str) -> IndexEntry:
    """Build an IndexEntry from its JSON form, validating the shape."""
    if not isinstance(item, dict):
        raise MalformedStateError(source, f'entry is not an object: {item!r}')
    
    path = item.get('path')
    digest = item.get('hash')
    if not isinstance(path, str) or not isinstance(digest, str):
        raise MalformedStateError(source, f'entry needs string "path" and "hash": {item!r}')
    
    return IndexEntry(path=path, hash=digest)
