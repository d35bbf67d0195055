"""Commit records for Tent."""

import json
from datetime import datetime, timezone
from typing import List, Optional

from tent.core.errors import MalformedStateError
from tent.core.hash import hash_object
from tent.core.index import IndexEntry, entry_from_dict


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a moment as ISO-8601 UTC with millisecond precision."""
    moment = moment or datetime.now(timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def parse_timestamp(value: str) -> datetime:
    """Parse a timestamp written by utc_timestamp."""
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    return datetime.fromisoformat(value)


class Commit:
    """
    Represents a commit with metadata.
    
    A commit captures:
    - The staged files (path and blob hash for each)
    - The parent commit, or None for the root commit
    - Timestamp
    - Commit message
    
    The commit's identity is the hash of its serialized form, so commits
    with the same files but a different message or timestamp differ.
    """
    
    def __init__(
        self,
        message: str = '',
        parent: Optional[str] = None,
        timestamp: str = '',
        files: Optional[List[IndexEntry]] = None
    ):
        self.message = message
        self.parent = parent
        self.timestamp = timestamp
        self.files: List[IndexEntry] = list(files or [])
    
    def serialize(self) -> bytes:
        """
        Serialize commit to compact JSON.
        
        Format:
        {"message":...,"parent":...,"timestamp":...,"files":[{"path":...,"hash":...}]}
        
        Returns:
            bytes: Serialized commit data, exactly the bytes that are hashed
        """
        record = {
            'message': self.message,
            'parent': self.parent,
            'timestamp': self.timestamp,
            'files': [entry.to_dict() for entry in self.files],
        }
        return json.dumps(record, separators=(',', ':'), ensure_ascii=False).encode('utf-8')
    
    @classmethod
    def deserialize(cls, data: bytes) -> 'Commit':
        """
        Deserialize commit from JSON.
        
        Args:
            data: Serialized commit data
            
        Raises:
            MalformedStateError: If data is not a commit record
        """
        try:
            record = json.loads(data.decode('utf-8'))
        except (UnicodeDecodeError, ValueError) as e:
            raise MalformedStateError('commit', str(e)) from e
        
        if not isinstance(record, dict) or not {'message', 'parent', 'timestamp', 'files'}.issubset(record):
            raise MalformedStateError('commit', 'not a commit record')
        
        parent = record['parent']
        if parent is not None and not isinstance(parent, str):
            raise MalformedStateError('commit', f'invalid parent: {parent!r}')
        if not isinstance(record['files'], list):
            raise MalformedStateError('commit', '"files" must be a list')
        
        return cls(
            message=str(record['message']),
            parent=parent or None,
            timestamp=str(record['timestamp']),
            files=[entry_from_dict(item, 'commit') for item in record['files']],
        )
    
    @classmethod
    def create(
        cls,
        message: str,
        parent: Optional[str],
        files: List[IndexEntry],
        timestamp: Optional[str] = None
    ) -> 'Commit':
        """
        Create a new commit.
        
        Args:
            message: Commit message
            parent: Parent commit hash, or None for a root commit
            files: Staged entries to record
            timestamp: ISO-8601 timestamp (defaults to now)
            
        Returns:
            Commit: New commit object
        """
        return cls(
            message=message,
            parent=parent,
            timestamp=timestamp or utc_timestamp(),
            files=files,
        )
    
    @property
    def hash(self) -> str:
        """Hash of the serialized commit."""
        return hash_object(self.serialize())
    
    def find_file(self, path: str) -> Optional[IndexEntry]:
        """Return the first entry recorded for path, if any."""
        for entry in self.files:
            if entry.path == path:
                return entry
        return None
    
    def __repr__(self) -> str:
        """String representation."""
        parent_info = f", parent={self.parent[:7]}" if self.parent else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
