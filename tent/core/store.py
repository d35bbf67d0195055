"""Content-addressable object storage for Tent."""

import logging
from pathlib import Path
from typing import List, Union

from tent.core.errors import ObjectNotFoundError, TentIOError
from tent.core.hash import hash_object, is_digest
from tent.utils.fs import atomic_write

logger = logging.getLogger(__name__)


class ObjectStore:
    """
    Append-only object database.
    
    Every object is stored uncompressed under its digest in a single flat
    directory. The store does not know or care what the bytes mean; commit
    records and file blobs are both opaque content here.
    """
    
    def __init__(self, objects_dir: Path):
        """
        Initialize object store.
        
        Args:
            objects_dir: Directory holding the objects
        """
        self.objects_dir = Path(objects_dir)
    
    def object_path(self, digest: str) -> Path:
        """Get filesystem path for an object."""
        return self.objects_dir / digest
    
    def put(self, content: Union[bytes, str]) -> str:
        """
        Write content to the store.
        
        Writing content that is already stored is a no-op, so this is safe
        to call repeatedly with the same data.
        
        Args:
            content: Raw bytes (strings are encoded as UTF-8)
            
        Returns:
            str: Digest naming the content
        """
        if isinstance(content, str):
            content = content.encode('utf-8')
        
        digest = hash_object(content)
        path = self.object_path(digest)
        
        # Object already exists
        if path.exists():
            logger.debug("object %s already stored", digest)
            return digest
        
        atomic_write(path, content)
        logger.debug("stored object %s (%d bytes)", digest, len(content))
        return digest
    
    def get(self, digest: str) -> bytes:
        """
        Read raw content from the store.
        
        Raises:
            ObjectNotFoundError: If no object is stored under digest
            TentIOError: If the object exists but cannot be read
        """
        if not is_digest(digest):
            raise ObjectNotFoundError(digest)
        
        path = self.object_path(digest)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise ObjectNotFoundError(digest) from None
        except OSError as e:
            raise TentIOError(str(path), e.strerror or str(e)) from e
    
    def exists(self, digest: str) -> bool:
        """Check if object exists in the store."""
        return is_digest(digest) and self.object_path(digest).is_file()
    
    def find_by_prefix(self, prefix: str) -> List[str]:
        """Return every stored digest that starts with prefix."""
        if not self.objects_dir.is_dir():
            return []
        return sorted(
            item.name for item in self.objects_dir.iterdir()
            if item.name.startswith(prefix) and is_digest(item.name)
        )
    
    def __repr__(self) -> str:
        return f"ObjectStore(path={self.objects_dir})"
