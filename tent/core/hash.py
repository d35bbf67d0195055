"""Hash utilities for Tent."""

import hashlib
import re
from typing import Union

_DIGEST_RE = re.compile(r'[0-9a-f]{40}')


def hash_object(data: Union[bytes, str]) -> str:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash (strings are encoded as UTF-8)
        
    Returns:
        40-character hex string
    """
    if isinstance(data, str):
        data = data.encode('utf-8')
    return hashlib.sha1(data).hexdigest()


def hash_file(filepath: str) -> str:
    """
    Compute SHA-1 hash of file.
    
    Args:
        filepath: Path to file
        
    Returns:
        40-character hex string
    """
    with open(filepath, 'rb') as f:
        return hash_object(f.read())


def is_digest(value: str) -> bool:
    """Check whether value is a full lowercase hex digest."""
    return bool(_DIGEST_RE.fullmatch(value or ''))
