"""Filesystem helpers."""

import os
import tempfile
from pathlib import Path
from typing import Union

from tent.core.errors import TentIOError


def atomic_write(path: Path, data: Union[bytes, str]) -> None:
    """
    Replace path with data in one step.
    
    The data is written to a temporary file in the same directory, flushed
    to disk, and renamed over the target, so readers see either the old
    content or the new content, never a partial write.
    
    Raises:
        TentIOError: If the write or rename fails
    """
    if isinstance(data, str):
        data = data.encode('utf-8')
    
    path = Path(path)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix=f'.{path.name}.', suffix='.tmp')
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise TentIOError(str(path), e.strerror or str(e)) from e


def read_bytes(path: Path) -> bytes:
    """Read a file, turning OS errors into TentIOError."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise TentIOError(str(path), e.strerror or str(e)) from e
