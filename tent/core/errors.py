"""Error definitions for Tent.

Core layers raise these; only the CLI reports them and picks the exit code.
"""

from typing import Any, Dict, Optional


class TentError(Exception):
    """Base exception for Tent errors."""

    exit_code = 1

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with code, message, and optional details."""
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}


class ObjectNotFoundError(TentError):
    """A digest, commit, or reference does not exist in the store."""

    exit_code = 3

    def __init__(self, identifier: str, kind: str = "object", reason: Optional[str] = None):
        message = reason or f"{kind.capitalize()} {identifier} not found"
        super().__init__(
            code="NOT_FOUND",
            message=message,
            details={"identifier": identifier, "kind": kind},
        )
        self.identifier = identifier
        self.kind = kind


class TentIOError(TentError):
    """Underlying filesystem read or write failed."""

    exit_code = 4

    def __init__(self, path: str, reason: str):
        super().__init__(
            code="IO_FAILURE",
            message=f"Cannot access {path}: {reason}",
            details={"path": path, "reason": reason},
        )
        self.path = path


class MalformedStateError(TentError):
    """Index or commit content is not well-formed (corrupted repository)."""

    exit_code = 5

    def __init__(self, source: str, reason: str):
        super().__init__(
            code="MALFORMED_STATE",
            message=f"Malformed {source}: {reason}",
            details={"source": source, "reason": reason},
        )
        self.source = source
