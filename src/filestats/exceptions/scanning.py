"""Scanning-related exceptions: unreadable or undecodable files."""

from pathlib import Path

from .base import FileStatsError


class ScanError(FileStatsError):
    """Base class for errors raised while scanning files."""
    pass


class FileAccessError(ScanError):
    """Raised when a file cannot be accessed."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            filepath=filepath,
            reason=reason,
        )
        self.filepath = filepath
        self.reason = reason


class ReadError(FileAccessError):
    """Raised when a file cannot be opened, read or decoded.

    Workers catch this per file; the file then contributes nothing to the
    statistics and the scan moves on.
    """
    pass
