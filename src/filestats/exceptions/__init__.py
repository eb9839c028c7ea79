"""Exception hierarchy for filestats."""

from .base import FileStatsError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)
from .scanning import (
    FileAccessError,
    ReadError,
    ScanError,
)

__all__ = [
    "FileStatsError",
    "ScanError",
    "FileAccessError",
    "ReadError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
