"""Public API for filestats.

Example:
    >>> from filestats import collect_stats
    >>>
    >>> result = collect_stats("/path/to/code", recursive=True, workers=4)
    >>> for ext, record in result.records.items():
    ...     print(ext, record.count, record.lines)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import ScanConfig, load_config
from .core.scheduler import Scheduler
from .discovery import discover_files
from .logging_config import get_logger
from .scanning.models import StatsTable

logger = get_logger(__name__)


@dataclass
class ScanResult:
    """Outcome of one statistics run, ready for a formatter."""

    root: Path
    records: StatsTable
    files_discovered: int = 0
    files_failed: list[str] = field(default_factory=list)
    workers: int = 1

    @property
    def files_scanned(self) -> int:
        return sum(r.count for r in self.records.values())

    def to_dict(self) -> dict:
        return {"records": [r.to_dict() for r in self.records.values()]}


def run(path: Path, config: ScanConfig) -> ScanResult:
    """Discover files under ``path`` and aggregate them per ``config``."""
    paths = discover_files(
        path,
        recursive=config.recursive,
        max_depth=config.effective_max_depth,
        include=config.include_extensions,
        exclude=config.exclude_extensions,
        follow_symlinks=config.follow_symlinks,
    )
    scheduler = Scheduler(worker_count=config.workers)
    records = scheduler.run(paths)

    if scheduler.failed:
        logger.warning(f"{len(scheduler.failed)} file(s) could not be read and were skipped")

    return ScanResult(
        root=path,
        records=records,
        files_discovered=len(paths),
        files_failed=scheduler.failed,
        workers=config.workers,
    )


def collect_stats(
    path: str = ".",
    config_file: Optional[Path] = None,
    **overrides,
) -> ScanResult:
    """Collect per-extension statistics for a directory.

    Orchestrates the whole run:
    1. Load configuration (auto-discover TOML + apply overrides)
    2. Enumerate candidate files
    3. Scan them across the worker pool and merge the partial tables

    Args:
        path: Directory to scan (default: current directory)
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., workers=4, recursive=True)

    Returns:
        ScanResult with the per-extension table

    Raises:
        ConfigurationError: If configuration is invalid
        InvalidPathError: If path does not exist
    """
    config = load_config(config_file=config_file, **overrides)
    return run(Path(path), config)
