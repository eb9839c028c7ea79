"""
filestats - per-extension file statistics

Scans a directory tree with a pool of worker threads and reports, for each
file extension, how many files there are, their total size, and their
total, non-empty and comment line counts.
"""

__version__ = "0.1.0"

from .api import ScanResult, collect_stats
from .core import Aggregator, Scheduler, run_scan
from .scanning import FileRecord, FileScanner, TypeRecord, classify

__all__ = [
    "collect_stats",  # Main entry point
    "run_scan",  # Core engine over an explicit file list
    "ScanResult",
    "Scheduler",
    "Aggregator",
    "FileScanner",
    "FileRecord",
    "TypeRecord",
    "classify",
]
