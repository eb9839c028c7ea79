"""File classification and per-file measurement."""

from .classify import classify
from .languages import COMMENT_MARKERS, COMMENT_RULES, CommentRule, comment_marker
from .models import FileRecord, StatsTable, TypeRecord
from .scanner import FileScanner

__all__ = [
    "classify",
    "CommentRule",
    "COMMENT_RULES",
    "COMMENT_MARKERS",
    "comment_marker",
    "FileRecord",
    "TypeRecord",
    "StatsTable",
    "FileScanner",
]
