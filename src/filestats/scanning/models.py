"""Data models for per-file and per-extension statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileRecord:
    """Statistics for a single scanned file.

    Produced once by FileScanner and folded straight into the owning
    worker's partial table.
    """

    path: str
    extension: str
    size: int
    lines: int
    non_empty_lines: int
    comment_lines: int


@dataclass
class TypeRecord:
    """Cumulative statistics for one extension tag.

    A record is either partial (owned by a single worker) or global (owned
    by the Aggregator); only its owner mutates it.
    """

    extension: str
    count: int = 0
    size: int = 0
    lines: int = 0
    non_empty_lines: int = 0
    comment_lines: int = 0

    def add_file(self, record: FileRecord) -> None:
        """Fold one file's statistics into this record."""
        self.count += 1
        self.size += record.size
        self.lines += record.lines
        self.non_empty_lines += record.non_empty_lines
        self.comment_lines += record.comment_lines

    def merge(self, other: "TypeRecord") -> None:
        """Add another record for the same extension, field by field."""
        if other.extension != self.extension:
            raise ValueError(
                f"Cannot merge {other.extension!r} record into {self.extension!r} record"
            )
        self.count += other.count
        self.size += other.size
        self.lines += other.lines
        self.non_empty_lines += other.non_empty_lines
        self.comment_lines += other.comment_lines

    def to_dict(self) -> dict:
        """Serializable projection, keyed like the report formats."""
        return {
            "type": self.extension,
            "count": self.count,
            "size": self.size,
            "lines": self.lines,
            "nonEmptyLines": self.non_empty_lines,
            "linesWithComments": self.comment_lines,
        }


# extension tag -> record
StatsTable = dict[str, TypeRecord]
