"""Plain text formatter: one block per file type."""

from ..api import ScanResult
from .base import BaseFormatter

SEPARATOR = "-------------------------"


class PlainFormatter(BaseFormatter):
    """Render the human-readable per-extension report."""

    def format(self, result: ScanResult) -> str:
        out = ["Stats for each file type:"]
        for extension, record in result.records.items():
            out.append(SEPARATOR)
            out.append(f"File type: {extension}")
            out.append(f"Files count: {record.count}")
            out.append(f"Files total size: {record.size}")
            out.append(f"Files total lines count: {record.lines}")
            out.append(f"Files total count of non-empty lines: {record.non_empty_lines}")
            out.append(f"Files total count of lines with comments: {record.comment_lines}")
        return "\n".join(out) + "\n"
