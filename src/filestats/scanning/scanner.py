"""Single-file scanner: streams one file and measures it.

Each worker owns its own FileScanner, so the scanner keeps no shared state.
"""

import os
from pathlib import Path
from typing import Union

from ..exceptions import ReadError
from ..logging_config import get_logger
from .classify import classify
from .languages import comment_marker
from .models import FileRecord

logger = get_logger(__name__)


class FileScanner:
    """Reads a file end-to-end and produces a FileRecord.

    Lines are split with universal newlines (``\\n``, ``\\r\\n`` and ``\\r``),
    and a trailing run without a terminator still counts as a line. A line
    is non-empty unless it is exactly ``""``, so whitespace-only lines count.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def scan(self, path: Union[str, Path]) -> FileRecord:
        """Scan one file.

        Raises:
            ReadError: If the file cannot be opened, read, decoded or stat'ed
        """
        filepath = Path(path)
        logger.info(f"Scanning {filepath}")

        extension = classify(filepath.name)
        marker = comment_marker(extension)

        lines = 0
        non_empty_lines = 0
        comment_lines = 0
        try:
            with open(filepath, encoding=self.encoding) as f:
                for line in f:
                    if line.endswith("\n"):
                        line = line[:-1]
                    lines += 1
                    if line != "":
                        non_empty_lines += 1
                    if marker is not None and marker in line:
                        comment_lines += 1
            size = os.stat(filepath).st_size
        except UnicodeDecodeError as e:
            raise ReadError(filepath, f"Encoding error: {e}")
        except OSError as e:
            raise ReadError(filepath, f"OS error: {e}")

        return FileRecord(
            path=str(filepath),
            extension=extension,
            size=size,
            lines=lines,
            non_empty_lines=non_empty_lines,
            comment_lines=comment_lines,
        )
