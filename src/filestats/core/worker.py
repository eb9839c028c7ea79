"""Worker: scans an assigned batch of files into a private table."""

from pathlib import Path
from typing import Optional, Sequence, Union

from ..exceptions import ReadError
from ..logging_config import get_logger
from ..scanning.models import StatsTable, TypeRecord
from ..scanning.scanner import FileScanner
from .aggregator import Aggregator
from .barrier import CompletionBarrier

logger = get_logger(__name__)


class Worker:
    """Owns a disjoint slice of the file list.

    Attributes:
        scanned: Paths that were measured successfully
        failed: Paths skipped because of a ReadError

    The partial table is private and is handed to the aggregator in a single
    submit; the worker keeps no reference to it afterwards.
    """

    def __init__(
        self,
        paths: Sequence[Union[str, Path]],
        aggregator: Aggregator,
        barrier: CompletionBarrier,
        scanner: Optional[FileScanner] = None,
        name: str = "worker",
    ):
        self.paths = list(paths)
        self.aggregator = aggregator
        self.barrier = barrier
        self.scanner = scanner or FileScanner()
        self.name = name
        self._records: StatsTable = {}
        self.scanned: list[str] = []
        self.failed: list[str] = []

    def run(self) -> None:
        """Scan every assigned file, submit once, then arrive at the barrier."""
        try:
            for path in self.paths:
                try:
                    file_record = self.scanner.scan(path)
                except ReadError as e:
                    logger.warning(f"Skipping {path}: {e.reason}")
                    self.failed.append(str(path))
                    continue

                record = self._records.get(file_record.extension)
                if record is None:
                    record = TypeRecord(extension=file_record.extension)
                    self._records[file_record.extension] = record
                record.add_file(file_record)
                self.scanned.append(str(path))

            # Records now belong to the aggregator
            submitted, self._records = self._records, {}
            self.aggregator.submit(submitted)
            logger.debug(
                f"{self.name}: submitted {len(submitted)} extension(s) "
                f"from {len(self.scanned)} file(s), {len(self.failed)} skipped"
            )
        finally:
            self.barrier.arrive()
