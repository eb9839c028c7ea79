"""Aggregator: the single shared extension -> TypeRecord table."""

import threading
from typing import Mapping

from ..logging_config import get_logger
from ..scanning.models import StatsTable, TypeRecord

logger = get_logger(__name__)


class Aggregator:
    """Merges worker tables into one global table under a lock.

    Workers hand over their whole partial table in one ``submit`` call. The
    merge is field-wise addition, so the final table does not depend on the
    order in which workers submit.
    """

    def __init__(self) -> None:
        self._records: StatsTable = {}
        self._lock = threading.Lock()

    def submit(self, table: Mapping[str, TypeRecord]) -> None:
        """Merge a worker's partial table into the global table.

        A record for a new extension is adopted as-is; its submitting worker
        must not touch it afterwards.
        """
        with self._lock:
            for extension, record in table.items():
                existing = self._records.get(extension)
                if existing is None:
                    self._records[extension] = record
                else:
                    existing.merge(record)
        logger.debug(f"Merged partial table with {len(table)} extension(s)")

    def snapshot(self) -> StatsTable:
        """Return the global table ordered by extension tag.

        Only meaningful once every worker has passed the completion barrier.
        """
        with self._lock:
            return {ext: self._records[ext] for ext in sorted(self._records)}

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
