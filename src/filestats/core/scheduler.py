"""Scheduler: partitions files across workers and gathers the result.

Usage:
    scheduler = Scheduler(worker_count=4)
    table = scheduler.run(paths)
    # table is dict[extension, TypeRecord], ordered by extension

Files are dealt round-robin: ``paths[i]`` goes to worker ``i % worker_count``.
Each worker runs on its own thread of a pool sized to the worker count.
The scheduler blocks on a CompletionBarrier rather than polling, and only
reads the aggregated table once every worker has arrived.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Sequence, TypeVar, Union

from ..exceptions import InvalidConfigError
from ..logging_config import get_logger
from ..scanning.models import StatsTable
from ..scanning.scanner import FileScanner
from .aggregator import Aggregator
from .barrier import CompletionBarrier
from .worker import Worker

logger = get_logger(__name__)

T = TypeVar("T")


def partition(items: Sequence[T], buckets: int) -> list[list[T]]:
    """Deal items round-robin into ``buckets`` lists, keeping relative order."""
    if buckets < 1:
        raise InvalidConfigError("workers", buckets, "must be at least 1")
    result: list[list[T]] = [[] for _ in range(buckets)]
    for index, item in enumerate(items):
        result[index % buckets].append(item)
    return result


class Scheduler:
    """Runs one scan over a fixed pool of workers.

    Attributes:
        workers: Workers of the last run (one per bucket)
        scanned: Number of files measured in the last run
        failed: Paths skipped with a ReadError in the last run
    """

    def __init__(
        self,
        worker_count: int = 1,
        scanner_factory: Callable[[], FileScanner] = FileScanner,
    ) -> None:
        if worker_count < 1:
            raise InvalidConfigError("workers", worker_count, "must be at least 1")
        self.worker_count = worker_count
        self.scanner_factory = scanner_factory
        self.workers: list[Worker] = []

    def run(self, paths: Sequence[Union[str, Path]]) -> StatsTable:
        """Scan ``paths`` and return the merged per-extension table."""
        aggregator = Aggregator()
        barrier = CompletionBarrier(self.worker_count)
        self.workers = [
            Worker(
                bucket,
                aggregator,
                barrier,
                scanner=self.scanner_factory(),
                name=f"worker-{i}",
            )
            for i, bucket in enumerate(partition(paths, self.worker_count))
        ]

        logger.debug(f"Scanning {len(paths)} file(s) with {self.worker_count} worker(s)")

        with ThreadPoolExecutor(
            max_workers=self.worker_count, thread_name_prefix="filestats"
        ) as executor:
            futures = [executor.submit(worker.run) for worker in self.workers]
            barrier.wait()
            for future, worker in zip(futures, self.workers):
                exc = future.exception()
                if exc is not None:
                    # Worker.run still arrived at the barrier; its table is lost
                    logger.error(f"{worker.name} crashed: {exc}")

        table = aggregator.snapshot()
        logger.debug(
            f"Scan complete: {self.scanned} file(s) in {len(table)} extension(s), "
            f"{len(self.failed)} skipped"
        )
        return table

    @property
    def scanned(self) -> int:
        return sum(len(w.scanned) for w in self.workers)

    @property
    def failed(self) -> list[str]:
        return [path for w in self.workers for path in w.failed]


def run_scan(paths: Sequence[Union[str, Path]], worker_count: int = 1) -> StatsTable:
    """Scan ``paths`` with ``worker_count`` workers and return the global table."""
    return Scheduler(worker_count).run(paths)
