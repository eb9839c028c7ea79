"""Concurrent scan-and-aggregate engine."""

from .aggregator import Aggregator
from .barrier import CompletionBarrier
from .scheduler import Scheduler, partition, run_scan
from .worker import Worker

__all__ = [
    "Aggregator",
    "CompletionBarrier",
    "Scheduler",
    "Worker",
    "partition",
    "run_scan",
]
