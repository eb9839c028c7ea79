"""Completion barrier: counts finished workers without busy-waiting."""

import threading
from typing import Optional


class CompletionBarrier:
    """Monotonic counter the scheduler can block on.

    Each worker calls ``arrive()`` exactly once when it is done; the
    scheduler calls ``wait()`` and wakes up once ``parties`` workers have
    arrived.
    """

    def __init__(self, parties: int):
        if parties < 0:
            raise ValueError("parties must be non-negative")
        self.parties = parties
        self._completed = 0
        self._cond = threading.Condition()

    @property
    def completed(self) -> int:
        with self._cond:
            return self._completed

    def arrive(self) -> None:
        """Record one finished worker and wake waiters."""
        with self._cond:
            if self._completed >= self.parties:
                raise RuntimeError(
                    f"More arrivals than parties ({self.parties}) at completion barrier"
                )
            self._completed += 1
            self._cond.notify_all()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until every party has arrived.

        Returns:
            True if all parties arrived, False if ``timeout`` expired first
        """
        with self._cond:
            return self._cond.wait_for(lambda: self._completed >= self.parties, timeout=timeout)
