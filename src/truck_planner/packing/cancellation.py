"""Cooperative cancellation for long-running solves."""

from __future__ import annotations

import threading
import time


class OptimizationCancelled(RuntimeError):
    """Raised from inside the engine when a solve is cancelled or runs past its deadline."""


class Cancellation:
    """
    Cancellation flag with an optional deadline.

    The engine calls check() between units of work (one per box placement
    search and one per candidate truck), so cancel() may be called from any
    thread.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._event = threading.Event()
        self._deadline = None if timeout is None else time.monotonic() + float(timeout)

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def check(self) -> None:
        if self._event.is_set():
            raise OptimizationCancelled("optimization cancelled")
        if self._deadline is not None and time.monotonic() >= self._deadline:
            raise OptimizationCancelled("optimization timed out")


def check_cancelled(cancellation: Cancellation | None) -> None:
    if cancellation is not None:
        cancellation.check()
