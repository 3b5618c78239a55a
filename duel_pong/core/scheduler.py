"""
One-shot frame scheduler driven by the host loop
"""

import time
from collections.abc import Callable

from duel_pong.core.interfaces.scheduler import FrameCallback


def _perf_counter_ms() -> float:
    return time.perf_counter() * 1000.0


class FrameScheduler:
    """Collects "next refresh" callbacks and runs them when the host refreshes

    The host calls :meth:`run_frame` once per display refresh. Callbacks
    registered while a frame is running wait for the following refresh.
    """

    def __init__(self, clock: Callable[[], float] | None = None):
        self._clock = clock or _perf_counter_ms
        self._pending: list[FrameCallback] = []
        self.frame_count = 0

    def now(self) -> float:
        return float(self._clock())

    def request_frame(self, callback: FrameCallback) -> None:
        # A callback already waiting for this refresh is not queued twice
        if callback not in self._pending:
            self._pending.append(callback)

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for the next refresh"""
        return len(self._pending)

    def run_frame(self, timestamp: float | None = None) -> int:
        """Runs the callbacks registered before this refresh

        Returns:
            The number of callbacks run
        """
        if timestamp is None:
            timestamp = self.now()
        callbacks, self._pending = self._pending, []
        for callback in callbacks:
            callback(timestamp)
        self.frame_count += 1
        return len(callbacks)

    def cancel_all(self) -> None:
        """Drops every pending callback (host shutdown)"""
        self._pending.clear()
