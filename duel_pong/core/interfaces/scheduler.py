"""
Scheduler protocol - defines the per-refresh callback registration point
"""

from collections.abc import Callable
from typing import Protocol

FrameCallback = Callable[[float], None]


class SchedulerProtocol(Protocol):
    """
    Protocol for frame schedulers.

    Each ``request_frame`` registration runs exactly once, on the next
    display refresh. There is no repeating timer: a loop that wants to keep
    running re-registers itself from its callback. Registering a callback
    that is already waiting for the next refresh does nothing, so a callback
    runs at most once per refresh.
    """

    def now(self) -> float:
        """Current timestamp in milliseconds"""
        ...

    def request_frame(self, callback: FrameCallback) -> None:
        """
        Run ``callback`` on the next display refresh.

        Args:
            callback: Called with the refresh timestamp in milliseconds
        """
        ...
