"""Clocks used to age cached dictionary indexes."""
from abc import ABC, abstractmethod
import time


class TimeProvider(ABC):

    @abstractmethod
    def get_ticks(self) -> int:
        """Milliseconds since an arbitrary, fixed starting point."""
        pass


class SystemTimeProvider(TimeProvider):
    """Monotonic wall clock, unaffected by system time changes."""

    def get_ticks(self) -> int:
        return int(time.monotonic() * 1000)


class MockTimeProvider(TimeProvider):
    """Clock that only moves when a test calls advance()."""

    def __init__(self, initial_ms: int = 0):
        self._current_ms = initial_ms

    def get_ticks(self) -> int:
        return self._current_ms

    def advance(self, ms: int) -> None:
        self._current_ms += ms
