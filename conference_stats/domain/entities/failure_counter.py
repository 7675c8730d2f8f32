"""Thread-safe monotonic failure counter.

One writer (event delivery) and many concurrent readers (snapshot and
accessor queries). Both paths go through the lock, so a reader sees either
the pre- or post-increment value and concurrent increments are never lost.
"""

import threading


class FailureCounter:
    """Monotonically increasing counter of failed session starts.

    No reset or decrement: totals live exactly as long as the owning
    aggregator.

    Args:
        name: Counter name, used in logs.

    Example:
        >>> counter = FailureCounter("total_recording_failures")
        >>> counter.increment()
        1
        >>> counter.value
        1
    """

    __slots__ = ("_lock", "_name", "_value")

    def __init__(self, name: str) -> None:
        self._name = name
        self._value = 0
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Counter name."""
        return self._name

    @property
    def value(self) -> int:
        """Current count."""
        with self._lock:
            return self._value

    def increment(self) -> int:
        """Add exactly one to the counter.

        Returns:
            int: The value after the increment.
        """
        with self._lock:
            self._value += 1
            return self._value

    def __repr__(self) -> str:
        return f"FailureCounter(name={self._name!r}, value={self.value})"
