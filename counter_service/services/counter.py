"""Lock-guarded counter shared by every request handler."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from counter_service.core.errors import CounterPoisonedError

logger = logging.getLogger(__name__)

# Unsigned 32-bit range accepted on the wire
COUNTER_MAX = 2**32 - 1


class CounterStore:
    """Single non-negative integer that only ever grows.

    Increments saturate at `maximum`. If an exception escapes a critical
    section the store is poisoned and refuses further reads and writes.
    """

    def __init__(self, initial: int = 0, maximum: int = COUNTER_MAX):
        if not 0 <= initial <= maximum:
            raise ValueError(f"initial value must be between 0 and {maximum}, got {initial}")
        self._value = initial
        self._maximum = maximum
        self._lock = threading.Lock()
        self._poisoned = False

    @property
    def maximum(self) -> int:
        return self._maximum

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def _guard(self) -> Iterator[None]:
        """Hold the lock for one critical section, poisoning the store on failure.

        The sections in `read` and `increment` are plain integer arithmetic,
        so in practice the failures caught here are asynchronous ones raised
        mid-update: KeyboardInterrupt, MemoryError, or an exception injected
        into the worker thread. After one of those the stored value can no
        longer be trusted.
        """
        with self._lock:
            if self._poisoned:
                raise CounterPoisonedError("Counter lock was poisoned by an earlier failure.")
            try:
                yield
            except BaseException:
                self._poisoned = True
                logger.error("Critical section failed; counter is now poisoned", exc_info=True)
                raise

    def read(self) -> int:
        """Return the current value."""
        with self._guard():
            return self._value

    def increment(self, by: int) -> int:
        """Add `by` to the counter and return the new value."""
        if by < 0:
            raise ValueError(f"increment must be non-negative, got {by}")
        with self._guard():
            self._value = min(self._value + by, self._maximum)
            value = self._value
        logger.debug("Counter incremented by %d to %d", by, value)
        return value
