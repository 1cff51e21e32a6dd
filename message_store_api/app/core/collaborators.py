"""
Identifier and time sources used by the message store.

Both are small protocols so that tests can swap in deterministic
fakes.  The production implementations generate UUID4 strings and
read the wall clock in nanoseconds since the Unix epoch.
"""

import threading
import time
import uuid
from typing import Protocol


class IdGenerator(Protocol):
    """Produces a globally unique identifier on every call."""

    def new_id(self) -> str:
        ...


class Clock(Protocol):
    """Produces the current time as an integer timestamp."""

    def now(self) -> int:
        ...


class UUIDGenerator:
    """Random UUID4 identifiers rendered as canonical strings."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SystemClock:
    """Wall clock in nanoseconds that never goes backwards.

    ``time.time_ns`` may step back when the system clock is adjusted;
    readings are clamped to the last value returned so a message's
    ``updatedAt`` can never precede its ``createdAt``.
    """

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            self._last = max(self._last, time.time_ns())
            return self._last
