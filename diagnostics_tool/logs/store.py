"""Thread-safe, append-ordered storage for log entries.

All reads return copies taken under the lock, so a snapshot is never
affected by appends or clears that happen after it was taken.
"""

import bisect
import logging
import threading
from collections import deque
from datetime import datetime, timezone
from typing import Callable, Deque, List, Optional

from .entry import LogEntry, LogLevel
from diagnostics_tool.utils.errors import InvalidInputError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class LogStore:
    """Ordered, concurrency-safe collection of LogEntry records.

    Usage:
        store = LogStore()
        store.append(LogLevel.INFO, "Started")
        entries = store.snapshot_all()
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        max_entries: Optional[int] = None,
    ):
        """Initialize store.

        Args:
            clock: Zero-argument callable returning an aware datetime
            max_entries: Retention bound; oldest entries are evicted first.
                None keeps everything.
        """
        if max_entries is not None and max_entries < 1:
            raise InvalidInputError(
                "max_entries must be at least 1", field="max_entries"
            )

        self._clock = clock if clock is not None else utc_now
        self.max_entries = max_entries
        self._entries: Deque[LogEntry] = deque(maxlen=max_entries)
        self._lock = threading.Lock()
        # Survives clear() so timestamps never go backwards
        self._last_timestamp: Optional[datetime] = None

    def now(self) -> datetime:
        """Current time according to the store's clock."""
        return self._clock()

    def append(self, level: LogLevel, message: str) -> LogEntry:
        """Append a new entry stamped with the current time.

        Args:
            level: Entry level
            message: Entry text, stored as given

        Returns:
            The appended LogEntry

        Raises:
            InvalidInputError: If message is not a string or is blank
        """
        if not isinstance(message, str) or not message.strip():
            raise InvalidInputError(
                "Log message must be a non-blank string", field="message"
            )
        if not isinstance(level, LogLevel):
            level = LogLevel.parse(level)

        with self._lock:
            timestamp = self._clock()
            if self._last_timestamp is not None and timestamp < self._last_timestamp:
                timestamp = self._last_timestamp
            self._last_timestamp = timestamp

            entry = LogEntry(timestamp=timestamp, level=level, message=message)
            self._entries.append(entry)

        return entry

    def snapshot_all(self) -> List[LogEntry]:
        """Copy of every stored entry, in append order."""
        with self._lock:
            return list(self._entries)

    def snapshot_since(self, cutoff: datetime) -> List[LogEntry]:
        """Copy of entries with timestamp >= cutoff, in append order.

        Timestamps are non-decreasing in append order, so the result is a
        suffix of snapshot_all().
        """
        with self._lock:
            entries = list(self._entries)

        timestamps = [e.timestamp for e in entries]
        start = bisect.bisect_left(timestamps, cutoff)
        return entries[start:]

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()

        if removed:
            logger.debug(f"Cleared {removed} log entries")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
