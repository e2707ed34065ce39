"""Caller-facing log collector.

Wraps a LogStore and the formatter behind level-tagged convenience calls.
Optionally mirrors entries to the stdlib logger and forwards them to a
crash reporter as breadcrumbs.
"""

import json
import logging
import threading
from datetime import timedelta
from typing import List, Optional

from .entry import LogEntry, LogLevel
from .formatter import format_entries
from .store import LogStore
from diagnostics_tool.crash.reporter import CrashReporter

logger = logging.getLogger(__name__)

MIRROR_LOGGER_NAME = "diagnostics_tool"


class LogCollector:
    """Records leveled log entries and exports them as text.

    Usage:
        collector = LogCollector()
        collector.info("Session started")
        collector.error("Upload failed")

        text = collector.get_logs_from_last_days(1)

    Blank messages raise InvalidInputError; nothing is recorded or
    forwarded for them.
    """

    def __init__(
        self,
        store: Optional[LogStore] = None,
        reporter: Optional[CrashReporter] = None,
        forward_breadcrumbs: bool = False,
        mirror_to_logging: bool = True,
    ):
        """Initialize collector.

        Args:
            store: Backing store (a new unbounded store if omitted)
            reporter: Crash reporter for breadcrumb forwarding
            forward_breadcrumbs: If True, forward each entry to reporter
            mirror_to_logging: If True, echo each entry to the stdlib logger
        """
        self._store = store if store is not None else LogStore()
        self.reporter = reporter
        self.forward_breadcrumbs = forward_breadcrumbs
        self.mirror_to_logging = mirror_to_logging
        self._python_logger = logging.getLogger(MIRROR_LOGGER_NAME)

    @property
    def store(self) -> LogStore:
        return self._store

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> LogEntry:
        """Record a message at the given level.

        Returns:
            The recorded LogEntry

        Raises:
            InvalidInputError: If message is blank
        """
        entry = self._store.append(level, message)

        if self.mirror_to_logging:
            self._python_logger.log(entry.level.python_level, entry.message)

        if self.forward_breadcrumbs and self.reporter is not None:
            self._forward(entry)

        return entry

    def _forward(self, entry: LogEntry) -> None:
        """Send an entry to the crash reporter as a breadcrumb."""
        try:
            self.reporter.add_breadcrumb(entry.message, {"level": entry.level.value})
        except Exception as e:
            # The entry is already recorded; a reporter failure must not undo it
            logger.warning(f"Failed to forward breadcrumb: {e}")

    def debug(self, message: str) -> LogEntry:
        """Log debug message."""
        return self.log(message, LogLevel.DEBUG)

    def info(self, message: str) -> LogEntry:
        """Log info message."""
        return self.log(message, LogLevel.INFO)

    def warning(self, message: str) -> LogEntry:
        """Log warning message."""
        return self.log(message, LogLevel.WARNING)

    def error(self, message: str) -> LogEntry:
        """Log error message."""
        return self.log(message, LogLevel.ERROR)

    def get_all_logs_formatted(self) -> str:
        """All collected logs, one formatted line per entry."""
        return format_entries(self._store.snapshot_all())

    def get_logs_from_last_days(self, days: int) -> str:
        """Logs recorded within the last `days` days.

        Non-positive days yields an empty string.
        """
        if days <= 0:
            return ""
        cutoff = self._store.now() - timedelta(days=days)
        return format_entries(self._store.snapshot_since(cutoff))

    def clear_logs(self) -> None:
        """Clear all stored entries."""
        self._store.clear()

    def get_entries(self) -> List[LogEntry]:
        """Get all log entries."""
        return self._store.snapshot_all()

    def get_entries_json(self) -> str:
        """Get all entries as JSON array."""
        return json.dumps([e.to_dict() for e in self._store.snapshot_all()], indent=2)


_shared: Optional[LogCollector] = None
_shared_lock = threading.Lock()


def shared() -> LogCollector:
    """Process-wide collector, created on first use."""
    global _shared
    if _shared is None:
        with _shared_lock:
            if _shared is None:
                _shared = LogCollector()
    return _shared


def install_shared(collector: LogCollector) -> LogCollector:
    """Make `collector` the instance returned by shared()."""
    global _shared
    with _shared_lock:
        _shared = collector
    return collector
