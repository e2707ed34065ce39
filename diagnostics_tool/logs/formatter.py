"""Plain-text rendering of log entries.

Line layout:
    [2026-10-19 14:03:07.512] WARNING: Disk almost full
"""

from datetime import timezone
from typing import Iterable

from .entry import LogEntry

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(entry: LogEntry) -> str:
    """UTC timestamp with millisecond precision."""
    ts = entry.timestamp.astimezone(timezone.utc)
    return f"{ts.strftime(TIMESTAMP_FORMAT)}.{ts.microsecond // 1000:03d}"


def format_entry(entry: LogEntry) -> str:
    """Render one entry as a newline-terminated line."""
    return f"[{format_timestamp(entry)}] {entry.level.label}: {entry.message}\n"


def format_entries(entries: Iterable[LogEntry]) -> str:
    """Render entries in order. Empty input gives an empty string."""
    return "".join(format_entry(e) for e in entries)
