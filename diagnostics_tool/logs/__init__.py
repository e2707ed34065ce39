"""Log collection, storage and formatting."""

from .entry import LogEntry, LogLevel
from .store import LogStore
from .formatter import format_entries, format_entry
from .collector import LogCollector, shared, install_shared
from .logger import setup_logging

__all__ = [
    "LogEntry",
    "LogLevel",
    "LogStore",
    "format_entries",
    "format_entry",
    "LogCollector",
    "shared",
    "install_shared",
    "setup_logging",
]
