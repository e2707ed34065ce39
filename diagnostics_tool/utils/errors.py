"""Error hierarchy for Diagnostics Tool."""

from typing import Optional


class DiagnosticsError(Exception):
    """Base exception for all Diagnostics Tool errors."""

    pass


class InvalidInputError(DiagnosticsError, ValueError):
    """Raised when caller-supplied input is rejected.

    Covers blank log messages, unknown level names and blank user ids.
    Subclasses ValueError so generic validation handlers still catch it.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ReporterNotStartedError(DiagnosticsError):
    """Raised when a breadcrumb is sent before the crash reporter is started."""

    def __init__(self, message: str = "Crash reporter has not been started"):
        super().__init__(message)
