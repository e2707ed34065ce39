"""Utility modules for Diagnostics Tool."""

from .errors import (
    DiagnosticsError,
    InvalidInputError,
    ReporterNotStartedError,
)

__all__ = [
    "DiagnosticsError",
    "InvalidInputError",
    "ReporterNotStartedError",
]
