"""Crash-reporter bridge and breadcrumb models."""

from .models import Breadcrumb, BreadcrumbValue
from .reporter import CrashReporter, LoggingCrashReporter, DEFAULT_MAX_BREADCRUMBS

__all__ = [
    "Breadcrumb",
    "BreadcrumbValue",
    "CrashReporter",
    "LoggingCrashReporter",
    "DEFAULT_MAX_BREADCRUMBS",
]
