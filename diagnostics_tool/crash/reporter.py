"""Crash-reporter bridge.

The log collector talks to a crash-reporting backend only through the
CrashReporter interface: start(), add_breadcrumb() and set_user_id().
LoggingCrashReporter is the local implementation; it keeps the most recent
breadcrumbs in memory and echoes them to the stdlib logger.
"""

import logging
import threading
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, List, Mapping, Optional

from .models import Breadcrumb, BreadcrumbValue
from diagnostics_tool.utils.errors import InvalidInputError, ReporterNotStartedError

logger = logging.getLogger(__name__)

DEFAULT_MAX_BREADCRUMBS = 100


class CrashReporter(ABC):
    """Interface to a crash-reporting backend."""

    @property
    @abstractmethod
    def is_started(self) -> bool:
        """Whether start() has been called."""

    @abstractmethod
    def start(self) -> None:
        """Initialize the backend. Safe to call more than once."""

    @abstractmethod
    def add_breadcrumb(
        self,
        message: str,
        data: Optional[Mapping[str, BreadcrumbValue]] = None,
    ) -> Breadcrumb:
        """Record a breadcrumb."""

    @abstractmethod
    def set_user_id(self, user_id: str) -> None:
        """Attach a user id to subsequent reports."""


class LoggingCrashReporter(CrashReporter):
    """Crash reporter that keeps breadcrumbs locally.

    Usage:
        reporter = LoggingCrashReporter(max_breadcrumbs=50)
        reporter.start()
        reporter.set_user_id("user-42")
        reporter.add_breadcrumb("Opened settings", {"screen": "settings"})
    """

    def __init__(self, max_breadcrumbs: int = DEFAULT_MAX_BREADCRUMBS):
        if max_breadcrumbs < 1:
            raise InvalidInputError(
                "max_breadcrumbs must be at least 1", field="max_breadcrumbs"
            )
        self.max_breadcrumbs = max_breadcrumbs
        self._breadcrumbs: Deque[Breadcrumb] = deque(maxlen=max_breadcrumbs)
        self._user_id: Optional[str] = None
        self._started = False
        self._lock = threading.Lock()

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def user_id(self) -> Optional[str]:
        return self._user_id

    def start(self) -> None:
        with self._lock:
            if self._started:
                return
            self._started = True
        logger.debug("Crash reporter started")

    def add_breadcrumb(
        self,
        message: str,
        data: Optional[Mapping[str, BreadcrumbValue]] = None,
    ) -> Breadcrumb:
        """Record a breadcrumb.

        Raises:
            ReporterNotStartedError: If start() has not been called
            pydantic.ValidationError: If message is blank or data holds
                non-scalar values
        """
        if not self._started:
            raise ReporterNotStartedError()

        crumb = Breadcrumb(message=message, data=dict(data or {}))
        with self._lock:
            self._breadcrumbs.append(crumb)

        logger.debug(f"Breadcrumb: {crumb.message} | {crumb.data}")
        return crumb

    def set_user_id(self, user_id: str) -> None:
        if not isinstance(user_id, str) or not user_id.strip():
            raise InvalidInputError("user_id must be a non-blank string", field="user_id")
        with self._lock:
            self._user_id = user_id
        logger.debug(f"Crash reporter user id set: {user_id}")

    def breadcrumbs(self) -> List[Breadcrumb]:
        """Get recorded breadcrumbs, oldest first."""
        with self._lock:
            return list(self._breadcrumbs)
