"""Composition root: wires store, crash reporter and collector together."""

import logging
from dataclasses import dataclass
from typing import Optional

from diagnostics_tool.config import DiagnosticsConfig
from diagnostics_tool.crash.reporter import LoggingCrashReporter
from diagnostics_tool.logs.collector import LogCollector, install_shared
from diagnostics_tool.logs.store import Clock, LogStore

logger = logging.getLogger(__name__)


@dataclass
class Diagnostics:
    """The application's diagnostics objects."""

    config: DiagnosticsConfig
    collector: LogCollector
    reporter: LoggingCrashReporter


def build_diagnostics(
    config: Optional[DiagnosticsConfig] = None,
    clock: Optional[Clock] = None,
    install: bool = False,
) -> Diagnostics:
    """Build and start the diagnostics stack.

    Args:
        config: Settings (defaults if omitted)
        clock: Clock for the log store, mainly for tests
        install: If True, make the collector the one returned by shared()

    Returns:
        Diagnostics
    """
    config = config or DiagnosticsConfig()

    reporter = LoggingCrashReporter(max_breadcrumbs=config.max_breadcrumbs)
    reporter.start()
    if config.user_id:
        reporter.set_user_id(config.user_id)

    collector = LogCollector(
        store=LogStore(clock=clock, max_entries=config.max_entries),
        reporter=reporter,
        forward_breadcrumbs=config.forward_breadcrumbs,
        mirror_to_logging=config.mirror_to_logging,
    )

    if install:
        install_shared(collector)

    logger.debug(
        f"Diagnostics ready (max_entries={config.max_entries}, "
        f"forward_breadcrumbs={config.forward_breadcrumbs})"
    )
    return Diagnostics(config=config, collector=collector, reporter=reporter)
