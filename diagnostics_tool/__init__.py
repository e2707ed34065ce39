"""Diagnostics Tool - leveled log collection and crash-reporter breadcrumbs."""

__version__ = "0.1.0"
