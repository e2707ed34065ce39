"""Tests for configuration and the composition root."""

import pytest
from pydantic import ValidationError
from diagnostics_tool.app import build_diagnostics
from diagnostics_tool.config import DiagnosticsConfig
from diagnostics_tool.logs import collector as collector_module
from diagnostics_tool.logs.collector import shared


class TestDiagnosticsConfig:
    """Tests for DiagnosticsConfig."""

    def test_defaults(self):
        """Should have sensible defaults."""
        config = DiagnosticsConfig()
        assert config.log_level == "INFO"
        assert config.max_entries is None
        assert config.mirror_to_logging is True
        assert config.forward_breadcrumbs is False
        assert config.max_breadcrumbs == 100
        assert config.user_id is None

    def test_log_level_normalized(self):
        """Log level should be upper-cased."""
        assert DiagnosticsConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Unknown log levels should be rejected."""
        with pytest.raises(ValidationError):
            DiagnosticsConfig(log_level="verbose")

    @pytest.mark.parametrize("field", ["max_entries", "max_breadcrumbs"])
    def test_bounds_must_be_positive(self, field):
        """Retention bounds must be at least 1."""
        with pytest.raises(ValidationError):
            DiagnosticsConfig(**{field: 0})

    def test_from_env(self):
        """Should read DIAGNOSTICS_* variables."""
        config = DiagnosticsConfig.from_env(
            {
                "DIAGNOSTICS_LOG_LEVEL": "warning",
                "DIAGNOSTICS_MAX_ENTRIES": "500",
                "DIAGNOSTICS_MIRROR_TO_LOGGING": "no",
                "DIAGNOSTICS_FORWARD_BREADCRUMBS": "true",
                "DIAGNOSTICS_MAX_BREADCRUMBS": "20",
                "DIAGNOSTICS_USER_ID": "user-7",
            }
        )
        assert config.log_level == "WARNING"
        assert config.max_entries == 500
        assert config.mirror_to_logging is False
        assert config.forward_breadcrumbs is True
        assert config.max_breadcrumbs == 20
        assert config.user_id == "user-7"

    @pytest.mark.parametrize(
        "raw,expected",
        [("1", True), ("YES", True), (" on ", True), ("0", False), ("Off", False), ("false", False)],
    )
    def test_from_env_bool_values(self, raw, expected):
        """Recognised boolean spellings should parse case-insensitively."""
        config = DiagnosticsConfig.from_env({"DIAGNOSTICS_FORWARD_BREADCRUMBS": raw})
        assert config.forward_breadcrumbs is expected

    @pytest.mark.parametrize("raw", ["ture", "", "2", "enabled"])
    def test_from_env_rejects_unknown_bool(self, raw):
        """Unrecognised boolean values should raise instead of becoming False."""
        with pytest.raises(ValueError):
            DiagnosticsConfig.from_env({"DIAGNOSTICS_MIRROR_TO_LOGGING": raw})

    def test_from_env_empty(self):
        """An empty environment should give defaults."""
        assert DiagnosticsConfig.from_env({}) == DiagnosticsConfig()


class TestBuildDiagnostics:
    """Tests for build_diagnostics."""

    def test_wires_reporter(self, clock):
        """The reporter should be started and receive forwarded entries."""
        diag = build_diagnostics(
            DiagnosticsConfig(forward_breadcrumbs=True, mirror_to_logging=False, user_id="u-1"),
            clock=clock,
        )
        diag.collector.info("hello")

        assert diag.reporter.is_started
        assert diag.reporter.user_id == "u-1"
        assert [c.message for c in diag.reporter.breadcrumbs()] == ["hello"]

    def test_applies_retention(self, clock):
        """max_entries should bound the collector's store."""
        diag = build_diagnostics(DiagnosticsConfig(max_entries=2, mirror_to_logging=False), clock=clock)
        for i in range(3):
            diag.collector.info(f"m{i}")

        assert [e.message for e in diag.collector.get_entries()] == ["m1", "m2"]

    def test_uses_injected_clock(self, clock):
        """Entries should be stamped by the injected clock."""
        diag = build_diagnostics(clock=clock)
        assert diag.collector.info("x").timestamp == clock()

    def test_install(self, monkeypatch):
        """install=True should make the collector process-wide."""
        monkeypatch.setattr(collector_module, "_shared", None)
        diag = build_diagnostics(install=True)
        assert shared() is diag.collector
