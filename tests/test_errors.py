"""Tests for error hierarchy."""

import pytest
from diagnostics_tool.logs.entry import LogLevel
from diagnostics_tool.utils.errors import (
    DiagnosticsError,
    InvalidInputError,
    ReporterNotStartedError,
)


class TestErrorHierarchy:
    """Tests for error class hierarchy."""

    def test_all_errors_inherit_from_base(self):
        """All errors should inherit from DiagnosticsError."""
        errors = [
            InvalidInputError("test"),
            ReporterNotStartedError(),
        ]
        for error in errors:
            assert isinstance(error, DiagnosticsError)

    def test_invalid_input_is_value_error(self):
        """InvalidInputError should be catchable as ValueError."""
        with pytest.raises(ValueError):
            raise InvalidInputError("bad")


class TestInvalidInputError:
    """Tests for InvalidInputError."""

    def test_captures_field(self):
        """Should capture the offending field."""
        error = InvalidInputError("Blank message", field="message")
        assert error.field == "message"
        assert "Blank message" in str(error)

    def test_field_defaults_to_none(self):
        """Field should be optional."""
        assert InvalidInputError("x").field is None


class TestReporterNotStartedError:
    """Tests for ReporterNotStartedError."""

    def test_default_message(self):
        """Should have a default message."""
        assert "not been started" in str(ReporterNotStartedError())


class TestLogLevelParse:
    """Tests for LogLevel.parse error reporting."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("DEBUG", LogLevel.DEBUG),
            ("info", LogLevel.INFO),
            ("Warn", LogLevel.WARNING),
            (" error ", LogLevel.ERROR),
        ],
    )
    def test_known_levels(self, text, expected):
        """Names and values should parse case-insensitively."""
        assert LogLevel.parse(text) is expected

    def test_unknown_level(self):
        """Unknown names should raise InvalidInputError on the level field."""
        with pytest.raises(InvalidInputError) as exc_info:
            LogLevel.parse("critical")
        assert exc_info.value.field == "level"
