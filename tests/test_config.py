"""Tests for the config module."""

import os

import pytest
from pydantic import ValidationError

from postfixsheet.config import Settings, _parse_line_separator


class TestParseLineSeparator:
    """Test line separator parsing."""

    def test_parse_line_separator_without_value(self, monkeypatch):
        """Test the platform separator is used when not set."""
        monkeypatch.delenv("LINE_SEPARATOR", raising=False)

        assert _parse_line_separator() == os.linesep

    def test_parse_line_separator_escape_sequences(self, monkeypatch):
        """Test escaped separators from .env files are decoded."""
        monkeypatch.setenv("LINE_SEPARATOR", "\\r\\n")

        assert _parse_line_separator() == "\r\n"

    def test_parse_line_separator_literal_value(self, monkeypatch):
        """Test a literal separator is used as given."""
        monkeypatch.setenv("LINE_SEPARATOR", ";")

        assert _parse_line_separator() == ";"

    def test_parse_line_separator_empty_string(self, monkeypatch):
        """Test an empty value falls back to the platform separator."""
        monkeypatch.setenv("LINE_SEPARATOR", "")

        assert _parse_line_separator() == os.linesep


class TestSettings:
    """Test Settings configuration."""

    def test_settings_explicit_values(self):
        """Test Settings initialization with explicit parameters."""
        settings = Settings(
            decimal_places=5,
            error_marker="ERR",
            line_separator="\r\n",
            cycle_detection="harden",
            max_reference_depth=20,
            memoize_references=True,
            log_level="DEBUG",
            host="0.0.0.0",
            port=9000,
        )

        assert settings.decimal_places == 5
        assert settings.error_marker == "ERR"
        assert settings.line_separator == "\r\n"
        assert settings.cycle_detection == "harden"
        assert settings.max_reference_depth == 20
        assert settings.memoize_references is True
        assert settings.log_level == "DEBUG"
        assert settings.host == "0.0.0.0"
        assert settings.port == 9000

    def test_settings_rejects_unknown_cycle_detection(self):
        """Test only the legacy and harden variants are accepted."""
        with pytest.raises(ValidationError):
            Settings(cycle_detection="strict")

    def test_settings_model_copy(self):
        """Test overriding a single field keeps the others."""
        base = Settings(decimal_places=3, error_marker="#ERR")
        copy = base.model_copy(update={"decimal_places": 1})

        assert copy.decimal_places == 1
        assert copy.error_marker == "#ERR"
        assert base.decimal_places == 3

    def test_settings_rejects_non_positive_depth(self):
        """Test the maximum reference depth must be at least one."""
        with pytest.raises(ValidationError):
            Settings(max_reference_depth=0)

    def test_settings_rejects_negative_decimal_places(self):
        """Test the number of decimal places cannot be negative."""
        with pytest.raises(ValidationError):
            Settings(decimal_places=-1)

    def test_settings_accepts_large_depth(self):
        """Test depths beyond the interpreter recursion limit are allowed."""
        settings = Settings(max_reference_depth=100000)

        assert settings.max_reference_depth == 100000
