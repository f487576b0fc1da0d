"""
Unit tests for render configuration and sessions.
"""

import logging

import pytest

from tyrender.config import RenderConfig
from tyrender.printer import RenderSession


class TestRenderConfig:
    """Tests for RenderConfig."""

    def test_defaults(self):
        """Test the default settings."""
        config = RenderConfig()
        assert config.verbose is False
        assert config.log_level == "WARNING"
        assert config.logging_level == logging.WARNING

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_verbose_from_env(self, value):
        """Test truthy values of TYRENDER_VERBOSE."""
        assert RenderConfig.from_env({"TYRENDER_VERBOSE": value}).verbose

    @pytest.mark.parametrize("value", ["", "0", "no", "off"])
    def test_not_verbose_from_env(self, value):
        """Test falsy values of TYRENDER_VERBOSE."""
        assert not RenderConfig.from_env({"TYRENDER_VERBOSE": value}).verbose

    def test_log_level_from_env(self):
        """Test that TYRENDER_LOG sets the log level."""
        config = RenderConfig.from_env({"TYRENDER_LOG": "debug"})
        assert config.log_level == "DEBUG"
        assert config.logging_level == logging.DEBUG

    def test_invalid_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValueError, match="invalid log level"):
            RenderConfig.from_env({"TYRENDER_LOG": "chatty"})

    def test_override(self):
        """Test that None keeps the current value."""
        config = RenderConfig(verbose=True, log_level="INFO")
        assert config.override() == config
        assert config.override(verbose=False).verbose is False
        assert config.override(log_level="error").log_level == "ERROR"


class TestRenderSession:
    """Tests for RenderSession."""

    def test_from_config(self, std_items):
        """Test that the session takes its verbosity from the config."""
        session = RenderSession.from_config(std_items.table, RenderConfig(verbose=True))
        assert session.verbose
        assert session.ctx is std_items.table

    def test_with_verbose(self, std_items):
        """Test that with_verbose returns a new session."""
        session = RenderSession(std_items.table)
        verbose = session.with_verbose(True)
        assert verbose.verbose and not session.verbose
