"""Tests for debug/logging configuration."""

import logging
import os
import pytest

from rnareport.config.debug import (
    ENV_VAR,
    get_logger,
    set_log_level,
    get_log_level,
    reset_logger,
    DEFAULT_LOG_LEVEL,
    _LEVEL_MAP,
)


@pytest.fixture(autouse=True)
def clean_logger(monkeypatch):
    """Each test starts from an uninitialised logger and no env override."""
    monkeypatch.delenv(ENV_VAR, raising=False)
    reset_logger()
    yield
    reset_logger()
    os.environ.pop(ENV_VAR, None)


class TestLogLevel:
    """Tests for log level management."""

    def test_default_log_level(self):
        assert DEFAULT_LOG_LEVEL == "INFO"
        get_logger()
        assert get_log_level() == "INFO"

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARN", "WARNING", "ERROR"])
    def test_set_log_level(self, level):
        set_log_level(level)
        assert get_log_level() == level

    def test_set_log_level_case_insensitive(self):
        set_log_level("debug")
        assert get_log_level() == "DEBUG"
        set_log_level("wArN")
        assert get_log_level() == "WARN"

    def test_set_invalid_log_level_raises(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            set_log_level("VERBOSE")

    def test_environment_variable_sets_level(self, monkeypatch):
        """RNAREPORT_LOG_LEVEL is read when the logger is first created."""
        monkeypatch.setenv(ENV_VAR, "debug")
        get_logger()
        assert get_log_level() == "DEBUG"

    def test_environment_variable_ignored_if_invalid(self, monkeypatch):
        monkeypatch.setenv(ENV_VAR, "LOUD")
        get_logger()
        assert get_log_level() == DEFAULT_LOG_LEVEL

    def test_set_log_level_exports_environment(self):
        """The level is exported so a spawned dashboard process inherits it."""
        set_log_level("ERROR")
        assert os.environ.get(ENV_VAR) == "ERROR"

    def test_reset_restores_default_level(self, monkeypatch):
        set_log_level("DEBUG")
        reset_logger()
        monkeypatch.delenv(ENV_VAR, raising=False)
        get_logger()
        assert get_log_level() == DEFAULT_LOG_LEVEL


class TestGetLogger:
    """Tests for get_logger function."""

    @pytest.mark.parametrize("name", [None, "rnareport"])
    def test_package_logger(self, name):
        assert get_logger(name).name == "rnareport"

    def test_module_logger_keeps_package_prefix(self):
        assert get_logger("rnareport.findings.aggregator").name == "rnareport.findings.aggregator"

    def test_foreign_name_gets_package_prefix(self):
        assert get_logger("backend").name == "rnareport.backend"

    def test_package_logger_configuration(self):
        logger = get_logger()
        assert len(logger.handlers) == 1
        assert logger.propagate is False
        assert get_logger() is logger

    def test_logger_follows_level_changes(self):
        logger = get_logger()
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)
        set_log_level("ERROR")
        assert logger.level == logging.ERROR

    def test_reset_reinitialises_handlers(self):
        get_logger()
        reset_logger()
        assert len(get_logger().handlers) == 1


class TestLevelMap:
    """Tests for level mapping."""

    def test_level_map(self):
        assert _LEVEL_MAP == {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARN": logging.WARNING,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
        }
