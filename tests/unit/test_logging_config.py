"""
Unit tests for the package logging configuration.
"""

import logging

import pytest

from neo_filenames.config.logging_config import (
    PACKAGE_LOGGER,
    LoggingConfig,
    setup_logging,
    get_log_level_from_verbosity,
)


@pytest.fixture
def restore_logging():
    """Restore the package logger state touched by configure()."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestVerbosityMapping:
    """Verbosity modes map onto log levels."""

    @pytest.mark.parametrize("verbosity,level", [
        ("QUIET", "ERROR"),
        ("normal", "WARNING"),
        ("Verbose", "INFO"),
        ("DEBUG", "DEBUG"),
        ("chatty", "WARNING"),
    ])
    def test_mapping(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level


class TestLoggingConfig:
    """LoggingConfig.configure honours the environment."""

    def test_log_level_wins(self, monkeypatch, restore_logging):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")
        LoggingConfig.configure()
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    def test_verbosity_used_without_level(self, monkeypatch, restore_logging):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")
        LoggingConfig.configure()
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR

    def test_unknown_format_falls_back(self, monkeypatch, restore_logging):
        monkeypatch.setenv("LOG_FORMAT", "xml")
        LoggingConfig.configure()
        handler = logging.getLogger(PACKAGE_LOGGER).handlers[0]
        assert handler.formatter._fmt == "%(asctime)s - %(levelname)s - %(message)s"

    def test_root_logger_untouched(self, monkeypatch, restore_logging):
        root = logging.getLogger()
        handlers_before, level_before = list(root.handlers), root.level
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        LoggingConfig.configure()
        assert root.handlers == handlers_before
        assert root.level == level_before
        assert logging.getLogger(PACKAGE_LOGGER).propagate is False

    def test_silence_module(self, restore_logging):
        LoggingConfig.silence_module("neo_filenames.features")
        assert logging.getLogger("neo_filenames.features").level == logging.CRITICAL
        LoggingConfig.set_module_level("neo_filenames.features", "NOTSET")

    def test_host_file_handler_keeps_writing(self, tmp_path, restore_logging):
        log_file = tmp_path / "host.log"
        host_logger = logging.getLogger("host_application")
        host_handler = logging.FileHandler(log_file, mode="w")
        host_handler.setFormatter(logging.Formatter("%(message)s"))
        host_logger.addHandler(host_handler)
        host_logger.setLevel(logging.INFO)
        try:
            host_logger.info("before")
            setup_logging()
            host_logger.info("after")
            host_handler.flush()
            assert log_file.read_text() == "before\nafter\n"
        finally:
            host_logger.removeHandler(host_handler)
            host_handler.close()

    def test_rerun_replaces_package_handler(self, restore_logging):
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        extra = logging.NullHandler()
        package_logger.addHandler(extra)
        try:
            setup_logging()
            setup_logging()
            handlers = package_logger.handlers
            assert extra in handlers
            assert len([h for h in handlers if h is not extra]) == 1
        finally:
            package_logger.removeHandler(extra)
