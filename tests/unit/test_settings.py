"""
Unit tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from neo_filenames import ConfigurationError, SystemIdentifier, get_settings, reload_settings


class TestSettings:
    """FilenameSettings loading and caching."""

    def test_defaults(self):
        assert get_settings().default_system is None

    def test_default_system_from_env(self, monkeypatch):
        monkeypatch.setenv("NEO_FILENAMES_DEFAULT_SYSTEM", "hfs+")
        assert get_settings().default_system is SystemIdentifier.HFS_PLUS

    def test_empty_default_system_is_ignored(self, monkeypatch):
        monkeypatch.setenv("NEO_FILENAMES_DEFAULT_SYSTEM", "")
        assert get_settings().default_system is None

    def test_invalid_default_system(self, monkeypatch):
        monkeypatch.setenv("NEO_FILENAMES_DEFAULT_SYSTEM", "amiga")
        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()
        assert exc_info.value.details["errors"]

    def test_host_logging_variables_do_not_break_settings(self, monkeypatch):
        monkeypatch.setenv("NEO_FILENAMES_DEFAULT_SYSTEM", "linux")
        monkeypatch.setenv("LOG_FORMAT", "plain")
        monkeypatch.setenv("LOG_VERBOSITY", "chatty")
        monkeypatch.setenv("LOG_LEVEL", "loud")
        assert get_settings().default_system is SystemIdentifier.LINUX

    def test_cached_until_reload(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("NEO_FILENAMES_DEFAULT_SYSTEM", "macos")
        assert get_settings() is first
        reloaded = reload_settings()
        assert reloaded is not first
        assert reloaded.default_system is SystemIdentifier.MACOS

    def test_settings_are_frozen(self):
        settings = get_settings()
        with pytest.raises(ValidationError):
            settings.default_system = SystemIdentifier.LINUX
