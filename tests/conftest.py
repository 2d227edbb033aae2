"""Pytest configuration and fixtures for neo-filenames tests."""

import pytest

from neo_filenames import build_validator, get_settings
from neo_filenames.config import EnvironmentVariables


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from the host environment and cached settings."""
    monkeypatch.delenv(EnvironmentVariables.DEFAULT_SYSTEM, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def windows_validator():
    """Validator for the Windows rule."""
    return build_validator("windows")


@pytest.fixture
def linux_validator():
    """Validator for the Linux rule."""
    return build_validator("linux")


@pytest.fixture
def macos_validator():
    """Validator for the macOS rule."""
    return build_validator("macos")


@pytest.fixture
def universal_validator():
    """Validator for the universal rule."""
    return build_validator("universal")


@pytest.fixture
def passthrough_validator():
    """Validator built without a system."""
    return build_validator()
