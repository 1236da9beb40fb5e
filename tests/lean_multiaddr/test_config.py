"""Tests for environment configuration."""

from __future__ import annotations

import importlib

import pytest

from lean_multiaddr import config


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch):
    """Reload the config module, then restore it from the real environment."""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


class TestLogLevel:
    """LEAN_MULTIADDR_LOG_LEVEL handling."""

    def test_default(self, monkeypatch: pytest.MonkeyPatch, reload_config) -> None:
        """WARNING when unset."""
        monkeypatch.delenv("LEAN_MULTIADDR_LOG_LEVEL", raising=False)
        assert reload_config().LOG_LEVEL == "WARNING"

    def test_case_insensitive(self, monkeypatch: pytest.MonkeyPatch, reload_config) -> None:
        """Values are upper-cased."""
        monkeypatch.setenv("LEAN_MULTIADDR_LOG_LEVEL", "debug")
        assert reload_config().LOG_LEVEL == "DEBUG"

    def test_invalid(self, monkeypatch: pytest.MonkeyPatch, reload_config) -> None:
        """Unsupported levels fail at import."""
        monkeypatch.setenv("LEAN_MULTIADDR_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="LEAN_MULTIADDR_LOG_LEVEL"):
            reload_config()
