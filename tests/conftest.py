"""Pytest configuration and fixtures for soulswap tests."""

import logging
from datetime import datetime, timezone

import pytest

from soulswap.config import AgentSettings, PurgeSettings, SoulEvilSettings, SoulSwapSettings, reset_settings
from soulswap.config.logging import ColoredConsoleFormatter, reset_logging


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep tests away from real soulswap.yaml files and env overrides."""
    monkeypatch.setenv("SOULSWAP_CONFIG", str(tmp_path / "no-such-config.yaml"))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def reset_console_logging():
    """Drop console handlers installed by code under test."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, ColoredConsoleFormatter):
            root.removeHandler(handler)
    reset_logging()


@pytest.fixture
def make_config():
    """Build settings with a soul_evil section."""

    def _make(
        chance=None,
        at=None,
        duration=None,
        file=None,
        user_timezone="UTC",
    ) -> SoulSwapSettings:
        purge = PurgeSettings(at=at, duration=duration) if at or duration else None
        evil = SoulEvilSettings(file=file, chance=chance, purge=purge)
        return SoulSwapSettings(agent=AgentSettings(user_timezone=user_timezone, soul_evil=evil))

    return _make


@pytest.fixture
def utc():
    """Build an aware UTC datetime on a fixed day."""

    def _utc(hour: int, minute: int, day: int = 1) -> datetime:
        return datetime(2026, 1, day, hour, minute, tzinfo=timezone.utc)

    return _utc
