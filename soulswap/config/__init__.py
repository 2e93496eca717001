"""Unified configuration for soulswap.

Usage:
    from soulswap.config import get_settings

    s = get_settings()
    s.agent.workspace             # "~/clawd"
    s.agent.soul_evil.chance      # 0.1

Environment overrides use "__" for nesting, e.g.
AGENT__SOUL_EVIL__PURGE__AT=21:00.
"""

from __future__ import annotations

import logging

from soulswap.config._sections import AgentSettings, LoggingSettings, PurgeSettings, SoulEvilSettings
from soulswap.config._settings import SoulSwapSettings

logger = logging.getLogger("soulswap.config")

_settings: SoulSwapSettings | None = None

__all__ = [
    "AgentSettings",
    "LoggingSettings",
    "PurgeSettings",
    "SoulEvilSettings",
    "SoulSwapSettings",
    "get_settings",
    "reset_settings",
]


def get_settings() -> SoulSwapSettings:
    """Return the singleton SoulSwapSettings instance (created on first call)."""
    global _settings
    if _settings is None:
        _settings = SoulSwapSettings()
        logger.debug("Settings loaded")
    return _settings


def reset_settings() -> None:
    """Force re-creation of the settings singleton (useful for tests)."""
    global _settings
    _settings = None
