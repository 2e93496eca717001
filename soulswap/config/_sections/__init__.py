"""Config section models."""

from soulswap.config._sections.agent import AgentSettings, PurgeSettings, SoulEvilSettings
from soulswap.config._sections.logging import LoggingSettings

__all__ = [
    "AgentSettings",
    "LoggingSettings",
    "PurgeSettings",
    "SoulEvilSettings",
]
