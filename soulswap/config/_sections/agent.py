"""Agent workspace and SOUL_EVIL override configuration models."""

from pydantic import BaseModel


class PurgeSettings(BaseModel):
    at: str | None = None  # daily start, "HH:MM" in the user's timezone
    duration: str | None = None  # e.g. "15m", "2h"; bare numbers are minutes


class SoulEvilSettings(BaseModel):
    file: str | None = None  # relative to the workspace, defaults to SOUL_EVIL.md
    chance: float | None = None  # 0.0 to 1.0, clamped when used
    purge: PurgeSettings | None = None


class AgentSettings(BaseModel):
    workspace: str = "~/clawd"
    user_timezone: str | None = None
    soul_evil: SoulEvilSettings | None = None
