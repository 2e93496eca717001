"""SOUL_EVIL persona override.

When active, the workspace's SOUL_EVIL.md (or the configured file) replaces
SOUL.md in the bootstrap files handed to the agent. Activation comes from
either a daily purge window or a per-call random chance:

    agent:
      user_timezone: Europe/Berlin
      soul_evil:
        chance: 0.1
        purge:
          at: "21:00"
          duration: 15m

The purge window wins over chance when both would fire. Bad times,
durations or timezones switch the matching check off instead of raising.
"""

from __future__ import annotations

import asyncio
import logging
import math
import os
import random as _random
import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime, timezone, tzinfo
from typing import TYPE_CHECKING, Literal

from soulswap.core.clock import MINUTES_PER_DAY, MinuteOfDay, minutes_in_timezone, resolve_user_timezone
from soulswap.core.duration import InvalidDurationError, parse_duration_ms
from soulswap.core.paths import resolve_user_path
from soulswap.core.workspace import DEFAULT_SOUL_EVIL_FILENAME, DEFAULT_SOUL_FILENAME, BootstrapFile, read_text

if TYPE_CHECKING:
    from soulswap.config import SoulSwapSettings

logger = logging.getLogger("soulswap.soul_evil")

SoulEvilReason = Literal["purge", "chance"]

_PURGE_AT_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


@dataclass(frozen=True)
class SoulEvilDecision:
    """Outcome of one activation check."""

    use_evil: bool
    file_name: str
    reason: SoulEvilReason | None = None


def clamp_chance(value: object) -> float:
    """Coerce a configured chance into [0, 1]; anything non-numeric is 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return min(1.0, max(0.0, float(value)))


def parse_purge_at(raw: str | None) -> int | None:
    """Parse "H:MM" / "HH:MM" into minutes since midnight."""
    if not raw:
        return None
    match = _PURGE_AT_RE.match(raw.strip())
    if not match:
        return None
    return int(match.group(1)) * 60 + int(match.group(2))


def is_within_daily_purge_window(
    at: str | None,
    duration: str | None,
    now: datetime,
    tz: tzinfo | None,
    minute_of_day: MinuteOfDay = minutes_in_timezone,
) -> bool:
    if not at or not duration:
        return False
    start_minutes = parse_purge_at(at)
    if start_minutes is None:
        return False

    try:
        duration_ms = parse_duration_ms(duration, default_unit="m")
    except InvalidDurationError:
        return False
    if not math.isfinite(duration_ms) or duration_ms <= 0:
        return False

    duration_minutes = math.ceil(duration_ms / 60_000)
    if duration_minutes >= MINUTES_PER_DAY:
        return True

    now_minutes = minute_of_day(now, tz)
    if now_minutes is None:
        return False

    end_minutes = start_minutes + duration_minutes
    if end_minutes <= MINUTES_PER_DAY:
        return start_minutes <= now_minutes < end_minutes
    # Window crosses midnight
    wrapped_end = end_minutes % MINUTES_PER_DAY
    return now_minutes >= start_minutes or now_minutes < wrapped_end


def decide_soul_evil(
    config: SoulSwapSettings | None = None,
    now: datetime | None = None,
    random: Callable[[], float] | None = None,
    minute_of_day: MinuteOfDay | None = None,
) -> SoulEvilDecision:
    """Decide whether SOUL_EVIL replaces SOUL.md for this call.

    Args:
        config: Settings carrying ``agent.soul_evil`` and ``agent.user_timezone``.
        now: Point in time to check; defaults to the current UTC time.
        random: Source of uniform samples in [0, 1); defaults to random.random.
        minute_of_day: Minute-of-day lookup; defaults to zoneinfo conversion.

    Returns:
        A SoulEvilDecision. ``file_name`` is always filled in.
    """
    agent = config.agent if config is not None else None
    evil = agent.soul_evil if agent is not None else None
    file_name = ((evil.file if evil is not None else None) or "").strip() or DEFAULT_SOUL_EVIL_FILENAME
    if evil is None:
        return SoulEvilDecision(use_evil=False, file_name=file_name)

    tz = resolve_user_timezone(agent.user_timezone)
    if now is None:
        now = datetime.now(timezone.utc)
    purge = evil.purge
    in_purge = is_within_daily_purge_window(
        at=purge.at if purge is not None else None,
        duration=purge.duration if purge is not None else None,
        now=now,
        tz=tz,
        minute_of_day=minute_of_day or minutes_in_timezone,
    )
    if in_purge:
        return SoulEvilDecision(use_evil=True, file_name=file_name, reason="purge")

    chance = clamp_chance(evil.chance)
    if chance > 0:
        sample = (random or _random.random)()
        if sample < chance:
            return SoulEvilDecision(use_evil=True, file_name=file_name, reason="chance")

    return SoulEvilDecision(use_evil=False, file_name=file_name)


async def apply_soul_evil_override(
    files: list[BootstrapFile],
    workspace_dir: str,
    config: SoulSwapSettings | None = None,
    now: datetime | None = None,
    random: Callable[[], float] | None = None,
    log: logging.Logger | None = None,
    minute_of_day: MinuteOfDay | None = None,
) -> list[BootstrapFile]:
    """Swap SOUL_EVIL content into the bootstrap files when the override is active.

    Returns ``files`` itself when inactive or when the override file is
    missing or blank; otherwise a new list. Input records are never changed.
    """
    log = log or logger
    decision = decide_soul_evil(config=config, now=now, random=random, minute_of_day=minute_of_day)
    if not decision.use_evil:
        return files

    resolved_dir = resolve_user_path(workspace_dir)
    evil_path = os.path.join(resolved_dir, decision.file_name)
    reason = decision.reason or "unknown"
    try:
        evil_content = await asyncio.to_thread(read_text, evil_path)
    except (OSError, UnicodeDecodeError):
        log.warning(f"SOUL_EVIL active ({reason}) but file missing: {evil_path}")
        return files

    if not evil_content.strip():
        log.warning(f"SOUL_EVIL active ({reason}) but file empty: {evil_path}")
        return files

    replaced = False
    updated: list[BootstrapFile] = []
    for file in files:
        if file.name != DEFAULT_SOUL_FILENAME:
            updated.append(file)
            continue
        replaced = True
        updated.append(replace(file, content=evil_content, missing=False))

    if not replaced:
        updated.append(
            BootstrapFile(
                name=DEFAULT_SOUL_FILENAME,
                path=os.path.join(resolved_dir, DEFAULT_SOUL_FILENAME),
                content=evil_content,
                missing=False,
            )
        )

    log.debug(f"SOUL_EVIL active ({reason}) using {decision.file_name}")
    return updated
