"""Timezone resolution and minute-of-day lookup.

The decision logic only needs "what minute of the day is it in this zone";
``MinuteOfDay`` is that capability, so callers can swap in another calendar
implementation without touching the purge window math.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger("soulswap.clock")

MINUTES_PER_DAY = 24 * 60

MinuteOfDay = Callable[[datetime, tzinfo | None], int | None]


def resolve_user_timezone(name: str | None) -> tzinfo | None:
    """Return the configured zone if it loads, else None for the host zone.

    None is resolved per instant by ``minutes_in_timezone`` so the host's
    daylight saving rules apply to whatever ``now`` is being checked.
    """
    trimmed = (name or "").strip()
    if trimmed:
        try:
            return ZoneInfo(trimmed)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            logger.debug(f"Ignoring invalid timezone: {trimmed!r}")
    return None


def minutes_in_timezone(now: datetime, tz: tzinfo | None) -> int | None:
    """Minute of the day (0-1439) for ``now`` in ``tz`` (host zone when None).

    Naive datetimes are taken as UTC. If the host zone cannot be applied the
    conversion falls back to UTC. Returns None if the conversion fails.
    """
    try:
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        if tz is not None:
            local = now.astimezone(tz)
        else:
            try:
                local = now.astimezone()
            except OSError:
                local = now.astimezone(timezone.utc)
    except (OverflowError, ValueError, OSError):
        return None
    return local.hour * 60 + local.minute
