"""Duration strings such as "90s", "15m" or "1.5h" to milliseconds."""

from __future__ import annotations

import math
import re

_DURATION_RE = re.compile(r"^(\d+(?:\.\d+)?)(ms|s|m|h|d)?$")

UNIT_MS = {
    "ms": 1,
    "s": 1000,
    "m": 60_000,
    "h": 3_600_000,
    "d": 86_400_000,
}


class InvalidDurationError(ValueError):
    """Raised when a duration string cannot be parsed."""


def parse_duration_ms(raw: str, default_unit: str = "ms") -> int:
    """Parse a duration string into whole milliseconds.

    A bare number uses ``default_unit``. Raises InvalidDurationError on
    empty, negative or otherwise unparsable input.
    """
    if default_unit not in UNIT_MS:
        raise ValueError(f"unknown duration unit: {default_unit}")

    trimmed = str(raw if raw is not None else "").strip().lower()
    if not trimmed:
        raise InvalidDurationError("invalid duration (empty)")

    match = _DURATION_RE.match(trimmed)
    if not match:
        raise InvalidDurationError(f"invalid duration: {raw}")

    value = float(match.group(1))
    if not math.isfinite(value) or value < 0:
        raise InvalidDurationError(f"invalid duration: {raw}")

    unit = match.group(2) or default_unit
    ms = value * UNIT_MS[unit]
    if not math.isfinite(ms):
        raise InvalidDurationError(f"invalid duration: {raw}")
    return round(ms)
