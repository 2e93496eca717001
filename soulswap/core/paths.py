"""User-supplied path handling."""

from __future__ import annotations

import os


def resolve_user_path(raw: str) -> str:
    """Expand a leading ``~`` and make the path absolute.

    Symlinks are left alone. An empty or blank input comes back empty.
    """
    trimmed = raw.strip()
    if not trimmed:
        return trimmed
    if trimmed.startswith("~"):
        trimmed = os.path.expanduser(trimmed)
    return os.path.abspath(trimmed)
