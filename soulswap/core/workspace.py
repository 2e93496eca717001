"""Agent workspace bootstrap files.

A workspace is a directory holding the markdown files that seed a new agent
session (AGENTS.md, SOUL.md, ...). They are loaded into BootstrapFile records
which downstream steps may rewrite; the records themselves are immutable.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass

from soulswap.core.paths import resolve_user_path

logger = logging.getLogger("soulswap.workspace")

DEFAULT_AGENTS_FILENAME = "AGENTS.md"
DEFAULT_SOUL_FILENAME = "SOUL.md"
DEFAULT_TOOLS_FILENAME = "TOOLS.md"
DEFAULT_IDENTITY_FILENAME = "IDENTITY.md"
DEFAULT_USER_FILENAME = "USER.md"
DEFAULT_HEARTBEAT_FILENAME = "HEARTBEAT.md"
DEFAULT_BOOTSTRAP_FILENAME = "BOOTSTRAP.md"
DEFAULT_SOUL_EVIL_FILENAME = "SOUL_EVIL.md"

# Load order for the session bootstrap
BOOTSTRAP_FILENAMES = (
    DEFAULT_AGENTS_FILENAME,
    DEFAULT_SOUL_FILENAME,
    DEFAULT_TOOLS_FILENAME,
    DEFAULT_IDENTITY_FILENAME,
    DEFAULT_USER_FILENAME,
    DEFAULT_HEARTBEAT_FILENAME,
    DEFAULT_BOOTSTRAP_FILENAME,
)


@dataclass(frozen=True)
class BootstrapFile:
    """A workspace file as it will be handed to the agent.

    Attributes:
        name: File name within the workspace, e.g. "SOUL.md".
        path: Absolute filesystem location.
        content: File text, or None when the file could not be read.
        missing: True when the file was absent or unreadable.
    """

    name: str
    path: str
    content: str | None = None
    missing: bool = False


def read_text(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


async def load_workspace_bootstrap_files(workspace_dir: str) -> list[BootstrapFile]:
    """Read every known bootstrap file from the workspace, in load order."""
    resolved = resolve_user_path(workspace_dir)
    files: list[BootstrapFile] = []
    for name in BOOTSTRAP_FILENAMES:
        path = os.path.join(resolved, name)
        try:
            content = await asyncio.to_thread(read_text, path)
        except (OSError, UnicodeDecodeError):
            files.append(BootstrapFile(name=name, path=path, content=None, missing=True))
            continue
        files.append(BootstrapFile(name=name, path=path, content=content, missing=False))

    missing = [f.name for f in files if f.missing]
    if missing:
        logger.debug(f"Workspace {resolved} is missing: {', '.join(missing)}")
    return files
