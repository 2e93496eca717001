"""Bootstrap file assembly for a new agent session."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from soulswap.core.soul_evil import apply_soul_evil_override
from soulswap.core.workspace import BootstrapFile, load_workspace_bootstrap_files

if TYPE_CHECKING:
    from soulswap.config import SoulSwapSettings


async def resolve_bootstrap_files(
    workspace_dir: str,
    config: SoulSwapSettings | None = None,
    now: datetime | None = None,
    random: Callable[[], float] | None = None,
    log: logging.Logger | None = None,
) -> list[BootstrapFile]:
    """Load the workspace files and apply the SOUL_EVIL override."""
    files = await load_workspace_bootstrap_files(workspace_dir)
    return await apply_soul_evil_override(
        files,
        workspace_dir,
        config=config,
        now=now,
        random=random,
        log=log,
    )
