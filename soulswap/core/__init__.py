"""Workspace bootstrap and SOUL_EVIL override logic."""

from soulswap.core.bootstrap import resolve_bootstrap_files
from soulswap.core.soul_evil import SoulEvilDecision, apply_soul_evil_override, decide_soul_evil
from soulswap.core.workspace import (
    DEFAULT_SOUL_EVIL_FILENAME,
    DEFAULT_SOUL_FILENAME,
    BootstrapFile,
    load_workspace_bootstrap_files,
)

__all__ = [
    "DEFAULT_SOUL_EVIL_FILENAME",
    "DEFAULT_SOUL_FILENAME",
    "BootstrapFile",
    "SoulEvilDecision",
    "apply_soul_evil_override",
    "decide_soul_evil",
    "load_workspace_bootstrap_files",
    "resolve_bootstrap_files",
]
