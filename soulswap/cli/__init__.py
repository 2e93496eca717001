"""soulswap command-line interface."""

from soulswap.cli.main import main, run

__all__ = ["main", "run"]
