"""Entry point for running the CLI as a module.

Usage:
    python -m soulswap.cli
"""

from soulswap.cli.main import run

if __name__ == "__main__":
    run()
