"""Command-line interface for inspecting the SOUL_EVIL override.

Usage:
    soulswap decide [--now 2026-01-01T21:05:00+00:00] [--timezone Europe/Berlin]
    soulswap apply [WORKSPACE] [--now ...] [--timezone ...]

Settings come from soulswap.yaml / environment (see soulswap.config).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import datetime

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from soulswap import get_version
from soulswap.config import SoulSwapSettings, get_settings
from soulswap.config.logging import get_logger
from soulswap.core.soul_evil import apply_soul_evil_override, decide_soul_evil
from soulswap.core.workspace import BootstrapFile, load_workspace_bootstrap_files


def _parse_now(raw: str) -> datetime:
    try:
        return datetime.fromisoformat(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid ISO timestamp: {raw}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="soulswap", description="SOUL_EVIL persona override")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--now", type=_parse_now, help="Evaluate at this ISO timestamp instead of now")
    common.add_argument("--timezone", help="Override agent.user_timezone")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("decide", parents=[common], help="Show whether the override is active")
    apply_parser = sub.add_parser("apply", parents=[common], help="Show the bootstrap files after the override")
    apply_parser.add_argument("workspace", nargs="?", help="Workspace directory (default: agent.workspace)")
    return parser


def _with_timezone(settings: SoulSwapSettings, tz_name: str | None) -> SoulSwapSettings:
    if not tz_name:
        return settings
    agent = settings.agent.model_copy(update={"user_timezone": tz_name})
    return settings.model_copy(update={"agent": agent})


def cmd_decide(settings: SoulSwapSettings, args: argparse.Namespace, console: Console) -> int:
    decision = decide_soul_evil(config=settings, now=args.now)
    if decision.use_evil:
        console.print(f"[bold red]SOUL_EVIL active[/bold red] ({decision.reason}) using {decision.file_name}")
    else:
        console.print(f"[green]SOUL_EVIL inactive[/green] (file: {decision.file_name})")
    return 0


async def _load_and_apply(
    workspace: str, settings: SoulSwapSettings, now: datetime | None, log: logging.Logger
) -> tuple[list[BootstrapFile], list[BootstrapFile]]:
    files = await load_workspace_bootstrap_files(workspace)
    updated = await apply_soul_evil_override(files, workspace, config=settings, now=now, log=log)
    return files, updated


def cmd_apply(settings: SoulSwapSettings, args: argparse.Namespace, console: Console) -> int:
    workspace = args.workspace or settings.agent.workspace
    logger = get_logger("soulswap.cli")
    original, files = asyncio.run(_load_and_apply(workspace, settings, args.now, logger))
    untouched = {id(f) for f in original}

    table = Table(title=f"Bootstrap files: {workspace}")
    table.add_column("Name")
    table.add_column("Missing")
    table.add_column("Chars", justify="right")
    table.add_column("Source")
    table.add_column("Path")
    for file in files:
        overridden = id(file) not in untouched
        table.add_row(
            f"[bold red]{file.name}[/bold red]" if overridden else file.name,
            "yes" if file.missing else "no",
            str(len(file.content)) if file.content is not None else "-",
            "soul_evil" if overridden else "workspace",
            file.path,
        )
    console.print(table)
    return 0


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    settings = _with_timezone(get_settings(), args.timezone)

    if args.command == "decide":
        return cmd_decide(settings, args, console)
    return cmd_apply(settings, args, console)


def run() -> None:
    load_dotenv()
    raise SystemExit(main())
