# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Starts the interactive shell. This is how users interact
#   with the system.
#
# USAGE:
# ------
#   tableshell
#   tableshell --snapshot data/tables.json
#   tableshell --no-load --log-level DEBUG
#   python -m tableshell
#
# OPTIONS:
# --------
#   --snapshot PATH     Snapshot file (default: TABLESHELL_SNAPSHOT_PATH or db.json)
#   --log-level LEVEL   Diagnostics level on stderr (default: TABLESHELL_LOG_LEVEL)
#   --no-load           Start empty; the snapshot is still written on EXIT
#   --reset             Delete the snapshot file before starting
#
# ==============================================

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from . import __version__
from .config import AppConfig, get_config
from .persistence import SnapshotStore
from .shell import Shell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tableshell",
        description="tableshell - interactive shell for a minimal table language"
    )
    parser.add_argument(
        "--snapshot", metavar="PATH", help="Snapshot file to load on start and save on exit"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Diagnostics log level (written to stderr)"
    )
    parser.add_argument(
        "--no-load", action="store_true", help="Ignore any existing snapshot on start"
    )
    parser.add_argument(
        "--reset", action="store_true", help="Delete the snapshot file before starting"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return a copy of config with the command-line overrides applied."""
    snapshot = config.snapshot
    if args.snapshot:
        snapshot = replace(snapshot, path=args.snapshot)

    shell = config.shell
    if args.no_load:
        shell = replace(shell, load_on_start=False)

    return replace(
        config,
        snapshot=snapshot,
        shell=shell,
        log_level=args.log_level or config.log_level,
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    config = apply_overrides(get_config(), args)

    configure_logging(config.log_level)

    snapshot_store = SnapshotStore(config.snapshot.path, indent=config.snapshot.indent)
    if args.reset and not snapshot_store.clear():
        return 1

    shell = Shell(config, snapshot_store=snapshot_store)
    return shell.run()
