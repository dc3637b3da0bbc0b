"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("journeypilot")
    except PackageNotFoundError:
        return "0.0.0"


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--snapshot",
        default=None,
        help="Path to the project snapshot JSON (default: snapshot_path from the config file)",
    )
    parser.add_argument("--config", default=None, help="Path to journeypilot.json")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="journeypilot")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    schedule_parser = subparsers.add_parser("schedule", help="Show planned dates, projection and phase variance")
    _add_common_arguments(schedule_parser)

    completeness_parser = subparsers.add_parser("completeness", help="Score business and technical profiles")
    _add_common_arguments(completeness_parser)

    return parser


__all__ = ["build_parser"]
