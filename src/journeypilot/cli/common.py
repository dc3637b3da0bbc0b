"""Shared CLI helpers."""

from __future__ import annotations

import argparse
from pathlib import Path

from journeypilot.contracts.config import JourneyPilotConfig
from journeypilot.contracts.exceptions import ConfigError


def format_days(count: int) -> str:
    return f"{count} day{'s' if count != 1 else ''}"


def load_cli_config(args: argparse.Namespace) -> JourneyPilotConfig:
    import journeypilot.cli as cli

    if args.config is None:
        return JourneyPilotConfig()
    return cli.load_config(args.config)


def resolve_snapshot_path(args: argparse.Namespace, config: JourneyPilotConfig) -> Path:
    if args.snapshot is not None:
        return Path(args.snapshot)
    if config.snapshot_path is not None:
        return config.snapshot_path
    raise ConfigError("no snapshot given: pass --snapshot or set snapshot_path in the config file")
