"""Command-line interface for journeypilot."""

from __future__ import annotations

import logging as logging

from journeypilot.cli.app import main as main
from journeypilot.cli.commands import completeness as completeness_command
from journeypilot.cli.commands import schedule as schedule_command
from journeypilot.cli.parser import _package_version as _package_version
from journeypilot.cli.parser import build_parser as build_parser
from journeypilot.config import build_catalog as build_catalog
from journeypilot.config import load_config as load_config
from journeypilot.snapshot import load_snapshot as load_snapshot

_format_schedule_summary = schedule_command.format_schedule_summary
_format_completeness_summary = completeness_command.format_completeness_summary

_run_schedule = schedule_command.run_schedule
_run_completeness = completeness_command.run_completeness
