"""Schedule command formatting."""

from __future__ import annotations

import argparse

from journeypilot.cli.common import format_days, load_cli_config, resolve_snapshot_path
from journeypilot.contracts.phase import PhaseType
from journeypilot.contracts.snapshot import ProjectSnapshot
from journeypilot.scheduling.scheduler import PhaseScheduler, design_week_end_date, format_variance


def format_schedule_summary(snapshot: ProjectSnapshot, scheduler: PhaseScheduler) -> str:
    current = snapshot.current_phase
    start = snapshot.current_phase_start_date
    title = f"journeypilot - schedule ({snapshot.name})" if snapshot.name else "journeypilot - schedule"

    lines = [
        "",
        title,
        "",
        f"  Current phase:  {scheduler.phase_display_name(current)} (started {start.isoformat()})",
        f"  Planned end:    {scheduler.planned_end_date(start, current).isoformat()}",
    ]
    if current is PhaseType.DESIGN_WEEK:
        design_days = scheduler.standard_duration(PhaseType.DESIGN_WEEK)
        end = design_week_end_date(start, design_days)
        lines.append(f"  Design week:    ends {end.isoformat()} ({format_days(design_days)})")

    projected = scheduler.projected_completion_date(current, start)
    lines.append(f"  Projected:      {projected.isoformat()} (estimate)")

    statuses = {record.type: record.status for record in snapshot.phases}
    lines.append(f"  Progress:       {scheduler.journey_progress(statuses)}% of phases complete")

    variance_lines: list[str] = []
    for record in snapshot.phases:
        result = scheduler.record_variance(record)
        if result is None:
            continue
        planned = scheduler.planned_days_for(record)
        actual = planned + result.days
        variance_lines.append(
            f"    {scheduler.phase_display_name(record.type):<20} "
            f"{format_days(planned)} planned, {format_days(actual)} actual: {format_variance(planned, actual)}"
        )

    lines.append("")
    if variance_lines:
        lines.append("  Variance:")
        lines.extend(variance_lines)
    else:
        lines.append("  Variance:       no phases with recorded start and end dates")
    lines.append("")
    return "\n".join(lines)


def run_schedule(args: argparse.Namespace) -> ProjectSnapshot:
    import journeypilot.cli as cli

    config = load_cli_config(args)
    scheduler = PhaseScheduler(cli.build_catalog(config))
    snapshot = cli.load_snapshot(resolve_snapshot_path(args, config))

    print(cli._format_schedule_summary(snapshot, scheduler))
    return snapshot


__all__ = ["format_schedule_summary", "run_schedule"]
