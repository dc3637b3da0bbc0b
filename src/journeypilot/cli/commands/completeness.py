"""Completeness command formatting."""

from __future__ import annotations

import argparse

from journeypilot.cli.common import load_cli_config, resolve_snapshot_path
from journeypilot.cli.report.rich import RichCompletenessReport
from journeypilot.contracts.completeness import OverallCompleteness, ProfileCompleteness
from journeypilot.contracts.snapshot import ProjectSnapshot
from journeypilot.scoring.completeness import CompletenessScorer


def _missing_line(result: OverallCompleteness) -> str | None:
    gaps = [key.value for key, section in result.sections.items() if section.percentage < 100]
    if not gaps:
        return None
    return f"    Incomplete: {', '.join(gaps)}"


def format_completeness_summary(snapshot: ProjectSnapshot, result: ProfileCompleteness) -> str:
    title = f"journeypilot - completeness ({snapshot.name})" if snapshot.name else "journeypilot - completeness"
    lines = [
        "",
        title,
        "",
        f"  Items:      {len(snapshot.extracted_items)} extracted",
        f"  Business:   {result.business.overall}%",
    ]
    business_gaps = _missing_line(result.business)
    if business_gaps:
        lines.append(business_gaps)
    lines.append(f"  Technical:  {result.technical.overall}%")
    technical_gaps = _missing_line(result.technical)
    if technical_gaps:
        lines.append(technical_gaps)
    lines.append("")
    return "\n".join(lines)


def run_completeness(args: argparse.Namespace) -> ProfileCompleteness:
    import journeypilot.cli as cli

    config = load_cli_config(args)
    snapshot = cli.load_snapshot(resolve_snapshot_path(args, config))

    scorer = CompletenessScorer()
    result = scorer.profile(snapshot.extracted_items, snapshot.business_profile, snapshot.technical_profile)

    print(cli._format_completeness_summary(snapshot, result))
    report = RichCompletenessReport()
    report.render("Business profile", result.business, scorer.business_sections)
    report.render("Technical profile", result.technical, scorer.technical_sections)
    return result


__all__ = ["format_completeness_summary", "run_completeness"]
