"""Phase scheduling entrypoints."""

from journeypilot.scheduling.business_days import add_business_days, business_days_between, is_business_day
from journeypilot.scheduling.scheduler import (
    PhaseScheduler,
    actual_duration,
    design_week_end_date,
    format_variance,
    journey_progress,
    next_phase,
    phase_by_order,
    phase_display_name,
    phase_order,
    planned_end_date,
    previous_phase,
    projected_completion_date,
    standard_duration,
    variance,
)

__all__ = [
    "PhaseScheduler",
    "actual_duration",
    "add_business_days",
    "business_days_between",
    "design_week_end_date",
    "format_variance",
    "is_business_day",
    "journey_progress",
    "next_phase",
    "phase_by_order",
    "phase_display_name",
    "phase_order",
    "planned_end_date",
    "previous_phase",
    "projected_completion_date",
    "standard_duration",
    "variance",
]
