"""Phase scheduling: planned end dates, variance and go-live projection.

:class:`PhaseScheduler` binds a :class:`PhaseCatalog`; the module-level
functions delegate to a scheduler over :data:`DEFAULT_PHASE_CATALOG`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date

from journeypilot.catalog.phases import DEFAULT_PHASE_CATALOG, PhaseCatalog
from journeypilot.contracts.phase import (
    PhaseDefinition,
    PhaseRecord,
    PhaseStatus,
    PhaseType,
    PlannedPhase,
    Variance,
    VarianceStatus,
)
from journeypilot.scheduling.business_days import DateT, add_business_days, business_days_between
from journeypilot.utils import ceil_div, percent_of

logger = logging.getLogger(__name__)

DEFAULT_DESIGN_WEEK_DAYS = 10


def variance(planned_days: int, actual_days: int) -> Variance:
    """Compare an actual duration against the plan.

    ``days`` is ``actual - planned`` (positive means the phase ran long).
    ``percent`` is relative to the plan and is 0 when nothing was planned.
    """
    days = actual_days - planned_days
    percent = percent_of(days, planned_days) if planned_days > 0 else 0

    if days < 0:
        status = VarianceStatus.EARLY
    elif days > 0:
        status = VarianceStatus.LATE
    else:
        status = VarianceStatus.ON_TIME
    return Variance(days=days, percent=percent, status=status)


def format_variance(planned_days: int, actual_days: int) -> str:
    result = variance(planned_days, actual_days)
    if result.status is VarianceStatus.ON_TIME:
        return "On time"
    amount = abs(result.days)
    unit = "day" if amount == 1 else "days"
    if result.status is VarianceStatus.EARLY:
        return f"{amount} {unit} early"
    return f"{amount} {unit} over"


def actual_duration(start: date, end: date) -> int:
    """Business days a phase actually took."""
    return business_days_between(start, end)


def design_week_end_date(start: DateT, planned_duration_days: int = DEFAULT_DESIGN_WEEK_DAYS) -> DateT:
    return add_business_days(start, planned_duration_days)


class PhaseScheduler:
    """Scheduling calculations over one phase catalog."""

    def __init__(self, catalog: PhaseCatalog = DEFAULT_PHASE_CATALOG) -> None:
        self.catalog = catalog

    def standard_duration(self, phase_type: PhaseType | str) -> int:
        return self.catalog.standard_duration(phase_type)

    def phase_display_name(self, phase_type: PhaseType | str) -> str:
        return self.catalog.display_name(phase_type)

    def planned_end_date(self, start: DateT, phase_type: PhaseType | str) -> DateT:
        return add_business_days(start, self.standard_duration(phase_type))

    def projected_completion_date(self, current_phase: PhaseType | str, current_phase_start_date: DateT) -> DateT:
        """Estimate the go-live date from the current position in the journey.

        This is a heuristic, not a committed date. The current phase is assumed
        to be half done and contributes ``ceil(duration / 2)`` business days;
        every later phase contributes its full standard duration, stopping at
        the first post-completion phase (hypercare and support handover are
        support activity, not time-to-completion).
        """
        current = self.catalog.get(current_phase)
        remaining = ceil_div(current.standard_duration_business_days, 2)

        for phase in self.catalog.following(current.type):
            if phase.post_completion:
                break
            remaining += phase.standard_duration_business_days

        logger.debug(
            "projecting completion from %s (start %s): %d business days remaining",
            current.type.value,
            current_phase_start_date,
            remaining,
        )
        return add_business_days(current_phase_start_date, remaining)

    def planned_days_for(self, record: PhaseRecord) -> int:
        return record.planned_duration_business_days or self.standard_duration(record.type)

    def record_variance(self, record: PhaseRecord) -> Variance | None:
        """Variance of a phase that has both an actual start and end date, else ``None``."""
        if record.start_date is None or record.end_date is None:
            return None
        return variance(self.planned_days_for(record), actual_duration(record.start_date, record.end_date))

    def timeline(self, start_date: date) -> list[PlannedPhase]:
        """Lay every catalog phase out back to back from *start_date*."""
        planned: list[PlannedPhase] = []
        cursor = start_date
        for phase in self.catalog:
            end = add_business_days(cursor, phase.standard_duration_business_days)
            planned.append(
                PlannedPhase(
                    type=phase.type,
                    label=phase.label,
                    start_date=cursor,
                    planned_end_date=end,
                    duration_business_days=phase.standard_duration_business_days,
                )
            )
            cursor = end
        return planned

    def journey_progress(self, phase_statuses: Mapping[PhaseType, PhaseStatus]) -> int:
        """Percentage of catalog phases marked complete."""
        completed = sum(1 for phase in self.catalog if phase_statuses.get(phase.type) == PhaseStatus.COMPLETE)
        return percent_of(completed, len(self.catalog))

    def phase_by_order(self, order: int) -> PhaseDefinition | None:
        return self.catalog.by_order(order)

    def phase_order(self, phase_type: PhaseType | str) -> int:
        return self.catalog.order_of(phase_type)

    def next_phase(self, phase_type: PhaseType | str) -> PhaseType | None:
        return self.catalog.next_phase(phase_type)

    def previous_phase(self, phase_type: PhaseType | str) -> PhaseType | None:
        return self.catalog.previous_phase(phase_type)


_DEFAULT = PhaseScheduler()


def standard_duration(phase_type: PhaseType | str) -> int:
    return _DEFAULT.standard_duration(phase_type)


def phase_display_name(phase_type: PhaseType | str) -> str:
    return _DEFAULT.phase_display_name(phase_type)


def planned_end_date(start: DateT, phase_type: PhaseType | str) -> DateT:
    return _DEFAULT.planned_end_date(start, phase_type)


def projected_completion_date(current_phase: PhaseType | str, current_phase_start_date: DateT) -> DateT:
    """Heuristic go-live estimate over the default catalog; see :meth:`PhaseScheduler.projected_completion_date`."""
    return _DEFAULT.projected_completion_date(current_phase, current_phase_start_date)


def journey_progress(phase_statuses: Mapping[PhaseType, PhaseStatus]) -> int:
    return _DEFAULT.journey_progress(phase_statuses)


def phase_by_order(order: int) -> PhaseDefinition | None:
    return _DEFAULT.phase_by_order(order)


def phase_order(phase_type: PhaseType | str) -> int:
    return _DEFAULT.phase_order(phase_type)


def next_phase(phase_type: PhaseType | str) -> PhaseType | None:
    return _DEFAULT.next_phase(phase_type)


def previous_phase(phase_type: PhaseType | str) -> PhaseType | None:
    return _DEFAULT.previous_phase(phase_type)
