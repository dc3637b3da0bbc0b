from __future__ import annotations

import logging
from datetime import date

import pytest

from journeypilot.catalog.phases import DEFAULT_PHASE_CATALOG, DEFAULT_PHASES, PhaseCatalog
from journeypilot.contracts.exceptions import UnknownPhaseError
from journeypilot.contracts.phase import PhaseRecord, PhaseStatus, PhaseType, VarianceStatus
from journeypilot.scheduling import (
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

MONDAY = date(2026, 2, 9)

PRE_COMPLETION = [
    PhaseType.SALES_HANDOVER,
    PhaseType.KICKOFF,
    PhaseType.DESIGN_WEEK,
    PhaseType.ONBOARDING,
    PhaseType.UAT,
    PhaseType.GO_LIVE,
]


@pytest.mark.parametrize(
    ("phase", "duration", "label"),
    [
        (PhaseType.SALES_HANDOVER, 2, "Sales Handover"),
        (PhaseType.KICKOFF, 1, "Kickoff"),
        (PhaseType.DESIGN_WEEK, 10, "Design Week"),
        (PhaseType.ONBOARDING, 10, "Configuration"),
        (PhaseType.UAT, 5, "UAT"),
        (PhaseType.GO_LIVE, 1, "Go-Live"),
        (PhaseType.HYPERCARE, 10, "Hypercare"),
        (PhaseType.HANDOVER_TO_SUPPORT, 2, "Handover to Support"),
    ],
)
def test_standard_catalog_values(phase: PhaseType, duration: int, label: str) -> None:
    assert standard_duration(phase) == duration
    assert phase_display_name(phase) == label


def test_standard_duration_accepts_string_names() -> None:
    assert standard_duration("UAT") == 5


def test_unknown_phase_fails_fast() -> None:
    with pytest.raises(UnknownPhaseError) as exc_info:
        standard_duration("DISCOVERY")

    assert exc_info.value.phase == "DISCOVERY"
    assert isinstance(exc_info.value, KeyError)


def test_planned_end_date() -> None:
    assert planned_end_date(MONDAY, PhaseType.DESIGN_WEEK) == date(2026, 2, 23)
    assert planned_end_date(MONDAY, PhaseType.SALES_HANDOVER) == date(2026, 2, 11)


def test_design_week_end_date_defaults_to_ten_days() -> None:
    assert design_week_end_date(MONDAY) == date(2026, 2, 23)
    assert design_week_end_date(MONDAY, 5) == date(2026, 2, 16)


def test_actual_duration() -> None:
    assert actual_duration(date(2026, 2, 2), date(2026, 2, 5)) == 3


class TestVariance:
    def test_late(self) -> None:
        result = variance(10, 12)

        assert result.days == 2
        assert result.percent == 20
        assert result.status is VarianceStatus.LATE

    def test_early(self) -> None:
        result = variance(10, 9)

        assert result.days == -1
        assert result.percent == -10
        assert result.status is VarianceStatus.EARLY

    def test_on_time(self) -> None:
        result = variance(5, 5)

        assert result.days == 0
        assert result.percent == 0
        assert result.status is VarianceStatus.ON_TIME

    def test_zero_planned_days_reports_zero_percent(self) -> None:
        result = variance(0, 3)

        assert result.percent == 0
        assert result.status is VarianceStatus.LATE

    @pytest.mark.parametrize(
        ("planned", "actual", "percent"),
        [(3, 4, 33), (3, 2, -33), (8, 9, 13), (8, 7, -12)],
    )
    def test_percent_rounds_half_up(self, planned: int, actual: int, percent: int) -> None:
        assert variance(planned, actual).percent == percent

    def test_status_serializes_to_hyphenated_value(self) -> None:
        assert variance(1, 1).status.value == "on-time"


@pytest.mark.parametrize(
    ("planned", "actual", "expected"),
    [
        (10, 10, "On time"),
        (5, 5, "On time"),
        (10, 8, "2 days early"),
        (10, 9, "1 day early"),
        (10, 7, "3 days early"),
        (10, 11, "1 day over"),
        (10, 12, "2 days over"),
        (10, 13, "3 days over"),
    ],
)
def test_format_variance(planned: int, actual: int, expected: str) -> None:
    assert format_variance(planned, actual) == expected


class TestProjectedCompletion:
    def test_from_sales_handover(self) -> None:
        # ceil(2 / 2) + 1 + 10 + 10 + 5 + 1 = 28 business days
        assert projected_completion_date(PhaseType.SALES_HANDOVER, MONDAY) == date(2026, 3, 19)

    def test_from_design_week(self) -> None:
        assert projected_completion_date(PhaseType.DESIGN_WEEK, MONDAY) == date(2026, 3, 10)

    def test_from_go_live_counts_only_half_the_current_phase(self) -> None:
        assert projected_completion_date(PhaseType.GO_LIVE, MONDAY) == date(2026, 2, 10)

    def test_post_completion_phases_are_never_added(self) -> None:
        assert projected_completion_date(PhaseType.UAT, MONDAY) == date(2026, 2, 13)
        assert projected_completion_date(PhaseType.HYPERCARE, MONDAY) == date(2026, 2, 16)

    def test_never_earlier_than_start(self) -> None:
        for phase in DEFAULT_PHASE_CATALOG:
            assert projected_completion_date(phase.type, MONDAY) >= MONDAY

    def test_later_phases_never_project_further_out(self) -> None:
        projections = [projected_completion_date(phase, MONDAY) for phase in PRE_COMPLETION]
        assert projections == sorted(projections, reverse=True)

    def test_logs_breakdown_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="journeypilot.scheduling.scheduler"):
            projected_completion_date(PhaseType.UAT, MONDAY)

        assert "4 business days remaining" in caplog.text

    def test_unknown_phase(self) -> None:
        with pytest.raises(UnknownPhaseError):
            projected_completion_date("LAUNCH", MONDAY)


class TestPhaseScheduler:
    def test_three_phase_catalog(self) -> None:
        scheduler = PhaseScheduler(PhaseCatalog(DEFAULT_PHASES[:3]))

        assert scheduler.planned_end_date(MONDAY, PhaseType.SALES_HANDOVER) == date(2026, 2, 11)
        assert scheduler.planned_end_date(MONDAY, PhaseType.DESIGN_WEEK) == date(2026, 2, 23)
        # ceil(2 / 2) + 1 + 10 = 12 business days
        assert scheduler.projected_completion_date(PhaseType.SALES_HANDOVER, MONDAY) == date(2026, 2, 25)
        with pytest.raises(UnknownPhaseError):
            scheduler.standard_duration(PhaseType.UAT)

    def test_duration_overrides_flow_through(self) -> None:
        scheduler = PhaseScheduler(DEFAULT_PHASE_CATALOG.with_durations({PhaseType.UAT: 10}))

        assert scheduler.standard_duration(PhaseType.UAT) == 10
        assert scheduler.planned_end_date(MONDAY, PhaseType.UAT) == date(2026, 2, 23)
        assert scheduler.projected_completion_date(PhaseType.UAT, MONDAY) == date(2026, 2, 17)
        assert standard_duration(PhaseType.UAT) == 5

    def test_record_variance_needs_both_dates(self) -> None:
        scheduler = PhaseScheduler()
        open_record = PhaseRecord(type=PhaseType.KICKOFF, start_date=MONDAY)

        assert scheduler.record_variance(open_record) is None

    def test_record_variance_uses_project_specific_plan(self) -> None:
        scheduler = PhaseScheduler()
        record = PhaseRecord(
            type=PhaseType.DESIGN_WEEK,
            start_date=MONDAY,
            end_date=date(2026, 2, 23),
            planned_duration_business_days=8,
        )

        result = scheduler.record_variance(record)

        assert result is not None
        assert result.days == 2
        assert result.status is VarianceStatus.LATE

    def test_timeline_lays_phases_back_to_back(self) -> None:
        timeline = PhaseScheduler().timeline(MONDAY)

        assert [p.type for p in timeline] == [p.type for p in DEFAULT_PHASE_CATALOG]
        assert timeline[0].start_date == MONDAY
        assert timeline[0].planned_end_date == date(2026, 2, 11)
        for previous, current in zip(timeline, timeline[1:]):
            assert current.start_date == previous.planned_end_date


def test_journey_progress() -> None:
    statuses = {
        PhaseType.SALES_HANDOVER: PhaseStatus.COMPLETE,
        PhaseType.KICKOFF: PhaseStatus.COMPLETE,
        PhaseType.DESIGN_WEEK: PhaseStatus.IN_PROGRESS,
    }

    assert journey_progress(statuses) == 25
    assert journey_progress({}) == 0


def test_phase_navigation() -> None:
    assert phase_order(PhaseType.DESIGN_WEEK) == 3
    assert phase_by_order(3) is not None
    assert phase_by_order(3).type is PhaseType.DESIGN_WEEK
    assert phase_by_order(0) is None
    assert phase_by_order(9) is None
    assert next_phase(PhaseType.GO_LIVE) is PhaseType.HYPERCARE
    assert next_phase(PhaseType.HANDOVER_TO_SUPPORT) is None
    assert previous_phase(PhaseType.KICKOFF) is PhaseType.SALES_HANDOVER
    assert previous_phase(PhaseType.SALES_HANDOVER) is None
