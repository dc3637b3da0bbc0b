"""Phase contracts: journey phase types, definitions and schedule results."""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, Field, PositiveInt


class PhaseType(StrEnum):
    """The eight stages of the Digital Employee onboarding journey."""

    SALES_HANDOVER = "SALES_HANDOVER"
    KICKOFF = "KICKOFF"
    DESIGN_WEEK = "DESIGN_WEEK"
    ONBOARDING = "ONBOARDING"
    UAT = "UAT"
    GO_LIVE = "GO_LIVE"
    HYPERCARE = "HYPERCARE"
    HANDOVER_TO_SUPPORT = "HANDOVER_TO_SUPPORT"


class PhaseStatus(StrEnum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    BLOCKED = "BLOCKED"
    COMPLETE = "COMPLETE"
    SKIPPED = "SKIPPED"


class VarianceStatus(StrEnum):
    EARLY = "early"
    ON_TIME = "on-time"
    LATE = "late"


class PhaseDefinition(BaseModel):
    """One entry of the phase catalog.

    Attributes:
        type: Phase identifier.
        order: 1-based rank inside the catalog.
        label: Display name.
        short_label: Compact display name for narrow layouts.
        description: One-line description of the phase.
        standard_duration_business_days: Expected duration when the phase runs to plan.
        post_completion: *True* for phases that happen after the go-live milestone
            (support activity, not time-to-completion).
    """

    type: PhaseType
    order: PositiveInt
    label: str
    short_label: str = ""
    description: str = ""
    standard_duration_business_days: PositiveInt
    post_completion: bool = False

    model_config = {"frozen": True}


class Variance(BaseModel):
    """Signed difference between planned and actual duration."""

    days: int
    percent: int
    status: VarianceStatus

    model_config = {"frozen": True}


class PlannedPhase(BaseModel):
    """A phase placed on a back-to-back planned timeline."""

    type: PhaseType
    label: str
    start_date: date
    planned_end_date: date
    duration_business_days: int

    model_config = {"frozen": True}


class PhaseRecord(BaseModel):
    """Observed state of one phase of a project, as supplied by the caller."""

    type: PhaseType
    status: PhaseStatus = PhaseStatus.NOT_STARTED
    start_date: date | None = None
    end_date: date | None = None
    planned_duration_business_days: PositiveInt | None = Field(default=None)
    """Overrides the catalog's standard duration for this project."""
