"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, PositiveInt

from journeypilot.contracts.phase import PhaseType


class JourneyPilotConfig(BaseModel):
    """Process-level settings, read once at startup.

    Attributes:
        phase_durations: Per-phase overrides of the standard duration, in business days.
        design_week_duration_days: Planned length of a Design Week.
        snapshot_path: Default project snapshot used when the CLI gets no ``--snapshot``.
    """

    phase_durations: dict[PhaseType, PositiveInt] = Field(default_factory=dict)
    design_week_duration_days: PositiveInt = 10
    snapshot_path: Path | None = None

    model_config = {"frozen": True}
