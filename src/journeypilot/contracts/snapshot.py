"""Project snapshot contract: everything the CLI feeds into the engine."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, model_validator

from journeypilot.contracts.items import ExtractedItem
from journeypilot.contracts.phase import PhaseRecord, PhaseType
from journeypilot.contracts.profile import BusinessProfile, TechnicalProfile


class ProjectSnapshot(BaseModel):
    """Point-in-time view of one Digital Employee's onboarding."""

    name: str = ""
    current_phase: PhaseType
    current_phase_start_date: date
    phases: list[PhaseRecord] = Field(default_factory=list)
    extracted_items: list[ExtractedItem] = Field(default_factory=list)
    business_profile: BusinessProfile | None = None
    technical_profile: TechnicalProfile | None = None

    @model_validator(mode="after")
    def validate_unique_phases(self) -> ProjectSnapshot:
        seen = [record.type for record in self.phases]
        if len(set(seen)) != len(seen):
            raise ValueError("phases must not contain the same phase type twice")
        return self
