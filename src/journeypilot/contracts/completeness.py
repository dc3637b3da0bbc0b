"""Completeness contracts: profile sections, section metadata and results."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, NonNegativeInt

from journeypilot.contracts.items import ExtractedItemType


class ProfileKind(StrEnum):
    BUSINESS = "business"
    TECHNICAL = "technical"


class ProfileSection(StrEnum):
    """Logical groupings of profile fields, used for display and scoring."""

    # Business profile
    IDENTITY = "identity"
    BUSINESS_CONTEXT = "business_context"
    CHANNELS = "channels"
    SKILLS = "skills"
    PROCESS = "process"
    GUARDRAILS = "guardrails"
    KPIS = "kpis"

    # Technical profile
    INTEGRATIONS = "integrations"
    DATA_FIELDS = "data_fields"
    SECURITY = "security"
    APIS = "apis"
    CREDENTIALS = "credentials"


class SectionMeta(BaseModel):
    """Static scoring configuration for one profile section.

    Attributes:
        key: Section identifier.
        title: Display title.
        description: What the section captures.
        required_count: Approved items (or equivalent manual signal) needed to
            reach 100% on the item-count dimension.
        item_types: Extracted item types that count as evidence for the section.
    """

    key: ProfileSection
    title: str
    description: str = ""
    required_count: NonNegativeInt
    item_types: tuple[ExtractedItemType, ...] = ()

    model_config = {"frozen": True}


class SectionCompleteness(BaseModel):
    section: ProfileSection
    percentage: int
    approved_count: int
    pending_count: int
    covered_types_count: int
    total_types_count: int
    required_count: int
    item_count_score: int
    """Effective approved items vs. required count (0-100)."""
    type_coverage_score: int
    """Covered types vs. mapped types (0-100)."""
    missing_types: list[ExtractedItemType] = Field(default_factory=list)

    model_config = {"frozen": True}


class OverallCompleteness(BaseModel):
    overall: int
    sections: dict[ProfileSection, SectionCompleteness] = Field(default_factory=dict)


class ProfileCompleteness(BaseModel):
    business: OverallCompleteness
    technical: OverallCompleteness
