"""Public API surface for journeypilot."""

__version__ = "0.1.0"

from journeypilot.catalog import BUSINESS_SECTIONS, DEFAULT_PHASE_CATALOG, TECHNICAL_SECTIONS, PhaseCatalog, SectionTable
from journeypilot.config import build_catalog, load_config
from journeypilot.contracts.completeness import (
    OverallCompleteness,
    ProfileCompleteness,
    ProfileSection,
    SectionCompleteness,
    SectionMeta,
)
from journeypilot.contracts.config import JourneyPilotConfig
from journeypilot.contracts.exceptions import (
    CatalogError,
    ConfigError,
    JourneyPilotError,
    SnapshotLoadError,
    UnknownPhaseError,
    UnknownSectionError,
)
from journeypilot.contracts.items import ExtractedItem, ExtractedItemType, ReviewStatus
from journeypilot.contracts.phase import PhaseDefinition, PhaseRecord, PhaseStatus, PhaseType, Variance, VarianceStatus
from journeypilot.contracts.profile import BusinessProfile, TechnicalProfile
from journeypilot.contracts.snapshot import ProjectSnapshot
from journeypilot.scheduling import (
    PhaseScheduler,
    actual_duration,
    add_business_days,
    business_days_between,
    format_variance,
    phase_display_name,
    planned_end_date,
    projected_completion_date,
    standard_duration,
    variance,
)
from journeypilot.scoring import (
    CompletenessScorer,
    group_items_by_section,
    overall_completeness,
    profile_completeness,
    section_completeness,
)
from journeypilot.snapshot import SnapshotLoader, load_snapshot

__all__ = [
    "BUSINESS_SECTIONS",
    "DEFAULT_PHASE_CATALOG",
    "TECHNICAL_SECTIONS",
    "BusinessProfile",
    "CatalogError",
    "CompletenessScorer",
    "ConfigError",
    "ExtractedItem",
    "ExtractedItemType",
    "JourneyPilotConfig",
    "JourneyPilotError",
    "OverallCompleteness",
    "PhaseCatalog",
    "PhaseDefinition",
    "PhaseRecord",
    "PhaseScheduler",
    "PhaseStatus",
    "PhaseType",
    "ProfileCompleteness",
    "ProfileSection",
    "ProjectSnapshot",
    "ReviewStatus",
    "SectionCompleteness",
    "SectionMeta",
    "SectionTable",
    "SnapshotLoadError",
    "SnapshotLoader",
    "TechnicalProfile",
    "UnknownPhaseError",
    "UnknownSectionError",
    "Variance",
    "VarianceStatus",
    "actual_duration",
    "add_business_days",
    "build_catalog",
    "business_days_between",
    "format_variance",
    "group_items_by_section",
    "load_config",
    "load_snapshot",
    "overall_completeness",
    "phase_display_name",
    "planned_end_date",
    "profile_completeness",
    "projected_completion_date",
    "section_completeness",
    "standard_duration",
    "variance",
]
