"""Public contracts for journeypilot."""

from journeypilot.contracts.completeness import (
    OverallCompleteness,
    ProfileCompleteness,
    ProfileKind,
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
from journeypilot.contracts.items import ExtractedItem, ExtractedItemType, ReviewStatus, SessionRef
from journeypilot.contracts.phase import (
    PhaseDefinition,
    PhaseRecord,
    PhaseStatus,
    PhaseType,
    PlannedPhase,
    Variance,
    VarianceStatus,
)
from journeypilot.contracts.profile import BusinessProfile, TechnicalProfile
from journeypilot.contracts.snapshot import ProjectSnapshot

__all__ = [
    "BusinessProfile",
    "CatalogError",
    "ConfigError",
    "ExtractedItem",
    "ExtractedItemType",
    "JourneyPilotConfig",
    "JourneyPilotError",
    "OverallCompleteness",
    "PhaseDefinition",
    "PhaseRecord",
    "PhaseStatus",
    "PhaseType",
    "PlannedPhase",
    "ProfileCompleteness",
    "ProfileKind",
    "ProfileSection",
    "ProjectSnapshot",
    "ReviewStatus",
    "SectionCompleteness",
    "SectionMeta",
    "SessionRef",
    "SnapshotLoadError",
    "TechnicalProfile",
    "UnknownPhaseError",
    "UnknownSectionError",
    "Variance",
    "VarianceStatus",
]
