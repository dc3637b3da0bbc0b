"""Static configuration tables: phase catalog and profile section tables."""

from journeypilot.catalog.phases import (
    DEFAULT_PHASE_CATALOG,
    DEFAULT_PHASES,
    PhaseCatalog,
    coerce_phase_type,
    validate_phases,
)
from journeypilot.catalog.sections import BUSINESS_SECTIONS, TECHNICAL_SECTIONS, SectionTable, coerce_section

__all__ = [
    "BUSINESS_SECTIONS",
    "DEFAULT_PHASES",
    "DEFAULT_PHASE_CATALOG",
    "TECHNICAL_SECTIONS",
    "PhaseCatalog",
    "SectionTable",
    "coerce_phase_type",
    "coerce_section",
    "validate_phases",
]
