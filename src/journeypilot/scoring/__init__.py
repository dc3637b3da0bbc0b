"""Profile completeness scoring entrypoints."""

from journeypilot.scoring.completeness import (
    CompletenessScorer,
    group_items_by_section,
    overall_completeness,
    profile_completeness,
    section_completeness,
)
from journeypilot.scoring.coverage import business_covered_types, profile_covered_types, technical_covered_types

__all__ = [
    "CompletenessScorer",
    "business_covered_types",
    "group_items_by_section",
    "overall_completeness",
    "profile_completeness",
    "profile_covered_types",
    "section_completeness",
    "technical_covered_types",
]
