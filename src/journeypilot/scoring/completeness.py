"""Section and profile completeness scoring.

A section's percentage is the lower of two signals:

* **item count** - effective approved items against the section's required count,
  where manually covered types count as virtual items;
* **type coverage** - distinct covered types against the section's mapped types.

Taking the minimum means a pile of items of one type cannot make a
multi-faceted section look complete. Items still awaiting review cap a
nearly-complete section at 90% so that unresolved work never shows as done.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Set

from journeypilot.catalog.sections import BUSINESS_SECTIONS, TECHNICAL_SECTIONS, SectionTable, coerce_section
from journeypilot.contracts.completeness import (
    OverallCompleteness,
    ProfileCompleteness,
    ProfileSection,
    SectionCompleteness,
    SectionMeta,
)
from journeypilot.contracts.exceptions import UnknownSectionError
from journeypilot.contracts.items import ExtractedItem, ExtractedItemType
from journeypilot.contracts.profile import BusinessProfile, TechnicalProfile
from journeypilot.scoring.coverage import business_covered_types, technical_covered_types
from journeypilot.utils import percent_of, round_half_up

logger = logging.getLogger(__name__)

PENDING_CAP_THRESHOLD = 80
PENDING_CAP = 90


def group_items_by_section(
    items: Iterable[ExtractedItem],
    table: SectionTable,
) -> dict[ProfileSection, list[ExtractedItem]]:
    """Bucket items into every section of *table* whose mapped types include the item's type.

    A type can feed several sections (``GOAL`` counts for both identity and
    business context), so one item may appear in more than one bucket.
    """
    grouped: dict[ProfileSection, list[ExtractedItem]] = {key: [] for key in table.keys()}
    for item in items:
        for section in table.sections_for_type(item.type):
            grouped[section].append(item)
    return grouped


def section_completeness(
    items: Iterable[ExtractedItem],
    meta: SectionMeta,
    mapped_types: Iterable[ExtractedItemType] | None = None,
    manually_covered_types: Set[ExtractedItemType] | None = None,
) -> SectionCompleteness:
    """Score one section.

    Args:
        items: Extracted items; those whose type is not mapped to the section are ignored.
        meta: Section metadata (key and required count).
        mapped_types: Item types that count as evidence. Defaults to ``meta.item_types``.
        manually_covered_types: Types already satisfied by the manual profile entry.

    Returns:
        The section's percentage and its breakdown.
    """
    mapped = tuple(meta.item_types if mapped_types is None else dict.fromkeys(mapped_types))
    mapped_set = frozenset(mapped)
    manual = frozenset(manually_covered_types or ()) & mapped_set

    approved: list[ExtractedItem] = []
    pending: list[ExtractedItem] = []
    for item in items:
        if item.type not in mapped_set:
            continue
        if item.is_approved:
            approved.append(item)
        elif item.is_pending:
            pending.append(item)

    covered = {item.type for item in approved} | manual

    effective_count = max(len(approved), len(manual))
    if meta.required_count > 0:
        item_count_score = min(100, percent_of(effective_count, meta.required_count))
    else:
        item_count_score = 100

    type_coverage_score = percent_of(len(covered), len(mapped)) if mapped else 100

    percentage = min(item_count_score, type_coverage_score)
    if pending and percentage >= PENDING_CAP_THRESHOLD:
        percentage = min(percentage, PENDING_CAP)

    return SectionCompleteness(
        section=meta.key,
        percentage=percentage,
        approved_count=len(approved),
        pending_count=len(pending),
        covered_types_count=len(covered),
        total_types_count=len(mapped),
        required_count=meta.required_count,
        item_count_score=item_count_score,
        type_coverage_score=type_coverage_score,
        missing_types=[t for t in mapped if t not in covered],
    )


def overall_completeness(
    grouped_items: Mapping[ProfileSection | str, Iterable[ExtractedItem]],
    table: SectionTable,
    manually_covered: Mapping[ProfileSection, Set[ExtractedItemType]] | None = None,
) -> OverallCompleteness:
    """Score every section of *table* and roll them up into an unweighted mean.

    Sections of *table* missing from *grouped_items* are scored with no items.

    Args:
        grouped_items: Items per section, as built by :func:`group_items_by_section`.
        table: Sections to score.
        manually_covered: Item types the manual profile entry already covers, per
            section. Build it from a profile with
            :func:`~journeypilot.scoring.coverage.business_covered_types` or
            :func:`~journeypilot.scoring.coverage.technical_covered_types`;
            :meth:`CompletenessScorer.profile` does this for both profiles.

    Raises:
        UnknownSectionError: *grouped_items* names a section that is not in *table*.
    """
    by_section: dict[ProfileSection, Iterable[ExtractedItem]] = {}
    for key, items in grouped_items.items():
        section = coerce_section(key)
        if section not in table:
            raise UnknownSectionError(key)
        by_section[section] = items

    manual = manually_covered or {}
    sections: dict[ProfileSection, SectionCompleteness] = {}
    for meta in table:
        result = section_completeness(by_section.get(meta.key, ()), meta, None, manual.get(meta.key))
        sections[meta.key] = result
        logger.debug(
            "%s: %d%% (items %d%%, types %d%%, pending %d)",
            meta.key.value,
            result.percentage,
            result.item_count_score,
            result.type_coverage_score,
            result.pending_count,
        )

    total = sum(result.percentage for result in sections.values())
    overall = round_half_up(total, len(sections)) if sections else 0
    return OverallCompleteness(overall=overall, sections=sections)


class CompletenessScorer:
    """Completeness scoring over one business and one technical section table."""

    def __init__(
        self,
        business_sections: SectionTable = BUSINESS_SECTIONS,
        technical_sections: SectionTable = TECHNICAL_SECTIONS,
    ) -> None:
        self.business_sections = business_sections
        self.technical_sections = technical_sections

    def table_for(self, section: ProfileSection | str) -> SectionTable:
        key = coerce_section(section)
        for table in (self.business_sections, self.technical_sections):
            if key in table:
                return table
        raise UnknownSectionError(section)

    def section(
        self,
        items: Iterable[ExtractedItem],
        section: ProfileSection | str,
        manually_covered_types: Set[ExtractedItemType] | None = None,
    ) -> SectionCompleteness:
        meta = self.table_for(section).get(section)
        return section_completeness(items, meta, None, manually_covered_types)

    def profile(
        self,
        items: Iterable[ExtractedItem],
        business_profile: BusinessProfile | None = None,
        technical_profile: TechnicalProfile | None = None,
    ) -> ProfileCompleteness:
        """Score both profiles from raw extracted items plus the optional manual entries."""
        materialized = list(items)
        business = overall_completeness(
            group_items_by_section(materialized, self.business_sections),
            self.business_sections,
            business_covered_types(business_profile),
        )
        technical = overall_completeness(
            group_items_by_section(materialized, self.technical_sections),
            self.technical_sections,
            technical_covered_types(technical_profile),
        )
        return ProfileCompleteness(business=business, technical=technical)


_DEFAULT = CompletenessScorer()


def profile_completeness(
    items: Iterable[ExtractedItem],
    business_profile: BusinessProfile | None = None,
    technical_profile: TechnicalProfile | None = None,
) -> ProfileCompleteness:
    return _DEFAULT.profile(items, business_profile, technical_profile)
