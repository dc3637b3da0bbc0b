"""Profile section tables: which extracted item types count as evidence for which section."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from journeypilot.contracts.completeness import ProfileKind, ProfileSection, SectionMeta
from journeypilot.contracts.exceptions import CatalogError, UnknownSectionError
from journeypilot.contracts.items import ExtractedItemType


def coerce_section(value: ProfileSection | str) -> ProfileSection:
    if isinstance(value, ProfileSection):
        return value
    try:
        return ProfileSection(value)
    except ValueError as exc:
        raise UnknownSectionError(value) from exc


class SectionTable:
    """Read-only table of section metadata for one profile kind."""

    def __init__(self, kind: ProfileKind, sections: tuple[SectionMeta, ...] | list[SectionMeta]) -> None:
        ordered = tuple(sections)
        errors: list[str] = []
        keys = [meta.key for meta in ordered]
        duplicates = sorted({k.value for k in keys if keys.count(k) > 1})
        if duplicates:
            errors.append(f"{kind.value} table contains duplicate sections {duplicates}")
        for meta in ordered:
            if len(set(meta.item_types)) != len(meta.item_types):
                errors.append(f"section {meta.key.value} lists an item type twice")
        if errors:
            raise CatalogError(errors)

        self.kind = kind
        self._sections = ordered
        self._by_key: Mapping[ProfileSection, SectionMeta] = MappingProxyType({m.key: m for m in ordered})

    def __iter__(self) -> Iterator[SectionMeta]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def keys(self) -> tuple[ProfileSection, ...]:
        return tuple(meta.key for meta in self._sections)

    def get(self, key: ProfileSection | str) -> SectionMeta:
        """Return the metadata of *key*.

        Raises:
            UnknownSectionError: The section is not part of this table.
        """
        section = coerce_section(key)
        try:
            return self._by_key[section]
        except KeyError:
            raise UnknownSectionError(key) from None

    def sections_for_type(self, item_type: ExtractedItemType) -> tuple[ProfileSection, ...]:
        return tuple(meta.key for meta in self._sections if item_type in meta.item_types)


_T = ExtractedItemType

BUSINESS_SECTIONS = SectionTable(
    ProfileKind.BUSINESS,
    (
        SectionMeta(
            key=ProfileSection.IDENTITY,
            title="Identity",
            description="Who is this Digital Employee? Name, role, and stakeholders",
            required_count=3,
            item_types=(_T.STAKEHOLDER, _T.GOAL, _T.BUSINESS_CASE),
        ),
        SectionMeta(
            key=ProfileSection.BUSINESS_CONTEXT,
            title="Business Context",
            description="Problem being solved, volumes, costs, and success metrics",
            required_count=3,
            item_types=(_T.GOAL, _T.KPI_TARGET, _T.VOLUME_EXPECTATION, _T.COST_PER_CASE, _T.PEAK_PERIODS),
        ),
        SectionMeta(
            key=ProfileSection.CHANNELS,
            title="Channels",
            description="Input channels with volume distribution and SLAs",
            required_count=1,
            item_types=(_T.CHANNEL, _T.CHANNEL_VOLUME, _T.CHANNEL_SLA, _T.CHANNEL_RULE),
        ),
        SectionMeta(
            key=ProfileSection.SKILLS,
            title="Skills",
            description="What the DE can do, knowledge sources, and tone",
            required_count=3,
            item_types=(
                _T.SKILL_ANSWER,
                _T.SKILL_ROUTE,
                _T.SKILL_APPROVE_REJECT,
                _T.SKILL_REQUEST_INFO,
                _T.SKILL_NOTIFY,
                _T.SKILL_OTHER,
                _T.KNOWLEDGE_SOURCE,
                _T.BRAND_TONE,
                _T.COMMUNICATION_STYLE,
                _T.RESPONSE_TEMPLATE,
            ),
        ),
        SectionMeta(
            key=ProfileSection.PROCESS,
            title="Process",
            description="Happy path steps, exceptions, and case types",
            required_count=3,
            item_types=(
                _T.HAPPY_PATH_STEP,
                _T.EXCEPTION_CASE,
                _T.CASE_TYPE,
                _T.DOCUMENT_TYPE,
                _T.BUSINESS_RULE,
                _T.ESCALATION_TRIGGER,
            ),
        ),
        SectionMeta(
            key=ProfileSection.GUARDRAILS,
            title="Guardrails",
            description="What the DE must never/always do, limits and restrictions",
            required_count=2,
            item_types=(_T.GUARDRAIL_NEVER, _T.GUARDRAIL_ALWAYS, _T.FINANCIAL_LIMIT, _T.LEGAL_RESTRICTION),
        ),
        SectionMeta(
            key=ProfileSection.KPIS,
            title="KPIs",
            description="Success metrics and timeline targets",
            required_count=2,
            item_types=(_T.KPI_TARGET, _T.TIMELINE_CONSTRAINT),
        ),
    ),
)

TECHNICAL_SECTIONS = SectionTable(
    ProfileKind.TECHNICAL,
    (
        SectionMeta(
            key=ProfileSection.INTEGRATIONS,
            title="Integrations",
            description="Systems the DE connects to with purpose and access type",
            required_count=1,
            item_types=(_T.SYSTEM_INTEGRATION,),
        ),
        SectionMeta(
            key=ProfileSection.DATA_FIELDS,
            title="Data Fields",
            description="Specific fields needed from each system",
            required_count=3,
            item_types=(_T.DATA_FIELD,),
        ),
        SectionMeta(
            key=ProfileSection.SECURITY,
            title="Security & Compliance",
            description="Authentication, encryption, and compliance requirements",
            required_count=1,
            item_types=(_T.SECURITY_REQUIREMENT, _T.COMPLIANCE_REQUIREMENT),
        ),
        SectionMeta(
            key=ProfileSection.APIS,
            title="APIs & Endpoints",
            description="API endpoints, error handling, and webhooks",
            required_count=1,
            item_types=(_T.API_ENDPOINT, _T.ERROR_HANDLING),
        ),
        SectionMeta(
            key=ProfileSection.CREDENTIALS,
            title="Credentials & Contacts",
            description="Technical contacts and credential owners",
            required_count=1,
            item_types=(_T.TECHNICAL_CONTACT,),
        ),
    ),
)
