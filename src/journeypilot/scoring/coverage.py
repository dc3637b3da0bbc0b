"""Map manually entered profile fields to the extracted item types they cover.

A filled-in profile field is interchangeable evidence with an approved
extracted item of the matching type. Reducing both sources to "which
:class:`ExtractedItemType` values are covered" lets the scorer reconcile them
with a plain set union.
"""

from __future__ import annotations

from journeypilot.contracts.completeness import ProfileSection
from journeypilot.contracts.items import ExtractedItemType
from journeypilot.contracts.profile import BusinessProfile, SecurityCategory, SkillType, TechnicalProfile

CoveredTypes = dict[ProfileSection, frozenset[ExtractedItemType]]

_T = ExtractedItemType
_S = ProfileSection

_SKILL_TYPES: dict[SkillType, ExtractedItemType] = {
    SkillType.ANSWER: _T.SKILL_ANSWER,
    SkillType.ROUTE: _T.SKILL_ROUTE,
    SkillType.APPROVE_REJECT: _T.SKILL_APPROVE_REJECT,
    SkillType.REQUEST_INFO: _T.SKILL_REQUEST_INFO,
    SkillType.NOTIFY: _T.SKILL_NOTIFY,
}

BUSINESS_KEYS = (
    _S.IDENTITY,
    _S.BUSINESS_CONTEXT,
    _S.CHANNELS,
    _S.SKILLS,
    _S.PROCESS,
    _S.GUARDRAILS,
    _S.KPIS,
)
TECHNICAL_KEYS = (_S.INTEGRATIONS, _S.DATA_FIELDS, _S.SECURITY, _S.APIS, _S.CREDENTIALS)


def business_covered_types(profile: BusinessProfile | None) -> CoveredTypes:
    """Item types covered by each business section of a manual profile."""
    covered: dict[ProfileSection, set[ExtractedItemType]] = {key: set() for key in BUSINESS_KEYS}
    if profile is None:
        return _freeze(covered)

    identity = profile.identity
    if identity.stakeholders:
        covered[_S.IDENTITY].add(_T.STAKEHOLDER)
    if identity.description:
        covered[_S.IDENTITY].update({_T.GOAL, _T.BUSINESS_CASE})

    context = profile.business_context
    if context.problem_statement:
        covered[_S.BUSINESS_CONTEXT].add(_T.GOAL)
    if context.volume_per_month is not None:
        covered[_S.BUSINESS_CONTEXT].add(_T.VOLUME_EXPECTATION)
    if context.cost_per_case is not None:
        covered[_S.BUSINESS_CONTEXT].add(_T.COST_PER_CASE)
    if context.peak_periods:
        covered[_S.BUSINESS_CONTEXT].add(_T.PEAK_PERIODS)

    if profile.kpis:
        covered[_S.KPIS].update({_T.KPI_TARGET, _T.TIMELINE_CONSTRAINT})

    # A configured channel list answers every channel question at once.
    if profile.channels:
        covered[_S.CHANNELS].update({_T.CHANNEL, _T.CHANNEL_VOLUME, _T.CHANNEL_SLA, _T.CHANNEL_RULE})

    for skill in profile.skills.skills:
        covered[_S.SKILLS].add(_SKILL_TYPES.get(skill.type, _T.SKILL_OTHER))
    if profile.skills.communication_style.tone:
        covered[_S.SKILLS].update({_T.BRAND_TONE, _T.COMMUNICATION_STYLE})

    process = profile.process
    if process.happy_path_steps:
        covered[_S.PROCESS].add(_T.HAPPY_PATH_STEP)
    if process.exceptions:
        covered[_S.PROCESS].add(_T.EXCEPTION_CASE)
    if process.escalation_rules:
        covered[_S.PROCESS].add(_T.ESCALATION_TRIGGER)
    if process.case_types:
        covered[_S.PROCESS].add(_T.CASE_TYPE)

    guardrails = profile.guardrails
    if guardrails.never:
        covered[_S.GUARDRAILS].add(_T.GUARDRAIL_NEVER)
    if guardrails.always:
        covered[_S.GUARDRAILS].add(_T.GUARDRAIL_ALWAYS)
    if guardrails.financial_limits:
        covered[_S.GUARDRAILS].add(_T.FINANCIAL_LIMIT)
    if guardrails.legal_restrictions:
        covered[_S.GUARDRAILS].add(_T.LEGAL_RESTRICTION)

    return _freeze(covered)


def technical_covered_types(profile: TechnicalProfile | None) -> CoveredTypes:
    """Item types covered by each technical section of a manual profile."""
    covered: dict[ProfileSection, set[ExtractedItemType]] = {key: set() for key in TECHNICAL_KEYS}
    if profile is None:
        return _freeze(covered)

    if profile.integrations:
        covered[_S.INTEGRATIONS].add(_T.SYSTEM_INTEGRATION)
    if profile.data_fields:
        covered[_S.DATA_FIELDS].add(_T.DATA_FIELD)
    for requirement in profile.security_requirements:
        if requirement.category is SecurityCategory.COMPLIANCE:
            covered[_S.SECURITY].add(_T.COMPLIANCE_REQUIREMENT)
        else:
            covered[_S.SECURITY].add(_T.SECURITY_REQUIREMENT)
    if profile.api_endpoints:
        covered[_S.APIS].add(_T.API_ENDPOINT)
    if profile.technical_contacts:
        covered[_S.CREDENTIALS].add(_T.TECHNICAL_CONTACT)

    return _freeze(covered)


def profile_covered_types(
    business: BusinessProfile | None = None,
    technical: TechnicalProfile | None = None,
) -> CoveredTypes:
    """Covered types for every section of both profiles."""
    return {**business_covered_types(business), **technical_covered_types(technical)}


def _freeze(covered: dict[ProfileSection, set[ExtractedItemType]]) -> CoveredTypes:
    return {key: frozenset(types) for key, types in covered.items()}
