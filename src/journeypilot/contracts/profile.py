"""Manually entered profile contracts.

These models hold the structured, human-edited Business and Technical
profile of a Digital Employee. They are semantically equivalent to a set of
approved extracted items and are reconciled with them by the scorer.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

# ------------------------------------------------------------------
# Business profile
# ------------------------------------------------------------------


class Stakeholder(BaseModel):
    name: str
    role: str = ""
    email: str | None = None
    is_decision_maker: bool = False


class IdentitySection(BaseModel):
    name: str = ""
    description: str = ""
    stakeholders: list[Stakeholder] = Field(default_factory=list)


class BusinessContextSection(BaseModel):
    problem_statement: str = ""
    volume_per_month: float | None = None
    cost_per_case: float | None = None
    currency: str = "EUR"
    peak_periods: list[str] = Field(default_factory=list)
    pain_points: list[str] = Field(default_factory=list)


class KPI(BaseModel):
    name: str
    target_value: str = ""
    unit: str = ""
    current_value: str | None = None


class ChannelType(StrEnum):
    EMAIL = "email"
    CHAT = "chat"
    PHONE = "phone"
    PORTAL = "portal"
    API = "api"
    OTHER = "other"


class Channel(BaseModel):
    name: str
    type: ChannelType = ChannelType.OTHER
    volume_percentage: float = 0
    sla: str = ""
    rules: list[str] = Field(default_factory=list)


class SkillType(StrEnum):
    ANSWER = "answer"
    ROUTE = "route"
    APPROVE_REJECT = "approve_reject"
    REQUEST_INFO = "request_info"
    NOTIFY = "notify"
    OTHER = "other"


class Skill(BaseModel):
    name: str
    type: SkillType = SkillType.OTHER
    description: str = ""
    knowledge_sources: list[str] = Field(default_factory=list)


class CommunicationStyle(BaseModel):
    tone: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    formality: str = "mixed"


class SkillsSection(BaseModel):
    skills: list[Skill] = Field(default_factory=list)
    communication_style: CommunicationStyle = Field(default_factory=CommunicationStyle)


class ProcessStep(BaseModel):
    order: int
    title: str
    description: str = ""
    is_decision_point: bool = False


class ExceptionCase(BaseModel):
    trigger: str
    action: str = ""
    escalate_to: str | None = None


class CaseType(BaseModel):
    name: str
    volume_percent: float = 0
    complexity: str = "MEDIUM"
    automatable: bool = True


class ProcessSection(BaseModel):
    happy_path_steps: list[ProcessStep] = Field(default_factory=list)
    exceptions: list[ExceptionCase] = Field(default_factory=list)
    escalation_rules: list[str] = Field(default_factory=list)
    case_types: list[CaseType] = Field(default_factory=list)


class FinancialLimit(BaseModel):
    type: str
    amount: float
    currency: str = "EUR"


class GuardrailsSection(BaseModel):
    never: list[str] = Field(default_factory=list)
    always: list[str] = Field(default_factory=list)
    financial_limits: list[FinancialLimit] = Field(default_factory=list)
    legal_restrictions: list[str] = Field(default_factory=list)


class BusinessProfile(BaseModel):
    """Fixed-field Business Profile of a Digital Employee."""

    identity: IdentitySection = Field(default_factory=IdentitySection)
    business_context: BusinessContextSection = Field(default_factory=BusinessContextSection)
    kpis: list[KPI] = Field(default_factory=list)
    channels: list[Channel] = Field(default_factory=list)
    skills: SkillsSection = Field(default_factory=SkillsSection)
    process: ProcessSection = Field(default_factory=ProcessSection)
    guardrails: GuardrailsSection = Field(default_factory=GuardrailsSection)


# ------------------------------------------------------------------
# Technical profile
# ------------------------------------------------------------------


class Integration(BaseModel):
    system_name: str
    purpose: str = ""
    auth_method: str | None = None
    fields_read: list[str] = Field(default_factory=list)
    fields_write: list[str] = Field(default_factory=list)


class DataField(BaseModel):
    name: str
    source: str = ""
    type: str = "string"
    required: bool = False


class APIEndpoint(BaseModel):
    name: str
    method: str = "GET"
    path: str = ""
    description: str = ""


class SecurityCategory(StrEnum):
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    ENCRYPTION = "encryption"
    COMPLIANCE = "compliance"
    DATA_HANDLING = "data_handling"
    OTHER = "other"


class SecurityRequirement(BaseModel):
    requirement: str
    category: SecurityCategory = SecurityCategory.OTHER
    owner: str | None = None


class TechnicalContact(BaseModel):
    name: str
    role: str = ""
    system: str = ""
    email: str | None = None


class TechnicalProfile(BaseModel):
    """Fixed-field Technical Profile of a Digital Employee."""

    integrations: list[Integration] = Field(default_factory=list)
    data_fields: list[DataField] = Field(default_factory=list)
    api_endpoints: list[APIEndpoint] = Field(default_factory=list)
    security_requirements: list[SecurityRequirement] = Field(default_factory=list)
    technical_contacts: list[TechnicalContact] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)
