"""Extracted item contracts.

Extracted items are produced by the document/transcript extraction pipeline
and reviewed by humans; journeypilot only reads them.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from pydantic import BaseModel


class ExtractedItemType(StrEnum):
    """Content categories an extracted item can be classified as."""

    # Identity and business context
    STAKEHOLDER = "STAKEHOLDER"
    GOAL = "GOAL"
    BUSINESS_CASE = "BUSINESS_CASE"
    KPI_TARGET = "KPI_TARGET"
    VOLUME_EXPECTATION = "VOLUME_EXPECTATION"
    COST_PER_CASE = "COST_PER_CASE"
    PEAK_PERIODS = "PEAK_PERIODS"
    TIMELINE_CONSTRAINT = "TIMELINE_CONSTRAINT"

    # Process
    HAPPY_PATH_STEP = "HAPPY_PATH_STEP"
    EXCEPTION_CASE = "EXCEPTION_CASE"
    BUSINESS_RULE = "BUSINESS_RULE"
    CASE_TYPE = "CASE_TYPE"
    DOCUMENT_TYPE = "DOCUMENT_TYPE"
    ESCALATION_TRIGGER = "ESCALATION_TRIGGER"
    DECISION_TREE = "DECISION_TREE"
    SCOPE_IN = "SCOPE_IN"
    SCOPE_OUT = "SCOPE_OUT"

    # Channels
    CHANNEL = "CHANNEL"
    CHANNEL_VOLUME = "CHANNEL_VOLUME"
    CHANNEL_SLA = "CHANNEL_SLA"
    CHANNEL_RULE = "CHANNEL_RULE"

    # Skills and communication
    SKILL_ANSWER = "SKILL_ANSWER"
    SKILL_ROUTE = "SKILL_ROUTE"
    SKILL_APPROVE_REJECT = "SKILL_APPROVE_REJECT"
    SKILL_REQUEST_INFO = "SKILL_REQUEST_INFO"
    SKILL_NOTIFY = "SKILL_NOTIFY"
    SKILL_OTHER = "SKILL_OTHER"
    KNOWLEDGE_SOURCE = "KNOWLEDGE_SOURCE"
    BRAND_TONE = "BRAND_TONE"
    COMMUNICATION_STYLE = "COMMUNICATION_STYLE"
    RESPONSE_TEMPLATE = "RESPONSE_TEMPLATE"

    # Guardrails
    GUARDRAIL_NEVER = "GUARDRAIL_NEVER"
    GUARDRAIL_ALWAYS = "GUARDRAIL_ALWAYS"
    FINANCIAL_LIMIT = "FINANCIAL_LIMIT"
    LEGAL_RESTRICTION = "LEGAL_RESTRICTION"

    # Persona
    PERSONA_TRAIT = "PERSONA_TRAIT"
    TONE_RULE = "TONE_RULE"
    DOS_AND_DONTS = "DOS_AND_DONTS"
    EXAMPLE_DIALOGUE = "EXAMPLE_DIALOGUE"
    ESCALATION_SCRIPT = "ESCALATION_SCRIPT"

    # Technical
    SYSTEM_INTEGRATION = "SYSTEM_INTEGRATION"
    DATA_FIELD = "DATA_FIELD"
    API_ENDPOINT = "API_ENDPOINT"
    ERROR_HANDLING = "ERROR_HANDLING"
    SECURITY_REQUIREMENT = "SECURITY_REQUIREMENT"
    COMPLIANCE_REQUIREMENT = "COMPLIANCE_REQUIREMENT"
    TECHNICAL_CONTACT = "TECHNICAL_CONTACT"
    MONITORING_METRIC = "MONITORING_METRIC"
    LAUNCH_CRITERION = "LAUNCH_CRITERION"

    # Sales handover
    DEAL_SUMMARY = "DEAL_SUMMARY"
    CONTRACT_DEADLINE = "CONTRACT_DEADLINE"
    SALES_WATCH_OUT = "SALES_WATCH_OUT"
    PROMISED_CAPABILITY = "PROMISED_CAPABILITY"
    CLIENT_PREFERENCE = "CLIENT_PREFERENCE"

    # Project bookkeeping
    OPEN_ITEM = "OPEN_ITEM"
    DECISION = "DECISION"
    APPROVAL = "APPROVAL"
    RISK = "RISK"


class ReviewStatus(StrEnum):
    PENDING = "PENDING"
    NEEDS_CLARIFICATION = "NEEDS_CLARIFICATION"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


PENDING_STATUSES = frozenset({ReviewStatus.PENDING, ReviewStatus.NEEDS_CLARIFICATION})
"""Statuses that count as work still awaiting review."""


class SessionRef(BaseModel):
    """Back-reference to the session an item was extracted from (display only)."""

    id: str
    phase: int | None = None
    session_number: int | None = None
    session_date: date | None = None

    model_config = {"frozen": True}


class ExtractedItem(BaseModel):
    """One atomic fact pulled from an uploaded document or transcript."""

    id: str
    type: ExtractedItemType
    status: ReviewStatus = ReviewStatus.PENDING
    content: str = ""
    source_session: SessionRef | None = None

    model_config = {"frozen": True}

    @property
    def is_approved(self) -> bool:
        return self.status is ReviewStatus.APPROVED

    @property
    def is_pending(self) -> bool:
        return self.status in PENDING_STATUSES
