from __future__ import annotations

from datetime import date
from typing import Any

import pytest
from pydantic import ValidationError

from journeypilot.contracts.items import ExtractedItem, ReviewStatus
from journeypilot.contracts.phase import PhaseStatus, PhaseType
from journeypilot.contracts.snapshot import ProjectSnapshot


def test_snapshot_parses_payload(snapshot_payload: dict[str, Any]) -> None:
    snapshot = ProjectSnapshot.model_validate(snapshot_payload)

    assert snapshot.current_phase is PhaseType.DESIGN_WEEK
    assert snapshot.current_phase_start_date == date(2026, 2, 9)
    assert snapshot.phases[0].status is PhaseStatus.COMPLETE
    assert snapshot.extracted_items[3].status is ReviewStatus.REJECTED
    assert snapshot.business_profile is not None
    assert snapshot.technical_profile is None


def test_snapshot_rejects_repeated_phase_records(snapshot_payload: dict[str, Any]) -> None:
    snapshot_payload["phases"].append({"type": "KICKOFF"})

    with pytest.raises(ValidationError, match="same phase type twice"):
        ProjectSnapshot.model_validate(snapshot_payload)


def test_snapshot_rejects_unknown_phase(snapshot_payload: dict[str, Any]) -> None:
    snapshot_payload["current_phase"] = "PILOT"

    with pytest.raises(ValidationError):
        ProjectSnapshot.model_validate(snapshot_payload)


def test_item_status_helpers() -> None:
    approved = ExtractedItem(id="a", type="GOAL", status="APPROVED")
    unclear = ExtractedItem(id="b", type="GOAL", status="NEEDS_CLARIFICATION")
    rejected = ExtractedItem(id="c", type="GOAL", status="REJECTED")

    assert approved.is_approved and not approved.is_pending
    assert unclear.is_pending and not unclear.is_approved
    assert not rejected.is_pending and not rejected.is_approved
