"""Shared test fixtures for journeypilot tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def snapshot_payload() -> dict[str, Any]:
    """A project in Design Week with a finished handover and kickoff."""
    return {
        "name": "Claims intake",
        "current_phase": "DESIGN_WEEK",
        "current_phase_start_date": "2026-02-09",
        "phases": [
            {
                "type": "SALES_HANDOVER",
                "status": "COMPLETE",
                "start_date": "2026-02-02",
                "end_date": "2026-02-05",
            },
            {
                "type": "KICKOFF",
                "status": "COMPLETE",
                "start_date": "2026-02-05",
                "end_date": "2026-02-06",
            },
            {"type": "DESIGN_WEEK", "status": "IN_PROGRESS", "start_date": "2026-02-09"},
        ],
        "extracted_items": [
            {"id": "i-1", "type": "STAKEHOLDER", "status": "APPROVED", "content": "Head of claims"},
            {"id": "i-2", "type": "GOAL", "status": "APPROVED", "content": "Automate intake"},
            {"id": "i-3", "type": "DATA_FIELD", "status": "PENDING", "content": "Policy number"},
            {"id": "i-4", "type": "RISK", "status": "REJECTED"},
        ],
        "business_profile": {
            "channels": [{"name": "Claims inbox", "type": "email"}],
        },
    }


@pytest.fixture
def snapshot_file(tmp_path: Path, snapshot_payload: dict[str, Any]) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot_payload), encoding="utf-8")
    return path
