"""Project snapshot loading from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from journeypilot.contracts.exceptions import SnapshotLoadError
from journeypilot.contracts.snapshot import ProjectSnapshot

logger = logging.getLogger(__name__)


class SnapshotLoader:
    """Load a project snapshot JSON file into a :class:`ProjectSnapshot`."""

    def load(self, path: str | Path) -> ProjectSnapshot:
        snapshot_path = Path(path).expanduser()
        payload = self._read_json(snapshot_path)
        if not isinstance(payload, dict):
            raise SnapshotLoadError(f"snapshot root must be an object: {snapshot_path}")
        try:
            snapshot = ProjectSnapshot.model_validate(payload)
        except ValidationError as exc:
            raise SnapshotLoadError(f"snapshot schema mismatch: {exc}") from exc
        logger.debug(
            "loaded snapshot %s: phase=%s items=%d",
            snapshot_path,
            snapshot.current_phase.value,
            len(snapshot.extracted_items),
        )
        return snapshot

    def _read_json(self, path: Path) -> Any:
        if not path.exists():
            raise SnapshotLoadError(f"snapshot file not found: {path}")
        if not path.is_file():
            raise SnapshotLoadError(f"snapshot path is not a file: {path}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise SnapshotLoadError(f"failed reading snapshot file: {path}") from exc
        except json.JSONDecodeError as exc:
            raise SnapshotLoadError(f"invalid JSON in snapshot file: {path}") from exc


def load_snapshot(path: str | Path) -> ProjectSnapshot:
    return SnapshotLoader().load(path)
