from __future__ import annotations

import json
from pathlib import Path

import pytest

from journeypilot.catalog import DEFAULT_PHASE_CATALOG
from journeypilot.config import build_catalog, load_config
from journeypilot.contracts.config import JourneyPilotConfig
from journeypilot.contracts.exceptions import ConfigError
from journeypilot.contracts.phase import PhaseType


def _write(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "journeypilot.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_defaults(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path, {}))

    assert config == JourneyPilotConfig()
    assert config.design_week_duration_days == 10
    assert config.snapshot_path is None


def test_snapshot_path_is_resolved_against_config_dir(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path, {"snapshot_path": "data/snapshot.json"}))

    assert config.snapshot_path == (tmp_path / "data" / "snapshot.json").resolve()


def test_absolute_snapshot_path_is_kept(tmp_path: Path) -> None:
    target = tmp_path / "elsewhere.json"

    config = load_config(_write(tmp_path, {"snapshot_path": str(target)}))

    assert config.snapshot_path == target


def test_phase_durations(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path, {"phase_durations": {"DESIGN_WEEK": 15}, "design_week_duration_days": 15}))

    assert config.phase_durations == {PhaseType.DESIGN_WEEK: 15}
    assert build_catalog(config).standard_duration(PhaseType.DESIGN_WEEK) == 15


@pytest.mark.parametrize(
    "payload",
    [
        {"phase_durations": {"DESIGN_WEEK": 0}},
        {"phase_durations": {"PILOT": 3}},
        {"design_week_duration_days": -1},
    ],
)
def test_invalid_config(tmp_path: Path, payload: dict[str, object]) -> None:
    with pytest.raises(ConfigError, match="invalid config"):
        load_config(_write(tmp_path, payload))


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "journeypilot.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid JSON"):
        load_config(path)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="failed reading config file"):
        load_config(tmp_path / "missing.json")


def test_build_catalog_without_overrides() -> None:
    assert build_catalog() is DEFAULT_PHASE_CATALOG
    assert build_catalog(JourneyPilotConfig()) is DEFAULT_PHASE_CATALOG


def test_build_catalog_applies_design_week_length() -> None:
    catalog = build_catalog(JourneyPilotConfig(design_week_duration_days=5))

    assert catalog.standard_duration(PhaseType.DESIGN_WEEK) == 5
    assert catalog.standard_duration(PhaseType.ONBOARDING) == 10


def test_explicit_phase_duration_wins_over_design_week_length() -> None:
    config = JourneyPilotConfig(phase_durations={PhaseType.DESIGN_WEEK: 15}, design_week_duration_days=5)

    assert build_catalog(config).standard_duration(PhaseType.DESIGN_WEEK) == 15
