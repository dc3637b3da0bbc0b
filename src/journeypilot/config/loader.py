"""Config loading and catalog construction."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from journeypilot.catalog.phases import DEFAULT_PHASE_CATALOG, PhaseCatalog
from journeypilot.contracts.config import JourneyPilotConfig
from journeypilot.contracts.exceptions import ConfigError
from journeypilot.contracts.phase import PhaseType

logger = logging.getLogger(__name__)


def _resolve_path(value: Path | None, *, base_dir: Path) -> Path | None:
    if value is None:
        return None
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path) -> JourneyPilotConfig:
    config_path = Path(path).expanduser().resolve()
    config_dir = config_path.parent

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = JourneyPilotConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    logger.debug("loaded config %s", config_path)
    return parsed.model_copy(update={"snapshot_path": _resolve_path(parsed.snapshot_path, base_dir=config_dir)})


def build_catalog(config: JourneyPilotConfig | None = None) -> PhaseCatalog:
    """Default phase catalog with the configured duration overrides applied.

    ``design_week_duration_days`` sets the Design Week length unless
    ``phase_durations`` already names ``DESIGN_WEEK``, which takes precedence.
    """
    if config is None:
        return DEFAULT_PHASE_CATALOG
    overrides: dict[PhaseType, int] = dict(config.phase_durations)
    if PhaseType.DESIGN_WEEK not in overrides:
        design_week = config.design_week_duration_days
        if design_week != DEFAULT_PHASE_CATALOG.standard_duration(PhaseType.DESIGN_WEEK):
            overrides[PhaseType.DESIGN_WEEK] = design_week
    return DEFAULT_PHASE_CATALOG.with_durations(overrides)
