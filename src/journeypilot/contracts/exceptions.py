"""Exception hierarchy for journeypilot.

All journeypilot exceptions inherit from :class:`JourneyPilotError`, making it
easy to catch any library error with a single ``except`` clause while still
allowing callers to handle specific failure modes.
"""

from __future__ import annotations


class JourneyPilotError(Exception):
    """Base exception for all journeypilot errors."""


class ConfigError(JourneyPilotError):
    """Configuration loading or validation failure."""


class SnapshotLoadError(JourneyPilotError):
    """Project snapshot file loading/parsing failure."""


class CatalogError(JourneyPilotError):
    """Raised when a phase catalog or section table is malformed.

    Attributes:
        errors: Individual validation error messages.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        joined = "\n".join(f"  - {e}" for e in errors)
        super().__init__(f"Catalog validation failed:\n{joined}")


class UnknownPhaseError(JourneyPilotError, KeyError):
    """A phase type is not part of the catalog in use."""

    def __init__(self, phase: object) -> None:
        self.phase = phase
        super().__init__(f"unknown phase type: {phase!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownSectionError(JourneyPilotError, KeyError):
    """A profile section key is not part of the section table in use."""

    def __init__(self, section: object) -> None:
        self.section = section
        super().__init__(f"unknown profile section: {section!r}")

    def __str__(self) -> str:
        return str(self.args[0])
