"""The journey phase catalog.

A :class:`PhaseCatalog` is an immutable, validated, ordered collection of
:class:`PhaseDefinition` entries. It is built once at process start (either
the default catalog or a copy with configured duration overrides) and passed
by reference to the scheduler.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from journeypilot.contracts.exceptions import CatalogError, UnknownPhaseError
from journeypilot.contracts.phase import PhaseDefinition, PhaseType


def coerce_phase_type(value: PhaseType | str) -> PhaseType:
    """Turn a phase identifier into a :class:`PhaseType`, failing fast on unknown names."""
    if isinstance(value, PhaseType):
        return value
    try:
        return PhaseType(value)
    except ValueError as exc:
        raise UnknownPhaseError(value) from exc


def validate_phases(phases: tuple[PhaseDefinition, ...]) -> None:
    """Validate the structural rules of a phase catalog.

    Raises:
        CatalogError: Aggregated list of all validation errors found.
    """
    errors: list[str] = []

    if not phases:
        errors.append("catalog must contain at least one phase")

    types = [phase.type for phase in phases]
    duplicates = sorted({t.value for t in types if types.count(t) > 1})
    if duplicates:
        errors.append(f"catalog contains duplicate phase types {duplicates}")

    orders = [phase.order for phase in phases]
    if orders != list(range(1, len(phases) + 1)):
        errors.append(f"phase orders must be 1..{len(phases)} in catalog order, got {orders}")

    # Post-completion phases must be a contiguous tail: nothing "pre" may follow them.
    seen_post = False
    for phase in phases:
        if phase.post_completion:
            seen_post = True
        elif seen_post:
            errors.append(f"phase {phase.type.value} follows a post-completion phase")

    if errors:
        raise CatalogError(errors)


class PhaseCatalog:
    """Ordered, read-only phase catalog with lookup and navigation helpers."""

    def __init__(self, phases: tuple[PhaseDefinition, ...] | list[PhaseDefinition]) -> None:
        ordered = tuple(phases)
        validate_phases(ordered)
        self._phases = ordered
        self._by_type: Mapping[PhaseType, PhaseDefinition] = MappingProxyType({p.type: p for p in ordered})

    def __iter__(self) -> Iterator[PhaseDefinition]:
        return iter(self._phases)

    def __len__(self) -> int:
        return len(self._phases)

    def __contains__(self, phase_type: object) -> bool:
        return phase_type in self._by_type

    @property
    def phases(self) -> tuple[PhaseDefinition, ...]:
        return self._phases

    def get(self, phase_type: PhaseType | str) -> PhaseDefinition:
        """Return the definition of *phase_type*.

        Raises:
            UnknownPhaseError: The phase is not part of this catalog.
        """
        key = coerce_phase_type(phase_type)
        try:
            return self._by_type[key]
        except KeyError:
            raise UnknownPhaseError(phase_type) from None

    def standard_duration(self, phase_type: PhaseType | str) -> int:
        return self.get(phase_type).standard_duration_business_days

    def display_name(self, phase_type: PhaseType | str) -> str:
        return self.get(phase_type).label

    def order_of(self, phase_type: PhaseType | str) -> int:
        return self.get(phase_type).order

    def by_order(self, order: int) -> PhaseDefinition | None:
        if 1 <= order <= len(self._phases):
            return self._phases[order - 1]
        return None

    def next_phase(self, phase_type: PhaseType | str) -> PhaseType | None:
        nxt = self.by_order(self.order_of(phase_type) + 1)
        return nxt.type if nxt is not None else None

    def previous_phase(self, phase_type: PhaseType | str) -> PhaseType | None:
        prev = self.by_order(self.order_of(phase_type) - 1)
        return prev.type if prev is not None else None

    def following(self, phase_type: PhaseType | str) -> tuple[PhaseDefinition, ...]:
        """All phases after *phase_type*, in catalog order."""
        return self._phases[self.order_of(phase_type) :]

    def with_durations(self, overrides: Mapping[PhaseType | str, int]) -> PhaseCatalog:
        """Return a new catalog with the standard durations replaced by *overrides*."""
        if not overrides:
            return self
        resolved = {coerce_phase_type(key): value for key, value in overrides.items()}
        unknown = [key for key in resolved if key not in self._by_type]
        if unknown:
            raise UnknownPhaseError(unknown[0])
        return PhaseCatalog(
            tuple(
                phase.model_copy(update={"standard_duration_business_days": resolved[phase.type]})
                if phase.type in resolved
                else phase
                for phase in self._phases
            )
        )

    def __repr__(self) -> str:
        return f"PhaseCatalog({', '.join(p.type.value for p in self._phases)})"


DEFAULT_PHASES: tuple[PhaseDefinition, ...] = (
    PhaseDefinition(
        type=PhaseType.SALES_HANDOVER,
        order=1,
        label="Sales Handover",
        short_label="Handover",
        description="Internal handover from sales to implementation team",
        standard_duration_business_days=2,
    ),
    PhaseDefinition(
        type=PhaseType.KICKOFF,
        order=2,
        label="Kickoff",
        short_label="Kickoff",
        description="Initial customer meeting to align on goals and timeline",
        standard_duration_business_days=1,
    ),
    PhaseDefinition(
        type=PhaseType.DESIGN_WEEK,
        order=3,
        label="Design Week",
        short_label="Design",
        description="Design sessions that define scope and requirements",
        standard_duration_business_days=10,
    ),
    PhaseDefinition(
        type=PhaseType.ONBOARDING,
        order=4,
        label="Configuration",
        short_label="Config",
        description="Build and deployment phase",
        standard_duration_business_days=10,
    ),
    PhaseDefinition(
        type=PhaseType.UAT,
        order=5,
        label="UAT",
        short_label="UAT",
        description="User Acceptance Testing",
        standard_duration_business_days=5,
    ),
    PhaseDefinition(
        type=PhaseType.GO_LIVE,
        order=6,
        label="Go-Live",
        short_label="Go Live",
        description="First day of the digital employee",
        standard_duration_business_days=1,
    ),
    PhaseDefinition(
        type=PhaseType.HYPERCARE,
        order=7,
        label="Hypercare",
        short_label="Hypercare",
        description="Intensive support period after go-live",
        standard_duration_business_days=10,
        post_completion=True,
    ),
    PhaseDefinition(
        type=PhaseType.HANDOVER_TO_SUPPORT,
        order=8,
        label="Handover to Support",
        short_label="Support",
        description="Transition to BAU support",
        standard_duration_business_days=2,
        post_completion=True,
    ),
)

DEFAULT_PHASE_CATALOG = PhaseCatalog(DEFAULT_PHASES)
