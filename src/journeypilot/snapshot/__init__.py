"""Project snapshot loading exports."""

from journeypilot.snapshot.loader import SnapshotLoader, load_snapshot

__all__ = ["SnapshotLoader", "load_snapshot"]
