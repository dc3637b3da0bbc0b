"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from journeypilot.contracts.exceptions import (
    CatalogError,
    ConfigError,
    SnapshotLoadError,
    UnknownPhaseError,
    UnknownSectionError,
)


def main(argv: list[str] | None = None) -> int:
    import journeypilot.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "schedule":
            cli._run_schedule(args)
        elif args.command == "completeness":
            cli._run_completeness(args)
        return 0
    except (ConfigError, SnapshotLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (CatalogError, UnknownPhaseError, UnknownSectionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
