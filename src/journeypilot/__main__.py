"""Module entrypoint for ``python -m journeypilot``."""

from journeypilot.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
