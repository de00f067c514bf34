"""Module entrypoint for the credhash command line."""

from __future__ import annotations

from credhash.cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
