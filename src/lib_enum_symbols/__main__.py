"""Module entry point so ``python -m lib_enum_symbols`` runs the CLI."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
