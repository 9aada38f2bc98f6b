"""Entrypoint for ``python -m project_migrator.cli``."""

from project_migrator.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
