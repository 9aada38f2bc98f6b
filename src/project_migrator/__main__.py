"""Module entrypoint for ``python -m project_migrator``."""

from project_migrator.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
