"""CLI progress renderers."""

from project_migrator.cli.progress.rich import RichMigrationProgress

__all__ = ["RichMigrationProgress"]
