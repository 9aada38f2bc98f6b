"""Snapshot loading."""

from project_migrator.snapshot.loader import SnapshotLoader

__all__ = ["SnapshotLoader"]
