"""Progress reporting protocol for the migration pipeline.

The orchestrator emits phase lifecycle events; consumers (e.g. the CLI's Rich
progress bar) implement ``MigrationProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager

PHASE_REPOSITORIES = "Repositories"
PHASE_FIELDS = "Fields"
PHASE_STATUS = "Status"
PHASE_ITEMS = "Items"


class MigrationProgress(ABC):
    """Observer interface for migration progress events."""

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None:
        """A phase is starting. *total* is ``None`` for indeterminate phases."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, phase: str) -> None:
        """One unit of work within *phase* has completed (or been skipped)."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        """The *phase* has finished successfully."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """The *phase* was interrupted by *error*."""
        ...  # pragma: no cover

    @contextmanager
    def suspended(self) -> Iterator[None]:
        """Hide any live display while the operator is being prompted."""
        yield


class NullMigrationProgress(MigrationProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str, total: int | None = None) -> None:
        pass

    def item_done(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
