"""Correlation table contracts."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

from project_migrator.contracts.exceptions import MigrationError


class FieldCorrelation(BaseModel):
    """Target-side identity of one source field."""

    model_config = ConfigDict(frozen=True)

    target_field_id: str
    option_correlation: dict[str, str] | None = None
    """Source option ID → target option ID; ``None`` for non-select fields."""


class CorrelationTable:
    """Source field ID → :class:`FieldCorrelation`.

    Append-only while fields are being created, read-only once frozen. The
    orchestrator owns the single instance and hands it to the item phase.
    """

    def __init__(self) -> None:
        self._entries: dict[str, FieldCorrelation] = {}
        self._frozen = False

    def add(self, source_field_id: str, correlation: FieldCorrelation) -> None:
        if self._frozen:
            raise MigrationError(f"Correlation table is frozen; cannot add field {source_field_id}")
        if source_field_id in self._entries:
            raise MigrationError(f"Field {source_field_id} is already correlated")
        self._entries[source_field_id] = correlation

    def get(self, source_field_id: str) -> FieldCorrelation | None:
        return self._entries.get(source_field_id)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, source_field_id: object) -> bool:
        return source_field_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
