"""Migration result contracts."""

from __future__ import annotations

from pydantic import BaseModel


class ItemOutcome(BaseModel):
    source_item_id: str
    target_item_id: str | None = None
    archived: bool = False
    values_set: int = 0
    values_skipped: int = 0
    skipped_reason: str | None = None

    @property
    def created(self) -> bool:
        return self.target_item_id is not None


class MigrationResult(BaseModel):
    project_id: str
    project_url: str
    repositories_linked: int = 0
    repositories_skipped: int = 0
    fields_created: int = 0
    items_created: int = 0
    items_skipped: int = 0
    items_archived: int = 0
    field_values_set: int = 0
    field_values_skipped: int = 0
