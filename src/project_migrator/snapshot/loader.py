"""Snapshot loading from the export tool's JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from project_migrator.contracts.exceptions import SnapshotLoadError, UnsupportedContentType
from project_migrator.contracts.snapshot import CONTENT_TYPENAMES, ProjectSnapshot


class SnapshotLoader:
    """Load ``{"project": ..., "projectItems": [...]}`` into a :class:`ProjectSnapshot`."""

    def load(self, path: Path) -> ProjectSnapshot:
        payload = self._read_json(path)
        if not isinstance(payload, dict):
            raise SnapshotLoadError(f"snapshot root must be an object: {path}")

        project = payload.get("project")
        if not isinstance(project, dict):
            raise SnapshotLoadError(f"snapshot must contain a 'project' object: {path}")
        items = payload.get("projectItems", [])
        if not isinstance(items, list):
            raise SnapshotLoadError(f"snapshot 'projectItems' must be an array: {path}")

        for raw_item in items:
            self._check_content_type(raw_item, path=path)

        try:
            return ProjectSnapshot.model_validate({**project, "items": items})
        except ValidationError as exc:
            raise SnapshotLoadError(f"snapshot schema mismatch in {path}: {exc}") from exc

    def _read_json(self, path: Path) -> Any:
        if not path.exists():
            raise SnapshotLoadError(f"snapshot file not found: {path}")
        if not path.is_file():
            raise SnapshotLoadError(f"snapshot path is not a file: {path}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise SnapshotLoadError(f"failed reading snapshot file: {path}") from exc
        except json.JSONDecodeError as exc:
            raise SnapshotLoadError(f"invalid JSON in snapshot file: {path}") from exc

    @staticmethod
    def _check_content_type(raw_item: Any, *, path: Path) -> None:
        if not isinstance(raw_item, dict):
            raise SnapshotLoadError(f"project item must be a JSON object: {path}")
        content = raw_item.get("content")
        typename = content.get("__typename") if isinstance(content, dict) else None
        if typename not in CONTENT_TYPENAMES:
            raise UnsupportedContentType(
                f"Project item {raw_item.get('id', '?')} has unsupported content type {typename!r}",
                typename=str(typename),
            )
