"""Repository mapping table loaded from the export tool's CSV template."""

from __future__ import annotations

import csv
import logging
from collections.abc import ItemsView, Mapping
from pathlib import Path

from project_migrator.contracts.exceptions import ConfigError, MalformedMappingFile

_LOG = logging.getLogger(__name__)

SOURCE_COLUMN = "source_repository"
TARGET_COLUMN = "target_repository"
_EXPECTED_COLUMNS = frozenset({SOURCE_COLUMN, TARGET_COLUMN})


class RepositoryMappingTable:
    """Source ``owner/name`` → target ``owner/name``.

    Rows with an empty target mean "do not migrate this repository" and are
    not stored.
    """

    def __init__(self, mappings: Mapping[str, str] | None = None) -> None:
        self._mappings: dict[str, str] = {}
        for source, target in (mappings or {}).items():
            if target:
                self._mappings[source] = target

    @classmethod
    def load(cls, path: Path) -> RepositoryMappingTable:
        if not path.is_file():
            raise ConfigError(f"repository mappings file not found: {path}")
        try:
            with path.open(encoding="utf-8-sig", newline="") as handle:
                reader = csv.DictReader(handle)
                cls._check_header(reader.fieldnames, path=path)
                mappings: dict[str, str] = {}
                for row in reader:
                    if None in row:
                        raise MalformedMappingFile(_malformed_message(path))
                    source = (row.get(SOURCE_COLUMN) or "").strip()
                    target = (row.get(TARGET_COLUMN) or "").strip()
                    if not source:
                        continue
                    if not target:
                        _LOG.debug("Repository %s is intentionally unmapped", source)
                        continue
                    mappings[source] = target
        except OSError as exc:
            raise ConfigError(f"failed reading repository mappings file: {path}") from exc
        except csv.Error as exc:
            raise MalformedMappingFile(f"{_malformed_message(path)} ({exc})") from exc
        return cls(mappings)

    @staticmethod
    def _check_header(fieldnames: list[str] | None, *, path: Path) -> None:
        columns = [name.strip() for name in fieldnames or []]
        if len(columns) != 2 or set(columns) != _EXPECTED_COLUMNS:
            raise MalformedMappingFile(_malformed_message(path))

    def lookup(self, name_with_owner: str) -> str | None:
        return self._mappings.get(name_with_owner)

    def items(self) -> ItemsView[str, str]:
        return self._mappings.items()

    def __contains__(self, name_with_owner: object) -> bool:
        return name_with_owner in self._mappings

    def __len__(self) -> int:
        return len(self._mappings)


def _malformed_message(path: Path) -> str:
    return (
        f"Repository mappings file {path} is invalid. It must have exactly two columns, "
        f"{SOURCE_COLUMN} and {TARGET_COLUMN}. Start from the template CSV generated by the export "
        f"tool and fill in the {TARGET_COLUMN} column."
    )
