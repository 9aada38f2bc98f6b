"""Shared test fixtures for project-migrator tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from project_migrator.contracts.config import MigrationConfig


@pytest.fixture
def write_snapshot(tmp_path: Path):
    def _write(payload: dict[str, Any], name: str = "project.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_mappings(tmp_path: Path):
    def _write(rows: list[tuple[str, str]], name: str = "repository-mappings.csv") -> Path:
        path = tmp_path / name
        lines = ["source_repository,target_repository", *(f"{source},{target}" for source, target in rows)]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config(tmp_path: Path) -> MigrationConfig:
    """A minimal valid MigrationConfig."""
    return MigrationConfig(
        input_path=tmp_path / "project.json",
        repository_mappings_path=tmp_path / "repository-mappings.csv",
        project_owner="target-org",
    )
