from pathlib import Path

import pytest
from pydantic import ValidationError

from project_migrator.contracts.config import MigrationConfig, TitleMismatchSeverity
from project_migrator.contracts.remote import OwnerType


def test_defaults() -> None:
    config = MigrationConfig(project_owner="acme")

    assert config.input_path == Path("project.json")
    assert config.repository_mappings_path == Path("repository-mappings.csv")
    assert config.project_owner_type is OwnerType.ORGANIZATION
    assert config.base_url == "https://api.github.com"
    assert config.auth == "env"
    assert config.title_mismatch is TitleMismatchSeverity.WARN


def test_auth_token_combinations() -> None:
    MigrationConfig(project_owner="acme", auth="gh-cli")
    MigrationConfig(project_owner="acme", auth="env")
    MigrationConfig(project_owner="acme", auth="token", token="abc123")

    with pytest.raises(ValidationError):
        MigrationConfig(project_owner="acme", auth="token")
    with pytest.raises(ValidationError):
        MigrationConfig(project_owner="acme", auth="env", token="abc123")
    with pytest.raises(ValidationError):
        MigrationConfig(project_owner="acme", auth="magic")


def test_owner_is_required() -> None:
    with pytest.raises(ValidationError):
        MigrationConfig(project_owner="")


def test_base_url_must_be_http() -> None:
    MigrationConfig(project_owner="acme", base_url="https://github.acme.inc/api/v3")

    with pytest.raises(ValidationError):
        MigrationConfig(project_owner="acme", base_url="github.acme.inc")


def test_config_is_frozen() -> None:
    config = MigrationConfig(project_owner="acme")

    with pytest.raises(ValidationError):
        config.project_owner = "other"  # type: ignore[misc]
