"""Configuration contracts."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from project_migrator.contracts.remote import OwnerType

DEFAULT_BASE_URL = "https://api.github.com"


class TitleMismatchSeverity(StrEnum):
    WARN = "warn"
    ERROR = "error"


class MigrationConfig(BaseModel):
    input_path: Path = Path("project.json")
    repository_mappings_path: Path = Path("repository-mappings.csv")
    project_owner: str = Field(min_length=1)
    project_owner_type: OwnerType = OwnerType.ORGANIZATION
    project_title: str | None = None
    base_url: str = DEFAULT_BASE_URL
    auth: str = "env"
    token: str | None = None
    proxy_url: str | None = None
    skip_certificate_verification: bool = False
    title_mismatch: TitleMismatchSeverity = TitleMismatchSeverity.WARN
    disable_telemetry: bool = False
    skip_update_check: bool = False
    verbose: bool = False

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> MigrationConfig:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth not in {"gh-cli", "env", "token"}:
            raise ValueError("auth must be one of: gh-cli, env, token")
        return self

    @model_validator(mode="after")
    def validate_base_url(self) -> MigrationConfig:
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        return self
