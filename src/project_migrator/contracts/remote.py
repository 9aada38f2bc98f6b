"""Payloads exchanged with the remote project system."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OwnerType(StrEnum):
    ORGANIZATION = "organization"
    USER = "user"


class OptionColor(StrEnum):
    GRAY = "GRAY"
    BLUE = "BLUE"
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    ORANGE = "ORANGE"
    RED = "RED"
    PINK = "PINK"
    PURPLE = "PURPLE"


class CreatedProject(BaseModel):
    id: str
    url: str


class ProjectFieldOption(BaseModel):
    id: str
    name: str


class ProjectField(BaseModel):
    """A field as it exists on the target project after creation or lookup."""

    id: str
    name: str
    options: list[ProjectFieldOption] = Field(default_factory=list)


class SingleSelectOptionInput(BaseModel):
    name: str
    color: OptionColor | str
    description: str


class ContentRef(BaseModel):
    """A resolved issue or pull request on the target deployment."""

    id: str
    title: str


class FieldValuePayload(BaseModel):
    """Value for ``updateProjectV2ItemFieldValue``.

    At most one member is populated; an all-empty payload means there is
    nothing to write.
    """

    model_config = ConfigDict(frozen=True)

    date: str | None = None
    number: float | None = None
    text: str | None = None
    single_select_option_id: str | None = None

    def is_empty(self) -> bool:
        return all(
            value is None for value in (self.date, self.number, self.text, self.single_select_option_id)
        )

    def to_graphql(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.date is not None:
            payload["date"] = self.date
        if self.number is not None:
            payload["number"] = self.number
        if self.text is not None:
            payload["text"] = self.text
        if self.single_select_option_id is not None:
            payload["singleSelectOptionId"] = self.single_select_option_id
        return payload


class RateLimit(BaseModel):
    limit: int
    remaining: int
    used: int = 0
    reset_at: str | None = None


class ProductInformation(BaseModel):
    """Which GitHub product the target deployment runs."""

    enterprise_server_version: str | None = None

    @property
    def is_enterprise_server(self) -> bool:
        return self.enterprise_server_version is not None
