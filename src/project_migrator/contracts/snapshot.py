"""Snapshot contracts.

These models describe the frozen source project as written by the export
tool. The export keeps GitHub's GraphQL shape (``{"nodes": [...]}``
connections, ``__typename`` discriminators, camelCase keys); validators flatten
it into plain lists so the engine never sees connection wrappers.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _unwrap_nodes(value: Any) -> Any:
    if isinstance(value, dict) and "nodes" in value:
        return value["nodes"] or []
    if value is None:
        return []
    return value


class FieldDataType(StrEnum):
    TEXT = "TEXT"
    NUMBER = "NUMBER"
    DATE = "DATE"
    SINGLE_SELECT = "SINGLE_SELECT"
    TITLE = "TITLE"
    ASSIGNEES = "ASSIGNEES"
    LABELS = "LABELS"
    LINKED_PULL_REQUESTS = "LINKED_PULL_REQUESTS"
    MILESTONE = "MILESTONE"
    REPOSITORY = "REPOSITORY"
    REVIEWERS = "REVIEWERS"
    ITERATION = "ITERATION"
    TRACKS = "TRACKS"
    TRACKED_BY = "TRACKED_BY"
    PARENT_ISSUE = "PARENT_ISSUE"
    SUB_ISSUES_PROGRESS = "SUB_ISSUES_PROGRESS"


CUSTOM_FIELD_DATA_TYPES = frozenset(
    {FieldDataType.TEXT, FieldDataType.SINGLE_SELECT, FieldDataType.DATE, FieldDataType.NUMBER}
)


class FieldValueKind(StrEnum):
    TEXT = "TEXT"
    NUMBER = "NUMBER"
    DATE = "DATE"
    SINGLE_SELECT = "SINGLE_SELECT"
    REPOSITORY = "REPOSITORY"
    LABELS = "LABELS"
    USER = "USER"
    REVIEWER = "REVIEWER"
    PULL_REQUEST = "PULL_REQUEST"
    ITERATION = "ITERATION"
    MILESTONE = "MILESTONE"
    UNKNOWN = "UNKNOWN"


_VALUE_TYPENAMES: dict[str, FieldValueKind] = {
    "ProjectV2ItemFieldTextValue": FieldValueKind.TEXT,
    "ProjectV2ItemFieldNumberValue": FieldValueKind.NUMBER,
    "ProjectV2ItemFieldDateValue": FieldValueKind.DATE,
    "ProjectV2ItemFieldSingleSelectValue": FieldValueKind.SINGLE_SELECT,
    "ProjectV2ItemFieldRepositoryValue": FieldValueKind.REPOSITORY,
    "ProjectV2ItemFieldLabelValue": FieldValueKind.LABELS,
    "ProjectV2ItemFieldUserValue": FieldValueKind.USER,
    "ProjectV2ItemFieldReviewerValue": FieldValueKind.REVIEWER,
    "ProjectV2ItemFieldPullRequestValue": FieldValueKind.PULL_REQUEST,
    "ProjectV2ItemFieldIterationValue": FieldValueKind.ITERATION,
    "ProjectV2ItemFieldMilestoneValue": FieldValueKind.MILESTONE,
}

SYSTEM_VALUE_KINDS = frozenset(
    {
        FieldValueKind.REPOSITORY,
        FieldValueKind.LABELS,
        FieldValueKind.USER,
        FieldValueKind.REVIEWER,
        FieldValueKind.PULL_REQUEST,
        FieldValueKind.ITERATION,
        FieldValueKind.MILESTONE,
    }
)


class _SnapshotModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class FieldOption(_SnapshotModel):
    id: str
    name: str
    color: str | None = None
    description: str | None = None


class FieldDefinition(_SnapshotModel):
    id: str
    name: str
    data_type: FieldDataType | str = Field(alias="dataType")
    options: list[FieldOption] | None = None

    @property
    def is_single_select(self) -> bool:
        return self.data_type == FieldDataType.SINGLE_SELECT


class RepositoryRef(_SnapshotModel):
    name_with_owner: str = Field(alias="nameWithOwner")


class IssueContent(_SnapshotModel):
    typename: Literal["Issue"] = Field(alias="__typename")
    repository_name_with_owner: str
    number: int
    title: str

    @model_validator(mode="before")
    @classmethod
    def _flatten_repository(cls, data: Any) -> Any:
        return _flatten_repository(data)


class PullRequestContent(_SnapshotModel):
    typename: Literal["PullRequest"] = Field(alias="__typename")
    repository_name_with_owner: str
    number: int
    title: str

    @model_validator(mode="before")
    @classmethod
    def _flatten_repository(cls, data: Any) -> Any:
        return _flatten_repository(data)


class DraftIssueContent(_SnapshotModel):
    typename: Literal["DraftIssue"] = Field(alias="__typename")
    title: str
    body: str = ""
    creator_login: str
    created_at: str = Field(alias="createdAt")

    @model_validator(mode="before")
    @classmethod
    def _flatten_creator(cls, data: Any) -> Any:
        if isinstance(data, dict) and "creator_login" not in data:
            creator = data.get("creator") or {}
            # Deleted accounts export as a null creator.
            login = creator.get("login") if isinstance(creator, dict) else None
            data = {**data, "creator_login": login or "ghost"}
        return data

    @field_validator("body", mode="before")
    @classmethod
    def _none_body(cls, value: Any) -> Any:
        return "" if value is None else value


def _flatten_repository(data: Any) -> Any:
    if isinstance(data, dict) and "repository_name_with_owner" not in data:
        repository = data.get("repository")
        if isinstance(repository, dict) and "nameWithOwner" in repository:
            data = {**data, "repository_name_with_owner": repository["nameWithOwner"]}
    return data


ItemContent = Annotated[IssueContent | PullRequestContent | DraftIssueContent, Field(discriminator="typename")]

CONTENT_TYPENAMES = frozenset({"Issue", "PullRequest", "DraftIssue"})


class FieldValue(_SnapshotModel):
    """One value of one field on a snapshot item.

    ``kind`` selects which of ``date``/``number``/``text``/``option_id`` is
    meaningful.
    """

    field_id: str
    field_name: str
    kind: FieldValueKind
    date: str | None = None
    number: float | None = None
    text: str | None = None
    option_id: str | None = Field(default=None, alias="optionId")

    @model_validator(mode="before")
    @classmethod
    def _from_export(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "kind" in data:
            return data
        field = data.get("field") or {}
        return {
            **data,
            "field_id": field.get("id", ""),
            "field_name": field.get("name", ""),
            "kind": _VALUE_TYPENAMES.get(data.get("__typename", ""), FieldValueKind.UNKNOWN),
        }


class ProjectItemSnapshot(_SnapshotModel):
    id: str
    is_archived: bool = Field(default=False, alias="isArchived")
    content: ItemContent
    field_values: list[FieldValue] = Field(default_factory=list, alias="fieldValues")

    @field_validator("field_values", mode="before")
    @classmethod
    def _unwrap_field_values(cls, value: Any) -> Any:
        return [node for node in _unwrap_nodes(value) if node]


class ProjectSnapshot(_SnapshotModel):
    title: str
    fields: list[FieldDefinition] = Field(default_factory=list)
    repositories: list[RepositoryRef] = Field(default_factory=list)
    items: list[ProjectItemSnapshot] = Field(default_factory=list)

    @field_validator("fields", "repositories", mode="before")
    @classmethod
    def _unwrap_connection(cls, value: Any) -> Any:
        return [node for node in _unwrap_nodes(value) if node]

    def field_named(self, name: str) -> FieldDefinition | None:
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def referenced_repositories(self) -> list[str]:
        """Repositories linked to the project or referenced by issue/PR items, in first-seen order."""
        seen: dict[str, None] = {}
        for repository in self.repositories:
            seen.setdefault(repository.name_with_owner, None)
        for item in self.items:
            if isinstance(item.content, IssueContent | PullRequestContent):
                seen.setdefault(item.content.repository_name_with_owner, None)
        return list(seen)
