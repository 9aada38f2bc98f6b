"""Public contracts for project-migrator."""

from project_migrator.contracts.config import MigrationConfig, TitleMismatchSeverity
from project_migrator.contracts.correlation import CorrelationTable, FieldCorrelation
from project_migrator.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    MalformedMappingFile,
    MigrationError,
    MigratorError,
    OptionCorrelationMismatch,
    OwnerNotFoundError,
    ProviderError,
    RepositoryNotFoundError,
    SnapshotLoadError,
    StatusReconciliationAborted,
    TitleMismatchError,
    UnsupportedContentType,
)
from project_migrator.contracts.provider import ProjectProvider
from project_migrator.contracts.remote import (
    ContentRef,
    CreatedProject,
    FieldValuePayload,
    OptionColor,
    OwnerType,
    ProductInformation,
    ProjectField,
    ProjectFieldOption,
    RateLimit,
    SingleSelectOptionInput,
)
from project_migrator.contracts.result import ItemOutcome, MigrationResult
from project_migrator.contracts.snapshot import (
    DraftIssueContent,
    FieldDataType,
    FieldDefinition,
    FieldOption,
    FieldValue,
    FieldValueKind,
    IssueContent,
    ProjectItemSnapshot,
    ProjectSnapshot,
    PullRequestContent,
    RepositoryRef,
)

__all__ = [
    "AuthenticationError",
    "ConfigError",
    "ContentRef",
    "CorrelationTable",
    "CreatedProject",
    "DraftIssueContent",
    "FieldCorrelation",
    "FieldDataType",
    "FieldDefinition",
    "FieldOption",
    "FieldValue",
    "FieldValueKind",
    "FieldValuePayload",
    "IssueContent",
    "ItemOutcome",
    "MalformedMappingFile",
    "MigrationConfig",
    "MigrationError",
    "MigrationResult",
    "MigratorError",
    "OptionColor",
    "OptionCorrelationMismatch",
    "OwnerNotFoundError",
    "OwnerType",
    "ProductInformation",
    "ProjectField",
    "ProjectFieldOption",
    "ProjectItemSnapshot",
    "ProjectProvider",
    "ProjectSnapshot",
    "ProviderError",
    "PullRequestContent",
    "RateLimit",
    "RepositoryNotFoundError",
    "RepositoryRef",
    "SingleSelectOptionInput",
    "SnapshotLoadError",
    "StatusReconciliationAborted",
    "TitleMismatchError",
    "TitleMismatchSeverity",
    "UnsupportedContentType",
]
