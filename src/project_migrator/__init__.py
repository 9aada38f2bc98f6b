"""Public API surface for project-migrator."""

__version__ = "0.1.0"

from project_migrator.auth import TokenResolver, create_token_resolver
from project_migrator.contracts.config import MigrationConfig, TitleMismatchSeverity
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
from project_migrator.contracts.remote import OwnerType
from project_migrator.contracts.result import MigrationResult
from project_migrator.contracts.snapshot import ProjectSnapshot
from project_migrator.engine.progress import MigrationProgress
from project_migrator.engine.status import OperatorPrompt
from project_migrator.mappings import RepositoryMappingTable
from project_migrator.providers import create_provider
from project_migrator.sdk import ProjectMigrator, load_mappings, load_snapshot

__all__ = [
    "AuthenticationError",
    "ConfigError",
    "MalformedMappingFile",
    "MigrationConfig",
    "MigrationError",
    "MigrationProgress",
    "MigrationResult",
    "MigratorError",
    "OperatorPrompt",
    "OptionCorrelationMismatch",
    "OwnerNotFoundError",
    "OwnerType",
    "ProjectMigrator",
    "ProjectProvider",
    "ProjectSnapshot",
    "ProviderError",
    "RepositoryMappingTable",
    "RepositoryNotFoundError",
    "SnapshotLoadError",
    "StatusReconciliationAborted",
    "TitleMismatchError",
    "TitleMismatchSeverity",
    "TokenResolver",
    "UnsupportedContentType",
    "create_provider",
    "create_token_resolver",
    "load_mappings",
    "load_snapshot",
]
