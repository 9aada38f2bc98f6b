"""Exception hierarchy for project-migrator."""

from __future__ import annotations


class MigratorError(Exception):
    """Base exception for all project-migrator errors."""


class ConfigError(MigratorError):
    """Missing or invalid input, or a configuration that cannot be satisfied."""


class MalformedMappingFile(ConfigError):
    """Repository mapping CSV does not have the expected two-column shape."""


class OwnerNotFoundError(ConfigError):
    """Target organization or user does not exist."""


class RepositoryNotFoundError(ConfigError):
    """A repository listed in the mapping table cannot be resolved on the target."""


class SnapshotLoadError(MigratorError):
    """Snapshot file loading/parsing failure."""


class ProviderError(MigratorError):
    """Base remote API operation failure."""


class AuthenticationError(ProviderError):
    """Authentication/authorization failure."""


class MigrationError(MigratorError):
    """Engine-level failure that halts the run.

    ``project_url`` is set once the target project exists, so the operator can
    inspect what was migrated before the failure.
    """

    def __init__(self, message: str, *, project_url: str | None = None) -> None:
        super().__init__(message)
        self.project_url = project_url


class OptionCorrelationMismatch(MigrationError):
    """Source and target single-select options cannot be paired by name."""

    def __init__(
        self,
        message: str,
        *,
        source_names: tuple[str, ...] = (),
        target_names: tuple[str, ...] = (),
        project_url: str | None = None,
    ) -> None:
        super().__init__(message, project_url=project_url)
        self.source_names = source_names
        self.target_names = target_names


class UnsupportedContentType(MigrationError):
    """Project item content is not an Issue, PullRequest or DraftIssue."""

    def __init__(self, message: str, *, typename: str, project_url: str | None = None) -> None:
        super().__init__(message, project_url=project_url)
        self.typename = typename


class TitleMismatchError(MigrationError):
    """Resolved target issue/pull request title differs from the snapshot title."""


class StatusReconciliationAborted(MigrationError):
    """Operator aborted while reconciling the Status field options."""
