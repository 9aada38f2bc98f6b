"""SDK composition root for project-migrator."""

from __future__ import annotations

import logging
from pathlib import Path

from project_migrator.auth import create_token_resolver
from project_migrator.contracts.config import MigrationConfig
from project_migrator.contracts.exceptions import ConfigError
from project_migrator.contracts.provider import ProjectProvider
from project_migrator.contracts.result import MigrationResult
from project_migrator.contracts.snapshot import ProjectSnapshot
from project_migrator.engine import MigrationOrchestrator, RateLimitMonitor
from project_migrator.engine.progress import MigrationProgress
from project_migrator.engine.status import OperatorPrompt
from project_migrator.mappings import RepositoryMappingTable
from project_migrator.providers import create_provider
from project_migrator.snapshot import SnapshotLoader

_LOG = logging.getLogger(__name__)


def _require_file(path: Path, description: str) -> None:
    if not path.exists():
        raise ConfigError(f"{description} not found: {path}")
    if not path.is_file():
        raise ConfigError(f"{description} is not a file: {path}")


def load_snapshot(path: str | Path) -> ProjectSnapshot:
    """Load an exported project snapshot from *path*."""
    return SnapshotLoader().load(Path(path))


def load_mappings(path: str | Path) -> RepositoryMappingTable:
    """Load the repository mapping CSV from *path*."""
    return RepositoryMappingTable.load(Path(path))


class ProjectMigrator:
    """project-migrator SDK public API."""

    def __init__(
        self,
        *,
        config: MigrationConfig,
        operator: OperatorPrompt,
        provider: ProjectProvider | None = None,
        progress: MigrationProgress | None = None,
        rate_limit_interval: float = 30.0,
    ) -> None:
        self._config = config
        self._operator = operator
        self._provider = provider
        self._progress = progress
        self._rate_limit_interval = rate_limit_interval

    async def migrate(self) -> MigrationResult:
        """Run one migration of the configured snapshot into a new target project."""
        config = self._config
        _require_file(config.input_path, "Input file")
        _require_file(config.repository_mappings_path, "Repository mappings file")

        snapshot = load_snapshot(config.input_path)
        _LOG.info(
            'Loaded project "%s" with %d field(s) and %d item(s)',
            snapshot.title,
            len(snapshot.fields),
            len(snapshot.items),
        )
        mappings = load_mappings(config.repository_mappings_path)
        _LOG.info("Loaded %d repository mapping(s)", len(mappings))

        provider = await self._resolve_provider()
        async with provider:
            async with RateLimitMonitor(provider, interval=self._rate_limit_interval):
                orchestrator = MigrationOrchestrator(provider, self._operator, config, progress=self._progress)
                return await orchestrator.run(snapshot, mappings)

    async def _resolve_provider(self) -> ProjectProvider:
        if self._provider is not None:
            return self._provider

        token = await create_token_resolver(self._config).resolve()
        return create_provider(self._config, token=token)
