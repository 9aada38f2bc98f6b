"""Migration pipeline orchestrator."""

from __future__ import annotations

import logging

from project_migrator.contracts.config import MigrationConfig
from project_migrator.contracts.correlation import CorrelationTable
from project_migrator.contracts.exceptions import ConfigError, MigrationError
from project_migrator.contracts.provider import ProjectProvider
from project_migrator.contracts.remote import CreatedProject
from project_migrator.contracts.result import MigrationResult
from project_migrator.contracts.snapshot import FieldDataType, ProjectSnapshot
from project_migrator.engine.deployment import check_deployment
from project_migrator.engine.fields import STATUS_FIELD_NAME, FieldCorrelator
from project_migrator.engine.items import ItemReplicator
from project_migrator.engine.progress import PHASE_ITEMS, PHASE_REPOSITORIES, MigrationProgress, NullMigrationProgress
from project_migrator.engine.resolver import IdentifierResolver
from project_migrator.engine.status import OperatorPrompt, StatusFieldReconciler
from project_migrator.mappings.table import RepositoryMappingTable

_LOG = logging.getLogger(__name__)


class MigrationOrchestrator:
    """Sequences one migration run against a single provider.

    Skippable conditions are handled (and logged) by the components that
    detect them; everything else propagates and ends the run. The target
    project is never rolled back.
    """

    def __init__(
        self,
        provider: ProjectProvider,
        operator: OperatorPrompt,
        config: MigrationConfig,
        *,
        progress: MigrationProgress | None = None,
    ) -> None:
        self._provider = provider
        self._operator = operator
        self._config = config
        self._progress = progress or NullMigrationProgress()
        self._resolver = IdentifierResolver(provider)

    async def run(self, snapshot: ProjectSnapshot, mappings: RepositoryMappingTable) -> MigrationResult:
        referenced = snapshot.referenced_repositories()
        if referenced and not len(mappings):
            raise ConfigError(
                f"The snapshot references {len(referenced)} repositor{'y' if len(referenced) == 1 else 'ies'} "
                "but your repository mappings file has no mappings. Fill in at least one target_repository "
                "and try again."
            )

        await check_deployment(self._provider)

        owner = self._config.project_owner
        owner_type = self._config.project_owner_type
        _LOG.info("Looking up ID for target %s %s...", owner_type.value, owner)
        owner_id = await self._resolver.resolve_owner(owner, owner_type)

        title = self._config.project_title or snapshot.title
        project = await self._provider.create_project(owner_id, title)
        _LOG.info('Created project "%s" with ID %s', title, project.id)
        result = MigrationResult(project_id=project.id, project_url=project.url)

        try:
            await self._link_repositories(snapshot, mappings, project, result)

            correlations = CorrelationTable()
            result.fields_created = await FieldCorrelator(self._provider, self._progress).correlate_fields(
                snapshot, project.id, correlations
            )
            await self._reconcile_status(snapshot, project, correlations)
            correlations.freeze()

            await self._replicate_items(snapshot, mappings, project, correlations, result)
        except MigrationError as exc:
            if exc.project_url is None:
                exc.project_url = project.url
            raise

        return result

    async def _link_repositories(
        self,
        snapshot: ProjectSnapshot,
        mappings: RepositoryMappingTable,
        project: CreatedProject,
        result: MigrationResult,
    ) -> None:
        total = len(snapshot.repositories)
        self._progress.phase_start(PHASE_REPOSITORIES, total=total)
        if total:
            _LOG.info("Linking %d repositor%s to project...", total, "y" if total == 1 else "ies")

        for index, repository in enumerate(snapshot.repositories, start=1):
            target = mappings.lookup(repository.name_with_owner)
            if target is None:
                _LOG.warning(
                    "Skipping source repository %s because there is no repository mapping",
                    repository.name_with_owner,
                )
                result.repositories_skipped += 1
                self._progress.item_done(PHASE_REPOSITORIES)
                continue

            repository_id = await self._resolver.resolve_repository(target)
            await self._provider.link_repository(project.id, repository_id)
            _LOG.info("Linked repository %s (%d/%d)", target, index, total)
            result.repositories_linked += 1
            self._progress.item_done(PHASE_REPOSITORIES)

        self._progress.phase_done(PHASE_REPOSITORIES)

    async def _reconcile_status(
        self,
        snapshot: ProjectSnapshot,
        project: CreatedProject,
        correlations: CorrelationTable,
    ) -> None:
        source_status = snapshot.field_named(STATUS_FIELD_NAME)
        if source_status is None or source_status.data_type != FieldDataType.SINGLE_SELECT:
            _LOG.info('Source project has no "Status" field; nothing to reconcile')
            return

        _LOG.info('Checking if "Status" field is configured correctly...')
        reconciler = StatusFieldReconciler(self._provider, self._operator, self._progress)
        correlations.add(source_status.id, await reconciler.reconcile(source_status, project))
        _LOG.info('Finished configuring "Status" field.')

    async def _replicate_items(
        self,
        snapshot: ProjectSnapshot,
        mappings: RepositoryMappingTable,
        project: CreatedProject,
        correlations: CorrelationTable,
        result: MigrationResult,
    ) -> None:
        replicator = ItemReplicator(
            self._provider,
            self._resolver,
            mappings,
            correlations,
            project.id,
            title_mismatch=self._config.title_mismatch,
        )
        total = len(snapshot.items)
        _LOG.info("Creating %d project item(s)...", total)
        self._progress.phase_start(PHASE_ITEMS, total=total)

        for index, item in enumerate(snapshot.items, start=1):
            _LOG.info("Creating project item %d/%d based on source project item %s...", index, total, item.id)
            try:
                outcome = await replicator.replicate(item)
            except Exception as exc:
                self._progress.phase_error(PHASE_ITEMS, exc)
                raise

            if outcome.created:
                result.items_created += 1
            else:
                result.items_skipped += 1
            if outcome.archived:
                result.items_archived += 1
            result.field_values_set += outcome.values_set
            result.field_values_skipped += outcome.values_skipped
            self._progress.item_done(PHASE_ITEMS)

        self._progress.phase_done(PHASE_ITEMS)
