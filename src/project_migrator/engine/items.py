"""Project item replication."""

from __future__ import annotations

import logging

from project_migrator.contracts.config import TitleMismatchSeverity
from project_migrator.contracts.correlation import CorrelationTable, FieldCorrelation
from project_migrator.contracts.exceptions import TitleMismatchError, UnsupportedContentType
from project_migrator.contracts.provider import ProjectProvider
from project_migrator.contracts.remote import FieldValuePayload
from project_migrator.contracts.result import ItemOutcome
from project_migrator.contracts.snapshot import (
    SYSTEM_VALUE_KINDS,
    DraftIssueContent,
    FieldValue,
    FieldValueKind,
    IssueContent,
    ProjectItemSnapshot,
    PullRequestContent,
)
from project_migrator.engine.resolver import IdentifierResolver, split_name_with_owner
from project_migrator.mappings.table import RepositoryMappingTable

_LOG = logging.getLogger(__name__)

TITLE_FIELD_NAME = "Title"


def draft_issue_body(content: DraftIssueContent) -> str:
    """Original body prefixed with who created the draft and when."""
    return f"Created by @{content.creator_login} on {content.created_at}\n\n{content.body}"


def is_replayable_value(value: FieldValue) -> bool:
    """Values the target lets us write: not system-managed and not the item title."""
    return value.kind not in SYSTEM_VALUE_KINDS and value.field_name != TITLE_FIELD_NAME


def build_field_value(value: FieldValue, correlation: FieldCorrelation) -> FieldValuePayload:
    """Translate a snapshot value into a target payload with exactly one member set.

    A select option with no target correlate yields an empty payload.
    """
    if value.kind is FieldValueKind.TEXT:
        return FieldValuePayload(text=value.text)
    if value.kind is FieldValueKind.NUMBER:
        return FieldValuePayload(number=value.number)
    if value.kind is FieldValueKind.DATE:
        return FieldValuePayload(date=value.date)
    if value.kind is FieldValueKind.SINGLE_SELECT:
        option_id = None
        if value.option_id is not None and correlation.option_correlation is not None:
            option_id = correlation.option_correlation.get(value.option_id)
        return FieldValuePayload(single_select_option_id=option_id)
    return FieldValuePayload()


class ItemReplicator:
    """Recreates snapshot items on the target project, one at a time.

    Reads *correlations* only; the table is expected to be frozen by the time
    items are replicated.
    """

    def __init__(
        self,
        provider: ProjectProvider,
        resolver: IdentifierResolver,
        mappings: RepositoryMappingTable,
        correlations: CorrelationTable,
        project_id: str,
        *,
        title_mismatch: TitleMismatchSeverity = TitleMismatchSeverity.WARN,
    ) -> None:
        self._provider = provider
        self._resolver = resolver
        self._mappings = mappings
        self._correlations = correlations
        self._project_id = project_id
        self._title_mismatch = title_mismatch

    async def replicate(self, item: ProjectItemSnapshot) -> ItemOutcome:
        outcome = ItemOutcome(source_item_id=item.id)

        target_item_id, skipped_reason = await self._create(item)
        if target_item_id is None:
            outcome.skipped_reason = skipped_reason
            return outcome
        outcome.target_item_id = target_item_id
        _LOG.info("Created project item %s based on source project item %s", target_item_id, item.id)

        if item.is_archived:
            _LOG.info("Archiving project item %s...", target_item_id)
            await self._provider.archive_item(self._project_id, target_item_id)
            outcome.archived = True

        values = [value for value in item.field_values if is_replayable_value(value)]
        for index, value in enumerate(values, start=1):
            _LOG.debug(
                'Setting field "%s" (%d/%d) on project item %s', value.field_name, index, len(values), target_item_id
            )
            if await self._replay_value(target_item_id, value):
                outcome.values_set += 1
            else:
                outcome.values_skipped += 1
        return outcome

    async def _create(self, item: ProjectItemSnapshot) -> tuple[str | None, str | None]:
        content = item.content
        if isinstance(content, IssueContent | PullRequestContent):
            return await self._create_from_issue_or_pull_request(item.id, content)
        if isinstance(content, DraftIssueContent):
            item_id = await self._provider.add_draft_issue(self._project_id, content.title, draft_issue_body(content))
            return item_id, None
        raise UnsupportedContentType(
            f"Project item {item.id} has unsupported content type", typename=type(content).__name__
        )

    async def _create_from_issue_or_pull_request(
        self, source_item_id: str, content: IssueContent | PullRequestContent
    ) -> tuple[str | None, str | None]:
        source_repository = content.repository_name_with_owner
        target_repository = self._mappings.lookup(source_repository)
        if target_repository is None:
            _LOG.warning(
                "Skipping project item %s because there is no repository mapping for %s",
                source_item_id,
                source_repository,
            )
            return None, "no repository mapping"

        owner, name = split_name_with_owner(target_repository)
        target = await self._resolver.resolve_issue_or_pull_request(owner, name, content.number)
        if target is None:
            _LOG.warning(
                "Skipping project item %s because issue/pull request %s#%d does not exist",
                source_item_id,
                target_repository,
                content.number,
            )
            return None, "target issue/pull request not found"

        if target.title != content.title:
            message = (
                f"The title of issue/pull request {target_repository}#{content.number}, referenced in project "
                f"item {source_item_id}, does not match {source_repository}#{content.number}. You may have "
                "mapped the incorrect repository, or there may be an issue with your migration."
            )
            if self._title_mismatch is TitleMismatchSeverity.ERROR:
                raise TitleMismatchError(message)
            _LOG.warning(message)

        return await self._provider.add_item_by_content_id(self._project_id, target.id), None

    async def _replay_value(self, target_item_id: str, value: FieldValue) -> bool:
        if value.kind is FieldValueKind.UNKNOWN:
            _LOG.warning('Skipping field "%s" because its value type is not supported', value.field_name)
            return False

        correlation = self._correlations.get(value.field_id)
        if correlation is None:
            _LOG.warning("Skipping field %s because there is no mapping for the field", value.field_id)
            return False

        payload = build_field_value(value, correlation)
        if payload.is_empty():
            _LOG.warning(
                'Skipping field "%s" on project item %s because the value has no counterpart in the target project',
                value.field_name,
                target_item_id,
            )
            return False

        await self._provider.update_item_field_value(
            self._project_id, target_item_id, correlation.target_field_id, payload
        )
        return True
