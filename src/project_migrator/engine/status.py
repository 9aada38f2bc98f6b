"""Human-in-the-loop reconciliation of the built-in Status field.

The target project is created with a Status field whose options are platform
defaults, and those options cannot be changed through the API. The operator
edits them by hand; this module checks the result and asks again until the
options line up with the source.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import StrEnum

from project_migrator.contracts.correlation import FieldCorrelation
from project_migrator.contracts.exceptions import OptionCorrelationMismatch, ProviderError, StatusReconciliationAborted
from project_migrator.contracts.provider import ProjectProvider
from project_migrator.contracts.remote import CreatedProject
from project_migrator.contracts.snapshot import FieldDefinition
from project_migrator.engine.fields import STATUS_FIELD_NAME, correlate_options
from project_migrator.engine.progress import PHASE_STATUS, MigrationProgress, NullMigrationProgress

_LOG = logging.getLogger(__name__)


class ReconciliationState(StrEnum):
    CHECKING = "checking"
    PROMPTING = "prompting"
    DONE = "done"
    FAILED = "failed"


class PromptMode(StrEnum):
    FIRST = "first"
    RETRY = "retry"


class OperatorPrompt(ABC):
    """Blocks until the operator confirms they have edited the Status options."""

    @abstractmethod
    async def acknowledge(self, message: str) -> bool:
        """Show *message* and wait. Return ``False`` if the operator aborted."""


def status_settings_url(project_url: str) -> str:
    return f"{project_url.rstrip('/')}/settings/fields/{STATUS_FIELD_NAME}"


def first_prompt_message(project_url: str, expected_options: list[str]) -> str:
    return (
        "Your new project has been created.\n\n"
        'You now need to manually update the "Status" field\'s options to match your source. '
        "Here's what you need to do:\n\n"
        f"1. Go to <{status_settings_url(project_url)}>.\n"
        f"2. Make sure you have exactly the following options configured: {', '.join(expected_options)}\n\n"
        "Once you've done that, hit Enter and we'll check that everything looks good."
    )


RETRY_PROMPT_MESSAGE = (
    "Your \"Status\" field's options don't look quite right. "
    "Please double check, and then when you're ready, hit Enter."
)


class StatusFieldReconciler:
    def __init__(
        self,
        provider: ProjectProvider,
        operator: OperatorPrompt,
        progress: MigrationProgress | None = None,
    ) -> None:
        self._provider = provider
        self._operator = operator
        self._progress = progress or NullMigrationProgress()

    async def reconcile(self, source_field: FieldDefinition, project: CreatedProject) -> FieldCorrelation:
        """Loop until the target Status options correlate with *source_field*'s.

        There is no attempt limit; the loop ends when the options match or the
        operator aborts.
        """
        source_options = source_field.options or []
        expected = [option.name for option in source_options]
        state = ReconciliationState.CHECKING
        mode = PromptMode.FIRST
        attempts = 0
        correlation: FieldCorrelation | None = None

        self._progress.phase_start(PHASE_STATUS)
        while state not in (ReconciliationState.DONE, ReconciliationState.FAILED):
            if state is ReconciliationState.CHECKING:
                attempts += 1
                target_field = await self._provider.get_field_by_name(project.id, STATUS_FIELD_NAME)
                if target_field is None:
                    raise ProviderError(f'Target project {project.url} has no "{STATUS_FIELD_NAME}" field')
                try:
                    mapping = correlate_options(source_options, target_field.options, field_name=STATUS_FIELD_NAME)
                except OptionCorrelationMismatch as exc:
                    _LOG.debug("Status options do not match yet (attempt %d): %s", attempts, exc)
                    state = ReconciliationState.PROMPTING
                else:
                    correlation = FieldCorrelation(target_field_id=target_field.id, option_correlation=mapping)
                    state = ReconciliationState.DONE
            else:
                if mode is PromptMode.FIRST:
                    message = first_prompt_message(project.url, expected)
                else:
                    message = RETRY_PROMPT_MESSAGE
                with self._progress.suspended():
                    acknowledged = await self._operator.acknowledge(message)
                if acknowledged:
                    mode = PromptMode.RETRY
                    state = ReconciliationState.CHECKING
                else:
                    state = ReconciliationState.FAILED

        if state is ReconciliationState.FAILED or correlation is None:
            error = StatusReconciliationAborted(
                'Aborted while waiting for the "Status" field to be configured', project_url=project.url
            )
            self._progress.phase_error(PHASE_STATUS, error)
            raise error

        self._progress.phase_done(PHASE_STATUS)
        _LOG.info('"Status" field options matched after %d check(s)', attempts)
        return correlation
