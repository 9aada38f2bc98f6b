"""Custom field recreation and option correlation."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from project_migrator.contracts.correlation import CorrelationTable, FieldCorrelation
from project_migrator.contracts.exceptions import OptionCorrelationMismatch
from project_migrator.contracts.provider import ProjectProvider
from project_migrator.contracts.remote import OptionColor, SingleSelectOptionInput
from project_migrator.contracts.snapshot import CUSTOM_FIELD_DATA_TYPES, FieldDefinition, ProjectSnapshot
from project_migrator.engine.progress import PHASE_FIELDS, MigrationProgress, NullMigrationProgress

_LOG = logging.getLogger(__name__)

STATUS_FIELD_NAME = "Status"
PLACEHOLDER_DESCRIPTION = "Placeholder description"
PLACEHOLDER_COLOR = OptionColor.BLUE


class _NamedOption(Protocol):
    @property
    def id(self) -> str: ...

    @property
    def name(self) -> str: ...


def is_custom_field(field: FieldDefinition) -> bool:
    """Fields the project owns and that can be created through the API."""
    return field.data_type in CUSTOM_FIELD_DATA_TYPES and field.name != STATUS_FIELD_NAME


def build_option_inputs(field: FieldDefinition) -> list[SingleSelectOptionInput]:
    """Creation inputs for *field*'s options, filling in missing description/color.

    Placeholders are a lossy default: the source metadata simply did not exist.
    """
    inputs: list[SingleSelectOptionInput] = []
    for option in field.options or []:
        description = option.description
        if description is None:
            _LOG.warning(
                'Added a placeholder description for option "%s" on custom field "%s"', option.name, field.name
            )
            description = PLACEHOLDER_DESCRIPTION
        color = option.color
        if color is None:
            _LOG.warning('Added a default color for option "%s" on custom field "%s"', option.name, field.name)
            color = PLACEHOLDER_COLOR
        inputs.append(SingleSelectOptionInput(name=option.name, color=color, description=description))
    return inputs


def correlate_options(
    source_options: Sequence[_NamedOption],
    target_options: Sequence[_NamedOption],
    *,
    field_name: str = "",
) -> dict[str, str]:
    """Pair source and target options by name, returning source ID → target ID.

    The target is expected to keep the declared names while assigning new IDs,
    so anything other than a one-to-one name match is a structural failure.
    """
    source_names = tuple(option.name for option in source_options)
    target_names = tuple(option.name for option in target_options)
    label = f' on field "{field_name}"' if field_name else ""

    if len(source_options) != len(target_options):
        raise OptionCorrelationMismatch(
            f"Unable to correlate options{label}: source has {len(source_options)} option(s), "
            f"target has {len(target_options)}",
            source_names=source_names,
            target_names=target_names,
        )

    target_ids_by_name = {option.name: option.id for option in target_options}
    correlation: dict[str, str] = {}
    for option in source_options:
        target_id = target_ids_by_name.get(option.name)
        if target_id is None:
            raise OptionCorrelationMismatch(
                f'Unable to correlate options{label}: no target option named "{option.name}"',
                source_names=source_names,
                target_names=target_names,
            )
        correlation[option.id] = target_id
    return correlation


class FieldCorrelator:
    def __init__(self, provider: ProjectProvider, progress: MigrationProgress | None = None) -> None:
        self._provider = provider
        self._progress = progress or NullMigrationProgress()

    async def correlate_fields(self, snapshot: ProjectSnapshot, project_id: str, table: CorrelationTable) -> int:
        """Create every custom field on *project_id*, recording each in *table*. Returns the count."""
        custom_fields = [field for field in snapshot.fields if is_custom_field(field)]
        _LOG.info("Creating %d custom field(s)...", len(custom_fields))
        self._progress.phase_start(PHASE_FIELDS, total=len(custom_fields))

        for field in custom_fields:
            try:
                correlation = await self._create_field(field, project_id)
            except Exception as exc:
                self._progress.phase_error(PHASE_FIELDS, exc)
                raise
            table.add(field.id, correlation)
            self._progress.item_done(PHASE_FIELDS)

        self._progress.phase_done(PHASE_FIELDS)
        _LOG.info("Created %d custom field(s)", len(custom_fields))
        return len(custom_fields)

    async def _create_field(self, field: FieldDefinition, project_id: str) -> FieldCorrelation:
        options = build_option_inputs(field) if field.is_single_select else None
        created = await self._provider.create_field(project_id, field.name, str(field.data_type), options)
        _LOG.debug('Created field "%s" as %s', field.name, created.id)

        option_correlation = None
        if field.is_single_select:
            option_correlation = correlate_options(field.options or [], created.options, field_name=field.name)
        return FieldCorrelation(target_field_id=created.id, option_correlation=option_correlation)
