"""Custom field recreation and option correlation."""

from __future__ import annotations

import logging

import pytest

from project_migrator.contracts.correlation import CorrelationTable
from project_migrator.contracts.exceptions import OptionCorrelationMismatch
from project_migrator.contracts.remote import OptionColor, ProjectFieldOption
from project_migrator.contracts.snapshot import FieldDefinition, FieldOption, ProjectSnapshot
from project_migrator.engine.fields import (
    PLACEHOLDER_DESCRIPTION,
    FieldCorrelator,
    build_option_inputs,
    correlate_options,
    is_custom_field,
)
from tests.fakes.provider import FakeProjectProvider


def _field(field_id: str, name: str, data_type: str, options: list[FieldOption] | None = None) -> FieldDefinition:
    return FieldDefinition(id=field_id, name=name, data_type=data_type, options=options)


def test_correlate_options_pairs_by_name_regardless_of_order() -> None:
    source = [FieldOption(id="s1", name="High"), FieldOption(id="s2", name="Low")]
    target = [ProjectFieldOption(id="t2", name="Low"), ProjectFieldOption(id="t1", name="High")]

    assert correlate_options(source, target) == {"s1": "t1", "s2": "t2"}


def test_correlate_options_rejects_count_mismatch() -> None:
    source = [FieldOption(id="s1", name="A"), FieldOption(id="s2", name="B")]
    target = [ProjectFieldOption(id=f"t{index}", name=name) for index, name in enumerate("ABC")]

    with pytest.raises(OptionCorrelationMismatch) as exc_info:
        correlate_options(source, target, field_name="Status")

    assert exc_info.value.source_names == ("A", "B")
    assert exc_info.value.target_names == ("A", "B", "C")


def test_correlate_options_rejects_unknown_name() -> None:
    source = [FieldOption(id="s1", name="A")]
    target = [ProjectFieldOption(id="t1", name="Z")]

    with pytest.raises(OptionCorrelationMismatch, match='no target option named "A"'):
        correlate_options(source, target)


def test_correlate_empty_option_lists() -> None:
    assert correlate_options([], []) == {}


def test_is_custom_field() -> None:
    assert is_custom_field(_field("F1", "Notes", "TEXT"))
    assert is_custom_field(_field("F2", "Estimate", "NUMBER"))
    assert is_custom_field(_field("F3", "Due", "DATE"))
    assert is_custom_field(_field("F4", "Priority", "SINGLE_SELECT"))
    assert not is_custom_field(_field("F5", "Status", "SINGLE_SELECT"))
    assert not is_custom_field(_field("F6", "Title", "TITLE"))
    assert not is_custom_field(_field("F7", "Sprint", "ITERATION"))


def test_build_option_inputs_fills_placeholders_with_warnings(caplog: pytest.LogCaptureFixture) -> None:
    field = _field(
        "F1",
        "Priority",
        "SINGLE_SELECT",
        [FieldOption(id="s1", name="High", color="RED", description="urgent"), FieldOption(id="s2", name="Low")],
    )

    with caplog.at_level(logging.WARNING, logger="project_migrator.engine.fields"):
        inputs = build_option_inputs(field)

    assert [(option.name, option.color, option.description) for option in inputs] == [
        ("High", "RED", "urgent"),
        ("Low", OptionColor.BLUE, PLACEHOLDER_DESCRIPTION),
    ]
    assert len(caplog.records) == 2


@pytest.mark.asyncio
async def test_correlate_fields_creates_custom_fields_in_order() -> None:
    provider = FakeProjectProvider()
    snapshot = ProjectSnapshot(
        title="Roadmap",
        fields=[
            _field("F_title", "Title", "TITLE"),
            _field("F_status", "Status", "SINGLE_SELECT", [FieldOption(id="s1", name="Todo")]),
            _field("F_notes", "Notes", "TEXT"),
            _field(
                "F_prio",
                "Priority",
                "SINGLE_SELECT",
                [FieldOption(id="p1", name="High", color="RED", description="x")],
            ),
        ],
    )
    table = CorrelationTable()

    created = await FieldCorrelator(provider).correlate_fields(snapshot, "project-1", table)

    assert created == 2
    created_names = [args[1] for name, args in provider.calls if name == "create_field"]
    assert created_names == ["Notes", "Priority"]
    notes = table.get("F_notes")
    priority = table.get("F_prio")
    assert notes is not None and notes.option_correlation is None
    assert priority is not None
    assert priority.target_field_id == provider.fields["Priority"].id
    assert priority.option_correlation == {"p1": provider.fields["Priority"].options[0].id}
    assert "F_status" not in table
    assert "F_title" not in table
