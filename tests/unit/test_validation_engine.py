"""Tests for ValidationEngine: field checks, reports and completion percent."""

from typing import Any

import pytest

from goldworks.application.services.requirement_catalog import FULL_SCHEMAS, REDUCED_SCHEMAS
from goldworks.application.services.validation_engine import ValidationEngine, round_half_up
from goldworks.domain.entities.order import WorkSubmissionEntity
from goldworks.domain.enums import DepartmentKey, FieldType
from goldworks.domain.value_objects.core import (
    AttachmentRef,
    FileRequirement,
    FormField,
    PhotoRequirement,
    RequirementSchema,
)

ALL_SCHEMAS = [*FULL_SCHEMAS.values(), *REDUCED_SCHEMAS.values()]
engine = ValidationEngine()


def _valid_value(field: FormField) -> Any:
    if field.type == FieldType.CHECKBOX:
        return True
    if field.type == FieldType.SELECT:
        return field.options[0]
    if field.type == FieldType.NUMBER:
        if field.min_value is not None:
            return field.min_value
        if field.max_value is not None and field.max_value < 1:
            return field.max_value
        return 1
    if field.type in (FieldType.TEXT, FieldType.TEXTAREA):
        return "x" * max(field.min_length or 1, 1)
    return "2026-03-02"


def _complete(schema: RequirementSchema) -> WorkSubmissionEntity:
    sub = WorkSubmissionEntity()
    for field in schema.required_fields:
        sub.form_data[field.name] = _valid_value(field)
    for req in schema.required_photo_requirements:
        for i in range(req.effective_min_count):
            sub.uploaded_photos.append(
                AttachmentRef(id=f"{req.name}-{i}", category=req.name, url="u")
            )
    for req in schema.required_file_requirements:
        ext = req.accepted_formats[0] if req.accepted_formats else ".pdf"
        sub.uploaded_files.append(
            AttachmentRef(id=f"{req.name}-f", category=req.name, url="u", name=f"model{ext}")
        )
    return sub


@pytest.mark.parametrize("schema", ALL_SCHEMAS, ids=lambda s: f"{s.department.value}-{s.title}")
def test_complete_submission_can_submit(schema: RequirementSchema) -> None:
    report = engine.evaluate(schema, _complete(schema))
    assert report.can_submit, report
    assert report.percent_complete == 100


@pytest.mark.parametrize("schema", ALL_SCHEMAS, ids=lambda s: f"{s.department.value}-{s.title}")
def test_removing_any_required_item_blocks_submit(schema: RequirementSchema) -> None:
    for field in schema.required_fields:
        sub = _complete(schema)
        del sub.form_data[field.name]
        report = engine.evaluate(schema, sub)
        assert not report.can_submit
        assert field.name in report.missing_fields
    for req in schema.required_photo_requirements:
        sub = _complete(schema)
        sub.uploaded_photos.pop(next(i for i, p in enumerate(sub.uploaded_photos) if p.category == req.name))
        report = engine.evaluate(schema, sub)
        assert not report.can_submit
        assert req.name in report.missing_photo_categories
    for req in schema.required_file_requirements:
        sub = _complete(schema)
        sub.uploaded_files = [f for f in sub.uploaded_files if f.category != req.name]
        report = engine.evaluate(schema, sub)
        assert not report.can_submit
        assert req.name in report.missing_file_categories


@pytest.mark.parametrize("schema", list(FULL_SCHEMAS.values()), ids=lambda s: s.department.value)
def test_percent_never_drops_as_required_items_are_added(schema: RequirementSchema) -> None:
    target = _complete(schema)
    sub = WorkSubmissionEntity()
    last = engine.evaluate(schema, sub).percent_complete
    for name, value in target.form_data.items():
        sub.form_data[name] = value
        current = engine.evaluate(schema, sub).percent_complete
        assert current >= last
        last = current
    for ref in [*target.uploaded_photos, *target.uploaded_files]:
        bucket = sub.uploaded_photos if ref in target.uploaded_photos else sub.uploaded_files
        bucket.append(ref)
        current = engine.evaluate(schema, sub).percent_complete
        assert current >= last
        last = current
    assert last == 100


def test_optional_items_do_not_change_percent(casting, photo) -> None:
    sub = WorkSubmissionEntity(form_data={"metalType": "22K Gold"})
    before = engine.evaluate(casting, sub).percent_complete
    sub.form_data["castingNotes"] = "clean pour"
    sub.uploaded_photos.append(photo("sprueAttachment"))
    assert engine.evaluate(casting, sub).percent_complete == before


def test_casting_scenario(casting, photo) -> None:
    sub = WorkSubmissionEntity(
        form_data={"metalType": "22K Gold", "metalWeight": 28.5},
        uploaded_photos=[photo("castedPiece"), photo("castedPiece")],
    )
    report = engine.evaluate(casting, sub)
    assert report.can_submit
    assert report.percent_complete == 100

    sub.uploaded_photos.pop()
    report = engine.evaluate(casting, sub)
    assert report.missing_photo_categories == ["castedPiece"]
    assert report.missing_fields == []
    assert report.percent_complete == 50
    assert not report.can_submit


def test_out_of_range_number_is_missing_with_message(casting) -> None:
    sub = WorkSubmissionEntity(form_data={"metalType": "18K Gold", "metalWeight": 600})
    report = engine.evaluate(casting, sub)
    assert report.missing_fields == ["metalWeight"]
    assert report.field_errors["metalWeight"] == "Metal Weight Used (grams) must be at most 500"


def test_optional_field_error_is_informational(casting, photo) -> None:
    sub = WorkSubmissionEntity(
        form_data={
            "metalType": "22K Gold",
            "metalWeight": "12",
            "castingNotes": "far too long for this field",
        },
        uploaded_photos=[photo("castedPiece"), photo("castedPiece")],
    )
    report = engine.evaluate(casting, sub)
    assert report.can_submit
    assert "castingNotes" in report.field_errors
    assert "castingNotes" not in report.missing_fields


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "Weight is required"),
        ("", "Weight is required"),
        ("abc", "Weight must be a number"),
        (True, "Weight must be a number"),
        (float("nan"), "Weight must be a number"),
        (0.05, "Weight must be at least 0.1"),
        ("0.1", None),
        (500, None),
    ],
)
def test_number_field_checks(value: Any, expected: str | None) -> None:
    field = FormField("w", "Weight", FieldType.NUMBER, required=True, min_value=0.1, max_value=500)
    assert engine.check_field(field, value) == expected


def test_required_checkbox_must_be_true() -> None:
    field = FormField("ok", "Approved", FieldType.CHECKBOX, required=True)
    assert engine.check_field(field, False) == "Approved must be checked"
    assert engine.check_field(field, None) == "Approved must be checked"
    assert engine.check_field(field, True) is None
    optional = FormField("ok", "Approved", FieldType.CHECKBOX)
    assert engine.check_field(optional, False) is None


def test_text_length_checks() -> None:
    field = FormField("n", "Notes", FieldType.TEXT, required=True, min_length=3, max_length=5)
    assert engine.check_field(field, "ab") == "Notes must be at least 3 characters"
    assert engine.check_field(field, "abcdef") == "Notes must be at most 5 characters"
    assert engine.check_field(field, "abcd") is None


def test_schema_with_nothing_required_reports_zero_percent_and_can_submit() -> None:
    schema = RequirementSchema(
        department=DepartmentKey.MEENA,
        title="Meena",
        form_fields=(FormField("notes", "Notes", FieldType.TEXTAREA),),
    )
    report = engine.evaluate(schema, WorkSubmissionEntity())
    assert report.can_submit
    assert report.percent_complete == 0


def test_three_buckets_round_half_up() -> None:
    schema = RequirementSchema(
        department=DepartmentKey.CAD,
        title="CAD",
        form_fields=(FormField("design", "Design", FieldType.TEXT, required=True),),
        photo_requirements=(PhotoRequirement("render", "Render", required=True),),
        file_requirements=(FileRequirement("model", "Model", required=True),),
    )
    sub = WorkSubmissionEntity(form_data={"design": "ring"})
    assert engine.evaluate(schema, sub).percent_complete == 33
    sub.uploaded_photos.append(AttachmentRef(id="r", category="render", url="u"))
    assert engine.evaluate(schema, sub).percent_complete == 67


def test_round_half_up() -> None:
    assert round_half_up(33.5) == 34
    assert round_half_up(66.66) == 67
    assert round_half_up(0.49) == 0
