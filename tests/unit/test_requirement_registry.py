"""Tests for the requirement catalog and schema registry."""

import pytest

from goldworks.application.services.feature_flags import DepartmentFeatureFlags
from goldworks.application.services.requirement_catalog import (
    CONFIG_IDS,
    FULL_SCHEMAS,
    REDUCED_SCHEMAS,
    resolve_department_key,
)
from goldworks.application.services.requirement_registry import RequirementSchemaRegistry
from goldworks.domain.enums import DepartmentKey
from goldworks.domain.exceptions import SchemaNotFoundException


def test_catalog_covers_every_department() -> None:
    assert set(FULL_SCHEMAS) == set(DepartmentKey)
    assert set(CONFIG_IDS) == set(DepartmentKey)
    for key, schema in FULL_SCHEMAS.items():
        assert schema.department is key
        assert schema.title


def test_every_full_schema_has_something_required() -> None:
    for schema in FULL_SCHEMAS.values():
        assert (
            schema.required_fields
            or schema.required_photo_requirements
            or schema.required_file_requirements
        ), schema.department


def test_casting_schema_matches_workshop_form() -> None:
    casting = FULL_SCHEMAS[DepartmentKey.CASTING]
    weight = casting.field("metalWeight")
    assert weight is not None and weight.required
    assert (weight.min_value, weight.max_value) == (0.1, 500)
    piece = casting.photo_requirement("castedPiece")
    assert piece is not None and piece.min_count == 2


def test_resolve_department_key_accepts_legacy_ids() -> None:
    assert resolve_department_key("3D_PRINTING") is DepartmentKey.PRINT
    assert resolve_department_key("stone_setting") is DepartmentKey.SETTING
    assert resolve_department_key("POLISH_1") is DepartmentKey.POLISH_1
    assert resolve_department_key("LASER") is None


def test_registry_rejects_incomplete_catalog() -> None:
    partial = {DepartmentKey.CAD: FULL_SCHEMAS[DepartmentKey.CAD]}
    with pytest.raises(ValueError, match="missing"):
        RequirementSchemaRegistry(full_schemas=partial)


def test_registry_rejects_mismatched_department() -> None:
    schemas = dict(FULL_SCHEMAS)
    schemas[DepartmentKey.MEENA] = FULL_SCHEMAS[DepartmentKey.CAD]
    with pytest.raises(ValueError, match="declared for"):
        RequirementSchemaRegistry(full_schemas=schemas)


def test_registry_returns_full_schema_when_enabled() -> None:
    registry = RequirementSchemaRegistry()
    assert registry.get("CASTING") is FULL_SCHEMAS[DepartmentKey.CASTING]
    assert registry.get("LASER") is None
    with pytest.raises(SchemaNotFoundException):
        registry.require("LASER")


async def test_disabled_print_uses_outsourcing_schema() -> None:
    flags = DepartmentFeatureFlags()
    registry = RequirementSchemaRegistry(flags=flags)
    assert not flags.is_department_enabled(DepartmentKey.PRINT)
    assert registry.get(DepartmentKey.PRINT) is REDUCED_SCHEMAS[DepartmentKey.PRINT]
    await flags.set_flag(DepartmentKey.PRINT, True)
    assert registry.get(DepartmentKey.PRINT) is FULL_SCHEMAS[DepartmentKey.PRINT]


async def test_disabled_department_without_explicit_form_gets_required_only() -> None:
    flags = DepartmentFeatureFlags()
    registry = RequirementSchemaRegistry(flags=flags)
    await flags.set_flag(DepartmentKey.CASTING, False)
    schema = registry.require(DepartmentKey.CASTING)
    assert all(f.required for f in schema.form_fields)
    assert all(p.required for p in schema.photo_requirements)
    assert schema.field("castingNotes") is None


def test_departments_listed_in_pipeline_order_with_flags() -> None:
    registry = RequirementSchemaRegistry(flags=DepartmentFeatureFlags())
    listed = registry.departments()
    assert [d.key for d, _ in listed] == list(DepartmentKey)
    enabled = {d.key: on for d, on in listed}
    assert enabled[DepartmentKey.PRINT] is False
    assert enabled[DepartmentKey.CAD] is True


def test_required_counts() -> None:
    registry = RequirementSchemaRegistry()
    assert registry.required_photo_count(DepartmentKey.CASTING) == 2
    assert registry.required_file_count("LASER") == 0
