"""Department API: pipeline stages, requirement schemas and feature flags."""

from typing import Annotated

from fastapi import APIRouter, Depends

from goldworks.api.v1.dependencies import (
    get_feature_flags,
    get_requirement_registry,
    parse_department_key,
)
from goldworks.application.services.feature_flags import DepartmentFeatureFlags
from goldworks.application.services.requirement_registry import RequirementSchemaRegistry
from goldworks.schemas.department import (
    DepartmentResponse,
    FeatureFlagsResponse,
    FeatureFlagUpdate,
    RequirementSchemaResponse,
)

router = APIRouter()


@router.get("", response_model=list[DepartmentResponse])
async def list_departments(
    registry: Annotated[RequirementSchemaRegistry, Depends(get_requirement_registry)],
):
    """All departments in pipeline order with enablement and requirement counts."""
    return [
        DepartmentResponse(
            key=department.key,
            display_name=department.display_name,
            sequence=department.sequence,
            enabled=enabled,
            required_photo_count=registry.required_photo_count(department.key),
            required_file_count=registry.required_file_count(department.key),
        )
        for department, enabled in registry.departments()
    ]


@router.get("/feature-flags", response_model=FeatureFlagsResponse)
async def get_feature_flags_snapshot(
    flags: Annotated[DepartmentFeatureFlags, Depends(get_feature_flags)],
):
    return FeatureFlagsResponse(flags=flags.snapshot())


@router.get("/{key}/requirements", response_model=RequirementSchemaResponse)
async def get_requirements(
    key: str,
    registry: Annotated[RequirementSchemaRegistry, Depends(get_requirement_registry)],
    flags: Annotated[DepartmentFeatureFlags, Depends(get_feature_flags)],
):
    """Schema in effect for the department (reduced when the department is disabled)."""
    department = parse_department_key(key)
    schema = registry.require(department)
    return RequirementSchemaResponse.from_schema(
        schema, enabled=flags.is_department_enabled(department)
    )


@router.put("/{key}/feature-flag", response_model=FeatureFlagsResponse)
async def set_feature_flag(
    key: str,
    body: FeatureFlagUpdate,
    flags: Annotated[DepartmentFeatureFlags, Depends(get_feature_flags)],
):
    """Enable or disable a department; returns all flags."""
    snapshot = await flags.set_flag(parse_department_key(key), body.enabled)
    return FeatureFlagsResponse(flags=snapshot)


@router.delete("/feature-flags", response_model=FeatureFlagsResponse)
async def reset_feature_flags(
    flags: Annotated[DepartmentFeatureFlags, Depends(get_feature_flags)],
):
    """Restore default flags."""
    return FeatureFlagsResponse(flags=await flags.reset_flags())
