"""Application services: requirement catalog and registry, validation, flags,
autosave, activity log and the department pipeline."""

from goldworks.application.services.activity_log import ActivityLogService
from goldworks.application.services.autosave import AutosaveTask
from goldworks.application.services.department_pipeline import DepartmentPipeline
from goldworks.application.services.feature_flags import DepartmentFeatureFlags
from goldworks.application.services.requirement_registry import RequirementSchemaRegistry
from goldworks.application.services.validation_engine import ValidationEngine

__all__ = [
    "ActivityLogService",
    "AutosaveTask",
    "DepartmentFeatureFlags",
    "DepartmentPipeline",
    "RequirementSchemaRegistry",
    "ValidationEngine",
]
