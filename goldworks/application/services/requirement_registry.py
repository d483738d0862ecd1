"""Requirement schema registry.

Read-only lookup from department to the schema a worker must satisfy.
Disabled departments get their reduced schema.
"""

from __future__ import annotations

from collections.abc import Mapping

from goldworks.application.interfaces.services import IFeatureFlagService
from goldworks.application.services.requirement_catalog import (
    FULL_SCHEMAS,
    REDUCED_SCHEMAS,
)
from goldworks.domain.entities.department import DEPARTMENTS, Department
from goldworks.domain.enums import DepartmentKey
from goldworks.domain.exceptions import SchemaNotFoundException
from goldworks.domain.value_objects.core import RequirementSchema


class _AllEnabled:
    def is_department_enabled(self, department: DepartmentKey | str) -> bool:
        return True


class RequirementSchemaRegistry:
    """Lookup of RequirementSchema by department.

    Construction fails with ValueError unless full_schemas covers every
    DepartmentKey, so a missing department is caught at startup rather
    than when a worker opens the form.
    """

    def __init__(
        self,
        flags: IFeatureFlagService | None = None,
        full_schemas: Mapping[DepartmentKey, RequirementSchema] | None = None,
        reduced_schemas: Mapping[DepartmentKey, RequirementSchema] | None = None,
    ) -> None:
        full = dict(FULL_SCHEMAS if full_schemas is None else full_schemas)
        reduced = dict(REDUCED_SCHEMAS if reduced_schemas is None else reduced_schemas)
        missing = [k.value for k in DepartmentKey if k not in full]
        if missing:
            raise ValueError(f"Requirement catalog is missing departments: {missing}")
        for key, schema in (*full.items(), *reduced.items()):
            if schema.department != key:
                raise ValueError(
                    f"Schema for {key.value} is declared for {schema.department.value}"
                )
        self._full = full
        self._reduced = reduced
        self._flags: IFeatureFlagService = flags or _AllEnabled()

    def get(self, department: DepartmentKey | str) -> RequirementSchema | None:
        """Return the active schema for department, or None when none is configured."""
        key = DepartmentKey.parse(department)
        if key is None or key not in self._full:
            return None
        if self._flags.is_department_enabled(key):
            return self._full[key]
        return self._reduced.get(key) or self._full[key].reduced()

    def require(self, department: DepartmentKey | str) -> RequirementSchema:
        """Like get() but raises SchemaNotFoundException instead of returning None."""
        schema = self.get(department)
        if schema is None:
            raise SchemaNotFoundException(str(getattr(department, "value", department)))
        return schema

    def departments(self) -> list[tuple[Department, bool]]:
        """All departments in pipeline order with their enabled flag."""
        return [
            (dept, self._flags.is_department_enabled(dept.key))
            for dept in sorted(DEPARTMENTS, key=lambda d: d.sequence)
        ]

    def required_photo_count(self, department: DepartmentKey | str) -> int:
        """Minimum photos needed across all required photo categories."""
        schema = self.get(department)
        if schema is None:
            return 0
        return sum(p.effective_min_count for p in schema.required_photo_requirements)

    def required_file_count(self, department: DepartmentKey | str) -> int:
        schema = self.get(department)
        if schema is None:
            return 0
        return len(schema.required_file_requirements)
