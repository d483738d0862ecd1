"""Department and requirement schema API schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from goldworks.domain.enums import DepartmentKey, FieldType
from goldworks.domain.value_objects.core import FormField, RequirementSchema


class DepartmentResponse(BaseModel):
    """One pipeline stage with its current enablement."""

    key: DepartmentKey
    display_name: str
    sequence: int
    enabled: bool
    required_photo_count: int = 0
    required_file_count: int = 0


class FormFieldResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    label: str
    type: FieldType
    required: bool
    placeholder: str | None = None
    help_text: str | None = None
    options: list[str] = Field(default_factory=list)
    constraints: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_field(cls, field: FormField) -> "FormFieldResponse":
        return cls(
            name=field.name,
            label=field.label,
            type=field.type,
            required=field.required,
            placeholder=field.placeholder,
            help_text=field.help_text,
            options=list(field.options),
            constraints=field.constraints,
        )


class PhotoRequirementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    label: str
    description: str = ""
    required: bool
    min_count: int | None = None
    max_count: int | None = None


class FileRequirementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    label: str
    description: str = ""
    required: bool
    accepted_formats: list[str] = Field(default_factory=list)
    max_size_mb: float | None = None


class RequirementSchemaResponse(BaseModel):
    """Requirement schema in effect for a department (full or reduced)."""

    department: DepartmentKey
    enabled: bool
    title: str
    description: str = ""
    form_fields: list[FormFieldResponse] = Field(default_factory=list)
    photo_requirements: list[PhotoRequirementResponse] = Field(default_factory=list)
    file_requirements: list[FileRequirementResponse] = Field(default_factory=list)
    estimated_time: str | None = None
    required_tools: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)
    common_mistakes: list[str] = Field(default_factory=list)
    coming_soon_message: str | None = None

    @classmethod
    def from_schema(
        cls, schema: RequirementSchema, enabled: bool
    ) -> "RequirementSchemaResponse":
        return cls(
            department=schema.department,
            enabled=enabled,
            title=schema.title,
            description=schema.description,
            form_fields=[FormFieldResponse.from_field(f) for f in schema.form_fields],
            photo_requirements=[
                PhotoRequirementResponse.model_validate(p) for p in schema.photo_requirements
            ],
            file_requirements=[
                FileRequirementResponse.model_validate(f) for f in schema.file_requirements
            ],
            estimated_time=schema.estimated_time,
            required_tools=list(schema.required_tools),
            tips=list(schema.tips),
            common_mistakes=list(schema.common_mistakes),
            coming_soon_message=schema.coming_soon_message,
        )


class FeatureFlagUpdate(BaseModel):
    """Request body for PUT /departments/{key}/feature-flag."""

    enabled: bool


class FeatureFlagsResponse(BaseModel):
    """All department flags keyed by department key."""

    flags: dict[str, bool]
