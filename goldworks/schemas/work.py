"""Department work API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from goldworks.domain.enums import DepartmentKey, TrackingStatus
from goldworks.domain.value_objects.core import AttachmentRef


class AttachmentPayload(BaseModel):
    """Reference to an attachment already stored by the upload service."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    name: str | None = None
    mime_type: str | None = None
    size_bytes: int | None = Field(default=None, ge=0)
    uploaded_at: datetime | None = None

    def to_ref(self) -> AttachmentRef:
        return AttachmentRef(
            id=self.id,
            category=self.category,
            url=self.url,
            name=self.name,
            mime_type=self.mime_type,
            size_bytes=self.size_bytes,
            uploaded_at=self.uploaded_at,
        )


class WorkUpdateRequest(BaseModel):
    """Edits applied before saving or completing.

    form_data entries are written field by field. Attachments whose id is
    not yet on the submission are attached; existing ones are left alone.
    """

    form_data: dict[str, Any] = Field(default_factory=dict)
    uploaded_photos: list[AttachmentPayload] = Field(default_factory=list)
    uploaded_files: list[AttachmentPayload] = Field(default_factory=list)
    remove_attachment_ids: list[str] = Field(default_factory=list)


class ValidationReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    missing_fields: list[str]
    missing_photo_categories: list[str]
    missing_file_categories: list[str]
    percent_complete: int
    field_errors: dict[str, str]
    can_submit: bool


class WorkResponse(BaseModel):
    """Tracking state, submission and validation report for one department."""

    order_id: str
    department: DepartmentKey
    status: TrackingStatus
    assigned_worker_id: str | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    form_data: dict[str, Any] = Field(default_factory=dict)
    uploaded_photos: list[AttachmentPayload] = Field(default_factory=list)
    uploaded_files: list[AttachmentPayload] = Field(default_factory=list)
    is_draft: bool = False
    is_complete: bool = False
    last_saved_at: datetime | None = None
    time_spent_hours: float | None = None
    report: ValidationReportResponse


class CompleteWorkResponse(BaseModel):
    """Result of a successful completion."""

    completed: bool
    next_department: DepartmentKey | None = None
    order_finished: bool = False
    work: WorkResponse
