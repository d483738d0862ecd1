"""SQL implementation of IWorkPersistence (department_work_data upserts).

Every write is checked against the draft payload JSON Schema before it
reaches the database so a malformed attachment list never gets stored.
"""

from __future__ import annotations

from typing import Any

import jsonschema
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from goldworks.domain.entities.order import WorkSubmissionEntity
from goldworks.domain.enums import DepartmentKey
from goldworks.domain.exceptions import PersistenceFailureException
from goldworks.domain.value_objects.core import AttachmentRef
from goldworks.infrastructure.persistence.models.work_data import DepartmentWorkData
from goldworks.shared.telemetry.logging import get_logger
from goldworks.shared.utils.datetime import ensure_utc, to_iso, utc_now

logger = get_logger(__name__)

_ATTACHMENT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["id", "category", "url"],
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "category": {"type": "string", "minLength": 1},
        "url": {"type": "string"},
        "name": {"type": "string"},
        "mimeType": {"type": "string"},
        "size": {"type": "integer", "minimum": 0},
        "uploadedAt": {"type": "string"},
    },
}

DRAFT_PAYLOAD_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Department Work Draft",
    "type": "object",
    "required": ["formData", "uploadedFiles", "uploadedPhotos", "isDraft", "isComplete"],
    "properties": {
        "formData": {"type": "object"},
        "uploadedFiles": {"type": "array", "items": _ATTACHMENT_SCHEMA},
        "uploadedPhotos": {"type": "array", "items": _ATTACHMENT_SCHEMA},
        "isDraft": {"type": "boolean"},
        "isComplete": {"type": "boolean"},
        "lastSavedAt": {"type": ["string", "null"]},
    },
}


def validate_draft_payload(payload: dict[str, Any]) -> None:
    """Raise jsonschema.ValidationError when payload does not match the draft layout."""
    jsonschema.validate(instance=payload, schema=DRAFT_PAYLOAD_SCHEMA)


class SqlWorkPersistence:
    """Upserts one department_work_data row per (order_id, department). Last write wins."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _get_row(
        self, order_id: str, department: DepartmentKey
    ) -> DepartmentWorkData | None:
        result = await self.db.execute(
            select(DepartmentWorkData).where(
                DepartmentWorkData.order_id == order_id,
                DepartmentWorkData.department == DepartmentKey(department).value,
            )
        )
        return result.scalar_one_or_none()

    async def _write(
        self,
        operation: str,
        order_id: str,
        department: DepartmentKey,
        form_data: dict[str, Any],
        files: list[AttachmentRef],
        photos: list[AttachmentRef],
    ) -> None:
        department = DepartmentKey(department)
        now = utc_now()
        completing = operation == "complete"
        payload = {
            "formData": dict(form_data),
            "uploadedFiles": [f.to_payload() for f in files],
            "uploadedPhotos": [p.to_payload() for p in photos],
            "isDraft": not completing,
            "isComplete": completing,
            "lastSavedAt": to_iso(now),
        }
        try:
            validate_draft_payload(payload)
            row = await self._get_row(order_id, department)
            if row is None:
                row = DepartmentWorkData(order_id=order_id, department=department.value)
                self.db.add(row)
            row.form_data = payload["formData"]
            row.uploaded_files = payload["uploadedFiles"]
            row.uploaded_photos = payload["uploadedPhotos"]
            row.is_draft = payload["isDraft"]
            row.is_complete = payload["isComplete"]
            row.last_saved_at = now
            if completing:
                row.work_completed_at = now
            await self.db.flush()
        except jsonschema.ValidationError as e:
            raise PersistenceFailureException(
                operation, order_id, department.value, reason=e.message
            ) from e
        except SQLAlchemyError as e:
            logger.exception(
                "Work data %s failed for order %s (%s)", operation, order_id, department.value
            )
            raise PersistenceFailureException(
                operation, order_id, department.value, reason=type(e).__name__
            ) from e

    async def save(
        self,
        order_id: str,
        department: DepartmentKey,
        form_data: dict[str, Any],
        files: list[AttachmentRef],
        photos: list[AttachmentRef],
    ) -> None:
        await self._write("save", order_id, department, form_data, files, photos)

    async def complete(
        self,
        order_id: str,
        department: DepartmentKey,
        form_data: dict[str, Any],
        files: list[AttachmentRef],
        photos: list[AttachmentRef],
    ) -> None:
        await self._write("complete", order_id, department, form_data, files, photos)

    async def load(
        self, order_id: str, department: DepartmentKey
    ) -> WorkSubmissionEntity | None:
        row = await self._get_row(order_id, department)
        if row is None:
            return None
        submission = WorkSubmissionEntity.from_draft_payload(
            {
                "formData": row.form_data,
                "uploadedFiles": row.uploaded_files,
                "uploadedPhotos": row.uploaded_photos,
                "isDraft": row.is_draft,
                "isComplete": row.is_complete,
                "lastSavedAt": to_iso(row.last_saved_at),
            }
        )
        submission.work_started_at = ensure_utc(row.work_started_at)
        submission.work_completed_at = ensure_utc(row.work_completed_at)
        submission.time_spent_hours = row.time_spent_hours
        return submission
