"""Work session use case: one worker editing one department's work on one order.

Wraps the tracking state machine with draft persistence, autosave,
attachment handling, activity logging and pipeline advancement. Manual
save, submit and autosave share one lock per session.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import datetime
from typing import Any

from goldworks.application.dtos.work import SubmitResult, ValidationReport
from goldworks.application.interfaces.repositories import IOrderRepository
from goldworks.application.interfaces.services import (
    IAttachmentStorage,
    INotificationService,
    IWorkPersistence,
)
from goldworks.application.services.activity_log import ActivityLogService
from goldworks.application.services.autosave import DEFAULT_INTERVAL_SECONDS, AutosaveTask
from goldworks.application.services.department_pipeline import DepartmentPipeline
from goldworks.application.services.validation_engine import ValidationEngine
from goldworks.domain.entities.department import get_department
from goldworks.domain.entities.order import (
    DepartmentTrackingEntity,
    OrderEntity,
    WorkSubmissionEntity,
)
from goldworks.domain.enums import ActivityAction, DepartmentKey
from goldworks.domain.exceptions import (
    IllegalTransitionException,
    PersistenceFailureException,
    ResourceNotFoundException,
    ValidationException,
)
from goldworks.domain.value_objects.core import AttachmentRef, RequirementSchema
from goldworks.shared.telemetry.logging import get_logger
from goldworks.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class WorkSession:
    """Editing session over one DepartmentTrackingEntity.

    The dirty flag is local to the session and never persisted. After
    close() every mutating call raises IllegalTransitionException. Stored
    bytes of removed attachments are deleted only after the removal has
    been persisted.
    """

    def __init__(
        self,
        order: OrderEntity,
        department: DepartmentKey,
        schema: RequirementSchema,
        persistence: IWorkPersistence,
        pipeline: DepartmentPipeline,
        activity_log: ActivityLogService | None = None,
        notifier: INotificationService | None = None,
        storage: IAttachmentStorage | None = None,
        orders: IOrderRepository | None = None,
        engine: ValidationEngine | None = None,
        autosave_interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        department = DepartmentKey(department)
        tracking = order.tracking_for(department)
        if tracking is None:
            raise ResourceNotFoundException("tracking", f"{order.id}/{department.value}")
        if schema.department != department:
            raise ValueError(
                f"Schema for {schema.department.value} cannot drive {department.value} work"
            )
        self._order = order
        self._department = department
        self._tracking = tracking
        self._schema = schema
        self._persistence = persistence
        self._pipeline = pipeline
        self._activity = activity_log
        self._notifier = notifier
        self._storage = storage
        self._orders = orders
        self._engine = engine or ValidationEngine()
        self._clock = clock
        self._dirty = False
        self._edits = 0
        self._submitting = False
        self._pending_deletes: list[str] = []
        self._closed = False
        self._lock = asyncio.Lock()
        self.autosave = AutosaveTask(
            save=self._autosave,
            is_dirty=lambda: self._dirty,
            lock=self._lock,
            interval_seconds=autosave_interval_seconds,
            on_error=self._on_autosave_error,
        )

    @property
    def order(self) -> OrderEntity:
        return self._order

    @property
    def tracking(self) -> DepartmentTrackingEntity:
        return self._tracking

    @property
    def submission(self) -> WorkSubmissionEntity:
        return self._tracking.submission

    @property
    def schema(self) -> RequirementSchema:
        return self._schema

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def report(self) -> ValidationReport:
        """Current validation report for the submission."""
        return self._engine.evaluate(self._schema, self._tracking.submission)

    def _ensure_open(self, attempted: str) -> None:
        if self._closed:
            raise IllegalTransitionException(
                "Work session is closed",
                current_status=self._tracking.status.value,
                attempted=attempted,
                department=self._department.value,
            )
        if self._submitting:
            raise IllegalTransitionException(
                "Submission in progress",
                current_status=self._tracking.status.value,
                attempted=attempted,
                department=self._department.value,
            )

    def _require_current_department(self, attempted: str) -> None:
        current = self._order.current_department
        if current != self._department:
            where = current.value if current is not None else "the end of the pipeline"
            raise IllegalTransitionException(
                f"Cannot {attempted} {self._department.value} work: order is at {where}",
                current_status=self._tracking.status.value,
                attempted=attempted,
                department=self._department.value,
                order_id=self._order.id,
            )

    def _mark_dirty(self) -> None:
        self._dirty = True
        self._edits += 1
        self.autosave.schedule()

    async def _log(
        self, action: ActivityAction, actor_id: str | None, metadata: dict[str, Any]
    ) -> None:
        if self._activity is not None:
            await self._activity.record(
                self._order.id, action, actor_id=actor_id, metadata=metadata
            )

    async def _notify(self, event: str, message: str) -> None:
        if self._notifier is not None:
            await self._notifier.notify(event, self._order.id, self._department, message)

    async def _persist(self, operation: str) -> None:
        sub = self._tracking.submission
        write = (
            self._persistence.complete
            if operation == "complete"
            else self._persistence.save
        )
        await write(
            self._order.id,
            self._department,
            dict(sub.form_data),
            list(sub.uploaded_files),
            list(sub.uploaded_photos),
        )

    async def start(self, actor_id: str | None = None) -> DepartmentTrackingEntity:
        """NOT_STARTED -> IN_PROGRESS. The actor becomes the worker if none is assigned.

        Raises:
            IllegalTransitionException: If the work was already started or the
                order is not at this department.
        """
        self._ensure_open("start")
        self._require_current_department("start")
        worker_id = actor_id if self._tracking.assigned_worker_id is None else None
        self._tracking.start(self._clock(), worker_id=worker_id)
        if self._orders is not None:
            await self._orders.save(self._order)
        await self._log(
            ActivityAction.WORK_STARTED,
            actor_id,
            {"department": self._department.value},
        )
        logger.info("Work started on order %s (%s)", self._order.id, self._department.value)
        return self._tracking

    def edit(self, field: str, value: Any) -> None:
        """Set a form value and schedule autosave."""
        self._ensure_open("edit")
        if not field:
            raise ValidationException("Field name is required", field="field")
        self._tracking.set_field(field, value)
        self._mark_dirty()

    def attach_photo(self, ref: AttachmentRef) -> None:
        """Attach an uploaded photo reference to a declared photo category.

        Raises:
            ValidationException: Unknown category or category already at max_count.
        """
        self._ensure_open("attach")
        self._tracking.require_in_progress("attach")
        self._check_photo_slot(ref.category)
        self._tracking.attach_photo(ref)
        self._keep_stored(ref.id)
        self._mark_dirty()

    def attach_file(self, ref: AttachmentRef) -> None:
        """Attach an uploaded file reference to a declared file category.

        Raises:
            ValidationException: Unknown category, wrong format or file too large.
        """
        self._ensure_open("attach")
        self._tracking.require_in_progress("attach")
        self._check_file(ref.category, ref.name or ref.url, ref.size_bytes)
        self._tracking.attach_file(ref)
        self._keep_stored(ref.id)
        self._mark_dirty()

    def _check_photo_slot(self, category: str) -> None:
        req = self._schema.photo_requirement(category)
        if req is None:
            raise ValidationException(
                f"Unknown photo category {category!r} for {self._department.value}",
                field="category",
            )
        if req.max_count is not None:
            if len(self.submission.photos_in(category)) >= req.max_count:
                raise ValidationException(
                    f"{req.label} allows at most {req.max_count} photos",
                    field="category",
                )

    def _check_file(self, category: str, filename: str | None, size_bytes: int | None) -> None:
        req = self._schema.file_requirement(category)
        if req is None:
            raise ValidationException(
                f"Unknown file category {category!r} for {self._department.value}",
                field="category",
            )
        if filename and not req.accepts(filename):
            raise ValidationException(
                f"{req.label} accepts only {', '.join(req.accepted_formats)}",
                field="filename",
            )
        if not req.within_size(size_bytes):
            raise ValidationException(
                f"{req.label} must be at most {req.max_size_mb:g} MB", field="size"
            )

    def _require_storage(self) -> IAttachmentStorage:
        if self._storage is None:
            raise ValidationException("Attachment storage is not configured")
        return self._storage

    async def upload_photo(
        self,
        data: bytes,
        filename: str,
        category: str,
        content_type: str | None = None,
    ) -> AttachmentRef:
        """Store photo bytes through the storage collaborator and attach the reference."""
        self._ensure_open("attach")
        self._tracking.require_in_progress("attach")
        storage = self._require_storage()
        self._check_photo_slot(category)
        ref = await storage.upload(data, filename, category, content_type)
        self.attach_photo(ref)
        return ref

    async def upload_file(
        self,
        data: bytes,
        filename: str,
        category: str,
        content_type: str | None = None,
    ) -> AttachmentRef:
        """Store file bytes through the storage collaborator and attach the reference."""
        self._ensure_open("attach")
        self._tracking.require_in_progress("attach")
        storage = self._require_storage()
        self._check_file(category, filename, len(data))
        ref = await storage.upload(data, filename, category, content_type)
        self.attach_file(ref)
        return ref

    async def remove_attachment(self, attachment_id: str) -> AttachmentRef:
        """Detach the reference. Stored bytes are deleted once the removal is saved."""
        self._ensure_open("detach")
        self._tracking.require_in_progress("detach")
        if self.submission.find_attachment(attachment_id) is None:
            raise ValidationException(
                f"No attachment with id {attachment_id}", field="attachment_id"
            )
        ref = self._tracking.detach(attachment_id)
        if self._storage is not None and attachment_id not in self._pending_deletes:
            self._pending_deletes.append(attachment_id)
        self._mark_dirty()
        return ref

    def _keep_stored(self, attachment_id: str) -> None:
        if attachment_id in self._pending_deletes:
            self._pending_deletes.remove(attachment_id)

    async def _delete_stored(self, attachment_ids: list[str]) -> None:
        if self._storage is None:
            return
        for attachment_id in attachment_ids:
            if not await self._storage.delete(attachment_id):
                logger.warning("Storage had nothing to delete for attachment %s", attachment_id)

    def _take_persisted_deletes(self, attachment_ids: list[str]) -> list[str]:
        done = [i for i in attachment_ids if i in self._pending_deletes]
        self._pending_deletes = [i for i in self._pending_deletes if i not in done]
        return done

    async def save_draft(self, actor_id: str | None = None) -> datetime:
        """Persist the current work as a draft and return the save time.

        Raises:
            IllegalTransitionException: If the session is closed or work is not in progress.
            PersistenceFailureException: If persistence fails; edits stay unsaved.
        """
        return await self._save_draft(actor_id, autosave=False)

    async def _autosave(self) -> None:
        await self._save_draft(None, autosave=True)

    async def _save_draft(self, actor_id: str | None, autosave: bool) -> datetime:
        self._ensure_open("save")
        self._tracking.require_in_progress("save")
        self.autosave.cancel()
        async with self._lock:
            edits_before = self._edits
            removed = list(self._pending_deletes)
            try:
                await self._persist("save")
            except PersistenceFailureException:
                if self._dirty:
                    self.autosave.schedule()
                raise
            saved_at = self._clock()
            self._tracking.record_draft_saved(saved_at)
            # edits made while the write was in flight are not in it
            self._dirty = self._edits != edits_before
            removed = self._take_persisted_deletes(removed)
        if self._dirty:
            self.autosave.schedule()
        await self._delete_stored(removed)
        await self._log(
            ActivityAction.DRAFT_SAVED,
            actor_id,
            {"department": self._department.value, "autosave": autosave},
        )
        await self._notify(
            "draft_autosaved" if autosave else "draft_saved",
            "Work auto-saved" if autosave else "Draft saved",
        )
        logger.info(
            "Draft %s for order %s (%s)",
            "auto-saved" if autosave else "saved",
            self._order.id,
            self._department.value,
        )
        return saved_at

    async def _on_autosave_error(self, exc: Exception) -> None:
        await self._notify("autosave_failed", f"Auto-save failed: {exc}")

    async def submit(self, actor_id: str | None = None) -> SubmitResult:
        """Complete the department if nothing required is missing.

        When the report says the work cannot be submitted, nothing changes
        and SubmitResult.completed is False.

        Raises:
            IllegalTransitionException: If the session is closed, work is not in
                progress or the order is not at this department.
            PersistenceFailureException: If persistence fails; status is unchanged
                and autosave is re-armed for the unsaved edits.
        """
        self._ensure_open("submit")
        self._require_current_department("submit")
        self._tracking.require_in_progress("submit")
        report = self.report
        if not report.can_submit:
            logger.info(
                "Submit rejected for order %s (%s): %s%% complete",
                self._order.id,
                self._department.value,
                report.percent_complete,
            )
            return SubmitResult(completed=False, report=report)

        self.autosave.cancel()
        self._submitting = True
        try:
            async with self._lock:
                removed = list(self._pending_deletes)
                try:
                    await self._persist("complete")
                except PersistenceFailureException:
                    if self._dirty:
                        self.autosave.schedule()
                    raise
                self._tracking.complete(self._clock())
                self._dirty = False
                removed = self._take_persisted_deletes(removed)
        finally:
            self._submitting = False
        await self._delete_stored(removed)

        sub = self.submission
        await self._log(
            ActivityAction.DEPT_COMPLETED,
            actor_id,
            {
                "department": self._department.value,
                "timeSpentHours": sub.time_spent_hours,
                "photoCount": len(sub.uploaded_photos),
                "fileCount": len(sub.uploaded_files),
            },
        )
        if sub.has_attachments:
            await self._log(
                ActivityAction.FILE_UPLOADED,
                actor_id,
                {
                    "department": self._department.value,
                    "photoCount": len(sub.uploaded_photos),
                    "fileCount": len(sub.uploaded_files),
                },
            )
        advance = await self._pipeline.advance(self._order, actor_id)
        if self._orders is not None:
            await self._orders.save(self._order)
        if advance.to_department is None:
            message = "Order completed"
        else:
            message = f"Moved to {get_department(advance.to_department).display_name}"
        await self._notify("department_completed", message)
        return SubmitResult(
            completed=True,
            report=report,
            next_department=advance.to_department,
            order_finished=advance.finished,
        )

    def close(self) -> None:
        """Cancel autosave and reject further changes."""
        self.autosave.cancel()
        self._closed = True
