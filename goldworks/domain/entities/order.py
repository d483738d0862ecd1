"""Order, department tracking and work submission entities.

An order owns one tracking per department it has reached (ordered by
department sequence). Each tracking exclusively owns its work submission.
Tracking transitions raise IllegalTransitionException and leave state
untouched when rejected.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from goldworks.domain.entities.department import department_sequence
from goldworks.domain.enums import DepartmentKey, OrderStatus, TrackingStatus
from goldworks.domain.exceptions import IllegalTransitionException, ValidationException
from goldworks.domain.value_objects.core import AttachmentRef
from goldworks.shared.utils.datetime import ensure_utc, parse_iso, to_iso


@dataclass
class WorkSubmissionEntity:
    """Everything a worker has entered for one department of one order.

    Never deleted; on completion it is marked complete and retained.
    """

    form_data: dict[str, Any] = field(default_factory=dict)
    uploaded_photos: list[AttachmentRef] = field(default_factory=list)
    uploaded_files: list[AttachmentRef] = field(default_factory=list)
    is_draft: bool = False
    is_complete: bool = False
    last_saved_at: datetime | None = None
    work_started_at: datetime | None = None
    work_completed_at: datetime | None = None
    time_spent_hours: float | None = None

    def photos_in(self, category: str) -> list[AttachmentRef]:
        return [p for p in self.uploaded_photos if p.category == category]

    def files_in(self, category: str) -> list[AttachmentRef]:
        return [f for f in self.uploaded_files if f.category == category]

    def find_attachment(self, attachment_id: str) -> AttachmentRef | None:
        for ref in (*self.uploaded_photos, *self.uploaded_files):
            if ref.id == attachment_id:
                return ref
        return None

    @property
    def has_attachments(self) -> bool:
        return bool(self.uploaded_photos or self.uploaded_files)

    def to_draft_payload(self) -> dict[str, Any]:
        """Serialize to the persisted draft layout."""
        return {
            "formData": dict(self.form_data),
            "uploadedFiles": [f.to_payload() for f in self.uploaded_files],
            "uploadedPhotos": [p.to_payload() for p in self.uploaded_photos],
            "isDraft": self.is_draft,
            "isComplete": self.is_complete,
            "lastSavedAt": to_iso(self.last_saved_at),
        }

    @classmethod
    def from_draft_payload(
        cls, payload: dict[str, Any] | None
    ) -> "WorkSubmissionEntity":
        """Rebuild a submission from a persisted draft payload (None gives an empty one)."""
        if not payload:
            return cls()
        return cls(
            form_data=dict(payload.get("formData") or {}),
            uploaded_files=[
                AttachmentRef.from_payload(f) for f in payload.get("uploadedFiles") or []
            ],
            uploaded_photos=[
                AttachmentRef.from_payload(p) for p in payload.get("uploadedPhotos") or []
            ],
            is_draft=bool(payload.get("isDraft", False)),
            is_complete=bool(payload.get("isComplete", False)),
            last_saved_at=parse_iso(payload.get("lastSavedAt")),
        )


@dataclass
class DepartmentTrackingEntity:
    """Progress of one department's work on one order.

    State machine: NOT_STARTED -> IN_PROGRESS -> COMPLETED. Draft status is
    orthogonal and lives on the submission.
    """

    id: str
    order_id: str
    department: DepartmentKey
    status: TrackingStatus = TrackingStatus.NOT_STARTED
    started_at: datetime | None = None
    completed_at: datetime | None = None
    assigned_worker_id: str | None = None
    submission: WorkSubmissionEntity = field(default_factory=WorkSubmissionEntity)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Tracking ID is required", field="id")
        if not self.order_id:
            raise ValidationException("Tracking must belong to an order", field="order_id")
        self.department = DepartmentKey(self.department)
        self.status = TrackingStatus(self.status)

    @property
    def sequence(self) -> int:
        return department_sequence(self.department)

    @property
    def is_in_progress(self) -> bool:
        return self.status == TrackingStatus.IN_PROGRESS

    @property
    def is_completed(self) -> bool:
        return self.status == TrackingStatus.COMPLETED

    def _reject(self, attempted: str, reason: str) -> IllegalTransitionException:
        return IllegalTransitionException(
            f"Cannot {attempted} {self.department.value} work: {reason}",
            current_status=self.status.value,
            attempted=attempted,
            department=self.department.value,
            order_id=self.order_id,
        )

    def require_in_progress(self, attempted: str) -> None:
        if self.status == TrackingStatus.COMPLETED:
            raise self._reject(attempted, "work is already completed")
        if self.status != TrackingStatus.IN_PROGRESS:
            raise self._reject(attempted, "work has not been started")

    def start(self, now: datetime, worker_id: str | None = None) -> None:
        """Begin work. Only allowed from NOT_STARTED."""
        if self.status != TrackingStatus.NOT_STARTED:
            raise self._reject("start", "work was already started")
        started = ensure_utc(now)
        self.status = TrackingStatus.IN_PROGRESS
        self.started_at = started
        self.submission.work_started_at = started
        if worker_id is not None:
            self.assigned_worker_id = worker_id

    def set_field(self, name: str, value: Any) -> None:
        self.require_in_progress("edit")
        self.submission.form_data[name] = value

    def attach_photo(self, ref: AttachmentRef) -> None:
        self.require_in_progress("attach")
        self.submission.uploaded_photos.append(ref)

    def attach_file(self, ref: AttachmentRef) -> None:
        self.require_in_progress("attach")
        self.submission.uploaded_files.append(ref)

    def detach(self, attachment_id: str) -> AttachmentRef:
        """Remove an attachment by id and return it.

        Raises:
            IllegalTransitionException: If not IN_PROGRESS.
            ValidationException: If no attachment has that id.
        """
        self.require_in_progress("detach")
        sub = self.submission
        for bucket in (sub.uploaded_photos, sub.uploaded_files):
            for index, ref in enumerate(bucket):
                if ref.id == attachment_id:
                    return bucket.pop(index)
        raise ValidationException(
            f"No attachment with id {attachment_id}", field="attachment_id"
        )

    def record_draft_saved(self, now: datetime) -> None:
        self.require_in_progress("save")
        self.submission.is_draft = True
        self.submission.last_saved_at = ensure_utc(now)

    def complete(self, now: datetime) -> None:
        """IN_PROGRESS -> COMPLETED; records completion time and hours spent."""
        self.require_in_progress("complete")
        finished = ensure_utc(now)
        sub = self.submission
        self.status = TrackingStatus.COMPLETED
        self.completed_at = finished
        sub.is_complete = True
        sub.is_draft = False
        sub.last_saved_at = finished
        sub.work_completed_at = finished
        began = sub.work_started_at or self.started_at
        if began is not None and finished is not None:
            seconds = (finished - ensure_utc(began)).total_seconds()
            sub.time_spent_hours = round(max(seconds, 0.0) / 3600, 2)


@dataclass
class OrderEntity:
    """A customer order moving through the department pipeline.

    current_department is None only once the order has finished, in which
    case status is COMPLETED.
    """

    id: str
    order_number: str
    priority: int = 0
    due_date: datetime | None = None
    status: OrderStatus = OrderStatus.IN_FACTORY
    current_department: DepartmentKey | None = DepartmentKey.CAD
    created_at: datetime | None = None
    completed_at: datetime | None = None
    notes: str | None = None
    trackings: list[DepartmentTrackingEntity] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate order business rules. Raises ValidationException if invalid."""
        if not self.id:
            raise ValidationException("Order ID is required", field="id")
        if not self.order_number:
            raise ValidationException("Order number is required", field="order_number")
        if self.priority < 0:
            raise ValidationException("Priority must be non-negative", field="priority")
        self.status = OrderStatus(self.status)
        if self.current_department is not None:
            self.current_department = DepartmentKey(self.current_department)
        if (self.current_department is None) != (self.status == OrderStatus.COMPLETED):
            raise ValidationException(
                "Only a completed order may have no current department",
                field="current_department",
            )
        self.trackings.sort(key=lambda t: t.sequence)

    @property
    def is_finished(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    def tracking_for(
        self, department: DepartmentKey | str
    ) -> DepartmentTrackingEntity | None:
        key = DepartmentKey.parse(department)
        return next((t for t in self.trackings if t.department == key), None)

    @property
    def current_tracking(self) -> DepartmentTrackingEntity | None:
        if self.current_department is None:
            return None
        return self.tracking_for(self.current_department)

    def add_tracking(self, tracking: DepartmentTrackingEntity) -> None:
        """Attach a tracking, keeping the list in department order.

        Raises:
            ValidationException: If the tracking belongs elsewhere or duplicates a department.
        """
        if tracking.order_id != self.id:
            raise ValidationException(
                "Tracking belongs to a different order", field="order_id"
            )
        if self.tracking_for(tracking.department) is not None:
            raise ValidationException(
                f"Order already tracks department {tracking.department.value}",
                field="department",
            )
        self.trackings.append(tracking)
        self.trackings.sort(key=lambda t: t.sequence)

    def move_to(self, department: DepartmentKey) -> None:
        self.current_department = department

    def mark_finished(self, now: datetime) -> None:
        self.current_department = None
        self.status = OrderStatus.COMPLETED
        self.completed_at = ensure_utc(now)
