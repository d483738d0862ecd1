"""Order repository. Loads and stores orders with their department trackings."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from goldworks.domain.entities.order import (
    DepartmentTrackingEntity,
    OrderEntity,
    WorkSubmissionEntity,
)
from goldworks.domain.enums import DepartmentKey, OrderStatus, TrackingStatus
from goldworks.domain.exceptions import ResourceNotFoundException
from goldworks.domain.value_objects.core import AttachmentRef
from goldworks.infrastructure.persistence.models.order import DepartmentTracking, Order
from goldworks.infrastructure.persistence.models.work_data import DepartmentWorkData
from goldworks.infrastructure.persistence.repositories.base import BaseRepository
from goldworks.shared.utils.datetime import ensure_utc


def _work_data_to_submission(row: DepartmentWorkData | None) -> WorkSubmissionEntity:
    """Map ORM work data to a submission (empty when nothing was saved)."""
    if row is None:
        return WorkSubmissionEntity()
    return WorkSubmissionEntity(
        form_data=dict(row.form_data or {}),
        uploaded_files=[AttachmentRef.from_payload(f) for f in row.uploaded_files or []],
        uploaded_photos=[AttachmentRef.from_payload(p) for p in row.uploaded_photos or []],
        is_draft=row.is_draft,
        is_complete=row.is_complete,
        last_saved_at=ensure_utc(row.last_saved_at),
        work_started_at=ensure_utc(row.work_started_at),
        work_completed_at=ensure_utc(row.work_completed_at),
        time_spent_hours=row.time_spent_hours,
    )


def _tracking_to_entity(
    row: DepartmentTracking, work: DepartmentWorkData | None
) -> DepartmentTrackingEntity:
    return DepartmentTrackingEntity(
        id=row.id,
        order_id=row.order_id,
        department=DepartmentKey(row.department),
        status=TrackingStatus(row.status),
        started_at=ensure_utc(row.started_at),
        completed_at=ensure_utc(row.completed_at),
        assigned_worker_id=row.assigned_worker_id,
        submission=_work_data_to_submission(work),
    )


def _apply_tracking(row: DepartmentTracking, tracking: DepartmentTrackingEntity) -> None:
    row.status = tracking.status.value
    row.sequence_order = tracking.sequence
    row.started_at = tracking.started_at
    row.completed_at = tracking.completed_at
    row.assigned_worker_id = tracking.assigned_worker_id


class OrderRepository(BaseRepository[Order]):
    """Order repository (implements IOrderRepository).

    Form values and attachments are written by SqlWorkPersistence; this
    repository only syncs timing columns of existing work data rows.
    """

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Order)

    async def get(self, order_id: str) -> OrderEntity | None:
        """Return the order with trackings and submissions, or None."""
        row = await self.get_by_id(order_id)
        if row is None:
            return None
        tracking_rows = (
            await self.db.execute(
                select(DepartmentTracking)
                .where(DepartmentTracking.order_id == order_id)
                .order_by(DepartmentTracking.sequence_order)
            )
        ).scalars().all()
        work_rows = (
            await self.db.execute(
                select(DepartmentWorkData).where(DepartmentWorkData.order_id == order_id)
            )
        ).scalars().all()
        work_by_dept = {w.department: w for w in work_rows}
        return OrderEntity(
            id=row.id,
            order_number=row.order_number,
            priority=row.priority,
            due_date=ensure_utc(row.due_date),
            status=OrderStatus(row.status),
            current_department=(
                DepartmentKey(row.current_department) if row.current_department else None
            ),
            created_at=ensure_utc(row.created_at),
            completed_at=ensure_utc(row.completed_at),
            notes=row.notes,
            trackings=[
                _tracking_to_entity(t, work_by_dept.get(t.department)) for t in tracking_rows
            ],
        )

    async def add(self, order: OrderEntity) -> OrderEntity:
        """Insert the order and its trackings."""
        row = Order(
            id=order.id,
            order_number=order.order_number,
            priority=order.priority,
            due_date=order.due_date,
            status=order.status.value,
            current_department=(
                order.current_department.value if order.current_department else None
            ),
            completed_at=order.completed_at,
            notes=order.notes,
        )
        row = await self.create(row)
        order.created_at = ensure_utc(row.created_at)
        for tracking in order.trackings:
            tracking_row = DepartmentTracking(
                id=tracking.id, order_id=order.id, department=tracking.department.value
            )
            _apply_tracking(tracking_row, tracking)
            self.db.add(tracking_row)
        await self.db.flush()
        return order

    async def save(self, order: OrderEntity) -> None:
        """Write order status, current department, trackings and work timing.

        Raises:
            ResourceNotFoundException: If the order row does not exist.
        """
        row = await self.get_by_id(order.id)
        if row is None:
            raise ResourceNotFoundException("order", order.id)
        row.status = order.status.value
        row.current_department = (
            order.current_department.value if order.current_department else None
        )
        row.completed_at = order.completed_at
        row.priority = order.priority
        row.due_date = order.due_date
        row.notes = order.notes

        existing = {
            t.department: t
            for t in (
                await self.db.execute(
                    select(DepartmentTracking).where(DepartmentTracking.order_id == order.id)
                )
            ).scalars().all()
        }
        work_rows = {
            w.department: w
            for w in (
                await self.db.execute(
                    select(DepartmentWorkData).where(DepartmentWorkData.order_id == order.id)
                )
            ).scalars().all()
        }
        for tracking in order.trackings:
            dept = tracking.department.value
            tracking_row = existing.get(dept)
            if tracking_row is None:
                tracking_row = DepartmentTracking(
                    id=tracking.id, order_id=order.id, department=dept
                )
                self.db.add(tracking_row)
            _apply_tracking(tracking_row, tracking)

            sub = tracking.submission
            work = work_rows.get(dept)
            if work is None and tracking.status == TrackingStatus.NOT_STARTED:
                continue
            if work is None:
                work = DepartmentWorkData(
                    order_id=order.id,
                    department=dept,
                    form_data=dict(sub.form_data),
                    uploaded_files=[f.to_payload() for f in sub.uploaded_files],
                    uploaded_photos=[p.to_payload() for p in sub.uploaded_photos],
                    is_draft=sub.is_draft,
                    is_complete=sub.is_complete,
                    last_saved_at=sub.last_saved_at,
                )
                self.db.add(work)
            work.work_started_at = sub.work_started_at
            work.work_completed_at = sub.work_completed_at
            work.time_spent_hours = sub.time_spent_hours
        await self.db.flush()
