"""Order and department tracking ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from goldworks.domain.enums import OrderStatus, TrackingStatus
from goldworks.infrastructure.persistence.database import Base
from goldworks.infrastructure.persistence.models.mixins import TrackedModel


class Order(TrackedModel, Base):
    """Customer order. Table: order. current_department is NULL once finished."""

    __tablename__ = "order"

    order_number: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    due_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=OrderStatus.IN_FACTORY.value, index=True
    )
    current_department: Mapped[str | None] = mapped_column(String(32), nullable=True, index=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class DepartmentTracking(TrackedModel, Base):
    """Progress of one department on one order. Unique per (order_id, department)."""

    __tablename__ = "department_tracking"

    order_id: Mapped[str] = mapped_column(
        String, ForeignKey("order.id", ondelete="CASCADE"), nullable=False, index=True
    )
    department: Mapped[str] = mapped_column(String(32), nullable=False)
    sequence_order: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=TrackingStatus.NOT_STARTED.value
    )
    started_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    assigned_worker_id: Mapped[str | None] = mapped_column(String, nullable=True, index=True)

    __table_args__ = (
        UniqueConstraint("order_id", "department", name="uq_department_tracking_order_dept"),
        Index("ix_department_tracking_order_seq", "order_id", "sequence_order"),
    )
