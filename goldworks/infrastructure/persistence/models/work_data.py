"""Department work data ORM model (form values and attachment references)."""

from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, String, UniqueConstraint, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from goldworks.infrastructure.persistence.database import Base
from goldworks.infrastructure.persistence.models.mixins import TrackedModel


class DepartmentWorkData(TrackedModel, Base):
    """Work submission for (order_id, department). Kept after completion for audit."""

    __tablename__ = "department_work_data"

    order_id: Mapped[str] = mapped_column(
        String, ForeignKey("order.id", ondelete="CASCADE"), nullable=False, index=True
    )
    department: Mapped[str] = mapped_column(String(32), nullable=False)
    form_data: Mapped[dict[str, Any]] = mapped_column(
        JSONB, nullable=False, server_default=text("'{}'::jsonb")
    )
    uploaded_files: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONB, nullable=False, server_default=text("'[]'::jsonb")
    )
    uploaded_photos: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONB, nullable=False, server_default=text("'[]'::jsonb")
    )
    is_draft: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"))
    is_complete: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )
    last_saved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    work_started_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    work_completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    time_spent_hours: Mapped[float | None] = mapped_column(Float, nullable=True)

    __table_args__ = (
        UniqueConstraint("order_id", "department", name="uq_department_work_data_order_dept"),
    )
