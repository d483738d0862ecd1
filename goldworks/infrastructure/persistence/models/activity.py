"""Order activity ORM model. Append-only timeline of order events."""

from datetime import datetime
from typing import Any

from sqlalchemy import Connection, DateTime, ForeignKey, Index, String, Text, event, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, Mapper, mapped_column

from goldworks.infrastructure.persistence.database import Base
from goldworks.shared.utils.generators import generate_cuid


class OrderActivity(Base):
    """Activity entry: what happened to an order, by whom, when. No update/delete."""

    __tablename__ = "order_activity"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    order_id: Mapped[str] = mapped_column(
        String, ForeignKey("order.id", ondelete="CASCADE"), nullable=False
    )
    action: Mapped[str] = mapped_column(String(32), nullable=False)
    actor_id: Mapped[str | None] = mapped_column(String, nullable=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # "metadata" is reserved on declarative classes
    activity_metadata: Mapped[dict[str, Any]] = mapped_column(
        "metadata", JSONB, nullable=False, server_default=text("'{}'::jsonb")
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=text("now()"), nullable=False
    )

    __table_args__ = (Index("ix_order_activity_order_created", "order_id", "created_at"),)


@event.listens_for(OrderActivity, "before_update")
def _prevent_activity_updates(
    _mapper: Mapper[Any], _connection: Connection, _target: OrderActivity
) -> None:
    """Activity entries are append-only; updates are forbidden."""
    raise ValueError("Activity log entries are immutable and cannot be updated.")


@event.listens_for(OrderActivity, "before_delete")
def _prevent_activity_deletes(
    _mapper: Mapper[Any], _connection: Connection, _target: OrderActivity
) -> None:
    """Activity entries cannot be deleted."""
    raise ValueError("Activity log entries cannot be deleted.")
