"""Order activity repository. Append-only; implements IActivityLogRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from goldworks.domain.entities.activity import ActivityLogEntry
from goldworks.domain.enums import ActivityAction
from goldworks.infrastructure.persistence.models.activity import OrderActivity
from goldworks.shared.utils.datetime import ensure_utc


def _orm_to_entry(row: OrderActivity) -> ActivityLogEntry:
    """Map ORM to domain entry."""
    created_at = ensure_utc(row.created_at)
    assert created_at is not None
    return ActivityLogEntry(
        id=row.id,
        order_id=row.order_id,
        action=ActivityAction(row.action),
        actor_id=row.actor_id,
        title=row.title,
        description=row.description,
        metadata=dict(row.activity_metadata or {}),
        created_at=created_at,
    )


class ActivityLogRepository:
    """Append-only activity repository. No update/delete."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def append(self, entry: ActivityLogEntry) -> ActivityLogEntry:
        """Append one entry; return the stored record."""
        row = OrderActivity(
            id=entry.id,
            order_id=entry.order_id,
            action=entry.action.value,
            actor_id=entry.actor_id,
            title=entry.title,
            description=entry.description,
            activity_metadata=entry.metadata,
            created_at=entry.created_at,
        )
        self.db.add(row)
        await self.db.flush()
        return _orm_to_entry(row)

    async def list_for_order(self, order_id: str) -> list[ActivityLogEntry]:
        """Entries for an order, oldest first."""
        result = await self.db.execute(
            select(OrderActivity)
            .where(OrderActivity.order_id == order_id)
            .order_by(OrderActivity.created_at.asc(), OrderActivity.id.asc())
        )
        return [_orm_to_entry(r) for r in result.scalars().all()]
