"""Append-only activity log for order timelines."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any

from goldworks.application.dtos.activity import ActivityDayGroup
from goldworks.application.interfaces.repositories import IActivityLogRepository
from goldworks.domain.entities.activity import ActivityLogEntry
from goldworks.domain.enums import ActivityAction
from goldworks.shared.context import get_current_actor_id
from goldworks.shared.telemetry.logging import get_logger
from goldworks.shared.utils.datetime import utc_day, utc_now
from goldworks.shared.utils.generators import generate_cuid

logger = get_logger(__name__)

_DEFAULT_TITLES: dict[ActivityAction, str] = {
    ActivityAction.ORDER_CREATED: "Order created",
    ActivityAction.WORK_STARTED: "Work started",
    ActivityAction.DRAFT_SAVED: "Draft saved",
    ActivityAction.DEPT_COMPLETED: "Department completed",
    ActivityAction.FILE_UPLOADED: "Files uploaded",
    ActivityAction.DEPT_MOVE: "Moved to next department",
    ActivityAction.WORKER_ASSIGNED: "Worker assigned",
    ActivityAction.WORKER_REASSIGNED: "Worker reassigned",
    ActivityAction.ORDER_COMPLETED: "Order completed",
}


class ActivityLogService:
    """Records and reads activity entries. Entries are never updated or deleted."""

    def __init__(
        self,
        repository: IActivityLogRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repo = repository
        self._clock = clock

    async def record(
        self,
        order_id: str,
        action: ActivityAction,
        actor_id: str | None = None,
        metadata: dict[str, Any] | None = None,
        title: str | None = None,
        description: str | None = None,
    ) -> ActivityLogEntry:
        """Append one entry. actor_id defaults to the request actor (None means system)."""
        entry = ActivityLogEntry(
            id=generate_cuid(),
            order_id=order_id,
            action=action,
            actor_id=actor_id if actor_id is not None else get_current_actor_id(),
            title=title or _DEFAULT_TITLES[ActivityAction(action)],
            description=description,
            metadata=dict(metadata or {}),
            created_at=self._clock(),
        )
        stored = await self._repo.append(entry)
        logger.info(
            "Activity %s recorded for order %s by %s",
            entry.action.value,
            order_id,
            entry.actor_id or "system",
        )
        return stored

    async def list_for_order(self, order_id: str) -> list[ActivityLogEntry]:
        """Entries for an order, oldest first."""
        entries = await self._repo.list_for_order(order_id)
        return sorted(entries, key=lambda e: e.created_at)

    @staticmethod
    def group_by_day(entries: Iterable[ActivityLogEntry]) -> list[ActivityDayGroup]:
        """Group entries by UTC calendar day, days and entries in ascending order."""
        by_day: dict = {}
        for entry in sorted(entries, key=lambda e: e.created_at):
            by_day.setdefault(utc_day(entry.created_at), []).append(entry)
        return [ActivityDayGroup(day=day, entries=items) for day, items in sorted(by_day.items())]
