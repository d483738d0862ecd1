"""Work notifications: log-only sender."""

from __future__ import annotations

import logging

from goldworks.domain.enums import DepartmentKey
from goldworks.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class LogOnlyNotificationService:
    """INotificationService implementation that logs instead of pushing to clients.

    Use when no push channel is configured.
    """

    async def notify(
        self,
        event: str,
        order_id: str,
        department: DepartmentKey | None,
        message: str,
    ) -> None:
        """Log the notification; nothing is delivered."""
        level = logging.WARNING if event.endswith("_failed") else logging.INFO
        logger.log(
            level,
            "Work notify %s: order=%s department=%s message=%r",
            event,
            order_id,
            department.value if department is not None else "-",
            (message or "")[:200],
        )
