"""Activity log entry entity.

Entries are immutable and append-only; there is no update or delete.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from goldworks.domain.enums import ActivityAction
from goldworks.domain.exceptions import ValidationException


@dataclass(frozen=True)
class ActivityLogEntry:
    """One timestamped, attributed event in an order's timeline."""

    id: str
    order_id: str
    action: ActivityAction
    actor_id: str | None
    title: str
    created_at: datetime
    description: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Activity entry ID is required", field="id")
        if not self.order_id:
            raise ValidationException(
                "Activity entry must belong to an order", field="order_id"
            )
        object.__setattr__(self, "action", ActivityAction(self.action))
