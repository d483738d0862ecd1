"""DTOs for activity log reads."""

from dataclasses import dataclass
from datetime import date

from goldworks.domain.entities.activity import ActivityLogEntry


@dataclass(frozen=True)
class ActivityDayGroup:
    """Activity entries of one UTC calendar day, oldest first."""

    day: date
    entries: list[ActivityLogEntry]
