"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from goldworks.domain.entities.activity import ActivityLogEntry
from goldworks.domain.entities.department import DEPARTMENTS, Department, get_department
from goldworks.domain.entities.order import (
    DepartmentTrackingEntity,
    OrderEntity,
    WorkSubmissionEntity,
)

__all__ = [
    "ActivityLogEntry",
    "DEPARTMENTS",
    "Department",
    "DepartmentTrackingEntity",
    "OrderEntity",
    "WorkSubmissionEntity",
    "get_department",
]
