"""SQL repositories and persistence adapters."""

from goldworks.infrastructure.persistence.repositories.activity_repo import (
    ActivityLogRepository,
)
from goldworks.infrastructure.persistence.repositories.base import BaseRepository
from goldworks.infrastructure.persistence.repositories.order_repo import OrderRepository
from goldworks.infrastructure.persistence.repositories.work_persistence import (
    SqlWorkPersistence,
)

__all__ = [
    "ActivityLogRepository",
    "BaseRepository",
    "OrderRepository",
    "SqlWorkPersistence",
]
