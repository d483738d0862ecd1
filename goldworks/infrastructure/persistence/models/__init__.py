"""Persistence models: ORM entities and mixins."""

from goldworks.infrastructure.persistence.models.activity import OrderActivity
from goldworks.infrastructure.persistence.models.mixins import (
    CuidMixin,
    TimestampMixin,
    TrackedModel,
)
from goldworks.infrastructure.persistence.models.order import DepartmentTracking, Order
from goldworks.infrastructure.persistence.models.work_data import DepartmentWorkData

__all__ = [
    "CuidMixin",
    "DepartmentTracking",
    "DepartmentWorkData",
    "Order",
    "OrderActivity",
    "TimestampMixin",
    "TrackedModel",
]
