"""Builds WorkSession instances for one order/department pair."""

from __future__ import annotations

from goldworks.application.interfaces.repositories import IOrderRepository
from goldworks.application.interfaces.services import (
    IAttachmentStorage,
    INotificationService,
    IWorkPersistence,
)
from goldworks.application.services.activity_log import ActivityLogService
from goldworks.application.services.autosave import DEFAULT_INTERVAL_SECONDS
from goldworks.application.services.department_pipeline import DepartmentPipeline
from goldworks.application.services.requirement_registry import RequirementSchemaRegistry
from goldworks.application.use_cases.work.work_session import WorkSession
from goldworks.domain.enums import DepartmentKey
from goldworks.domain.exceptions import ResourceNotFoundException


class WorkSessionFactory:
    """Loads the order and picks the schema in effect for the department."""

    def __init__(
        self,
        orders: IOrderRepository,
        persistence: IWorkPersistence,
        registry: RequirementSchemaRegistry,
        pipeline: DepartmentPipeline,
        activity_log: ActivityLogService | None = None,
        notifier: INotificationService | None = None,
        storage: IAttachmentStorage | None = None,
        autosave_interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
    ) -> None:
        self._orders = orders
        self._persistence = persistence
        self._registry = registry
        self._pipeline = pipeline
        self._activity = activity_log
        self._notifier = notifier
        self._storage = storage
        self._interval = autosave_interval_seconds

    async def open(self, order_id: str, department: DepartmentKey) -> WorkSession:
        """Return a session over the order's tracking for department.

        Raises:
            ResourceNotFoundException: Unknown order, or the order has no
                tracking for that department yet.
            SchemaNotFoundException: No schema registered for the department.
        """
        order = await self._orders.get(order_id)
        if order is None:
            raise ResourceNotFoundException("order", order_id)
        schema = self._registry.require(department)
        return WorkSession(
            order,
            department,
            schema,
            persistence=self._persistence,
            pipeline=self._pipeline,
            activity_log=self._activity,
            notifier=self._notifier,
            storage=self._storage,
            orders=self._orders,
            autosave_interval_seconds=self._interval,
        )
