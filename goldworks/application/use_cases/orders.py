"""Order use cases: open, read, assign workers, read the activity timeline."""

from __future__ import annotations

from goldworks.application.dtos.activity import ActivityDayGroup
from goldworks.application.dtos.order import OrderCreate
from goldworks.application.interfaces.repositories import IOrderRepository
from goldworks.application.services.activity_log import ActivityLogService
from goldworks.application.services.department_pipeline import DepartmentPipeline
from goldworks.domain.entities.activity import ActivityLogEntry
from goldworks.domain.entities.order import DepartmentTrackingEntity, OrderEntity
from goldworks.domain.enums import DepartmentKey
from goldworks.domain.exceptions import ResourceNotFoundException


class OrderService:
    """Thin orchestration over the pipeline, order repository and activity log."""

    def __init__(
        self,
        orders: IOrderRepository,
        pipeline: DepartmentPipeline,
        activity_log: ActivityLogService,
    ) -> None:
        self._orders = orders
        self._pipeline = pipeline
        self._activity = activity_log

    async def open_order(
        self, data: OrderCreate, actor_id: str | None = None
    ) -> OrderEntity:
        order = await self._pipeline.open_order(data, actor_id=actor_id)
        return await self._orders.add(order)

    async def get_order(self, order_id: str) -> OrderEntity:
        """Return the order or raise ResourceNotFoundException."""
        order = await self._orders.get(order_id)
        if order is None:
            raise ResourceNotFoundException("order", order_id)
        return order

    async def assign_worker(
        self,
        order_id: str,
        department: DepartmentKey,
        worker_id: str,
        actor_id: str | None = None,
    ) -> DepartmentTrackingEntity:
        order = await self.get_order(order_id)
        tracking = await self._pipeline.assign(order, department, worker_id, actor_id=actor_id)
        await self._orders.save(order)
        return tracking

    async def activity(self, order_id: str) -> list[ActivityLogEntry]:
        await self.get_order(order_id)
        return await self._activity.list_for_order(order_id)

    async def activity_by_day(self, order_id: str) -> list[ActivityDayGroup]:
        return ActivityLogService.group_by_day(await self.activity(order_id))
