"""Department pipeline: moves orders through the fixed department sequence."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime

from goldworks.application.dtos.order import OrderCreate
from goldworks.application.dtos.pipeline import AdvanceResult
from goldworks.application.services.activity_log import ActivityLogService
from goldworks.domain.entities.department import get_department, ordered_keys
from goldworks.domain.entities.order import DepartmentTrackingEntity, OrderEntity
from goldworks.domain.enums import ActivityAction, DepartmentKey
from goldworks.domain.exceptions import IllegalTransitionException
from goldworks.shared.telemetry.logging import get_logger
from goldworks.shared.utils.datetime import utc_now
from goldworks.shared.utils.generators import generate_cuid, generate_order_number

logger = get_logger(__name__)


class DepartmentPipeline:
    """Owns the canonical department order and order-level transitions.

    Feature flags never affect ordering; a disabled department is still a
    stage, it just uses its reduced schema.
    """

    def __init__(
        self,
        activity_log: ActivityLogService | None = None,
        clock: Callable[[], datetime] = utc_now,
        sequence: Sequence[DepartmentKey] | None = None,
    ) -> None:
        self._activity = activity_log
        self._clock = clock
        self._sequence = tuple(sequence) if sequence is not None else tuple(ordered_keys())
        if not self._sequence:
            raise ValueError("Department sequence must not be empty")

    @property
    def sequence(self) -> tuple[DepartmentKey, ...]:
        return self._sequence

    def first_department(self) -> DepartmentKey:
        return self._sequence[0]

    def next_department(self, department: DepartmentKey) -> DepartmentKey | None:
        """Department after the given one, or None when it is the last."""
        index = self._sequence.index(DepartmentKey(department))
        if index + 1 < len(self._sequence):
            return self._sequence[index + 1]
        return None

    async def _log(
        self,
        order_id: str,
        action: ActivityAction,
        actor_id: str | None,
        metadata: dict,
        description: str | None = None,
    ) -> None:
        if self._activity is not None:
            await self._activity.record(
                order_id, action, actor_id=actor_id, metadata=metadata, description=description
            )

    def new_tracking(self, order_id: str, department: DepartmentKey) -> DepartmentTrackingEntity:
        return DepartmentTrackingEntity(
            id=generate_cuid(), order_id=order_id, department=department
        )

    async def open_order(
        self, data: OrderCreate | None = None, actor_id: str | None = None
    ) -> OrderEntity:
        """Create an order positioned at the first department with a NOT_STARTED tracking."""
        data = data or OrderCreate()
        now = self._clock()
        order_id = generate_cuid()
        first = self.first_department()
        order = OrderEntity(
            id=order_id,
            order_number=data.order_number or generate_order_number(now),
            priority=data.priority,
            due_date=data.due_date,
            notes=data.notes,
            current_department=first,
            created_at=now,
        )
        order.add_tracking(self.new_tracking(order_id, first))
        await self._log(
            order_id,
            ActivityAction.ORDER_CREATED,
            actor_id,
            {"orderNumber": order.order_number, "department": first.value},
        )
        logger.info("Order %s opened at %s", order.order_number, first.value)
        return order

    async def advance(self, order: OrderEntity, actor_id: str | None = None) -> AdvanceResult:
        """Move the order past its completed current department.

        Raises:
            IllegalTransitionException: If the order already finished or its
                current department's work is not completed.
        """
        current = order.current_department
        if current is None:
            raise IllegalTransitionException(
                f"Order {order.order_number} has already finished",
                current_status=order.status.value,
                attempted="advance",
            )
        tracking = order.current_tracking
        if tracking is None or not tracking.is_completed:
            raise IllegalTransitionException(
                f"Cannot advance order {order.order_number}: "
                f"{current.value} work is not completed",
                current_status=tracking.status.value if tracking else None,
                attempted="advance",
                department=current.value,
            )

        target = self.next_department(current)
        if target is None:
            order.mark_finished(self._clock())
            await self._log(
                order.id,
                ActivityAction.ORDER_COMPLETED,
                actor_id,
                {"fromDepartment": current.value},
                description=f"Finished after {get_department(current).display_name}",
            )
            logger.info("Order %s completed all departments", order.order_number)
            return AdvanceResult(from_department=current, to_department=None, finished=True)

        created = False
        if order.tracking_for(target) is None:
            order.add_tracking(self.new_tracking(order.id, target))
            created = True
        order.move_to(target)
        await self._log(
            order.id,
            ActivityAction.DEPT_MOVE,
            actor_id,
            {"fromDepartment": current.value, "toDepartment": target.value},
            description=(
                f"{get_department(current).display_name} -> "
                f"{get_department(target).display_name}"
            ),
        )
        logger.info(
            "Order %s moved from %s to %s", order.order_number, current.value, target.value
        )
        return AdvanceResult(
            from_department=current,
            to_department=target,
            finished=False,
            created_tracking=created,
        )

    async def assign(
        self,
        order: OrderEntity,
        department: DepartmentKey,
        worker_id: str,
        actor_id: str | None = None,
    ) -> DepartmentTrackingEntity:
        """Assign a worker to a department of the order, creating its tracking if needed.

        Raises:
            IllegalTransitionException: If the order finished or the department's
                work is already completed.
        """
        department = DepartmentKey(department)
        if order.is_finished:
            raise IllegalTransitionException(
                f"Order {order.order_number} has already finished",
                current_status=order.status.value,
                attempted="assign",
            )
        tracking = order.tracking_for(department)
        if tracking is None:
            tracking = self.new_tracking(order.id, department)
            order.add_tracking(tracking)
        if tracking.is_completed:
            raise IllegalTransitionException(
                f"{department.value} work is already completed",
                current_status=tracking.status.value,
                attempted="assign",
                department=department.value,
            )
        previous = tracking.assigned_worker_id
        if previous == worker_id:
            return tracking
        tracking.assigned_worker_id = worker_id
        action = (
            ActivityAction.WORKER_ASSIGNED
            if previous is None
            else ActivityAction.WORKER_REASSIGNED
        )
        metadata = {"department": department.value, "workerId": worker_id}
        if previous is not None:
            metadata["previousWorkerId"] = previous
        await self._log(order.id, action, actor_id, metadata)
        return tracking
