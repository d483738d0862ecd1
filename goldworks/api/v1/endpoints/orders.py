"""Order API: thin routes delegating to OrderService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from goldworks.api.v1.dependencies import (
    get_actor_id,
    get_order_service,
    parse_department_key,
)
from goldworks.application.dtos.order import OrderCreate
from goldworks.application.use_cases.orders import OrderService
from goldworks.schemas.order import (
    ActivityDayResponse,
    ActivityEntryResponse,
    ActivityListResponse,
    AssignWorkerRequest,
    OrderCreateRequest,
    OrderResponse,
    TrackingResponse,
)

router = APIRouter()


@router.post("", response_model=OrderResponse, status_code=201)
async def create_order(
    body: OrderCreateRequest,
    order_svc: Annotated[OrderService, Depends(get_order_service)],
    actor_id: Annotated[str | None, Depends(get_actor_id)],
):
    """Open an order at the first department."""
    order = await order_svc.open_order(
        OrderCreate(
            priority=body.priority,
            due_date=body.due_date,
            notes=body.notes,
            order_number=body.order_number,
        ),
        actor_id=actor_id,
    )
    return OrderResponse.model_validate(order)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    order_svc: Annotated[OrderService, Depends(get_order_service)],
):
    return OrderResponse.model_validate(await order_svc.get_order(order_id))


@router.get("/{order_id}/activity", response_model=ActivityListResponse)
async def get_order_activity(
    order_id: str,
    order_svc: Annotated[OrderService, Depends(get_order_service)],
    group_by_day: Annotated[
        bool, Query(description="Group entries by UTC calendar day")
    ] = False,
):
    """Activity timeline for an order, oldest first."""
    if group_by_day:
        groups = await order_svc.activity_by_day(order_id)
        return ActivityListResponse(
            order_id=order_id,
            days=[ActivityDayResponse.model_validate(g) for g in groups],
        )
    entries = await order_svc.activity(order_id)
    return ActivityListResponse(
        order_id=order_id,
        entries=[ActivityEntryResponse.model_validate(e) for e in entries],
    )


@router.post("/{order_id}/departments/{key}/assign", response_model=TrackingResponse)
async def assign_worker(
    order_id: str,
    key: str,
    body: AssignWorkerRequest,
    order_svc: Annotated[OrderService, Depends(get_order_service)],
    actor_id: Annotated[str | None, Depends(get_actor_id)],
):
    """Assign (or reassign) a worker to a department of the order."""
    tracking = await order_svc.assign_worker(
        order_id, parse_department_key(key), body.worker_id, actor_id=actor_id
    )
    return TrackingResponse.model_validate(tracking)
