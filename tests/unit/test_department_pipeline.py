"""Tests for DepartmentPipeline: opening, advancing and assigning."""

import pytest

from goldworks.application.dtos.order import OrderCreate
from goldworks.application.services.department_pipeline import DepartmentPipeline
from goldworks.domain.enums import DepartmentKey, OrderStatus, TrackingStatus
from goldworks.domain.exceptions import IllegalTransitionException


def test_sequence_follows_departments() -> None:
    pipeline = DepartmentPipeline()
    assert pipeline.first_department() is DepartmentKey.CAD
    assert pipeline.next_department(DepartmentKey.CAD) is DepartmentKey.PRINT
    assert pipeline.next_department(DepartmentKey.ADDITIONAL) is None


def test_empty_sequence_is_rejected() -> None:
    with pytest.raises(ValueError):
        DepartmentPipeline(sequence=[])


async def test_open_order_starts_at_cad(pipeline, activity_repo) -> None:
    order = await pipeline.open_order(OrderCreate(priority=2, notes="rush"), actor_id="manager")
    assert order.current_department is DepartmentKey.CAD
    assert order.status is OrderStatus.IN_FACTORY
    assert order.order_number.startswith("ORD-20260302-")
    assert [t.department for t in order.trackings] == [DepartmentKey.CAD]
    assert order.trackings[0].status is TrackingStatus.NOT_STARTED
    entry = activity_repo.entries[0]
    assert entry.action.value == "ORDER_CREATED"
    assert entry.actor_id == "manager"


async def test_open_order_keeps_given_number(pipeline) -> None:
    order = await pipeline.open_order(OrderCreate(order_number="GW-100"))
    assert order.order_number == "GW-100"


async def test_advance_requires_completed_current_work(pipeline, clock) -> None:
    order = await pipeline.open_order()
    with pytest.raises(IllegalTransitionException):
        await pipeline.advance(order)
    order.current_tracking.start(clock())
    with pytest.raises(IllegalTransitionException):
        await pipeline.advance(order)
    assert order.current_department is DepartmentKey.CAD


async def test_advance_moves_and_creates_next_tracking(pipeline, activity_repo, clock) -> None:
    order = await pipeline.open_order()
    tracking = order.current_tracking
    tracking.start(clock())
    tracking.complete(clock.advance(hours=1))
    result = await pipeline.advance(order, actor_id="w1")
    assert result.from_department is DepartmentKey.CAD
    assert result.to_department is DepartmentKey.PRINT
    assert result.created_tracking
    assert order.current_department is DepartmentKey.PRINT
    assert activity_repo.entries[-1].metadata == {
        "fromDepartment": "CAD",
        "toDepartment": "PRINT",
    }


async def test_full_route_finishes_order(pipeline, clock) -> None:
    order = await pipeline.open_order()
    visited = []
    while not order.is_finished:
        visited.append(order.current_department)
        tracking = order.current_tracking
        tracking.start(clock())
        tracking.complete(clock.advance(minutes=30))
        await pipeline.advance(order)
    assert visited == list(DepartmentKey)
    assert order.status is OrderStatus.COMPLETED
    with pytest.raises(IllegalTransitionException):
        await pipeline.advance(order)


async def test_assign_and_reassign_worker(pipeline, activity_repo) -> None:
    order = await pipeline.open_order()
    await pipeline.assign(order, DepartmentKey.CAD, "w1")
    await pipeline.assign(order, DepartmentKey.CAD, "w1")
    tracking = await pipeline.assign(order, DepartmentKey.CAD, "w2")
    assert tracking.assigned_worker_id == "w2"
    actions = [e.action.value for e in activity_repo.entries]
    assert actions == ["ORDER_CREATED", "WORKER_ASSIGNED", "WORKER_REASSIGNED"]
    assert activity_repo.entries[-1].metadata["previousWorkerId"] == "w1"


async def test_assign_ahead_creates_tracking(pipeline) -> None:
    order = await pipeline.open_order()
    tracking = await pipeline.assign(order, DepartmentKey.SETTING, "setter")
    assert order.tracking_for(DepartmentKey.SETTING) is tracking
    assert order.current_department is DepartmentKey.CAD


async def test_assign_completed_department_is_rejected(pipeline, clock) -> None:
    order = await pipeline.open_order()
    tracking = order.current_tracking
    tracking.start(clock())
    tracking.complete(clock())
    with pytest.raises(IllegalTransitionException):
        await pipeline.assign(order, DepartmentKey.CAD, "w9")
