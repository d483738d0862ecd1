"""Tests for OrderService and WorkSessionFactory over in-memory repositories."""

import pytest

from goldworks.application.dtos.order import OrderCreate
from goldworks.application.services.feature_flags import DepartmentFeatureFlags
from goldworks.application.services.requirement_registry import RequirementSchemaRegistry
from goldworks.application.use_cases.orders import OrderService
from goldworks.application.use_cases.work import WorkSessionFactory
from goldworks.domain.enums import DepartmentKey
from goldworks.domain.exceptions import ResourceNotFoundException


@pytest.fixture
def service(order_repo, pipeline, activity_log) -> OrderService:
    return OrderService(order_repo, pipeline, activity_log)


@pytest.fixture
def factory(order_repo, persistence, pipeline, activity_log) -> WorkSessionFactory:
    registry = RequirementSchemaRegistry(flags=DepartmentFeatureFlags())
    return WorkSessionFactory(
        order_repo, persistence, registry, pipeline, activity_log=activity_log
    )


async def test_open_order_is_stored(service, order_repo) -> None:
    order = await service.open_order(OrderCreate(priority=1), actor_id="manager")
    assert order_repo.orders[order.id] is order
    assert await service.get_order(order.id) is order


async def test_get_missing_order_raises(service) -> None:
    with pytest.raises(ResourceNotFoundException):
        await service.get_order("missing")


async def test_assign_worker_saves_order(service, order_repo) -> None:
    order = await service.open_order(OrderCreate())
    tracking = await service.assign_worker(order.id, DepartmentKey.CAD, "designer-1")
    assert tracking.assigned_worker_id == "designer-1"
    assert order_repo.save_count == 1


async def test_activity_grouped_by_day(service, clock) -> None:
    order = await service.open_order(OrderCreate())
    clock.advance(days=1)
    await service.assign_worker(order.id, DepartmentKey.CAD, "designer-1")
    entries = await service.activity(order.id)
    assert [e.action.value for e in entries] == ["ORDER_CREATED", "WORKER_ASSIGNED"]
    groups = await service.activity_by_day(order.id)
    assert len(groups) == 2


async def test_factory_opens_session_for_current_department(service, factory) -> None:
    order = await service.open_order(OrderCreate())
    session = await factory.open(order.id, DepartmentKey.CAD)
    try:
        assert session.schema.department is DepartmentKey.CAD
        assert session.tracking is order.current_tracking
    finally:
        session.close()


async def test_factory_uses_reduced_schema_for_disabled_department(
    service, factory, pipeline
) -> None:
    order = await service.open_order(OrderCreate())
    await pipeline.assign(order, DepartmentKey.PRINT, "vendor-desk")
    session = await factory.open(order.id, DepartmentKey.PRINT)
    try:
        assert session.schema.coming_soon_message
    finally:
        session.close()


async def test_factory_rejects_unknown_order(factory) -> None:
    with pytest.raises(ResourceNotFoundException):
        await factory.open("missing", DepartmentKey.CAD)
