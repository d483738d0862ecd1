"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, feature flags, the requirement
registry and the order/work use cases. Routes depend only on these, not on
infrastructure directly.

Feature flags and the registry live on app.state (set by the lifespan).
When the lifespan has not run they are created on first use with in-memory
flag storage.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from goldworks.application.services.activity_log import ActivityLogService
from goldworks.application.services.department_pipeline import DepartmentPipeline
from goldworks.application.services.feature_flags import DepartmentFeatureFlags
from goldworks.application.services.requirement_catalog import resolve_department_key
from goldworks.application.services.requirement_registry import RequirementSchemaRegistry
from goldworks.application.use_cases.orders import OrderService
from goldworks.application.use_cases.work import WorkSessionFactory
from goldworks.core.config import get_settings
from goldworks.domain.enums import DepartmentKey
from goldworks.domain.exceptions import SchemaNotFoundException
from goldworks.infrastructure.persistence.database import get_db_transactional
from goldworks.infrastructure.persistence.repositories import (
    ActivityLogRepository,
    OrderRepository,
    SqlWorkPersistence,
)
from goldworks.infrastructure.services import LogOnlyNotificationService
from goldworks.shared.context import get_current_actor_id


def get_feature_flags(request: Request) -> DepartmentFeatureFlags:
    """Department flags shared by the whole app."""
    flags = getattr(request.app.state, "feature_flags", None)
    if flags is None:
        settings = get_settings()
        flags = DepartmentFeatureFlags(
            cache=None,
            defaults=settings.department_flag_defaults,
            storage_key=settings.feature_flag_key,
        )
        request.app.state.feature_flags = flags
    return flags


def get_requirement_registry(
    request: Request,
    flags: Annotated[DepartmentFeatureFlags, Depends(get_feature_flags)],
) -> RequirementSchemaRegistry:
    """Registry bound to the app's feature flags."""
    registry = getattr(request.app.state, "requirement_registry", None)
    if registry is None:
        registry = RequirementSchemaRegistry(flags=flags)
        request.app.state.requirement_registry = registry
    return registry


def get_actor_id() -> str | None:
    """Acting worker from the request context (None for anonymous/system)."""
    return get_current_actor_id()


async def get_activity_log_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ActivityLogService:
    """Activity log writing in the request transaction."""
    return ActivityLogService(ActivityLogRepository(db))


async def get_department_pipeline(
    activity: Annotated[ActivityLogService, Depends(get_activity_log_service)],
) -> DepartmentPipeline:
    return DepartmentPipeline(activity_log=activity)


async def get_order_service(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    pipeline: Annotated[DepartmentPipeline, Depends(get_department_pipeline)],
    activity: Annotated[ActivityLogService, Depends(get_activity_log_service)],
) -> OrderService:
    """OrderService for the request (same session as the activity log)."""
    return OrderService(OrderRepository(db), pipeline, activity)


async def get_work_session_factory(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    registry: Annotated[RequirementSchemaRegistry, Depends(get_requirement_registry)],
    pipeline: Annotated[DepartmentPipeline, Depends(get_department_pipeline)],
    activity: Annotated[ActivityLogService, Depends(get_activity_log_service)],
) -> WorkSessionFactory:
    """Factory for work sessions sharing the request transaction.

    No attachment storage is wired; clients upload elsewhere and send references.
    """
    return WorkSessionFactory(
        orders=OrderRepository(db),
        persistence=SqlWorkPersistence(db),
        registry=registry,
        pipeline=pipeline,
        activity_log=activity,
        notifier=LogOnlyNotificationService(),
        autosave_interval_seconds=get_settings().autosave_interval_seconds,
    )


def parse_department_key(key: str) -> DepartmentKey:
    """Path parameter to DepartmentKey (legacy config ids accepted).

    Raises:
        SchemaNotFoundException: If key names no department.
    """
    resolved = resolve_department_key(key)
    if resolved is None:
        raise SchemaNotFoundException(key)
    return resolved
