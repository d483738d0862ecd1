"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (cache, feature flags, DB engine
dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from goldworks.application.services.feature_flags import DepartmentFeatureFlags
from goldworks.application.services.requirement_registry import RequirementSchemaRegistry
from goldworks.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: Redis cache (if enabled), department flags, requirement
    registry. Shutdown order: cache disconnect, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.redis_enabled:
        from goldworks.infrastructure.cache.redis_cache import CacheService

        cache = CacheService()
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None

    flags = DepartmentFeatureFlags(
        cache=app.state.cache,
        defaults=settings.department_flag_defaults,
        storage_key=settings.feature_flag_key,
    )
    await flags.load_flags()
    app.state.feature_flags = flags
    app.state.requirement_registry = RequirementSchemaRegistry(flags=flags)
    logger.info("Department flags loaded: %s", flags.snapshot())

    yield

    # ---- Shutdown ----
    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        logger.info("Cache disconnected")

    from goldworks.infrastructure.persistence import database

    if getattr(database, "engine", None) is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")
