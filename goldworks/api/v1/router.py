"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from goldworks.api.v1.dependencies.
"""

from fastapi import APIRouter

from goldworks.api.v1.endpoints import departments, health, orders, work

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(departments.router, prefix="/departments", tags=["departments"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(work.router, prefix="/orders", tags=["work"])
