"""Pydantic request/response models for the HTTP API."""

from goldworks.schemas.department import (
    DepartmentResponse,
    FeatureFlagsResponse,
    FeatureFlagUpdate,
    RequirementSchemaResponse,
)
from goldworks.schemas.health import HealthResponse
from goldworks.schemas.order import (
    ActivityListResponse,
    AssignWorkerRequest,
    OrderCreateRequest,
    OrderResponse,
    TrackingResponse,
)
from goldworks.schemas.work import (
    AttachmentPayload,
    CompleteWorkResponse,
    ValidationReportResponse,
    WorkResponse,
    WorkUpdateRequest,
)

__all__ = [
    "ActivityListResponse",
    "AssignWorkerRequest",
    "AttachmentPayload",
    "CompleteWorkResponse",
    "DepartmentResponse",
    "FeatureFlagUpdate",
    "FeatureFlagsResponse",
    "HealthResponse",
    "OrderCreateRequest",
    "OrderResponse",
    "RequirementSchemaResponse",
    "TrackingResponse",
    "ValidationReportResponse",
    "WorkResponse",
    "WorkUpdateRequest",
]
