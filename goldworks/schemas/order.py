"""Order, tracking and activity API schemas."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from goldworks.domain.enums import (
    ActivityAction,
    DepartmentKey,
    OrderStatus,
    TrackingStatus,
)


class OrderCreateRequest(BaseModel):
    """Request body for opening an order at the first department."""

    order_number: str | None = Field(default=None, min_length=1, max_length=64)
    priority: int = Field(default=0, ge=0)
    due_date: datetime | None = None
    notes: str | None = Field(default=None, max_length=2000)


class AssignWorkerRequest(BaseModel):
    """Request body for assigning a worker to a department of an order."""

    worker_id: str = Field(..., min_length=1, max_length=64)


class TrackingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    department: DepartmentKey
    sequence: int
    status: TrackingStatus
    started_at: datetime | None = None
    completed_at: datetime | None = None
    assigned_worker_id: str | None = None


class OrderResponse(BaseModel):
    """Order with its department trackings in pipeline order."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    order_number: str
    priority: int
    due_date: datetime | None = None
    status: OrderStatus
    current_department: DepartmentKey | None = None
    created_at: datetime | None = None
    completed_at: datetime | None = None
    notes: str | None = None
    trackings: list[TrackingResponse] = Field(default_factory=list)


class ActivityEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    order_id: str
    action: ActivityAction
    actor_id: str | None = None
    title: str
    description: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime


class ActivityDayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day: date
    entries: list[ActivityEntryResponse]


class ActivityListResponse(BaseModel):
    """Activity for an order: flat list, or grouped by UTC day when requested."""

    order_id: str
    entries: list[ActivityEntryResponse] = Field(default_factory=list)
    days: list[ActivityDayResponse] | None = None
