"""Application DTOs (no ORM dependency)."""

from goldworks.application.dtos.activity import ActivityDayGroup
from goldworks.application.dtos.order import OrderCreate
from goldworks.application.dtos.pipeline import AdvanceResult
from goldworks.application.dtos.work import SubmitResult, ValidationReport

__all__ = [
    "ActivityDayGroup",
    "AdvanceResult",
    "OrderCreate",
    "SubmitResult",
    "ValidationReport",
]
