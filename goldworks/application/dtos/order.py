"""DTOs for order use cases."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class OrderCreate:
    """Input for opening a new order at the first department."""

    priority: int = 0
    due_date: datetime | None = None
    notes: str | None = None
    order_number: str | None = None
