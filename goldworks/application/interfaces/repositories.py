"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from goldworks.domain.entities.activity import ActivityLogEntry
    from goldworks.domain.entities.order import OrderEntity


# Order repository interface
class IOrderRepository(Protocol):
    """Protocol for order repository (DIP)."""

    async def get(self, order_id: str) -> OrderEntity | None:
        """Return the order with its trackings and submissions, or None."""

    async def add(self, order: OrderEntity) -> OrderEntity:
        """Persist a new order and its trackings."""

    async def save(self, order: OrderEntity) -> None:
        """Persist order status, current department and tracking state."""


# Activity log repository interface
class IActivityLogRepository(Protocol):
    """Protocol for the append-only activity log. No update or delete."""

    async def append(self, entry: ActivityLogEntry) -> ActivityLogEntry:
        """Store one entry."""

    async def list_for_order(self, order_id: str) -> list[ActivityLogEntry]:
        """Return entries for an order in ascending created_at order."""
