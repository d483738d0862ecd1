"""Service interfaces (ports) for the application layer.

Protocols define contracts for collaborators the work engine calls out to
(persistence, attachment storage, feature flags, notifications, cache).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from goldworks.domain.enums import DepartmentKey

if TYPE_CHECKING:
    from goldworks.domain.entities.order import WorkSubmissionEntity
    from goldworks.domain.value_objects.core import AttachmentRef


# Work data persistence interface
class IWorkPersistence(Protocol):
    """Protocol for persisting department work data.

    Both writes return None on success and raise PersistenceFailureException
    on failure. Last write wins.
    """

    async def save(
        self,
        order_id: str,
        department: DepartmentKey,
        form_data: dict[str, Any],
        files: list[AttachmentRef],
        photos: list[AttachmentRef],
    ) -> None:
        """Store a draft of the work data."""

    async def complete(
        self,
        order_id: str,
        department: DepartmentKey,
        form_data: dict[str, Any],
        files: list[AttachmentRef],
        photos: list[AttachmentRef],
    ) -> None:
        """Store the final work data and mark it complete."""

    async def load(
        self, order_id: str, department: DepartmentKey
    ) -> WorkSubmissionEntity | None:
        """Return the stored submission, or None when nothing was saved yet."""


# Attachment storage interface
class IAttachmentStorage(Protocol):
    """Protocol for photo/file storage. The core only keeps the returned reference."""

    async def upload(
        self,
        data: bytes,
        filename: str,
        category: str,
        content_type: str | None = None,
    ) -> AttachmentRef:
        """Store bytes and return a reference."""

    async def delete(self, attachment_id: str) -> bool:
        """Delete stored bytes; return True if something was deleted."""


# Feature flag interface
class IFeatureFlagService(Protocol):
    """Protocol for department enablement lookups."""

    def is_department_enabled(self, department: DepartmentKey | str) -> bool:
        """Return False only when the department is explicitly disabled."""


# Notification interface
class INotificationService(Protocol):
    """Protocol for fire-and-forget user notifications (toasts, pushes)."""

    async def notify(
        self,
        event: str,
        order_id: str,
        department: DepartmentKey | None,
        message: str,
    ) -> None:
        """Deliver a notification. Must not raise."""


# Cache service interface
class ICacheService(Protocol):
    """Protocol for key/value cache used by the feature flag store."""

    def is_available(self) -> bool:
        """Return True when the backing store is connected."""

    async def get(self, key: str) -> Any | None:
        """Return the decoded value or None."""

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store a JSON-serializable value; ttl None means no expiry."""

    async def delete(self, key: str) -> bool:
        """Remove a key."""
