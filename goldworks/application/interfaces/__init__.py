"""Application interfaces (ports).

Protocols for repositories and collaborator services. Infrastructure
implements them; the application layer depends only on these.
"""

from goldworks.application.interfaces.repositories import (
    IActivityLogRepository,
    IOrderRepository,
)
from goldworks.application.interfaces.services import (
    IAttachmentStorage,
    ICacheService,
    IFeatureFlagService,
    INotificationService,
    IWorkPersistence,
)

__all__ = [
    "IActivityLogRepository",
    "IAttachmentStorage",
    "ICacheService",
    "IFeatureFlagService",
    "INotificationService",
    "IOrderRepository",
    "IWorkPersistence",
]
