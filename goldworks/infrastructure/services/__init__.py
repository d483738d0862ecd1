"""Infrastructure service implementations of application ports."""

from goldworks.infrastructure.services.notification_service import (
    LogOnlyNotificationService,
)

__all__ = ["LogOnlyNotificationService"]
