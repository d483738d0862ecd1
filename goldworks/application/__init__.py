"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions. Infrastructure implements
the interfaces (repositories, work persistence, cache, notifications).
"""

from goldworks.application.interfaces import (
    IActivityLogRepository,
    IAttachmentStorage,
    ICacheService,
    IFeatureFlagService,
    INotificationService,
    IOrderRepository,
    IWorkPersistence,
)
from goldworks.application.services import (
    ActivityLogService,
    DepartmentFeatureFlags,
    DepartmentPipeline,
    RequirementSchemaRegistry,
    ValidationEngine,
)
from goldworks.application.use_cases import OrderService, WorkSession, WorkSessionFactory

__all__ = [
    "ActivityLogService",
    "DepartmentFeatureFlags",
    "DepartmentPipeline",
    "IActivityLogRepository",
    "IAttachmentStorage",
    "ICacheService",
    "IFeatureFlagService",
    "INotificationService",
    "IOrderRepository",
    "IWorkPersistence",
    "OrderService",
    "RequirementSchemaRegistry",
    "ValidationEngine",
    "WorkSession",
    "WorkSessionFactory",
]
