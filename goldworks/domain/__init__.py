"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from goldworks.domain.entities import (
    ActivityLogEntry,
    Department,
    DepartmentTrackingEntity,
    OrderEntity,
    WorkSubmissionEntity,
)
from goldworks.domain.enums import (
    ActivityAction,
    DepartmentKey,
    FieldType,
    OrderStatus,
    TrackingStatus,
)
from goldworks.domain.exceptions import (
    GoldworksException,
    IllegalTransitionException,
    PersistenceFailureException,
    ResourceNotFoundException,
    SchemaNotFoundException,
    ValidationException,
)
from goldworks.domain.value_objects import (
    AttachmentRef,
    FileRequirement,
    FormField,
    PhotoRequirement,
    RequirementSchema,
)

__all__ = [
    # Entities
    "ActivityLogEntry",
    "Department",
    "DepartmentTrackingEntity",
    "OrderEntity",
    "WorkSubmissionEntity",
    # Enums
    "ActivityAction",
    "DepartmentKey",
    "FieldType",
    "OrderStatus",
    "TrackingStatus",
    # Exceptions
    "GoldworksException",
    "IllegalTransitionException",
    "PersistenceFailureException",
    "ResourceNotFoundException",
    "SchemaNotFoundException",
    "ValidationException",
    # Value objects
    "AttachmentRef",
    "FileRequirement",
    "FormField",
    "PhotoRequirement",
    "RequirementSchema",
]
