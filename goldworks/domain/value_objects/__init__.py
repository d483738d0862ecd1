"""Domain value objects and shared value types."""

from goldworks.domain.value_objects.core import (
    AttachmentRef,
    FileRequirement,
    FormField,
    PhotoRequirement,
    RequirementSchema,
)

__all__ = [
    "AttachmentRef",
    "FileRequirement",
    "FormField",
    "PhotoRequirement",
    "RequirementSchema",
]
