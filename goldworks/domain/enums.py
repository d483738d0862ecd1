"""Domain enumerations for the goldworks application.

Enums represent fixed sets of domain values: the department sequence,
tracking/order lifecycle states, requirement field types, and activity
log actions.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]  # type: ignore[attr-defined]


class DepartmentKey(_ValuesMixin, str, Enum):
    """Closed set of manufacturing departments, in pipeline order.

    Display names and sequence numbers live in
    goldworks.domain.entities.department.
    """

    CAD = "CAD"
    PRINT = "PRINT"
    CASTING = "CASTING"
    FILLING = "FILLING"
    MEENA = "MEENA"
    POLISH_1 = "POLISH_1"
    SETTING = "SETTING"
    POLISH_2 = "POLISH_2"
    ADDITIONAL = "ADDITIONAL"

    @classmethod
    def parse(cls, value: "str | DepartmentKey") -> "DepartmentKey | None":
        """Return the member for value, or None when value is not a department key."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return None


class TrackingStatus(_ValuesMixin, str, Enum):
    """Lifecycle of one department's work on one order."""

    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class OrderStatus(_ValuesMixin, str, Enum):
    """Order lifecycle. COMPLETED is the terminal 'finished' marker."""

    IN_FACTORY = "IN_FACTORY"
    COMPLETED = "COMPLETED"


class FieldType(_ValuesMixin, str, Enum):
    """Form field input types supported by requirement schemas."""

    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    TEXTAREA = "textarea"
    DATE = "date"
    CHECKBOX = "checkbox"
    FILE = "file"
    PHOTO = "photo"


class AttachmentKind(_ValuesMixin, str, Enum):
    """Which attachment list an upload belongs to."""

    PHOTO = "photo"
    FILE = "file"


class ActivityAction(_ValuesMixin, str, Enum):
    """Activity log action types (append-only order timeline)."""

    ORDER_CREATED = "ORDER_CREATED"
    WORK_STARTED = "WORK_STARTED"
    DRAFT_SAVED = "DRAFT_SAVED"
    DEPT_COMPLETED = "DEPT_COMPLETED"
    FILE_UPLOADED = "FILE_UPLOADED"
    DEPT_MOVE = "DEPT_MOVE"
    WORKER_ASSIGNED = "WORKER_ASSIGNED"
    WORKER_REASSIGNED = "WORKER_REASSIGNED"
    ORDER_COMPLETED = "ORDER_COMPLETED"
