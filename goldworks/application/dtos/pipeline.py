"""DTOs for department pipeline transitions."""

from dataclasses import dataclass

from goldworks.domain.enums import DepartmentKey


@dataclass(frozen=True)
class AdvanceResult:
    """Result of moving an order past a completed department.

    to_department is None when the order finished. created_tracking is True
    when a NOT_STARTED tracking was created for the next department.
    """

    from_department: DepartmentKey
    to_department: DepartmentKey | None
    finished: bool
    created_tracking: bool = False
