"""DTOs for work submission use cases (no dependency on ORM or presentation schemas)."""

from dataclasses import dataclass, field

from goldworks.domain.enums import DepartmentKey


@dataclass(frozen=True)
class ValidationReport:
    """What is still outstanding for a submission against its schema.

    missing_* hold names of required items that are not yet satisfied, in
    schema order. field_errors maps field name to a human-readable message
    and may also contain optional fields whose value violates a constraint.
    """

    missing_fields: list[str] = field(default_factory=list)
    missing_photo_categories: list[str] = field(default_factory=list)
    missing_file_categories: list[str] = field(default_factory=list)
    percent_complete: int = 0
    field_errors: dict[str, str] = field(default_factory=dict)

    @property
    def can_submit(self) -> bool:
        return not (
            self.missing_fields
            or self.missing_photo_categories
            or self.missing_file_categories
        )


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of submit(): completed=False means nothing changed; see report."""

    completed: bool
    report: ValidationReport
    next_department: DepartmentKey | None = None
    order_finished: bool = False
