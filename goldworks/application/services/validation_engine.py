"""Evaluates a work submission against its department requirement schema.

Pure computation: no I/O and no mutation of the submission.
"""

from __future__ import annotations

import math
from typing import Any

from goldworks.application.dtos.work import ValidationReport
from goldworks.domain.entities.order import WorkSubmissionEntity
from goldworks.domain.enums import FieldType
from goldworks.domain.value_objects.core import FormField, RequirementSchema

_TEXT_TYPES = (FieldType.TEXT, FieldType.TEXTAREA)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (33.5 -> 34)."""
    return int(math.floor(value + 0.5))


def _fmt(number: float) -> str:
    return f"{number:g}"


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


class ValidationEngine:
    """Computes missing items, field errors and percent complete.

    Required fields, photo categories and file categories are checked.
    Optional fields are only checked for constraint violations when they
    hold a value; those errors are informational and never block submit.
    """

    def check_field(self, field: FormField, value: Any) -> str | None:
        """Return an error message for value, or None when it is acceptable."""
        label = field.label or field.name
        if field.type == FieldType.CHECKBOX:
            if field.required and value is not True:
                return f"{label} must be checked"
            return None
        if _is_blank(value):
            return f"{label} is required" if field.required else None
        if field.type == FieldType.NUMBER:
            return self._check_number(field, value)
        if field.type in _TEXT_TYPES:
            return self._check_length(field, str(value))
        return None

    def _check_number(self, field: FormField, value: Any) -> str | None:
        label = field.label or field.name
        if isinstance(value, bool):
            return f"{label} must be a number"
        try:
            number = float(value)
        except (TypeError, ValueError):
            return f"{label} must be a number"
        if math.isnan(number):
            return f"{label} must be a number"
        if field.min_value is not None and number < field.min_value:
            return f"{label} must be at least {_fmt(field.min_value)}"
        if field.max_value is not None and number > field.max_value:
            return f"{label} must be at most {_fmt(field.max_value)}"
        return None

    def _check_length(self, field: FormField, text: str) -> str | None:
        label = field.label or field.name
        if field.min_length is not None and len(text) < field.min_length:
            return f"{label} must be at least {field.min_length} characters"
        if field.max_length is not None and len(text) > field.max_length:
            return f"{label} must be at most {field.max_length} characters"
        return None

    def evaluate(
        self, schema: RequirementSchema, submission: WorkSubmissionEntity
    ) -> ValidationReport:
        """Build the ValidationReport for submission under schema."""
        missing_fields: list[str] = []
        field_errors: dict[str, str] = {}
        for field in schema.form_fields:
            error = self.check_field(field, submission.form_data.get(field.name))
            if error is None:
                continue
            field_errors[field.name] = error
            if field.required:
                missing_fields.append(field.name)

        missing_photos = [
            req.name
            for req in schema.required_photo_requirements
            if len(submission.photos_in(req.name)) < req.effective_min_count
        ]
        missing_files = [
            req.name
            for req in schema.required_file_requirements
            if not submission.files_in(req.name)
        ]

        buckets = (
            (bool(schema.required_fields), not missing_fields),
            (bool(schema.required_photo_requirements), not missing_photos),
            (bool(schema.required_file_requirements), not missing_files),
        )
        applicable = sum(1 for has_required, _ in buckets if has_required)
        satisfied = sum(1 for has_required, ok in buckets if has_required and ok)
        percent = round_half_up(100 * satisfied / applicable) if applicable else 0

        return ValidationReport(
            missing_fields=missing_fields,
            missing_photo_categories=missing_photos,
            missing_file_categories=missing_files,
            percent_complete=percent,
            field_errors=field_errors,
        )
