"""Domain value objects for the goldworks application.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value. Requirement schemas
are built from FormField, PhotoRequirement and FileRequirement; uploads
are tracked by AttachmentRef (references only, never bytes).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from goldworks.domain.enums import DepartmentKey, FieldType
from goldworks.shared.utils.datetime import parse_iso, to_iso


def _check_range(
    low: float | None, high: float | None, what: str, owner: str
) -> None:
    """Raise ValueError when both bounds are set and low > high."""
    if low is not None and high is not None and low > high:
        raise ValueError(f"{owner}: {what} lower bound {low} exceeds upper bound {high}")


def _normalize_format(fmt: str) -> str:
    fmt = fmt.strip().lower()
    return fmt if fmt.startswith(".") else f".{fmt}"


@dataclass(frozen=True)
class FormField:
    """One form input a worker fills in for a department.

    Constraint attributes apply per type: min_value/max_value for number,
    min_length/max_length for text and textarea, options for select,
    accept/max_size_mb for file.
    """

    name: str
    label: str
    type: FieldType
    required: bool = False
    placeholder: str | None = None
    help_text: str | None = None
    options: tuple[str, ...] = ()
    min_value: float | None = None
    max_value: float | None = None
    min_length: int | None = None
    max_length: int | None = None
    accept: tuple[str, ...] = ()
    max_size_mb: float | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Form field name must be a non-empty string")
        object.__setattr__(self, "type", FieldType(self.type))
        object.__setattr__(self, "options", tuple(self.options))
        object.__setattr__(self, "accept", tuple(self.accept))
        _check_range(self.min_value, self.max_value, "value", self.name)
        _check_range(self.min_length, self.max_length, "length", self.name)
        if self.type == FieldType.SELECT and not self.options:
            raise ValueError(f"Select field {self.name!r} must define at least one option")

    @property
    def constraints(self) -> dict[str, Any]:
        """Type-relevant constraints that are set (for API display)."""
        raw: dict[str, Any] = {
            "options": list(self.options) or None,
            "min": self.min_value,
            "max": self.max_value,
            "minLength": self.min_length,
            "maxLength": self.max_length,
            "accept": list(self.accept) or None,
            "maxSizeMB": self.max_size_mb,
        }
        return {k: v for k, v in raw.items() if v is not None}


@dataclass(frozen=True)
class PhotoRequirement:
    """A photo category; required categories need at least effective_min_count photos."""

    name: str
    label: str
    description: str = ""
    required: bool = False
    min_count: int | None = None
    max_count: int | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Photo requirement name must be a non-empty string")
        if self.required and self.min_count is not None and self.min_count < 1:
            raise ValueError(
                f"Required photo category {self.name!r} must have min_count >= 1"
            )
        _check_range(self.min_count, self.max_count, "count", self.name)

    @property
    def effective_min_count(self) -> int:
        """Minimum photos needed; an unset min_count counts as 1."""
        return self.min_count or 1


@dataclass(frozen=True)
class FileRequirement:
    """A file category (e.g. CAD model); required categories need one file."""

    name: str
    label: str
    description: str = ""
    required: bool = False
    accepted_formats: tuple[str, ...] = ()
    max_size_mb: float | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("File requirement name must be a non-empty string")
        object.__setattr__(
            self,
            "accepted_formats",
            tuple(_normalize_format(f) for f in self.accepted_formats),
        )

    def accepts(self, filename: str) -> bool:
        """Return True if filename's extension is accepted (any when unrestricted)."""
        if not self.accepted_formats:
            return True
        ext = os.path.splitext(filename)[1].lower()
        return ext in self.accepted_formats

    def within_size(self, size_bytes: int | None) -> bool:
        """Return True if size is unknown, unlimited, or at most max_size_mb."""
        if size_bytes is None or self.max_size_mb is None:
            return True
        return size_bytes <= self.max_size_mb * 1024 * 1024


def _unique_names(items: tuple[Any, ...], category: str, department: str) -> None:
    seen: set[str] = set()
    for item in items:
        if item.name in seen:
            raise ValueError(
                f"Duplicate {category} name {item.name!r} in {department} requirements"
            )
        seen.add(item.name)


@dataclass(frozen=True)
class RequirementSchema:
    """Declarative definition of what a worker must supply to complete a department.

    Collections are always present (possibly empty). Names are unique
    within each category.
    """

    department: DepartmentKey
    title: str
    description: str = ""
    form_fields: tuple[FormField, ...] = ()
    photo_requirements: tuple[PhotoRequirement, ...] = ()
    file_requirements: tuple[FileRequirement, ...] = ()
    estimated_time: str | None = None
    required_tools: tuple[str, ...] = ()
    tips: tuple[str, ...] = ()
    common_mistakes: tuple[str, ...] = ()
    coming_soon_message: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "department", DepartmentKey(self.department))
        for attr in (
            "form_fields",
            "photo_requirements",
            "file_requirements",
            "required_tools",
            "tips",
            "common_mistakes",
        ):
            object.__setattr__(self, attr, tuple(getattr(self, attr) or ()))
        dept = self.department.value
        _unique_names(self.form_fields, "form field", dept)
        _unique_names(self.photo_requirements, "photo category", dept)
        _unique_names(self.file_requirements, "file category", dept)

    def field(self, name: str) -> FormField | None:
        return next((f for f in self.form_fields if f.name == name), None)

    def photo_requirement(self, name: str) -> PhotoRequirement | None:
        return next((p for p in self.photo_requirements if p.name == name), None)

    def file_requirement(self, name: str) -> FileRequirement | None:
        return next((f for f in self.file_requirements if f.name == name), None)

    @property
    def required_fields(self) -> tuple[FormField, ...]:
        return tuple(f for f in self.form_fields if f.required)

    @property
    def required_photo_requirements(self) -> tuple[PhotoRequirement, ...]:
        return tuple(p for p in self.photo_requirements if p.required)

    @property
    def required_file_requirements(self) -> tuple[FileRequirement, ...]:
        return tuple(f for f in self.file_requirements if f.required)

    def reduced(self) -> RequirementSchema:
        """Schema trimmed to required items only (used when a department is disabled)."""
        return replace(
            self,
            form_fields=self.required_fields,
            photo_requirements=self.required_photo_requirements,
            file_requirements=self.required_file_requirements,
        )


@dataclass(frozen=True)
class AttachmentRef:
    """Reference to an uploaded photo or file. The core never holds file bytes."""

    id: str
    category: str
    url: str
    name: str | None = None
    mime_type: str | None = None
    size_bytes: int | None = None
    uploaded_at: datetime | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Attachment id must be a non-empty string")
        if not self.category:
            raise ValueError("Attachment category must be a non-empty string")

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the persisted draft layout ({id, category, ...})."""
        payload: dict[str, Any] = {
            "id": self.id,
            "category": self.category,
            "url": self.url,
        }
        if self.name is not None:
            payload["name"] = self.name
        if self.mime_type is not None:
            payload["mimeType"] = self.mime_type
        if self.size_bytes is not None:
            payload["size"] = self.size_bytes
        if self.uploaded_at is not None:
            payload["uploadedAt"] = to_iso(self.uploaded_at)
        return payload

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> AttachmentRef:
        """Build from a persisted or client payload; unknown keys are ignored."""
        return cls(
            id=str(data["id"]),
            category=str(data.get("category") or ""),
            url=str(data.get("url") or ""),
            name=data.get("name") or data.get("originalName"),
            mime_type=data.get("mimeType") or data.get("mime_type"),
            size_bytes=data.get("size") if data.get("size") is not None else data.get("size_bytes"),
            uploaded_at=parse_iso(data.get("uploadedAt") or data.get("uploaded_at")),
        )
