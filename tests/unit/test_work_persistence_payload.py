"""Tests for the persisted draft payload layout."""

from datetime import UTC, datetime

import jsonschema
import pytest

from goldworks.domain.entities.order import WorkSubmissionEntity
from goldworks.domain.value_objects.core import AttachmentRef
from goldworks.infrastructure.persistence.repositories.work_persistence import (
    validate_draft_payload,
)


def _submission() -> WorkSubmissionEntity:
    return WorkSubmissionEntity(
        form_data={"metalType": "22K Gold", "metalWeight": 28.5},
        uploaded_photos=[
            AttachmentRef(id="p1", category="castedPiece", url="https://cdn.test/p1.jpg")
        ],
        uploaded_files=[
            AttachmentRef(
                id="f1",
                category="cadFile",
                url="https://cdn.test/ring.stl",
                name="ring.stl",
                size_bytes=2048,
            )
        ],
        is_draft=True,
        last_saved_at=datetime(2026, 3, 2, 10, 0, tzinfo=UTC),
    )


def test_serialized_submission_matches_layout() -> None:
    payload = _submission().to_draft_payload()
    validate_draft_payload(payload)
    assert payload["uploadedFiles"][0]["size"] == 2048


def test_payload_restores_submission() -> None:
    restored = WorkSubmissionEntity.from_draft_payload(_submission().to_draft_payload())
    assert restored.form_data["metalWeight"] == 28.5
    assert restored.photos_in("castedPiece")[0].id == "p1"
    assert restored.is_draft


def test_empty_payload_gives_empty_submission() -> None:
    restored = WorkSubmissionEntity.from_draft_payload(None)
    assert restored.form_data == {}
    assert not restored.has_attachments


def test_attachment_without_id_is_rejected() -> None:
    payload = _submission().to_draft_payload()
    del payload["uploadedPhotos"][0]["id"]
    with pytest.raises(jsonschema.ValidationError):
        validate_draft_payload(payload)
