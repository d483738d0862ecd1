"""Tests for departments, tracking transitions and order invariants."""

from datetime import UTC, datetime, timedelta

import pytest

from goldworks.domain.entities.department import (
    DEPARTMENTS,
    department_sequence,
    get_department,
    ordered_keys,
)
from goldworks.domain.entities.order import (
    DepartmentTrackingEntity,
    OrderEntity,
    WorkSubmissionEntity,
)
from goldworks.domain.enums import DepartmentKey, OrderStatus, TrackingStatus
from goldworks.domain.exceptions import IllegalTransitionException, ValidationException
from goldworks.domain.value_objects.core import AttachmentRef

T0 = datetime(2026, 3, 2, 9, 0, tzinfo=UTC)


def _tracking(department: DepartmentKey = DepartmentKey.CASTING) -> DepartmentTrackingEntity:
    return DepartmentTrackingEntity(id="t1", order_id="o1", department=department)


def test_every_department_key_has_a_department() -> None:
    assert {d.key for d in DEPARTMENTS} == set(DepartmentKey)
    assert ordered_keys() == list(DepartmentKey)
    assert [d.sequence for d in DEPARTMENTS] == list(range(1, 10))


def test_get_department_accepts_strings() -> None:
    assert get_department("setting").display_name == "Stone Setting"
    assert department_sequence(DepartmentKey.POLISH_2) == 8
    with pytest.raises(KeyError):
        get_department("LASER")


def test_department_key_parse() -> None:
    assert DepartmentKey.parse(" cad ") is DepartmentKey.CAD
    assert DepartmentKey.parse("unknown") is None
    assert "MEENA" in DepartmentKey.values()


def test_start_moves_to_in_progress_and_records_time() -> None:
    tracking = _tracking()
    tracking.start(T0, worker_id="w1")
    assert tracking.status is TrackingStatus.IN_PROGRESS
    assert tracking.started_at == T0
    assert tracking.submission.work_started_at == T0
    assert tracking.assigned_worker_id == "w1"


def test_start_twice_is_rejected_and_keeps_started_at() -> None:
    tracking = _tracking()
    tracking.start(T0)
    with pytest.raises(IllegalTransitionException) as info:
        tracking.start(T0 + timedelta(hours=1))
    assert tracking.started_at == T0
    assert info.value.details["attempted"] == "start"
    assert info.value.details["current_status"] == "IN_PROGRESS"


def test_edit_before_start_is_rejected() -> None:
    tracking = _tracking()
    with pytest.raises(IllegalTransitionException):
        tracking.set_field("metalType", "22K Gold")
    assert tracking.submission.form_data == {}


def test_complete_records_hours_spent() -> None:
    tracking = _tracking()
    tracking.start(T0)
    tracking.complete(T0 + timedelta(hours=2, minutes=30))
    sub = tracking.submission
    assert tracking.status is TrackingStatus.COMPLETED
    assert sub.is_complete and not sub.is_draft
    assert sub.time_spent_hours == 2.5
    assert sub.work_completed_at == tracking.completed_at


def test_edit_after_completion_is_rejected_and_data_unchanged() -> None:
    tracking = _tracking()
    tracking.start(T0)
    tracking.set_field("metalType", "22K Gold")
    tracking.complete(T0 + timedelta(hours=1))
    with pytest.raises(IllegalTransitionException):
        tracking.set_field("metalType", "Silver 925")
    assert tracking.submission.form_data == {"metalType": "22K Gold"}


def test_detach_unknown_attachment_raises_validation() -> None:
    tracking = _tracking()
    tracking.start(T0)
    tracking.attach_photo(AttachmentRef(id="p1", category="castedPiece", url="u"))
    assert tracking.detach("p1").id == "p1"
    with pytest.raises(ValidationException):
        tracking.detach("p1")


def test_draft_payload_round_trip() -> None:
    sub = WorkSubmissionEntity(
        form_data={"metalWeight": 12.5},
        uploaded_photos=[AttachmentRef(id="p1", category="castedPiece", url="u")],
        is_draft=True,
        last_saved_at=T0,
    )
    payload = sub.to_draft_payload()
    assert payload["lastSavedAt"] == "2026-03-02T09:00:00+00:00"
    assert payload["uploadedPhotos"] == [{"id": "p1", "category": "castedPiece", "url": "u"}]
    restored = WorkSubmissionEntity.from_draft_payload(payload)
    assert restored.form_data == sub.form_data
    assert restored.uploaded_photos == sub.uploaded_photos
    assert restored.last_saved_at == T0
    assert WorkSubmissionEntity.from_draft_payload(None).form_data == {}


def test_order_requires_department_unless_completed() -> None:
    with pytest.raises(ValidationException):
        OrderEntity(id="o1", order_number="ORD-1", current_department=None)
    with pytest.raises(ValidationException):
        OrderEntity(
            id="o1",
            order_number="ORD-1",
            status=OrderStatus.COMPLETED,
            current_department=DepartmentKey.CAD,
        )


def test_order_rejects_negative_priority() -> None:
    with pytest.raises(ValidationException):
        OrderEntity(id="o1", order_number="ORD-1", priority=-1)


def test_order_keeps_trackings_in_department_order() -> None:
    order = OrderEntity(id="o1", order_number="ORD-1")
    order.add_tracking(DepartmentTrackingEntity(id="t3", order_id="o1", department="CASTING"))
    order.add_tracking(DepartmentTrackingEntity(id="t1", order_id="o1", department="CAD"))
    assert [t.department for t in order.trackings] == [DepartmentKey.CAD, DepartmentKey.CASTING]
    assert order.current_tracking is order.trackings[0]


def test_order_rejects_duplicate_or_foreign_tracking() -> None:
    order = OrderEntity(id="o1", order_number="ORD-1")
    order.add_tracking(DepartmentTrackingEntity(id="t1", order_id="o1", department="CAD"))
    with pytest.raises(ValidationException):
        order.add_tracking(DepartmentTrackingEntity(id="t2", order_id="o1", department="CAD"))
    with pytest.raises(ValidationException):
        order.add_tracking(DepartmentTrackingEntity(id="t3", order_id="o2", department="PRINT"))


def test_mark_finished_clears_current_department() -> None:
    order = OrderEntity(id="o1", order_number="ORD-1", current_department=DepartmentKey.ADDITIONAL)
    order.mark_finished(T0)
    assert order.is_finished
    assert order.current_department is None
    assert order.completed_at == T0
