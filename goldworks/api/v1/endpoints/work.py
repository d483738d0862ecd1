"""Department work API: read, start, save draft and complete one department's work.

Each request opens a WorkSession over the order's tracking and closes it
before returning; autosave is a client concern over HTTP.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from goldworks.api.v1.dependencies import (
    get_actor_id,
    get_work_session_factory,
    parse_department_key,
)
from goldworks.application.use_cases.work import WorkSession, WorkSessionFactory
from goldworks.schemas.work import (
    AttachmentPayload,
    CompleteWorkResponse,
    ValidationReportResponse,
    WorkResponse,
    WorkUpdateRequest,
)

router = APIRouter()


def _work_response(session: WorkSession) -> WorkResponse:
    tracking = session.tracking
    sub = session.submission
    return WorkResponse(
        order_id=session.order.id,
        department=tracking.department,
        status=tracking.status,
        assigned_worker_id=tracking.assigned_worker_id,
        started_at=tracking.started_at,
        completed_at=tracking.completed_at,
        form_data=dict(sub.form_data),
        uploaded_photos=[AttachmentPayload.model_validate(p) for p in sub.uploaded_photos],
        uploaded_files=[AttachmentPayload.model_validate(f) for f in sub.uploaded_files],
        is_draft=sub.is_draft,
        is_complete=sub.is_complete,
        last_saved_at=sub.last_saved_at,
        time_spent_hours=sub.time_spent_hours,
        report=ValidationReportResponse.model_validate(session.report),
    )


async def _apply_updates(session: WorkSession, body: WorkUpdateRequest) -> None:
    for attachment_id in body.remove_attachment_ids:
        await session.remove_attachment(attachment_id)
    for name, value in body.form_data.items():
        session.edit(name, value)
    for photo in body.uploaded_photos:
        if session.submission.find_attachment(photo.id) is None:
            session.attach_photo(photo.to_ref())
    for file in body.uploaded_files:
        if session.submission.find_attachment(file.id) is None:
            session.attach_file(file.to_ref())


@router.get("/{order_id}/work/{key}", response_model=WorkResponse)
async def get_work(
    order_id: str,
    key: str,
    factory: Annotated[WorkSessionFactory, Depends(get_work_session_factory)],
):
    """Submission and validation report for the department."""
    session = await factory.open(order_id, parse_department_key(key))
    try:
        return _work_response(session)
    finally:
        session.close()


@router.post("/{order_id}/work/{key}/start", response_model=WorkResponse)
async def start_work(
    order_id: str,
    key: str,
    factory: Annotated[WorkSessionFactory, Depends(get_work_session_factory)],
    actor_id: Annotated[str | None, Depends(get_actor_id)],
):
    """NOT_STARTED -> IN_PROGRESS (409 when already started)."""
    session = await factory.open(order_id, parse_department_key(key))
    try:
        await session.start(actor_id)
        return _work_response(session)
    finally:
        session.close()


@router.post("/{order_id}/work/{key}/save", response_model=WorkResponse)
async def save_work(
    order_id: str,
    key: str,
    body: WorkUpdateRequest,
    factory: Annotated[WorkSessionFactory, Depends(get_work_session_factory)],
    actor_id: Annotated[str | None, Depends(get_actor_id)],
):
    """Apply edits and save them as a draft."""
    session = await factory.open(order_id, parse_department_key(key))
    try:
        await _apply_updates(session, body)
        await session.save_draft(actor_id)
        return _work_response(session)
    finally:
        session.close()


@router.post(
    "/{order_id}/work/{key}/complete",
    response_model=CompleteWorkResponse,
    responses={422: {"description": "Required items missing", "model": ValidationReportResponse}},
)
async def complete_work(
    order_id: str,
    key: str,
    body: WorkUpdateRequest,
    factory: Annotated[WorkSessionFactory, Depends(get_work_session_factory)],
    actor_id: Annotated[str | None, Depends(get_actor_id)],
):
    """Apply edits and complete the department, advancing the order.

    Returns 422 with the validation report when required items are missing;
    the edits in the body are not stored in that case.
    """
    session = await factory.open(order_id, parse_department_key(key))
    try:
        await _apply_updates(session, body)
        result = await session.submit(actor_id)
        if not result.completed:
            report = ValidationReportResponse.model_validate(result.report)
            return JSONResponse(
                status_code=422,
                content={
                    "error": "SUBMISSION_INCOMPLETE",
                    "message": "Required items are missing",
                    "details": report.model_dump(),
                },
            )
        return CompleteWorkResponse(
            completed=True,
            next_department=result.next_department,
            order_finished=result.order_finished,
            work=_work_response(session),
        )
    finally:
        session.close()
