"""Request context management using contextvars.

Holds the acting worker and request id for the current request/task so that
the activity log and log records can pick them up without threading them
through every call.

Usage:
    set_request_context(actor_id="worker-7", request_id="abc")
    actor_id = get_current_actor_id()
"""

from contextvars import ContextVar
from dataclasses import dataclass

_current_actor_id: ContextVar[str | None] = ContextVar("current_actor_id", default=None)
_current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


@dataclass(frozen=True)
class RequestContext:
    """Immutable snapshot of the current request context."""

    actor_id: str | None
    request_id: str | None


def set_request_context(
    actor_id: str | None = None, request_id: str | None = None
) -> None:
    """Set actor and request id for the current async task."""
    _current_actor_id.set(actor_id)
    _current_request_id.set(request_id)


def clear_request_context() -> None:
    """Clear actor and request id."""
    _current_actor_id.set(None)
    _current_request_id.set(None)


def get_current_actor_id() -> str | None:
    """Return the acting worker/user id, or None (system action)."""
    return _current_actor_id.get()


def get_current_request_id() -> str | None:
    """Return the current request id, or None outside a request."""
    return _current_request_id.get()


def get_request_context() -> RequestContext:
    """Return a snapshot of the current request context."""
    return RequestContext(
        actor_id=_current_actor_id.get(),
        request_id=_current_request_id.get(),
    )
