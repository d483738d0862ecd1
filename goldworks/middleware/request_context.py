"""Request context middleware.

Generates or forwards the request id header, reads the acting worker from
the actor header, and exposes both through goldworks.shared.context for the
duration of the request. The request id is echoed on the response.
Uses raw ASGI (no BaseHTTPMiddleware) so context vars stay set for the
endpoint task.
"""

import re
import uuid
from typing import Callable

from goldworks.shared.context import clear_request_context, set_request_context

# Safe for logging: alphanumeric, hyphen, underscore, dot, colon.
HEADER_VALUE_MAX_LENGTH = 64
HEADER_VALUE_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_.:-]{1," + str(HEADER_VALUE_MAX_LENGTH) + r"}$"
)


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def _clean(raw: str | None) -> str | None:
    """Return the stripped value if it is safe to log, else None."""
    if raw is None:
        return None
    value = raw.strip()
    if not HEADER_VALUE_ALLOWED_PATTERN.match(value):
        return None
    return value


def RequestContextMiddleware(
    app: Callable,
    request_id_header: str = "X-Request-ID",
    actor_header: str = "X-Actor-ID",
) -> Callable:
    """Set actor and request id context per request. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = _clean(_get_header(scope, request_id_header)) or str(uuid.uuid4())
        actor_id = _clean(_get_header(scope, actor_header))
        state = scope.setdefault("state", {})
        state["request_id"] = request_id
        state["actor_id"] = actor_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((request_id_header.encode(), request_id.encode()))
                message["headers"] = headers
            await send(message)

        set_request_context(actor_id=actor_id, request_id=request_id)
        try:
            await app(scope, receive, send_wrapper)
        finally:
            clear_request_context()

    return asgi_app
