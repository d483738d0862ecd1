"""Shared utilities: request context, datetime and id helpers, logging.

Used by domain, application, and infrastructure. No business logic.
"""

from goldworks.shared.context import (
    RequestContext,
    clear_request_context,
    get_current_actor_id,
    get_current_request_id,
    get_request_context,
    set_request_context,
)
from goldworks.shared.utils import ensure_utc, generate_cuid, utc_now

__all__ = [
    "RequestContext",
    "clear_request_context",
    "ensure_utc",
    "generate_cuid",
    "get_current_actor_id",
    "get_current_request_id",
    "get_request_context",
    "set_request_context",
    "utc_now",
]
