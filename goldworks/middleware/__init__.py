"""HTTP middleware: actor and request id context.

Applied in main app; import and use from goldworks.main.
"""

from goldworks.middleware.request_context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
