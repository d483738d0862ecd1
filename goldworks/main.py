"""FastAPI application entry point.

Wiring only: logging, lifespan, exception handlers, middleware, routers.
See goldworks.core.lifespan and goldworks.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from goldworks.api.v1.router import api_router
from goldworks.core.config import get_settings
from goldworks.core.exception_handlers import register_exception_handlers
from goldworks.core.lifespan import create_lifespan
from goldworks.middleware import RequestContextMiddleware
from goldworks.shared.telemetry.logging import setup_logging


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # First added = innermost: CORS runs inside the request context.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[settings.request_id_header],
    )
    app.add_middleware(
        RequestContextMiddleware,
        request_id_header=settings.request_id_header,
        actor_header=settings.actor_header_name,
    )

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()
