"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from hnview.interface.api.routes import comments, health
from hnview.util.di.container import create_container, setup_di
from hnview.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this and passes this function to
    uvicorn as an application factory.

    Args:
        container: DI container, the production container when omitted
    """
    app_instance = FastAPI(
        title="hnview",
        description="Renders Hacker News comment trees as terminal pager text",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)

    return app_instance
