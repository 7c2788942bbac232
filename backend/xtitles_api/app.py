"""Application factory for the titles API."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .routers import health, search, titles
from .settings import TitlesSettings
from .state import AppState

logger = logging.getLogger(__name__)


async def _database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error while serving %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Database error"})


def create_app(settings: TitlesSettings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""

    resolved_settings = settings or TitlesSettings()
    app_state = AppState(settings=resolved_settings)

    app = FastAPI(
        title="Xbox 360 Title Browser API",
        version="0.1.0",
        openapi_url="/api/openapi.json",
    )
    app.state.app_state = app_state
    app.state.settings = app_state.settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SQLAlchemyError, _database_error_handler)

    for router in (health.router, titles.router, search.router):
        app.include_router(router)

    return app
