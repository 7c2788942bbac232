"""Startup sequence: storage, ingestion, then the HTTP server."""
from __future__ import annotations

import logging

import uvicorn

from .app import create_app
from .db import StorageError
from .services.ingestion import IngestionError
from .settings import TitlesSettings

logger = logging.getLogger(__name__)


def serve(settings: TitlesSettings) -> int:
    """Initialise storage, run ingestion and block serving requests.

    Returns a process exit code; startup failures yield 1.
    """

    try:
        app = create_app(settings)
    except StorageError as exc:
        logger.error("Error initializing database: %s", exc)
        return 1

    try:
        app.state.app_state.ingest()
    except IngestionError as exc:
        logger.error("Error loading data: %s", exc)
        return 1

    logger.info("Server starting on %s:%d", settings.host, settings.port)
    logger.info("API available at: http://localhost:%d/api/v1", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
    return 0
