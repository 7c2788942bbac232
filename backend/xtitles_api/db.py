"""Database helpers for the titles API."""
from __future__ import annotations

from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, create_engine

from . import models  # noqa: F401  registers tables on SQLModel.metadata
from .settings import TitlesSettings


class StorageError(RuntimeError):
    """Raised when the database cannot be prepared for use."""


def _ensure_sqlite_path(database_url: str) -> None:
    """Create parent directories when using a SQLite URL."""

    if database_url.startswith("sqlite:///"):
        path_part = database_url.removeprefix("sqlite:///").split("?")[0]
        if path_part:
            Path(path_part).parent.mkdir(parents=True, exist_ok=True)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_from_settings(settings: TitlesSettings) -> Engine:
    """Create a SQLModel engine using service settings."""

    database_url = settings.database_url
    try:
        _ensure_sqlite_path(database_url)
    except OSError as exc:
        raise StorageError(f"failed to create data directory: {exc}") from exc

    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    engine = create_engine(database_url, echo=settings.database_echo, connect_args=connect_args)
    if database_url.startswith("sqlite"):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def init_database(engine: Engine) -> None:
    """Create the title and picture tables if they are missing."""

    try:
        SQLModel.metadata.create_all(engine)
    except SQLAlchemyError as exc:
        raise StorageError(f"failed to migrate database: {exc}") from exc
