"""Runtime configuration for the titles API."""
from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TitlesSettings(BaseSettings):
    """Environment-aware settings for the titles service."""

    base_url: str = Field(
        "https://dbox.tools/api/title_ids/",
        description="Remote catalog endpoint queried during ingestion.",
    )
    limit: int = Field(default=100, ge=1, description="Page size requested from the catalog.")
    system: str = Field(default="XBOX360", description="System tag used to filter the catalog.")
    data_dir: str = Field(default="data", description="Directory holding the SQLite database.")
    db_file: str = Field(default="titles.db", description="SQLite database file name.")
    pictures_folder: str = Field(
        default="titles", description="Root directory with one picture folder per title."
    )
    pictures_suffix: str = Field(default=".png", description="File suffix of picture files.")
    host: str = Field(default="0.0.0.0", description="Interface the HTTP server binds to.")
    port: int = Field(default=8081, description="Port the HTTP server listens on.")
    database_echo: bool = Field(
        default=False, description="Enable SQL echo for debugging queries."
    )
    request_timeout: float = Field(
        default=30.0, gt=0, description="Timeout in seconds for catalog requests."
    )
    log_level: str = Field(default="INFO", description="Root logging level.")

    model_config = SettingsConfigDict(
        env_prefix="XTITLES_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @property
    def database_path(self) -> Path:
        return Path(self.data_dir) / self.db_file

    @property
    def database_url(self) -> str:
        """SQLite URL derived from the data directory and database file."""

        return f"sqlite:///{self.database_path.as_posix()}"
