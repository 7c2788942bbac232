"""Shared state container for the titles API."""
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.engine import Engine

from .db import create_engine_from_settings, init_database
from .schemas import IngestionReport
from .services.catalog_client import CatalogClient
from .services.ingestion import TitleIngestor
from .settings import TitlesSettings
from .stores.title_store import TitleStore


@dataclass(slots=True)
class AppState:
    """Encapsulates the settings, engine and collaborators shared across routers."""

    settings: TitlesSettings
    engine: Engine
    title_store: TitleStore
    catalog_client: CatalogClient

    def __init__(self, settings: TitlesSettings) -> None:
        self.settings = settings
        self.engine = create_engine_from_settings(settings)
        init_database(self.engine)
        self.title_store = TitleStore(self.engine)
        self.catalog_client = CatalogClient(
            settings.base_url,
            system=settings.system,
            limit=settings.limit,
            timeout=settings.request_timeout,
        )

    def ingest(self) -> IngestionReport:
        """Populate the store from the catalog when it is still empty."""

        ingestor = TitleIngestor(
            self.title_store,
            self.catalog_client,
            pictures_root=self.settings.pictures_folder,
            pictures_suffix=self.settings.pictures_suffix,
        )
        return ingestor.run()
