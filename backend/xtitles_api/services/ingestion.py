"""One-shot ingestion merging the remote catalog with the local picture folders."""
from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from ..models import PictureRecord, TitleRecord
from ..schemas import IngestionReport
from ..stores.title_store import DEFAULT_BATCH_SIZE, TitleStore, build_pictures
from .catalog_client import CatalogClient, CatalogFetchError
from .picture_index import PictureIndexError, build_picture_index

logger = logging.getLogger(__name__)


class IngestionError(RuntimeError):
    """Raised when the catalog cannot be fetched or persisted."""


class TitleIngestor:
    """Populates an empty store from the catalog and the pictures directory."""

    def __init__(
        self,
        store: TitleStore,
        client: CatalogClient,
        *,
        pictures_root: str | Path,
        pictures_suffix: str,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        self._store = store
        self._client = client
        self._pictures_root = pictures_root
        self._pictures_suffix = pictures_suffix
        self._batch_size = batch_size

    def run(self) -> IngestionReport:
        """Ingest the catalog unless the store already holds titles."""

        existing = self._store.count()
        if existing > 0:
            logger.info("Database already contains %d titles", existing)
            return IngestionReport(
                titles=existing, pictures=self._store.count_pictures(), skipped=True
            )

        logger.info("Fetching titles from %s", self._client.base_url)
        try:
            fetched = self._client.fetch_all()
        except CatalogFetchError as exc:
            raise IngestionError(f"fetching titles failed: {exc}") from exc

        try:
            index = build_picture_index(self._pictures_root, self._pictures_suffix)
        except PictureIndexError as exc:
            logger.warning("Error reading picture dirs: %s", exc)
            index = {}

        titles = [TitleRecord(**item.model_dump()) for item in fetched]
        pictures: list[PictureRecord] = []
        for item in fetched:
            pictures.extend(build_pictures(item.title_id, index.get(item.title_id.lower(), [])))

        logger.info("Inserting %d titles into database", len(titles))
        try:
            self._store.insert_batches(titles, self._batch_size)
        except SQLAlchemyError as exc:
            raise IngestionError(f"inserting titles failed: {exc}") from exc
        logger.info("Inserted %d titles", len(titles))

        if pictures:
            logger.info("Inserting %d pictures into database", len(pictures))
            try:
                self._store.insert_batches(pictures, self._batch_size)
            except SQLAlchemyError as exc:
                # Titles without their pictures would pass the count gate on the next start.
                self._store.clear()
                raise IngestionError(f"inserting pictures failed: {exc}") from exc
            logger.info("Inserted %d pictures", len(pictures))

        logger.info(
            "Successfully loaded %d titles and %d pictures into database",
            len(titles),
            len(pictures),
        )
        return IngestionReport(titles=len(titles), pictures=len(pictures))
