"""HTTP client for the remote title catalog."""
from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from ..schemas import CatalogPage, CatalogTitle

logger = logging.getLogger(__name__)


class CatalogFetchError(RuntimeError):
    """Raised when a catalog page cannot be retrieved or decoded."""


class CatalogClient:
    """Pages through the remote catalog until a short page is returned."""

    def __init__(
        self,
        base_url: str,
        *,
        system: str,
        limit: int,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.base_url = base_url
        self.system = system
        self.limit = limit
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self._timeout, transport=self._transport)

    def fetch_page(self, client: httpx.Client, offset: int) -> CatalogPage:
        """Request the page starting at ``offset``."""

        params = {"system": self.system, "limit": self.limit, "offset": offset}
        try:
            response = client.get(self.base_url, params=params)
        except httpx.HTTPError as exc:
            raise CatalogFetchError(f"request failed: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            raise CatalogFetchError(
                f"unexpected status {response.status_code}: {response.text}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise CatalogFetchError(f"decode failed: {exc}") from exc

        try:
            return CatalogPage.model_validate(payload)
        except ValidationError as exc:
            raise CatalogFetchError(f"invalid envelope: {exc}") from exc

    def fetch_all(self) -> list[CatalogTitle]:
        """Return every catalog title in source order."""

        titles: list[CatalogTitle] = []
        offset = 0
        with self._client() as client:
            while True:
                page = self.fetch_page(client, offset)
                titles.extend(page.items)
                logger.info("Fetched %d titles (total: %d)", len(page.items), len(titles))
                if len(page.items) < self.limit:
                    break
                offset += self.limit
        return titles
