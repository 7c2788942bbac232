"""HTTP client helpers for the titles CLI."""
from __future__ import annotations

import httpx

USER_AGENT = "xtitles-cli/0.1.0"


def create_client(
    base_url: str, *, timeout: float = 10.0, transport: httpx.BaseTransport | None = None
) -> httpx.Client:
    """Return an HTTPX client for the titles API rooted at ``base_url``."""

    return httpx.Client(
        base_url=base_url,
        timeout=timeout,
        transport=transport,
        headers={"Accept": "application/json", "User-Agent": USER_AGENT},
    )
