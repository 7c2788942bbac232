"""Fuzzy title search endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import get_title_store
from ..schemas import Page, TitleModel
from ..services.title_search import search_titles
from ..stores.title_store import TitleStore
from ..utils.params import parse_flag, resolve_window

router = APIRouter(prefix="/api/v1", tags=["search"])


@router.get("/search", response_model=Page[TitleModel])
def search(
    q: str | None = Query(default=None, description="Text matched against title names."),
    page: str | None = Query(default=None, description="Page number starting at 1."),
    limit: str | None = Query(
        default=None, description="Items per page (1-100, defaults to 20)."
    ),
    only_with_pictures: str | None = Query(
        default=None, description="Set to 'true' to return only titles with pictures."
    ),
    store: TitleStore = Depends(get_title_store),
) -> Page[TitleModel]:
    """Return titles whose names fuzzily match ``q``, best match first."""

    if not q:
        raise HTTPException(status_code=400, detail="Query parameter 'q' is required")

    return search_titles(
        store,
        q,
        window=resolve_window(page, limit),
        only_with_pictures=parse_flag(only_with_pictures),
    )
