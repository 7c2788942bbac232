"""Title listing, lookup and picture endpoints."""
from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import FileResponse

from ..dependencies import get_settings, get_title_store
from ..schemas import Page, StatsModel, TitleModel
from ..settings import TitlesSettings
from ..stores.title_store import TitleStore
from ..utils.params import parse_flag, resolve_window

router = APIRouter(prefix="/api/v1", tags=["titles"])

TITLE_ID_LENGTH = 8
MAX_PICTURE_NAME_LENGTH = 10


@router.get("/titles", response_model=Page[TitleModel])
def list_titles(
    page: str | None = Query(default=None, description="Page number starting at 1."),
    limit: str | None = Query(
        default=None, description="Items per page (1-100, defaults to 20)."
    ),
    only_with_pictures: str | None = Query(
        default=None, description="Set to 'true' to return only titles with pictures."
    ),
    reverse: str | None = Query(
        default=None, description="Set to 'true' to order by title id descending."
    ),
    store: TitleStore = Depends(get_title_store),
) -> Page[TitleModel]:
    """Return one page of titles ordered by title id.

    Invalid paging values fall back to their defaults instead of failing.
    """

    return store.list(
        window=resolve_window(page, limit),
        only_with_pictures=parse_flag(only_with_pictures),
        reverse=parse_flag(reverse),
    )


@router.get("/stats", response_model=StatsModel)
def title_stats(store: TitleStore = Depends(get_title_store)) -> StatsModel:
    """Return aggregate catalog counts."""

    return store.stats()


@router.get("/titles/{title_id}", response_model=TitleModel)
def get_title(title_id: str, store: TitleStore = Depends(get_title_store)) -> TitleModel:
    """Return a single title with its pictures."""

    title = store.get(title_id.lower())
    if title is None:
        raise HTTPException(status_code=404, detail="Title not found")
    return title


@router.get("/titles/{title_id}/{picture}", response_class=FileResponse)
def get_title_picture(
    title_id: str,
    picture: str,
    settings: TitlesSettings = Depends(get_settings),
) -> FileResponse:
    """Stream ``<pictures_folder>/<title_id>/<picture><suffix>`` from disk."""

    title_id = title_id.lower()
    picture = picture.lower().removesuffix(settings.pictures_suffix.lower())

    if len(title_id) != TITLE_ID_LENGTH:
        raise HTTPException(status_code=400, detail="Invalid title ID")
    if not picture or len(picture) > MAX_PICTURE_NAME_LENGTH or "/" in picture or "\\" in picture:
        raise HTTPException(status_code=400, detail="Invalid picture name")

    path = Path(settings.pictures_folder) / title_id / f"{picture}{settings.pictures_suffix}"
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Picture file not found")
    return FileResponse(path)
