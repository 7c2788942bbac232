"""Fuzzy search over the full title set."""
from __future__ import annotations

from ..schemas import Page, TitleModel
from ..stores.title_store import TitleStore
from ..utils.params import PageWindow
from .fuzzy import rank_find


def search_titles(
    store: TitleStore, query: str, *, window: PageWindow, only_with_pictures: bool
) -> Page[TitleModel]:
    """Rank every title name against ``query`` and return one page of matches.

    The whole catalog is loaded and ranked on each call. An offset past the
    last match is clamped to the match count and yields an empty page.
    """

    titles = store.all_titles()
    if only_with_pictures:
        titles = [title for title in titles if title.pictures]

    matches = rank_find(query, [title.name for title in titles])
    total = len(matches)
    offset = min(window.offset, total)
    end = min(offset + window.limit, total)
    items = [titles[match.original_index] for match in matches[offset:end]]

    return Page[TitleModel](
        items=items,
        total=total,
        limit=window.limit,
        offset=offset,
        page=window.page,
        pages=window.page_count(total),
    )
