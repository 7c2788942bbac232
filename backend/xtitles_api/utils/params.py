"""Lenient query parameter parsing shared by the listing and search endpoints."""
from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100

# Optional sign followed by ASCII digits only; no whitespace or underscores.
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class PageWindow:
    """Resolved page number, page size and row offset."""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def page_count(self, total: int) -> int:
        """Return ceil(total / limit)."""

        return (total + self.limit - 1) // self.limit


def _parse_int(raw: str | None) -> int | None:
    if raw is None or not INTEGER_PATTERN.fullmatch(raw):
        return None
    return int(raw)


def parse_page(raw: str | None) -> int:
    """Return the requested page, falling back to 1 for missing or invalid input."""

    page = _parse_int(raw)
    if page is None or page < 1:
        return DEFAULT_PAGE
    return page


def parse_limit(raw: str | None) -> int:
    """Return the requested page size, falling back to 20 outside 1..100."""

    limit = _parse_int(raw)
    if limit is None or limit < 1 or limit > MAX_LIMIT:
        return DEFAULT_LIMIT
    return limit


def parse_flag(raw: str | None) -> bool:
    """Only the literal ``true`` enables a flag."""

    return raw == "true"


def resolve_window(page: str | None, limit: str | None) -> PageWindow:
    return PageWindow(page=parse_page(page), limit=parse_limit(limit))
