"""Unit tests for fuzzy ranking and lenient paging parameters."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.xtitles_api.services.fuzzy import normalize, rank_find, rank_match  # noqa: E402
from backend.xtitles_api.utils.params import (  # noqa: E402
    PageWindow,
    parse_flag,
    parse_limit,
    parse_page,
)


def test_normalize_folds_case_and_diacritics() -> None:
    assert normalize("Pokémon ÉLITE") == "pokemon elite"


def test_rank_match_requires_ordered_subsequence() -> None:
    assert rank_match("hlo", "Halo") == 1
    assert rank_match("olh", "Halo") is None
    assert rank_match("halo", "halo") == 0


def test_rank_find_orders_by_distance_with_stable_ties() -> None:
    """Equal distances keep the order in which candidates were supplied."""

    targets = ["Halo Wars", "Halo B", "Gears", "Halo A", "Halo"]

    ranks = rank_find("halo", targets)

    assert [rank.target for rank in ranks] == ["Halo", "Halo B", "Halo A", "Halo Wars"]
    assert [rank.distance for rank in ranks] == [0, 2, 2, 5]
    assert ranks[1].original_index == 1


def test_rank_find_returns_nothing_without_matches() -> None:
    assert rank_find("xyz", ["Halo", "Gears"]) == []


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, 1),
        ("", 1),
        ("0", 1),
        ("-1", 1),
        ("x", 1),
        ("4", 4),
        ("+5", 5),
        (" 5 ", 1),
        ("1_0", 1),
        ("\u0663", 1),
    ],
)
def test_parse_page(raw: str | None, expected: int) -> None:
    assert parse_page(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, 20),
        ("0", 20),
        ("-2", 20),
        ("101", 20),
        ("1", 1),
        ("100", 100),
        ("2.5", 20),
        ("1_0", 20),
        ("10\n", 20),
        ("\uff15", 20),
    ],
)
def test_parse_limit(raw: str | None, expected: int) -> None:
    assert parse_limit(raw) == expected


def test_parse_flag_only_accepts_literal_true() -> None:
    assert parse_flag("true") is True
    assert parse_flag("TRUE") is False
    assert parse_flag("1") is False
    assert parse_flag(None) is False


@pytest.mark.parametrize(
    ("total", "limit", "pages"), [(0, 20, 0), (1, 20, 1), (20, 20, 1), (21, 20, 2), (140, 100, 2)]
)
def test_page_window_page_count(total: int, limit: int, pages: int) -> None:
    window = PageWindow(page=2, limit=limit)

    assert window.offset == limit
    assert window.page_count(total) == pages
