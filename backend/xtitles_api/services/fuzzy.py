"""Approximate title matching used by the search endpoint.

A query matches a candidate when every character of the normalized query
appears in the normalized candidate in the same order. Matches are ranked by
the Levenshtein distance between the two normalized strings, which for a
subsequence is the number of candidate characters the query skipped. Lower is
better.
"""
from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Sequence

from rapidfuzz.distance import Levenshtein


@dataclass(frozen=True, slots=True)
class Rank:
    """A matched candidate together with its distance and input position."""

    source: str
    target: str
    distance: int
    original_index: int


def normalize(text: str) -> str:
    """Strip diacritics and fold case."""

    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.casefold()


def _is_subsequence(needle: str, haystack: str) -> bool:
    remaining = iter(haystack)
    return all(char in remaining for char in needle)


def rank_match(query: str, target: str) -> int | None:
    """Return the distance of ``query`` against ``target`` or ``None`` when it does not match."""

    normalized_query = normalize(query)
    normalized_target = normalize(target)
    if not _is_subsequence(normalized_query, normalized_target):
        return None
    return Levenshtein.distance(normalized_query, normalized_target)


def rank_find(query: str, targets: Sequence[str]) -> list[Rank]:
    """Rank every matching target, best first; ties keep their input order."""

    normalized_query = normalize(query)
    ranks: list[Rank] = []
    for index, target in enumerate(targets):
        normalized_target = normalize(target)
        if not _is_subsequence(normalized_query, normalized_target):
            continue
        ranks.append(
            Rank(
                source=query,
                target=target,
                distance=Levenshtein.distance(normalized_query, normalized_target),
                original_index=index,
            )
        )
    ranks.sort(key=lambda rank: rank.distance)
    return ranks
