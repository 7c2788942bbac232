"""Service layer exports for the titles API."""
from .catalog_client import CatalogClient, CatalogFetchError
from .fuzzy import Rank, normalize, rank_find, rank_match
from .ingestion import IngestionError, TitleIngestor
from .picture_index import PictureIndexError, build_picture_index
from .title_search import search_titles

__all__ = [
    "CatalogClient",
    "CatalogFetchError",
    "IngestionError",
    "PictureIndexError",
    "Rank",
    "TitleIngestor",
    "build_picture_index",
    "normalize",
    "rank_find",
    "rank_match",
    "search_titles",
]
