"""Router exports for the titles API."""
from . import health, search, titles

__all__ = ["health", "search", "titles"]
