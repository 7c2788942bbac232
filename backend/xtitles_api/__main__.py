"""CLI entry point for launching the titles API with Uvicorn."""
import logging
import sys

from .server import serve
from .settings import TitlesSettings


def main() -> None:
    """Ingest the catalog if needed and start the server."""

    settings = TitlesSettings()
    logging.basicConfig(level=settings.log_level.upper())
    sys.exit(serve(settings))


if __name__ == "__main__":  # pragma: no cover - manual entrypoint
    main()
