"""Console entry point for the xtitles CLI."""
from __future__ import annotations

from .app import app


def main() -> None:
    """Run the xtitles command line."""

    app(prog_name="xtitles")


if __name__ == "__main__":
    main()
