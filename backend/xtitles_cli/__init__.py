"""Typer CLI for the titles service."""
from .app import app

__all__ = ["app"]
