"""FastAPI dependencies for the titles API."""
from fastapi import Depends, Request

from .settings import TitlesSettings
from .state import AppState
from .stores.title_store import TitleStore


def get_app_state(request: Request) -> AppState:
    """Resolve the shared application state from the FastAPI request."""
    return request.app.state.app_state


def get_settings(app_state: AppState = Depends(get_app_state)) -> TitlesSettings:
    return app_state.settings


def get_title_store(app_state: AppState = Depends(get_app_state)) -> TitleStore:
    """Return the title store dependency."""
    return app_state.title_store
