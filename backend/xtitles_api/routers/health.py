"""Health endpoints."""
from fastapi import APIRouter, Depends

from ..dependencies import get_title_store
from ..schemas import HealthStatus
from ..stores.title_store import TitleStore

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthStatus)
def get_health(store: TitleStore = Depends(get_title_store)) -> HealthStatus:
    """Return service heartbeat information."""

    return HealthStatus(titles=store.count())
