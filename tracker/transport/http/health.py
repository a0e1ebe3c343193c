"""Health check endpoints."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from tracker import __version__
from tracker.providers import DIContainer
from tracker.transport.http.deps import get_container

router = APIRouter()
health_router = router  # alias for main.py


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str


@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic liveness."""
    return HealthResponse(status="healthy", service="api-quest-tracker", version=__version__)


@router.get("/ready")
async def readiness_check(container: DIContainer = Depends(get_container)) -> dict:
    """Readiness: the state store answers a snapshot."""
    snapshot = await container.store.snapshot()
    return {"status": "ready", "currentTask": snapshot["currentTask"]}


@router.get("/live")
async def liveness_check() -> dict:
    """Liveness endpoint."""
    return {"status": "alive"}
