"""HTTP transport (FastAPI routers)."""

from tracker.transport.http.api import router
from tracker.transport.http.health import health_router
from tracker.transport.http.metrics import metrics_router

__all__ = ["health_router", "metrics_router", "router"]
