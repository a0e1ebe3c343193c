"""Metrics endpoints."""

from collections import Counter

from fastapi import APIRouter, Depends

from tracker.domain.task import TASK_IDS
from tracker.providers import DIContainer
from tracker.transport.http.deps import get_container

router = APIRouter()
metrics_router = router  # alias for main.py


@router.get("/", response_model=dict)
async def get_metrics(container: DIContainer = Depends(get_container)) -> dict:
    """Get tracker metrics."""
    snapshot = await container.store.snapshot()
    completions = Counter(
        task_id for p in snapshot["participants"] for task_id in p["completedTasks"]
    )
    return {
        "current_task": snapshot["currentTask"],
        "participants_count": len(snapshot["participants"]),
        "observers_count": container.notifier.subscriber_count,
        "completions": {str(task_id): completions.get(task_id, 0) for task_id in TASK_IDS},
    }
