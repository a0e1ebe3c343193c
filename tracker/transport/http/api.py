"""Tracker API endpoints."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Header
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from tracker.providers import DIContainer
from tracker.transport.http.deps import get_container, read_json_body, require_admin

router = APIRouter()

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


class ParticipantView(BaseModel):
    """Participant as shown on the dashboard."""

    id: str
    name: str
    completedTasks: List[int]
    postCount: int


class TaskView(BaseModel):
    """Task description."""

    id: int
    title: str
    subtitle: str
    description: str
    hint: str
    icon: str


class SnapshotResponse(BaseModel):
    """Snapshot response model."""

    currentTask: int
    participants: List[ParticipantView]
    taskDescriptions: List[TaskView]


class RegisterResponse(BaseModel):
    id: str
    name: str
    message: str


class CurrentTaskResponse(BaseModel):
    currentTask: int


class MessageResponse(BaseModel):
    message: str


# ─── Observers ───────────────────────────────────────────────────────────────


@router.get("/events")
async def stream_events(container: DIContainer = Depends(get_container)):
    """Push stream: one snapshot on connect, then one per state change."""
    keepalive = container.settings.sse_keepalive_seconds

    async def event_stream():
        subscription = None
        try:
            async with container.store.transaction() as state:
                subscription = container.notifier.subscribe(state.to_snapshot())
            async for frame in subscription.stream(keepalive):
                yield frame
        finally:
            if subscription is not None:
                container.notifier.unsubscribe(subscription)

    return StreamingResponse(event_stream(), media_type="text/event-stream", headers=SSE_HEADERS)


@router.get("/state", response_model=SnapshotResponse)
async def get_state(container: DIContainer = Depends(get_container)) -> Dict[str, Any]:
    """Pull fallback with the same shape as the push stream."""
    return await container.store.snapshot()


# ─── Registration & admin ────────────────────────────────────────────────────


@router.post("/register", response_model=RegisterResponse)
async def register(
    payload: Dict[str, Any] = Depends(read_json_body),
    container: DIContainer = Depends(get_container),
) -> RegisterResponse:
    participant = await container.register_participant_uc().execute(payload)
    return RegisterResponse(
        id=participant.id,
        name=participant.name,
        message=f"Welcome {participant.name}! Your player ID is: {participant.id}",
    )


@router.post("/admin/task", response_model=CurrentTaskResponse, dependencies=[Depends(require_admin)])
async def set_task(
    payload: Dict[str, Any] = Depends(read_json_body),
    container: DIContainer = Depends(get_container),
) -> CurrentTaskResponse:
    current_task = await container.advance_task_uc().execute(payload)
    return CurrentTaskResponse(currentTask=current_task)


@router.post("/admin/reset", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def reset_all(container: DIContainer = Depends(get_container)) -> MessageResponse:
    await container.reset_progress_uc().execute()
    return MessageResponse(message="All progress reset")


@router.delete(
    "/admin/player/{participant_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
async def remove_player(
    participant_id: str,
    container: DIContainer = Depends(get_container),
) -> MessageResponse:
    await container.remove_participant_uc().execute(participant_id)
    return MessageResponse(message="Player removed")


# ─── Tasks ───────────────────────────────────────────────────────────────────


@router.get("/player/{participant_id}/task1")
async def task1(participant_id: str, container: DIContainer = Depends(get_container)) -> dict:
    result = await container.progress_service().hello_world(participant_id)
    return result.to_dict()


@router.get("/player/{participant_id}/task2")
async def task2(
    participant_id: str,
    authorization: Optional[str] = Header(default=None),
    container: DIContainer = Depends(get_container),
) -> dict:
    result = await container.progress_service().authenticated_get(participant_id, authorization)
    return result.to_dict()


@router.post("/player/{participant_id}/task3")
async def task3(
    participant_id: str,
    authorization: Optional[str] = Header(default=None),
    payload: Dict[str, Any] = Depends(read_json_body),
    container: DIContainer = Depends(get_container),
) -> dict:
    result = await container.progress_service().authenticated_post(participant_id, authorization, payload)
    return result.to_dict()


@router.post("/player/{participant_id}/task4")
async def task4(participant_id: str, container: DIContainer = Depends(get_container)) -> dict:
    result = await container.progress_service().speed_round(participant_id)
    return result.to_dict()


@router.get("/player/{participant_id}/task5/key")
async def task5_key(participant_id: str, container: DIContainer = Depends(get_container)) -> dict:
    result = await container.progress_service().issue_key(participant_id)
    return result.to_dict()


@router.post("/player/{participant_id}/task5")
async def task5(
    participant_id: str,
    payload: Dict[str, Any] = Depends(read_json_body),
    container: DIContainer = Depends(get_container),
) -> dict:
    result = await container.progress_service().verify_key(participant_id, payload)
    return result.to_dict()


@router.post("/player/{participant_id}/task6")
async def task6(
    participant_id: str,
    payload: Dict[str, Any] = Depends(read_json_body),
    container: DIContainer = Depends(get_container),
) -> dict:
    result = await container.progress_service().upload_image(participant_id, payload)
    return result.to_dict()
