"""Dependency injection container."""

from typing import Optional

from config import SETTINGS, Settings
from tracker.adapters.memory_store import MemoryStateStore
from tracker.adapters.sse_broadcaster import SseBroadcaster
from tracker.ports.notifier import Notifier
from tracker.ports.state_store import StateStore
from tracker.services.progress_service import ProgressService
from tracker.services.task_gate import TaskGate
from tracker.usecases.advance_task import AdvanceTaskUseCase
from tracker.usecases.register_participant import RegisterParticipantUseCase
from tracker.usecases.remove_participant import RemoveParticipantUseCase
from tracker.usecases.reset_progress import ResetProgressUseCase


class DIContainer:
    """Dependency injection container."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[StateStore] = None,
        notifier: Optional[Notifier] = None,
    ):
        self.settings = settings or SETTINGS
        self._store = store or MemoryStateStore()
        self._notifier = notifier or SseBroadcaster(queue_size=self.settings.sse_queue_size)
        self._gate = TaskGate()

    @property
    def store(self) -> StateStore:
        return self._store

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    @property
    def gate(self) -> TaskGate:
        return self._gate

    def progress_service(self) -> ProgressService:
        return ProgressService(self._store, self._notifier, self._gate)

    def register_participant_uc(self) -> RegisterParticipantUseCase:
        return RegisterParticipantUseCase(self._store, self._notifier)

    def advance_task_uc(self) -> AdvanceTaskUseCase:
        return AdvanceTaskUseCase(self._store, self._notifier)

    def reset_progress_uc(self) -> ResetProgressUseCase:
        return ResetProgressUseCase(self._store, self._notifier)

    def remove_participant_uc(self) -> RemoveParticipantUseCase:
        return RemoveParticipantUseCase(self._store, self._notifier)

    async def close(self) -> None:
        await self._notifier.close()
