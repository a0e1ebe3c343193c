"""Use cases (application layer)."""

from tracker.usecases.advance_task import AdvanceTaskUseCase
from tracker.usecases.register_participant import RegisterParticipantUseCase
from tracker.usecases.remove_participant import RemoveParticipantUseCase
from tracker.usecases.reset_progress import ResetProgressUseCase

__all__ = [
    "AdvanceTaskUseCase",
    "RegisterParticipantUseCase",
    "RemoveParticipantUseCase",
    "ResetProgressUseCase",
]
