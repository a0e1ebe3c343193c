"""Domain models and business rules."""

from tracker.domain.participant import Participant
from tracker.domain.session import GameState
from tracker.domain.task import TASKS, TaskDefinition, get_task

__all__ = ["GameState", "Participant", "TASKS", "TaskDefinition", "get_task"]
