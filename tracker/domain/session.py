"""Global game state container."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from tracker.domain.participant import Participant
from tracker.domain.task import FIRST_TASK, KEY_EXCHANGE_TASK, SPEED_TASK, TASKS


@dataclass
class GameState:
    """Single owner of the active task and every participant record."""

    current_task: int = FIRST_TASK
    participants: Dict[str, Participant] = field(default_factory=dict)

    def get_participant(self, participant_id: str) -> Optional[Participant]:
        return self.participants.get(participant_id)

    def add_participant(self, participant: Participant) -> None:
        self.participants[participant.id] = participant

    def remove_participant(self, participant_id: str) -> bool:
        return self.participants.pop(participant_id, None) is not None

    def activate_task(self, task_id: int) -> None:
        """Switch the active task and clear the scratch state it owns."""
        self.current_task = task_id
        for participant in self.participants.values():
            if task_id == SPEED_TASK:
                participant.post_count = 0
            if task_id == KEY_EXCHANGE_TASK:
                participant.secret_key = None

    def reset(self) -> None:
        for participant in self.participants.values():
            participant.reset_progress()
        self.current_task = FIRST_TASK

    def to_snapshot(self) -> Dict[str, Any]:
        """Full serializable view shared by the push and pull surfaces."""
        return {
            "currentTask": self.current_task,
            "participants": [p.to_dict() for p in self.participants.values()],
            "taskDescriptions": [task.to_dict() for task in TASKS],
        }
