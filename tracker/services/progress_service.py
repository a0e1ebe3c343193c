"""Completion rules for the six challenges."""

import logging
import secrets
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from core.exceptions import PreconditionFailedError, ValidationFailedError
from core.validators import ImageValidator, MessageValidator, SecretKeyValidator, validate_payload
from tracker.domain.participant import Participant
from tracker.domain.session import GameState
from tracker.domain.task import SPEED_TARGET
from tracker.ports.notifier import Notifier
from tracker.ports.state_store import StateStore
from tracker.services.task_gate import TaskGate

logger = logging.getLogger(__name__)

SECRET_KEY_BYTES = 16
WRONG_KEY_MESSAGE = "Wrong key! Make sure you use the exact key you received."


@dataclass
class TaskResult:
    """Outcome of a task request on the 2xx path."""

    success: bool
    message: str
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"success": self.success, "message": self.message}
        data.update(self.extra)
        return data


class ProgressService:
    """Applies a task rule to a participant and publishes the new state."""

    def __init__(self, store: StateStore, notifier: Notifier, gate: TaskGate):
        self.store = store
        self.notifier = notifier
        self.gate = gate

    def _complete(self, state: GameState, participant: Participant, task_id: int) -> None:
        if participant.mark_completed(task_id):
            logger.info(f"{participant.id} completed task {task_id}")
        self.notifier.publish(state.to_snapshot())

    async def hello_world(self, participant_id: str) -> TaskResult:
        async with self.store.transaction() as state:
            participant = self.gate.admit(state, participant_id, 1)
            self._complete(state, participant, 1)
        return TaskResult(True, "🎉 Task 1 complete! You made your first GET request!")

    async def authenticated_get(self, participant_id: str, authorization: Optional[str]) -> TaskResult:
        async with self.store.transaction() as state:
            participant = self.gate.admit(state, participant_id, 2)
            self.gate.require_basic_auth(
                authorization, "Unauthorized. Use Basic Auth with the correct credentials."
            )
            self._complete(state, participant, 2)
        return TaskResult(True, "🔐 Task 2 complete! You mastered Basic Auth!")

    async def authenticated_post(
        self,
        participant_id: str,
        authorization: Optional[str],
        payload: Dict[str, Any],
    ) -> TaskResult:
        async with self.store.transaction() as state:
            participant = self.gate.admit(state, participant_id, 3)
            self.gate.require_basic_auth(authorization, "Unauthorized. Use Basic Auth.")
            body = validate_payload(
                MessageValidator, payload, 'Include a "message" field in your JSON body.'
            )
            self._complete(state, participant, 3)
        return TaskResult(True, f'💬 Task 3 complete! You said: "{body.message}"')

    async def speed_round(self, participant_id: str) -> TaskResult:
        async with self.store.transaction() as state:
            participant = self.gate.admit(state, participant_id, 4)
            if participant.has_completed(4):
                return TaskResult(
                    True,
                    "You already completed this task!",
                    {"postCount": participant.post_count},
                )

            participant.post_count += 1
            count = participant.post_count
            if count >= SPEED_TARGET:
                self._complete(state, participant, 4)
                return TaskResult(
                    True,
                    f"⚡ Task 4 complete! You sent {count} requests!",
                    {"postCount": count},
                )

            self.notifier.publish(state.to_snapshot())
        return TaskResult(
            False,
            f"POST {count}/{SPEED_TARGET} received. Keep going!",
            {"postCount": count},
        )

    async def issue_key(self, participant_id: str) -> TaskResult:
        async with self.store.transaction() as state:
            participant = self.gate.admit(state, participant_id, 5)
            participant.secret_key = secrets.token_hex(SECRET_KEY_BYTES)
            key = participant.secret_key
            self.notifier.publish(state.to_snapshot())
        return TaskResult(
            True,
            "Now POST this key back to /api/player/{your-id}/task5",
            {"key": key},
        )

    async def verify_key(self, participant_id: str, payload: Dict[str, Any]) -> TaskResult:
        async with self.store.transaction() as state:
            participant = self.gate.admit(state, participant_id, 5)
            if not participant.secret_key:
                raise PreconditionFailedError(
                    "You need to GET your secret key first at /api/player/{id}/task5/key",
                    error_code="key_not_issued",
                )
            body = validate_payload(SecretKeyValidator, payload, WRONG_KEY_MESSAGE)
            if body.key != participant.secret_key:
                raise ValidationFailedError(WRONG_KEY_MESSAGE, error_code="wrong_key")
            self._complete(state, participant, 5)
        return TaskResult(True, "🗝️ Task 5 complete! You chained GET → POST perfectly!")

    async def upload_image(self, participant_id: str, payload: Dict[str, Any]) -> TaskResult:
        async with self.store.transaction() as state:
            participant = self.gate.admit(state, participant_id, 6)
            validate_payload(ImageValidator, payload)
            self._complete(state, participant, 6)
        return TaskResult(True, "🖼️ Task 6 complete! Image received! You are an API Quest master!")
