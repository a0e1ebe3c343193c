"""Admission checks shared by every task endpoint."""

import logging
from typing import Optional

from core.exceptions import NotRegisteredError, TaskNotActiveError, UnauthorizedError
from tracker.domain.participant import Participant
from tracker.domain.session import GameState
from tracker.domain.task import TASK_AUTH_PASSWORD, TASK_AUTH_USER
from tracker.utils.auth import check_basic_auth

logger = logging.getLogger(__name__)


class TaskGate:
    """Decides whether a task request may reach the progress rules.

    Checks run in a fixed order: participant identity, then whether the
    endpoint's task is the active one. Credential checks are separate and run
    after both.
    """

    def __init__(self, auth_user: str = TASK_AUTH_USER, auth_password: str = TASK_AUTH_PASSWORD):
        self.auth_user = auth_user
        self.auth_password = auth_password

    def admit(self, state: GameState, participant_id: str, task_id: int) -> Participant:
        participant = state.get_participant(participant_id)
        if participant is None:
            raise NotRegisteredError(
                "Player not registered. Register first via POST /api/register",
                error_code="not_registered",
            )
        if state.current_task != task_id:
            logger.debug(f"Task {task_id} requested by {participant_id} while task {state.current_task} is active")
            raise TaskNotActiveError("This task is not active right now", error_code="task_not_active")
        return participant

    def require_basic_auth(self, authorization: Optional[str], message: str) -> None:
        if not check_basic_auth(authorization, self.auth_user, self.auth_password):
            raise UnauthorizedError(message, error_code="unauthorized")
