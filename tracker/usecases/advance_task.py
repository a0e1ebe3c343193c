"""Use case for switching the active task."""

from typing import Any, Dict

from core.exceptions import InvalidInputError
from core.validators import TOTAL_TASKS, TaskNumberValidator, validate_payload
from tracker.ports.notifier import Notifier
from tracker.ports.state_store import StateStore
from tracker.utils.audit import audit_log


class AdvanceTaskUseCase:
    """Use case for activating a task; clears scratch state of tasks 4 and 5."""

    def __init__(self, store: StateStore, notifier: Notifier):
        self.store = store
        self.notifier = notifier

    async def execute(self, payload: Dict[str, Any]) -> int:
        """Activate the requested task. Returns the new active task id."""
        body = validate_payload(
            TaskNumberValidator,
            payload,
            f"Task must be 1-{TOTAL_TASKS}",
            error_cls=InvalidInputError,
        )

        async with self.store.transaction() as state:
            previous = state.current_task
            state.activate_task(body.task)
            self.notifier.publish(state.to_snapshot())

        audit_log("set_task", body.task, extra={"previous": previous})
        return body.task
