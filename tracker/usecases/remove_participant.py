"""Use case for removing a participant."""

from core.exceptions import NotFoundError
from tracker.ports.notifier import Notifier
from tracker.ports.state_store import StateStore
from tracker.utils.audit import audit_log


class RemoveParticipantUseCase:
    """Use case for kicking a participant out of the competition."""

    def __init__(self, store: StateStore, notifier: Notifier):
        self.store = store
        self.notifier = notifier

    async def execute(self, participant_id: str) -> None:
        async with self.store.transaction() as state:
            if not state.remove_participant(participant_id):
                raise NotFoundError("Player not found", error_code="participant_not_found")
            current_task = state.current_task
            self.notifier.publish(state.to_snapshot())

        audit_log("remove_participant", current_task, participant_id=participant_id)
