"""Use case for resetting all progress."""

from tracker.ports.notifier import Notifier
from tracker.ports.state_store import StateStore
from tracker.utils.audit import audit_log


class ResetProgressUseCase:
    """Use case for clearing every participant's progress."""

    def __init__(self, store: StateStore, notifier: Notifier):
        self.store = store
        self.notifier = notifier

    async def execute(self) -> int:
        """Reset progress and scratch state. Returns number of participants kept."""
        async with self.store.transaction() as state:
            state.reset()
            participant_count = len(state.participants)
            current_task = state.current_task
            self.notifier.publish(state.to_snapshot())

        # Note: participants themselves are preserved
        audit_log("reset", current_task, extra={"participants": participant_count})
        return participant_count
