"""Use case for registering a participant."""

import logging
from typing import Any, Dict

from core.validators import ParticipantNameValidator, validate_payload
from tracker.domain.participant import Participant, make_participant_id
from tracker.ports.notifier import Notifier
from tracker.ports.state_store import StateStore

logger = logging.getLogger(__name__)


class RegisterParticipantUseCase:
    """Use case for joining the competition."""

    def __init__(self, store: StateStore, notifier: Notifier):
        self.store = store
        self.notifier = notifier

    async def execute(self, payload: Dict[str, Any]) -> Participant:
        """Create a participant with a fresh unique id."""
        body = validate_payload(ParticipantNameValidator, payload, "Name is required")

        async with self.store.transaction() as state:
            participant_id = make_participant_id(body.name)
            while state.get_participant(participant_id) is not None:
                participant_id = make_participant_id(body.name)

            participant = Participant(id=participant_id, name=body.name)
            state.add_participant(participant)
            self.notifier.publish(state.to_snapshot())

        logger.info(f"Registered {participant.name!r} as {participant.id}")
        return participant
