"""State store interface."""

from abc import ABC, abstractmethod
from typing import Any, AsyncContextManager, Dict

from tracker.domain.session import GameState


class StateStore(ABC):
    """Interface for the owner of the game state."""

    @abstractmethod
    def transaction(self) -> AsyncContextManager[GameState]:
        """Exclusive access to the state for the duration of the block."""
        pass

    @abstractmethod
    async def snapshot(self) -> Dict[str, Any]:
        """Consistent read-only snapshot of the state."""
        pass
