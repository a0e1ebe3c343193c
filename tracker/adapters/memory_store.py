"""In-memory adapter for the state store."""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from tracker.domain.session import GameState
from tracker.ports.state_store import StateStore


class MemoryStateStore(StateStore):
    """Keeps the game state in process memory; nothing survives a restart."""

    def __init__(self, state: Optional[GameState] = None):
        self._state = state or GameState()
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[GameState]:
        async with self._lock:
            yield self._state

    async def snapshot(self) -> Dict[str, Any]:
        async with self._lock:
            return self._state.to_snapshot()
