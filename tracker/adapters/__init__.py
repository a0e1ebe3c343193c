"""Adapters (implementations) for ports."""

from tracker.adapters.memory_store import MemoryStateStore
from tracker.adapters.sse_broadcaster import SseBroadcaster

__all__ = ["MemoryStateStore", "SseBroadcaster"]
