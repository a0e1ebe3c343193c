"""Ports (interfaces) for dependency inversion."""

from tracker.ports.notifier import Notifier, Subscription
from tracker.ports.state_store import StateStore

__all__ = ["Notifier", "StateStore", "Subscription"]
