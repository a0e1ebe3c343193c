"""Notifier interface for pushing state snapshots to observers."""

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Dict


class Subscription(ABC):
    """Handle for one connected observer."""

    @property
    @abstractmethod
    def closed(self) -> bool:
        pass

    @abstractmethod
    def push(self, message: str) -> None:
        """Queue a framed message without blocking."""
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    @abstractmethod
    def stream(self, keepalive_seconds: float) -> AsyncIterator[str]:
        """Yield framed messages until the subscription is closed."""
        pass


class Notifier(ABC):
    """Interface for fan-out of state snapshots."""

    @abstractmethod
    def subscribe(self, initial_snapshot: Dict[str, Any]) -> Subscription:
        """Register an observer, primed with ``initial_snapshot``."""
        pass

    @abstractmethod
    def unsubscribe(self, subscription: Subscription) -> None:
        pass

    @abstractmethod
    def publish(self, snapshot: Dict[str, Any]) -> int:
        """Push ``snapshot`` to every observer. Returns the number reached."""
        pass

    @property
    @abstractmethod
    def subscriber_count(self) -> int:
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close every subscription."""
        pass
