"""Server-sent events adapter for the notifier."""

import asyncio
import json
import logging
from typing import Any, AsyncIterator, Dict, List

from tracker.ports.notifier import Notifier, Subscription

logger = logging.getLogger(__name__)

KEEPALIVE_FRAME = ": ping\n\n"
_CLOSED = object()


def format_event(snapshot: Dict[str, Any]) -> str:
    """Frame a snapshot as a single SSE ``data:`` message."""
    return f"data: {json.dumps(snapshot, ensure_ascii=False)}\n\n"


class QueueSubscription(Subscription):
    """Bounded queue per observer; when full the oldest frame is dropped."""

    def __init__(self, maxsize: int = 8):
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def _put(self, item: Any) -> None:
        try:
            self._queue.put_nowait(item)
        except asyncio.QueueFull:
            # Only the latest state matters
            try:
                self._queue.get_nowait()
            except asyncio.QueueEmpty:
                pass
            self._queue.put_nowait(item)

    def push(self, message: str) -> None:
        if self._closed:
            return
        self._put(message)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._put(_CLOSED)

    async def stream(self, keepalive_seconds: float) -> AsyncIterator[str]:
        # The pending get survives keep-alive timeouts, so no frame is lost
        getter = None
        try:
            while True:
                if getter is None:
                    getter = asyncio.ensure_future(self._queue.get())
                done, _ = await asyncio.wait({getter}, timeout=keepalive_seconds)
                if not done:
                    if self._closed:
                        return
                    yield KEEPALIVE_FRAME
                    continue
                item = getter.result()
                getter = None
                if item is _CLOSED:
                    return
                yield item
        finally:
            if getter is not None:
                getter.cancel()


class SseBroadcaster(Notifier):
    """Fans each snapshot out to every connected dashboard."""

    def __init__(self, queue_size: int = 8):
        self.queue_size = queue_size
        self._subscriptions: List[QueueSubscription] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, initial_snapshot: Dict[str, Any]) -> QueueSubscription:
        subscription = QueueSubscription(maxsize=self.queue_size)
        subscription.push(format_event(initial_snapshot))
        self._subscriptions.append(subscription)
        logger.info(f"Observer connected ({self.subscriber_count} total)")
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        subscription.close()
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
            logger.info(f"Observer disconnected ({self.subscriber_count} left)")

    def publish(self, snapshot: Dict[str, Any]) -> int:
        message = format_event(snapshot)
        delivered = 0
        for subscription in list(self._subscriptions):
            try:
                subscription.push(message)
                delivered += 1
            except Exception as e:  # noqa: BLE001
                logger.debug(f"Dropping observer after push failure: {e!r}")
                self.unsubscribe(subscription)
        return delivered

    async def close(self) -> None:
        for subscription in list(self._subscriptions):
            self.unsubscribe(subscription)
