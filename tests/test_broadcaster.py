"""Tests for the SSE broadcast hub."""

import asyncio
import json

import pytest

from tracker.adapters.sse_broadcaster import KEEPALIVE_FRAME, QueueSubscription, SseBroadcaster, format_event


def decode(frame: str) -> dict:
    assert frame.startswith("data: ")
    assert frame.endswith("\n\n")
    return json.loads(frame[len("data: "):])


async def take(stream, count: int):
    frames = []
    async for frame in stream:
        frames.append(frame)
        if len(frames) == count:
            break
    return frames


class TestSseBroadcaster:
    """Tests for SseBroadcaster."""

    def test_format_event(self):
        assert format_event({"currentTask": 2}) == 'data: {"currentTask": 2}\n\n'

    @pytest.mark.asyncio
    async def test_subscriber_primed_with_snapshot(self):
        """Test a new observer receives the current state first."""
        hub = SseBroadcaster()
        subscription = hub.subscribe({"currentTask": 1})
        hub.publish({"currentTask": 2})

        frames = await take(subscription.stream(keepalive_seconds=1), 2)
        assert [decode(f)["currentTask"] for f in frames] == [1, 2]

    @pytest.mark.asyncio
    async def test_publish_reaches_every_subscriber(self):
        hub = SseBroadcaster()
        first = hub.subscribe({"currentTask": 1})
        second = hub.subscribe({"currentTask": 1})
        assert hub.publish({"currentTask": 3}) == 2
        assert first.pending == 2
        assert second.pending == 2

    @pytest.mark.asyncio
    async def test_unsubscribe_isolated(self):
        """Test a disconnect does not affect other observers."""
        hub = SseBroadcaster()
        leaving = hub.subscribe({"currentTask": 1})
        staying = hub.subscribe({"currentTask": 1})
        hub.unsubscribe(leaving)
        hub.unsubscribe(leaving)

        assert hub.subscriber_count == 1
        assert hub.publish({"currentTask": 4}) == 1
        assert leaving.closed is True
        assert staying.pending == 2

    @pytest.mark.asyncio
    async def test_slow_subscriber_keeps_latest(self):
        """Test a full queue drops stale frames instead of blocking."""
        hub = SseBroadcaster(queue_size=2)
        subscription = hub.subscribe({"currentTask": 1})
        for task in (2, 3, 4, 5):
            hub.publish({"currentTask": task})

        assert subscription.pending == 2
        frames = await take(subscription.stream(keepalive_seconds=1), 2)
        assert [decode(f)["currentTask"] for f in frames] == [4, 5]

    @pytest.mark.asyncio
    async def test_failing_subscriber_is_dropped(self):
        class BrokenSubscription(QueueSubscription):
            def push(self, message: str) -> None:
                raise RuntimeError("socket gone")

        hub = SseBroadcaster()
        healthy = hub.subscribe({"currentTask": 1})
        hub._subscriptions.append(BrokenSubscription())

        assert hub.publish({"currentTask": 2}) == 1
        assert hub.subscriber_count == 1
        assert healthy.pending == 2

    @pytest.mark.asyncio
    async def test_keepalive_and_close(self):
        hub = SseBroadcaster()
        subscription = hub.subscribe({"currentTask": 1})
        stream = subscription.stream(keepalive_seconds=0.01)

        assert decode(await stream.__anext__())["currentTask"] == 1
        assert await stream.__anext__() == KEEPALIVE_FRAME

        await hub.close()
        assert hub.subscriber_count == 0
        with pytest.raises(StopAsyncIteration):
            await asyncio.wait_for(stream.__anext__(), timeout=1)

    @pytest.mark.asyncio
    async def test_frame_after_keepalive_is_delivered(self):
        """Test keep-alive timeouts never swallow a queued snapshot."""
        hub = SseBroadcaster()
        subscription = hub.subscribe({"currentTask": 1})
        stream = subscription.stream(keepalive_seconds=0.01)

        assert decode(await stream.__anext__())["currentTask"] == 1
        assert await stream.__anext__() == KEEPALIVE_FRAME
        assert await stream.__anext__() == KEEPALIVE_FRAME

        hub.publish({"currentTask": 2})
        frame = await asyncio.wait_for(stream.__anext__(), timeout=1)
        while frame == KEEPALIVE_FRAME:
            frame = await asyncio.wait_for(stream.__anext__(), timeout=1)
        assert decode(frame)["currentTask"] == 2
        assert subscription.pending == 0
        await stream.aclose()
