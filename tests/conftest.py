"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from config import Settings
from tracker.adapters.memory_store import MemoryStateStore
from tracker.adapters.sse_broadcaster import SseBroadcaster
from tracker.domain.session import GameState
from tracker.main import create_app
from tracker.providers import DIContainer


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def state():
    return GameState()


@pytest.fixture
def container(settings, state):
    return DIContainer(
        settings=settings,
        store=MemoryStateStore(state),
        notifier=SseBroadcaster(queue_size=settings.sse_queue_size),
    )


@pytest.fixture
def client(settings, container):
    with TestClient(create_app(settings=settings, container=container)) as test_client:
        yield test_client
