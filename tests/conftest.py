from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from fakes import FakeClock, SequentialIds
from message_store_api.app.core.config import Settings
from message_store_api.app.main import create_app
from message_store_api.app.services.message_store import MessageStore
from message_store_api.app.services.storage import InMemoryMessageStorage


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> MessageStore:
    return MessageStore(InMemoryMessageStorage(), id_generator=SequentialIds(), clock=clock)


@pytest.fixture
def client(store: MessageStore) -> Iterator[TestClient]:
    app = create_app(Settings(storage_backend="memory"), store=store)
    with TestClient(app) as test_client:
        yield test_client
