from collections.abc import Iterator
from pathlib import Path

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

from tests.helpers.fakes import RecordingTicketRepository
from ticketing.api.dependencies import get_ticket_store
from ticketing.core.config import get_settings
from ticketing.main import app
from ticketing.services.ticket_store import TicketStore

load_dotenv(Path(__file__).resolve().parents[1] / ".env")


@pytest.fixture(autouse=True)
def memory_backend(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def repository() -> RecordingTicketRepository:
    return RecordingTicketRepository()


@pytest.fixture
def store(repository: RecordingTicketRepository) -> TicketStore:
    return TicketStore(repository=repository)


@pytest.fixture
def client(store: TicketStore) -> Iterator[TestClient]:
    app.dependency_overrides[get_ticket_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
