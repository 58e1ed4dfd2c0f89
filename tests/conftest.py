"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from match_sessions.config import Settings
from match_sessions.containers import AppContainer, build_services
from match_sessions.domain.models import Snapshot
from match_sessions.services.attendances import AttendanceService
from match_sessions.services.queries import QueryService
from match_sessions.services.sessions import SessionService
from match_sessions.services.store import Store, StoreTransaction


@dataclass
class InMemoryStore(Store):
    """In-memory store for tests."""

    snapshot: Snapshot = field(default_factory=Snapshot)
    saves: int = 0

    def load_all(self) -> Snapshot:
        return self.snapshot.copy()

    def save_all(self, snapshot: Snapshot) -> None:
        self.snapshot = snapshot.copy()
        self.saves += 1


def public_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "title": "Sunday doubles",
        "description": "Friendly games at the park courts",
        "date": "2026-11-01",
        "time": "10:00",
        "maxParticipants": 4,
        "sessionType": "public",
    }
    payload.update(overrides)
    return payload


def private_payload(**overrides: object) -> dict[str, object]:
    return public_payload(title="Club ladder", sessionType="private", **overrides)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def transaction(store: InMemoryStore) -> StoreTransaction:
    return StoreTransaction(store)


@pytest.fixture
def session_service(transaction: StoreTransaction) -> SessionService:
    return SessionService(transaction)


@pytest.fixture
def attendance_service(transaction: StoreTransaction) -> AttendanceService:
    return AttendanceService(transaction)


@pytest.fixture
def query_service(transaction: StoreTransaction) -> QueryService:
    return QueryService(transaction)


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="json", data_file="unused.json")


@pytest.fixture
def container(settings: Settings, store: InMemoryStore) -> AppContainer:
    return build_services(settings, store)
