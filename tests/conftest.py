from __future__ import annotations

import datetime as dt
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from socialgraph.api import dependencies
from socialgraph.api.main import app
from socialgraph.core.service import SocialService
from socialgraph.core.store import RelationStore


class TickingClock:
    """Returns a strictly increasing timestamp on every call."""

    def __init__(self, start: dt.datetime | None = None, step_seconds: int = 1) -> None:
        self.current = start or dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc)
        self.step = dt.timedelta(seconds=step_seconds)

    def __call__(self) -> dt.datetime:
        self.current += self.step
        return self.current


@pytest.fixture()
def store() -> RelationStore:
    return RelationStore()


@pytest.fixture()
def service(store: RelationStore) -> SocialService:
    return SocialService(store, clock=TickingClock())


@pytest.fixture()
def client(service: SocialService) -> Iterator[TestClient]:
    app.dependency_overrides[dependencies.get_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
