"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from stardium.domain import Player, PlayerId
from stardium.services.player_service import PlayerService
from stardium.services.room_catalog import RoomCatalog
from stardium.services.room_service import RoomRequest, RoomService
from stardium.stores.memory_store import InMemoryStore

NOW = datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc)


def build_room_request(
    title: str = "Friday futsal",
    starts_at: datetime | None = None,
    ends_at: datetime | None = None,
    players_limit: int = 10,
    **overrides,
) -> RoomRequest:
    starts_at = starts_at or NOW + timedelta(days=1)
    ends_at = ends_at or starts_at + timedelta(hours=3)
    fields = {
        "title": title,
        "intro": "Bring indoor shoes",
        "city": "Seoul",
        "section": "Songpa-gu",
        "detail": "In front of the Luther hall",
        "starts_at": starts_at,
        "ends_at": ends_at,
        "players_limit": players_limit,
    }
    fields.update(overrides)
    return RoomRequest(**fields)


@pytest.fixture
def room_request():
    return build_room_request


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def clock():
    """Mutable fixed clock. Assign ``clock.now`` to move time."""

    class FixedClock:
        now = NOW

        def __call__(self) -> datetime:
            return self.now

    return FixedClock()


@pytest.fixture
def room_service(store: InMemoryStore) -> RoomService:
    return RoomService(store, store)


@pytest.fixture
def catalog(store: InMemoryStore, clock) -> RoomCatalog:
    return RoomCatalog(store, store, clock=clock)


@pytest.fixture
def player_service(store: InMemoryStore) -> PlayerService:
    return PlayerService(store)


@pytest.fixture
def make_player(store: InMemoryStore):
    def _make(email: str, nickname: str | None = None) -> Player:
        player = Player(
            id=PlayerId.generate(),
            email=email,
            nickname=nickname or email.split("@")[0],
            password_hash="unused",
        )
        return store.save_player(player)

    return _make


@pytest.fixture
def master(make_player) -> Player:
    return make_player("master@stardium.io", "master")


@pytest.fixture
def player(make_player) -> Player:
    return make_player("player@stardium.io", "player")
