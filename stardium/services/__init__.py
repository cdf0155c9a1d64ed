"""Service wiring for the Django stores."""

from django.conf import settings

from stardium.services.player_service import PlayerRequest, PlayerService
from stardium.services.room_catalog import RoomCatalog
from stardium.services.room_service import RoomRequest, RoomService
from stardium.stores.django_store import DjangoPlayerStore, DjangoRoomStore

__all__ = [
    "PlayerRequest",
    "PlayerService",
    "RoomCatalog",
    "RoomRequest",
    "RoomService",
    "build_player_service",
    "build_room_service",
    "build_room_catalog",
]


def build_player_service() -> PlayerService:
    return PlayerService(DjangoPlayerStore())


def build_room_service() -> RoomService:
    return RoomService(
        DjangoRoomStore(),
        DjangoPlayerStore(),
        enforce_capacity_on_join=settings.STARDIUM_ENFORCE_CAPACITY_ON_JOIN,
    )


def build_room_catalog() -> RoomCatalog:
    return RoomCatalog(DjangoRoomStore(), DjangoPlayerStore())
