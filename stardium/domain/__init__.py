from stardium.domain.models import (
    MemberSummary,
    Player,
    Room,
    RoomDetail,
    RoomSummary,
)
from stardium.domain.value_objects import Address, PlayerId, PlayersLimit, PlayTime, RoomId

__all__ = [
    "Player",
    "Room",
    "MemberSummary",
    "RoomSummary",
    "RoomDetail",
    "PlayerId",
    "RoomId",
    "Address",
    "PlayTime",
    "PlayersLimit",
]
