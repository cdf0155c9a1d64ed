"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in stardium/models.py (persistence layer).

Membership is held on both sides: ``Room.member_ids`` lists the members in
join order and ``Player.room_ids`` is the player's back-reference set. Only
the services keep the two sides in agreement.
"""

from dataclasses import dataclass, replace
from datetime import datetime

from stardium.domain.value_objects import Address, PlayerId, PlayersLimit, PlayTime, RoomId


@dataclass(frozen=True)
class Player:
    """Domain representation of a Player."""

    id: PlayerId
    email: str
    nickname: str
    password_hash: str
    status_message: str = ""
    profile: str | None = None
    room_ids: frozenset[RoomId] = frozenset()

    def with_room(self, room_id: RoomId) -> "Player":
        return replace(self, room_ids=self.room_ids | {room_id})

    def without_room(self, room_id: RoomId) -> "Player":
        return replace(self, room_ids=self.room_ids - {room_id})


@dataclass(frozen=True)
class Room:
    """Domain representation of a Room."""

    id: RoomId
    title: str
    intro: str
    address: Address
    play_time: PlayTime
    players_limit: PlayersLimit
    master_id: PlayerId
    member_ids: tuple[PlayerId, ...] = ()

    @property
    def player_count(self) -> int:
        return len(self.member_ids)

    @property
    def is_full(self) -> bool:
        return self.player_count >= self.players_limit.value

    def is_expired(self, now: datetime) -> bool:
        return self.play_time.ends_at <= now

    def has_member(self, player_id: PlayerId) -> bool:
        return player_id in self.member_ids

    def with_member(self, player_id: PlayerId) -> "Room":
        if self.has_member(player_id):
            return self
        return replace(self, member_ids=self.member_ids + (player_id,))

    def without_member(self, player_id: PlayerId) -> "Room":
        return replace(
            self, member_ids=tuple(m for m in self.member_ids if m != player_id)
        )


@dataclass(frozen=True)
class MemberSummary:
    """Read-only view of a player as shown next to a room."""

    id: PlayerId
    email: str
    nickname: str

    @classmethod
    def from_player(cls, player: Player) -> "MemberSummary":
        return cls(id=player.id, email=player.email, nickname=player.nickname)


@dataclass(frozen=True)
class RoomSummary:
    """Presentation projection of a Room used by the catalog listings."""

    id: RoomId
    title: str
    intro: str
    address: str
    play_time: str
    players_limit: int
    master: MemberSummary
    player_count: int


@dataclass(frozen=True)
class RoomDetail:
    """Projection of a single Room including its members in join order."""

    summary: RoomSummary
    starts_at: datetime
    ends_at: datetime
    members: tuple[MemberSummary, ...]
