"""Read-side room queries producing presentation projections."""

from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from stardium.domain import (
    MemberSummary,
    Player,
    PlayerId,
    PlayTime,
    Room,
    RoomDetail,
    RoomId,
    RoomSummary,
)
from stardium.domain.errors import RoomNotFoundError
from stardium.services.room_service import parse_room_id
from stardium.stores.interfaces import PlayerStore, RoomStore


def _local(play_time: PlayTime) -> PlayTime:
    """Shift a play time into the current Django time zone for display."""
    starts_at, ends_at = play_time.starts_at, play_time.ends_at
    if timezone.is_aware(starts_at):
        starts_at = timezone.localtime(starts_at)
    if timezone.is_aware(ends_at):
        ends_at = timezone.localtime(ends_at)
    return PlayTime(starts_at=starts_at, ends_at=ends_at)


class RoomCatalog:
    """Lists rooms for browsing and for the rooms a player is in."""

    def __init__(
        self,
        room_store: RoomStore,
        player_store: PlayerStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._rooms = room_store
        self._players = player_store
        self._clock = clock

    def find_all_unexpired_rooms(self) -> list[RoomSummary]:
        """Return rooms still open to a new player.

        A room qualifies when it ends after now and has a free seat.
        Registry order is kept.
        """
        now = self._clock()
        return [
            self._summarize(room)
            for room in self._rooms.list_rooms()
            if not room.is_expired(now) and not room.is_full
        ]

    def find_player_joined_rooms(self, player: Player) -> list[RoomSummary]:
        """Return every room the player is in, expired or full ones included."""
        return [
            self._summarize(room) for room in self._rooms.list_rooms_for_member(player.email)
        ]

    def get_room(self, room_id: str | RoomId) -> RoomDetail:
        """Return one room with its members.

        Raises:
            InvalidRoomIdError: If the room_id is not a valid UUID.
            RoomNotFoundError: If the room does not exist.
        """
        parsed = parse_room_id(room_id)
        room = self._rooms.get_room(parsed)
        if room is None:
            raise RoomNotFoundError(str(parsed))
        return RoomDetail(
            summary=self._summarize(room),
            starts_at=room.play_time.starts_at,
            ends_at=room.play_time.ends_at,
            members=tuple(self._member(member_id) for member_id in room.member_ids),
        )

    def _summarize(self, room: Room) -> RoomSummary:
        return RoomSummary(
            id=room.id,
            title=room.title,
            intro=room.intro,
            address=str(room.address),
            play_time=str(_local(room.play_time)),
            players_limit=room.players_limit.value,
            master=self._member(room.master_id),
            player_count=room.player_count,
        )

    def _member(self, player_id: PlayerId) -> MemberSummary:
        player = self._players.get_player(player_id)
        if player is None:
            raise LookupError(f"Player {player_id} referenced by a room does not exist")
        return MemberSummary.from_player(player)
