"""Room membership service - all room business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

A room's member list and each member's joined-room set are only changed
together, inside one ``atomic()`` block of the room store.
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime

from stardium.domain import (
    Address,
    Player,
    PlayersLimit,
    PlayTime,
    Room,
    RoomId,
)
from stardium.domain.errors import (
    ForbiddenError,
    InvalidRoomIdError,
    PlayerNotFoundError,
    RoomFullError,
    RoomNotFoundError,
    ValidationFailedError,
)
from stardium.stores.interfaces import PlayerStore, RoomStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoomRequest:
    """Input for creating or updating a room."""

    title: str
    intro: str
    city: str
    section: str
    detail: str
    starts_at: datetime
    ends_at: datetime
    players_limit: int


def parse_room_id(room_id: str | RoomId) -> RoomId:
    if isinstance(room_id, RoomId):
        return room_id
    try:
        return RoomId.from_string(str(room_id))
    except ValueError:
        raise InvalidRoomIdError()


class RoomService:
    """Service for creating rooms and managing their members."""

    def __init__(
        self,
        room_store: RoomStore,
        player_store: PlayerStore,
        enforce_capacity_on_join: bool = False,
    ) -> None:
        self._rooms = room_store
        self._players = player_store
        self._enforce_capacity_on_join = enforce_capacity_on_join

    def create(self, request: RoomRequest, actor: Player) -> Room:
        """Create a room mastered by the actor, who becomes its first member.

        Raises:
            ValidationFailedError: If the request breaks a room rule.
            PlayerNotFoundError: If the actor is not registered.
        """
        fields = self._validated_fields(request)
        with self._rooms.atomic():
            master = self._player_by_email(actor.email)
            room = Room(
                id=RoomId.generate(),
                master_id=master.id,
                member_ids=(master.id,),
                **fields,
            )
            room = self._rooms.save_room(room)
            self._players.add_room(master.id, room.id)
        logger.info("Player %s created room %s", master.id, room.id)
        return room

    def update(self, room_id: str | RoomId, request: RoomRequest, actor: Player) -> RoomId:
        """Replace a room's editable fields. Master and members are kept.

        Raises:
            InvalidRoomIdError: If the room_id is not a valid UUID.
            RoomNotFoundError: If the room does not exist.
            ForbiddenError: If the actor is not the room master.
            ValidationFailedError: If the request breaks a room rule.
        """
        parsed = parse_room_id(room_id)
        fields = self._validated_fields(request)
        with self._rooms.atomic():
            room = self._room(parsed, for_update=True)
            self._check_master(room, actor)
            if fields["players_limit"].value < room.player_count:
                raise ValidationFailedError(
                    "players_limit", "Players limit is below the current member count"
                )
            room = self._rooms.save_room(replace(room, **fields))
        logger.info("Player %s updated room %s", actor.id, room.id)
        return room.id

    def delete(self, room_id: str | RoomId, actor: Player) -> None:
        """Remove a room and drop it from every member's joined-room set.

        Raises:
            InvalidRoomIdError: If the room_id is not a valid UUID.
            RoomNotFoundError: If the room does not exist.
            ForbiddenError: If the actor is not the room master.
        """
        parsed = parse_room_id(room_id)
        with self._rooms.atomic():
            room = self._room(parsed, for_update=True)
            self._check_master(room, actor)
            for member_id in room.member_ids:
                self._players.remove_room(member_id, room.id)
            self._rooms.delete_room(room.id)
        logger.info("Player %s deleted room %s", actor.id, room.id)

    def join(self, player_email: str, room_id: str | RoomId) -> Room:
        """Add a player to a room. Joining twice changes nothing.

        Raises:
            PlayerNotFoundError: If no player uses the email.
            InvalidRoomIdError: If the room_id is not a valid UUID.
            RoomNotFoundError: If the room does not exist.
            RoomFullError: If capacity is enforced and the room is full.
        """
        parsed = parse_room_id(room_id)
        with self._rooms.atomic():
            player = self._player_by_email(player_email)
            room = self._room(parsed, for_update=True)
            if room.has_member(player.id):
                return room
            if self._enforce_capacity_on_join and room.is_full:
                logger.warning("Player %s refused from full room %s", player.id, room.id)
                raise RoomFullError(str(room.id))
            room = self._rooms.save_room(room.with_member(player.id))
            self._players.add_room(player.id, room.id)
        logger.info("Player %s joined room %s", player.id, room.id)
        return room

    def quit(self, player_email: str, room_id: str | RoomId) -> Room:
        """Remove a player from a room. Quitting a room never joined changes nothing.

        Raises:
            PlayerNotFoundError: If no player uses the email.
            InvalidRoomIdError: If the room_id is not a valid UUID.
            RoomNotFoundError: If the room does not exist.
            ForbiddenError: If the player is the room master.
        """
        parsed = parse_room_id(room_id)
        with self._rooms.atomic():
            player = self._player_by_email(player_email)
            room = self._room(parsed, for_update=True)
            if room.master_id == player.id:
                raise ForbiddenError("The room master cannot quit the room")
            if not room.has_member(player.id) and room.id not in player.room_ids:
                return room
            room = self._rooms.save_room(room.without_member(player.id))
            self._players.remove_room(player.id, room.id)
        logger.info("Player %s quit room %s", player.id, room.id)
        return room

    def find_room(self, room_id: str | RoomId) -> Room:
        """Return a room by ID.

        Raises:
            InvalidRoomIdError: If the room_id is not a valid UUID.
            RoomNotFoundError: If the room does not exist.
        """
        return self._room(parse_room_id(room_id))

    def find_all_rooms(self) -> list[Room]:
        """Return every room, expired and full ones included."""
        return self._rooms.list_rooms()

    def _room(self, room_id: RoomId, for_update: bool = False) -> Room:
        room = self._rooms.get_room(room_id, for_update=for_update)
        if room is None:
            raise RoomNotFoundError(str(room_id))
        return room

    def _player_by_email(self, email: str) -> Player:
        player = self._players.get_player_by_email(email)
        if player is None:
            raise PlayerNotFoundError(email)
        return player

    def _check_master(self, room: Room, actor: Player) -> None:
        if room.master_id != actor.id:
            logger.warning("Player %s is not the master of room %s", actor.id, room.id)
            raise ForbiddenError()

    @staticmethod
    def _validated_fields(request: RoomRequest) -> dict:
        if not request.title or not request.title.strip():
            raise ValidationFailedError("title", "title is required")
        try:
            address = Address(city=request.city, section=request.section, detail=request.detail)
        except ValueError as exc:
            raise ValidationFailedError("address", str(exc)) from exc
        try:
            play_time = PlayTime(starts_at=request.starts_at, ends_at=request.ends_at)
        except ValueError as exc:
            raise ValidationFailedError("play_time", str(exc)) from exc
        try:
            players_limit = PlayersLimit(request.players_limit)
        except ValueError as exc:
            raise ValidationFailedError("players_limit", str(exc)) from exc
        return {
            "title": request.title.strip(),
            "intro": request.intro or "",
            "address": address,
            "play_time": play_time,
            "players_limit": players_limit,
        }
