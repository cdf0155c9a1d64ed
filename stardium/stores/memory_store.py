"""In-memory implementation of the PlayerStore and RoomStore.

Used by unit tests and local tooling. Nothing here cascades: a deleted room
stays referenced by players until the service removes it from their sets.
"""

import threading
from contextlib import AbstractContextManager
from dataclasses import replace

from stardium.domain import Player, PlayerId, Room, RoomId
from stardium.domain.errors import EmailAlreadyRegisteredError
from stardium.stores.interfaces import PlayerStore, RoomStore


class InMemoryStore(PlayerStore, RoomStore):
    """Dict-backed player and room store sharing one re-entrant lock."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._players: dict[PlayerId, Player] = {}
        self._rooms: dict[RoomId, Room] = {}

    def atomic(self) -> AbstractContextManager:
        return self._lock

    def get_player(self, player_id: PlayerId) -> Player | None:
        return self._players.get(player_id)

    def get_player_by_email(self, email: str) -> Player | None:
        for player in self._players.values():
            if player.email == email:
                return player
        return None

    def email_exists(self, email: str) -> bool:
        return self.get_player_by_email(email) is not None

    def save_player(self, player: Player) -> Player:
        with self._lock:
            for other in self._players.values():
                if other.email == player.email and other.id != player.id:
                    raise EmailAlreadyRegisteredError()
            stored = self._players.get(player.id)
            room_ids = stored.room_ids if stored else frozenset()
            player = replace(player, room_ids=room_ids)
            self._players[player.id] = player
        return player

    def add_room(self, player_id: PlayerId, room_id: RoomId) -> None:
        with self._lock:
            player = self._players[player_id]
            self._players[player_id] = player.with_room(room_id)

    def remove_room(self, player_id: PlayerId, room_id: RoomId) -> None:
        with self._lock:
            player = self._players.get(player_id)
            if player is not None:
                self._players[player_id] = player.without_room(room_id)

    def list_rooms(self) -> list[Room]:
        return list(self._rooms.values())

    def list_rooms_for_member(self, email: str) -> list[Room]:
        player = self.get_player_by_email(email)
        if player is None:
            return []
        return [room for room in self._rooms.values() if room.has_member(player.id)]

    def get_room(self, room_id: RoomId, *, for_update: bool = False) -> Room | None:
        return self._rooms.get(room_id)

    def save_room(self, room: Room) -> Room:
        with self._lock:
            self._rooms[room.id] = room
        return room

    def delete_room(self, room_id: RoomId) -> None:
        with self._lock:
            self._rooms.pop(room_id, None)
