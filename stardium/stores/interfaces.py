"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from stardium.domain import Player, PlayerId, Room, RoomId


class PlayerStore(ABC):
    """Interface for player persistence operations."""

    @abstractmethod
    def get_player(self, player_id: PlayerId) -> Player | None:
        """Return a player by ID, or None if not found."""
        ...

    @abstractmethod
    def get_player_by_email(self, email: str) -> Player | None:
        """Return the player registered under an email, or None."""
        ...

    @abstractmethod
    def email_exists(self, email: str) -> bool:
        """Check if an email is already registered."""
        ...

    @abstractmethod
    def save_player(self, player: Player) -> Player:
        """Insert or update a player's identity and profile fields.

        The joined-room set is left as stored; it only changes through
        ``add_room`` and ``remove_room``.

        Raises:
            EmailAlreadyRegisteredError: If another player holds the email.
        """
        ...

    @abstractmethod
    def add_room(self, player_id: PlayerId, room_id: RoomId) -> None:
        """Add one room to a player's joined-room set."""
        ...

    @abstractmethod
    def remove_room(self, player_id: PlayerId, room_id: RoomId) -> None:
        """Remove one room from a player's joined-room set. Missing rooms are ignored."""
        ...


class RoomStore(ABC):
    """Interface for room persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return a context manager spanning one transaction.

        Player and room writes made inside it are applied together.
        """
        ...

    @abstractmethod
    def list_rooms(self) -> list[Room]:
        """Return all rooms in registry order."""
        ...

    @abstractmethod
    def list_rooms_for_member(self, email: str) -> list[Room]:
        """Return rooms having the player with this email as a member, in registry order."""
        ...

    @abstractmethod
    def get_room(self, room_id: RoomId, *, for_update: bool = False) -> Room | None:
        """Return a room by ID, or None if not found.

        With ``for_update`` the room stays locked until the transaction ends.
        """
        ...

    @abstractmethod
    def save_room(self, room: Room) -> Room:
        """Insert or update a room, including its member list."""
        ...

    @abstractmethod
    def delete_room(self, room_id: RoomId) -> None:
        """Remove a room record."""
        ...
