"""Player directory service: registration, authentication and lookup."""

import logging
from dataclasses import dataclass, replace

from django.contrib.auth.hashers import check_password, make_password

from stardium.domain import Player, PlayerId
from stardium.domain.errors import (
    AuthenticationFailedError,
    EmailAlreadyRegisteredError,
    PlayerNotFoundError,
    ValidationFailedError,
)
from stardium.stores.interfaces import PlayerStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerRequest:
    """Registration input."""

    email: str
    nickname: str
    password: str
    status_message: str = ""
    profile: str | None = None


def _require(field: str, value: str | None) -> str:
    if value is None or not value.strip():
        raise ValidationFailedError(field, f"{field} is required")
    return value.strip()


class PlayerService:
    """Service for player identity and credentials."""

    def __init__(self, store: PlayerStore) -> None:
        self._store = store

    def register(self, request: PlayerRequest) -> Player:
        """Create a player with a hashed password.

        Raises:
            ValidationFailedError: If email, nickname or password is blank.
            EmailAlreadyRegisteredError: If the email is taken.
        """
        email = _require("email", request.email)
        nickname = _require("nickname", request.nickname)
        if not request.password:
            raise ValidationFailedError("password", "password is required")
        if self._store.email_exists(email):
            raise EmailAlreadyRegisteredError()

        player = Player(
            id=PlayerId.generate(),
            email=email,
            nickname=nickname,
            password_hash=make_password(request.password),
            status_message=request.status_message or "",
            profile=request.profile,
        )
        player = self._store.save_player(player)
        logger.info("Registered player %s", player.id)
        return player

    def authenticate(self, email: str, password: str) -> Player:
        """Return the player owning these credentials.

        Raises:
            AuthenticationFailedError: If the email is unknown or the password is wrong.
        """
        player = self._store.get_player_by_email(email)
        if player is None or not check_password(password, player.password_hash):
            logger.warning("Failed login attempt")
            raise AuthenticationFailedError()
        return player

    def find_by_email(self, email: str) -> Player:
        """Return the player registered under an email.

        Raises:
            PlayerNotFoundError: If no player uses the email.
        """
        player = self._store.get_player_by_email(email)
        if player is None:
            raise PlayerNotFoundError(email)
        return player

    def update_profile(
        self,
        actor: Player,
        nickname: str | None = None,
        status_message: str | None = None,
        profile: str | None = None,
    ) -> Player:
        """Edit the acting player's own profile fields. None leaves a field as is."""
        current = self.find_by_email(actor.email)
        changes = {}
        if nickname is not None:
            changes["nickname"] = _require("nickname", nickname)
        if status_message is not None:
            changes["status_message"] = status_message
        if profile is not None:
            changes["profile"] = profile or None
        player = self._store.save_player(replace(current, **changes))
        logger.info("Updated profile of player %s", player.id)
        return player
