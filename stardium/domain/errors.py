"""Domain error codes for the stardium module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    PLAYER_NOT_FOUND = "PLAYER_NOT_FOUND"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    INVALID_ROOM_ID = "INVALID_ROOM_ID"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    FORBIDDEN = "FORBIDDEN"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    EMAIL_ALREADY_REGISTERED = "EMAIL_ALREADY_REGISTERED"
    ROOM_FULL = "ROOM_FULL"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class PlayerNotFoundError(DomainError):
    """Raised when no player is registered under an email."""

    def __init__(self, email: str) -> None:
        super().__init__(
            code=ErrorCode.PLAYER_NOT_FOUND,
            message="Player not found",
        )
        object.__setattr__(self, "email", email)


class RoomNotFoundError(DomainError):
    """Raised when a room is not found."""

    def __init__(self, room_id: str) -> None:
        super().__init__(
            code=ErrorCode.ROOM_NOT_FOUND,
            message="Room not found",
        )
        object.__setattr__(self, "room_id", room_id)


class InvalidRoomIdError(DomainError):
    """Raised when a room ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ROOM_ID,
            message="Invalid room ID format",
        )


class AuthenticationFailedError(DomainError):
    """Raised when an email and password do not match a player."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.AUTHENTICATION_FAILED,
            message="Email or password is incorrect",
        )


class ForbiddenError(DomainError):
    """Raised when the acting player may not perform an operation."""

    def __init__(self, message: str = "Only the room master can do this") -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message=message)


class ValidationFailedError(DomainError):
    """Raised when input violates a domain rule."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)
        object.__setattr__(self, "field", field)


class EmailAlreadyRegisteredError(DomainError):
    """Raised when registering an email that is already taken."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMAIL_ALREADY_REGISTERED,
            message="Email is already registered",
        )


class RoomFullError(DomainError):
    """Raised when joining a room that reached its players limit."""

    def __init__(self, room_id: str) -> None:
        super().__init__(
            code=ErrorCode.ROOM_FULL,
            message="Room is full",
        )
        object.__setattr__(self, "room_id", room_id)
