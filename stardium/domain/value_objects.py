"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import datetime
from typing import Self
from uuid import UUID, uuid4

DATE_TIME_FORMAT = "%Y-%m-%d %H:%M"
TIME_FORMAT = "%H:%M"


@dataclass(frozen=True)
class PlayerId:
    """Unique identifier for a Player."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RoomId:
    """Unique identifier for a Room."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Address:
    """Free-text location of a room."""

    city: str
    section: str
    detail: str

    def __post_init__(self) -> None:
        for name in ("city", "section", "detail"):
            value = getattr(self, name)
            if value is None or not str(value).strip():
                raise ValueError(f"Address {name} is required")

    def __str__(self) -> str:
        return f"{self.city} {self.section} {self.detail}"


@dataclass(frozen=True)
class PlayTime:
    """Time window of a room. The end must be strictly after the start."""

    starts_at: datetime
    ends_at: datetime

    def __post_init__(self) -> None:
        if self.ends_at <= self.starts_at:
            raise ValueError("Play time must end after it starts")

    def __str__(self) -> str:
        start = self.starts_at.strftime(DATE_TIME_FORMAT)
        if self.ends_at.date() == self.starts_at.date():
            return f"{start} - {self.ends_at.strftime(TIME_FORMAT)}"
        return f"{start} - {self.ends_at.strftime(DATE_TIME_FORMAT)}"


@dataclass(frozen=True)
class PlayersLimit:
    """Positive capacity of a room, the master included."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Players limit must be an integer")
        if self.value < 1:
            raise ValueError("Players limit must be positive")
