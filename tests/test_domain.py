"""Unit tests for domain primitives and models.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from stardium.domain import Address, PlayerId, PlayersLimit, PlayTime, Room, RoomId

START = datetime(2026, 5, 2, 18, 30, tzinfo=timezone.utc)


def make_room(limit: int = 2, members: int = 1) -> Room:
    member_ids = tuple(PlayerId.generate() for _ in range(members))
    return Room(
        id=RoomId.generate(),
        title="title",
        intro="intro",
        address=Address("Seoul", "Songpa-gu", "Luther hall"),
        play_time=PlayTime(START, START + timedelta(hours=2)),
        players_limit=PlayersLimit(limit),
        master_id=member_ids[0],
        member_ids=member_ids,
    )


class TestPlayersLimit:
    """Tests for PlayersLimit value object."""

    def test_accepts_positive_value(self):
        """PlayersLimit can be created with a positive value."""
        assert PlayersLimit(4).value == 4

    def test_rejects_zero(self):
        """PlayersLimit rejects zero."""
        with pytest.raises(ValueError):
            PlayersLimit(0)

    def test_rejects_negative_value(self):
        """PlayersLimit rejects a negative value."""
        with pytest.raises(ValueError):
            PlayersLimit(-3)

    def test_rejects_non_integer(self):
        """PlayersLimit rejects values that are not integers."""
        with pytest.raises(ValueError):
            PlayersLimit("4")


class TestPlayTime:
    """Tests for PlayTime value object."""

    def test_rejects_end_before_start(self):
        """PlayTime rejects an end before the start."""
        with pytest.raises(ValueError):
            PlayTime(START, START - timedelta(minutes=1))

    def test_rejects_empty_window(self):
        """PlayTime rejects an end equal to the start."""
        with pytest.raises(ValueError):
            PlayTime(START, START)

    def test_str_same_day(self):
        """Given both ends on one day, prints the date once."""
        play_time = PlayTime(START, START + timedelta(hours=3))
        assert str(play_time) == "2026-05-02 18:30 - 21:30"

    def test_str_across_midnight(self):
        """Given ends on different days, prints both dates."""
        play_time = PlayTime(START, START + timedelta(hours=7))
        assert str(play_time) == "2026-05-02 18:30 - 2026-05-03 01:30"


class TestAddress:
    """Tests for Address value object."""

    def test_str_joins_parts(self):
        """Address prints its parts separated by spaces."""
        assert str(Address("Seoul", "Songpa-gu", "Luther hall")) == "Seoul Songpa-gu Luther hall"

    @pytest.mark.parametrize("city,section,detail", [
        ("", "Songpa-gu", "Luther hall"),
        ("Seoul", "   ", "Luther hall"),
        ("Seoul", "Songpa-gu", None),
    ])
    def test_rejects_missing_part(self, city, section, detail):
        """Address rejects a blank part."""
        with pytest.raises(ValueError):
            Address(city, section, detail)


class TestRoomId:
    """Tests for RoomId value object."""

    def test_from_string_valid_uuid(self):
        """Given a valid UUID string, returns a RoomId."""
        room_id = RoomId.generate()
        assert RoomId.from_string(str(room_id)) == room_id

    def test_from_string_invalid_uuid(self):
        """Given an invalid UUID string, raises ValueError."""
        with pytest.raises(ValueError):
            RoomId.from_string("not-a-uuid")


class TestRoom:
    """Tests for Room derived state and member helpers."""

    def test_full_when_member_count_reaches_limit(self):
        """A room is full once its member count reaches the limit."""
        assert make_room(limit=2, members=2).is_full
        assert not make_room(limit=2, members=1).is_full

    def test_expired_at_and_after_end(self):
        """A room is expired at its end time and after it."""
        room = make_room()
        ends_at = room.play_time.ends_at
        assert not room.is_expired(ends_at - timedelta(seconds=1))
        assert room.is_expired(ends_at)
        assert room.is_expired(ends_at + timedelta(hours=1))

    def test_with_member_is_idempotent(self):
        """Adding an existing member returns the same members."""
        room = make_room()
        newcomer = PlayerId.generate()
        joined = room.with_member(newcomer).with_member(newcomer)
        assert joined.member_ids == room.member_ids + (newcomer,)

    def test_without_member_keeps_order(self):
        """Removing a member keeps the others in join order."""
        room = make_room(limit=5, members=3)
        first, second, third = room.member_ids
        assert room.without_member(second).member_ids == (first, third)

    def test_without_missing_member_changes_nothing(self):
        """Removing a non-member changes nothing."""
        room = make_room()
        assert room.without_member(PlayerId.generate()) == room
