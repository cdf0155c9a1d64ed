"""Django ORM implementation of the PlayerStore and RoomStore.

Both sides of a membership live in the one ``Membership`` table. Saving a
room syncs that room's rows; player writes touch one row at a time so a
stale player snapshot never drops a membership committed meanwhile.
"""

from contextlib import AbstractContextManager

from django.db import IntegrityError, transaction

from stardium import models
from stardium.domain import (
    Address,
    Player,
    PlayerId,
    PlayersLimit,
    PlayTime,
    Room,
    RoomId,
)
from stardium.domain.errors import EmailAlreadyRegisteredError
from stardium.stores.interfaces import PlayerStore, RoomStore


def _player_to_domain(record: models.Player) -> Player:
    return Player(
        id=PlayerId(record.id),
        email=record.email,
        nickname=record.nickname,
        password_hash=record.password,
        status_message=record.status_message,
        profile=record.profile,
        room_ids=frozenset(RoomId(m.room_id) for m in record.memberships.all()),
    )


def _room_to_domain(record: models.Room) -> Room:
    return Room(
        id=RoomId(record.id),
        title=record.title,
        intro=record.intro,
        address=Address(city=record.city, section=record.section, detail=record.detail),
        play_time=PlayTime(starts_at=record.starts_at, ends_at=record.ends_at),
        players_limit=PlayersLimit(record.players_limit),
        master_id=PlayerId(record.master_id),
        member_ids=tuple(PlayerId(m.player_id) for m in record.memberships.all()),
    )


class DjangoPlayerStore(PlayerStore):
    """Relational player store using Django ORM."""

    def _players(self):
        return models.Player.objects.prefetch_related("memberships")

    def get_player(self, player_id: PlayerId) -> Player | None:
        record = self._players().filter(id=player_id.value).first()
        return _player_to_domain(record) if record else None

    def get_player_by_email(self, email: str) -> Player | None:
        record = self._players().filter(email=email).first()
        return _player_to_domain(record) if record else None

    def email_exists(self, email: str) -> bool:
        return models.Player.objects.filter(email=email).exists()

    def save_player(self, player: Player) -> Player:
        try:
            with transaction.atomic():
                models.Player.objects.update_or_create(
                    id=player.id.value,
                    defaults={
                        "email": player.email,
                        "nickname": player.nickname,
                        "password": player.password_hash,
                        "status_message": player.status_message,
                        "profile": player.profile,
                    },
                )
        except IntegrityError as exc:
            raise EmailAlreadyRegisteredError() from exc
        return self.get_player(player.id)

    def add_room(self, player_id: PlayerId, room_id: RoomId) -> None:
        models.Membership.objects.get_or_create(
            player_id=player_id.value, room_id=room_id.value
        )

    def remove_room(self, player_id: PlayerId, room_id: RoomId) -> None:
        models.Membership.objects.filter(
            player_id=player_id.value, room_id=room_id.value
        ).delete()


class DjangoRoomStore(RoomStore):
    """Relational room store using Django ORM."""

    def _rooms(self):
        return models.Room.objects.prefetch_related("memberships")

    def atomic(self) -> AbstractContextManager:
        return transaction.atomic()

    def list_rooms(self) -> list[Room]:
        return [_room_to_domain(record) for record in self._rooms()]

    def list_rooms_for_member(self, email: str) -> list[Room]:
        records = self._rooms().filter(memberships__player__email=email).distinct()
        return [_room_to_domain(record) for record in records]

    def get_room(self, room_id: RoomId, *, for_update: bool = False) -> Room | None:
        queryset = self._rooms()
        if for_update:
            queryset = queryset.select_for_update()
        record = queryset.filter(id=room_id.value).first()
        return _room_to_domain(record) if record else None

    def save_room(self, room: Room) -> Room:
        with transaction.atomic():
            record, _ = models.Room.objects.update_or_create(
                id=room.id.value,
                defaults={
                    "title": room.title,
                    "intro": room.intro,
                    "city": room.address.city,
                    "section": room.address.section,
                    "detail": room.address.detail,
                    "starts_at": room.play_time.starts_at,
                    "ends_at": room.play_time.ends_at,
                    "players_limit": room.players_limit.value,
                    "master_id": room.master_id.value,
                },
            )
            wanted = [player_id.value for player_id in room.member_ids]
            current = set(record.memberships.values_list("player_id", flat=True))
            record.memberships.exclude(player_id__in=wanted).delete()
            for player_id in wanted:
                if player_id not in current:
                    models.Membership.objects.create(room=record, player_id=player_id)
        return room

    def delete_room(self, room_id: RoomId) -> None:
        models.Room.objects.filter(id=room_id.value).delete()
