"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Player(models.Model):
    """Persistence model for players."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(max_length=255, unique=True)
    nickname = models.CharField(max_length=100)
    password = models.CharField(max_length=256)
    status_message = models.CharField(max_length=255, blank=True, default="")
    profile = models.URLField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]

    def __str__(self) -> str:
        return self.email


class Room(models.Model):
    """Persistence model for rooms. The address is stored inline."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    intro = models.TextField(blank=True, default="")
    city = models.CharField(max_length=100)
    section = models.CharField(max_length=100)
    detail = models.CharField(max_length=255)
    starts_at = models.DateTimeField()
    ends_at = models.DateTimeField()
    players_limit = models.PositiveIntegerField()
    master = models.ForeignKey(
        Player, on_delete=models.PROTECT, related_name="mastered_rooms"
    )
    players = models.ManyToManyField(
        Player, through="Membership", related_name="rooms"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["ends_at"], name="room_ends_at_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class Membership(models.Model):
    """A player's seat in a room. Row order is join order."""

    room = models.ForeignKey(Room, on_delete=models.CASCADE, related_name="memberships")
    player = models.ForeignKey(
        Player, on_delete=models.CASCADE, related_name="memberships"
    )
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(fields=["room", "player"], name="unique_room_member"),
        ]

    def __str__(self) -> str:
        return f"{self.player} in {self.room}"
