"""Serializers for request input and for projections returned by services."""

from rest_framework import serializers


class PlayerRegisterSerializer(serializers.Serializer):
    """Input for POST /api/players"""

    email = serializers.EmailField(max_length=255)
    nickname = serializers.CharField(max_length=100)
    password = serializers.CharField(write_only=True)
    status_message = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    profile = serializers.URLField(max_length=500, required=False, allow_null=True, default=None)


class LoginSerializer(serializers.Serializer):
    """Input for POST /api/players/login"""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class PlayerSerializer(serializers.Serializer):
    """Serializer for Player domain model. Credentials are never exposed."""

    id = serializers.CharField()
    email = serializers.EmailField()
    nickname = serializers.CharField()
    status_message = serializers.CharField()
    profile = serializers.CharField(allow_null=True)


class RoomRequestSerializer(serializers.Serializer):
    """Input for creating or updating a room."""

    title = serializers.CharField(max_length=255)
    intro = serializers.CharField(required=False, allow_blank=True, default="")
    city = serializers.CharField(max_length=100)
    section = serializers.CharField(max_length=100)
    detail = serializers.CharField(max_length=255)
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField()
    players_limit = serializers.IntegerField()


class MemberSummarySerializer(serializers.Serializer):
    """Serializer for MemberSummary projections."""

    id = serializers.CharField()
    email = serializers.EmailField()
    nickname = serializers.CharField()


class RoomSummarySerializer(serializers.Serializer):
    """Serializer for RoomSummary projections."""

    id = serializers.CharField()
    title = serializers.CharField()
    intro = serializers.CharField()
    address = serializers.CharField()
    play_time = serializers.CharField()
    players_limit = serializers.IntegerField()
    master = MemberSummarySerializer()
    player_count = serializers.IntegerField()


class RoomDetailSerializer(serializers.Serializer):
    """Serializer for RoomDetail projections."""

    summary = RoomSummarySerializer()
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField()
    members = MemberSummarySerializer(many=True)
