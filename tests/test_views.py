"""Integration tests for the HTTP handlers.

Run with: pytest tests/test_views.py -v
"""

from datetime import timedelta

import pytest
from django.conf import settings
from django.utils import timezone
from rest_framework.test import APIClient


def register_and_login(client: APIClient, email: str, nickname: str) -> dict:
    client.post(
        "/api/players",
        {"email": email, "nickname": nickname, "password": "secret"},
        format="json",
    )
    response = client.post(
        "/api/players/login", {"email": email, "password": "secret"}, format="json"
    )
    assert response.status_code == 200
    return response.json()


def room_payload(**overrides) -> dict:
    starts_at = timezone.now() + timedelta(days=1)
    payload = {
        "title": "Friday futsal",
        "intro": "Bring indoor shoes",
        "city": "Seoul",
        "section": "Songpa-gu",
        "detail": "Luther hall",
        "starts_at": starts_at.isoformat(),
        "ends_at": (starts_at + timedelta(hours=2)).isoformat(),
        "players_limit": 2,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def master_client() -> APIClient:
    client = APIClient()
    register_and_login(client, "master@stardium.io", "master")
    return client


@pytest.fixture
def player_client() -> APIClient:
    client = APIClient()
    register_and_login(client, "player@stardium.io", "player")
    return client


@pytest.mark.django_db
class TestPlayerEndpoints:
    """Tests for /api/players"""

    def test_register_returns_player_without_password(self, api_client: APIClient):
        """Given valid input, returns 201 without the password."""
        response = api_client.post(
            "/api/players",
            {"email": "kim@stardium.io", "nickname": "kim", "password": "secret"},
            format="json",
        )

        assert response.status_code == 201
        assert response.json()["email"] == "kim@stardium.io"
        assert "password" not in response.json()

    def test_register_duplicate_email_returns_409(self, api_client: APIClient):
        """Given a taken email, returns 409."""
        body = {"email": "kim@stardium.io", "nickname": "kim", "password": "secret"}
        api_client.post("/api/players", body, format="json")

        response = api_client.post("/api/players", body, format="json")

        assert response.status_code == 409
        assert response.json()["code"] == "EMAIL_ALREADY_REGISTERED"

    def test_login_with_wrong_password_returns_401(self, api_client: APIClient):
        """Given a wrong password, returns 401."""
        api_client.post(
            "/api/players",
            {"email": "kim@stardium.io", "nickname": "kim", "password": "secret"},
            format="json",
        )

        response = api_client.post(
            "/api/players/login", {"email": "kim@stardium.io", "password": "nope"}, format="json"
        )

        assert response.status_code == 401
        assert response.json()["code"] == "AUTHENTICATION_FAILED"

    def test_logout_ends_session(self, master_client: APIClient):
        """After logout, login-only endpoints return 401."""
        master_client.post("/api/players/logout")

        assert master_client.get("/api/players/me/rooms").status_code == 401

    def test_session_cookie_is_same_site_strict(self, api_client: APIClient):
        """Given a login, the session cookie is HttpOnly and SameSite=Strict."""
        api_client.post(
            "/api/players",
            {"email": "kim@stardium.io", "nickname": "kim", "password": "secret"},
            format="json",
        )

        response = api_client.post(
            "/api/players/login", {"email": "kim@stardium.io", "password": "secret"}, format="json"
        )

        cookie = response.cookies[settings.SESSION_COOKIE_NAME]
        assert cookie["samesite"] == "Strict"
        assert cookie["httponly"]


@pytest.mark.django_db
class TestRoomEndpoints:
    """Tests for /api/rooms"""

    def test_create_requires_login(self, api_client: APIClient):
        """Given no session, returns 401."""
        assert api_client.post("/api/rooms", room_payload(), format="json").status_code == 401

    def test_create_and_list(self, master_client: APIClient, api_client: APIClient):
        """Given a logged-in master, creates a room listed for everyone."""
        created = master_client.post("/api/rooms", room_payload(), format="json")

        assert created.status_code == 201
        room = created.json()["summary"]
        assert room["master"]["email"] == "master@stardium.io"
        assert room["player_count"] == 1

        listed = api_client.get("/api/rooms").json()
        assert [r["id"] for r in listed] == [room["id"]]

    def test_create_with_bad_schedule_returns_400(self, master_client: APIClient):
        """Given an end equal to the start, returns 400."""
        payload = room_payload()
        payload["ends_at"] = payload["starts_at"]

        response = master_client.post("/api/rooms", payload, format="json")

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_FAILED"

    def test_full_room_leaves_listing_but_not_my_rooms(self, master_client, player_client, api_client):
        """A full room leaves the listing but stays in my rooms."""
        room_id = master_client.post("/api/rooms", room_payload(), format="json").json()["summary"]["id"]

        joined = player_client.post(f"/api/rooms/{room_id}/join")

        assert joined.status_code == 200
        assert [m["email"] for m in joined.json()["members"]] == [
            "master@stardium.io",
            "player@stardium.io",
        ]
        assert api_client.get("/api/rooms").json() == []
        assert [r["id"] for r in player_client.get("/api/players/me/rooms").json()] == [room_id]
        assert [r["id"] for r in master_client.get("/api/players/me/rooms").json()] == [room_id]

    def test_quit_room(self, master_client, player_client):
        """Given a member quits, the room shows one player."""
        room_id = master_client.post("/api/rooms", room_payload(), format="json").json()["summary"]["id"]
        player_client.post(f"/api/rooms/{room_id}/join")

        response = player_client.post(f"/api/rooms/{room_id}/quit")

        assert response.status_code == 200
        assert response.json()["summary"]["player_count"] == 1
        assert player_client.get("/api/players/me/rooms").json() == []

    def test_update_by_non_master_returns_403(self, master_client, player_client):
        """Given actor is not the master, returns 403."""
        room_id = master_client.post("/api/rooms", room_payload(), format="json").json()["summary"]["id"]

        response = player_client.put(f"/api/rooms/{room_id}", room_payload(title="mine"), format="json")

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_update_by_master(self, master_client):
        """Given the master, update returns 200 with new fields."""
        room_id = master_client.post("/api/rooms", room_payload(), format="json").json()["summary"]["id"]

        response = master_client.put(
            f"/api/rooms/{room_id}", room_payload(title="renamed", players_limit=6), format="json"
        )

        assert response.status_code == 200
        assert response.json()["summary"]["title"] == "renamed"
        assert response.json()["summary"]["players_limit"] == 6

    def test_delete_by_master(self, master_client, player_client):
        """Given the master, delete returns 204."""
        room_id = master_client.post("/api/rooms", room_payload(), format="json").json()["summary"]["id"]
        player_client.post(f"/api/rooms/{room_id}/join")

        assert master_client.delete(f"/api/rooms/{room_id}").status_code == 204
        assert master_client.get(f"/api/rooms/{room_id}").status_code == 404
        assert player_client.get("/api/players/me/rooms").json() == []

    def test_get_room_invalid_id_returns_400(self, api_client: APIClient):
        """Given invalid UUID, returns 400."""
        response = api_client.get("/api/rooms/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ROOM_ID"
