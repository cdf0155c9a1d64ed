"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details

The logged-in player is kept in the session by email and resolved again on
every request, then passed to the services as the acting player.
"""

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from stardium import services
from stardium.domain import Player
from stardium.domain.errors import DomainError, ErrorCode, PlayerNotFoundError
from stardium.handlers.serializers import (
    LoginSerializer,
    PlayerRegisterSerializer,
    PlayerSerializer,
    RoomDetailSerializer,
    RoomRequestSerializer,
    RoomSummarySerializer,
)

SESSION_PLAYER_EMAIL = "player_email"

ERROR_STATUS = {
    ErrorCode.PLAYER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ROOM_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_ROOM_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.AUTHENTICATION_FAILED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.EMAIL_ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    ErrorCode.ROOM_FULL: status.HTTP_409_CONFLICT,
}


class LoginRequired(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Login required"
    default_code = "LOGIN_REQUIRED"


class StardiumView(APIView):
    """Base view translating domain errors into HTTP responses."""

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            return Response(
                {"code": exc.code.value, "message": exc.message},
                status=ERROR_STATUS[exc.code],
            )
        return super().handle_exception(exc)

    def logged_in_player(self, request: Request) -> Player:
        email = request.session.get(SESSION_PLAYER_EMAIL)
        if not email:
            raise LoginRequired()
        try:
            return services.build_player_service().find_by_email(email)
        except PlayerNotFoundError:
            request.session.flush()
            raise LoginRequired()

    @staticmethod
    def room_request(request: Request) -> services.RoomRequest:
        serializer = RoomRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return services.RoomRequest(**serializer.validated_data)


class PlayerRegisterView(StardiumView):
    """Handler for POST /api/players"""

    def post(self, request: Request) -> Response:
        serializer = PlayerRegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        player = services.build_player_service().register(
            services.PlayerRequest(**serializer.validated_data)
        )
        return Response(PlayerSerializer(player).data, status=status.HTTP_201_CREATED)


class LoginView(StardiumView):
    """Handler for POST /api/players/login"""

    def post(self, request: Request) -> Response:
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        player = services.build_player_service().authenticate(
            serializer.validated_data["email"], serializer.validated_data["password"]
        )
        request.session.cycle_key()
        request.session[SESSION_PLAYER_EMAIL] = player.email
        return Response(PlayerSerializer(player).data)


class LogoutView(StardiumView):
    """Handler for POST /api/players/logout"""

    def post(self, request: Request) -> Response:
        request.session.flush()
        return Response(status=status.HTTP_204_NO_CONTENT)


class MyRoomListView(StardiumView):
    """Handler for GET /api/players/me/rooms"""

    def get(self, request: Request) -> Response:
        player = self.logged_in_player(request)
        rooms = services.build_room_catalog().find_player_joined_rooms(player)
        return Response(RoomSummarySerializer(rooms, many=True).data)


class RoomListView(StardiumView):
    """Handler for GET and POST /api/rooms"""

    def get(self, request: Request) -> Response:
        rooms = services.build_room_catalog().find_all_unexpired_rooms()
        return Response(RoomSummarySerializer(rooms, many=True).data)

    def post(self, request: Request) -> Response:
        player = self.logged_in_player(request)
        room = services.build_room_service().create(self.room_request(request), player)
        detail = services.build_room_catalog().get_room(room.id)
        return Response(RoomDetailSerializer(detail).data, status=status.HTTP_201_CREATED)


class RoomDetailView(StardiumView):
    """Handler for GET, PUT and DELETE /api/rooms/{room_id}"""

    def get(self, request: Request, room_id: str) -> Response:
        detail = services.build_room_catalog().get_room(room_id)
        return Response(RoomDetailSerializer(detail).data)

    def put(self, request: Request, room_id: str) -> Response:
        player = self.logged_in_player(request)
        updated_id = services.build_room_service().update(room_id, self.room_request(request), player)
        detail = services.build_room_catalog().get_room(updated_id)
        return Response(RoomDetailSerializer(detail).data)

    def delete(self, request: Request, room_id: str) -> Response:
        player = self.logged_in_player(request)
        services.build_room_service().delete(room_id, player)
        return Response(status=status.HTTP_204_NO_CONTENT)


class RoomJoinView(StardiumView):
    """Handler for POST /api/rooms/{room_id}/join"""

    def post(self, request: Request, room_id: str) -> Response:
        player = self.logged_in_player(request)
        room = services.build_room_service().join(player.email, room_id)
        detail = services.build_room_catalog().get_room(room.id)
        return Response(RoomDetailSerializer(detail).data)


class RoomQuitView(StardiumView):
    """Handler for POST /api/rooms/{room_id}/quit"""

    def post(self, request: Request, room_id: str) -> Response:
        player = self.logged_in_player(request)
        room = services.build_room_service().quit(player.email, room_id)
        detail = services.build_room_catalog().get_room(room.id)
        return Response(RoomDetailSerializer(detail).data)
