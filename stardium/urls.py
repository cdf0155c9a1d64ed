from django.urls import path

from stardium.handlers import (
    LoginView,
    LogoutView,
    MyRoomListView,
    PlayerRegisterView,
    RoomDetailView,
    RoomJoinView,
    RoomListView,
    RoomQuitView,
)

urlpatterns = [
    path("players", PlayerRegisterView.as_view(), name="player-register"),
    path("players/login", LoginView.as_view(), name="player-login"),
    path("players/logout", LogoutView.as_view(), name="player-logout"),
    path("players/me/rooms", MyRoomListView.as_view(), name="player-rooms"),
    path("rooms", RoomListView.as_view(), name="room-list"),
    path("rooms/<str:room_id>", RoomDetailView.as_view(), name="room-detail"),
    path("rooms/<str:room_id>/join", RoomJoinView.as_view(), name="room-join"),
    path("rooms/<str:room_id>/quit", RoomQuitView.as_view(), name="room-quit"),
]
