from stardium.handlers.views import (
    LoginView,
    LogoutView,
    MyRoomListView,
    PlayerRegisterView,
    RoomDetailView,
    RoomJoinView,
    RoomListView,
    RoomQuitView,
)

__all__ = [
    "LoginView",
    "LogoutView",
    "MyRoomListView",
    "PlayerRegisterView",
    "RoomDetailView",
    "RoomJoinView",
    "RoomListView",
    "RoomQuitView",
]
