from stardium.stores.interfaces import PlayerStore, RoomStore
from stardium.stores.memory_store import InMemoryStore

__all__ = ["PlayerStore", "RoomStore", "InMemoryStore"]
