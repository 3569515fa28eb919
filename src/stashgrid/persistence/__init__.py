"""Persistence subsystem for stashgrid.

- A stable JSON wire format for item sets, validated with pydantic
- Session and durable storage backends behind small protocols
- A gateway that loads with layered fallback and saves best-effort
"""

from .backends import DurableStore, JSONFileStore, MemorySessionStore, SessionStore
from .codec import ItemRecord, deserialize, serialize
from .gateway import DEFAULT_SESSION_KEY, PersistenceGateway
from .paths import default_data_dir

__all__ = [
    "DurableStore",
    "JSONFileStore",
    "MemorySessionStore",
    "SessionStore",
    "ItemRecord",
    "deserialize",
    "serialize",
    "DEFAULT_SESSION_KEY",
    "PersistenceGateway",
    "default_data_dir",
]
