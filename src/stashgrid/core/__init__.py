from .errors import (
    StashError,
    PlacementConflict,
    NotFound,
    DuplicateItem,
    NoSpaceAvailable,
    ItemValidationError,
    PersistenceError,
    PersistenceUnavailable,
    PersistenceCorrupt,
)
from .events import EventBus, ITEMS_CHANGED, SPAWN_FAILED, DRAG_RESOLVED
from .geometry import GridCoordinate, GridGeometry, Point, Rect, SurfaceLayout
from .models import Item, ItemProperty, ItemTemplate, Position, Rarity, Size, SoundRefs
from .placement import is_valid, footprints_overlap, first_free_position
from .store import InventoryStore, MutationResult

__all__ = [
    "StashError",
    "PlacementConflict",
    "NotFound",
    "DuplicateItem",
    "NoSpaceAvailable",
    "ItemValidationError",
    "PersistenceError",
    "PersistenceUnavailable",
    "PersistenceCorrupt",
    "EventBus",
    "ITEMS_CHANGED",
    "SPAWN_FAILED",
    "DRAG_RESOLVED",
    "GridCoordinate",
    "GridGeometry",
    "Point",
    "Rect",
    "SurfaceLayout",
    "Item",
    "ItemProperty",
    "ItemTemplate",
    "Position",
    "Rarity",
    "Size",
    "SoundRefs",
    "is_valid",
    "footprints_overlap",
    "first_free_position",
    "InventoryStore",
    "MutationResult",
]
