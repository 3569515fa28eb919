"""
stashgrid: a headless grid inventory engine.

This package provides the domain logic behind a drag-and-drop grid inventory:
- Items with rectangular footprints on a fixed cell grid
- Placement checks (bounds and overlap) and a store that never commits an invalid layout
- A pointer-drag state machine that resolves drops into reposition, revert or delete
- Random item spawning into the first free cell
- Layered persistence (session cache, durable file, built-in defaults)

Rendering layers should import and compose these services.
"""
from .app import InventoryManager
from .config import StashConfig
from .core import (
    GridGeometry,
    InventoryStore,
    Item,
    ItemProperty,
    ItemTemplate,
    MutationResult,
    NoSpaceAvailable,
    NotFound,
    PlacementConflict,
    Point,
    Position,
    Rarity,
    Rect,
    Size,
    SoundRefs,
    StashError,
    SurfaceLayout,
)
from .factory import ItemFactory, SpawnResult
from .interaction import DragSession, DropOutcome, Resolution
from .persistence import PersistenceGateway

__version__ = "0.1.0"

__all__ = [
    "InventoryManager",
    "StashConfig",
    "GridGeometry",
    "InventoryStore",
    "Item",
    "ItemProperty",
    "ItemTemplate",
    "MutationResult",
    "NoSpaceAvailable",
    "NotFound",
    "PlacementConflict",
    "Point",
    "Position",
    "Rarity",
    "Rect",
    "Size",
    "SoundRefs",
    "StashError",
    "SurfaceLayout",
    "ItemFactory",
    "SpawnResult",
    "DragSession",
    "DropOutcome",
    "Resolution",
    "PersistenceGateway",
]
