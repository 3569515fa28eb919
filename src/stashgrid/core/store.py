from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from .errors import DuplicateItem, NotFound, PlacementConflict, StashError
from .events import ITEMS_CHANGED, EventBus
from .geometry import GridGeometry
from .models import Item, Position
from .placement import is_valid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a store mutation. Failures carry the error instead of raising it."""

    ok: bool
    item: Optional[Item] = None
    error: Optional[StashError] = None

    @staticmethod
    def success(item: Optional[Item] = None) -> "MutationResult":
        return MutationResult(ok=True, item=item)

    @staticmethod
    def failure(error: StashError, item: Optional[Item] = None) -> "MutationResult":
        return MutationResult(ok=False, item=item, error=error)

    def __bool__(self) -> bool:
        return self.ok


class InventoryStore:
    """Authoritative, ordered collection of grid items.

    The store is the only writer of the item set. Every mutation either keeps
    all items in bounds and non-overlapping or is rejected without touching the
    set. Successful mutations emit ``items_changed`` with a snapshot.
    """

    def __init__(
        self,
        geometry: Optional[GridGeometry] = None,
        *,
        bus: Optional[EventBus] = None,
        defaults: Optional[Callable[[], Iterable[Item]]] = None,
    ) -> None:
        self.geometry = geometry or GridGeometry()
        self.bus = bus or EventBus()
        self._defaults = defaults
        self._items: List[Item] = []

    # ---- Queries ----

    def snapshot(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    def get(self, item_id: str) -> Optional[Item]:
        for it in self._items:
            if it.id == item_id:
                return it
        return None

    def ids(self) -> List[str]:
        return [it.id for it in self._items]

    def __contains__(self, item_id: object) -> bool:
        return any(it.id == item_id for it in self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def can_place(self, item: Item, position: Position, exclude_id: Optional[str] = None) -> bool:
        return is_valid(item, position, self._items, self.geometry, exclude_id=exclude_id)

    # ---- Mutations ----

    def load(self, items: Iterable[Item]) -> None:
        """Replace the whole set. Input is trusted and not revalidated."""
        self._items = list(items)
        logger.info("Loaded %d items into inventory", len(self._items))
        self._changed()

    def reset_to_defaults(self) -> None:
        if self._defaults is None:
            self.load([])
            return
        self.load(self._defaults())

    def add(self, item: Item) -> MutationResult:
        if item.id in self:
            logger.warning("Rejected add: duplicate item id %s", item.id)
            return MutationResult.failure(DuplicateItem(f"Item id already present: {item.id}"), item)
        if not self.can_place(item, item.position):
            logger.warning("Rejected add of %s at (%d, %d)", item.id, item.position.x, item.position.y)
            return MutationResult.failure(
                PlacementConflict(f"Cannot place {item.name!r} at ({item.position.x}, {item.position.y})"),
                item,
            )
        self._items.append(item)
        self._changed()
        return MutationResult.success(item)

    def remove(self, item_id: str) -> MutationResult:
        for idx, it in enumerate(self._items):
            if it.id == item_id:
                del self._items[idx]
                self._changed()
                return MutationResult.success(it)
        logger.warning("Remove ignored: item %s not found", item_id)
        return MutationResult.failure(NotFound(f"Item not found: {item_id}"))

    def move(self, item_id: str, position: Position) -> MutationResult:
        """Reposition an item in place, or leave it untouched on conflict."""
        for idx, it in enumerate(self._items):
            if it.id != item_id:
                continue
            if not self.can_place(it, position, exclude_id=item_id):
                logger.debug("Move of %s to (%d, %d) rejected", item_id, position.x, position.y)
                return MutationResult.failure(
                    PlacementConflict(f"Cannot move {it.name!r} to ({position.x}, {position.y})"),
                    it,
                )
            moved = it.moved_to(position)
            self._items[idx] = moved
            self._changed()
            return MutationResult.success(moved)
        logger.warning("Move ignored: item %s not found", item_id)
        return MutationResult.failure(NotFound(f"Item not found: {item_id}"))

    def _changed(self) -> None:
        self.bus.emit(ITEMS_CHANGED, {"items": self.snapshot()})
