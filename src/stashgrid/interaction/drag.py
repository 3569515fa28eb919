"""Pointer-drag state machine for moving items on the grid.

A session is either ``Idle`` or ``Dragging``. Picking up an item starts a drag;
pointer moves only refresh the transient preview; releasing resolves the drag
into exactly one of reposition, revert or delete and returns to ``Idle``.
There is no cancel gesture: the only way out of a drag is a release.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from ..audio.notifier import NotificationSink, NullNotifier, notify_safely
from ..core.errors import NotFound, StashError
from ..core.events import DRAG_RESOLVED
from ..core.geometry import GridCoordinate, Point, SurfaceLayout
from ..core.models import Item, Position
from ..core.placement import is_valid
from ..core.store import InventoryStore

logger = logging.getLogger(__name__)


class Resolution(str, Enum):
    REPOSITION = "reposition"
    REVERT = "revert"
    DELETE = "delete"


@dataclass(frozen=True)
class Idle:
    pass


IDLE = Idle()


@dataclass(frozen=True)
class Dragging:
    """Transient state of an active drag.

    ``grab_offset`` is the pointer's offset from the item's top-left corner,
    snapped down to whole cells (in pixels). ``candidate`` is None while the
    pointer is off the grid surface, in which case ``live_validity`` is False.
    """

    item_id: str
    grab_offset: Point
    pointer: Point
    candidate: Optional[GridCoordinate] = None
    live_validity: bool = False

    @property
    def colliding(self) -> bool:
        return self.candidate is not None and not self.live_validity


DragState = Union[Idle, Dragging]


@dataclass(frozen=True)
class DropOutcome:
    resolution: Resolution
    item_id: str
    position: Optional[Position] = None
    error: Optional[StashError] = None


class DragSession:
    def __init__(self, store: InventoryStore, notifier: Optional[NotificationSink] = None) -> None:
        self.store = store
        self.notifier = notifier or NullNotifier()
        self._state: DragState = IDLE

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return isinstance(self._state, Dragging)

    @property
    def dragged_item_id(self) -> Optional[str]:
        return self._state.item_id if isinstance(self._state, Dragging) else None

    def pick_up(self, item_id: str, pointer: Point, layout: SurfaceLayout) -> bool:
        """Start dragging ``item_id``. Returns False if ignored."""
        if isinstance(self._state, Dragging):
            logger.warning("Pick-up of %s ignored: already dragging %s", item_id, self._state.item_id)
            return False
        item = self.store.get(item_id)
        if item is None:
            logger.warning("Pick-up ignored: item %s not found", item_id)
            return False
        geometry = self.store.geometry
        top_left = geometry.cell_origin(item.position)
        raw = pointer - layout.grid.origin - top_left
        grab_offset = geometry.snap_offset(raw)
        self._state = Dragging(item_id=item_id, grab_offset=grab_offset, pointer=pointer)
        logger.debug("Picked up %s with grab offset (%s, %s)", item_id, grab_offset.x, grab_offset.y)
        notify_safely(self.notifier, item.pickup_sound)
        return True

    def move(self, pointer: Point, layout: SurfaceLayout) -> Optional[bool]:
        """Track the pointer and refresh the preview.

        Returns the live validity, or None when no drag is active. Never
        mutates the store.
        """
        state = self._state
        if not isinstance(state, Dragging):
            return None
        item = self.store.get(state.item_id)
        if item is None or not layout.grid.contains(pointer):
            self._state = replace(state, pointer=pointer, candidate=None, live_validity=False)
            return False
        candidate = self._candidate(state, pointer, layout)
        valid = is_valid(item, candidate, self.store.snapshot(), self.store.geometry, exclude_id=item.id)
        self._state = replace(state, pointer=pointer, candidate=candidate, live_validity=valid)
        logger.debug("Drag preview %s -> (%d, %d) valid=%s", item.id, candidate.x, candidate.y, valid)
        return valid

    def release(self, pointer: Point, layout: SurfaceLayout) -> Optional[DropOutcome]:
        """Resolve the active drag. Returns None when no drag is active."""
        state = self._state
        if not isinstance(state, Dragging):
            return None
        self._state = IDLE
        item = self.store.get(state.item_id)
        if item is None:
            logger.warning("Release ignored: dragged item %s no longer exists", state.item_id)
            outcome = DropOutcome(Resolution.REVERT, state.item_id, error=NotFound(state.item_id))
        elif not layout.container.contains(pointer):
            outcome = self._delete(item)
        else:
            outcome = self._place(item, self._candidate(state, pointer, layout))
        notify_safely(self.notifier, item.drop_sound if item else None)
        logger.info("Drag of %s resolved as %s", outcome.item_id, outcome.resolution.value)
        self.store.bus.emit(DRAG_RESOLVED, {"outcome": outcome})
        return outcome

    def _candidate(self, state: Dragging, pointer: Point, layout: SurfaceLayout) -> GridCoordinate:
        return self.store.geometry.to_cell(pointer - layout.grid.origin - state.grab_offset)

    def _delete(self, item: Item) -> DropOutcome:
        result = self.store.remove(item.id)
        return DropOutcome(Resolution.DELETE, item.id, error=result.error)

    def _place(self, item: Item, candidate: GridCoordinate) -> DropOutcome:
        result = self.store.move(item.id, candidate)
        if result.ok:
            return DropOutcome(Resolution.REPOSITION, item.id, position=candidate)
        return DropOutcome(Resolution.REVERT, item.id, position=item.position, error=result.error)
