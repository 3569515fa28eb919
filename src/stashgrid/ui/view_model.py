from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..core.geometry import Point, Rect, SurfaceLayout
from ..core.models import Item
from ..interaction.drag import DragSession, Dragging


@dataclass
class ItemView:
    item_id: str
    name: str
    rect: Rect
    image_url: str
    rarity: str


@dataclass
class DragGhost:
    """The dragged item drawn under the pointer, free of the grid."""

    item_id: str
    rect: Rect
    colliding: bool


@dataclass
class TooltipLine:
    label: str
    value: str
    color: Optional[str] = None


class InventoryViewModel:
    """
    A UI-agnostic view model exposing what a renderer needs to draw the
    inventory grid: item rectangles, the drag ghost, and tooltip contents.
    Intended to be bound to a rendering layer but testable headlessly.
    """

    def __init__(self, session: DragSession) -> None:
        self.session = session
        self.store = session.store

    def visible_items(self, layout: SurfaceLayout) -> List[ItemView]:
        """Items drawn in the grid. The dragged item is skipped; it is drawn as a ghost."""
        hidden = self.session.dragged_item_id
        return [self._view(it, layout) for it in self.store if it.id != hidden]

    def drag_ghost(self) -> Optional[DragGhost]:
        state = self.session.state
        if not isinstance(state, Dragging):
            return None
        item = self.store.get(state.item_id)
        if item is None:
            return None
        cell = self.store.geometry.cell_size
        return DragGhost(
            item_id=item.id,
            rect=Rect(
                state.pointer.x - state.grab_offset.x,
                state.pointer.y - state.grab_offset.y,
                item.size.width * cell,
                item.size.height * cell,
            ),
            colliding=state.colliding,
        )

    def item_at(self, pointer: Point, layout: SurfaceLayout) -> Optional[Item]:
        """Hit-test for hover and pick-up; returns the topmost visible item under the pointer."""
        if not layout.grid.contains(pointer):
            return None
        cell = self.store.geometry.to_cell(pointer - layout.grid.origin)
        for it in reversed(self.store.snapshot()):
            if it.id == self.session.dragged_item_id:
                continue
            if (
                it.position.x <= cell.x < it.position.x + it.size.width
                and it.position.y <= cell.y < it.position.y + it.size.height
            ):
                return it
        return None

    def tooltip(self, item_id: str) -> List[TooltipLine]:
        """Tooltip lines for an item; empty while dragging or if the item is gone."""
        if self.session.is_dragging:
            return []
        item = self.store.get(item_id)
        if item is None:
            return []
        lines = [TooltipLine(label="", value=item.name)]
        lines.extend(TooltipLine(p.name, p.value, p.color) for p in item.properties)
        lines.append(TooltipLine(label="", value=f"{item.effective_rarity.label} item"))
        return lines

    def _view(self, item: Item, layout: SurfaceLayout) -> ItemView:
        geometry = self.store.geometry
        origin = geometry.cell_origin(item.position)
        return ItemView(
            item_id=item.id,
            name=item.name,
            rect=Rect(
                layout.grid.x + origin.x,
                layout.grid.y + origin.y,
                item.size.width * geometry.cell_size,
                item.size.height * geometry.cell_size,
            ),
            image_url=item.image_url,
            rarity=item.effective_rarity.value,
        )
