from .view_model import DragGhost, InventoryViewModel, ItemView, TooltipLine

__all__ = ["DragGhost", "InventoryViewModel", "ItemView", "TooltipLine"]
