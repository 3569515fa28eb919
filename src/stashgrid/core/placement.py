from __future__ import annotations

from typing import Iterable, Optional

from .geometry import GridGeometry
from .models import Item, Position, Size


def within_bounds(size: Size, position: Position, geometry: GridGeometry) -> bool:
    return (
        position.x >= 0
        and position.y >= 0
        and position.x + size.width <= geometry.width
        and position.y + size.height <= geometry.height
    )


def footprints_overlap(a_pos: Position, a_size: Size, b_pos: Position, b_size: Size) -> bool:
    """Half-open AABB test: [x, x+w) x [y, y+h)."""
    return (
        a_pos.x < b_pos.x + b_size.width
        and a_pos.x + a_size.width > b_pos.x
        and a_pos.y < b_pos.y + b_size.height
        and a_pos.y + a_size.height > b_pos.y
    )


def is_valid(
    candidate: Item,
    position: Position,
    existing: Iterable[Item],
    geometry: GridGeometry,
    exclude_id: Optional[str] = None,
) -> bool:
    """Return True if ``candidate`` may sit at ``position`` among ``existing``.

    The item whose id equals ``exclude_id`` is ignored, so an item being moved
    never collides with its own committed placement.
    """
    if not within_bounds(candidate.size, position, geometry):
        return False
    for other in existing:
        if exclude_id is not None and other.id == exclude_id:
            continue
        if footprints_overlap(position, candidate.size, other.position, other.size):
            return False
    return True


def first_free_position(
    candidate: Item,
    existing: Iterable[Item],
    geometry: GridGeometry,
) -> Optional[Position]:
    """Row-major scan for the first cell where ``candidate`` fits."""
    items = list(existing)
    for cell in geometry.cells():
        if is_valid(candidate, cell, items, geometry):
            return cell
    return None
