from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from .errors import ItemValidationError
from .geometry import GridCoordinate

# Items are anchored by their top-left cell.
Position = GridCoordinate


class Rarity(str, Enum):
    """Ordered rarity tiers. Values match the stored data."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    VERY_RARE = "very rare"
    EPIC = "epic"
    UNIQUE = "unique"
    SET = "set"
    LEGENDARY = "legendary"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Size:
    """Footprint extent in cells."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if not isinstance(self.width, int) or not isinstance(self.height, int):
            raise ItemValidationError("Size dimensions must be integers")
        if self.width < 1 or self.height < 1:
            raise ItemValidationError(f"Size must be at least 1x1, got {self.width}x{self.height}")


@dataclass(frozen=True)
class ItemProperty:
    """Descriptive (label, value, colour) attribute shown in tooltips."""

    name: str
    value: str
    color: Optional[str] = None


@dataclass(frozen=True)
class SoundRefs:
    pickup: Optional[str] = None
    drop: Optional[str] = None


@dataclass(frozen=True)
class Item:
    """An item occupying a rectangle of cells.

    Items are immutable; moving one produces a copy with a new position.
    """

    id: str
    name: str
    position: Position
    size: Size
    image_url: str = ""
    rarity: Optional[Rarity] = None
    properties: Tuple[ItemProperty, ...] = field(default_factory=tuple)
    sounds: Optional[SoundRefs] = None

    def __post_init__(self) -> None:
        if not self.id or not isinstance(self.id, str):
            raise ItemValidationError("Item.id must be a non-empty string")
        if not isinstance(self.properties, tuple):
            object.__setattr__(self, "properties", tuple(self.properties))

    @property
    def effective_rarity(self) -> Rarity:
        return self.rarity or Rarity.COMMON

    @property
    def pickup_sound(self) -> Optional[str]:
        return self.sounds.pickup if self.sounds else None

    @property
    def drop_sound(self) -> Optional[str]:
        return self.sounds.drop if self.sounds else None

    def moved_to(self, position: Position) -> "Item":
        return replace(self, position=position)


@dataclass(frozen=True)
class ItemTemplate:
    """Blueprint for spawning new items; everything but id and position."""

    name: str
    size: Size
    image_url: str = ""
    rarity: Optional[Rarity] = None
    properties: Tuple[ItemProperty, ...] = field(default_factory=tuple)
    sounds: Optional[SoundRefs] = None

    def materialize(self, item_id: str, position: Position) -> Item:
        return Item(
            id=item_id,
            name=self.name,
            position=position,
            size=self.size,
            image_url=self.image_url,
            rarity=self.rarity,
            properties=self.properties,
            sounds=self.sounds,
        )

    def probe(self) -> Item:
        """A throwaway item with this template's footprint, used for free-cell scans."""
        return self.materialize("__probe__", Position(0, 0))
