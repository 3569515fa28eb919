"""JSON wire format for item sets.

The stored shape is an array of records using the field names of the original
data files (``size`` rather than ``extent``, ``imageUrl``, ``properties``,
``sounds``). Optional fields that are unset are omitted on output so that
``deserialize(serialize(items)) == items``.
"""
from __future__ import annotations

import json
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.errors import PersistenceCorrupt
from ..core.models import Item, ItemProperty, Position, Rarity, Size, SoundRefs


class PositionRecord(BaseModel):
    x: int
    y: int


class SizeRecord(BaseModel):
    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)


class PropertyRecord(BaseModel):
    name: str
    value: str
    color: Optional[str] = None


class SoundsRecord(BaseModel):
    pickup: Optional[str] = None
    drop: Optional[str] = None


class ItemRecord(BaseModel):
    """One stored item, exactly as it appears on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str
    position: PositionRecord
    size: SizeRecord
    image_url: str = Field("", alias="imageUrl")
    rarity: Optional[Rarity] = None
    properties: List[PropertyRecord] = Field(default_factory=list)
    sounds: Optional[SoundsRecord] = None

    @field_validator("properties", mode="before")
    @classmethod
    def none_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @classmethod
    def from_item(cls, item: Item) -> "ItemRecord":
        return cls(
            id=item.id,
            name=item.name,
            position=PositionRecord(x=item.position.x, y=item.position.y),
            size=SizeRecord(width=item.size.width, height=item.size.height),
            image_url=item.image_url,
            rarity=item.rarity,
            properties=[PropertyRecord(name=p.name, value=p.value, color=p.color) for p in item.properties],
            sounds=SoundsRecord(pickup=item.sounds.pickup, drop=item.sounds.drop) if item.sounds else None,
        )

    def to_item(self) -> Item:
        return Item(
            id=self.id,
            name=self.name,
            position=Position(self.position.x, self.position.y),
            size=Size(self.size.width, self.size.height),
            image_url=self.image_url,
            rarity=self.rarity,
            properties=tuple(ItemProperty(p.name, p.value, p.color) for p in self.properties),
            sounds=SoundRefs(self.sounds.pickup, self.sounds.drop) if self.sounds else None,
        )


def to_records(items: Iterable[Item]) -> List[dict]:
    return [
        ItemRecord.from_item(it).model_dump(mode="json", by_alias=True, exclude_none=True)
        for it in items
    ]


def from_records(data: Any) -> List[Item]:
    """Validate decoded JSON and build items. Raises PersistenceCorrupt on any defect."""
    if not isinstance(data, list):
        raise PersistenceCorrupt(f"Expected an array of items, got {type(data).__name__}")
    try:
        records = [ItemRecord.model_validate(raw) for raw in data]
    except ValidationError as e:
        raise PersistenceCorrupt(f"Invalid item record: {e}") from e
    seen = set()
    for rec in records:
        if rec.id in seen:
            raise PersistenceCorrupt(f"Duplicate item id: {rec.id}")
        seen.add(rec.id)
    return [rec.to_item() for rec in records]


def serialize(items: Iterable[Item], indent: Optional[int] = None) -> str:
    return json.dumps(to_records(items), ensure_ascii=False, indent=indent)


def deserialize(text: str) -> List[Item]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PersistenceCorrupt(f"Invalid JSON: {e}") from e
    return from_records(data)
