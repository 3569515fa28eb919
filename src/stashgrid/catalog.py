"""Built-in inventory contents and the pool of templates for random spawns."""
from __future__ import annotations

from typing import List, Tuple

from .core.models import Item, ItemProperty as P, ItemTemplate, Position, Rarity, Size, SoundRefs

_SOUND_ROOT = "https://example.com/sounds"


def _sounds(stem: str) -> SoundRefs:
    return SoundRefs(pickup=f"{_SOUND_ROOT}/{stem}_pickup.mp3", drop=f"{_SOUND_ROOT}/{stem}_drop.mp3")


DEFAULT_ITEMS: Tuple[Item, ...] = (
    Item(
        id="1",
        name="Potion of Healing",
        position=Position(0, 0),
        size=Size(1, 1),
        image_url="/api/placeholder/40/40",
        rarity=Rarity.COMMON,
        properties=(
            P("Type", "Consumable"),
            P("Effect", "Restores 2d4+2 hit points"),
            P("Duration", "Instant"),
            P("Weight", "0.5 lb"),
            P("Value", "50 gp"),
        ),
        sounds=_sounds("potion"),
    ),
    Item(
        id="2",
        name="Longsword",
        position=Position(1, 2),
        size=Size(1, 3),
        image_url="/api/placeholder/40/120",
        rarity=Rarity.UNCOMMON,
        properties=(
            P("Damage", "1d8 slashing", "#44bb44"),
            P("Property", "+1 to attack and damage rolls", "#44bb44"),
            P("Weight", "3 lb"),
            P("Value", "1,000 gp"),
            P("Type", "Melee Weapon"),
        ),
        sounds=_sounds("sword"),
    ),
    Item(
        id="3",
        name="Shield of Protection",
        position=Position(3, 3),
        size=Size(2, 2),
        image_url="/api/placeholder/80/80",
        rarity=Rarity.RARE,
        properties=(
            P("Armor Class", "+2 AC", "#4444dd"),
            P("Property", "Advantage on saving throws", "#4444dd"),
            P("Special", "Resistance to one damage type", "#4444dd"),
            P("Weight", "6 lb"),
            P("Value", "5,000 gp"),
        ),
        sounds=_sounds("shield"),
    ),
    Item(
        id="4",
        name="Tome of Fire",
        position=Position(6, 0),
        size=Size(2, 2),
        image_url="/api/placeholder/80/80",
        rarity=Rarity.EPIC,
        properties=(
            P("Type", "Spellbook"),
            P("School", "Evocation", "#aa44ee"),
            P("Property", "+2 to spell save DC for fire spells", "#aa44ee"),
            P("Property", "Contains 12 fire-based spells", "#aa44ee"),
            P("Weight", "3 lb"),
            P("Value", "10,000 gp"),
        ),
        sounds=_sounds("book"),
    ),
    Item(
        id="5",
        name="Dragonscale Platemail",
        position=Position(6, 5),
        size=Size(2, 3),
        image_url="/api/placeholder/80/120",
        rarity=Rarity.SET,
        properties=(
            P("Armor Class", "18 + Dex modifier (max 1)", "#dd4444"),
            P("Resistance", "Fire damage", "#dd4444"),
            P("Property", "Advantage on saves vs. fear", "#dd4444"),
            P("Special", "Once per day, cast Fire Shield", "#dd4444"),
            P("Weight", "65 lb"),
            P("Value", "25,000 gp"),
            P("Requirement", "Str 15"),
        ),
        sounds=_sounds("armor"),
    ),
)


ITEM_TEMPLATES: Tuple[ItemTemplate, ...] = (
    ItemTemplate(
        name="Small Potion",
        size=Size(1, 1),
        image_url="/api/placeholder/40/40",
        rarity=Rarity.COMMON,
        properties=(
            P("Type", "Consumable"),
            P("Effect", "Restores 1d4 hit points"),
            P("Weight", "0.25 lb"),
        ),
        sounds=_sounds("potion"),
    ),
    ItemTemplate(
        name="Dagger",
        size=Size(1, 2),
        image_url="/api/placeholder/40/80",
        rarity=Rarity.UNCOMMON,
        properties=(
            P("Damage", "1d4 piercing"),
            P("Property", "+1 to hit"),
            P("Weight", "1 lb"),
        ),
        sounds=_sounds("dagger"),
    ),
    ItemTemplate(
        name="Helmet",
        size=Size(2, 2),
        image_url="/api/placeholder/80/80",
        rarity=Rarity.RARE,
        properties=(
            P("AC Bonus", "+1"),
            P("Property", "Advantage on Perception"),
            P("Weight", "4 lb"),
        ),
        sounds=_sounds("helmet"),
    ),
    ItemTemplate(
        name="Staff",
        size=Size(1, 4),
        image_url="/api/placeholder/40/160",
        rarity=Rarity.EPIC,
        properties=(
            P("Damage", "1d6 bludgeoning"),
            P("Magic", "+2 to spell attack rolls"),
            P("Property", "Can cast Magic Missile 1/day"),
            P("Weight", "4 lb"),
        ),
        sounds=_sounds("staff"),
    ),
)


def default_items() -> List[Item]:
    return list(DEFAULT_ITEMS)
