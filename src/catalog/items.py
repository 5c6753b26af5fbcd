# category / icon derivation for catalog items
# src/catalog/items.py

from __future__ import annotations

from typing import List, Tuple

from .localization import LanguageTable, display_name
from .schema import Item

DEFAULT_CATEGORY = "misc"

# Scanned in order; the first keyword found in the namespace-stripped id wins.
# "pickaxe" must stay ahead of "axe".
CATEGORY_KEYWORDS: List[Tuple[str, str]] = [
    ("planks", "building_blocks"),
    ("log", "building_blocks"),
    ("stone", "building_blocks"),
    ("dirt", "building_blocks"),
    ("cobblestone", "building_blocks"),
    ("sand", "building_blocks"),
    ("gravel", "building_blocks"),
    ("wool", "building_blocks"),
    ("glass", "building_blocks"),
    ("concrete", "building_blocks"),
    ("terracotta", "building_blocks"),
    ("sword", "combat"),
    ("bow", "combat"),
    ("arrow", "combat"),
    ("shield", "combat"),
    ("armor", "combat"),
    ("helmet", "combat"),
    ("chestplate", "combat"),
    ("leggings", "combat"),
    ("boots", "combat"),
    ("pickaxe", "tools"),
    ("axe", "tools"),
    ("shovel", "tools"),
    ("hoe", "tools"),
    ("fishing_rod", "tools"),
    ("flint_and_steel", "tools"),
    ("bucket", "tools"),
    ("shears", "tools"),
    ("food", "food"),
    ("apple", "food"),
    ("bread", "food"),
    ("porkchop", "food"),
    ("beef", "food"),
    ("chicken", "food"),
    ("carrot", "food"),
    ("potato", "food"),
    ("melon", "food"),
    ("redstone", "redstone"),
    ("repeater", "redstone"),
    ("comparator", "redstone"),
    ("piston", "redstone"),
    ("observer", "redstone"),
    ("hopper", "redstone"),
    ("dropper", "redstone"),
    ("dispenser", "redstone"),
    ("rail", "transportation"),
    ("minecart", "transportation"),
    ("boat", "transportation"),
    ("saddle", "transportation"),
    ("potion", "brewing"),
    ("brewing_stand", "brewing"),
    ("cauldron", "brewing"),
    ("enchanting_table", "misc"),
    ("anvil", "misc"),
    ("beacon", "misc"),
    ("torch", "misc"),
    ("chest", "misc"),
    ("furnace", "misc"),
    ("crafting_table", "misc"),
]


def strip_namespace(item_id: str) -> str:
    return item_id.rpartition(":")[2]


def categorize(item_id: str) -> str:
    """First-match keyword classification; DEFAULT_CATEGORY when nothing matches."""
    name = strip_namespace(item_id).lower()
    for keyword, category in CATEGORY_KEYWORDS:
        if keyword in name:
            return category
    return DEFAULT_CATEGORY


def icon_ref(item_id: str) -> str:
    """minecraft:oak_planks -> icons/minecraft/oak_planks.png"""
    return f"icons/{item_id.replace(':', '/', 1)}.png"


def make_item(item_id: str, version: str, lang: LanguageTable) -> Item:
    """Build a fresh Item as first observed in `version`."""
    return Item(
        id=item_id,
        display_name=display_name(item_id, lang),
        category=categorize(item_id),
        icon_ref=icon_ref(item_id),
        version_added=version,
    )
