# Era classification and legacy identifier remapping
# src/catalog/identifiers.py
"""
Identifier normalization across the two schema eras.

Pre-1.13 releases ("legacy" era) address item variants with a numeric
metadata suffix: "minecraft:planks:1". Later releases ("modern" era)
give every variant its own id: "minecraft:spruce_planks".

normalize_item_id() folds the former into the latter using a fixed
table. The table is keyed by "name:meta" and applied under whatever
namespace the id carries, so "game:planks:1" maps to "game:spruce_planks".
Variants missing from the table lose their suffix.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator, List, Optional, Tuple


class Era(str, Enum):
    LEGACY = "legacy"
    MODERN = "modern"


def version_key(version: str) -> Optional[Tuple[int, ...]]:
    """
    Numeric sort key for a dotted release id ("1.12.2" -> (1, 12, 2)).

    Returns None for ids that are not purely numeric (snapshots, test labels).
    """
    parts = str(version).strip().split(".")
    if not parts or not all(p.isdigit() for p in parts):
        return None
    return tuple(int(p) for p in parts)


def classify_era(version: str) -> Era:
    """Major 1 with minor <= 12 is legacy; everything else is modern."""
    parts = str(version).strip().split(".")
    try:
        major = int(parts[0])
        minor = int(parts[1])
    except (IndexError, ValueError):
        return Era.MODERN
    if major == 1 and minor <= 12:
        return Era.LEGACY
    return Era.MODERN


# ---------------------------------------------------------------------------
# Legacy table
# ---------------------------------------------------------------------------

_WOOL_COLORS = [
    "white", "orange", "magenta", "light_blue",
    "yellow", "lime", "pink", "gray",
    "light_gray", "cyan", "purple", "blue",
    "brown", "green", "red", "black",
]

LEGACY_ID_MAP = {
    "planks:0": "oak_planks",
    "planks:1": "spruce_planks",
    "planks:2": "birch_planks",
    "planks:3": "jungle_planks",
    "planks:4": "acacia_planks",
    "planks:5": "dark_oak_planks",
    "log:0": "oak_log",
    "log:1": "spruce_log",
    "log:2": "birch_log",
    "log:3": "jungle_log",
    "log2:0": "acacia_log",
    "log2:1": "dark_oak_log",
    "stone:0": "stone",
    "stone:1": "granite",
    "stone:2": "polished_granite",
    "stone:3": "diorite",
    "stone:4": "polished_diorite",
    "stone:5": "andesite",
    "stone:6": "polished_andesite",
    "sand:0": "sand",
    "sand:1": "red_sand",
    "dye:0": "ink_sac",
    "dye:3": "cocoa_beans",
    "dye:4": "lapis_lazuli",
    "dye:15": "bone_meal",
    "coal:0": "coal",
    "coal:1": "charcoal",
}
LEGACY_ID_MAP.update(
    {f"wool:{meta}": f"{color}_wool" for meta, color in enumerate(_WOOL_COLORS)}
)


def _split_variant(item_id: str) -> Optional[Tuple[str, str, str]]:
    parts = item_id.split(":")
    if len(parts) != 3:
        return None
    namespace, name, meta = parts
    if not namespace or not name or not meta.isdigit():
        return None
    return namespace, name, meta


def is_variant_id(item_id: Any) -> bool:
    """True for "namespace:name:meta" strings with a numeric meta."""
    return isinstance(item_id, str) and _split_variant(item_id) is not None


def normalize_item_id(item_id: str, era: Era) -> str:
    """Map a legacy variant id to its canonical id; pass anything else through."""
    if era is not Era.LEGACY:
        return item_id

    split = _split_variant(item_id)
    if split is None:
        return item_id

    namespace, name, meta = split
    mapped = LEGACY_ID_MAP.get(f"{name}:{int(meta)}")
    if mapped:
        return f"{namespace}:{mapped}"
    return f"{namespace}:{name}"


def with_legacy_data(item_id: str, data: Any) -> str:
    """
    Fold a legacy {"item": ..., "data": N} pair into "item:N".

    Non-integer data values are ignored.
    """
    if isinstance(data, bool) or not isinstance(data, int) or data < 0:
        return item_id
    if is_variant_id(item_id):
        return item_id
    return f"{item_id}:{data}"


# ---------------------------------------------------------------------------
# Alias discovery
# ---------------------------------------------------------------------------

def _iter_variant_ids(node: Any) -> Iterator[str]:
    if isinstance(node, str):
        if is_variant_id(node):
            yield node
    elif isinstance(node, dict):
        item = node.get("item")
        if isinstance(item, str) and "data" in node:
            composed = with_legacy_data(item, node.get("data"))
            if is_variant_id(composed):
                yield composed
        for value in node.values():
            yield from _iter_variant_ids(value)
    elif isinstance(node, list):
        for value in node:
            yield from _iter_variant_ids(value)


def legacy_aliases(raw: Any, era: Era) -> List[Tuple[str, str]]:
    """
    Return (legacy_id, canonical_id) pairs for every suffixed id in a raw
    record that normalization rewrites. Empty outside the legacy era.
    """
    if era is not Era.LEGACY:
        return []

    pairs: List[Tuple[str, str]] = []
    seen = set()
    for legacy_id in _iter_variant_ids(raw):
        if legacy_id in seen:
            continue
        seen.add(legacy_id)
        canonical = normalize_item_id(legacy_id, era)
        if canonical != legacy_id:
            pairs.append((legacy_id, canonical))
    return pairs
