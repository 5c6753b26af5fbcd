# item tag tables + tag expansion
# src/catalog/tags.py
"""
Item tags: named, version-scoped sets of item ids.

A tag table maps "#ns:name" to the member ids listed in that tag's file.
Members are stored exactly as listed; a member that is itself a tag
reference ("#ns:logs") is kept verbatim and is not expanded further.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .assets import item_tags_dir, iter_json_files, read_json
from .identifiers import Era
from .schema import AlternativesIngredient, Ingredient, SingleIngredient, TagIngredient

logger = logging.getLogger(__name__)

TagTable = Dict[str, List[str]]


def tag_key(tag: str) -> str:
    """Canonical lookup key: exactly one leading '#'."""
    return "#" + tag.lstrip("#")


def _dedup_preserve(seq: List[str]) -> List[str]:
    out: List[str] = []
    seen = set()
    for x in seq:
        if x in seen:
            continue
        seen.add(x)
        out.append(x)
    return out


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def _tag_members(data: Any) -> List[str]:
    """
    Extract member ids from one tag file.

    Values may be plain strings or {"id": ..., "required": ...} objects.
    """
    if not isinstance(data, dict):
        return []
    values = data.get("values") or []
    if not isinstance(values, list):
        return []

    members: List[str] = []
    for value in values:
        if isinstance(value, str) and value:
            members.append(value)
        elif isinstance(value, dict) and isinstance(value.get("id"), str):
            members.append(value["id"])
    return members


def load_tag_table(version_dir: Path, era: Era, namespace: str) -> TagTable:
    """
    Load every item tag file of one version.

    The legacy era has no tag system, so its table is always empty.
    A missing tag directory is logged and yields an empty table.
    """
    if era is Era.LEGACY:
        return {}

    tags_dir = item_tags_dir(version_dir, era, namespace)
    if tags_dir is None:
        logger.warning("No item tag directory under %s", version_dir)
        return {}

    table: TagTable = {}
    for name, path in iter_json_files(tags_dir):
        data = read_json(path)
        if data is None:
            continue
        table[tag_key(f"{namespace}:{name}")] = _tag_members(data)

    logger.debug("Loaded %d item tags from %s", len(table), tags_dir)
    return table


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------

def expand_to_items(ingredient: Optional[Ingredient], tag_table: TagTable) -> List[str]:
    """
    Resolve an Ingredient into the concrete item ids that can fill its slot.

    Unknown tags expand to []. Result is deduplicated in first-seen order.
    """
    if ingredient is None:
        return []

    if isinstance(ingredient, SingleIngredient):
        return [ingredient.item]

    if isinstance(ingredient, TagIngredient):
        return _dedup_preserve(list(tag_table.get(tag_key(ingredient.tag), [])))

    if isinstance(ingredient, AlternativesIngredient):
        items: List[str] = []
        for option in ingredient.options:
            items.extend(expand_to_items(option, tag_table))
        return _dedup_preserve(items)

    return []
