# raw ingredient specification -> Ingredient
# src/catalog/ingredients.py

from __future__ import annotations

from typing import Any, Optional

from .identifiers import Era, normalize_item_id, with_legacy_data
from .schema import AlternativesIngredient, Ingredient, SingleIngredient, TagIngredient


def resolve_item_ref(raw: Any, era: Era) -> Optional[str]:
    """
    Resolve a bare item reference (string or {"item"/"id": ...} object)
    into a canonical item id, or None if the shape carries no item.

    Shared by ingredient and result parsing.
    """
    if isinstance(raw, str):
        return normalize_item_id(raw, era) if raw else None

    if isinstance(raw, dict):
        item = raw.get("item")
        if not isinstance(item, str) or not item:
            item = raw.get("id")
        if not isinstance(item, str) or not item:
            return None
        if era is Era.LEGACY and "data" in raw:
            item = with_legacy_data(item, raw.get("data"))
        return normalize_item_id(item, era)

    return None


def resolve_ingredient(raw: Any, era: Era) -> Optional[Ingredient]:
    """
    Parse one ingredient specification into an Ingredient.

    Accepted shapes:

      "ns:item"                      -> SingleIngredient
      "#ns:tag"                      -> TagIngredient
      {"item": "ns:item"}            -> SingleIngredient (legacy "data" folded in)
      {"tag": "ns:tag"}              -> TagIngredient, tag kept as written
      [raw, raw, ...]                -> AlternativesIngredient, unresolved
                                        entries kept as None

    Anything else (None, "", {}, numbers, ore-dictionary objects) yields None.
    Pure: the same raw/era always produces an equal result.
    """
    if isinstance(raw, list):
        return AlternativesIngredient(
            options=tuple(resolve_ingredient(entry, era) for entry in raw)
        )

    if isinstance(raw, str):
        if not raw:
            return None
        if raw.startswith("#"):
            return TagIngredient(tag=raw)
        return SingleIngredient(item=normalize_item_id(raw, era))

    if isinstance(raw, dict):
        item = raw.get("item")
        if isinstance(item, str) and item:
            return SingleIngredient(item=resolve_item_ref(raw, era))
        tag = raw.get("tag")
        if isinstance(tag, str) and tag:
            return TagIngredient(tag=tag)

    return None
