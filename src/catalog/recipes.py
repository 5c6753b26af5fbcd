# raw recipe record -> canonical Recipe
# src/catalog/recipes.py
"""
Recipe parsing.

parse_recipe() turns one raw recipe JSON object (either era) into a
canonical Recipe. Dispatch is on the namespace-stripped `type`:

  crafting_shaped      -> shaped
  crafting_shapeless   -> shapeless
  smelting / blasting / smoking / campfire_cooking -> cooking family
  stonecutting         -> stonecutting
  smithing / smithing_transform / smithing_trim    -> smithing family

Unrecognized types (special crafting, mod types) are tolerated: the
recipe keeps id/kind/versions/group/result and no payload.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from .identifiers import Era, classify_era
from .ingredients import resolve_ingredient, resolve_item_ref
from .schema import (
    BLASTING,
    CAMPFIRE,
    DEFAULT_COOKING_TIME,
    DEFAULT_EXPERIENCE,
    SHAPED,
    SHAPELESS,
    SMELTING,
    SMITHING,
    SMITHING_TRANSFORM,
    SMITHING_TRIM,
    SMOKING,
    STONECUTTING,
    AlternativesIngredient,
    Ingredient,
    Recipe,
    RecipeResult,
    TagIngredient,
)
from .tags import TagTable, tag_key

logger = logging.getLogger(__name__)

GRID_SIZE = 3

TYPE_TO_KIND: Dict[str, str] = {
    "crafting_shaped": SHAPED,
    "crafting_shapeless": SHAPELESS,
    "smelting": SMELTING,
    "blasting": BLASTING,
    "smoking": SMOKING,
    "campfire_cooking": CAMPFIRE,
    "stonecutting": STONECUTTING,
    "smithing": SMITHING,
    "smithing_transform": SMITHING_TRANSFORM,
    "smithing_trim": SMITHING_TRIM,
}


def _strip_type(raw_type: Any) -> str:
    if not isinstance(raw_type, str) or not raw_type:
        return "unknown"
    return raw_type.rpartition(":")[2]


def _count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return 1
    return int(value)


def _parse_result(raw_result: Any, era: Era) -> Optional[RecipeResult]:
    """String results count 1; object results read `count` (default 1)."""
    item = resolve_item_ref(raw_result, era)
    if item is None:
        return None
    if isinstance(raw_result, dict):
        return RecipeResult(item=item, count=_count(raw_result.get("count")))
    return RecipeResult(item=item, count=1)


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------

def build_grid(
    pattern: List[str],
    key: Dict[str, Optional[Ingredient]],
) -> List[List[Optional[Ingredient]]]:
    """
    Lay a shaped pattern out as a 3x3 grid.

    Blank and unknown glyphs become None. Rows and cells are appended
    (never prepended) until the grid is 3x3, so content stays top-left.
    """
    grid: List[List[Optional[Ingredient]]] = []
    for row in pattern:
        grid.append([None if glyph == " " else key.get(glyph) for glyph in row])

    while len(grid) < GRID_SIZE:
        grid.append([None] * GRID_SIZE)
    for row in grid:
        while len(row) < GRID_SIZE:
            row.append(None)
    return grid


# ---------------------------------------------------------------------------
# Per-kind payloads
# ---------------------------------------------------------------------------

def _parse_shaped(recipe: Recipe, raw: Dict[str, Any], era: Era) -> None:
    raw_pattern = raw.get("pattern")
    pattern = [row for row in raw_pattern if isinstance(row, str)] if isinstance(raw_pattern, list) else []

    raw_key = raw.get("key")
    key: Dict[str, Optional[Ingredient]] = {}
    if isinstance(raw_key, dict):
        for glyph, entry in raw_key.items():
            key[str(glyph)] = resolve_ingredient(entry, era)

    recipe.pattern = pattern
    recipe.key = key
    recipe.grid = build_grid(pattern, key)


def _parse_shapeless(recipe: Recipe, raw: Dict[str, Any], era: Era) -> None:
    entries = raw.get("ingredients")
    if entries is None and isinstance(raw.get("ingredient"), list):
        # legacy spelling
        entries = raw.get("ingredient")
    if not isinstance(entries, list):
        entries = []
    recipe.ingredients = [resolve_ingredient(entry, era) for entry in entries]


def _parse_cooking(recipe: Recipe, raw: Dict[str, Any], era: Era) -> None:
    recipe.ingredient = resolve_ingredient(raw.get("ingredient"), era)
    recipe.experience = raw.get("experience") or DEFAULT_EXPERIENCE
    recipe.cooking_time = raw.get("cookingtime") or DEFAULT_COOKING_TIME


def _parse_stonecutting(recipe: Recipe, raw: Dict[str, Any], era: Era) -> None:
    recipe.ingredient = resolve_ingredient(raw.get("ingredient"), era)
    item = resolve_item_ref(raw.get("result"), era)
    recipe.result = RecipeResult(item=item, count=_count(raw.get("count"))) if item else None


def _parse_smithing(recipe: Recipe, raw: Dict[str, Any], era: Era) -> None:
    recipe.base = resolve_ingredient(raw.get("base"), era)
    recipe.addition = resolve_ingredient(raw.get("addition"), era)
    if "template" in raw:
        recipe.has_template = True
        recipe.template = resolve_ingredient(raw.get("template"), era)


_PAYLOAD_PARSERS: Dict[str, Callable[[Recipe, Dict[str, Any], Era], None]] = {
    SHAPED: _parse_shaped,
    SHAPELESS: _parse_shapeless,
    SMELTING: _parse_cooking,
    BLASTING: _parse_cooking,
    SMOKING: _parse_cooking,
    CAMPFIRE: _parse_cooking,
    STONECUTTING: _parse_stonecutting,
    SMITHING: _parse_smithing,
    SMITHING_TRANSFORM: _parse_smithing,
    SMITHING_TRIM: _parse_smithing,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_recipe(
    raw: Dict[str, Any],
    recipe_id: str,
    version: str,
    tag_table: Optional[TagTable] = None,
) -> Recipe:
    """
    Convert one raw recipe record into a Recipe observed in `version`.

    `tag_table` is only consulted to report tag references the version
    does not define; expansion happens in the catalog builder.
    """
    era = classify_era(version)
    stripped = _strip_type(raw.get("type"))
    kind = TYPE_TO_KIND.get(stripped, stripped)

    group = raw.get("group")
    recipe = Recipe(
        id=recipe_id,
        kind=kind,
        versions=[version],
        group=group if isinstance(group, str) and group else None,
        result=_parse_result(raw.get("result"), era),
    )

    payload_parser = _PAYLOAD_PARSERS.get(kind) if stripped in TYPE_TO_KIND else None
    if payload_parser is None:
        logger.debug("Recipe %s has unrecognized type %r; keeping header only", recipe_id, raw.get("type"))
        return recipe

    payload_parser(recipe, raw, era)

    if tag_table is not None and era is Era.MODERN:
        for tag in _iter_tags(iter_ingredient_slots(recipe)):
            if tag_key(tag) not in tag_table:
                logger.debug("Recipe %s references unknown tag %s in %s", recipe_id, tag, version)

    return recipe


def iter_ingredient_slots(
    recipe: Recipe,
    include_template: bool = True,
) -> Iterator[Optional[Ingredient]]:
    """
    Yield every ingredient-bearing value of a recipe, in a fixed order:
    ingredients, ingredient, shaped key values, base, addition, template.
    """
    if recipe.ingredients:
        yield from recipe.ingredients
    if recipe.ingredient is not None:
        yield recipe.ingredient
    if recipe.key:
        yield from recipe.key.values()
    if recipe.base is not None:
        yield recipe.base
    if recipe.addition is not None:
        yield recipe.addition
    if include_template and recipe.has_template and recipe.template is not None:
        yield recipe.template


def _iter_tags(slots: Iterator[Optional[Ingredient]]) -> Iterator[str]:
    for slot in slots:
        if isinstance(slot, TagIngredient):
            yield slot.tag
        elif isinstance(slot, AlternativesIngredient):
            yield from _iter_tags(iter(slot.options))
