# cross-version recipe dedup + reverse uses index
# src/catalog/finalize.py
"""
Run once over every recipe parsed during a build.

Two recipes are the same logical recipe when kind, result and every
ingredient-bearing payload field are structurally equal. `id` and
`versions` are not part of that identity, so a recipe renamed between
releases still merges. List order (ingredients, pattern rows, grid) is
part of the identity; the shaped key is compared as a mapping.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Hashable, List, Tuple

from .recipes import iter_ingredient_slots
from .schema import Recipe
from .tags import expand_to_items

logger = logging.getLogger(__name__)


def recipe_identity(recipe: Recipe) -> Tuple[Hashable, ...]:
    """Structural dedup key built from a fixed field order."""
    return (
        recipe.kind,
        recipe.result,
        tuple(recipe.ingredients) if recipe.ingredients is not None else None,
        tuple(recipe.pattern) if recipe.pattern is not None else None,
        tuple(sorted(recipe.key.items())) if recipe.key is not None else None,
        recipe.ingredient,
        recipe.base,
        recipe.addition,
        (recipe.has_template, recipe.template),
    )


def dedupe_recipes(raw_recipes: List[Recipe]) -> List[Recipe]:
    """
    Merge structurally identical recipes.

    The first-encountered record survives with its own id and fields;
    its versions become the sorted union of every merged record's versions.
    Input records are not modified.
    """
    merged: Dict[Tuple[Hashable, ...], Recipe] = {}
    for recipe in raw_recipes:
        identity = recipe_identity(recipe)
        existing = merged.get(identity)
        if existing is None:
            merged[identity] = dataclasses.replace(recipe, versions=sorted(set(recipe.versions)))
            continue
        existing.versions = sorted(set(existing.versions) | set(recipe.versions))

    logger.info("Deduplicated %d parsed recipes into %d", len(raw_recipes), len(merged))
    return list(merged.values())


def build_uses_index(recipes: List[Recipe]) -> Dict[str, List[str]]:
    """
    Reverse index: ingredient item id -> result item ids it contributes to.

    Ingredients are expanded with an empty tag table, so tag-only slots
    never contribute. Any item that appears as an ingredient gets an entry,
    even if none of its recipes have a result.
    """
    uses: Dict[str, List[str]] = {}
    for recipe in recipes:
        for slot in iter_ingredient_slots(recipe, include_template=False):
            for item_id in expand_to_items(slot, {}):
                targets = uses.setdefault(item_id, [])
                if recipe.result is not None and recipe.result.item not in targets:
                    targets.append(recipe.result.item)
    return uses


def finalize(raw_recipes: List[Recipe]) -> Tuple[List[Recipe], Dict[str, List[str]]]:
    recipes = dedupe_recipes(raw_recipes)
    return recipes, build_uses_index(recipes)
