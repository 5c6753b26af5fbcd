# catalog package
# src/catalog/__init__.py

"""
Version-aware item/recipe catalog pipeline.

This module provides a small, stable surface for consumers:

- build_catalog(versions, assets_by_version) -> Catalog
- build_catalog_from_root(input_root, versions) -> Catalog
- CatalogBuilder                                 -> per-run accumulator
- parse_recipe / resolve_ingredient / normalize_item_id / expand_to_items
- finalize(recipes) -> (deduplicated recipes, uses index)
- write_catalog / pack_catalog                   -> output documents
"""

from __future__ import annotations

from .builder import CatalogBuilder, build_catalog, build_catalog_from_root
from .finalize import finalize
from .identifiers import Era, classify_era, normalize_item_id
from .ingredients import resolve_ingredient
from .packing import pack_catalog
from .recipes import parse_recipe
from .schema import (
    AlternativesIngredient,
    Catalog,
    Ingredient,
    Item,
    Recipe,
    RecipeResult,
    SingleIngredient,
    TagIngredient,
)
from .tags import expand_to_items
from .writer import write_catalog

__all__ = [
    "AlternativesIngredient",
    "Catalog",
    "CatalogBuilder",
    "Era",
    "Ingredient",
    "Item",
    "Recipe",
    "RecipeResult",
    "SingleIngredient",
    "TagIngredient",
    "build_catalog",
    "build_catalog_from_root",
    "classify_era",
    "expand_to_items",
    "finalize",
    "normalize_item_id",
    "pack_catalog",
    "parse_recipe",
    "resolve_ingredient",
    "write_catalog",
]
