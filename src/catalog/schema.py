# Item, Ingredient, Recipe and Catalog dataclasses
# src/catalog/schema.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union


# ---------------------------------------------------------------------------
# Recipe kinds
# ---------------------------------------------------------------------------

SHAPED = "shaped"
SHAPELESS = "shapeless"
SMELTING = "smelting"
BLASTING = "blasting"
SMOKING = "smoking"
CAMPFIRE = "campfire"
STONECUTTING = "stonecutting"
SMITHING = "smithing"
SMITHING_TRANSFORM = "smithing_transform"
SMITHING_TRIM = "smithing_trim"

COOKING_KINDS = (SMELTING, BLASTING, SMOKING, CAMPFIRE)
SMITHING_KINDS = (SMITHING, SMITHING_TRANSFORM, SMITHING_TRIM)

KNOWN_KINDS = (SHAPED, SHAPELESS) + COOKING_KINDS + (STONECUTTING,) + SMITHING_KINDS

DEFAULT_EXPERIENCE = 0
DEFAULT_COOKING_TIME = 200


# ---------------------------------------------------------------------------
# Ingredients
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SingleIngredient:
    """Exactly one canonical item id."""
    item: str

    def to_dict(self) -> Dict[str, Any]:
        return {"item": self.item}


@dataclass(frozen=True)
class TagIngredient:
    """
    Unresolved reference to an item tag ("#minecraft:planks").

    Only meaningful together with the tag table of one specific version;
    see catalog.tags.expand_to_items.
    """
    tag: str

    def to_dict(self) -> Dict[str, Any]:
        return {"tag": self.tag}


@dataclass(frozen=True)
class AlternativesIngredient:
    """
    Any one of the nested options satisfies the slot.

    Options that failed to resolve are kept as None entries so the list
    stays positionally faithful to the raw record.
    """
    options: Tuple[Optional["Ingredient"], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"alternatives": [ingredient_to_dict(o) for o in self.options]}


Ingredient = Union[SingleIngredient, TagIngredient, AlternativesIngredient]


def ingredient_to_dict(ingredient: Optional[Ingredient]) -> Optional[Dict[str, Any]]:
    """Serialize an Ingredient (or None) into its JSON shape."""
    if ingredient is None:
        return None
    return ingredient.to_dict()


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------

@dataclass
class Item:
    """
    One distinct craftable/usable game object across its lifetime.

    - id: canonical namespaced identifier ("minecraft:oak_planks")
    - display_name: label from the earliest version's localization table
    - category: coarse keyword-derived classification
    - icon_ref: deterministic path token; the icon stage resolves textures from it
    - version_added: earliest version in which the item was observed
    - version_removed: always None here; reserved for availability diffing
    - aliases: legacy identifiers folded into this item by remapping
    """
    id: str
    display_name: str
    category: str
    icon_ref: str
    version_added: str
    version_removed: Optional[str] = None
    aliases: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "displayName": self.display_name,
            "category": self.category,
            "iconRef": self.icon_ref,
            "versionAdded": self.version_added,
            "versionRemoved": self.version_removed,
            "aliases": list(self.aliases),
        }


# ---------------------------------------------------------------------------
# Recipes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RecipeResult:
    item: str
    count: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {"item": self.item, "count": self.count}


@dataclass
class Recipe:
    """
    One crafting/processing definition in canonical form.

    Only the payload fields matching `kind` are meaningful:

      shaped             -> pattern, key, grid
      shapeless          -> ingredients
      cooking family     -> ingredient, experience, cooking_time
      stonecutting       -> ingredient
      smithing family    -> base, addition, template (only if has_template)

    A recipe with an unrecognized kind carries none of them.

    `has_template` separates "no template slot" (False) from "template
    present but unresolved" (True with template=None).
    """
    id: str
    kind: str
    versions: List[str]
    group: Optional[str] = None
    result: Optional[RecipeResult] = None

    pattern: Optional[List[str]] = None
    key: Optional[Dict[str, Optional[Ingredient]]] = None
    grid: Optional[List[List[Optional[Ingredient]]]] = None

    ingredients: Optional[List[Optional[Ingredient]]] = None

    ingredient: Optional[Ingredient] = None
    experience: Optional[float] = None
    cooking_time: Optional[int] = None

    base: Optional[Ingredient] = None
    addition: Optional[Ingredient] = None
    template: Optional[Ingredient] = None
    has_template: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "kind": self.kind,
            "versions": list(self.versions),
            "group": self.group,
            "result": self.result.to_dict() if self.result else None,
        }

        if self.kind == SHAPED:
            data["pattern"] = list(self.pattern or [])
            data["key"] = {
                glyph: ingredient_to_dict(ing)
                for glyph, ing in (self.key or {}).items()
            }
            data["grid"] = [
                [ingredient_to_dict(cell) for cell in row]
                for row in (self.grid or [])
            ]
        elif self.kind == SHAPELESS:
            data["ingredients"] = [ingredient_to_dict(i) for i in (self.ingredients or [])]
        elif self.kind in COOKING_KINDS:
            data["ingredient"] = ingredient_to_dict(self.ingredient)
            data["experience"] = self.experience
            data["cookingTime"] = self.cooking_time
        elif self.kind == STONECUTTING:
            data["ingredient"] = ingredient_to_dict(self.ingredient)
        elif self.kind in SMITHING_KINDS:
            data["base"] = ingredient_to_dict(self.base)
            data["addition"] = ingredient_to_dict(self.addition)
            if self.has_template:
                data["template"] = ingredient_to_dict(self.template)

        return data


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@dataclass
class Catalog:
    """
    Top-level artifact of one pipeline run.

    - versions: release identifiers, oldest -> newest
    - items: discovery order
    - recipes: deduplicated, version-annotated
    - uses: ingredient item id -> item ids it helps produce
    """
    versions: List[str]
    items: List[Item] = field(default_factory=list)
    recipes: List[Recipe] = field(default_factory=list)
    uses: Dict[str, List[str]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "versions": list(self.versions),
            "items": [item.to_dict() for item in self.items],
            "recipes": [recipe.to_dict() for recipe in self.recipes],
            "uses": {k: list(v) for k, v in self.uses.items()},
        }
