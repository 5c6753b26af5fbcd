# compact, short-key variant of the catalog document
# src/catalog/packing.py
"""
Pack a catalog document into the compact form embedded by the widget.

Input is the serialized catalog (the dict written by catalog.writer),
not the dataclasses, so packing can run as an independent stage on a
previously written index.json.

Short keys:

  top level: v (versions), i (items), r (recipes), u (uses)
  item:      id, n (displayName), c (category), ic (icon token),
             va / vr (indices into v; vr = -1 when unset), a (aliases)
  recipe:    id, t (kind), rs (result), v (versions or "first–last"),
             in, p, k, g, i, xp, ct, b, a, tm, gr

Only fields present on the recipe are emitted.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Union

RANGE_SEPARATOR = "–"
MIN_RANGE_LENGTH = 4

_RECIPE_FIELDS = (
    ("ingredients", "in"),
    ("pattern", "p"),
    ("key", "k"),
    ("grid", "g"),
    ("ingredient", "i"),
    ("experience", "xp"),
    ("cookingTime", "ct"),
    ("base", "b"),
    ("addition", "a"),
    ("template", "tm"),
    ("group", "gr"),
)


def compress_version_ranges(
    versions: Sequence[str],
    all_versions: Sequence[str],
) -> Union[str, List[str]]:
    """
    Collapse a recipe's versions into "first–last" when they are at least
    MIN_RANGE_LENGTH versions contiguous in `all_versions` (release order).

    Anything else, including versions unknown to `all_versions`, is
    returned as a plain list.
    """
    versions = list(versions)
    if len(versions) < MIN_RANGE_LENGTH:
        return versions

    position = {v: idx for idx, v in enumerate(all_versions)}
    if any(v not in position for v in versions):
        return versions

    indices = sorted(position[v] for v in set(versions))
    if len(indices) != len(versions):
        return versions
    if indices[-1] - indices[0] != len(indices) - 1:
        return versions

    return f"{all_versions[indices[0]]}{RANGE_SEPARATOR}{all_versions[indices[-1]]}"


def _icon_token(icon_ref: str) -> str:
    token = icon_ref
    if token.startswith("icons/"):
        token = token[len("icons/"):]
    if token.endswith(".png"):
        token = token[: -len(".png")]
    return token


def _version_index(all_versions: List[str], version: Any) -> int:
    if version is None or version not in all_versions:
        return -1
    return all_versions.index(version)


def pack_item(item: Dict[str, Any], all_versions: List[str]) -> Dict[str, Any]:
    return {
        "id": item.get("id"),
        "n": item.get("displayName"),
        "c": item.get("category"),
        "ic": _icon_token(item.get("iconRef") or ""),
        "va": _version_index(all_versions, item.get("versionAdded")),
        "vr": _version_index(all_versions, item.get("versionRemoved")),
        "a": list(item.get("aliases") or []),
    }


def pack_recipe(recipe: Dict[str, Any], all_versions: List[str]) -> Dict[str, Any]:
    packed: Dict[str, Any] = {
        "id": recipe.get("id"),
        "t": recipe.get("kind"),
        "rs": recipe.get("result"),
        "v": compress_version_ranges(recipe.get("versions") or [], all_versions),
    }
    for long_key, short_key in _RECIPE_FIELDS:
        if recipe.get(long_key) is not None:
            packed[short_key] = recipe[long_key]
        elif long_key == "template" and long_key in recipe:
            # present-but-unresolved template slot stays visible
            packed[short_key] = None
    return packed


def pack_catalog(document: Dict[str, Any]) -> Dict[str, Any]:
    all_versions = list(document.get("versions") or [])
    return {
        "v": all_versions,
        "i": [pack_item(item, all_versions) for item in document.get("items") or []],
        "r": [pack_recipe(recipe, all_versions) for recipe in document.get("recipes") or []],
        "u": dict(document.get("uses") or {}),
    }
