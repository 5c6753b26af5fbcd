# src/catalog/builder.py
"""
Catalog builder: drives parsing across versions and owns run state.

One CatalogBuilder holds the item registry and the flat list of parsed
recipes for exactly one run. Versions are processed strictly in the
order given; the first version that observes an item fixes its display
name, category and version_added.

Typical use:

    catalog = build_catalog_from_root(Path(".cache/extracted"), versions)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from .assets import iter_json_files, read_json, recipes_dir
from .finalize import finalize
from .identifiers import Era, classify_era, legacy_aliases
from .items import make_item
from .localization import LanguageTable, load_language_table
from .recipes import iter_ingredient_slots, parse_recipe
from .schema import Catalog, Item, Recipe
from .tags import TagTable, expand_to_items, load_tag_table

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "minecraft"
DEFAULT_LANGUAGE = "en_us"


class CatalogBuilder:
    """Accumulates items and parsed recipes for a single pipeline run."""

    def __init__(
        self,
        namespace: str = DEFAULT_NAMESPACE,
        language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self.namespace = namespace
        self.language = language
        self._items: Dict[str, Item] = {}
        self._recipes: List[Recipe] = []

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def register_item(self, item_id: str, version: str, lang: LanguageTable) -> Item:
        """Return the registered Item, creating it on first sight."""
        item = self._items.get(item_id)
        if item is None:
            item = make_item(item_id, version, lang)
            self._items[item_id] = item
        return item

    def _register_aliases(self, raw: Mapping, era: Era) -> None:
        for legacy_id, canonical in legacy_aliases(raw, era):
            item = self._items.get(canonical)
            if item is not None and legacy_id not in item.aliases:
                item.aliases.append(legacy_id)

    # ------------------------------------------------------------------
    # Per-version processing
    # ------------------------------------------------------------------

    def add_recipe(
        self,
        raw: Mapping,
        recipe_id: str,
        version: str,
        lang: LanguageTable,
        tags: TagTable,
    ) -> Recipe:
        """Parse one raw record and register every item it mentions."""
        era = classify_era(version)
        recipe = parse_recipe(dict(raw), recipe_id, version, tags)

        if recipe.result is not None:
            self.register_item(recipe.result.item, version, lang)

        for slot in iter_ingredient_slots(recipe):
            for item_id in expand_to_items(slot, tags):
                self.register_item(item_id, version, lang)

        self._register_aliases(raw, era)
        self._recipes.append(recipe)
        return recipe

    def add_version(self, version: str, version_dir: Optional[Path]) -> int:
        """
        Process every recipe file of one version directory.

        Returns the number of recipes parsed. A missing directory is
        logged and skipped.
        """
        if version_dir is None or not version_dir.is_dir():
            logger.warning("No extracted data for %s", version)
            return 0

        era = classify_era(version)
        logger.info("Processing %s (%s era)", version, era.value)

        lang = load_language_table(version_dir, era, self.namespace, self.language)
        tags = load_tag_table(version_dir, era, self.namespace)

        root = recipes_dir(version_dir, era, self.namespace)
        if root is None:
            logger.warning("No recipe directory for %s", version)
            return 0

        count = 0
        for name, path in iter_json_files(root):
            raw = read_json(path)
            if raw is None:
                continue
            if not isinstance(raw, dict):
                logger.warning("Skipping recipe %s: not a JSON object", path)
                continue
            self.add_recipe(raw, f"{self.namespace}:{name}", version, lang, tags)
            count += 1

        logger.info("Parsed %d recipes for %s", count, version)
        return count

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @property
    def items(self) -> List[Item]:
        return list(self._items.values())

    @property
    def recipes(self) -> List[Recipe]:
        return list(self._recipes)

    def finish(self, versions: Sequence[str]) -> Catalog:
        recipes, uses = finalize(self._recipes)
        return Catalog(
            versions=list(versions),
            items=self.items,
            recipes=recipes,
            uses=uses,
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_catalog(
    versions: Sequence[str],
    assets_by_version: Mapping[str, Path],
    namespace: str = DEFAULT_NAMESPACE,
    language: str = DEFAULT_LANGUAGE,
) -> Catalog:
    """Build a Catalog from explicit per-version asset directories."""
    builder = CatalogBuilder(namespace=namespace, language=language)
    for version in versions:
        builder.add_version(version, assets_by_version.get(version))
    return builder.finish(versions)


def build_catalog_from_root(
    input_root: Path,
    versions: Sequence[str],
    namespace: str = DEFAULT_NAMESPACE,
    language: str = DEFAULT_LANGUAGE,
) -> Catalog:
    """
    Build a Catalog from `input_root/<version>/` directories.

    Raises FileNotFoundError if input_root itself does not exist; a
    missing per-version directory is only a warning.
    """
    if not input_root.is_dir():
        raise FileNotFoundError(f"Input root does not exist: {input_root}")

    assets = {version: input_root / version for version in versions}
    return build_catalog(versions, assets, namespace=namespace, language=language)
