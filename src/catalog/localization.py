# src/catalog/localization.py
"""
Localization tables and display-name resolution.

Legacy releases ship `key=value` .lang files; modern releases ship a flat
JSON object. Both become a plain Dict[str, str].
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from .assets import language_file, read_json, read_text
from .identifiers import Era

logger = logging.getLogger(__name__)

LanguageTable = Dict[str, str]


def parse_lang_text(text: str) -> LanguageTable:
    """
    Parse the legacy `key=value` format.

    Blank lines and lines starting with '#' are skipped. Only the first '='
    splits, so values may contain '='. Lines without a key or value are ignored.
    """
    table: LanguageTable = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        value = value.strip()
        if sep and key and value:
            table[key] = value
    return table


def load_language_table(
    version_dir: Path,
    era: Era,
    namespace: str,
    language: str = "en_us",
) -> LanguageTable:
    """Load one version's localization table; missing or broken -> {} with a warning."""
    path = language_file(version_dir, era, namespace, language)
    if path is None:
        logger.warning("Language file not found for %s", version_dir.name)
        return {}

    if era is Era.LEGACY:
        text = read_text(path)
        return parse_lang_text(text) if text is not None else {}

    data = read_json(path)
    if not isinstance(data, dict):
        if data is not None:
            logger.warning("Language file %s is not a JSON object", path)
        return {}
    return {str(k): v for k, v in data.items() if isinstance(v, str)}


def _title_case(name: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in name.split("_"))


def display_name(item_id: str, table: LanguageTable) -> str:
    """
    Human-readable label for an item id.

    Lookup order: item.<ns>.<name>, block.<ns>.<name>, item.<name>.name,
    tile.<name>.name; then a title-cased label built from the name.
    """
    namespace, _, name = item_id.rpartition(":")
    dotted = f"{namespace}.{name}" if namespace else name

    for key in (
        f"item.{dotted}",
        f"block.{dotted}",
        f"item.{name}.name",
        f"tile.{name}.name",
    ):
        value = table.get(key)
        if value:
            return value

    return _title_case(name)
