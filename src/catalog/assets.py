# per-version asset directory layout + tolerant file readers
# src/catalog/assets.py
"""
Locate the files the pipeline reads inside one extracted version directory.

Layout by era (ns = namespace, lc = language code):

  legacy:
    assets/<ns>/recipes/*.json
    assets/<ns>/lang/<lc>.lang        (older releases spell it en_US.lang)

  modern:
    data/<ns>/recipes/*.json          (data/<ns>/recipe/ in later releases)
    data/<ns>/tags/items/**/*.json    (data/<ns>/tags/item/ in later releases)
    assets/<ns>/lang/<lc>.json

Readers never raise on bad content: a malformed file is logged and
reported as None so one broken file cannot stop a run.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator, List, Optional, Tuple

from .identifiers import Era

logger = logging.getLogger(__name__)


def _first_existing_dir(candidates: List[Path]) -> Optional[Path]:
    for path in candidates:
        if path.is_dir():
            return path
    return None


def recipes_dir(version_dir: Path, era: Era, namespace: str) -> Optional[Path]:
    if era is Era.LEGACY:
        return _first_existing_dir([version_dir / "assets" / namespace / "recipes"])
    return _first_existing_dir(
        [
            version_dir / "data" / namespace / "recipes",
            version_dir / "data" / namespace / "recipe",
        ]
    )


def item_tags_dir(version_dir: Path, era: Era, namespace: str) -> Optional[Path]:
    if era is Era.LEGACY:
        return None
    base = version_dir / "data" / namespace / "tags"
    return _first_existing_dir([base / "items", base / "item"])


def language_file(
    version_dir: Path,
    era: Era,
    namespace: str,
    language: str,
) -> Optional[Path]:
    """
    Return the localization file for this version, or None if absent.

    File names are matched case-insensitively so "en_us" finds "en_US.lang".
    """
    lang_dir = version_dir / "assets" / namespace / "lang"
    if not lang_dir.is_dir():
        return None

    suffix = ".lang" if era is Era.LEGACY else ".json"
    wanted = f"{language}{suffix}".lower()
    for path in sorted(lang_dir.iterdir()):
        if path.is_file() and path.name.lower() == wanted:
            return path
    return None


def iter_json_files(root: Path) -> Iterator[Tuple[str, Path]]:
    """
    Yield (relative_name, path) for every *.json under root, sorted by path.

    relative_name has no extension and uses "/" separators: "foo/bar".
    """
    for path in sorted(root.rglob("*.json")):
        if not path.is_file():
            continue
        rel = path.relative_to(root).with_suffix("")
        yield rel.as_posix(), path


def read_json(path: Path) -> Optional[Any]:
    """Load a JSON file; log and return None if it cannot be read or parsed."""
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Skipping unreadable JSON file %s: %r", path, exc)
        return None


def read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Skipping unreadable text file %s: %r", path, exc)
        return None
