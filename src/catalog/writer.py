# deterministic JSON output for catalog documents
# src/catalog/writer.py

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from .schema import Catalog


def dumps_document(document: Dict[str, Any], compact: bool = False) -> str:
    """
    Serialize a document dict.

    Field order comes from the to_dict() methods, so identical inputs
    give identical bytes.
    """
    if compact:
        return json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def dumps_catalog(catalog: Catalog) -> str:
    return dumps_document(catalog.to_dict())


def write_text_file(path: Path, text: str) -> Path:
    """Write UTF-8 text, creating parent directories. OSError propagates."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def write_catalog(catalog: Catalog, path: Path) -> Path:
    return write_text_file(path, dumps_catalog(catalog))


def load_catalog_document(path: Path) -> Dict[str, Any]:
    """
    Load a previously written catalog document.

    Raises FileNotFoundError if missing and ValueError if it is not a
    JSON object.
    """
    if not path.exists():
        raise FileNotFoundError(f"Catalog document not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Catalog document {path} must be a JSON object.")
    return data
