# src/cli/build_catalog.py
"""
Build the normalized catalog document from extracted version assets.

Usage (from project root):

    (.venv) build-catalog

Reads config/catalog.yaml, processes every configured version found
under `input_root`, and writes one JSON document to `output_path`.
Exits 1 only if the input root is missing or the output cannot be written.
"""

from __future__ import annotations

import argparse
import logging
from collections import Counter
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from app.logging_config import configure_logging
from catalog.builder import build_catalog_from_root
from catalog.schema import Catalog
from catalog.writer import write_catalog
from env.loader import load_pipeline_config

logger = logging.getLogger(__name__)
console = Console()


def _summary_table(catalog: Catalog, output_path: Path) -> Table:
    table = Table(title=f"Catalog written to {output_path}", border_style="blue")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right", style="white")

    table.add_row("versions", str(len(catalog.versions)))
    table.add_row("items", str(len(catalog.items)))
    table.add_row("recipes", str(len(catalog.recipes)))
    table.add_row("items with uses", str(len(catalog.uses)))

    kinds = Counter(recipe.kind for recipe in catalog.recipes)
    for kind, count in sorted(kinds.items()):
        table.add_row(f"  {kind}", str(count), style="dim")
    return table


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build the version-aware item/recipe catalog from extracted assets."
    )
    parser.parse_args(argv)

    configure_logging()
    config = load_pipeline_config()
    logging.getLogger().setLevel(config.log_level)

    logger.info("Building catalog for %d versions from %s", len(config.versions), config.input_root)
    try:
        catalog = build_catalog_from_root(
            config.input_root,
            config.versions,
            namespace=config.namespace,
            language=config.language,
        )
        write_catalog(catalog, config.output_path)
    except OSError as exc:
        logger.error("Catalog build failed: %s", exc)
        return 1

    console.print(_summary_table(catalog, config.output_path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
