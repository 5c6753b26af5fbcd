# src/cli/pack_catalog.py
"""
Pack a built catalog document into its compact embedded form.

Input:
  <output_path>            (written by build-catalog)

Output:
  <packed_output_path>     compact JSON, short keys, version ranges
  <packed_output_path>.gz  gzip copy of the same bytes

Runs independently of the build stage; exits 1 when the catalog
document it needs is absent.
"""

from __future__ import annotations

import argparse
import gzip
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from app.logging_config import configure_logging
from catalog.packing import pack_catalog
from catalog.writer import dumps_document, load_catalog_document, write_text_file
from env.loader import load_pipeline_config

logger = logging.getLogger(__name__)
console = Console()


def _size_table(original: int, packed: int, gzipped: int) -> Table:
    def pct(size: int) -> str:
        return f"{round(size / original * 100)}%" if original else "-"

    table = Table(title="Packed catalog", border_style="blue")
    table.add_column("Artifact", style="cyan")
    table.add_column("Bytes", justify="right")
    table.add_column("Of original", justify="right", style="dim")
    table.add_row("original", str(original), "100%")
    table.add_row("packed", str(packed), pct(packed))
    table.add_row("gzipped", str(gzipped), pct(gzipped))
    return table


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Pack the catalog document into its compact short-key form."
    )
    parser.parse_args(argv)

    configure_logging()
    config = load_pipeline_config()
    logging.getLogger().setLevel(config.log_level)

    try:
        document = load_catalog_document(config.output_path)
    except FileNotFoundError:
        logger.error("No catalog document at %s. Run build-catalog first.", config.output_path)
        return 1

    packed_text = dumps_document(pack_catalog(document), compact=True)
    packed_bytes = packed_text.encode("utf-8")
    gz_path = Path(f"{config.packed_output_path}.gz")

    try:
        write_text_file(config.packed_output_path, packed_text)
        # mtime=0 keeps the gzip bytes reproducible
        gz_path.write_bytes(gzip.compress(packed_bytes, mtime=0))
    except OSError as exc:
        logger.error("Writing packed catalog failed: %s", exc)
        return 1

    console.print(
        _size_table(
            original=config.output_path.stat().st_size,
            packed=len(packed_bytes),
            gzipped=gz_path.stat().st_size,
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
