# src/app/logging_config.py
"""
Central logging configuration for the catalog pipeline.

Call configure_logging() from your main entrypoint once, for example:

    from app.logging_config import configure_logging
    configure_logging("INFO")

After that, per-version progress and missing-input warnings from the
catalog package are visible on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Union


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure root logging if no handlers are attached yet.

    Args:
        level: default logging level (e.g., logging.INFO or "DEBUG")
    """
    root = logging.getLogger()

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)
