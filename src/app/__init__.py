# src/app/__init__.py
"""Process-level wiring shared by the pipeline entry points."""

from __future__ import annotations

from .logging_config import configure_logging

__all__ = [
    "configure_logging",
]
