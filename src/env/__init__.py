# src/env/__init__.py
"""Pipeline configuration (config/catalog.yaml)."""

from .loader import load_pipeline_config
from .schema import PipelineConfig

__all__ = [
    "PipelineConfig",
    "load_pipeline_config",
]
