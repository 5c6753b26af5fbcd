# PipelineConfig dataclass
# src/env/schema.py

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass
class PipelineConfig:
    """Resolved configuration for one catalog pipeline run."""
    input_root: Path              # holds one extracted directory per version
    output_path: Path             # catalog document (index.json)
    packed_output_path: Path      # compact document (data.min.json)
    namespace: str = "minecraft"  # recipe id prefix, asset folder, lang key segment
    language: str = "en_us"
    log_level: str = "INFO"
    versions: List[str] = field(default_factory=list)  # oldest -> newest
