from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from catalog.identifiers import version_key

from .schema import PipelineConfig


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
CONFIG_FILE = "catalog.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_yaml(name: str) -> Dict[str, Any]:
    """Load a YAML config file from the config/ directory."""
    path = CONFIG_ROOT / name
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _resolve_path(value: Any, default: str) -> Path:
    """Relative paths are taken from the project root."""
    path = Path(str(value)) if value else Path(default)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def _parse_versions(raw: Any) -> List[str]:
    if not isinstance(raw, list) or not raw:
        raise ValueError(f"{CONFIG_FILE} must define a non-empty 'versions' list.")

    # unquoted 1.10 loads as the float 1.1
    if not all(isinstance(v, str) for v in raw):
        raise ValueError(f"{CONFIG_FILE}: 'versions' entries must be quoted strings.")
    versions = [v.strip() for v in raw]
    if any(not v for v in versions):
        raise ValueError(f"{CONFIG_FILE}: empty version entry in 'versions'.")
    if len(set(versions)) != len(versions):
        raise ValueError(f"{CONFIG_FILE}: duplicate entries in 'versions'.")
    return versions


def _validate_release_order(versions: List[str]) -> None:
    """Numeric release ids must be strictly increasing; others are not compared."""
    keyed = [(v, version_key(v)) for v in versions]
    numeric = [(v, k) for v, k in keyed if k is not None]
    for (prev, prev_key), (cur, cur_key) in zip(numeric, numeric[1:]):
        if cur_key <= prev_key:
            raise ValueError(
                f"{CONFIG_FILE}: versions must be ordered oldest -> newest "
                f"('{prev}' is listed before '{cur}')."
            )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_pipeline_config() -> PipelineConfig:
    """Main entry point: returns a fully resolved PipelineConfig."""
    cfg = _load_yaml(CONFIG_FILE)

    versions = _parse_versions(cfg.get("versions"))
    _validate_release_order(versions)

    namespace = str(cfg.get("namespace") or "minecraft")
    if ":" in namespace:
        raise ValueError(f"Invalid namespace: {namespace!r}")

    log_level = str(cfg.get("log_level") or "INFO").upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"Invalid log_level: {log_level}")

    config = PipelineConfig(
        input_root=_resolve_path(cfg.get("input_root"), ".cache/extracted"),
        output_path=_resolve_path(cfg.get("output_path"), "out/index.json"),
        packed_output_path=_resolve_path(cfg.get("packed_output_path"), "out/data.min.json"),
        namespace=namespace,
        language=str(cfg.get("language") or "en_us"),
        log_level=log_level,
        versions=versions,
    )
    logging.getLogger(__name__).debug("Loaded pipeline config: %r", config)
    return config
