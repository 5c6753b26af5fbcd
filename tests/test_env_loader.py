# tests/test_env_loader.py
"""
Pipeline configuration loading from config/catalog.yaml.

Tests point env.loader.CONFIG_ROOT at a temp directory so the real
project config is never read.
"""

from pathlib import Path
from textwrap import dedent

import pytest

import env.loader as loader_module
from env.loader import load_pipeline_config
from env.schema import PipelineConfig


def _write_config(config_dir: Path, text: str) -> None:
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "catalog.yaml").write_text(dedent(text).lstrip("\n"), encoding="utf-8")


def test_load_pipeline_config_minimal(tmp_path: Path, monkeypatch) -> None:
    config_dir = tmp_path / "config"
    _write_config(
        config_dir,
        """
        versions: ["1.12.2", "1.13.2"]
        """,
    )
    monkeypatch.setattr(loader_module, "CONFIG_ROOT", config_dir, raising=True)
    monkeypatch.setattr(loader_module, "PROJECT_ROOT", tmp_path, raising=True)

    cfg = load_pipeline_config()

    assert isinstance(cfg, PipelineConfig)
    assert cfg.versions == ["1.12.2", "1.13.2"]
    assert cfg.namespace == "minecraft"
    assert cfg.language == "en_us"
    assert cfg.log_level == "INFO"
    assert cfg.input_root == tmp_path / ".cache" / "extracted"
    assert cfg.output_path == tmp_path / "out" / "index.json"
    assert cfg.packed_output_path == tmp_path / "out" / "data.min.json"


def test_load_pipeline_config_overrides(tmp_path: Path, monkeypatch) -> None:
    config_dir = tmp_path / "config"
    abs_out = tmp_path / "elsewhere" / "catalog.json"
    _write_config(
        config_dir,
        f"""
        input_root: "raw"
        output_path: "{abs_out.as_posix()}"
        namespace: "game"
        language: "de_de"
        log_level: "debug"
        versions:
          - "1.12.2"
          - "1.20.1"
        """,
    )
    monkeypatch.setattr(loader_module, "CONFIG_ROOT", config_dir, raising=True)
    monkeypatch.setattr(loader_module, "PROJECT_ROOT", tmp_path, raising=True)

    cfg = load_pipeline_config()
    assert cfg.input_root == tmp_path / "raw"
    assert cfg.output_path == abs_out
    assert cfg.namespace == "game"
    assert cfg.language == "de_de"
    assert cfg.log_level == "DEBUG"


@pytest.mark.parametrize(
    "body",
    [
        "versions: []",
        "versions: [1.12, 1.13]",
        'versions: ["1.13.2", "1.13.2"]',
        'versions: ["1.14.4", "1.13.2"]',
        'versions: ["1.13.2"]\nlog_level: "LOUD"',
        'versions: ["1.13.2"]\nnamespace: "a:b"',
        "- just\n- a list",
    ],
)
def test_invalid_configs_raise_value_error(tmp_path: Path, monkeypatch, body: str) -> None:
    config_dir = tmp_path / "config"
    _write_config(config_dir, body)
    monkeypatch.setattr(loader_module, "CONFIG_ROOT", config_dir, raising=True)

    with pytest.raises(ValueError):
        load_pipeline_config()


def test_missing_config_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(loader_module, "CONFIG_ROOT", tmp_path, raising=True)
    with pytest.raises(FileNotFoundError):
        load_pipeline_config()


def test_non_numeric_versions_are_not_order_checked(tmp_path: Path, monkeypatch) -> None:
    config_dir = tmp_path / "config"
    _write_config(config_dir, 'versions: ["1.13.2", "24w10a", "1.14.4"]')
    monkeypatch.setattr(loader_module, "CONFIG_ROOT", config_dir, raising=True)
    assert load_pipeline_config().versions == ["1.13.2", "24w10a", "1.14.4"]


def test_repo_config_is_valid() -> None:
    cfg = load_pipeline_config()
    assert cfg.versions[0] == "1.12.2"
    assert cfg.namespace == "minecraft"
