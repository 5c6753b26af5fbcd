# tests/test_catalog_tags.py
"""
Tag table loading and tag expansion.
"""

import json
from pathlib import Path

from catalog.identifiers import Era
from catalog.schema import AlternativesIngredient, SingleIngredient, TagIngredient
from catalog.tags import expand_to_items, load_tag_table, tag_key


def _write_tag(version_dir: Path, name: str, values, folder: str = "items") -> None:
    path = version_dir / "data" / "minecraft" / "tags" / folder / f"{name}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"replace": False, "values": values}), encoding="utf-8")


def test_tag_key_has_single_hash() -> None:
    assert tag_key("minecraft:planks") == "#minecraft:planks"
    assert tag_key("#minecraft:planks") == "#minecraft:planks"


def test_load_tag_table_reads_nested_and_object_values(tmp_path: Path) -> None:
    version_dir = tmp_path / "1.16.5"
    _write_tag(version_dir, "planks", ["minecraft:oak_planks", "minecraft:spruce_planks"])
    _write_tag(version_dir, "logs", ["#minecraft:oak_logs", {"id": "minecraft:crimson_stem", "required": False}])
    _write_tag(version_dir, "foo/bar", ["minecraft:stick"])

    table = load_tag_table(version_dir, Era.MODERN, "minecraft")

    assert table["#minecraft:planks"] == ["minecraft:oak_planks", "minecraft:spruce_planks"]
    # nested tag members are stored verbatim, not expanded
    assert table["#minecraft:logs"] == ["#minecraft:oak_logs", "minecraft:crimson_stem"]
    assert table["#minecraft:foo/bar"] == ["minecraft:stick"]


def test_load_tag_table_singular_folder(tmp_path: Path) -> None:
    version_dir = tmp_path / "1.21.1"
    _write_tag(version_dir, "wool", ["minecraft:white_wool"], folder="item")
    assert load_tag_table(version_dir, Era.MODERN, "minecraft") == {"#minecraft:wool": ["minecraft:white_wool"]}


def test_legacy_and_missing_tag_tables_are_empty(tmp_path: Path) -> None:
    version_dir = tmp_path / "1.12.2"
    _write_tag(version_dir, "planks", ["minecraft:oak_planks"])
    assert load_tag_table(version_dir, Era.LEGACY, "minecraft") == {}
    assert load_tag_table(tmp_path / "missing", Era.MODERN, "minecraft") == {}


def test_malformed_tag_file_is_skipped(tmp_path: Path) -> None:
    version_dir = tmp_path / "1.14.4"
    _write_tag(version_dir, "planks", ["minecraft:oak_planks"])
    bad = version_dir / "data" / "minecraft" / "tags" / "items" / "broken.json"
    bad.write_text("{not json", encoding="utf-8")

    table = load_tag_table(version_dir, Era.MODERN, "minecraft")
    assert list(table) == ["#minecraft:planks"]


def test_expand_single_tag_and_alternatives() -> None:
    table = {"#minecraft:planks": ["minecraft:oak_planks", "minecraft:birch_planks"]}

    assert expand_to_items(SingleIngredient("minecraft:stick"), table) == ["minecraft:stick"]
    assert expand_to_items(TagIngredient("minecraft:planks"), table) == [
        "minecraft:oak_planks",
        "minecraft:birch_planks",
    ]

    alternatives = AlternativesIngredient(
        options=(
            SingleIngredient("minecraft:oak_planks"),
            None,
            TagIngredient("#minecraft:planks"),
        )
    )
    assert expand_to_items(alternatives, table) == ["minecraft:oak_planks", "minecraft:birch_planks"]


def test_unknown_tag_and_none_expand_to_nothing() -> None:
    assert expand_to_items(TagIngredient("#minecraft:nope"), {}) == []
    assert expand_to_items(None, {"#minecraft:nope": ["x:y"]}) == []
