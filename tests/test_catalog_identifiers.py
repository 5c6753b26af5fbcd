# tests/test_catalog_identifiers.py
"""
Era classification and legacy identifier remapping.
"""

from catalog.identifiers import (
    Era,
    classify_era,
    is_variant_id,
    legacy_aliases,
    normalize_item_id,
    version_key,
    with_legacy_data,
)


def test_classify_era_splits_on_1_12() -> None:
    assert classify_era("1.8.9") is Era.LEGACY
    assert classify_era("1.12") is Era.LEGACY
    assert classify_era("1.12.2") is Era.LEGACY
    assert classify_era("1.13") is Era.MODERN
    assert classify_era("1.20.4") is Era.MODERN
    assert classify_era("2.0") is Era.MODERN


def test_classify_era_unparsable_versions_are_modern() -> None:
    assert classify_era("V1") is Era.MODERN
    assert classify_era("23w13a") is Era.MODERN


def test_version_key_numeric_only() -> None:
    assert version_key("1.12.2") == (1, 12, 2)
    assert version_key("1.9") < version_key("1.12.2")
    assert version_key("1.20-pre1") is None


def test_legacy_variant_maps_to_modern_id() -> None:
    assert normalize_item_id("game:planks:1", Era.LEGACY) == "game:spruce_planks"
    assert normalize_item_id("minecraft:log:0", Era.LEGACY) == "minecraft:oak_log"
    assert normalize_item_id("minecraft:wool:14", Era.LEGACY) == "minecraft:red_wool"


def test_modern_era_leaves_suffixed_id_unchanged() -> None:
    assert normalize_item_id("game:planks:1", Era.MODERN) == "game:planks:1"


def test_unmapped_legacy_variant_drops_meta() -> None:
    assert normalize_item_id("minecraft:stained_glass:3", Era.LEGACY) == "minecraft:stained_glass"


def test_plain_ids_pass_through_in_both_eras() -> None:
    assert normalize_item_id("minecraft:stick", Era.LEGACY) == "minecraft:stick"
    assert normalize_item_id("minecraft:stick", Era.MODERN) == "minecraft:stick"


def test_with_legacy_data_composes_suffix() -> None:
    assert with_legacy_data("minecraft:planks", 2) == "minecraft:planks:2"
    assert with_legacy_data("minecraft:planks", "x") == "minecraft:planks"
    assert with_legacy_data("minecraft:planks", True) == "minecraft:planks"
    assert is_variant_id("minecraft:planks:2")
    assert not is_variant_id("minecraft:planks")


def test_legacy_aliases_collects_rewritten_ids_once() -> None:
    raw = {
        "type": "crafting_shaped",
        "pattern": ["##"],
        "key": {"#": {"item": "minecraft:planks", "data": 1}},
        "result": {"item": "minecraft:log:1"},
        "group": "planks:1",
    }
    pairs = legacy_aliases(raw, Era.LEGACY)
    assert pairs == [
        ("minecraft:planks:1", "minecraft:spruce_planks"),
        ("minecraft:log:1", "minecraft:spruce_log"),
    ]
    assert legacy_aliases(raw, Era.MODERN) == []
