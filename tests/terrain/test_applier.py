"""Tests for writing layers and weights into a terrain store."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from splat_profile.models.splat import MaterialParams, TextureAsset, WeightField
from splat_profile.terrain.applier import InMemoryTerrainStore, apply_layers, to_layer_prototype
from splat_profile.terrain.normalizer import normalize


class TestToLayerPrototype:
    def test_passes_material_through(self) -> None:
        material = MaterialParams(
            albedo=TextureAsset(path=Path("rock.png")),
            normal_map=TextureAsset(path=Path("rock_n.png"), texture_type="normal_map"),
            tile_size=(10, 12),
            tile_offset=(1.5, 0),
            metallic=0.3,
            smoothness=0.8,
        )
        assert to_layer_prototype(material) == {
            "albedo": "rock.png",
            "normal_map": "rock_n.png",
            "tile_size": [10.0, 12.0],
            "tile_offset": [1.5, 0.0],
            "metallic": 0.3,
            "smoothness": 0.8,
        }

    def test_absent_textures_become_none(self) -> None:
        prototype = to_layer_prototype(MaterialParams())
        assert prototype["albedo"] is None
        assert prototype["normal_map"] is None
        assert prototype["tile_size"] == [15.0, 15.0]


class TestApplyLayers:
    def test_writes_prototypes_and_weights(self, make_layer) -> None:
        layers = [make_layer(constant=1.0, name="grass"), make_layer(constant=3.0, name="rock")]
        store = InMemoryTerrainStore(2, 2)
        field = normalize(layers, 2, 2)
        apply_layers(layers, field, store)
        assert [p["albedo"] for p in store.prototypes] == ["grass.png", "rock.png"]
        np.testing.assert_array_equal(store.weights, field.data)
        assert store.write_count == 1

    def test_replaces_previous_content(self, make_layer) -> None:
        store = InMemoryTerrainStore(2, 2)
        three = [make_layer(constant=1.0) for _ in range(3)]
        apply_layers(three, normalize(three, 2, 2), store)
        one = [make_layer(constant=1.0, name="only")]
        apply_layers(one, normalize(one, 2, 2), store)
        assert len(store.prototypes) == 1
        assert store.weights.shape == (2, 2, 1)

    def test_layer_count_mismatch(self, make_layer) -> None:
        field = WeightField(np.ones((2, 2, 2), dtype=np.float32) / 2)
        with pytest.raises(ValueError):
            apply_layers([make_layer(constant=1.0)], field, InMemoryTerrainStore(2, 2))


class TestInMemoryTerrainStore:
    def test_rejects_empty_grid(self) -> None:
        with pytest.raises(ValueError):
            InMemoryTerrainStore(0, 4)

    def test_offset_write(self) -> None:
        store = InMemoryTerrainStore(3, 3)
        store.set_weights(1, 1, np.ones((2, 2, 1), dtype=np.float32))
        assert store.weights.shape == (3, 3, 1)
        assert store.weights[0, 0, 0] == 0.0
        assert store.weights[2, 2, 0] == 1.0
