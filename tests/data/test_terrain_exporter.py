"""Tests for the file-backed terrain store."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from splat_profile.data.terrain_exporter import FileTerrainStore
from splat_profile.terrain.applier import apply_layers
from splat_profile.terrain.normalizer import normalize


class TestFileTerrainStore:
    def test_flush_writes_manifest_weights_and_splatmaps(self, tmp_path: Path, make_layer) -> None:
        layers = [make_layer(constant=float(i + 1), name=f"l{i}") for i in range(5)]
        store = FileTerrainStore(tmp_path / "out", 2, 2)
        field = normalize(layers, 2, 2)
        apply_layers(layers, field, store)
        written = store.flush()

        names = sorted(path.name for path in written)
        assert names == ["layers.json", "splatmap_0.png", "splatmap_1.png", "weights.npy"]

        manifest = json.loads((tmp_path / "out" / "layers.json").read_text(encoding="utf-8"))
        assert manifest["width"] == 2 and manifest["height"] == 2
        assert [layer["albedo"] for layer in manifest["layers"]] == [f"l{i}.png" for i in range(5)]

        np.testing.assert_array_equal(np.load(tmp_path / "out" / "weights.npy"), field.data)

        with Image.open(tmp_path / "out" / "splatmap_1.png") as image:
            assert image.mode == "RGBA"
            second = np.array(image)
        # Layer 4 has weight 5/15 and sits in the red channel of the second map.
        assert second[0, 0, 0] == round(255 * 5 / 15)
        assert (second[:, :, 1:] == 0).all()

    def test_flush_without_weights(self, tmp_path: Path) -> None:
        store = FileTerrainStore(tmp_path, 2, 2)
        with pytest.raises(ValueError):
            store.flush()

    def test_rejects_empty_grid(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            FileTerrainStore(tmp_path, 2, 0)
